"""Services for tgaction.

Services encapsulate business logic and orchestrate domain models.
They receive dependencies via constructor injection.
"""

from tgaction.services.comment_reporter import CommentReporterService
from tgaction.services.git_setup import GitSetupError, GitSetupService
from tgaction.services.pre_exec import PreExecError, PreExecService
from tgaction.services.tool_installer import ToolInstallError, ToolInstallerService

__all__ = [
    "CommentReporterService",
    "GitSetupError",
    "GitSetupService",
    "PreExecError",
    "PreExecService",
    "ToolInstallError",
    "ToolInstallerService",
]
