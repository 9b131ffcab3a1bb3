"""Infrastructure components for tgaction.

This layer handles external system interactions:
- Terragrunt and setup tool subprocesses
- GitHub REST API via requests
- GitHub Actions outputs and event payload
- Output sanitizing

Organized into subdirectories:
- process/ - Subprocess execution (tee executor, setup command runner)
- github/ - GitHub API wrapper, event loading, GITHUB_OUTPUT
"""

from .github import GitHubApiClient, load_event_payload, write_github_output
from .logs import configure_logging, log
from .process import (
    CommandRunner,
    ExecutionStartError,
    LogArtifactError,
    SubprocessExecutor,
    ToolCommandRunner,
    read_log,
)
from .text import decode_single_line, encode_single_line, strip_color

__all__ = [
    # Process
    "CommandRunner",
    "ExecutionStartError",
    "LogArtifactError",
    "SubprocessExecutor",
    "ToolCommandRunner",
    "read_log",
    # GitHub
    "GitHubApiClient",
    "load_event_payload",
    "write_github_output",
    # Logging
    "configure_logging",
    "log",
    # Text
    "decode_single_line",
    "encode_single_line",
    "strip_color",
]
