"""Domain models for tgaction."""

from tgaction.domain.config import ActionConfig, ConfigurationError
from tgaction.domain.event import ReportTarget, TargetKind
from tgaction.domain.hooks import (
    HookParseError,
    PreExecHook,
    SetEnvHook,
    WriteFileHook,
    parse_hook,
    parse_hooks_from_env,
)
from tgaction.domain.invocation import (
    ExecutionResult,
    InvocationRequest,
    build_command_args,
    requires_auto_approve,
)

__all__ = [
    "ActionConfig",
    "ConfigurationError",
    "ExecutionResult",
    "HookParseError",
    "InvocationRequest",
    "PreExecHook",
    "ReportTarget",
    "SetEnvHook",
    "TargetKind",
    "WriteFileHook",
    "build_command_args",
    "parse_hook",
    "parse_hooks_from_env",
    "requires_auto_approve",
]
