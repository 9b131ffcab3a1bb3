"""Subprocess execution for the wrapped tool and setup commands."""

from .executor import (
    ExecutionStartError,
    LogArtifactError,
    SubprocessExecutor,
    read_log,
)
from .runner import CommandRunner, ToolCommandRunner

__all__ = [
    "CommandRunner",
    "ExecutionStartError",
    "LogArtifactError",
    "SubprocessExecutor",
    "ToolCommandRunner",
    "read_log",
]
