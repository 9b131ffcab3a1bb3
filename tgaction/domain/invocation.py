"""Domain models for a single Terragrunt invocation.

InvocationRequest describes what to run, ExecutionResult what came back.
build_command_args() turns the requested operation into the argument list
handed to the executor.
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from pathlib import Path

# Operations that would otherwise stop on an interactive confirmation prompt
AUTO_APPROVE_PREFIXES = (
    "apply",
    "destroy",
    "run-all apply",
    "run-all destroy",
)

AUTO_APPROVE_FLAGS = ["-auto-approve", "--non-interactive"]
PLAN_OUT_FLAG = "-out"


def requires_auto_approve(operation: str) -> bool:
    """Whether the operation is destructive and must not prompt."""
    return operation.startswith(AUTO_APPROVE_PREFIXES)


def build_command_args(operation: str, plan_file: str | None = None) -> list[str]:
    """Build the Terragrunt argument list for an operation.

    Destructive operations get the auto-approve flags and the plan file
    appended as-is (apply/destroy take a plan file positionally). Every other
    operation writes its plan to the plan file through -out.

    Args:
        operation: Requested operation, e.g. "plan" or "run-all apply -var=a=b"
        plan_file: Optional plan file path

    Returns:
        Arguments to pass after the terragrunt binary

    Examples:
        >>> build_command_args("destroy")
        ['destroy', '-auto-approve', '--non-interactive']
        >>> build_command_args("plan", "out.tfplan")
        ['plan', '-out', 'out.tfplan']
    """
    args = shlex.split(operation)

    if requires_auto_approve(operation):
        args.extend(AUTO_APPROVE_FLAGS)
        if plan_file:
            args.append(plan_file)
    elif plan_file:
        args.extend([PLAN_OUT_FLAG, plan_file])

    return args


# ============================================================
# Domain Models
# ============================================================


@dataclass(frozen=True)
class InvocationRequest:
    """A requested Terragrunt invocation."""

    operation: str
    working_directory: Path
    plan_file: str | None = None
    redirect_output: str | None = None

    def __post_init__(self) -> None:
        if not self.operation.strip():
            raise ValueError("operation must not be empty")

    def build_args(self) -> list[str]:
        """Argument list for this request (see build_command_args)."""
        return build_command_args(self.operation, self.plan_file)


@dataclass(frozen=True)
class ExecutionResult:
    """Outcome of running the wrapped command.

    Attributes:
        exit_code: Exit status of the Terragrunt process itself
        combined_output: Content of the log artifact, trailing newlines removed
        log_path: Temporary log artifact, owned by the orchestrator run
    """

    exit_code: int
    combined_output: str
    log_path: Path

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0
