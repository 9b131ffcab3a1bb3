"""Action configuration.

All inputs arrive as environment variables (INPUT_* from the action inputs,
GITHUB_* from the runner). They are read once into ActionConfig and validated
before anything runs.
"""

from __future__ import annotations

import os
import shlex
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

from tgaction.domain.hooks import HookParseError, PreExecHook, parse_hooks_from_env
from tgaction.domain.invocation import InvocationRequest

DEFAULT_WORKSPACE = "/github/workspace"

# Version value that skips installing a tool
SKIP_INSTALL_VERSION = "none"


class ConfigurationError(Exception):
    """Raised when a required input is missing or invalid."""

    pass


@dataclass
class ActionConfig:
    """Validated-once configuration for a single action run."""

    tf_version: str
    tg_version: str
    operation: str
    working_directory: str = "."
    comment: bool = False
    redirect_output: str | None = None
    plan_file: str | None = None
    private_path_token: str | None = None
    private_path: str | None = None
    private_path_auth_type: str | None = None
    pre_exec_hooks: list[PreExecHook] = field(default_factory=list)
    github_token: str | None = None
    event_path: str | None = None
    output_path: str | None = None
    workspace: str = DEFAULT_WORKSPACE

    # --------------------------------------------------------
    # Factory Methods
    # --------------------------------------------------------

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ActionConfig:
        """Read configuration from environment variables.

        Args:
            environ: Environment mapping (defaults to os.environ)

        Returns:
            ActionConfig instance (call validate() before use)

        Raises:
            ConfigurationError: If a pre-execution hook cannot be parsed
        """
        if environ is None:
            environ = os.environ

        try:
            hooks = parse_hooks_from_env(environ)
        except HookParseError as e:
            raise ConfigurationError(str(e)) from e

        return cls(
            tf_version=environ.get("INPUT_TF_VERSION", ""),
            tg_version=environ.get("INPUT_TG_VERSION", ""),
            operation=environ.get("INPUT_TG_COMMAND", ""),
            working_directory=environ.get("INPUT_TG_DIR") or ".",
            comment=environ.get("INPUT_TG_COMMENT", "0") == "1",
            redirect_output=environ.get("INPUT_TG_REDIRECT_OUTPUT") or None,
            plan_file=environ.get("INPUT_TG_PLAN_FILE") or None,
            private_path_token=environ.get("INPUT_GITHUB_TOKEN") or None,
            private_path=environ.get("INPUT_GITHUB_PRIVATE_PATH") or None,
            private_path_auth_type=environ.get("INPUT_GITHUB_AUTH_TYPE") or None,
            pre_exec_hooks=hooks,
            github_token=environ.get("GITHUB_TOKEN") or None,
            event_path=environ.get("GITHUB_EVENT_PATH") or None,
            output_path=environ.get("GITHUB_OUTPUT") or None,
            workspace=environ.get("GITHUB_WORKSPACE") or DEFAULT_WORKSPACE,
        )

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    def validate(self) -> None:
        """Check that required inputs are present and the operation parses.

        Raises:
            ConfigurationError: Naming the first missing input, or when the
                operation has unbalanced quotes
        """
        for name in ("tf_version", "tg_version", "operation"):
            if not getattr(self, name).strip():
                raise ConfigurationError(f"{name} is not set")

        try:
            shlex.split(self.operation)
        except ValueError as e:
            raise ConfigurationError(f"operation could not be parsed: {e}") from e

    def to_invocation(self) -> InvocationRequest:
        """Build the invocation request described by this configuration."""
        return InvocationRequest(
            operation=self.operation,
            working_directory=Path(self.working_directory),
            plan_file=self.plan_file,
            redirect_output=self.redirect_output,
        )
