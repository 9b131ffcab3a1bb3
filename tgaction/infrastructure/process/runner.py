"""Command runner for setup tools.

Infrastructure component that wraps subprocess calls to git, tfenv and
tgswitch. Services depend on the CommandRunner protocol so they can be tested
without calling the real tools.
"""

from __future__ import annotations

import subprocess
from typing import Mapping, Protocol

from tgaction.infrastructure.logs import log


class CommandRunner(Protocol):
    """Protocol for running setup commands."""

    def run(self, cmd: list[str], env: Mapping[str, str] | None = None) -> tuple[bool, str]:
        """Run a command and return (success, output/error)."""
        ...


class ToolCommandRunner:
    """Runs setup commands via subprocess.

    This is the production implementation of CommandRunner.
    For testing, mock this class or use a fake implementation.
    """

    def run(self, cmd: list[str], env: Mapping[str, str] | None = None) -> tuple[bool, str]:
        """Run a command, capturing its output.

        Args:
            cmd: Command and arguments (e.g., ["tfenv", "install", "1.5.7"])
            env: Full environment for the command (None inherits ours)

        Returns:
            Tuple of (success, output_or_error)
        """
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                check=True,
                env=dict(env) if env is not None else None,
            )
            return True, result.stdout
        except subprocess.CalledProcessError as e:
            log.error(f"Command failed: {cmd[0]}: {e.stderr.strip()}")
            return False, e.stderr
        except OSError as e:
            log.error(f"Command could not be started: {cmd[0]}: {e}")
            return False, str(e)
