"""Git setup service.

Global git configuration the wrapped tool needs: trusting the mounted
workspace, and token authentication for private module sources.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from tgaction.infrastructure.logs import log
from tgaction.infrastructure.process.runner import CommandRunner

# Auth type that selects the GitHub App installation-token URL form
APP_AUTH_TYPE = "app"


class GitSetupError(Exception):
    """Raised when git configuration fails."""

    pass


@dataclass
class GitSetupService:
    """Service for global git configuration.

    Attributes:
        runner: Command runner used for git
    """

    runner: CommandRunner

    def mark_safe_directory(self, workspace: str, env: Mapping[str, str]) -> None:
        """Avoid git "dubious ownership" errors on the mounted workspace.

        Raises:
            GitSetupError: If git config fails
        """
        self._git_config(["--add", "safe.directory", workspace], env)

    def configure_private_path(
        self,
        token: str | None,
        private_path: str | None,
        auth_type: str | None,
        env: Mapping[str, str],
    ) -> bool:
        """Rewrite https URLs under a private path to carry a GitHub App token.

        Only the "app" auth type is configured; otherwise nothing is done.

        Args:
            token: Installation token
            private_path: Host and org/repo prefix, e.g. github.com/my-org
            auth_type: Authentication type input
            env: Environment for the git call

        Returns:
            True if git was configured

        Raises:
            GitSetupError: If git config fails
        """
        if not token or not private_path:
            return False
        if auth_type != APP_AUTH_TYPE:
            return False

        log.info(f"Configuring git authentication for {private_path}")
        self._git_config(
            [
                f"url.https://x-access-token:{token}@{private_path}.insteadOf",
                f"https://{private_path}",
            ],
            env,
        )
        return True

    def _git_config(self, args: list[str], env: Mapping[str, str]) -> None:
        success, output = self.runner.run(["git", "config", "--global", *args], env=env)
        if not success:
            # Arguments may contain a token
            raise GitSetupError(f"git config failed: {output.strip()}")
