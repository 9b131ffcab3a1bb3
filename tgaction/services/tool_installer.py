"""Tool installer service.

Installs and selects pinned Terraform and Terragrunt versions through the
tfenv and tgswitch version managers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from tgaction.domain.config import SKIP_INSTALL_VERSION
from tgaction.infrastructure.logs import log
from tgaction.infrastructure.process.runner import CommandRunner


class ToolInstallError(Exception):
    """Raised when a version manager fails to install or select a version."""

    pass


@dataclass
class ToolInstallerService:
    """Service for installing pinned tool versions.

    Attributes:
        runner: Command runner used for tfenv and tgswitch
    """

    runner: CommandRunner

    # ============================================================
    # Public API
    # ============================================================

    def install_terraform(self, version: str, env: Mapping[str, str]) -> bool:
        """Install and switch to a Terraform version with tfenv.

        Args:
            version: Version to install, or "none" to skip
            env: Environment for the tfenv calls

        Returns:
            True if something was installed, False if skipped

        Raises:
            ToolInstallError: If tfenv fails
        """
        if version == SKIP_INSTALL_VERSION:
            log.info("Skipping Terraform installation")
            return False

        log.info(f"Installing Terraform {version}")
        self._run(["tfenv", "install", version], env)
        self._run(["tfenv", "use", version], env)
        return True

    def install_terragrunt(self, version: str, env: Mapping[str, str]) -> bool:
        """Install and switch to a Terragrunt version with tgswitch.

        tgswitch reads the requested version from TG_VERSION.

        Args:
            version: Version to install, or "none" to skip
            env: Environment for the tgswitch call

        Returns:
            True if something was installed, False if skipped

        Raises:
            ToolInstallError: If tgswitch fails
        """
        if version == SKIP_INSTALL_VERSION:
            log.info("Skipping Terragrunt installation")
            return False

        log.info(f"Installing Terragrunt {version}")
        self._run(["tgswitch"], {**env, "TG_VERSION": version})
        return True

    # ============================================================
    # Private Helpers
    # ============================================================

    def _run(self, cmd: list[str], env: Mapping[str, str]) -> None:
        success, output = self.runner.run(cmd, env=env)
        if not success:
            raise ToolInstallError(f"{' '.join(cmd)} failed: {output.strip()}")
