"""Tests for ToolInstallerService."""

import unittest
from unittest.mock import MagicMock, call

from tgaction.services.tool_installer import ToolInstallError, ToolInstallerService


class TestToolInstallerService(unittest.TestCase):
    """Tests for ToolInstallerService."""

    def setUp(self):
        self.runner = MagicMock()
        self.runner.run.return_value = (True, "")
        self.service = ToolInstallerService(runner=self.runner)
        self.env = {"PATH": "/usr/bin"}

    def test_installs_and_selects_terraform(self):
        installed = self.service.install_terraform("1.5.7", self.env)

        self.assertTrue(installed)
        self.assertEqual(
            self.runner.run.call_args_list,
            [
                call(["tfenv", "install", "1.5.7"], env=self.env),
                call(["tfenv", "use", "1.5.7"], env=self.env),
            ],
        )

    def test_installs_terragrunt_with_tg_version(self):
        installed = self.service.install_terragrunt("0.50.0", self.env)

        self.assertTrue(installed)
        self.runner.run.assert_called_once_with(
            ["tgswitch"], env={"PATH": "/usr/bin", "TG_VERSION": "0.50.0"}
        )
        self.assertNotIn("TG_VERSION", self.env)

    def test_none_skips_installation(self):
        self.assertFalse(self.service.install_terraform("none", self.env))
        self.assertFalse(self.service.install_terragrunt("none", self.env))
        self.runner.run.assert_not_called()

    def test_failure_raises(self):
        self.runner.run.return_value = (False, "version 9.9.9 not found")

        with self.assertRaises(ToolInstallError) as ctx:
            self.service.install_terraform("9.9.9", self.env)

        self.assertIn("tfenv install 9.9.9", str(ctx.exception))
        self.assertIn("not found", str(ctx.exception))
        self.runner.run.assert_called_once()


if __name__ == "__main__":
    unittest.main()
