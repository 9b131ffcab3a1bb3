"""Tests for ToolCommandRunner."""

import subprocess
import unittest
from unittest.mock import MagicMock, patch

from tgaction.infrastructure.process.runner import ToolCommandRunner


class TestToolCommandRunner(unittest.TestCase):
    """Tests for ToolCommandRunner.run."""

    def setUp(self):
        self.runner = ToolCommandRunner()

    @patch("tgaction.infrastructure.process.runner.subprocess.run")
    def test_returns_stdout_on_success(self, mock_run):
        mock_run.return_value = MagicMock(stdout="installed\n")

        success, output = self.runner.run(["tfenv", "install", "1.5.7"])

        self.assertTrue(success)
        self.assertEqual(output, "installed\n")
        mock_run.assert_called_once_with(
            ["tfenv", "install", "1.5.7"],
            capture_output=True,
            text=True,
            check=True,
            env=None,
        )

    @patch("tgaction.infrastructure.process.runner.subprocess.run")
    def test_passes_environment(self, mock_run):
        mock_run.return_value = MagicMock(stdout="")

        self.runner.run(["tgswitch"], env={"TG_VERSION": "0.50.0"})

        self.assertEqual(mock_run.call_args.kwargs["env"], {"TG_VERSION": "0.50.0"})

    @patch("tgaction.infrastructure.process.runner.subprocess.run")
    def test_returns_stderr_on_failure(self, mock_run):
        mock_run.side_effect = subprocess.CalledProcessError(
            1, ["tfenv"], stderr="no such version"
        )

        success, output = self.runner.run(["tfenv", "install", "9.9.9"])

        self.assertFalse(success)
        self.assertEqual(output, "no such version")

    @patch("tgaction.infrastructure.process.runner.subprocess.run")
    def test_returns_error_when_command_missing(self, mock_run):
        mock_run.side_effect = FileNotFoundError("tgswitch")

        success, output = self.runner.run(["tgswitch"])

        self.assertFalse(success)
        self.assertIn("tgswitch", output)


if __name__ == "__main__":
    unittest.main()
