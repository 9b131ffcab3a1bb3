"""Tests for ActionConfig.

Tests cover:
- Reading inputs and defaults from the environment
- Validation of required inputs
- Hook parsing errors surfacing as configuration errors
"""

import unittest
from pathlib import Path

from tgaction.domain.config import DEFAULT_WORKSPACE, ActionConfig, ConfigurationError
from tgaction.domain.hooks import SetEnvHook


def make_environ(**overrides: str) -> dict[str, str]:
    environ = {
        "INPUT_TF_VERSION": "1.5.7",
        "INPUT_TG_VERSION": "0.50.0",
        "INPUT_TG_COMMAND": "plan",
    }
    environ.update(overrides)
    return environ


class TestActionConfigFromEnv(unittest.TestCase):
    """Tests for ActionConfig.from_env."""

    def test_reads_required_inputs(self):
        config = ActionConfig.from_env(make_environ())

        self.assertEqual(config.tf_version, "1.5.7")
        self.assertEqual(config.tg_version, "0.50.0")
        self.assertEqual(config.operation, "plan")

    def test_defaults(self):
        config = ActionConfig.from_env(make_environ())

        self.assertEqual(config.working_directory, ".")
        self.assertFalse(config.comment)
        self.assertIsNone(config.redirect_output)
        self.assertIsNone(config.plan_file)
        self.assertEqual(config.pre_exec_hooks, [])
        self.assertEqual(config.workspace, DEFAULT_WORKSPACE)

    def test_reads_optional_inputs(self):
        config = ActionConfig.from_env(
            make_environ(
                INPUT_TG_DIR="infra/prod",
                INPUT_TG_COMMENT="1",
                INPUT_TG_REDIRECT_OUTPUT="plan.txt",
                INPUT_TG_PLAN_FILE="tfplan",
                GITHUB_TOKEN="ghs_x",
                GITHUB_EVENT_PATH="/tmp/event.json",
                GITHUB_OUTPUT="/tmp/output",
                GITHUB_WORKSPACE="/work",
            )
        )

        self.assertEqual(config.working_directory, "infra/prod")
        self.assertTrue(config.comment)
        self.assertEqual(config.redirect_output, "plan.txt")
        self.assertEqual(config.plan_file, "tfplan")
        self.assertEqual(config.github_token, "ghs_x")
        self.assertEqual(config.event_path, "/tmp/event.json")
        self.assertEqual(config.output_path, "/tmp/output")
        self.assertEqual(config.workspace, "/work")

    def test_comment_only_enabled_by_one(self):
        self.assertFalse(ActionConfig.from_env(make_environ(INPUT_TG_COMMENT="0")).comment)
        self.assertFalse(ActionConfig.from_env(make_environ(INPUT_TG_COMMENT="true")).comment)

    def test_private_path_settings(self):
        config = ActionConfig.from_env(
            make_environ(
                INPUT_GITHUB_TOKEN="ghs_app",
                INPUT_GITHUB_PRIVATE_PATH="github.com/acme",
                INPUT_GITHUB_AUTH_TYPE="app",
            )
        )

        self.assertEqual(config.private_path, "github.com/acme")
        self.assertEqual(config.private_path_token, "ghs_app")
        self.assertEqual(config.private_path_auth_type, "app")

    def test_parses_pre_exec_hooks(self):
        config = ActionConfig.from_env(
            make_environ(INPUT_PRE_EXEC_1="set_env:\n  TF_LOG: DEBUG\n")
        )

        self.assertEqual(
            config.pre_exec_hooks,
            [SetEnvHook(kind="set_env", variables={"TF_LOG": "DEBUG"})],
        )

    def test_invalid_hook_raises_configuration_error(self):
        with self.assertRaises(ConfigurationError) as ctx:
            ActionConfig.from_env(make_environ(INPUT_PRE_EXEC_1="run: rm -rf /"))

        self.assertIn("INPUT_PRE_EXEC_1", str(ctx.exception))


class TestActionConfigValidate(unittest.TestCase):
    """Tests for ActionConfig.validate."""

    def test_valid_config_passes(self):
        ActionConfig.from_env(make_environ()).validate()

    def test_missing_inputs_are_reported_by_name(self):
        for key, name in [
            ("INPUT_TF_VERSION", "tf_version"),
            ("INPUT_TG_VERSION", "tg_version"),
            ("INPUT_TG_COMMAND", "operation"),
        ]:
            with self.subTest(key=key):
                environ = make_environ()
                del environ[key]
                with self.assertRaises(ConfigurationError) as ctx:
                    ActionConfig.from_env(environ).validate()
                self.assertEqual(str(ctx.exception), f"{name} is not set")

    def test_unbalanced_quote_in_operation_is_rejected(self):
        config = ActionConfig.from_env(make_environ(INPUT_TG_COMMAND="plan -var='x"))

        with self.assertRaises(ConfigurationError) as ctx:
            config.validate()

        self.assertIn("operation could not be parsed", str(ctx.exception))

    def test_none_version_is_valid(self):
        ActionConfig.from_env(make_environ(INPUT_TF_VERSION="none")).validate()

    def test_to_invocation(self):
        config = ActionConfig.from_env(
            make_environ(INPUT_TG_DIR="infra", INPUT_TG_PLAN_FILE="tfplan")
        )

        request = config.to_invocation()

        self.assertEqual(request.operation, "plan")
        self.assertEqual(request.working_directory, Path("infra"))
        self.assertEqual(request.plan_file, "tfplan")


if __name__ == "__main__":
    unittest.main()
