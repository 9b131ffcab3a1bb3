"""Run Terragrunt action command.

Orchestrates a single action run: validate inputs, prepare tools, execute
Terragrunt, optionally comment, then publish outputs and clean up.
No business logic - just wiring and sequencing of services.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Mapping

from tgaction.domain.config import ActionConfig, ConfigurationError
from tgaction.domain.invocation import ExecutionResult
from tgaction.infrastructure import (
    ExecutionStartError,
    GitHubApiClient,
    LogArtifactError,
    SubprocessExecutor,
    ToolCommandRunner,
    encode_single_line,
    load_event_payload,
    log,
    strip_color,
    write_github_output,
)
from tgaction.services import (
    CommentReporterService,
    GitSetupError,
    GitSetupService,
    PreExecError,
    PreExecService,
    ToolInstallError,
    ToolInstallerService,
)

# Output keys written to GITHUB_OUTPUT
EXIT_CODE_OUTPUT = "exit_code"
ACTION_OUTPUT = "action_output"

# Exit code for failures before or around Terragrunt itself
FATAL_EXIT_CODE = 1

_FATAL_ERRORS = (
    ConfigurationError,
    PreExecError,
    ToolInstallError,
    GitSetupError,
    LogArtifactError,
    ExecutionStartError,
)


class ActionPhase(Enum):
    """Phases of an action run, in order."""

    VALIDATING = "validating"
    PREPARING = "preparing"
    EXECUTING = "executing"
    REPORTING = "reporting"
    FINALIZING = "finalizing"
    TERMINAL = "terminal"


@dataclass
class ActionOrchestrator:
    """Sequences one action run through its phases.

    Attributes:
        config: Action configuration (validated in the first phase)
        executor: Runs Terragrunt and captures its result
        reporter: Posts the result as a comment
        installer: Installs pinned tool versions
        git_setup: Global git configuration
        pre_exec: Applies pre-execution hooks
        base_env: Environment the subprocess environment starts from
        event_loader: Loads the event payload from GITHUB_EVENT_PATH
    """

    config: ActionConfig
    executor: SubprocessExecutor
    reporter: CommentReporterService
    installer: ToolInstallerService
    git_setup: GitSetupService
    pre_exec: PreExecService
    base_env: Mapping[str, str] = field(default_factory=lambda: dict(os.environ))
    event_loader: Callable[[str | None], dict | None] = load_event_payload
    phase: ActionPhase = ActionPhase.VALIDATING

    # ============================================================
    # Public API
    # ============================================================

    def run(self) -> int:
        """Run the action.

        Returns:
            Terragrunt's exit code, or 1 if the run failed before Terragrunt
            produced one
        """
        log.info("Starting Terragrunt Action")
        result: ExecutionResult | None = None
        try:
            try:
                self._validate()
                env = self._prepare()
                result = self._execute(env)
            except _FATAL_ERRORS as e:
                log.error(str(e))
                return FATAL_EXIT_CODE

            self._report(result)
            self._finalize(result)
            return result.exit_code
        finally:
            if result is not None:
                result.log_path.unlink(missing_ok=True)
            self._enter(ActionPhase.TERMINAL)
            log.info("Finished Terragrunt Action execution")

    # ============================================================
    # Phases
    # ============================================================

    def _validate(self) -> None:
        self._enter(ActionPhase.VALIDATING)
        self.config.validate()

    def _prepare(self) -> dict[str, str]:
        self._enter(ActionPhase.PREPARING)
        config = self.config
        env = dict(self.base_env)

        self.git_setup.mark_safe_directory(config.workspace, env)
        self.pre_exec.apply(config.pre_exec_hooks, env)
        self.installer.install_terraform(config.tf_version, env)
        self.installer.install_terragrunt(config.tg_version, env)
        self.git_setup.configure_private_path(
            config.private_path_token,
            config.private_path,
            config.private_path_auth_type,
            env,
        )
        return env

    def _execute(self, env: dict[str, str]) -> ExecutionResult:
        self._enter(ActionPhase.EXECUTING)
        request = self.config.to_invocation()

        result = self.executor.execute(
            request.working_directory,
            request.build_args(),
            redirect_output=request.redirect_output,
            env=env,
        )
        if result.succeeded:
            log.info("Terragrunt exited with code 0")
        else:
            log.warning(f"Terragrunt exited with code {result.exit_code}")

        if request.redirect_output:
            self._echo_redirect_output(request.working_directory / request.redirect_output)
        return result

    def _report(self, result: ExecutionResult) -> None:
        if not self.config.comment:
            return
        self._enter(ActionPhase.REPORTING)
        self.reporter.report(
            result.combined_output,
            self.event_loader(self.config.event_path),
            self.config.operation,
            self.config.working_directory,
        )

    def _finalize(self, result: ExecutionResult) -> None:
        self._enter(ActionPhase.FINALIZING)
        output = strip_color(result.combined_output)
        write_github_output(self.config.output_path, EXIT_CODE_OUTPUT, str(result.exit_code))
        write_github_output(self.config.output_path, ACTION_OUTPUT, encode_single_line(output))

    # ============================================================
    # Private Helpers
    # ============================================================

    def _enter(self, phase: ActionPhase) -> None:
        self.phase = phase

    @staticmethod
    def _echo_redirect_output(path: Path) -> None:
        log.info("Log file, redirected")
        try:
            log.info(path.read_text(encoding="utf-8", errors="replace"))
        except OSError:
            log.info("There is no redirect output")


def cmd_run_action(
    environ: Mapping[str, str] | None = None,
    working_directory: str | None = None,
) -> int:
    """Run the action with production dependencies.

    Thin command that:
    1. Reads configuration from the environment
    2. Initializes services with dependencies
    3. Hands over to ActionOrchestrator
    4. Returns exit code

    Args:
        environ: Environment to read inputs from (defaults to os.environ)
        working_directory: Overrides INPUT_TG_DIR

    Returns:
        Exit code (Terragrunt's, or 1 for configuration and setup failures)
    """
    if environ is None:
        environ = os.environ

    # --------------------------------------------------------
    # 1. Load configuration
    # --------------------------------------------------------
    try:
        config = ActionConfig.from_env(environ)
    except ConfigurationError as e:
        log.error(str(e))
        return FATAL_EXIT_CODE

    if working_directory:
        config.working_directory = working_directory

    # --------------------------------------------------------
    # 2. Initialize services with dependencies
    # --------------------------------------------------------
    runner = ToolCommandRunner()
    api = GitHubApiClient(token=config.github_token) if config.github_token else None

    orchestrator = ActionOrchestrator(
        config=config,
        executor=SubprocessExecutor(),
        reporter=CommentReporterService(api=api),
        installer=ToolInstallerService(runner=runner),
        git_setup=GitSetupService(runner=runner),
        pre_exec=PreExecService(),
        base_env=dict(environ),
    )

    # --------------------------------------------------------
    # 3. Run
    # --------------------------------------------------------
    return orchestrator.run()
