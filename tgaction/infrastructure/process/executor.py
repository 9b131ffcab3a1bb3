"""Terragrunt subprocess executor.

Runs the wrapped command in an explicit working directory and tees its output
to the console and to a temporary log file. The exit code is taken from the
Terragrunt process itself once its output has been drained, so the tee never
stands in for the tool's status.
"""

from __future__ import annotations

import os
import subprocess
import sys
import tempfile
from contextlib import ExitStack
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Mapping, Sequence

from tgaction.domain.invocation import ExecutionResult
from tgaction.infrastructure.logs import log

DEFAULT_COMMAND = ("terragrunt",)

LOG_PREFIX = "tgaction-"
LOG_SUFFIX = ".log"


class LogArtifactError(Exception):
    """Raised when the temporary log file cannot be created."""

    pass


class ExecutionStartError(Exception):
    """Raised when the wrapped command cannot be started."""

    pass


@dataclass
class SubprocessExecutor:
    """Executes the wrapped command and captures its result.

    Attributes:
        command: Executable (and any fixed leading arguments)
        console: Live stream that receives a copy of the output
    """

    command: Sequence[str] = DEFAULT_COMMAND
    console: IO[str] = field(default_factory=lambda: sys.stdout)

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    def execute(
        self,
        working_directory: str | Path,
        args: Sequence[str],
        redirect_output: str | None = None,
        env: Mapping[str, str] | None = None,
    ) -> ExecutionResult:
        """Run the command and tee its output.

        Args:
            working_directory: Directory the command runs in
            args: Arguments after the executable, passed without a shell
            redirect_output: Send stdout to this file instead of the tee;
                stderr is still teed. Relative paths resolve against
                working_directory.
            env: Full environment for the command (None inherits ours)

        Returns:
            ExecutionResult with the command's own exit code. A non-zero
            exit code is returned, not raised.

        Raises:
            LogArtifactError: If the log file cannot be created
            ExecutionStartError: If the command cannot be started
        """
        cwd = Path(working_directory)
        cmd = [*self.command, *args]
        log_path = self._create_log_artifact()

        log.info(f"Running {' '.join(cmd)} in {cwd}")

        try:
            exit_code = self._run_and_tee(cmd, cwd, log_path, redirect_output, env)
            combined_output = read_log(log_path)
        except BaseException:
            log_path.unlink(missing_ok=True)
            raise

        return ExecutionResult(
            exit_code=exit_code,
            combined_output=combined_output,
            log_path=log_path,
        )

    # --------------------------------------------------------
    # Private Helpers
    # --------------------------------------------------------

    @staticmethod
    def _create_log_artifact() -> Path:
        try:
            fd, name = tempfile.mkstemp(prefix=LOG_PREFIX, suffix=LOG_SUFFIX)
        except OSError as e:
            raise LogArtifactError(f"Failed to create log file: {e}") from e
        os.close(fd)
        return Path(name)

    def _run_and_tee(
        self,
        cmd: list[str],
        cwd: Path,
        log_path: Path,
        redirect_output: str | None,
        env: Mapping[str, str] | None,
    ) -> int:
        with ExitStack() as stack:
            if redirect_output:
                try:
                    stdout = stack.enter_context(open(cwd / redirect_output, "w"))
                except OSError as e:
                    raise ExecutionStartError(
                        f"Failed to open redirect output {redirect_output}: {e}"
                    ) from e
                stderr = subprocess.PIPE
                tee_source = "stderr"
            else:
                stdout = subprocess.PIPE
                stderr = subprocess.STDOUT
                tee_source = "stdout"

            try:
                proc = subprocess.Popen(
                    cmd,
                    cwd=cwd,
                    env=dict(env) if env is not None else None,
                    stdout=stdout,
                    stderr=stderr,
                    text=True,
                    encoding="utf-8",
                    errors="replace",
                )
            except OSError as e:
                raise ExecutionStartError(f"Failed to start {cmd[0]}: {e}") from e

            pipe = getattr(proc, tee_source)
            try:
                with open(log_path, "w", encoding="utf-8") as log_file:
                    for line in pipe:
                        log_file.write(line)
                        self.console.write(line)
                        self.console.flush()
            except BaseException:
                proc.kill()
                proc.wait()
                raise
            finally:
                pipe.close()

            # Status of the wrapped process, read after the log is complete
            return shell_exit_code(proc.wait())


def read_log(log_path: Path) -> str:
    """Read a log artifact the way shell command substitution would.

    Trailing newlines are dropped.
    """
    return log_path.read_text(encoding="utf-8", errors="replace").rstrip("\n")


def shell_exit_code(returncode: int) -> int:
    """Convert a Popen return code to the status a shell would report.

    A process killed by signal N has returncode -N; shells report 128 + N.
    """
    if returncode < 0:
        return 128 - returncode
    return returncode
