"""Pre-execution hook service.

Applies the parsed INPUT_PRE_EXEC_<N> hooks in order. Environment changes go
into the environment mapping handed to later subprocesses; the action's own
os.environ is left alone.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import MutableMapping

from tgaction.domain.hooks import PreExecHook, SetEnvHook, WriteFileHook
from tgaction.infrastructure.logs import log


class PreExecError(Exception):
    """Raised when a pre-execution hook cannot be applied."""

    pass


@dataclass
class PreExecService:
    """Service for applying pre-execution hooks.

    Attributes:
        base_dir: Directory relative write_file paths resolve against
    """

    base_dir: Path = Path(".")

    def apply(self, hooks: list[PreExecHook], env: MutableMapping[str, str]) -> None:
        """Apply hooks in order.

        Args:
            hooks: Hooks, already in execution order
            env: Subprocess environment, updated in place by set_env hooks

        Raises:
            PreExecError: If a file cannot be written
        """
        for index, hook in enumerate(hooks, start=1):
            log.info(f"Evaluating pre-exec hook {index}: {hook.kind}")
            if isinstance(hook, SetEnvHook):
                env.update(hook.variables)
            elif isinstance(hook, WriteFileHook):
                self._write_file(hook)

    def _write_file(self, hook: WriteFileHook) -> None:
        path = Path(os.path.expanduser(hook.path))
        if not path.is_absolute():
            path = self.base_dir / path
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(hook.content, encoding="utf-8")
            if hook.mode is not None:
                path.chmod(hook.mode)
        except OSError as e:
            raise PreExecError(f"Failed to write {path}: {e}") from e
