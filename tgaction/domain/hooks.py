"""Pre-execution hooks.

Each INPUT_PRE_EXEC_<N> variable holds a YAML mapping with exactly one key
naming the hook:

    set_env:
      TF_VAR_region: eu-west-1

    write_file:
      path: ~/.terraformrc
      content: |
        plugin_cache_dir = "/tmp/plugins"
      mode: "0600"

Hooks are data, never evaluated as code.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Literal, Mapping

import yaml

PRE_EXEC_PATTERN = re.compile(r"^INPUT_PRE_EXEC_(\d+)$")


class HookParseError(ValueError):
    """Raised when a pre-execution hook definition cannot be parsed."""

    pass


@dataclass
class SetEnvHook:
    """Add variables to the environment of every later subprocess."""

    kind: Literal["set_env"]
    variables: dict[str, str] = field(default_factory=dict)


@dataclass
class WriteFileHook:
    """Write a file before Terragrunt runs."""

    kind: Literal["write_file"]
    path: str
    content: str
    mode: int | None = None


PreExecHook = SetEnvHook | WriteFileHook


def parse_hook(name: str, raw: str) -> PreExecHook:
    """Parse one hook definition.

    Args:
        name: Variable the definition came from (for error messages)
        raw: YAML text

    Returns:
        Typed hook

    Raises:
        HookParseError: If the YAML is malformed or names an unknown hook
    """
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise HookParseError(f"{name}: invalid YAML: {e}") from e

    if not isinstance(data, dict) or len(data) != 1:
        raise HookParseError(
            f"{name}: expected a mapping with exactly one of: set_env, write_file"
        )

    kind, body = next(iter(data.items()))

    if kind == "set_env":
        if not isinstance(body, dict):
            raise HookParseError(f"{name}: set_env expects a mapping of variables")
        return SetEnvHook(
            kind="set_env",
            variables={str(k): "" if v is None else str(v) for k, v in body.items()},
        )
    elif kind == "write_file":
        if not isinstance(body, dict) or "path" not in body:
            raise HookParseError(f"{name}: write_file requires a path")
        return WriteFileHook(
            kind="write_file",
            path=str(body["path"]),
            content=str(body.get("content") or ""),
            mode=_parse_mode(name, body.get("mode")),
        )
    else:
        raise HookParseError(f"{name}: unknown hook type: {kind}")


def parse_hooks_from_env(environ: Mapping[str, str]) -> list[PreExecHook]:
    """Collect INPUT_PRE_EXEC_<N> hooks in ascending order of N.

    Empty values are ignored.
    """
    numbered = []
    for key, value in environ.items():
        match = PRE_EXEC_PATTERN.match(key)
        if match and value.strip():
            numbered.append((int(match.group(1)), key, value))

    return [parse_hook(key, value) for _, key, value in sorted(numbered)]


def _parse_mode(name: str, value: object) -> int | None:
    if value is None:
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value), 8)
    except ValueError as e:
        raise HookParseError(f"{name}: invalid file mode: {value}") from e
