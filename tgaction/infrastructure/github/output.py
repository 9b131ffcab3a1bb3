"""GitHub Actions output helpers."""

from __future__ import annotations

from tgaction.infrastructure.logs import log


def write_github_output(output_path: str | None, key: str, value: str) -> None:
    """Append a key=value line to the GITHUB_OUTPUT file.

    Values must already be single-line; encode them with
    encode_single_line first.

    Args:
        output_path: Path of the GITHUB_OUTPUT file (None when not on a runner)
        key: Output variable name
        value: Output value

    Raises:
        ValueError: If the value contains a line break
    """
    if "\n" in value or "\r" in value:
        raise ValueError(f"Output {key} must be a single line")
    if not output_path:
        log.info(f"GITHUB_OUTPUT not set, would output: {key}={value[:100]}")
        return
    with open(output_path, "a", encoding="utf-8") as f:
        f.write(f"{key}={value}\n")
