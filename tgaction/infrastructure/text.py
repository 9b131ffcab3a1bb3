"""Text sanitizing for Terragrunt output.

Two views of the same output are produced: a color-free text for humans and
PR comments, and a single-line encoding for the GITHUB_OUTPUT key=value file.
"""

from __future__ import annotations

import re

# ESC [ <params> followed by SGR (m), cursor column (G) or erase line (K)
_ANSI_COLOR_PATTERN = re.compile(r"\x1b\[[0-9;]*[mGK]")

# Order matters: "%" first so the escapes added afterwards are not re-escaped
_SINGLE_LINE_ESCAPES = [
    ("%", "%25"),
    ("\n", "%0A"),
    ("\r", "%0D"),
]


def strip_color(text: str) -> str:
    """Remove ANSI color and line-control sequences from text.

    Args:
        text: Raw output, possibly containing escape sequences

    Returns:
        Text without escape sequences
    """
    # Removing one sequence can join the pieces of another, e.g. "\x1b[\x1b[0mm"
    count = 1
    while count:
        text, count = _ANSI_COLOR_PATTERN.subn("", text)
    return text


def encode_single_line(text: str) -> str:
    """Encode multiline text for a line-oriented key=value sink.

    Args:
        text: Text that may contain newlines and carriage returns

    Returns:
        Text with "%", "\\n" and "\\r" percent-escaped
    """
    for raw, escaped in _SINGLE_LINE_ESCAPES:
        text = text.replace(raw, escaped)
    return text


def decode_single_line(text: str) -> str:
    """Reverse encode_single_line()."""
    for raw, escaped in reversed(_SINGLE_LINE_ESCAPES):
        text = text.replace(escaped, raw)
    return text
