"""Loading of the triggering workflow event."""

from __future__ import annotations

import json
from pathlib import Path

from tgaction.infrastructure.logs import log


def load_event_payload(event_path: str | None) -> dict | None:
    """Load the JSON payload at GITHUB_EVENT_PATH.

    Args:
        event_path: Path to the event file

    Returns:
        Parsed payload, or None if the path is unset, missing or unreadable
    """
    if not event_path:
        log.info("GITHUB_EVENT_PATH not set")
        return None

    try:
        data = json.loads(Path(event_path).read_text(encoding="utf-8"))
    except FileNotFoundError:
        log.warning(f"Event file not found: {event_path}")
        return None
    except (OSError, json.JSONDecodeError) as e:
        log.warning(f"Failed to read event file {event_path}: {e}")
        return None

    return data if isinstance(data, dict) else None
