"""Domain model for the comment target of a workflow run.

Parse-once pattern: the raw event payload is reduced to a ReportTarget at the
boundary. Services only look at the kind and the comments URL.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TargetKind(Enum):
    """Where a report comment goes.

    Attributes:
        PULL_REQUEST: Event carries pull_request.comments_url
        ISSUE: Event carries issue.comments_url (issue_comment, branch deploy)
        NONE: Neither; reporting is skipped
    """

    PULL_REQUEST = "pull_request"
    ISSUE = "issue"
    NONE = "none"


@dataclass(frozen=True)
class ReportTarget:
    """Resolved comments endpoint for the triggering event."""

    kind: TargetKind
    comments_url: str | None = None

    # --------------------------------------------------------
    # Factory Methods
    # --------------------------------------------------------

    @classmethod
    def from_event_payload(cls, payload: dict | None) -> ReportTarget:
        """Resolve the comments endpoint from an event payload.

        Pull request comments are preferred; issue comments are the fallback.
        Missing, empty and null values all count as absent.

        Args:
            payload: Parsed GITHUB_EVENT_PATH content (None when unavailable)

        Returns:
            ReportTarget, with kind NONE when no endpoint exists
        """
        if not payload:
            return cls(kind=TargetKind.NONE)

        for kind in (TargetKind.PULL_REQUEST, TargetKind.ISSUE):
            url = _comments_url(payload.get(kind.value))
            if url:
                return cls(kind=kind, comments_url=url)

        return cls(kind=TargetKind.NONE)

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    @property
    def exists(self) -> bool:
        return self.kind is not TargetKind.NONE


def _comments_url(section: object) -> str | None:
    if not isinstance(section, dict):
        return None
    url = section.get("comments_url")
    if not url or url == "null":
        return None
    return str(url)
