"""Comment reporter service.

Publishes the Terragrunt output as a comment on the pull request or issue
that triggered the workflow. Reporting is best-effort: every failure is
logged and reported back as False, never raised.
"""

from __future__ import annotations

from dataclasses import dataclass

from tgaction.domain.event import ReportTarget
from tgaction.infrastructure.github.api import GitHubApiClient
from tgaction.infrastructure.logs import log
from tgaction.infrastructure.text import strip_color


@dataclass
class CommentReporterService:
    """Service for posting execution results as GitHub comments.

    Uses GitHubApiClient for the actual API call (dependency injection).
    A None client means no token was available.
    """

    api: GitHubApiClient | None

    # ============================================================
    # Public API
    # ============================================================

    def report(
        self,
        text: str,
        event_payload: dict | None,
        operation: str,
        working_directory: str,
    ) -> bool:
        """Post the execution result to the triggering PR or issue.

        Args:
            text: Combined Terragrunt output (colors are stripped here)
            event_payload: Parsed event payload, None if unavailable
            operation: Operation that was run, shown in the comment header
            working_directory: Directory it ran in, shown in the comment header

        Returns:
            True if a comment was posted
        """
        target = self.resolve_target(event_payload)
        if not target.exists:
            log.info("Skipping comment as there is no comment url")
            return False

        if self.api is None:
            log.warning("Skipping comment as GITHUB_TOKEN is not set")
            return False

        body = self.format_comment(text, operation, working_directory)
        success, result = self.api.post_comment(target.comments_url, body)

        if success:
            log.info(f"Posted comment to {target.kind.value}: {result}")
        else:
            log.warning(f"Failed to post comment to {target.comments_url}")
        return success

    @staticmethod
    def resolve_target(event_payload: dict | None) -> ReportTarget:
        """Resolve where the comment goes (pull request, then issue)."""
        return ReportTarget.from_event_payload(event_payload)

    @staticmethod
    def format_comment(text: str, operation: str, working_directory: str) -> str:
        """Wrap color-free output in a code block with a context header."""
        lines = [
            f"Execution result of `{operation}` in `{working_directory}` :",
            "```",
            strip_color(text),
            "```",
        ]
        return "\n".join(lines) + "\n"
