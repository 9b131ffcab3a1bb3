"""GitHub REST API client.

Infrastructure component for the one call this action makes: creating an
issue or pull request comment at a comments URL taken from the event payload.
"""

from __future__ import annotations

from dataclasses import dataclass

import requests

from tgaction.infrastructure.logs import log

REQUEST_TIMEOUT_SECONDS = 30


@dataclass
class GitHubApiClient:
    """Thin wrapper around requests for GitHub comment endpoints."""

    token: str
    timeout: float = REQUEST_TIMEOUT_SECONDS

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Accept": "application/vnd.github+json",
            "Content-Type": "application/json",
        }

    def post_comment(self, comments_url: str, body: str) -> tuple[bool, str]:
        """Create a comment.

        Args:
            comments_url: Full comments endpoint, e.g.
                https://api.github.com/repos/o/r/issues/1/comments
            body: Comment body (markdown supported)

        Returns:
            Tuple of (success, comment_html_url_or_error)
        """
        try:
            response = requests.post(
                comments_url,
                headers=self.headers,
                json={"body": body},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            log.error(f"Error posting comment to GitHub: {e}")
            return False, str(e)

        try:
            return True, response.json().get("html_url", "")
        except ValueError:
            return True, ""
