"""GitHub integration: API client, event payload and job outputs."""

from .api import GitHubApiClient
from .event import load_event_payload
from .output import write_github_output

__all__ = ["GitHubApiClient", "load_event_payload", "write_github_output"]
