"""Low-level GitHub API client for release data."""

from __future__ import annotations

import re
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

import aiohttp

from relsum.constants import (
    GITHUB_API_ACCEPT,
    GITHUB_API_BASE,
    HTTP_FORBIDDEN,
    HTTP_NOT_FOUND,
    HTTP_OK,
)
from relsum.core.github.models import Release
from relsum.core.http_session import make_timeout
from relsum.exceptions import FetchError
from relsum.logger import get_logger

if TYPE_CHECKING:
    from relsum.config import RunOptions
    from relsum.core.auth import GitHubAuthManager

logger = get_logger(__name__)

_GITHUB_URL_PATTERN = re.compile(
    r"^https://github\.com/([\w.-]+)/([\w.-]+)/", re.ASCII
)


def parse_github_url(url: str) -> tuple[str, str] | None:
    """Extract owner and repository from a github.com download URL.

    Args:
        url: URL such as ``https://github.com/o/r/releases/download/...``

    Returns:
        (owner, repo), or None if the URL is not a GitHub repository URL

    """
    match = _GITHUB_URL_PATTERN.match(url)
    if match is None:
        return None
    return match.group(1), match.group(2)


class ReleaseAPIClient:
    """Fetch release metadata from the GitHub REST API."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        auth_manager: GitHubAuthManager,
        options: RunOptions,
        api_base: str = GITHUB_API_BASE,
    ) -> None:
        """Initialize the API client.

        Args:
            session: HTTP session for requests
            auth_manager: Supplies the Authorization header
            options: Run options (metadata timeout)
            api_base: API root, overridable for GitHub Enterprise

        """
        self.session = session
        self.auth_manager = auth_manager
        self.options = options
        self.api_base = api_base.rstrip("/")

    def _rate_limit_message(self) -> str:
        msg = "GitHub API rate limit exceeded"
        reset = self.auth_manager.rate_limit_reset
        if reset is not None:
            reset_at = datetime.fromtimestamp(reset, tz=UTC)
            msg += f", resets at {reset_at:%Y-%m-%d %H:%M:%S} UTC"
        if not self.auth_manager.is_authenticated():
            msg += "; set $GITHUB_TOKEN or pass --token"
        return msg

    async def _fetch_json(self, url: str) -> dict[str, Any]:
        headers = self.auth_manager.apply_auth({"Accept": GITHUB_API_ACCEPT})
        logger.debug("GET %s", url)

        try:
            async with self.session.get(
                url,
                headers=headers,
                timeout=make_timeout(self.options.metadata_timeout),
            ) as response:
                self.auth_manager.update_rate_limit_info(
                    dict(response.headers)
                )
                if response.status == HTTP_NOT_FOUND:
                    raise FetchError("no release found", target=url)
                if (
                    response.status == HTTP_FORBIDDEN
                    and self.auth_manager.is_rate_limited()
                ):
                    raise FetchError(self._rate_limit_message(), target=url)
                if response.status != HTTP_OK:
                    msg = f"HTTP response is not OK. Code: {response.status}"
                    raise FetchError(msg, target=url)
                data = await response.json()
        except (aiohttp.ClientError, TimeoutError) as e:
            msg = str(e) or type(e).__name__
            raise FetchError(msg, target=url) from e

        if not isinstance(data, dict):
            raise FetchError("unexpected API response", target=url)
        return data

    async def fetch_latest_release(self, owner: str, repo: str) -> Release:
        """Fetch the latest published (non-prerelease) release.

        Args:
            owner: Repository owner
            repo: Repository name

        Returns:
            Release

        Raises:
            FetchError: If the API call fails or no release exists

        """
        url = f"{self.api_base}/repos/{owner}/{repo}/releases/latest"
        data = await self._fetch_json(url)
        release = Release.from_api_response(data)
        logger.debug(
            "Latest release of %s/%s: %s (%d assets)",
            owner,
            repo,
            release.display_name,
            len(release.assets),
        )
        return release
