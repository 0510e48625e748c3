"""GitHub release asset model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class ReleaseAsset:
    """A file attached to a GitHub release.

    Attributes:
        name: Published file name
        browser_download_url: Direct download URL for the asset

    """

    name: str
    browser_download_url: str

    @classmethod
    def from_api_response(
        cls, asset_data: dict[str, Any]
    ) -> ReleaseAsset | None:
        """Create ReleaseAsset from GitHub API response data.

        Args:
            asset_data: Raw asset data from GitHub API

        Returns:
            ReleaseAsset instance or None if required fields are missing

        """
        name = asset_data.get("name")
        download_url = asset_data.get("browser_download_url")
        if not isinstance(name, str) or not isinstance(download_url, str):
            return None
        if not name or not download_url:
            return None
        return cls(name=name, browser_download_url=download_url)
