"""GitHub release model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from relsum.core.github.models.asset import ReleaseAsset


@dataclass(slots=True, frozen=True)
class Release:
    """A tagged GitHub release with its assets.

    Attributes:
        name: Release title (may be empty)
        tag_name: Git tag of the release
        assets: Release assets in API order

    """

    name: str
    tag_name: str
    assets: list[ReleaseAsset] = field(default_factory=list)

    @classmethod
    def from_api_response(cls, api_data: dict[str, Any]) -> Release:
        """Create Release from GitHub API response data.

        Assets without a name or download URL are skipped.

        Args:
            api_data: Raw release data from GitHub API

        Returns:
            Release instance

        """
        assets = []
        for asset_data in api_data.get("assets") or []:
            asset = ReleaseAsset.from_api_response(asset_data)
            if asset:
                assets.append(asset)

        return cls(
            name=api_data.get("name") or "",
            tag_name=api_data.get("tag_name") or "",
            assets=assets,
        )

    @property
    def display_name(self) -> str:
        """Release name, or the tag when the release has no title."""
        return self.name or self.tag_name
