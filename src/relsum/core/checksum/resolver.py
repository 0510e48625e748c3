"""Checksum resolution across the three published-checksum shapes.

Strategies run in priority order and the first one that yields any
checksums wins:

1. aggregate ``checksums.txt`` table
2. per-asset ``.sha256`` / ``.md5`` sidecars
3. downloading and hashing every remaining asset

A failure inside a strategy aborts the whole resolution. It never falls
through to a lower-priority strategy, since a half-verified release is worse
than a failed run.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

from relsum.core.checksum.fetchers import (
    fetch_checksums_manifest,
    fetch_sidecar_value,
    hash_asset_download,
)
from relsum.core.checksum.models import (
    SIDECAR_PREFERENCE,
    AssetChecksum,
    ChecksumKind,
    ClassifiedAssets,
)
from relsum.exceptions import ChecksumResolutionError, RelsumError
from relsum.logger import get_logger

if TYPE_CHECKING:
    import aiohttp

    from relsum.config import RunOptions
    from relsum.core.github.models import ReleaseAsset

logger = get_logger(__name__)

Strategy = Callable[[ClassifiedAssets], Awaitable[list[AssetChecksum]]]


class ChecksumResolver:
    """Resolve one checksum per meaningful release asset.

    Usage:
        resolver = ChecksumResolver(session, options)
        sums = await resolver.resolve(classify_assets(release.assets))
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        options: RunOptions,
    ) -> None:
        """Initialize the resolver.

        Args:
            session: HTTP session used for every fetch
            options: Run options (timeouts)

        """
        self.session = session
        self.options = options

    def strategies(self) -> list[tuple[str, Strategy]]:
        """Strategies in priority order, with names for logging."""
        return [
            ("checksums manifest", self._from_manifest),
            ("sidecar checksum files", self._from_sidecars),
            ("downloaded assets", self._from_downloads),
        ]

    async def resolve(
        self, classified: ClassifiedAssets
    ) -> list[AssetChecksum]:
        """Run strategies in order until one yields checksums.

        Args:
            classified: Output of classify_assets()

        Returns:
            Checksums from the first productive strategy, or an empty list
            if the release has no assets

        Raises:
            RelsumError: From the first strategy that fails

        """
        for name, strategy in self.strategies():
            try:
                sums = await strategy(classified)
            except RelsumError:
                logger.error("Checksum resolution from %s failed", name)
                raise
            if sums:
                logger.debug(
                    "Resolved %d checksum(s) from %s", len(sums), name
                )
                return sums
            logger.debug("No checksums from %s", name)

        return []

    async def _from_manifest(
        self, classified: ClassifiedAssets
    ) -> list[AssetChecksum]:
        if classified.manifest_asset is None:
            return []
        return await fetch_checksums_manifest(
            self.session,
            classified.manifest_asset,
            self.options.metadata_timeout,
        )

    async def _from_sidecars(
        self, classified: ClassifiedAssets
    ) -> list[AssetChecksum]:
        sums: list[AssetChecksum] = []
        for base_name in sorted(classified.sidecar_groups):
            group = classified.sidecar_groups[base_name]
            logger.debug("Resolving sidecar checksum for %s", base_name)
            kind, asset = _preferred_sidecar(base_name, group)
            value = await fetch_sidecar_value(
                self.session, asset, self.options.metadata_timeout
            )
            sums.append(AssetChecksum(base_name, kind, value))
        return sums

    async def _from_downloads(
        self, classified: ClassifiedAssets
    ) -> list[AssetChecksum]:
        return [
            await hash_asset_download(
                self.session, asset, self.options.download_timeout
            )
            for asset in classified.plain_assets
        ]


def _preferred_sidecar(
    base_name: str, group: dict[ChecksumKind, ReleaseAsset]
) -> tuple[ChecksumKind, ReleaseAsset]:
    for kind in SIDECAR_PREFERENCE:
        asset = group.get(kind)
        if asset is not None:
            return kind, asset

    # classify_assets never builds an empty group
    msg = f"sidecar group has no known checksum kind: {list(group)!r}"
    raise ChecksumResolutionError(msg, target=base_name)
