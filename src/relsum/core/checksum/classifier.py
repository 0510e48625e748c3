"""Partition release assets into checksum sources."""

from __future__ import annotations

from collections.abc import Iterable

from relsum.constants import CHECKSUMS_MANIFEST_NAME
from relsum.core.checksum.models import (
    SIDECAR_PREFERENCE,
    ChecksumKind,
    ClassifiedAssets,
)
from relsum.core.github.models import ReleaseAsset
from relsum.logger import get_logger

logger = get_logger(__name__)


def _sidecar_kind(name: str) -> ChecksumKind | None:
    for kind in SIDECAR_PREFERENCE:
        if name.endswith(kind.suffix):
            return kind
    return None


def classify_assets(assets: Iterable[ReleaseAsset]) -> ClassifiedAssets:
    """Split release assets into manifest, sidecar and plain buckets.

    Rules, applied per asset in order:
        1. exactly ``checksums.txt`` -> manifest (first one wins)
        2. ``<base>.sha256`` -> sidecar group ``base``, SHA256
        3. ``<base>.md5`` -> sidecar group ``base``, MD5
        4. anything else -> plain assets

    A second ``checksums.txt`` or a sidecar replaced by a later duplicate
    ends up in the plain bucket, so every asset lands in exactly one place.

    Args:
        assets: Release assets in API order

    Returns:
        ClassifiedAssets

    """
    classified = ClassifiedAssets()

    for asset in assets:
        logger.debug(
            "Name: %s, DL URL: %s", asset.name, asset.browser_download_url
        )

        if asset.name == CHECKSUMS_MANIFEST_NAME:
            if classified.manifest_asset is None:
                classified.manifest_asset = asset
                continue
            logger.warning(
                "Duplicate %s in release, treating as plain asset",
                CHECKSUMS_MANIFEST_NAME,
            )
            classified.plain_assets.append(asset)
            continue

        kind = _sidecar_kind(asset.name)
        if kind is None:
            classified.plain_assets.append(asset)
            continue

        base_name = asset.name.removesuffix(kind.suffix)
        displaced = classified.add_sidecar(base_name, kind, asset)
        if displaced is not None:
            logger.warning(
                "Duplicate %s sidecar for %s; using %s",
                kind.value,
                base_name,
                asset.browser_download_url,
            )
            classified.plain_assets.append(displaced)

    return classified
