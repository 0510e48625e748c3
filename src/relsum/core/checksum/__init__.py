"""Release-asset checksum resolution."""

from relsum.core.checksum.classifier import classify_assets
from relsum.core.checksum.fetchers import (
    fetch_checksums_manifest,
    fetch_sidecar_value,
    hash_asset_download,
    parse_checksums_manifest,
)
from relsum.core.checksum.models import (
    AssetChecksum,
    ChecksumKind,
    ClassifiedAssets,
)
from relsum.core.checksum.resolver import ChecksumResolver

__all__ = [
    "AssetChecksum",
    "ChecksumKind",
    "ChecksumResolver",
    "ClassifiedAssets",
    "classify_assets",
    "fetch_checksums_manifest",
    "fetch_sidecar_value",
    "hash_asset_download",
    "parse_checksums_manifest",
]
