"""Checksum data types shared by the classifier, fetchers and resolver."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

from relsum.constants import MD5_HEX_LENGTH, SHA256_HEX_LENGTH
from relsum.core.github.models import ReleaseAsset
from relsum.exceptions import ChecksumFormatError

_HEX_PATTERN = re.compile(r"[0-9a-f]+")


class ChecksumKind(Enum):
    """Hash algorithm of a published or computed checksum."""

    SHA256 = "sha256"
    MD5 = "md5"

    @property
    def hex_length(self) -> int:
        """Number of hex characters in a digest of this kind."""
        if self is ChecksumKind.SHA256:
            return SHA256_HEX_LENGTH
        return MD5_HEX_LENGTH

    @property
    def suffix(self) -> str:
        """Sidecar file suffix, e.g. ``.sha256``."""
        return f".{self.value}"


# Sidecar lookup order for one base name: SHA256 beats MD5
SIDECAR_PREFERENCE: tuple[ChecksumKind, ...] = (
    ChecksumKind.SHA256,
    ChecksumKind.MD5,
)


@dataclass(slots=True, frozen=True)
class AssetChecksum:
    """Checksum of one release file.

    ``value`` is stored lowercase and must be hex of ``kind.hex_length``
    characters.

    Raises:
        ChecksumFormatError: If the value violates that invariant

    """

    file: str
    kind: ChecksumKind
    value: str

    def __post_init__(self) -> None:
        """Normalize case and validate the digest."""
        normalized = self.value.strip().lower()
        if (
            len(normalized) != self.kind.hex_length
            or not _HEX_PATTERN.fullmatch(normalized)
        ):
            msg = (
                f"expected {self.kind.hex_length} hex characters for "
                f"{self.kind.value}, got {self.value!r}"
            )
            raise ChecksumFormatError(msg, target=self.file)
        object.__setattr__(self, "value", normalized)


@dataclass(slots=True)
class ClassifiedAssets:
    """Release assets split by how their checksum can be obtained.

    Attributes:
        manifest_asset: The aggregate ``checksums.txt`` asset, if any
        sidecar_groups: base asset name -> kind -> sidecar asset
        plain_assets: Assets with no published checksum, in release order

    """

    manifest_asset: ReleaseAsset | None = None
    sidecar_groups: dict[str, dict[ChecksumKind, ReleaseAsset]] = field(
        default_factory=dict
    )
    plain_assets: list[ReleaseAsset] = field(default_factory=list)

    def add_sidecar(
        self, base_name: str, kind: ChecksumKind, asset: ReleaseAsset
    ) -> ReleaseAsset | None:
        """Register a sidecar, returning the asset it displaced, if any."""
        group = self.sidecar_groups.setdefault(base_name, {})
        displaced = group.get(kind)
        group[kind] = asset
        return displaced

    def count(self) -> int:
        """Total number of assets across all buckets."""
        sidecars = sum(len(group) for group in self.sidecar_groups.values())
        manifest = 1 if self.manifest_asset is not None else 0
        return manifest + sidecars + len(self.plain_assets)

    def is_empty(self) -> bool:
        """Whether the release had no assets at all."""
        return self.count() == 0
