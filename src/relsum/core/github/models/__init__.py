"""GitHub models package."""

from relsum.core.github.models.asset import ReleaseAsset
from relsum.core.github.models.release import Release

__all__ = [
    "Release",
    "ReleaseAsset",
]
