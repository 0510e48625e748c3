"""GitHub infrastructure - API client, models and version parsing."""

from relsum.core.github.client import ReleaseAPIClient, parse_github_url
from relsum.core.github.models import Release, ReleaseAsset
from relsum.core.github.version_utils import extract_version

__all__ = [
    "Release",
    "ReleaseAPIClient",
    "ReleaseAsset",
    "extract_version",
    "parse_github_url",
]
