"""Update check for a single item manifest.

Reads the item file, looks up the latest GitHub release of the tool it
points at and, when the version differs, resolves checksums for the new
release and hands everything to ``binq revise``.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from packaging.version import InvalidVersion, Version

from relsum.config import RunOptions
from relsum.core.auth import GitHubAuthManager
from relsum.core.checksum import (
    AssetChecksum,
    ChecksumResolver,
    classify_assets,
)
from relsum.core.github import (
    ReleaseAPIClient,
    extract_version,
    parse_github_url,
)
from relsum.core.manifest import current_platform, read_item_manifest
from relsum.core.revise import run_revise_command
from relsum.exceptions import ManifestError
from relsum.logger import get_logger

if TYPE_CHECKING:
    import aiohttp

logger = get_logger(__name__)

ReviseRunner = Callable[
    [Path, str, Sequence[AssetChecksum], RunOptions], Awaitable[None]
]


@dataclass(slots=True, frozen=True)
class UpdateResult:
    """Outcome of one update check.

    Attributes:
        up_to_date: True if the manifest already had the latest version
        version: Version extracted from the latest release
        checksums: Checksums handed to binq (empty when up to date or
            when the release has no assets)

    """

    up_to_date: bool
    version: str
    checksums: list[AssetChecksum] = field(default_factory=list)


def _is_older(candidate: str, current: str) -> bool:
    try:
        return Version(candidate) < Version(current)
    except InvalidVersion:
        return False


class ManifestUpdater:
    """Check one item manifest against its latest GitHub release."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        options: RunOptions,
        api_client: ReleaseAPIClient | None = None,
        revise: ReviseRunner = run_revise_command,
        platform: tuple[str, str] | None = None,
    ) -> None:
        """Initialize the updater.

        Args:
            session: HTTP session shared by all requests of the run
            options: Run options
            api_client: Release API client (built from options if omitted)
            revise: Coroutine that applies the update
            platform: (os, arch) used for the item URL; defaults to this
                machine

        """
        self.session = session
        self.options = options
        self.api_client = api_client or ReleaseAPIClient(
            session, GitHubAuthManager(options.token), options
        )
        self.resolver = ChecksumResolver(session, options)
        self.revise = revise
        self.platform = platform or current_platform()

    async def check(self, item_file: Path) -> UpdateResult:
        """Run the update check for ``item_file``.

        Returns:
            UpdateResult

        Raises:
            RelsumError: On any failure; the item file is left untouched

        """
        manifest = read_item_manifest(item_file)
        url = manifest.get_latest_url(*self.platform)
        logger.info("URL of Item: %s", url)

        repo_ref = parse_github_url(url)
        if repo_ref is None:
            msg = f"URL doesn't look like one of GitHub: {url}"
            raise ManifestError(msg, target=str(item_file))
        owner, repo = repo_ref
        logger.debug("owner: %s, repo: %s", owner, repo)

        release = await self.api_client.fetch_latest_release(owner, repo)
        version = extract_version(release.display_name) or ""
        if manifest.latest_version == version:
            return UpdateResult(up_to_date=True, version=version)

        logger.info("New Version is found: %s", version)
        if _is_older(version, manifest.latest_version):
            logger.warning(
                "Release version %s is older than manifest version %s",
                version,
                manifest.latest_version,
            )

        sums: list[AssetChecksum] = []
        classified = classify_assets(release.assets)
        if classified.is_empty():
            logger.warning("Release has no asset to be downloaded")
        else:
            logger.info("Fetching bundled assets ...")
            sums = await self.resolver.resolve(classified)

        await self.revise(item_file, version, sums, self.options)
        return UpdateResult(up_to_date=False, version=version, checksums=sums)
