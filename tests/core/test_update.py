"""Tests for the item manifest update workflow."""

from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import orjson
import pytest

from relsum.config import RunOptions
from relsum.core.checksum import AssetChecksum, ChecksumKind
from relsum.core.github import Release, ReleaseAsset
from relsum.core.update import ManifestUpdater
from relsum.exceptions import FetchError, ManifestError

SHA_A = "a" * 64
URL_FORMAT = (
    "https://github.com/owner/tool/releases/download/v{{.Version}}/"
    "tool_{{.OS}}_{{.Arch}}.tar.gz"
)


@pytest.fixture
def item_file(tmp_path: Path) -> Path:
    """Provide an item JSON pinned at version 1.0.0."""
    path = tmp_path / "tool.json"
    path.write_bytes(
        orjson.dumps(
            {
                "meta": {"url-format": URL_FORMAT},
                "latest": {"version": "1.0.0"},
            }
        )
    )
    return path


@pytest.fixture
def api_client() -> MagicMock:
    """Provide a release API client mock."""
    client = MagicMock()
    client.fetch_latest_release = AsyncMock()
    return client


@pytest.fixture
def make_updater(
    mock_session: MagicMock, options: RunOptions, api_client: MagicMock
) -> Callable[..., ManifestUpdater]:
    """Provide a factory for updaters with a recording revise coroutine."""

    def _make(revise: Any = None) -> ManifestUpdater:
        return ManifestUpdater(
            mock_session,
            options,
            api_client=api_client,
            revise=revise or AsyncMock(),
            platform=("linux", "amd64"),
        )

    return _make


@pytest.mark.asyncio
async def test_up_to_date(
    item_file: Path,
    api_client: MagicMock,
    make_updater: Callable[..., ManifestUpdater],
) -> None:
    """Test nothing is fetched or revised when versions match."""
    api_client.fetch_latest_release.return_value = Release(
        name="Tool v1.0.0", tag_name="v1.0.0"
    )
    updater = make_updater()

    result = await updater.check(item_file)

    assert result.up_to_date
    assert result.version == "1.0.0"
    api_client.fetch_latest_release.assert_awaited_once_with("owner", "tool")
    updater.revise.assert_not_awaited()


@pytest.mark.asyncio
async def test_new_version_with_checksums(
    item_file: Path,
    api_client: MagicMock,
    options: RunOptions,
    make_updater: Callable[..., ManifestUpdater],
    make_response: Callable[..., AsyncMock],
    mock_session: MagicMock,
) -> None:
    """Test checksums of the new release are handed to revise."""
    manifest = ReleaseAsset("checksums.txt", "https://x/checksums.txt")
    api_client.fetch_latest_release.return_value = Release(
        name="", tag_name="v1.1.0", assets=[manifest]
    )
    mock_session.get.return_value = make_response(
        text=f"{SHA_A}  tool_linux_amd64.tar.gz\n"
    )
    updater = make_updater()

    result = await updater.check(item_file)

    expected = [
        AssetChecksum(
            "tool_linux_amd64.tar.gz", ChecksumKind.SHA256, SHA_A
        )
    ]
    assert not result.up_to_date
    assert result.version == "1.1.0"
    assert result.checksums == expected
    updater.revise.assert_awaited_once_with(
        item_file, "1.1.0", expected, options
    )


@pytest.mark.asyncio
async def test_release_without_assets(
    item_file: Path,
    api_client: MagicMock,
    make_updater: Callable[..., ManifestUpdater],
    mock_session: MagicMock,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Test a release with no assets still bumps the version."""
    api_client.fetch_latest_release.return_value = Release(
        name="Tool 2.0.0", tag_name="v2.0.0"
    )
    updater = make_updater()

    result = await updater.check(item_file)

    assert result.checksums == []
    assert "Release has no asset to be downloaded" in caplog.text
    mock_session.get.assert_not_called()
    updater.revise.assert_awaited_once()


@pytest.mark.asyncio
async def test_older_release_warns(
    item_file: Path,
    api_client: MagicMock,
    make_updater: Callable[..., ManifestUpdater],
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Test a release older than the manifest is flagged but applied."""
    api_client.fetch_latest_release.return_value = Release(
        name="Tool 0.9.0", tag_name="v0.9.0"
    )
    updater = make_updater()

    result = await updater.check(item_file)

    assert result.version == "0.9.0"
    assert "older than manifest version 1.0.0" in caplog.text
    updater.revise.assert_awaited_once()


@pytest.mark.asyncio
async def test_resolution_failure_skips_revise(
    item_file: Path,
    api_client: MagicMock,
    make_updater: Callable[..., ManifestUpdater],
    make_response: Callable[..., AsyncMock],
    mock_session: MagicMock,
) -> None:
    """Test the item file is never revised when checksums fail."""
    api_client.fetch_latest_release.return_value = Release(
        name="Tool 1.1.0",
        tag_name="v1.1.0",
        assets=[ReleaseAsset("checksums.txt", "https://x/checksums.txt")],
    )
    mock_session.get.return_value = make_response(status=404)
    updater = make_updater()

    with pytest.raises(FetchError):
        await updater.check(item_file)

    updater.revise.assert_not_awaited()


@pytest.mark.asyncio
async def test_non_github_url(
    tmp_path: Path,
    api_client: MagicMock,
    make_updater: Callable[..., ManifestUpdater],
) -> None:
    """Test items hosted outside GitHub are rejected."""
    path = tmp_path / "tool.json"
    path.write_bytes(
        orjson.dumps(
            {"latest": {"version": "1.0", "url": "https://example.com/t"}}
        )
    )

    with pytest.raises(ManifestError, match="doesn't look like"):
        await make_updater().check(path)

    api_client.fetch_latest_release.assert_not_called()
