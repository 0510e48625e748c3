"""Checksum retrieval strategies.

Three ways a release's checksums can be obtained:

- parse an aggregate ``checksums.txt`` table (``<sha256> <file>`` lines)
- read the first token of a ``<asset>.sha256`` / ``<asset>.md5`` sidecar
- download the asset and hash it locally

Each function performs at most one HTTP request and raises a RelsumError
subclass on failure.
"""

from __future__ import annotations

import hashlib
import tempfile
from pathlib import Path

import aiofiles
import aiohttp

from relsum.constants import CHUNK_SIZE, SHA256_HEX_LENGTH, TEMP_DIR_PREFIX
from relsum.core.checksum.models import AssetChecksum, ChecksumKind
from relsum.core.github.models import ReleaseAsset
from relsum.core.http_session import open_url
from relsum.exceptions import AssetIOError, ChecksumParseError
from relsum.logger import get_logger

logger = get_logger(__name__)

CONTENT_PREVIEW_MAX = 200
_MANIFEST_LINE_TOKENS = 2


def parse_checksums_manifest(content: str) -> list[AssetChecksum]:
    """Parse an aggregate checksum table.

    Every line must hold exactly two whitespace-separated tokens,
    ``<digest> <filename>``. 64-character digests become SHA256 entries;
    any other length is logged and skipped.

    Args:
        content: Body of the checksums file

    Returns:
        Checksums in file order

    Raises:
        ChecksumParseError: If a line does not split into two tokens
        ChecksumFormatError: If a 64-character digest is not hex

    """
    sums: list[AssetChecksum] = []

    for line_num, raw_line in enumerate(content.splitlines(), 1):
        parts = raw_line.split()
        if len(parts) != _MANIFEST_LINE_TOKENS:
            msg = (
                f"line {line_num}: expected '<digest> <file>', "
                f"got {raw_line.strip()!r}"
            )
            raise ChecksumParseError(msg)

        digest, filename = parts
        if len(digest) != SHA256_HEX_LENGTH:
            logger.warning(
                "Unknown checksum format. File: %s, Value: %s",
                filename,
                digest,
            )
            continue

        logger.info("file: %s, sha256: %s", filename, digest)
        sums.append(AssetChecksum(filename, ChecksumKind.SHA256, digest))

    return sums


async def _fetch_text(
    session: aiohttp.ClientSession, url: str, timeout: float
) -> str:
    async with open_url(session, url, timeout) as response:
        try:
            content = await response.text()
        except UnicodeDecodeError as e:
            msg = f"checksum file is not valid text: {e}"
            raise ChecksumParseError(msg, target=url) from e

    logger.debug("   Content length: %d characters", len(content))
    logger.debug(
        "   Content preview: %s%s",
        content[:CONTENT_PREVIEW_MAX],
        "..." if len(content) > CONTENT_PREVIEW_MAX else "",
    )
    return content


async def fetch_checksums_manifest(
    session: aiohttp.ClientSession,
    asset: ReleaseAsset,
    timeout: float,
) -> list[AssetChecksum]:
    """Download and parse the aggregate checksums file.

    Raises:
        FetchError: If the download fails
        ChecksumParseError: If the table is malformed

    """
    logger.info("GET %s", asset.browser_download_url)
    content = await _fetch_text(session, asset.browser_download_url, timeout)
    try:
        return parse_checksums_manifest(content)
    except ChecksumParseError as e:
        if e.target is None:
            e.target = asset.name
        raise


async def fetch_sidecar_value(
    session: aiohttp.ClientSession,
    asset: ReleaseAsset,
    timeout: float,
) -> str:
    """Return the first whitespace-delimited token of a sidecar file.

    Sidecars hold either ``<digest>`` or ``<digest>  <filename>``; the token
    is returned as-is.

    Raises:
        FetchError: If the download fails
        ChecksumParseError: If the body is empty

    """
    logger.debug("GET %s", asset.browser_download_url)
    content = await _fetch_text(session, asset.browser_download_url, timeout)
    tokens = content.split(maxsplit=1)
    if not tokens:
        raise ChecksumParseError("checksum file is empty", target=asset.name)
    return tokens[0]


async def hash_asset_download(
    session: aiohttp.ClientSession,
    asset: ReleaseAsset,
    timeout: float,
) -> AssetChecksum:
    """Download an asset to a temporary file, hashing it as it streams.

    The temporary directory is removed on every exit path.

    Args:
        session: HTTP session
        asset: Asset to download
        timeout: Total time allowed for the download, in seconds

    Returns:
        SHA256 checksum of the asset

    Raises:
        FetchError: If the download fails or times out
        AssetIOError: If the temporary file cannot be created or written

    """
    url = asset.browser_download_url
    logger.info("GET %s", url)
    hasher = hashlib.sha256()

    try:
        tmp_dir = tempfile.TemporaryDirectory(prefix=TEMP_DIR_PREFIX)
    except OSError as e:
        msg = f"Failed to create tempdir: {e}"
        raise AssetIOError(msg, target=asset.name) from e

    with tmp_dir as tmp_path:
        dest = Path(tmp_path) / Path(asset.name).name
        async with open_url(session, url, timeout) as response:
            try:
                async with aiofiles.open(dest, mode="wb") as f:
                    async for chunk in response.content.iter_chunked(
                        CHUNK_SIZE
                    ):
                        hasher.update(chunk)
                        await f.write(chunk)
            except (aiohttp.ClientError, TimeoutError):
                # Read failure, converted by open_url
                raise
            except OSError as e:
                msg = f"Failed to write {dest}: {e}"
                raise AssetIOError(msg, target=asset.name) from e
        logger.info("Saved file %s", dest)

    digest = hasher.hexdigest()
    logger.debug("Sum: %s", digest)
    return AssetChecksum(asset.name, ChecksumKind.SHA256, digest)
