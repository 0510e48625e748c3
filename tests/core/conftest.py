"""Pytest configuration and fixtures for core module tests.

Provides mocked aiohttp sessions and responses plus small data factories
for release assets. Fixtures defined here are available to every test
under tests/core without explicit imports.
"""

from collections.abc import AsyncGenerator, Callable
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from relsum.config import RunOptions
from relsum.core.github import ReleaseAsset

# =============================================================================
# Async Helpers
# =============================================================================


async def async_chunk_gen(
    chunks: list[bytes],
) -> AsyncGenerator[bytes, None]:
    """Async generator yielding chunks for simulating HTTP responses.

    Args:
        chunks: List of byte chunks to yield.

    Yields:
        Individual byte chunks.

    """
    for chunk in chunks:
        yield chunk


def build_response(
    status: int = 200,
    text: str = "",
    chunks: list[bytes] | None = None,
    json_data: Any = None,
    headers: dict[str, str] | None = None,
) -> AsyncMock:
    """Build a mock aiohttp response usable as an async context manager.

    ``__aexit__`` returns None so exceptions raised inside the ``async
    with`` block propagate like they do with a real response.
    """
    response = AsyncMock()
    response.__aenter__.return_value = response
    response.__aexit__.return_value = None
    response.status = status
    response.headers = headers or {}
    response.text = AsyncMock(return_value=text)
    response.json = AsyncMock(return_value=json_data)
    response.content.iter_chunked = lambda size: async_chunk_gen(
        chunks or []
    )
    return response


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def make_response() -> Callable[..., AsyncMock]:
    """Provide the mock response factory."""
    return build_response


@pytest.fixture
def mock_session() -> MagicMock:
    """Provide a mock aiohttp.ClientSession.

    Tests set ``mock_session.get.return_value`` (one response) or
    ``mock_session.get.side_effect`` (per-URL responses).
    """
    return MagicMock()


@pytest.fixture
def route_session(mock_session: MagicMock) -> Callable[..., MagicMock]:
    """Route session.get() calls to responses by URL.

    Returns:
        Function taking a {url: response} mapping and returning the
        configured session. Unknown URLs fail the test.

    """

    def _route(responses: dict[str, AsyncMock]) -> MagicMock:
        def _get(url: str, **kwargs: Any) -> AsyncMock:
            assert url in responses, f"unexpected GET {url}"
            return responses[url]

        mock_session.get.side_effect = _get
        return mock_session

    return _route


@pytest.fixture
def options() -> RunOptions:
    """Provide default run options."""
    return RunOptions()


@pytest.fixture
def make_asset() -> Callable[[str], ReleaseAsset]:
    """Provide a factory for release assets hosted under a fixed URL."""

    def _make(name: str) -> ReleaseAsset:
        return ReleaseAsset(
            name=name,
            browser_download_url=(
                f"https://github.com/o/r/releases/download/v1.0.0/{name}"
            ),
        )

    return _make
