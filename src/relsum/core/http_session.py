"""HTTP session utilities for relsum.

Every request goes through open_url(), which turns non-200 responses and
aiohttp/timeout failures into FetchError. Nothing here retries: one failure
is reported and the run stops.
"""

from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager

import aiohttp

from relsum import __version__
from relsum.constants import CONNECT_TIMEOUT_SECONDS, HTTP_OK
from relsum.exceptions import FetchError
from relsum.logger import get_logger

logger = get_logger(__name__)

USER_AGENT = f"relsum/{__version__}"


def make_timeout(total_seconds: float) -> aiohttp.ClientTimeout:
    """Build a timeout with a fixed connect limit and the given total."""
    return aiohttp.ClientTimeout(
        total=total_seconds,
        sock_connect=CONNECT_TIMEOUT_SECONDS,
    )


@asynccontextmanager
async def create_http_session() -> AsyncIterator[aiohttp.ClientSession]:
    """Create the session used for a whole run.

    Timeouts are given per request, so the session itself has none.
    Proxy settings are taken from the environment.

    Yields:
        aiohttp.ClientSession

    """
    async with aiohttp.ClientSession(
        timeout=aiohttp.ClientTimeout(total=None),
        headers={"User-Agent": USER_AGENT},
        trust_env=True,
    ) as session:
        yield session


@asynccontextmanager
async def open_url(
    session: aiohttp.ClientSession,
    url: str,
    timeout: float,
    headers: Mapping[str, str] | None = None,
) -> AsyncIterator[aiohttp.ClientResponse]:
    """GET a URL and yield the response once its status is 200.

    Errors raised while the caller reads the body are converted too, so a
    dropped connection mid-download surfaces as FetchError.

    Args:
        session: HTTP session
        url: URL to fetch
        timeout: Total time allowed for the request, in seconds
        headers: Extra request headers

    Yields:
        The open response

    Raises:
        FetchError: On a non-200 status, transport error or timeout

    """
    try:
        async with session.get(
            url,
            headers=dict(headers or {}),
            timeout=make_timeout(timeout),
        ) as response:
            if response.status != HTTP_OK:
                logger.error(
                    "HTTP response is not OK. Code: %d, URL: %s",
                    response.status,
                    url,
                )
                msg = f"HTTP response is not OK. Code: {response.status}"
                raise FetchError(msg, target=url)
            yield response
    except (aiohttp.ClientError, TimeoutError) as e:
        logger.error("Failed to execute HTTP request. %s", e)
        msg = str(e) or type(e).__name__
        raise FetchError(msg, target=url) from e
