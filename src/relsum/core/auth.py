"""GitHub authentication and rate limit tracking.

The token comes from RunOptions (``--token`` or ``$GITHUB_TOKEN``) and,
failing that, from the system keyring.
"""

from relsum.constants import NOTICE_LEVEL
from relsum.core.token import KeyringTokenStore
from relsum.logger import get_logger

logger = get_logger(__name__)


class GitHubAuthManager:
    """Apply GitHub authentication and remember rate-limit headers."""

    def __init__(
        self,
        token: str = "",
        token_store: KeyringTokenStore | None = None,
    ) -> None:
        """Initialize the auth manager.

        Args:
            token: Token given explicitly for this run (may be empty)
            token_store: Fallback store; defaults to the system keyring

        """
        self._explicit_token = token.strip()
        self.token_store = (
            token_store if token_store is not None else KeyringTokenStore()
        )
        self._token: str | None = None
        self._resolved = False
        self._remaining_requests: int | None = None
        self._rate_limit_reset: int | None = None

    def get_token(self) -> str | None:
        """Return the token for this run, looking it up once.

        Returns:
            str | None: Token, or None when running unauthenticated

        """
        if not self._resolved:
            self._resolved = True
            self._token = self._explicit_token or self.token_store.get()
            if self._token:
                logger.debug("GitHub API Token is set")
            else:
                logger.log(
                    NOTICE_LEVEL,
                    "GitHub API Token not set. Recommend to set it by "
                    "$GITHUB_TOKEN or -t|--token option",
                )
        return self._token

    def is_authenticated(self) -> bool:
        """Whether requests will carry a token."""
        return bool(self.get_token())

    def apply_auth(self, headers: dict[str, str]) -> dict[str, str]:
        """Add an Authorization header when a token is available.

        Args:
            headers: HTTP headers to update

        Returns:
            The same headers mapping

        """
        token = self.get_token()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def update_rate_limit_info(self, headers: dict[str, str]) -> None:
        """Record rate-limit information from GitHub response headers.

        Args:
            headers: Response headers from a GitHub API call

        """
        try:
            remaining = headers.get("X-RateLimit-Remaining")
            reset = headers.get("X-RateLimit-Reset")
            if remaining is not None:
                self._remaining_requests = int(remaining)
            if reset is not None:
                self._rate_limit_reset = int(reset)
        except (ValueError, TypeError):
            logger.warning("Invalid rate limit headers received")
            return

        if self._remaining_requests is not None:
            logger.debug(
                "GitHub API rate limit remaining: %d",
                self._remaining_requests,
            )

    def is_rate_limited(self) -> bool:
        """Whether the last response reported zero remaining requests."""
        return self._remaining_requests == 0

    @property
    def rate_limit_reset(self) -> int | None:
        """Epoch seconds at which the rate limit resets, if known."""
        return self._rate_limit_reset
