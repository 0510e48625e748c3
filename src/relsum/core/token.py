"""GitHub token lookup from the system keyring.

Used only when neither ``--token`` nor ``$GITHUB_TOKEN`` is given. Store a
token with ``keyring set relsum-github-token token``.
"""

import keyring
from keyring.errors import KeyringError

from relsum.constants import KEYRING_SERVICE, KEYRING_USERNAME
from relsum.logger import get_logger

logger = get_logger(__name__)


class KeyringTokenStore:
    """Read-only access to a token kept in the system keyring."""

    def __init__(
        self,
        service: str = KEYRING_SERVICE,
        username: str = KEYRING_USERNAME,
    ) -> None:
        """Initialize the keyring token store.

        Args:
            service: The service name for keyring storage.
            username: The username for keyring storage.

        """
        self.service = service
        self.username = username

    def get(self) -> str | None:
        """Retrieve the stored token.

        Returns:
            str | None: The token, or None if not stored or the keyring is
                unavailable (e.g. headless session without DBus).

        """
        try:
            token = keyring.get_password(self.service, self.username)
        except (KeyringError, RuntimeError) as e:
            # Security: don't log exception details
            logger.debug("Keyring unavailable: %s", type(e).__name__)
            return None

        if not token:
            logger.debug("No token stored in keyring")
            return None
        logger.debug("GitHub token retrieved from keyring (value hidden)")
        return token.strip() or None
