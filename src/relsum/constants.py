"""Centralized constants module for relsum.

Constants are grouped by concern and annotated with typing.Final.

Usage:
    from relsum.constants import CHECKSUMS_MANIFEST_NAME
"""

from typing import Final

# =============================================================================
# Release asset naming
# =============================================================================

# Aggregate checksum table published with a release (exact, case-sensitive)
CHECKSUMS_MANIFEST_NAME: Final[str] = "checksums.txt"

# Digest length (hex characters) accepted from the aggregate table
SHA256_HEX_LENGTH: Final[int] = 64
MD5_HEX_LENGTH: Final[int] = 32

# =============================================================================
# Network constants
# =============================================================================

GITHUB_API_BASE: Final[str] = "https://api.github.com"
GITHUB_API_ACCEPT: Final[str] = "application/vnd.github+json"

HTTP_OK: Final[int] = 200
HTTP_FORBIDDEN: Final[int] = 403
HTTP_NOT_FOUND: Final[int] = 404

# Seconds
CONNECT_TIMEOUT_SECONDS: Final[float] = 5.0
METADATA_TIMEOUT_SECONDS: Final[float] = 5.0
DEFAULT_DOWNLOAD_TIMEOUT_SECONDS: Final[float] = 5 * 60.0

# Bytes read per chunk while streaming an asset to disk
CHUNK_SIZE: Final[int] = 64 * 1024

# Prefix for per-asset temporary directories
TEMP_DIR_PREFIX: Final[str] = "relsum."

# =============================================================================
# Environment variables
# =============================================================================

ENV_GITHUB_TOKEN: Final[str] = "GITHUB_TOKEN"
ENV_BINQ_BIN: Final[str] = "BINQ_BIN"
ENV_LOG_FILE: Final[str] = "RELSUM_LOG_FILE"
ENV_LOG_LEVEL: Final[str] = "LOG_LEVEL"

DEFAULT_BINQ_BIN: Final[str] = "binq"

# Keyring entry holding a GitHub token
KEYRING_SERVICE: Final[str] = "relsum-github-token"
KEYRING_USERNAME: Final[str] = "token"

# =============================================================================
# Logging constants
# =============================================================================

DEFAULT_LOG_LEVEL: Final[str] = "INFO"

# Between INFO (20) and WARNING (30)
NOTICE_LEVEL: Final[int] = 25
NOTICE_LEVEL_NAME: Final[str] = "NOTICE"

# Words accepted by --log-level, mapped to logging level names
LOG_LEVEL_WORDS: Final[dict[str, str]] = {
    "debug": "DEBUG",
    "info": "INFO",
    "notice": NOTICE_LEVEL_NAME,
    "warn": "WARNING",
    "warning": "WARNING",
    "error": "ERROR",
}

LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024
LOG_BACKUP_COUNT: Final[int] = 3

LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "NOTICE": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}
