"""Exception classes for relsum operations."""


class RelsumError(Exception):
    """Base exception for relsum operations."""

    error_prefix: str = "Operation failed"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional URL, file or asset name that failed.

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class FetchError(RelsumError):
    """Raised on a non-200 response or a transport failure."""

    error_prefix = "Fetch failed"


class ChecksumParseError(RelsumError):
    """Raised when checksum data cannot be read from a fetched body."""

    error_prefix = "Checksum parse failed"


class ChecksumFormatError(ChecksumParseError):
    """Raised when a digest is not hex of the expected length."""

    error_prefix = "Invalid checksum"


class AssetIOError(RelsumError):
    """Raised when the temporary download file cannot be created or written."""

    error_prefix = "Asset I/O failed"


class ChecksumResolutionError(RelsumError):
    """Raised when classified assets are in an inconsistent state."""

    error_prefix = "Checksum resolution failed"


class ManifestError(RelsumError):
    """Raised when an item manifest cannot be read or understood."""

    error_prefix = "Manifest error"


class ReviseCommandError(RelsumError):
    """Raised when the external revise command fails."""

    error_prefix = "binq command failed"
