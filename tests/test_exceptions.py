"""Tests for relsum exception formatting."""

import pytest

from relsum.exceptions import (
    AssetIOError,
    ChecksumFormatError,
    ChecksumParseError,
    ChecksumResolutionError,
    FetchError,
    ManifestError,
    RelsumError,
    ReviseCommandError,
)


def test_message_without_target() -> None:
    """Test the prefix and message are joined."""
    assert str(FetchError("boom")) == "Fetch failed: boom"


def test_message_with_target() -> None:
    """Test the target is quoted after the prefix."""
    error = ChecksumParseError("bad line", target="checksums.txt")

    assert str(error) == (
        "Checksum parse failed for 'checksums.txt': bad line"
    )
    assert error.message == "bad line"


@pytest.mark.parametrize(
    "error_class",
    [
        AssetIOError,
        ChecksumFormatError,
        ChecksumParseError,
        ChecksumResolutionError,
        FetchError,
        ManifestError,
        ReviseCommandError,
    ],
)
def test_all_errors_share_base(error_class: type[RelsumError]) -> None:
    """Test every error can be caught as RelsumError."""
    with pytest.raises(RelsumError):
        raise error_class("x")
