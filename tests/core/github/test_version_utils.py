"""Tests for version extraction from release names."""

import logging

import pytest

from relsum.core.github.version_utils import extract_version


@pytest.mark.parametrize(
    ("release_name", "expected"),
    [
        ("MyApp 2.3.1 Release", "2.3.1"),
        ("v1.0.0", "1.0.0"),
        ("v1.0.0-rc2", "1.0.0-rc2"),
        ("Release 10", "10"),
        ("tool-2.0.0-beta_1 (nightly)", "2.0.0-beta_1"),
        ("1.2.", "1.2"),
        ("v1.0.0-β", "1.0.0"),
    ],
)
def test_extract_version(release_name: str, expected: str) -> None:
    """Test the first version-like substring is returned."""
    assert extract_version(release_name) == expected


def test_extract_version_takes_first_number() -> None:
    """Test an earlier number in the title wins over the real version."""
    assert extract_version("Model 3000 v1.2.0") == "3000"


def test_extract_version_no_match_logs_error(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Test None is returned and an error logged when nothing matches."""
    with caplog.at_level(logging.ERROR):
        assert extract_version("nightly") is None

    assert "Can't parse release version as version: nightly" in caplog.text


def test_extract_version_empty_name() -> None:
    """Test an empty name yields None."""
    assert extract_version("") is None


def test_extract_version_ignores_non_ascii_digits() -> None:
    """Test only ASCII digits count as version characters."""
    assert extract_version("Release ٣.٢") is None
