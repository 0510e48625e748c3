"""Tests for run options."""

from argparse import Namespace

import pytest

from relsum.config import RunOptions


def test_defaults() -> None:
    """Test defaults match the documented timeouts and executable."""
    options = RunOptions()

    assert options.token == ""
    assert not options.yes
    assert options.download_timeout == 300.0
    assert options.metadata_timeout == 5.0
    assert options.binq_path == "binq"


def test_from_args_prefers_flag_token() -> None:
    """Test --token beats $GITHUB_TOKEN."""
    args = Namespace(token="flag", yes=True, log_level="debug")

    options = RunOptions.from_args(args, {"GITHUB_TOKEN": "env"})

    assert options.token == "flag"
    assert options.yes
    assert options.log_level == "debug"


def test_from_args_env_fallbacks() -> None:
    """Test token and binq path come from the environment."""
    args = Namespace(token="", download_timeout=None)

    options = RunOptions.from_args(
        args, {"GITHUB_TOKEN": " env-token\n", "BINQ_BIN": "/usr/bin/binq"}
    )

    assert options.token == "env-token"
    assert options.binq_path == "/usr/bin/binq"
    assert options.download_timeout == 300.0


def test_from_args_download_timeout() -> None:
    """Test a download timeout from the command line is kept."""
    options = RunOptions.from_args(Namespace(download_timeout=12), {})

    assert options.download_timeout == 12.0
    assert options.token == ""


@pytest.mark.parametrize(
    "kwargs", [{"download_timeout": 0}, {"metadata_timeout": -1.0}]
)
def test_non_positive_timeout_rejected(kwargs: dict[str, float]) -> None:
    """Test timeouts must be positive."""
    with pytest.raises(ValueError, match="must be positive"):
        RunOptions(**kwargs)
