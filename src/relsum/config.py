"""Run options for a single relsum invocation.

Options are read from the command line and environment once, at startup, and
the resulting value is handed to every component that needs it.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from relsum.constants import (
    DEFAULT_BINQ_BIN,
    DEFAULT_DOWNLOAD_TIMEOUT_SECONDS,
    ENV_BINQ_BIN,
    ENV_GITHUB_TOKEN,
    METADATA_TIMEOUT_SECONDS,
)

if TYPE_CHECKING:
    from argparse import Namespace


@dataclass(slots=True, frozen=True)
class RunOptions:
    """Process-wide options for one run.

    Attributes:
        token: GitHub token from --token or $GITHUB_TOKEN (may be empty)
        log_level: Raw --log-level word, forwarded to binq (may be empty)
        yes: Whether binq should apply changes without confirmation
        download_timeout: Total timeout for one asset download, seconds
        metadata_timeout: Total timeout for API and checksum file fetches
        binq_path: Executable used for ``binq revise``

    """

    token: str = ""
    log_level: str = ""
    yes: bool = False
    download_timeout: float = DEFAULT_DOWNLOAD_TIMEOUT_SECONDS
    metadata_timeout: float = METADATA_TIMEOUT_SECONDS
    binq_path: str = DEFAULT_BINQ_BIN

    def __post_init__(self) -> None:
        """Reject non-positive timeouts."""
        if self.download_timeout <= 0:
            msg = f"download timeout must be positive: {self.download_timeout}"
            raise ValueError(msg)
        if self.metadata_timeout <= 0:
            msg = f"metadata timeout must be positive: {self.metadata_timeout}"
            raise ValueError(msg)

    @classmethod
    def from_args(
        cls,
        args: Namespace,
        environ: Mapping[str, str] | None = None,
    ) -> RunOptions:
        """Build options from parsed arguments and the environment.

        Command-line values take precedence over environment variables.

        Args:
            args: Namespace produced by CLIParser
            environ: Environment mapping (defaults to os.environ)

        Returns:
            RunOptions instance

        """
        env = os.environ if environ is None else environ
        token = getattr(args, "token", "") or env.get(ENV_GITHUB_TOKEN, "")
        download_timeout = getattr(args, "download_timeout", None)

        return cls(
            token=token.strip(),
            log_level=getattr(args, "log_level", "") or "",
            yes=bool(getattr(args, "yes", False)),
            download_timeout=(
                float(download_timeout)
                if download_timeout is not None
                else DEFAULT_DOWNLOAD_TIMEOUT_SECONDS
            ),
            binq_path=env.get(ENV_BINQ_BIN) or DEFAULT_BINQ_BIN,
        )
