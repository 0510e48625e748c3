"""Invocation of ``binq revise`` to write a new version into an item file."""

from __future__ import annotations

import asyncio
import shlex
from collections.abc import Sequence
from typing import TYPE_CHECKING

from relsum.exceptions import ReviseCommandError
from relsum.logger import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from relsum.config import RunOptions
    from relsum.core.checksum import AssetChecksum

logger = get_logger(__name__)


def build_revise_args(
    item_file: Path,
    version: str,
    sums: Sequence[AssetChecksum],
    options: RunOptions,
) -> list[str]:
    """Build the argument list for ``binq revise``.

    Checksums are passed as one ``--sum file:value,file:value`` flag.

    Returns:
        Arguments, without the executable

    """
    args = ["revise", str(item_file), "--version", version]
    if sums:
        args += ["--sum", ",".join(f"{s.file}:{s.value}" for s in sums)]
    if options.yes:
        args.append("--yes")
    if options.log_level:
        args += ["--log-level", options.log_level]
    return args


async def run_revise_command(
    item_file: Path,
    version: str,
    sums: Sequence[AssetChecksum],
    options: RunOptions,
) -> None:
    """Run ``binq revise``, sharing this process's stdin/stdout/stderr.

    binq may prompt for confirmation unless ``--yes`` is given.

    Raises:
        ReviseCommandError: If binq can't be started or exits non-zero

    """
    argv = [
        options.binq_path,
        *build_revise_args(item_file, version, sums, options),
    ]
    logger.info("[RUN] %s", shlex.join(argv))

    try:
        process = await asyncio.create_subprocess_exec(*argv)
    except OSError as e:
        msg = f"Failed to start {options.binq_path}: {e}"
        raise ReviseCommandError(msg, target=str(item_file)) from e

    returncode = await process.wait()
    if returncode != 0:
        msg = f"exit status {returncode}"
        raise ReviseCommandError(msg, target=str(item_file))
