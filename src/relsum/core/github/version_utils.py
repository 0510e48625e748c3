"""Version extraction from release names.

Release titles are loosely formatted ("MyApp 2.3.1 Release", "v1.0.0-rc2"),
so the version is taken as the first version-looking run of characters.
"""

import re

from relsum.logger import get_logger

logger = get_logger(__name__)

# A digit, optionally more digits/dots ending in a digit, then an optional
# "-suffix" of ASCII word characters and hyphens. A leading "v" never matches.
_VERSION_PATTERN = re.compile(r"\d(?:[\d.]*\d)?(?:-[\w-]+)?", re.ASCII)


def extract_version(release_name: str) -> str | None:
    """Extract the first version-like substring of a release name.

    No semantic-version validation is done beyond the pattern. Names that
    contain an earlier number (e.g. a model number) yield that number.

    Args:
        release_name: Release title or tag

    Returns:
        Version string, or None if nothing matches

    Example:
        >>> extract_version("MyApp 2.3.1 Release")
        '2.3.1'

    """
    match = _VERSION_PATTERN.search(release_name or "")
    if match is None:
        logger.error(
            "Can't parse release version as version: %s", release_name
        )
        return None
    return match.group(0)
