"""Reading binq item manifests.

Only the parts needed to find the current version and its download URL are
interpreted:

    {
      "meta": {
        "url-format": "https://github.com/o/r/releases/download/v{{.Version}}",
        "replacements": {"amd64": "x86_64"}
      },
      "latest": {"version": "1.2.3"},
      "versions": [{"version": "1.2.3", "url": "..."}]
    }
"""

from __future__ import annotations

import platform
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import orjson

from relsum.exceptions import ManifestError
from relsum.logger import get_logger

logger = get_logger(__name__)

# Python platform names -> Go GOOS/GOARCH names used in URL templates
_OS_NAMES = {"linux": "linux", "darwin": "darwin", "win32": "windows"}
_ARCH_NAMES = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "i386": "386",
    "i686": "386",
    "x86": "386",
    "armv7l": "arm",
    "armv6l": "arm",
}


def current_platform() -> tuple[str, str]:
    """Return (os, arch) for this machine in Go naming."""
    os_name = _OS_NAMES.get(sys.platform, sys.platform)
    machine = platform.machine().lower()
    return os_name, _ARCH_NAMES.get(machine, machine)


def _optional_str(section: dict[str, Any], key: str, label: str) -> str:
    value = section.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        msg = f"'{label}' must be a string"
        raise ManifestError(msg)
    return value


@dataclass(slots=True, frozen=True)
class ItemManifest:
    """The parts of a binq item manifest relsum works with.

    Attributes:
        latest_version: ``latest.version``
        latest_url: ``latest.url`` if present
        url_format: ``meta.url-format`` if present
        replacements: ``meta.replacements`` applied to OS/arch names
        versions: Raw ``versions`` entries

    """

    latest_version: str
    latest_url: str = ""
    url_format: str = ""
    replacements: dict[str, str] = field(default_factory=dict)
    versions: list[dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> ItemManifest:
        """Build from decoded JSON.

        Raises:
            ManifestError: If required fields are missing or mistyped

        """
        if not isinstance(data, dict):
            raise ManifestError("item JSON must be an object")

        latest = data.get("latest")
        if not isinstance(latest, dict):
            raise ManifestError("missing 'latest' section")
        version = latest.get("version")
        if not isinstance(version, str) or not version:
            raise ManifestError("missing 'latest.version'")

        meta = data.get("meta") or {}
        versions = data.get("versions") or []
        if not isinstance(meta, dict) or not isinstance(versions, list):
            raise ManifestError("malformed 'meta' or 'versions' section")
        replacements = meta.get("replacements") or {}
        if not isinstance(replacements, dict):
            raise ManifestError("'meta.replacements' must be an object")

        latest_url = _optional_str(latest, "url", "latest.url")
        url_format = _optional_str(meta, "url-format", "meta.url-format")
        entries = [v for v in versions if isinstance(v, dict)]
        for entry in entries:
            _optional_str(entry, "url", "versions[].url")

        return cls(
            latest_version=version,
            latest_url=latest_url,
            url_format=url_format,
            replacements={str(k): str(v) for k, v in replacements.items()},
            versions=entries,
        )

    def get_latest_url(self, os_name: str, arch: str) -> str:
        """Resolve the download URL of the latest version.

        Lookup order: ``latest.url``, the matching ``versions`` entry's
        ``url``, then ``meta.url-format``.

        Args:
            os_name: Target OS in Go naming (linux, darwin, windows)
            arch: Target arch in Go naming (amd64, arm64, ...)

        Returns:
            URL with template placeholders filled in

        Raises:
            ManifestError: If no URL source exists

        """
        template = self.latest_url
        if not template:
            for entry in self.versions:
                if entry.get("version") == self.latest_version:
                    template = entry.get("url") or ""
                    break
        if not template:
            template = self.url_format
        if not template:
            msg = f"no URL for version {self.latest_version}"
            raise ManifestError(msg)

        return (
            template.replace("{{.Version}}", self.latest_version)
            .replace("{{.OS}}", self.replacements.get(os_name, os_name))
            .replace("{{.Arch}}", self.replacements.get(arch, arch))
        )


def read_item_manifest(path: Path) -> ItemManifest:
    """Read and decode an item JSON file.

    Args:
        path: Path to the item JSON file

    Returns:
        ItemManifest

    Raises:
        ManifestError: If the file can't be read or decoded

    """
    try:
        raw = path.read_bytes()
    except OSError as e:
        msg = f"Can't read item file: {e}"
        raise ManifestError(msg, target=str(path)) from e

    try:
        data = orjson.loads(raw)
    except orjson.JSONDecodeError as e:
        msg = f"Failed to decode Item JSON: {e}"
        raise ManifestError(msg, target=str(path)) from e

    try:
        manifest = ItemManifest.from_dict(data)
    except ManifestError as e:
        e.target = str(path)
        raise

    logger.debug("Item %s: latest version %s", path, manifest.latest_version)
    return manifest
