"""Read the host project's version from its package manifest."""

import json
from pathlib import Path

import toml

from ..utils.console import _rich_error
from .models import LookupResult


def read_manifest_version(manifest_path: Path) -> LookupResult:
    """Read the ``version`` string from package.json or pyproject.toml.

    Args:
        manifest_path: Path to the manifest file

    Returns:
        LookupResult: The version, or absent if it cannot be read
    """
    manifest_path = Path(manifest_path)
    try:
        with open(manifest_path, 'r', encoding='utf-8') as f:
            if manifest_path.suffix == ".toml":
                version = _pyproject_version(toml.load(f))
            else:
                data = json.load(f)
                version = data.get("version") if isinstance(data, dict) else None
    except (OSError, ValueError, toml.TomlDecodeError) as e:
        _rich_error(f"Error reading version from `{manifest_path}`, skipping... ({e})", symbol="error")
        return LookupResult.absent()

    if not isinstance(version, str):
        _rich_error(f"No version found in `{manifest_path}`, skipping...", symbol="error")
        return LookupResult.absent()

    return LookupResult.of(version)


def _pyproject_version(data: dict):
    project = data.get("project") or {}
    if "version" in project:
        return project["version"]
    poetry = data.get("tool", {}).get("poetry") or {}
    return poetry.get("version")
