"""Version management for the build-info CLI."""

import re
from importlib import metadata
from pathlib import Path

# Build-time version constant (will be injected during build)
__BUILD_VERSION__ = None

DISTRIBUTION_NAME = "build-info-cli"


def get_version() -> str:
    """
    Get the current version of the tool itself.

    Tries the build-time constant, then installed distribution metadata,
    then falls back to reading pyproject.toml in a source checkout.

    Returns:
        str: Version string
    """
    if __BUILD_VERSION__:
        return __BUILD_VERSION__

    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        pass

    # Running from a source checkout without an install
    pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
    try:
        content = pyproject_path.read_text(encoding="utf-8")
    except OSError:
        return "unknown"

    match = re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE)
    if match:
        version = match.group(1)
        # x.y.z or x.y.z{a|b|rc}N
        if re.match(r'^\d+\.\d+\.\d+(a\d+|b\d+|rc\d+)?$', version):
            return version

    return "unknown"

