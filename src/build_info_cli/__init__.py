"""build-info: emit git and version metadata as a TypeScript constant."""

from .version import get_version

__version__ = get_version()
