"""Configuration management for the build-info CLI.

All process-level inputs (working directory, environment variables and the
optional ``.build-info.yml`` file) are read once here and frozen into a
:class:`BuildInfoConfig` that the pipeline receives explicitly.
"""

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .errors import BuildInfoError


CONFIG_FILE_NAME = ".build-info.yml"
DEFAULT_OUTPUT = Path("src") / "build.ts"
DEFAULT_MANIFESTS = ("package.json", "pyproject.toml")
DEFAULT_GIT_TIMEOUT = 10.0
DEFAULT_EXPORT_NAME = "buildInfo"

ENV_OUTPUT = "BUILD_INFO_OUTPUT"
ENV_MANIFEST = "BUILD_INFO_MANIFEST"
ENV_GIT_TIMEOUT = "BUILD_INFO_GIT_TIMEOUT"

_EXPORT_NAME = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")

# Words TypeScript rejects as the name of a const binding
RESERVED_WORDS = frozenset((
    "break", "case", "catch", "class", "const", "continue", "debugger", "default",
    "delete", "do", "else", "enum", "export", "extends", "false", "finally", "for",
    "function", "if", "import", "in", "instanceof", "new", "null", "return", "super",
    "switch", "this", "throw", "true", "try", "typeof", "var", "void", "while", "with",
    "implements", "interface", "let", "package", "private", "protected", "public",
    "static", "yield", "await", "arguments", "eval", "undefined",
))


class ConfigurationError(BuildInfoError):
    """Raised when the configuration file or environment holds invalid values."""


@dataclass(frozen=True)
class BuildInfoConfig:
    """Resolved settings for one build-info run."""
    project_root: Path
    output_path: Path
    manifest_path: Path
    git_timeout: float = DEFAULT_GIT_TIMEOUT
    export_name: str = DEFAULT_EXPORT_NAME

    @classmethod
    def from_environment(cls, cwd: Optional[Path] = None,
                         environ: Optional[Mapping[str, str]] = None) -> "BuildInfoConfig":
        """Build the configuration from the working directory, config file and environment.

        Args:
            cwd: Project root, defaults to the current working directory
            environ: Environment mapping, defaults to ``os.environ``

        Returns:
            BuildInfoConfig: Resolved configuration

        Raises:
            ConfigurationError: If a configured value is invalid
        """
        project_root = Path(cwd) if cwd is not None else Path.cwd()
        environ = os.environ if environ is None else environ

        settings = _load_config_file(project_root / CONFIG_FILE_NAME)

        output = environ.get(ENV_OUTPUT) or settings.get("output")
        manifest = environ.get(ENV_MANIFEST) or settings.get("manifest")
        timeout = environ.get(ENV_GIT_TIMEOUT) or settings.get("timeout")
        export_name = settings.get("export_name", DEFAULT_EXPORT_NAME)

        if not is_valid_export_name(export_name):
            raise ConfigurationError(
                f"Invalid export_name {export_name!r}: must be a TypeScript identifier and not a reserved word"
            )

        return cls(
            project_root=project_root,
            output_path=_resolve(project_root, output) if output else project_root / DEFAULT_OUTPUT,
            manifest_path=_resolve(project_root, manifest) if manifest else _default_manifest(project_root),
            git_timeout=_parse_timeout(timeout) if timeout is not None else DEFAULT_GIT_TIMEOUT,
            export_name=export_name,
        )


def _load_config_file(path: Path) -> Dict[str, Any]:
    """Read the optional YAML config file, returning an empty mapping if absent."""
    if not path.exists():
        return {}

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Failed to read {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"{path} must contain a mapping at the top level")
    return data


def _resolve(project_root: Path, value) -> Path:
    path = Path(str(value)).expanduser()
    return path if path.is_absolute() else project_root / path


def _default_manifest(project_root: Path) -> Path:
    """Pick package.json, or pyproject.toml when only that one exists."""
    for name in DEFAULT_MANIFESTS:
        candidate = project_root / name
        if candidate.exists():
            return candidate
    return project_root / DEFAULT_MANIFESTS[0]


def _parse_timeout(value) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"Invalid git timeout {value!r}: expected a number of seconds")
    if timeout <= 0:
        raise ConfigurationError(f"Invalid git timeout {value!r}: must be greater than zero")
    return timeout


def is_valid_export_name(name) -> bool:
    """True if ``name`` can be used in ``export const <name> = ...``."""
    return isinstance(name, str) and bool(_EXPORT_NAME.fullmatch(name)) and name not in RESERVED_WORDS
