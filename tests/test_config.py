"""Tests for configuration loading."""

import pytest

from build_info_cli.errors import BuildInfoError
from build_info_cli.config import (
    BuildInfoConfig,
    ConfigurationError,
    DEFAULT_GIT_TIMEOUT,
    ENV_GIT_TIMEOUT,
    ENV_OUTPUT,
    is_valid_export_name,
)


class TestBuildInfoConfig:
    """Tests for BuildInfoConfig.from_environment."""

    def test_defaults(self, tmp_path):
        config = BuildInfoConfig.from_environment(cwd=tmp_path, environ={})
        assert config.project_root == tmp_path
        assert config.output_path == tmp_path / "src" / "build.ts"
        assert config.manifest_path == tmp_path / "package.json"
        assert config.git_timeout == DEFAULT_GIT_TIMEOUT
        assert config.export_name == "buildInfo"

    def test_pyproject_used_when_no_package_json(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text('[project]\nversion = "1.0.0"\n')
        config = BuildInfoConfig.from_environment(cwd=tmp_path, environ={})
        assert config.manifest_path == tmp_path / "pyproject.toml"

    def test_config_file(self, tmp_path):
        (tmp_path / ".build-info.yml").write_text(
            "output: src/environments/build.ts\n"
            "manifest: frontend/package.json\n"
            "timeout: 2.5\n"
            "export_name: appBuild\n"
        )
        config = BuildInfoConfig.from_environment(cwd=tmp_path, environ={})
        assert config.output_path == tmp_path / "src" / "environments" / "build.ts"
        assert config.manifest_path == tmp_path / "frontend" / "package.json"
        assert config.git_timeout == 2.5
        assert config.export_name == "appBuild"

    def test_environment_overrides_file(self, tmp_path):
        (tmp_path / ".build-info.yml").write_text("output: from-file.ts\ntimeout: 3\n")
        absolute = tmp_path / "elsewhere" / "out.ts"
        config = BuildInfoConfig.from_environment(
            cwd=tmp_path, environ={ENV_OUTPUT: str(absolute), ENV_GIT_TIMEOUT: "7"},
        )
        assert config.output_path == absolute
        assert config.git_timeout == 7.0

    @pytest.mark.parametrize("value", ["soon", "0", "-1"])
    def test_invalid_timeout(self, tmp_path, value):
        with pytest.raises(ConfigurationError, match="timeout"):
            BuildInfoConfig.from_environment(cwd=tmp_path, environ={ENV_GIT_TIMEOUT: value})

    def test_invalid_export_name(self, tmp_path):
        (tmp_path / ".build-info.yml").write_text("export_name: build-info\n")
        with pytest.raises(ConfigurationError, match="export_name"):
            BuildInfoConfig.from_environment(cwd=tmp_path, environ={})

    def test_malformed_yaml(self, tmp_path):
        (tmp_path / ".build-info.yml").write_text("output: [unclosed\n")
        with pytest.raises(ConfigurationError):
            BuildInfoConfig.from_environment(cwd=tmp_path, environ={})

    def test_non_mapping_yaml(self, tmp_path):
        (tmp_path / ".build-info.yml").write_text("- just\n- a list\n")
        with pytest.raises(ConfigurationError, match="mapping"):
            BuildInfoConfig.from_environment(cwd=tmp_path, environ={})

    @pytest.mark.parametrize("name", ["class", "default", "export", "await"])
    def test_reserved_export_name(self, tmp_path, name):
        """TypeScript reserved words cannot name the exported constant."""
        (tmp_path / ".build-info.yml").write_text(f"export_name: {name}\n")
        with pytest.raises(ConfigurationError, match="reserved word"):
            BuildInfoConfig.from_environment(cwd=tmp_path, environ={})

    def test_configuration_error_is_build_info_error(self):
        assert issubclass(ConfigurationError, BuildInfoError)


class TestIsValidExportName:
    """Tests for is_valid_export_name."""

    @pytest.mark.parametrize("name", ["buildInfo", "_build", "$build", "BUILD_2"])
    def test_accepts_identifiers(self, name):
        assert is_valid_export_name(name)

    @pytest.mark.parametrize("name", ["build-info", "2build", "", "class", "build info", "buildInfo\n", 42, None])
    def test_rejects_invalid_names(self, name):
        assert not is_valid_export_name(name)

    def test_rejects_non_ascii_python_identifier(self):
        """Python accepts some identifiers the generated file must not contain."""
        assert "café".isidentifier()
        assert not is_valid_export_name("café")
