"""Tests for reading the host project's version."""

import json

from build_info_cli.core.manifest import read_manifest_version


class TestReadManifestVersion:
    """Tests for read_manifest_version."""

    def test_package_json(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text(json.dumps({"name": "app", "version": "2.3.1"}))
        assert read_manifest_version(path).value == "2.3.1"

    def test_pyproject_project_table(self, tmp_path):
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "app"\nversion = "0.4.0"\n')
        assert read_manifest_version(path).value == "0.4.0"

    def test_pyproject_poetry_table(self, tmp_path):
        path = tmp_path / "pyproject.toml"
        path.write_text('[tool.poetry]\nname = "app"\nversion = "1.2.3"\n')
        assert read_manifest_version(path).value == "1.2.3"

    def test_missing_file_is_absent(self, tmp_path, capsys):
        result = read_manifest_version(tmp_path / "package.json")
        assert not result.present
        assert "Error reading version" in capsys.readouterr().out

    def test_invalid_json_is_absent(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text("{not json")
        assert not read_manifest_version(path).present

    def test_missing_version_is_absent(self, tmp_path, capsys):
        path = tmp_path / "package.json"
        path.write_text(json.dumps({"name": "app"}))
        assert not read_manifest_version(path).present
        assert "No version found" in capsys.readouterr().out

    def test_non_string_version_is_absent(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text(json.dumps({"version": 3}))
        assert not read_manifest_version(path).present
