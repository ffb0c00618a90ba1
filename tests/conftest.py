"""Shared fixtures for build-info tests."""

import json
from datetime import datetime

import pytest

from build_info_cli.config import BuildInfoConfig, ENV_GIT_TIMEOUT, ENV_MANIFEST, ENV_OUTPUT
from build_info_cli.core.metadata import MetadataSource
from build_info_cli.core.models import LookupResult


FIXED_TIME = datetime(2026, 3, 7, 9, 5, 3)


class FakeMetadataSource(MetadataSource):
    """Metadata source returning canned results and recording calls."""

    def __init__(self, user="Jane Doe", revision="abc1234"):
        self.user = user
        self.revision = revision
        self.calls = []

    async def current_user(self):
        self.calls.append("user")
        return LookupResult(self.user)

    async def current_revision(self):
        self.calls.append("revision")
        return LookupResult(self.revision)


@pytest.fixture
def fake_source():
    return FakeMetadataSource()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's environment out of configuration tests."""
    for name in (ENV_OUTPUT, ENV_MANIFEST, ENV_GIT_TIMEOUT):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def project(tmp_path):
    """A minimal front-end project with package.json and src/."""
    (tmp_path / "package.json").write_text(json.dumps({"name": "demo", "version": "2.3.1"}))
    (tmp_path / "src").mkdir()
    return tmp_path


@pytest.fixture
def config(project):
    return BuildInfoConfig.from_environment(cwd=project, environ={})
