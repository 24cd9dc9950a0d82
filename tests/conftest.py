"""Test configuration and fixtures."""

from collections.abc import Generator
from pathlib import Path
from typing import Optional

import pytest

from gitswap.exceptions import ApplyError
from gitswap.git import ConfigBackend, IdentityApplier
from gitswap.profile import ProfileStore


class FakeConfigBackend(ConfigBackend):
    """In-memory Git configuration."""

    def __init__(self, scope: str = "global", cwd: Optional[Path] = None) -> None:
        self.scope = scope
        self.values: dict[str, str] = {}
        self.fail = False

    def get_value(self, key: str) -> Optional[str]:
        if self.fail:
            raise ApplyError(f"Failed to read {key}")
        return self.values.get(key)

    def set_value(self, key: str, value: str) -> None:
        if self.fail:
            raise ApplyError(f"Failed to set {key}")
        self.values[key] = value


@pytest.fixture
def temp_home(tmp_path: Path, monkeypatch) -> Generator[Path, None, None]:
    """Point gitswap at a temporary home directory."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("GITSWAP_HOME", str(tmp_path / ".gitswap"))
    monkeypatch.delenv("GITSWAP_PROFILES_FILE", raising=False)
    yield tmp_path


@pytest.fixture
def profiles_file(temp_home: Path) -> Path:
    return temp_home / ".gitswap" / "profiles.json"


@pytest.fixture
def store(profiles_file: Path) -> ProfileStore:
    """Create an empty profile store."""
    return ProfileStore(profiles_file).load()


@pytest.fixture
def backend() -> FakeConfigBackend:
    return FakeConfigBackend()


@pytest.fixture
def applier(backend: FakeConfigBackend) -> IdentityApplier:
    return IdentityApplier(backend)
