"""Test CLI functionality."""

import json
from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from conftest import FakeConfigBackend
from gitswap.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI runner."""
    return CliRunner()


@pytest.fixture
def git_config() -> Generator[FakeConfigBackend, None, None]:
    """Replace Git with an in-memory configuration."""
    backend = FakeConfigBackend()
    with patch("gitswap.cli.GitConfigBackend", return_value=backend) as mock:
        backend.factory = mock
        yield backend


@pytest.fixture
def invoke(runner: CliRunner, profiles_file: Path, git_config: FakeConfigBackend):
    """Invoke the CLI against the temporary profiles file."""
    def _invoke(*args: str):
        return runner.invoke(cli, ["--profiles-file", str(profiles_file), *args])
    return _invoke


def test_add(invoke, profiles_file: Path) -> None:
    """Test adding a profile."""
    result = invoke("add", "alice", "alice@x.com", "work")

    assert result.exit_code == 0
    assert "Added profile 'work'" in result.output
    data = json.loads(profiles_file.read_text())
    assert data == [{"alias": "work", "username": "alice", "email": "alice@x.com"}]


def test_add_duplicate(invoke) -> None:
    """Test that adding an existing alias fails."""
    invoke("add", "alice", "alice@x.com", "work")

    result = invoke("add", "bob", "bob@y.com", "work")

    assert result.exit_code == 1
    assert "already exists" in result.output


def test_add_invalid_email(invoke, profiles_file: Path) -> None:
    """Test that an invalid email is rejected."""
    result = invoke("add", "alice", "alice-at-x", "work")

    assert result.exit_code == 1
    assert "Invalid email format" in result.output
    assert not profiles_file.exists()


def test_switch(invoke, git_config: FakeConfigBackend) -> None:
    """Test switching to a profile."""
    invoke("add", "bob", "bob@y.com", "home")

    result = invoke("switch", "home")

    assert result.exit_code == 0
    assert "Switched to profile 'home'" in result.output
    assert git_config.values == {"user.name": "bob", "user.email": "bob@y.com"}
    git_config.factory.assert_called_with(scope="global")


def test_switch_local(invoke, git_config: FakeConfigBackend) -> None:
    """Test switching the repository-local identity."""
    invoke("add", "bob", "bob@y.com", "home")

    result = invoke("switch", "home", "--local")

    assert result.exit_code == 0
    git_config.factory.assert_called_with(scope="local")


def test_switch_unknown(invoke, git_config: FakeConfigBackend) -> None:
    """Test switching to an unknown profile."""
    result = invoke("switch", "home")

    assert result.exit_code == 1
    assert "Profile not found: home" in result.output
    assert git_config.values == {}


def test_switch_apply_error(invoke, git_config: FakeConfigBackend) -> None:
    """Test that Git failures give a non-zero exit code."""
    invoke("add", "bob", "bob@y.com", "home")
    git_config.fail = True

    result = invoke("switch", "home")

    assert result.exit_code == 1
    assert "Failed to set user.name" in result.output


def test_delete(invoke, profiles_file: Path) -> None:
    """Test deleting a profile."""
    invoke("add", "alice", "alice@x.com", "work")
    invoke("add", "bob", "bob@y.com", "home")

    result = invoke("delete", "work")

    assert result.exit_code == 0
    assert "Deleted profile 'work'" in result.output
    data = json.loads(profiles_file.read_text())
    assert [p["alias"] for p in data] == ["home"]


def test_delete_unknown(invoke) -> None:
    """Test deleting an unknown profile."""
    result = invoke("delete", "work")

    assert result.exit_code == 1
    assert "Profile not found: work" in result.output


def test_current(invoke, git_config: FakeConfigBackend) -> None:
    """Test showing the current identity with its alias."""
    invoke("add", "bob", "bob@y.com", "home")
    invoke("switch", "home")

    result = invoke("current")

    assert result.exit_code == 0
    assert "bob <bob@y.com>" in result.output
    assert "(home)" in result.output


def test_current_unaliased(invoke, git_config: FakeConfigBackend) -> None:
    """Test showing an identity that is not stored as a profile."""
    git_config.values.update({"user.name": "carol", "user.email": "carol@z.com"})

    result = invoke("current")

    assert result.exit_code == 0
    assert "carol <carol@z.com>" in result.output


def test_current_none_set(invoke) -> None:
    """Test showing the current identity when none is configured."""
    result = invoke("current")

    assert result.exit_code == 0
    assert "No Git identity configured" in result.output


def test_list(invoke) -> None:
    """Test listing profiles."""
    invoke("add", "alice", "alice@x.com", "work")
    invoke("add", "bob", "bob@y.com", "home")

    result = invoke("list")

    assert result.exit_code == 0
    assert "work" in result.output
    assert "home" in result.output
    assert result.output.index("work") < result.output.index("home")


def test_list_empty(invoke) -> None:
    """Test listing when there are no profiles."""
    result = invoke("list")

    assert result.exit_code == 0
    assert "No profiles found" in result.output


def test_corrupt_profiles_file(invoke, profiles_file: Path) -> None:
    """Test that a corrupt profiles file is reported."""
    profiles_file.parent.mkdir(parents=True, exist_ok=True)
    profiles_file.write_text("{broken")

    result = invoke("list")

    assert result.exit_code == 1
    assert "Failed to parse profiles file" in result.output


def test_no_command_shows_help(invoke) -> None:
    """Test that running without a command outside a terminal prints help."""
    result = invoke()

    assert result.exit_code == 0
    assert "Usage:" in result.output
    assert "switch" in result.output


def test_profiles_file_from_environment(
    runner: CliRunner, temp_home: Path, git_config: FakeConfigBackend
) -> None:
    """Test selecting the profiles file with GITSWAP_PROFILES_FILE."""
    custom = temp_home / "custom.json"

    result = runner.invoke(
        cli,
        ["add", "alice", "alice@x.com", "work"],
        env={"GITSWAP_PROFILES_FILE": str(custom)},
    )

    assert result.exit_code == 0
    assert json.loads(custom.read_text())[0]["alias"] == "work"


def test_undecodable_profiles_file(invoke, profiles_file: Path) -> None:
    """Test that a profiles file that is not UTF-8 is reported as corrupt."""
    profiles_file.parent.mkdir(parents=True, exist_ok=True)
    profiles_file.write_bytes(b'[{"alias": "w\xff"}]')

    result = invoke("list")

    assert result.exit_code == 1
    assert "Failed to parse profiles file" in result.output
    assert "Unexpected error" not in result.output


def test_add_padded_alias(invoke, profiles_file: Path) -> None:
    """Test that an alias with surrounding whitespace is rejected."""
    result = invoke("add", "alice", "alice@x.com", " work ")

    assert result.exit_code == 1
    assert "whitespace" in result.output
    assert not profiles_file.exists()
