"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

import pytest

from mac_healthcheck.catalog import CATALOG
from mac_healthcheck.checks import CheckKind
from mac_healthcheck.environment import Environment

FAKE_GIT = """#!/bin/sh
case "$4" in
  user.name) echo "Ada Lovelace" ;;
  user.email) echo "ada@example.com" ;;
  *) exit 1 ;;
esac
"""


def catalog_commands() -> list:
    return [
        command
        for section in CATALOG
        for check in section.checks
        if check.kind is CheckKind.COMMAND
        for command in check.alternatives
    ]


def make_bin(directory: Path, commands: Iterable[str], git_script: Optional[str] = None) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    for command in commands:
        executable = directory / command
        body = git_script if command == "git" and git_script else "#!/bin/sh\nexit 1\n"
        executable.write_text(body)
        executable.chmod(0o755)
    return directory


@pytest.fixture
def make_env(tmp_path):
    """Build an isolated Environment with only the given commands on PATH."""

    def factory(commands: Iterable[str] = (), git_script: Optional[str] = None) -> Environment:
        bin_dir = make_bin(tmp_path / "bin", commands, git_script)
        home = tmp_path / "home"
        home.mkdir(exist_ok=True)
        applications = tmp_path / "Applications"
        applications.mkdir(exist_ok=True)
        return Environment(home=home, search_path=str(bin_dir), applications_dir=applications)

    return factory


@pytest.fixture
def provisioned_env(make_env):
    """A machine with every catalog command, config file, app, identity and key."""
    env = make_env(catalog_commands(), git_script=FAKE_GIT)
    (env.home / ".ssh").mkdir()
    for name in (".gitconfig", ".ssh/config", ".zshrc", ".ssh/id_ed25519"):
        (env.home / name).write_text("")
    for bundle in ("Visual Studio Code.app", "Docker.app", "Slack.app", "Rectangle.app", "iTerm.app"):
        (env.applications_dir / bundle).mkdir()
    return env
