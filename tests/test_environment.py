import subprocess
from pathlib import Path
from unittest.mock import patch

from mac_healthcheck.catalog import ssh_key_present
from mac_healthcheck.environment import Environment, gather_environment

from conftest import FAKE_GIT


def test_resolve_placeholders(tmp_path):
    env = Environment(home=tmp_path / "home", search_path="", applications_dir=tmp_path / "Apps")
    assert env.resolve("{home}/.zshrc") == tmp_path / "home" / ".zshrc"
    assert env.resolve("{applications}/Slack.app") == tmp_path / "Apps" / "Slack.app"


def test_which_respects_search_path(make_env):
    env = make_env(["jq"])
    assert env.which("jq") is not None
    assert env.which("brew") is None


def test_git_config_reads_value(make_env):
    env = make_env(["git"], git_script=FAKE_GIT)
    assert env.git_config("user.name") == "Ada Lovelace"
    assert env.git_config("core.editor") is None


def test_git_config_without_git(make_env):
    assert make_env().git_config("user.name") is None


def test_git_config_swallows_subprocess_errors(make_env):
    env = make_env(["git"])
    with patch("mac_healthcheck.environment.subprocess.run", side_effect=subprocess.TimeoutExpired("git", 5)):
        assert env.git_config("user.name") is None


def test_git_config_blank_value_is_unset(make_env):
    env = make_env(["git"])
    completed = subprocess.CompletedProcess(args=[], returncode=0, stdout="  \n", stderr="")
    with patch("mac_healthcheck.environment.subprocess.run", return_value=completed) as run:
        assert env.git_config("user.email") is None
    assert run.call_args.kwargs["env"]["HOME"] == str(env.home)


def test_ssh_key_present(make_env):
    env = make_env()
    assert ssh_key_present(env) == (False, None)
    (env.home / ".ssh").mkdir()
    (env.home / ".ssh" / "id_rsa").write_text("")
    assert ssh_key_present(env) == (True, str(env.home / ".ssh" / "id_rsa"))


def test_gather_environment(monkeypatch):
    monkeypatch.setenv("PATH", "/opt/homebrew/bin:/usr/bin")
    env = gather_environment()
    assert env.search_path == "/opt/homebrew/bin:/usr/bin"
    assert env.home == Path.home()
    assert env.applications_dir == Path("/Applications")
