"""The fixed, ordered catalog of checks run on a provisioned development Mac."""

from __future__ import annotations

from typing import Optional, Tuple

from .checks import Check, CheckKind, Section
from .environment import Environment

SSH_KEY_FILES = ("id_ed25519", "id_rsa")


def _command(name: str, command, required: bool = True) -> Check:
    return Check(
        name=name,
        kind=CheckKind.COMMAND,
        target=command,
        required=required,
        warning="{name} not installed (optional)",
    )


def _config_file(name: str, path: str) -> Check:
    return Check(
        name=name,
        kind=CheckKind.FILE,
        target=path,
        required=False,
        ok_text="{name} configured",
        fail_text="{name} not configured",
        warning="{name} not configured at {target}",
    )


def _application(name: str, bundle: str) -> Check:
    return Check(
        name=name,
        kind=CheckKind.DIRECTORY,
        target="{applications}/" + bundle,
        required=False,
        warning="{name} not installed at {target}",
    )


def git_identity(key: str):
    """Predicate: the global git config has a non-empty value for ``key``."""

    def predicate(env: Environment) -> Tuple[bool, Optional[str]]:
        value = env.git_config(key)
        return value is not None, value

    predicate.__name__ = f"git_identity_{key.replace('.', '_')}"
    return predicate


def ssh_key_present(env: Environment) -> Tuple[bool, Optional[str]]:
    """Predicate: at least one of the usual SSH private keys exists."""
    for filename in SSH_KEY_FILES:
        key_path = env.home / ".ssh" / filename
        if key_path.is_file():
            return True, str(key_path)
    return False, None


def _git_identity_check(key: str) -> Check:
    return Check(
        name=f"Git {key}",
        kind=CheckKind.PREDICATE,
        target=git_identity(key),
        required=False,
        ok_text="{name}: {detail}",
        fail_text="{name} not set",
        warning="{name} not configured",
    )


CATALOG: Tuple[Section, ...] = (
    Section(
        "Essential Tools",
        (
            _command("Git", "git"),
            _command("Homebrew", "brew"),
            _command("Ansible", "ansible"),
            _command("Python 3", "python3"),
            _command("Node.js", "node"),
            _command("npm", "npm"),
        ),
    ),
    Section(
        "Modern CLI Tools",
        (
            _command("bat", "bat"),
            _command("eza", "eza"),
            _command("fzf", "fzf"),
            _command("zoxide", "zoxide"),
            _command("git-delta", "delta"),
            _command("direnv", "direnv"),
            _command("ripgrep (rg)", "rg"),
            _command("fd", "fd"),
            _command("jq", "jq"),
            _command("yq", "yq"),
            _command("jless", "jless"),
            _command("tree", "tree"),
            _command("htop", "htop"),
        ),
    ),
    Section(
        "AWS Tools",
        (
            _command("AWS CLI", "aws"),
            _command("eksctl", "eksctl"),
            _command("aws-iam-authenticator", "aws-iam-authenticator"),
            _command("SAM CLI", "sam"),
        ),
    ),
    Section(
        "Container & Kubernetes",
        (
            _command("Docker", "docker"),
            _command("kubectl", "kubectl"),
            _command("Helm", "helm"),
            _command("k9s", "k9s", required=False),
        ),
    ),
    Section(
        "Infrastructure as Code",
        (
            _command("Terraform", "terraform"),
            _command("terraform-docs", "terraform-docs"),
            _command("tflint", "tflint"),
        ),
    ),
    Section(
        "Git Tools",
        (
            _command("GitHub CLI", "gh"),
            _command("GitLab CLI", "glab"),
            _command("Git LFS", "git-lfs"),
        ),
    ),
    Section(
        "Code Quality",
        (
            _command("shellcheck", "shellcheck"),
            _command("yamllint", "yamllint"),
            _command("hadolint", "hadolint"),
            _command("actionlint", "actionlint"),
        ),
    ),
    Section(
        "Database Tools",
        (
            _command("MySQL Client", "mysql"),
            _command("PostgreSQL Client", "psql"),
        ),
    ),
    Section(
        "Build Tools",
        (
            _command("Maven", "mvn", required=False),
            _command("Make", "make"),
        ),
    ),
    Section(
        "Network Tools",
        (
            _command("curl", "curl"),
            _command("wget", "wget"),
            _command("mtr", "mtr"),
            _command("speedtest-cli", ("speedtest", "speedtest-cli"), required=False),
        ),
    ),
    Section(
        "Security Tools",
        (
            _command("GPG", "gpg"),
            _command("age", "age"),
            _command("SSH", "ssh"),
        ),
    ),
    Section(
        "Configuration Files",
        (
            _config_file("Git config", "{home}/.gitconfig"),
            _config_file("SSH config", "{home}/.ssh/config"),
            _config_file("Zsh config", "{home}/.zshrc"),
        ),
    ),
    Section(
        "Applications",
        (
            _application("Visual Studio Code", "Visual Studio Code.app"),
            _application("Docker Desktop", "Docker.app"),
            _application("Slack", "Slack.app"),
            _application("Rectangle", "Rectangle.app"),
            _application("iTerm2", "iTerm.app"),
        ),
    ),
    Section(
        "Git Configuration",
        (
            _git_identity_check("user.name"),
            _git_identity_check("user.email"),
        ),
    ),
    Section(
        "SSH Keys",
        (
            Check(
                name="SSH key",
                kind=CheckKind.PREDICATE,
                target=ssh_key_present,
                required=False,
                ok_text="{name} exists",
                fail_text="No {name} found",
                warning="{name} not generated",
            ),
        ),
    ),
)
