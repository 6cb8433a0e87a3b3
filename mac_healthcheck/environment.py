"""Read-only view of the host a health check runs against."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from pathlib import Path
import shutil
import subprocess
from typing import Optional

logger = logging.getLogger(__name__)

GIT_CONFIG_TIMEOUT = 5


@dataclass
class Environment:
    home: Path
    search_path: Optional[str]
    applications_dir: Path = Path("/Applications")

    def which(self, command: str) -> Optional[str]:
        return shutil.which(command, path=self.search_path)

    def resolve(self, target: str) -> Path:
        """Expand ``{home}`` and ``{applications}`` placeholders in a path template."""
        return Path(target.format(home=self.home, applications=self.applications_dir))

    def git_config(self, key: str) -> Optional[str]:
        """Return the global git config value for ``key``, or None when unset."""
        git = self.which("git")
        if git is None:
            logger.debug("git not on search path, cannot read %s", key)
            return None
        env = dict(os.environ)
        env["HOME"] = str(self.home)
        if self.search_path is not None:
            env["PATH"] = self.search_path
        try:
            completed = subprocess.run(
                [git, "config", "--global", "--get", key],
                capture_output=True,
                text=True,
                env=env,
                timeout=GIT_CONFIG_TIMEOUT,
            )
        except (OSError, subprocess.SubprocessError) as exc:
            logger.debug("git config --global %s failed: %s", key, exc)
            return None
        if completed.returncode != 0:
            return None
        value = completed.stdout.strip()
        return value or None


def gather_environment() -> Environment:
    """Describe the current user's machine."""
    return Environment(home=Path.home(), search_path=os.environ.get("PATH"))
