"""User configuration for git-wt.

Settings are read from environment variables first, then from git config, so
they can be set per repository (`git config wt.shell zsh`) or globally
(`git config --global wt.shell zsh`). git-wt never writes configuration.
"""

import os
import shlex
from pathlib import Path

from .constants import CONFIG_KEY_SHELL, DEFAULT_SHELL, ENV_SHELL, ENV_VERBOSE
from .git_utils import get_config, has_command


def get_shell_command(repo: Path | None = None) -> list[str]:
    """
    Resolve the shell command spawned by `wt switch`.

    Precedence: $WT_SHELL, git config wt.shell, $SHELL, /bin/sh.

    Returns:
        Command and arguments as a list
    """
    configured = os.environ.get(ENV_SHELL) or get_config(CONFIG_KEY_SHELL, repo)
    if configured:
        return shlex.split(configured)

    login_shell = os.environ.get("SHELL")
    if login_shell and has_command(login_shell):
        return [login_shell]
    return [DEFAULT_SHELL]


def is_verbose_env() -> bool:
    """Whether $WT_VERBOSE asks for debug logging."""
    return os.environ.get(ENV_VERBOSE, "").strip().lower() in ("1", "true", "yes", "on")
