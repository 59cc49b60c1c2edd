"""Constants and default values for git-wt."""

from pathlib import Path

# Managed subdirectory (relative to the main repository root) holding all worktrees
WORKTREES_DIR = ".worktrees"

# Branch value recorded for worktrees with a detached HEAD
DETACHED = "detached"

# Prefix git uses for local branch refs in porcelain output
HEADS_PREFIX = "refs/heads/"

# Environment variable exported to the shell spawned by `wt switch`
ENV_ACTIVE_WORKTREE = "WT_ACTIVE_WORKTREE"

# Environment variables read by the configuration layer
ENV_SHELL = "WT_SHELL"
ENV_VERBOSE = "WT_VERBOSE"

# Git config key for the shell used by `wt switch`
CONFIG_KEY_SHELL = "wt.shell"

DEFAULT_SHELL = "/bin/sh"


def managed_root(repo_path: Path) -> Path:
    """Return the managed worktree root for a repository."""
    return repo_path / WORKTREES_DIR


def managed_worktree_path(repo_path: Path, name: str) -> Path:
    """
    Return the path of a managed worktree.

    Format: <repo>/.worktrees/<name>
    Example: /Users/dave/myproject -> /Users/dave/myproject/.worktrees/fix-auth

    Args:
        repo_path: Path to the main repository root
        name: Worktree name

    Returns:
        Path where the worktree lives (whether or not it exists)
    """
    return managed_root(repo_path) / name
