"""Name-keyed view over git's worktree registry.

git owns the registry, so nothing here is cached: every call re-runs
`git worktree list --porcelain` and returns a fresh snapshot.
"""

from pathlib import Path

from .git_utils import list_worktrees_porcelain
from .porcelain import WorktreeRecord, parse_worktree_records


def list_all(repo: Path | None = None) -> list[WorktreeRecord]:
    """List all worktrees known to git, in git's order.

    Returns:
        Records for every worktree; empty if git could not be queried.
    """
    return parse_worktree_records(list_worktrees_porcelain(repo))


def find_by_name(name: str, repo: Path | None = None) -> WorktreeRecord | None:
    """Find a worktree by name (final path segment).

    Names are not unique across parent directories; the first match wins.
    """
    for record in list_all(repo):
        if record.name == name:
            return record
    return None


def worktree_names(repo: Path | None = None) -> list[str]:
    """Names of all worktrees, used for shell completion."""
    return [record.name for record in list_all(repo) if record.name]


def find_by_path(path: Path | str, repo: Path | None = None) -> WorktreeRecord | None:
    """Find the worktree git registered at exactly `path`."""
    wanted = str(path)
    for record in list_all(repo):
        if record.path == wanted:
            return record
    return None
