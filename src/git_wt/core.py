"""Core business logic for git-wt operations.

Every operation is single-shot: it reads git's registry fresh, checks the
filesystem, and issues git commands in order. Nothing is persisted between
runs, so an interrupted operation must be repaired with git directly.
"""

import os
from pathlib import Path

from rich.markup import escape

from .config import get_shell_command
from .console import get_console
from .constants import ENV_ACTIVE_WORKTREE, managed_root, managed_worktree_path
from .exceptions import (
    GitError,
    InvalidWorktreeNameError,
    PartialRenameError,
    RegistryInconsistencyError,
    WorktreeExistsError,
    WorktreeNotFoundError,
)
from .git_utils import get_current_branch, get_main_repo_root, git_command, run_command
from .logging_config import get_logger
from .porcelain import WorktreeRecord
from .registry import find_by_path, list_all

console = get_console()
logger = get_logger(__name__)


def validate_worktree_name(name: str) -> None:
    """
    Check that `name` is a single path segment under the managed root.

    Names are both directory names and branch names, and `list` derives them
    from the final path segment, so `feature/x` or `..` could never be
    addressed again.

    Raises:
        InvalidWorktreeNameError: If the name is empty, `.`, `..` or contains `/`
    """
    if not name or name in (".", "..") or "/" in name:
        raise InvalidWorktreeNameError(name)


def create_worktree(name: str) -> Path:
    """
    Create a new worktree on a new branch, both named `name`.

    Args:
        name: Worktree and branch name

    Returns:
        Path to the created worktree

    Raises:
        InvalidWorktreeNameError: If `name` is not a single path segment
        WorktreeExistsError: If .worktrees/<name> already exists
        GitError: If git refuses to create the branch or worktree
    """
    validate_worktree_name(name)
    repo = get_main_repo_root()
    root = managed_root(repo)
    if not root.exists():
        logger.debug("creating managed root %s", root)
        root.mkdir(parents=True, exist_ok=True)

    worktree_path = managed_worktree_path(repo, name)
    if worktree_path.exists():
        raise WorktreeExistsError(name, worktree_path)

    git_command("worktree", "add", "-b", name, str(worktree_path), repo=repo)

    console.print(
        f"[bold green]✓[/bold green] Created worktree '{escape(name)}' at "
        f"[blue]{escape(str(worktree_path))}[/blue]"
    )
    return worktree_path


def list_worktrees() -> list[WorktreeRecord]:
    """
    Print all worktrees, marking the current one.

    Never fails: outside a repository, or when git cannot be queried, it
    reports that no worktrees were found.

    Returns:
        The records that were printed
    """
    try:
        repo: Path | None = get_main_repo_root()
    except GitError:
        repo = None

    worktrees = list_all(repo) if repo is not None else []
    if not worktrees:
        console.print("[yellow]No worktrees found[/yellow]")
        return worktrees

    console.print("[bold cyan]Worktrees:[/bold cyan]")
    for wt in worktrees:
        console.print(format_worktree_line(wt, repo))
    return worktrees


def format_worktree_line(wt: WorktreeRecord, repo: Path | None = None) -> str:
    """Render one record as `<marker><name> -> <branch> (<path>)` with markup."""
    indicator = "[bold green]*[/bold green] " if wt.is_current else "  "
    shown_path = os.path.relpath(wt.path, repo) if repo is not None else wt.path
    return (
        f"{indicator}{escape(wt.name)} -> [green]{escape(wt.short_branch)}[/green] "
        f"([blue]{escape(shown_path)}[/blue])"
    )


def resolve_switch_target(name: str) -> Path:
    """
    Resolve a worktree name to its absolute directory.

    Raises:
        WorktreeNotFoundError: If .worktrees/<name> does not exist
    """
    validate_worktree_name(name)
    worktree_path = managed_worktree_path(get_main_repo_root(), name)
    if not worktree_path.is_dir():
        raise WorktreeNotFoundError(name)
    return worktree_path.resolve()


def switch_worktree(name: str) -> int:
    """
    Open an interactive shell inside a worktree.

    Blocks until the shell exits. The shell sees the worktree name in
    $WT_ACTIVE_WORKTREE.

    Returns:
        The shell's exit status

    Raises:
        WorktreeNotFoundError: If the worktree does not exist (no shell is started)
    """
    worktree_path = resolve_switch_target(name)
    shell = get_shell_command(worktree_path)

    env = os.environ.copy()
    env[ENV_ACTIVE_WORKTREE] = name

    console.print(
        f"Switching to worktree '{escape(name)}' at [blue]{escape(str(worktree_path))}[/blue]"
    )
    console.print("[dim]Exit the shell to return.[/dim]")
    result = run_command(shell, cwd=worktree_path, check=False, env=env)
    logger.debug("shell for %s exited with %d", name, result.returncode)
    return result.returncode


def remove_worktree(name: str, force: bool = False) -> None:
    """
    Remove a worktree. Its branch is kept.

    Args:
        name: Worktree name
        force: Pass --force to git (discards uncommitted changes)

    Raises:
        WorktreeNotFoundError: If .worktrees/<name> does not exist
        GitError: If git refuses to remove the worktree
    """
    validate_worktree_name(name)
    repo = get_main_repo_root()
    worktree_path = managed_worktree_path(repo, name)
    if not worktree_path.exists():
        raise WorktreeNotFoundError(name)

    rm_args = ["worktree", "remove", str(worktree_path)]
    if force:
        rm_args.append("--force")
    git_command(*rm_args, repo=repo)

    console.print(f"[bold green]✓[/bold green] Removed worktree '{escape(name)}'")


def rename_worktree(old_name: str, new_name: str) -> Path:
    """
    Rename a worktree: move its directory, then rename its branch.

    git has no single command for this, so the steps run in order:

    1. check that old exists, new does not, and git knows the old worktree
    2. `git worktree move` the directory
    3. `git branch -m <new>` inside the moved worktree

    A failure in step 3 is not rolled back. The worktree stays at the new
    path on its old branch and PartialRenameError says how to finish by hand.

    Returns:
        Path of the renamed worktree

    Raises:
        InvalidWorktreeNameError: If either name is not a single path segment
        WorktreeNotFoundError: If .worktrees/<old_name> does not exist
        WorktreeExistsError: If .worktrees/<new_name> already exists
        RegistryInconsistencyError: If git has no worktree registered at the old path
        GitError: If the move fails (nothing changed)
        PartialRenameError: If the move succeeded but the branch rename failed
    """
    validate_worktree_name(old_name)
    validate_worktree_name(new_name)
    repo = get_main_repo_root()
    old_path = managed_worktree_path(repo, old_name)
    new_path = managed_worktree_path(repo, new_name)

    if not old_path.exists():
        raise WorktreeNotFoundError(old_name)
    if new_path.exists():
        raise WorktreeExistsError(new_name, new_path)

    record = find_by_path(old_path, repo)
    if record is None:
        raise RegistryInconsistencyError(old_name, old_path)

    git_command("worktree", "move", str(old_path), str(new_path), repo=repo)
    logger.debug("moved %s -> %s", old_path, new_path)

    if record.is_detached:
        console.print(
            f"[yellow]![/yellow] Worktree '{escape(old_name)}' has a detached HEAD; "
            "no branch to rename"
        )
    else:
        old_branch = record.short_branch
        try:
            old_branch = get_current_branch(new_path) or old_branch
            git_command("branch", "-m", new_name, repo=new_path)
        except GitError as e:
            raise PartialRenameError(new_path, old_branch, new_name, detail=str(e)) from e

    console.print(
        f"[bold green]✓[/bold green] Renamed worktree '{escape(old_name)}' "
        f"to '{escape(new_name)}'"
    )
    return new_path
