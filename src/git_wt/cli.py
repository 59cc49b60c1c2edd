"""Typer-based CLI interface for git-wt."""

from typing import NoReturn

import typer
from rich.markup import escape

from . import __version__
from .config import is_verbose_env
from .console import get_console, get_err_console
from .core import (
    create_worktree,
    list_worktrees,
    remove_worktree,
    rename_worktree,
    resolve_switch_target,
    switch_worktree,
)
from .exceptions import WtError
from .logging_config import setup_logging
from .registry import worktree_names

app = typer.Typer(
    name="wt",
    help="Manage git worktrees under .worktrees/ by name",
    no_args_is_help=True,
    add_completion=True,
)
console = get_console()
err_console = get_err_console()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"git-wt version {__version__}")
        raise typer.Exit()


def complete_worktree_names() -> list[str]:
    """Autocomplete function for worktree names."""
    try:
        return worktree_names()
    except Exception:
        return []


def fail(error: Exception) -> NoReturn:
    """Report an error on stderr and exit with status 1."""
    err_console.print(f"[bold red]Error:[/bold red] {escape(str(error))}", highlight=False)
    raise typer.Exit(code=1)


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log every git command to stderr",
    ),
) -> None:
    """Manage git worktrees under .worktrees/ by name."""
    setup_logging(verbose=verbose or is_verbose_env())


@app.command()
def create(
    name: str = typer.Argument(..., help="Name for the new worktree and its branch"),
) -> None:
    """
    Create a new worktree with a branch of the same name.

    The worktree is placed at <repo>/.worktrees/<name>.

    Example:
        wt create feature-branch
    """
    try:
        create_worktree(name)
    except WtError as e:
        fail(e)


@app.command(name="list")
def list_cmd() -> None:
    """
    List all worktrees. The current one is marked with '*'.

    Example:
        wt list
    """
    list_worktrees()


@app.command(name="ls", hidden=True)
def ls_cmd() -> None:
    """Alias for list."""
    list_worktrees()


@app.command()
def switch(
    name: str = typer.Argument(
        ...,
        help="Worktree to open a shell in",
        autocompletion=complete_worktree_names,
    ),
) -> None:
    """
    Open a shell inside a worktree.

    The shell is $WT_SHELL, `git config wt.shell`, or $SHELL, in that order.
    Exit it to return; its exit code becomes wt's exit code.

    Example:
        wt switch feature-branch
    """
    try:
        code = switch_worktree(name)
    except WtError as e:
        fail(e)
    raise typer.Exit(code=code)


@app.command()
def remove(
    name: str = typer.Argument(
        ...,
        help="Worktree to remove",
        autocompletion=complete_worktree_names,
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Remove even with uncommitted changes",
    ),
) -> None:
    """
    Remove a worktree. Its branch is kept.

    Example:
        wt remove feature-branch
        wt remove feature-branch --force
    """
    try:
        remove_worktree(name, force=force)
    except WtError as e:
        fail(e)


@app.command()
def rename(
    old_name: str = typer.Argument(
        ...,
        help="Current worktree name",
        autocompletion=complete_worktree_names,
    ),
    new_name: str = typer.Argument(..., help="New worktree and branch name"),
) -> None:
    """
    Rename a worktree and its branch.

    Moves .worktrees/<old-name> to .worktrees/<new-name>, then renames the
    branch checked out there. If the branch rename fails the worktree stays
    at the new path and the error explains how to finish by hand.

    Example:
        wt rename feature-x feature-y
    """
    try:
        rename_worktree(old_name, new_name)
    except WtError as e:
        fail(e)


@app.command()
def path(
    name: str = typer.Argument(
        ...,
        help="Worktree name",
        autocompletion=complete_worktree_names,
    ),
) -> None:
    """
    Print the absolute path of a worktree (for scripting).

    Example:
        cd "$(wt path feature-branch)"
    """
    try:
        worktree_path = resolve_switch_target(name)
    except WtError as e:
        fail(e)
    # Plain print: machine-consumed output must not be styled or wrapped
    print(worktree_path)
