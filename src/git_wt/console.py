"""Shared rich consoles."""

from rich.console import Console

# soft_wrap keeps long paths on one line when output is not a terminal
_console = Console(soft_wrap=True)
_err_console = Console(stderr=True, soft_wrap=True)


def get_console() -> Console:
    """Console for regular output (stdout)."""
    return _console


def get_err_console() -> Console:
    """Console for error messages (stderr)."""
    return _err_console
