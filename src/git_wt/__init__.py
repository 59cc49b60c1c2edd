"""git-wt: name-addressed git worktrees under .worktrees/."""

__version__ = "0.3.0"
