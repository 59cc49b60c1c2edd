"""Custom exceptions for git-wt."""


class WtError(Exception):
    """Base exception for all git-wt errors."""

    pass


class GitError(WtError):
    """Raised when a git command fails or git cannot be run."""

    pass


class WorktreeExistsError(WtError):
    """Raised when a worktree directory already exists at the target path."""

    def __init__(self, name: str, path: object = None):
        self.name = name
        self.path = path
        message = f"Worktree '{name}' already exists"
        if path is not None:
            message += f" at {path}"
        super().__init__(message)


class WorktreeNotFoundError(WtError):
    """Raised when a referenced worktree does not exist."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Worktree '{name}' does not exist")


class RegistryInconsistencyError(WtError):
    """Raised when a worktree directory exists but git has no record of it."""

    def __init__(self, name: str, path: object):
        self.name = name
        self.path = path
        super().__init__(
            f"Directory {path} exists but git has no worktree registered there ('{name}').\n"
            f"Hint: inspect 'git worktree list' and run 'git worktree prune' or "
            f"'git worktree repair' to reconcile."
        )


class PartialRenameError(GitError):
    """Raised when a worktree was moved but its branch could not be renamed.

    The worktree is left at the new path still carrying the old branch.
    """

    def __init__(self, new_path: object, old_branch: str, new_branch: str, detail: str = ""):
        self.new_path = new_path
        self.old_branch = old_branch
        self.new_branch = new_branch
        message = (
            f"Worktree moved to {new_path} but branch '{old_branch}' "
            f"could not be renamed to '{new_branch}'.\n"
            f"Fix manually: git -C {new_path} branch -m {new_branch}"
        )
        if detail:
            message += f"\n{detail}"
        super().__init__(message)


class InvalidWorktreeNameError(WtError):
    """Raised when a name is not a single path segment under .worktrees/."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Invalid worktree name '{name}': use a single path segment "
            f"(no '/', not '.' or '..')"
        )
