"""Git operations wrapper utilities."""

import subprocess
from pathlib import Path
from typing import Dict, List, Optional

from .exceptions import GitError
from .logging_config import get_logger

logger = get_logger(__name__)


def run_command(
    cmd: List[str],
    cwd: Optional[Path] = None,
    check: bool = True,
    capture: bool = False,
    env: Optional[Dict[str, str]] = None,
) -> subprocess.CompletedProcess:
    """
    Run a command and wait for it to finish.

    Args:
        cmd: Command and arguments as a list
        cwd: Working directory for the command
        check: Raise exception on non-zero exit code
        capture: Capture stdout/stderr as text
        env: Full environment for the child (defaults to ours)

    Returns:
        CompletedProcess instance

    Raises:
        GitError: If command fails and check=True, or the executable is missing
    """
    kwargs = {}
    if capture:
        kwargs["stdout"] = subprocess.PIPE
        kwargs["stderr"] = subprocess.PIPE
        kwargs["text"] = True

    logger.debug("run: %s (cwd=%s)", " ".join(cmd), cwd or ".")
    try:
        result = subprocess.run(cmd, cwd=cwd, env=env, check=False, **kwargs)
    except FileNotFoundError as e:
        raise GitError(f"Command not found: {cmd[0]}") from e

    if result.returncode != 0:
        logger.debug("exit %d: %s", result.returncode, " ".join(cmd))
        if check:
            output = (result.stderr or result.stdout or "").strip() if capture else ""
            message = f"Command failed: {' '.join(cmd)}"
            if output:
                message += f"\n{output}"
            raise GitError(message)
    return result


def git_command(
    *args: str,
    repo: Optional[Path] = None,
    check: bool = True,
    capture: bool = True,
) -> subprocess.CompletedProcess:
    """
    Run a git command.

    Args:
        *args: Git command arguments
        repo: Directory to run git in (defaults to the process working directory)
        check: Raise exception on non-zero exit code
        capture: Capture stdout/stderr

    Returns:
        CompletedProcess instance

    Raises:
        GitError: If git command fails
    """
    cmd = ["git"] + list(args)
    return run_command(cmd, cwd=repo, check=check, capture=capture)


def get_main_repo_root(path: Optional[Path] = None) -> Path:
    """
    Get the root of the main working tree, even from inside a linked worktree.

    The common git directory is shared by every worktree. Its parent is the
    main checkout unless `core.worktree` points elsewhere, as it does for
    submodules whose git directory lives under the superproject.

    Raises:
        GitError: If not in a git repository
    """
    try:
        result = git_command(
            "rev-parse", "--path-format=absolute", "--git-common-dir", repo=path
        )
    except GitError:
        raise GitError("Not in a git repository")
    common_dir = Path(result.stdout.strip())

    configured = git_command(
        "config", "--file", str(common_dir / "config"), "--get", "core.worktree",
        repo=path, check=False,
    )
    if configured.returncode == 0 and configured.stdout.strip():
        # Relative values are relative to the git directory
        return (common_dir / configured.stdout.strip()).resolve()
    if common_dir.name == ".git":
        return common_dir.parent
    # Bare repository: the common dir is the repository itself
    return common_dir


def get_current_branch(repo: Optional[Path] = None) -> str:
    """
    Get the branch checked out in `repo`.

    Returns:
        Branch name, or an empty string in detached HEAD state
    """
    result = git_command("branch", "--show-current", repo=repo)
    return result.stdout.strip()


def get_config(key: str, repo: Optional[Path] = None) -> Optional[str]:
    """
    Get a git config value.

    Args:
        key: Config key
        repo: Repository path

    Returns:
        Config value or None if not found (or not in a repository)
    """
    try:
        result = git_command("config", "--get", key, repo=repo, check=False)
    except GitError:
        return None
    if result.returncode == 0:
        return result.stdout.strip()
    return None


def list_worktrees_porcelain(repo: Optional[Path] = None) -> str:
    """
    Return the raw output of `git worktree list --porcelain`.

    A failed call yields an empty string: callers treat it as "no worktrees".
    """
    try:
        result = git_command("worktree", "list", "--porcelain", repo=repo, check=False)
    except GitError as e:
        logger.debug("worktree list unavailable: %s", e)
        return ""
    if result.returncode != 0:
        logger.debug("worktree list failed: %s", (result.stderr or "").strip())
        return ""
    return result.stdout


def has_command(name: str) -> bool:
    """
    Check if a command is available in PATH.

    Args:
        name: Command name

    Returns:
        True if command exists, False otherwise
    """
    from shutil import which
    return bool(which(name))
