"""Shared fixtures for git-wt tests."""

import logging
import subprocess
from collections.abc import Iterator
from pathlib import Path

import pytest


def run_git(*args: str, cwd: Path) -> str:
    """Run a git command in the test repository and return its stdout."""
    result = subprocess.run(
        ["git", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch) -> Iterator[None]:
    """Keep user-level git config and wt settings out of every test."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    monkeypatch.delenv("GIT_CONFIG_GLOBAL", raising=False)
    monkeypatch.delenv("WT_SHELL", raising=False)
    monkeypatch.delenv("WT_VERBOSE", raising=False)
    monkeypatch.delenv("WT_ACTIVE_WORKTREE", raising=False)

    yield

    # CliRunner swaps stderr; drop handlers bound to its closed streams
    logger = logging.getLogger("git_wt")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def temp_git_repo(tmp_path: Path, monkeypatch) -> Path:
    """Create a git repository with one commit on `main` and chdir into it."""
    repo = (tmp_path / "repo").resolve()
    repo.mkdir()
    run_git("init", "-b", "main", cwd=repo)
    run_git("config", "user.email", "test@example.com", cwd=repo)
    run_git("config", "user.name", "Test", cwd=repo)
    run_git("config", "commit.gpgsign", "false", cwd=repo)
    (repo / "README.md").write_text("test")
    run_git("add", ".", cwd=repo)
    run_git("commit", "-m", "init", cwd=repo)

    monkeypatch.chdir(repo)
    return repo
