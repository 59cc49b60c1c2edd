"""Parser for `git worktree list --porcelain` output.

The format is a stream of attribute groups separated by blank lines:

    worktree /path/to/main
    HEAD 1234abcd...
    branch refs/heads/main

    worktree /path/to/main/.worktrees/feature
    HEAD 5678ef01...
    detached

Only the attributes git-wt needs are interpreted; unknown lines are ignored so
newer git versions keep parsing.
"""

import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .constants import DETACHED, HEADS_PREFIX


@dataclass(frozen=True)
class WorktreeRecord:
    """A snapshot of one entry in git's worktree registry."""

    path: str
    name: str
    branch: str | None
    is_current: bool
    is_bare: bool = False

    @property
    def is_detached(self) -> bool:
        return self.branch == DETACHED

    @property
    def short_branch(self) -> str:
        """Branch name without the refs/heads/ prefix, for display."""
        if self.branch is None:
            return "(bare)" if self.is_bare else "(unknown)"
        if self.branch.startswith(HEADS_PREFIX):
            return self.branch[len(HEADS_PREFIX):]
        return self.branch


@dataclass
class _PartialRecord:
    """Fields collected so far for the group being parsed."""

    path: str | None = None
    branch: str | None = None
    is_bare: bool = False

    def complete(self, cwd: str) -> WorktreeRecord | None:
        if not self.path:
            return None
        return WorktreeRecord(
            path=self.path,
            name=worktree_name(self.path),
            branch=self.branch,
            is_current=not self.is_bare and self.path == cwd,
            is_bare=self.is_bare,
        )


def worktree_name(path: str) -> str:
    """Return the final path segment, ignoring trailing slashes."""
    stripped = path.rstrip("/")
    if not stripped:
        return ""
    return stripped.rsplit("/", 1)[-1]


def iter_worktree_records(text: str, cwd: str | None = None) -> Iterator[WorktreeRecord]:
    """
    Lazily parse porcelain output into WorktreeRecord values.

    Args:
        text: Output of `git worktree list --porcelain`
        cwd: Directory compared against each path to set is_current
             (defaults to the process working directory)

    Yields:
        One record per group that has a `worktree` line, in input order
    """
    if cwd is None:
        cwd = os.getcwd()
    yield from _fold_lines(text.splitlines(), cwd)


def _fold_lines(lines: Iterable[str], cwd: str) -> Iterator[WorktreeRecord]:
    partial = _PartialRecord()

    for line in lines:
        if line.startswith("worktree "):
            record = partial.complete(cwd)
            if record is not None:
                yield record
            partial = _PartialRecord(path=line[len("worktree "):])
        elif line.startswith("branch "):
            partial.branch = line[len("branch "):]
        elif line == "bare":
            partial.is_bare = True
        elif line == "detached":
            partial.branch = DETACHED
        elif line.strip() == "":
            record = partial.complete(cwd)
            if record is not None:
                yield record
            partial = _PartialRecord()

    record = partial.complete(cwd)
    if record is not None:
        yield record


def parse_worktree_records(text: str, cwd: str | None = None) -> list[WorktreeRecord]:
    """Parse porcelain output into a list of WorktreeRecord values."""
    return list(iter_worktree_records(text, cwd))
