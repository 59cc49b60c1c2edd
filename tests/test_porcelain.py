"""Tests for the porcelain parser."""

import dataclasses

import pytest

from git_wt.constants import DETACHED
from git_wt.porcelain import (
    WorktreeRecord,
    iter_worktree_records,
    parse_worktree_records,
    worktree_name,
)

SAMPLE = """\
worktree /repo
HEAD 1111111111111111111111111111111111111111
branch refs/heads/main

worktree /repo/.worktrees/feature-x
HEAD 2222222222222222222222222222222222222222
branch refs/heads/feature-x

worktree /repo/.worktrees/scratch
HEAD 3333333333333333333333333333333333333333
detached

"""


def test_parse_multiple_groups() -> None:
    """Each group becomes one record, in input order."""
    records = parse_worktree_records(SAMPLE, cwd="/elsewhere")

    assert [r.path for r in records] == [
        "/repo",
        "/repo/.worktrees/feature-x",
        "/repo/.worktrees/scratch",
    ]
    assert [r.name for r in records] == ["repo", "feature-x", "scratch"]
    assert records[0].branch == "refs/heads/main"
    assert records[1].branch == "refs/heads/feature-x"
    assert records[2].branch == DETACHED
    assert records[2].is_detached


def test_branch_is_stored_raw() -> None:
    """The refs/heads/ prefix is kept on the record and only stripped for display."""
    record = parse_worktree_records("worktree /r\nbranch refs/heads/a/b\n", cwd="/")[0]
    assert record.branch == "refs/heads/a/b"
    assert record.short_branch == "a/b"


def test_empty_input_yields_nothing() -> None:
    assert parse_worktree_records("") == []
    assert parse_worktree_records("\n\n\n") == []


def test_final_group_without_blank_line() -> None:
    """The last group is emitted at end of input."""
    records = parse_worktree_records("worktree /a\nbranch refs/heads/a", cwd="/")
    assert len(records) == 1
    assert records[0].branch == "refs/heads/a"


def test_worktree_line_flushes_previous_group() -> None:
    """A new `worktree` line closes the open record even without a blank line."""
    text = "worktree /a\nbranch refs/heads/a\nworktree /b\nbranch refs/heads/b\n"
    records = parse_worktree_records(text, cwd="/")
    assert [(r.name, r.branch) for r in records] == [
        ("a", "refs/heads/a"),
        ("b", "refs/heads/b"),
    ]


def test_last_occurrence_wins() -> None:
    text = "worktree /a\nbranch refs/heads/one\ndetached\nbranch refs/heads/two\n"
    record = parse_worktree_records(text, cwd="/")[0]
    assert record.branch == "refs/heads/two"


def test_group_without_path_is_dropped() -> None:
    """Orphan attribute lines never produce a record."""
    text = "branch refs/heads/orphan\nHEAD abc\n\nworktree /a\nbranch refs/heads/a\n"
    records = parse_worktree_records(text, cwd="/")
    assert [r.path for r in records] == ["/a"]


def test_unknown_lines_are_ignored() -> None:
    text = (
        "worktree /a\n"
        "HEAD abc\n"
        "branch refs/heads/a\n"
        "locked reason here\n"
        "prunable gitdir file points to non-existent location\n"
        "some-future-field 42\n"
    )
    records = parse_worktree_records(text, cwd="/")
    assert records == [
        WorktreeRecord(path="/a", name="a", branch="refs/heads/a", is_current=False)
    ]


def test_is_current_uses_exact_path_match() -> None:
    records = parse_worktree_records(SAMPLE, cwd="/repo/.worktrees/feature-x")
    assert [r.is_current for r in records] == [False, True, False]

    # No canonicalisation: a trailing slash is a different string
    records = parse_worktree_records(SAMPLE, cwd="/repo/.worktrees/feature-x/")
    assert not any(r.is_current for r in records)


def test_bare_entry_is_never_current() -> None:
    text = "worktree /srv/repo.git\nbare\n\nworktree /srv/work\nbranch refs/heads/main\n"
    records = parse_worktree_records(text, cwd="/srv/repo.git")
    assert records[0].is_bare
    assert not records[0].is_current
    assert records[0].branch is None
    assert records[0].short_branch == "(bare)"
    assert not records[1].is_bare


def test_name_derivation() -> None:
    assert worktree_name("/repo/.worktrees/foo") == "foo"
    assert worktree_name("/repo/.worktrees/foo/") == "foo"
    assert worktree_name("foo") == "foo"
    assert worktree_name("/") == ""


def test_trailing_slash_path_keeps_name() -> None:
    record = parse_worktree_records("worktree /repo/.worktrees/foo/\n", cwd="/")[0]
    assert record.path == "/repo/.worktrees/foo/"
    assert record.name == "foo"


def test_iterator_is_lazy_and_restartable() -> None:
    records = iter_worktree_records(SAMPLE, cwd="/")
    assert next(records).name == "repo"

    # A new call starts from the beginning again
    assert [r.name for r in iter_worktree_records(SAMPLE, cwd="/")] == [
        "repo",
        "feature-x",
        "scratch",
    ]


def test_records_are_immutable() -> None:
    record = parse_worktree_records(SAMPLE, cwd="/")[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.name = "other"  # type: ignore[misc]
