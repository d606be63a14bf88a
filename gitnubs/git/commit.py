"""Git commit object lookups."""

from pathlib import Path
from typing import Sequence

from gitnubs.git.runner import run_git


def commit_object_name(repo: Path, ref: str = "HEAD", opts: Sequence[str] = ()) -> str | None:
    """
    Resolve a ref to an object name (SHA).

    Note that rev-parse echoes anything that looks like a SHA without
    checking the object exists. Use is_commit() to verify.
    """
    result = run_git(["rev-parse", *opts, ref], repo)
    return result.output or None


def is_same_commit(repo: Path, lhs: str, rhs: str) -> bool:
    """Check if two refs resolve to the same object."""
    lhs_sha = commit_object_name(repo, lhs)
    return lhs_sha is not None and lhs_sha == commit_object_name(repo, rhs)


def is_commit(repo: Path, ref: str) -> bool:
    """Check if ref exists and dereferences to a commit object."""
    result = run_git(["cat-file", "-e", f"{ref}^{{commit}}"], repo)
    return result.success


def head_commit_sha(repo: Path) -> str | None:
    """Get the SHA of HEAD."""
    return commit_object_name(repo, "HEAD")


def first_commit_sha(repo: Path) -> str | None:
    """
    Get the root commit of the current branch.

    Uses --first-parent so a merged branch with its own parentless
    commit doesn't add a second root.
    """
    result = run_git(["rev-list", "--max-parents=0", "--first-parent", "HEAD"], repo)
    lines = result.output.splitlines()
    return lines[-1].strip() if lines else None


def first_commit_message(repo: Path) -> str | None:
    """Get the subject of the root commit."""
    result = run_git(["log", "--format=%s", "--max-parents=0", "--first-parent", "HEAD"], repo)
    return result.output or None


def latest_commit_message(repo: Path, ref: str = "HEAD") -> str | None:
    """Get the subject of the latest commit on ref."""
    result = run_git(["log", "--format=%s", "-1", ref], repo)
    return result.output or None


def child_of(repo: Path, ref: str) -> str | None:
    """Get the first commit after ref on the ancestry path to HEAD."""
    result = run_git(
        ["log", "--reverse", "--ancestry-path", "--format=%H", f"{ref}..HEAD"],
        repo,
    )
    lines = result.output.splitlines()
    return lines[0].strip() if lines else None


def parent_of(repo: Path, ref: str) -> list[str]:
    """
    Get the parent SHAs of a commit.

    Returns empty list for a root commit or an unknown object.
    """
    result = run_git(["cat-file", "-p", ref], repo)
    parents = []
    for line in result.output.splitlines():
        # Header ends at the first blank line, before the message
        if not line:
            break
        if line.startswith("parent "):
            parents.append(line.split()[1])
    return parents


def number_of_commits(repo: Path, ref: str = "HEAD", extra_args: Sequence[str] = ()) -> int:
    """
    Count commits reachable from ref.

    Returns:
        Number of commits, or 0 on error
    """
    result = run_git(["rev-list", "--count", ref, *extra_args], repo)
    if result.success:
        try:
            return int(result.stdout.strip())
        except ValueError:
            pass
    return 0
