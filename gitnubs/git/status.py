"""Git project root and working tree status checks."""

import os
from pathlib import Path

from gitnubs.git.runner import run_git


class InsistError(Exception):
    """An insist_* precondition on the working tree failed."""

    def __init__(self, message: str, hint: str | None = None):
        self.message = message
        self.hint = hint
        super().__init__(message)


def project_root_absolute(repo: Path) -> Path | None:
    """Get the project root, with symlinks resolved (like `pwd -P`)."""
    result = run_git(["rev-parse", "--show-toplevel"], repo)
    return Path(result.output) if result.output else None


def project_root(repo: Path) -> Path | None:
    """Get the project root. Alias for project_root_absolute."""
    return project_root_absolute(repo)


def project_root_relative(repo: Path) -> Path | None:
    """Get the project root without resolving symlinks (like `pwd -L`)."""
    result = run_git(["rev-parse", "--show-cdup"], repo)
    if not result.success:
        return None
    return Path(os.path.normpath(os.path.join(os.path.abspath(repo), result.output)))


def parent_path_to_project_root(repo: Path) -> str | None:
    """
    Get the '../'-joined path from repo up to the project root.

    Returns empty string at the project root, None outside a git project.
    """
    result = run_git(["rev-parse", "--show-prefix"], repo)
    if not result.success:
        return None
    parts = [p for p in result.output.split("/") if p]
    return "/".join(".." for _ in parts)


def get_status_porcelain(repo: Path) -> str:
    """Get git status in porcelain v1 format."""
    result = run_git(["status", "--porcelain=v1"], repo)
    return result.stdout


def is_pristine(repo: Path) -> bool:
    """Check if the working tree has no staged, unstaged, or untracked changes."""
    result = run_git(["status", "--porcelain=v1"], repo)
    return result.success and not result.stdout.strip()


def nothing_staged(repo: Path, path: str | None = None) -> bool:
    """Check if the index matches HEAD (optionally for one path only)."""
    args = ["diff", "--cached", "--quiet"]
    if path:
        args += ["--", path]
    result = run_git(args, repo)
    # exit 0 = nothing staged, exit 1 = has staged changes
    return result.success


def insist_git_repo(repo: Path) -> None:
    """
    Require repo to be a git project with at least one commit.

    Raises:
        InsistError: if not a git project, or no commits yet
    """
    if run_git(["rev-parse", "--abbrev-ref", "HEAD"], repo).success:
        return

    if run_git(["rev-parse", "--show-toplevel"], repo).success:
        raise InsistError(f"Specified Git project has no commits: {repo}")
    raise InsistError(f"Specified directory not a Git project: {repo}")


def insist_pristine(repo: Path) -> None:
    """
    Require a tidy working tree.

    Raises:
        InsistError: if there are uncommitted or untracked changes
    """
    if is_pristine(repo):
        return
    raise InsistError(
        "Working directory not tidy.",
        hint=f'cd "{repo}" && git status',
    )


def insist_tidy(repo: Path) -> None:
    """Alias for insist_pristine."""
    insist_pristine(repo)


def insist_nothing_staged(repo: Path) -> None:
    """
    Require an empty index.

    Raises:
        InsistError: if there are staged changes
    """
    if nothing_staged(repo):
        return
    raise InsistError(
        "Working directory has staged changes.",
        hint=f'cd "{repo}" && git status',
    )
