"""Git branch operations."""

from pathlib import Path

from gitnubs.git.runner import run_git

# Printed in place of a branch name before the first commit.
NO_BRANCH_MARKER = "<?!>"


def branch_exists(repo: Path, branch: str) -> bool:
    """Check if a local branch exists."""
    result = run_git(["rev-parse", "--verify", f"refs/heads/{branch}"], repo)
    return result.success


def has_branch_heads(repo: Path) -> bool:
    """Check if the repo has any local branch yet (False after `git init`)."""
    result = run_git(["for-each-ref", "--count=1", "--format=%(refname)", "refs/heads"], repo)
    return bool(result.output)


def branch_name(repo: Path) -> str | None:
    """
    Get the current branch name.

    Returns:
        Branch name ("HEAD" when detached), NO_BRANCH_MARKER if the repo
        has no commits yet, or None if repo is not a git project.
    """
    root = run_git(["rev-parse", "--show-toplevel"], repo)
    if not root.success:
        return None

    if not has_branch_heads(repo):
        return NO_BRANCH_MARKER

    # `loose` drops the "heads/" prefix rev-parse sometimes adds when
    # a remote ref has the same short name.
    result = run_git(["rev-parse", "--abbrev-ref=loose", "HEAD"], repo)
    return result.output or None


def branch_name_full(repo: Path) -> str | None:
    """Get the full ref name of the current branch, e.g., refs/heads/main."""
    result = run_git(["rev-parse", "--symbolic-full-name", "HEAD"], repo)
    return result.output or None


def branch_name_check_format(repo: Path, name: str) -> bool:
    """Check if name is a valid branch name."""
    result = run_git(["check-ref-format", "--branch", name], repo)
    return result.success


def tracking_branch(repo: Path) -> str | None:
    """Get the upstream tracking branch, e.g., "origin/main"."""
    result = run_git(["rev-parse", "--abbrev-ref", "--symbolic-full-name", "@{u}"], repo)
    return result.output or None


def upstream(repo: Path) -> str | None:
    """Alias for tracking_branch."""
    return tracking_branch(repo)


def tracking_branch_safe(repo: Path) -> str:
    """Get the upstream tracking branch, or empty string if none."""
    return tracking_branch(repo) or ""
