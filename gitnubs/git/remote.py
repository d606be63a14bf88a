"""Git remote operations."""

from pathlib import Path

from gitnubs.git.runner import run_git, REMOTE_TIMEOUT

REMOTES_PREFIX = "refs/remotes/"


def remote_exists(repo: Path, remote: str) -> bool:
    """Check if a remote is configured."""
    result = run_git(["remote", "get-url", remote], repo)
    return result.success


def remote_branch_ref(remote: str, branch: str | None = None) -> str:
    """
    Build an unambiguous remote branch ref.

    remote_branch_ref("origin", "main") and remote_branch_ref("origin/main")
    both give "refs/remotes/origin/main".
    """
    remote_branch = f"{remote}/{branch}" if branch else remote
    if remote_branch.startswith(REMOTES_PREFIX):
        remote_branch = remote_branch[len(REMOTES_PREFIX):]
    return f"{REMOTES_PREFIX}{remote_branch}"


def remote_branch_exists(repo: Path, remote: str, branch: str | None = None) -> bool:
    """Check if a remote-tracking branch exists locally."""
    result = run_git(["show-branch", remote_branch_ref(remote, branch)], repo)
    return result.success


def remote_branch_object_name(repo: Path, remote: str, branch: str | None = None) -> str | None:
    """Get the SHA of a remote-tracking branch."""
    result = run_git(["rev-parse", remote_branch_ref(remote, branch)], repo)
    return result.output or None


def remote_default_branch(repo: Path, remote: str, timeout: int = REMOTE_TIMEOUT) -> str | None:
    """
    Ask the remote for its default branch (the branch its HEAD points at).

    This is a network call.
    """
    if not remote:
        return None

    result = run_git(["remote", "show", remote], repo, timeout=timeout)
    for line in result.output.splitlines():
        line = line.strip()
        if line.startswith("HEAD branch:"):
            name = line.partition(":")[2].strip()
            return name or None
    return None
