"""
Timestamps of key repository events.

All timestamps are author dates (`git log --format=%at`) in seconds since
the epoch, or None when the event doesn't exist (no commits, no tags).
"""

import time
from pathlib import Path

from gitnubs.git.commit import first_commit_sha
from gitnubs.git.runner import run_git
from gitnubs.git.tag import largest_version_tag
from gitnubs.lib.config import NubsConfig, DEFAULT_CONFIG


def commit_epoch_ts(repo: Path, rev: str) -> int | None:
    """Get the author timestamp of a revision."""
    result = run_git(["log", "-1", "--format=%at", rev], repo)
    try:
        return int(result.output)
    except ValueError:
        return None


def most_recent_commit_epoch_ts(repo: Path) -> int | None:
    """Timestamp of HEAD."""
    return commit_epoch_ts(repo, "HEAD")


def latest_version_tag_epoch_ts(repo: Path, config: NubsConfig = DEFAULT_CONFIG) -> int | None:
    """Timestamp of the commit tagged with the largest version."""
    tag = largest_version_tag(repo, config=config) or config.fallback_version
    return commit_epoch_ts(repo, tag)


def git_init_commit_epoch_ts(repo: Path) -> int | None:
    """Timestamp of the root commit of the current branch."""
    sha = first_commit_sha(repo)
    if not sha:
        return None
    return commit_epoch_ts(repo, sha)


def seconds_since(ts: int | None, now: float | None = None) -> int | None:
    """Seconds elapsed since an epoch timestamp."""
    if ts is None:
        return None
    if now is None:
        now = time.time()
    return int(now) - ts
