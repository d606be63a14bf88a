"""
Git tag operations.

Includes the git-backed side of version tag resolution: listing candidate
tags and checking tag existence, which gitnubs.lib.versions then sorts.
"""

import enum
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from gitnubs.git.runner import run_git, REMOTE_TIMEOUT
from gitnubs.lib import versions
from gitnubs.lib.config import NubsConfig, DEFAULT_CONFIG

logger = logging.getLogger(__name__)


def list_tags(repo: Path, *patterns: str, extra_args: Sequence[str] = ()) -> list[str]:
    """
    List tags matching glob patterns (all tags if none given).

    extra_args pass through to `git tag`, e.g., ["--merged", "HEAD"].
    """
    result = run_git(["tag", "--list", *extra_args, *patterns], repo)
    return [t.strip() for t in result.output.splitlines() if t.strip()]


def list_version_tags(
    repo: Path,
    extra_args: Sequence[str] = (),
    config: NubsConfig = DEFAULT_CONFIG,
) -> list[str]:
    """List tags that look like version tags."""
    grammar = config.grammar
    tags = list_tags(repo, *grammar.globs, extra_args=extra_args)
    return [c.raw for c in versions.parse_candidates(tags, grammar)]


def tag_exists(repo: Path, tag: str) -> bool:
    """Check if a tag exists."""
    if not tag:
        return False
    result = run_git(["rev-parse", "--verify", "--quiet", f"refs/tags/{tag}"], repo)
    return result.success


def tag_ref_exists(repo: Path, tag: str) -> bool:
    """
    Check if any tag ref ends with the given name, per `git show-ref --tags`.

    Unlike tag_exists, "1.2.3" also matches "refs/tags/release/1.2.3".
    """
    if not tag:
        return False
    result = run_git(["show-ref", "--tags", "--", tag], repo)
    return result.success and bool(result.output)


def tag_object_name(repo: Path, tag: str, opts: Sequence[str] = ()) -> str | None:
    """
    Get the object name for a tag.

    For annotated tags this is the tag object, not the commit; see
    tag_commit_object. Returns None for an empty or unknown tag.
    """
    if not tag:
        return None
    result = run_git(["rev-parse", *opts, f"refs/tags/{tag}"], repo)
    return result.output or None


def tag_commit_object(repo: Path, tag: str, opts: Sequence[str] = ()) -> str | None:
    """Get the commit a tag points at."""
    if not tag:
        return None
    return tag_object_name(repo, f"{tag}^{{commit}}", opts)


def tag_name_check_format(repo: Path, tag: str) -> bool:
    """Check if tag is a valid tag name."""
    result = run_git(["check-ref-format", f"refs/tags/{tag}"], repo)
    return result.success


def versions_tagged_for_commit_object(repo: Path, obj: str = "HEAD") -> list[str]:
    """Get versions tagged on a commit, with any leading 'v' stripped."""
    result = run_git(["tag", "--list", "--points-at", obj], repo)
    return versions.versions_from_tags(result.output.splitlines())


def latest_version_basetag(
    repo: Path,
    extra_args: Sequence[str] = (),
    config: NubsConfig = DEFAULT_CONFIG,
) -> str | None:
    """Get the largest base version ("1.2.3") across all version tags."""
    tags = list_version_tags(repo, extra_args, config)
    return versions.latest_base_version(tags, config.grammar)


def latest_version_basetag_safe(repo: Path, config: NubsConfig = DEFAULT_CONFIG) -> str:
    """Like latest_version_basetag, but falls back to config.fallback_version."""
    return latest_version_basetag(repo, config=config) or config.fallback_version


def latest_version_fulltag(
    repo: Path,
    base_version: str,
    extra_args: Sequence[str] = (),
    config: NubsConfig = DEFAULT_CONFIG,
) -> str | None:
    """
    Get the largest tag for a base version.

    Returns a release tag ("1.2.3", "v1.2.3", or "1.2" for base 1.2.0) if
    one exists, otherwise the largest pre-release, e.g., "1.2.3-rc.2".
    """
    grammar = config.grammar
    parsed = versions.parse_candidate(base_version, grammar)
    if parsed is None:
        return None

    # major.minor prefix, so patchless tags like "1.2" are listed too
    prefix = f"{parsed.major}.{parsed.minor}"
    tags = list_tags(repo, f"{prefix}*", f"v{prefix}*", extra_args=extra_args)
    return versions.latest_full_version(
        parsed.base_version,
        tags,
        tag_exists=lambda name: tag_exists(repo, name),
        grammar=grammar,
    )


def largest_version_tag(
    repo: Path,
    extra_args: Sequence[str] = (),
    config: NubsConfig = DEFAULT_CONFIG,
) -> str | None:
    """
    Get the largest version ever tagged (not the most recent one).

    Searches every branch. To constrain to the current branch, pass e.g.
    extra_args=["--merged", "HEAD"].
    """
    tags = list_version_tags(repo, extra_args, config)
    largest = versions.largest_version_tag(
        tags,
        tag_exists=lambda name: tag_exists(repo, name),
        grammar=config.grammar,
    )
    logger.debug("Largest of %d version tags: %s", len(tags), largest)
    return largest


class RemoteTagStatus(enum.IntEnum):
    """Outcome of tag_remote_verify_commit, usable as an exit code."""
    PRESENT = 0  # Remote tag points at the expected commit
    ABSENT = 1  # No such tag on the remote
    CONFLICT = 2  # Remote tag points at another commit
    FAILED = 3  # Remote could not be queried


@dataclass
class RemoteTagVerification:
    """Result of checking a tag on a remote."""
    status: RemoteTagStatus
    remote_object: str | None = None  # Object name reported by ls-remote
    remote_commit: str | None = None  # Set when status is CONFLICT

    @property
    def needs_push(self) -> bool:
        return self.status == RemoteTagStatus.ABSENT


def tag_remote_verify_commit(
    repo: Path,
    tag: str,
    remote: str,
    commit: str,
    timeout: int = REMOTE_TIMEOUT,
) -> RemoteTagVerification:
    """
    Verify a tag exists on a remote and points at commit.

    This is a network call.
    """
    logger.info("Sending remote request: git ls-remote --tags %s %s", remote, tag)
    result = run_git(["ls-remote", "--tags", remote, tag], repo, timeout=timeout)
    if not result.success:
        return RemoteTagVerification(status=RemoteTagStatus.FAILED)

    # Each line: "<object>\t<ref>"
    lines = result.output.splitlines()
    remote_object = lines[0].split("\t")[0].strip() if lines else ""
    if not remote_object:
        return RemoteTagVerification(status=RemoteTagStatus.ABSENT)

    # ls-remote reports the tag object for annotated tags; resolve the commit
    deref = run_git(["rev-list", "-n", "1", remote_object], repo)
    remote_commit = deref.output or None

    if remote_commit == commit:
        return RemoteTagVerification(status=RemoteTagStatus.PRESENT, remote_object=remote_object)
    return RemoteTagVerification(
        status=RemoteTagStatus.CONFLICT,
        remote_object=remote_object,
        remote_commit=remote_commit,
    )
