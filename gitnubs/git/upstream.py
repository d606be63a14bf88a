"""
Parse remote branch references into remote and branch names.

E.g., "origin/feature/foo" or "refs/remotes/origin/feature/foo" parse to
remote "origin" and branch "feature/foo".
"""

from dataclasses import dataclass
from pathlib import Path

from gitnubs.git.branch import tracking_branch
from gitnubs.git.remote import REMOTES_PREFIX


class UpstreamRefError(ValueError):
    """Ref is under refs/ but not a remote-tracking ref."""


@dataclass(frozen=True)
class UpstreamRef:
    remote: str
    branch: str


def parse_upstream(ref: str) -> UpstreamRef | None:
    """
    Split a remote branch ref into remote and branch.

    Returns None when ref lacks either part (e.g., "foo" or "bar/").

    Raises:
        UpstreamRefError: for refs/ refs outside refs/remotes/
    """
    deprefixed = ref[len(REMOTES_PREFIX):] if ref.startswith(REMOTES_PREFIX) else ref
    remote, sep, branch = deprefixed.partition("/")

    if remote == "refs":
        raise UpstreamRefError(f"Cannot parse non-remotes refs/ upstream reference: {ref}")

    if not sep or not remote or not branch:
        return None

    return UpstreamRef(remote=remote, branch=branch)


def _resolve(repo: Path, ref: str | None) -> UpstreamRef | None:
    if not ref:
        ref = tracking_branch(repo)
        if not ref:
            return None
    return parse_upstream(ref)


def upstream_remote_name(repo: Path, ref: str | None = None) -> str:
    """Remote name of ref (or of the tracking branch), or empty string."""
    parsed = _resolve(repo, ref)
    return parsed.remote if parsed else ""


def upstream_branch_name(repo: Path, ref: str | None = None) -> str:
    """Branch name of ref (or of the tracking branch), or empty string."""
    parsed = _resolve(repo, ref)
    return parsed.branch if parsed else ""
