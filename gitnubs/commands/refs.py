"""
git-nubs ref commands - Query branches, tags, remotes, and commits.
"""

import sys
from pathlib import Path

from gitnubs.git import branch as git_branch
from gitnubs.git import commit as git_commit
from gitnubs.git import remote as git_remote
from gitnubs.git import tag as git_tag
from gitnubs.git.tag import RemoteTagStatus
from gitnubs.git.upstream import UpstreamRefError, upstream_branch_name, upstream_remote_name
from gitnubs.lib.config import NubsConfig


def _print_or_fail(value) -> int:
    if not value:
        return 1
    print(value)
    return 0


def cmd_branch_name(args, repo: Path, config: NubsConfig) -> int:
    """Print the current branch name."""
    if args.full:
        return _print_or_fail(git_branch.branch_name_full(repo))
    return _print_or_fail(git_branch.branch_name(repo))


def cmd_branch_exists(args, repo: Path, config: NubsConfig) -> int:
    return 0 if git_branch.branch_exists(repo, args.branch) else 1


def cmd_tag_exists(args, repo: Path, config: NubsConfig) -> int:
    return 0 if git_tag.tag_exists(repo, args.tag) else 1


def cmd_remote_exists(args, repo: Path, config: NubsConfig) -> int:
    if args.branch:
        found = git_remote.remote_branch_exists(repo, args.remote, args.branch)
    else:
        found = git_remote.remote_exists(repo, args.remote)
    return 0 if found else 1


def cmd_check_format(args, repo: Path, config: NubsConfig) -> int:
    """Check a branch or tag name is well formed."""
    if args.tag:
        valid = git_tag.tag_name_check_format(repo, args.name)
    else:
        valid = git_branch.branch_name_check_format(repo, args.name)
    return 0 if valid else 1


def cmd_tracking(args, repo: Path, config: NubsConfig) -> int:
    """Print the upstream branch, or just its remote or branch part."""
    try:
        if args.remote:
            return _print_or_fail(upstream_remote_name(repo, args.ref))
        if args.branch:
            return _print_or_fail(upstream_branch_name(repo, args.ref))
    except UpstreamRefError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    return _print_or_fail(args.ref or git_branch.tracking_branch(repo))


def cmd_default_branch(args, repo: Path, config: NubsConfig) -> int:
    return _print_or_fail(
        git_remote.remote_default_branch(repo, args.remote, timeout=config.remote_timeout)
    )


def cmd_commit(args, repo: Path, config: NubsConfig) -> int:
    """Print the SHA of a ref, verifying it is a commit."""
    if not git_commit.is_commit(repo, args.ref):
        print(f"ERROR: Not a commit: {args.ref}", file=sys.stderr)
        return 1
    return _print_or_fail(git_commit.commit_object_name(repo, args.ref))


def cmd_count(args, repo: Path, config: NubsConfig) -> int:
    # number_of_commits reports 0 on error too
    if not git_commit.is_commit(repo, args.ref):
        print(f"ERROR: Not a commit: {args.ref}", file=sys.stderr)
        return 1
    print(git_commit.number_of_commits(repo, args.ref))
    return 0


def cmd_tag_verify_remote(args, repo: Path, config: NubsConfig) -> int:
    """
    Check that a tag on a remote points at a commit.

    Exit code is the RemoteTagStatus: 0 present, 1 absent, 2 conflict,
    3 failed.
    """
    commit = args.commit or git_tag.tag_commit_object(repo, args.tag)
    if not commit:
        print(f"ERROR: No local commit for tag '{args.tag}'; pass --commit", file=sys.stderr)
        return int(RemoteTagStatus.FAILED)

    verification = git_tag.tag_remote_verify_commit(
        repo, args.tag, args.remote, commit, timeout=config.remote_timeout,
    )
    status = verification.status

    if status == RemoteTagStatus.PRESENT:
        print(f"Tag '{args.tag}' on {args.remote} points at {commit}")
    elif status == RemoteTagStatus.ABSENT:
        print(f"Tag '{args.tag}' not found on {args.remote}")
    elif status == RemoteTagStatus.CONFLICT:
        print(f"Tag '{args.tag}' on {args.remote} points at another commit:")
        print(verification.remote_commit or verification.remote_object)
    else:
        print(f"ERROR: Could not query {args.remote}", file=sys.stderr)

    return int(status)
