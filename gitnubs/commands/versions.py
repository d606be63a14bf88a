"""
git-nubs version commands - Find and inspect version tags.
"""

import time
from pathlib import Path

from gitnubs.git import history
from gitnubs.git import tag as git_tag
from gitnubs.lib import versions
from gitnubs.lib.config import NubsConfig


def cmd_largest(args, repo: Path, config: NubsConfig) -> int:
    """Print the largest version tag."""
    largest = git_tag.largest_version_tag(repo, args.git_args, config)
    if not largest:
        return 1
    print(largest)
    return 0


def cmd_basetag(args, repo: Path, config: NubsConfig) -> int:
    """Print the largest base version (major.minor.patch)."""
    if args.safe:
        print(git_tag.latest_version_basetag_safe(repo, config))
        return 0

    base = git_tag.latest_version_basetag(repo, args.git_args, config)
    if not base:
        return 1
    print(base)
    return 0


def cmd_fulltag(args, repo: Path, config: NubsConfig) -> int:
    """Print the largest tag for a base version."""
    full = git_tag.latest_version_fulltag(repo, args.base, args.git_args, config)
    if not full:
        return 1
    print(full)
    return 0


def cmd_tagged(args, repo: Path, config: NubsConfig) -> int:
    """Print versions tagged on a commit."""
    found = git_tag.versions_tagged_for_commit_object(repo, args.object)
    for version in found:
        print(version)
    return 0 if found else 1


def cmd_parse(args, repo: Path, config: NubsConfig) -> int:
    """Show how a tag name decomposes into version fields."""
    candidate = versions.parse_candidate(args.tag)
    if candidate is None:
        print(f"Not a version tag: {args.tag}")
        return 1

    patch = "" if candidate.patch is None else candidate.patch
    print(f"Tag:         {candidate.raw}")
    print(f"v prefix:    {'yes' if candidate.has_v_prefix else 'no'}")
    print(f"Major:       {candidate.major}")
    print(f"Minor:       {candidate.minor}")
    print(f"Patch:       {patch}")
    print(f"Pre-release: {candidate.pre_release or ''}")
    print(f"Base:        {candidate.base_version}")
    print(f"SemVer:      {'yes' if versions.is_semver(args.tag) else 'no'}")
    return 0


SINCE_EVENTS = {
    "commit": history.most_recent_commit_epoch_ts,
    "init": history.git_init_commit_epoch_ts,
}


def cmd_since(args, repo: Path, config: NubsConfig) -> int:
    """Print the epoch timestamp (or age, with --delta) of a repository event."""
    if args.event == "tag":
        ts = history.latest_version_tag_epoch_ts(repo, config)
    else:
        ts = SINCE_EVENTS[args.event](repo)

    if ts is None:
        return 1

    if args.delta:
        print(history.seconds_since(ts, time.time()))
    else:
        print(ts)
    return 0
