"""
git-nubs status commands - Project root and working tree checks.
"""

import sys
from pathlib import Path

from gitnubs.git import status as git_status
from gitnubs.git.status import InsistError
from gitnubs.lib.config import NubsConfig


def print_insist_error(error: InsistError, surround: bool) -> None:
    """Print an InsistError to stderr, with an optional hint."""
    if surround:
        print(file=sys.stderr)
    print(f"ERROR: {error.message}", file=sys.stderr)
    if error.hint:
        print("- HINT: Try:", file=sys.stderr)
        print(file=sys.stderr)
        print(f"   {error.hint}", file=sys.stderr)
    if surround:
        print(file=sys.stderr)


def cmd_root(args, repo: Path, config: NubsConfig) -> int:
    """Print the project root (or the relative path up to it)."""
    if args.parent_path:
        path = git_status.parent_path_to_project_root(repo)
        if path is None:
            return 1
        print(path)
        return 0

    if args.logical:
        root = git_status.project_root_relative(repo)
    else:
        root = git_status.project_root_absolute(repo)
    if root is None:
        return 1
    print(root)
    return 0


INSIST_CHECKS = {
    "repo": git_status.insist_git_repo,
    "pristine": git_status.insist_pristine,
    "tidy": git_status.insist_tidy,
    "nothing-staged": git_status.insist_nothing_staged,
}


def cmd_insist(args, repo: Path, config: NubsConfig) -> int:
    """Run an insist_* check, printing the error if it fails."""
    try:
        INSIST_CHECKS[args.check](repo)
    except InsistError as e:
        print_insist_error(e, config.surround_error)
        return 1
    return 0


def cmd_staged(args, repo: Path, config: NubsConfig) -> int:
    """Exit 0 if nothing is staged (optionally for one path)."""
    return 0 if git_status.nothing_staged(repo, args.path) else 1
