#!/usr/bin/env python3
"""git-nubs CLI entrypoint."""

import sys
import logging
import argparse
from pathlib import Path

from gitnubs.git.status import project_root
from gitnubs.lib.config import ConfigError, load_config
from gitnubs.commands import refs as cmd_refs_module
from gitnubs.commands import status as cmd_status_module
from gitnubs.commands import versions as cmd_versions_module


def get_repo(args) -> Path:
    """Get the directory to run git in (-C or cwd)."""
    return Path(args.C) if args.C else Path.cwd()


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def run_command(args) -> int:
    """Load config for the repo and dispatch to the command handler."""
    repo = get_repo(args)
    if not repo.is_dir():
        print(f"ERROR: Not a directory: {repo}", file=sys.stderr)
        return 2

    try:
        config = load_config(project_root(repo) or repo)
    except ConfigError as e:
        print(f"ERROR: Invalid configuration: {e}", file=sys.stderr)
        return 2

    return args.func(args, repo, config)


def add_git_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        'git_args', nargs='*', metavar='GIT_TAG_ARG',
        help='Extra arguments for git tag, after "--" (e.g., -- --merged HEAD)',
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='git-nubs', description='Git convenience helpers')
    parser.add_argument('-C', metavar='PATH', help='Run as if started in PATH')
    parser.add_argument('--verbose', '-v', action='store_true', help='Log git commands')
    subparsers = parser.add_subparsers(dest='command', required=True)

    # git-nubs largest-version-tag
    p_largest = subparsers.add_parser('largest-version-tag', help='Print the largest version tag')
    add_git_args(p_largest)
    p_largest.set_defaults(func=cmd_versions_module.cmd_largest)

    # git-nubs latest-basetag
    p_base = subparsers.add_parser('latest-basetag', help='Print the largest major.minor.patch')
    p_base.add_argument('--safe', action='store_true', help='Print the fallback version if none')
    add_git_args(p_base)
    p_base.set_defaults(func=cmd_versions_module.cmd_basetag)

    # git-nubs latest-fulltag
    p_full = subparsers.add_parser('latest-fulltag', help='Print the largest tag for a base version')
    p_full.add_argument('base', help='Base version, e.g., 1.2.3')
    add_git_args(p_full)
    p_full.set_defaults(func=cmd_versions_module.cmd_fulltag)

    # git-nubs versions-at
    p_tagged = subparsers.add_parser('versions-at', help='Print versions tagged on a commit')
    p_tagged.add_argument('object', nargs='?', default='HEAD', help='Commit (default: HEAD)')
    p_tagged.set_defaults(func=cmd_versions_module.cmd_tagged)

    # git-nubs parse-version
    p_parse = subparsers.add_parser('parse-version', help='Show the version fields of a tag name')
    p_parse.add_argument('tag', help='Tag name')
    p_parse.set_defaults(func=cmd_versions_module.cmd_parse)

    # git-nubs since
    p_since = subparsers.add_parser('since', help='Print when a repository event happened')
    p_since.add_argument('event', choices=['commit', 'tag', 'init'],
                         help='Latest commit, largest version tag, or root commit')
    p_since.add_argument('--delta', '-d', action='store_true', help='Print seconds elapsed instead')
    p_since.set_defaults(func=cmd_versions_module.cmd_since)

    # git-nubs branch-name
    p_branch = subparsers.add_parser('branch-name', help='Print the current branch name')
    p_branch.add_argument('--full', action='store_true', help='Print the full ref name')
    p_branch.set_defaults(func=cmd_refs_module.cmd_branch_name)

    # git-nubs branch-exists
    p_branch_exists = subparsers.add_parser('branch-exists', help='Exit 0 if a local branch exists')
    p_branch_exists.add_argument('branch', help='Branch name')
    p_branch_exists.set_defaults(func=cmd_refs_module.cmd_branch_exists)

    # git-nubs tag-exists
    p_tag_exists = subparsers.add_parser('tag-exists', help='Exit 0 if a tag exists')
    p_tag_exists.add_argument('tag', help='Tag name')
    p_tag_exists.set_defaults(func=cmd_refs_module.cmd_tag_exists)

    # git-nubs remote-exists
    p_remote_exists = subparsers.add_parser('remote-exists', help='Exit 0 if a remote (or remote branch) exists')
    p_remote_exists.add_argument('remote', help='Remote name, or remote/branch')
    p_remote_exists.add_argument('branch', nargs='?', help='Check this remote branch instead')
    p_remote_exists.set_defaults(func=cmd_refs_module.cmd_remote_exists)

    # git-nubs check-format
    p_format = subparsers.add_parser('check-format', help='Exit 0 if a branch (or tag) name is valid')
    p_format.add_argument('name', help='Branch or tag name')
    p_format.add_argument('--tag', action='store_true', help='Check as a tag name')
    p_format.set_defaults(func=cmd_refs_module.cmd_check_format)

    # git-nubs tracking-branch
    p_tracking = subparsers.add_parser('tracking-branch', help='Print the upstream branch')
    p_tracking.add_argument('ref', nargs='?', help='Parse this ref instead of the upstream')
    group = p_tracking.add_mutually_exclusive_group()
    group.add_argument('--remote', action='store_true', help='Print only the remote name')
    group.add_argument('--branch', action='store_true', help='Print only the branch name')
    p_tracking.set_defaults(func=cmd_refs_module.cmd_tracking)

    # git-nubs default-branch
    p_default = subparsers.add_parser('default-branch', help="Print a remote's default branch")
    p_default.add_argument('remote', help='Remote name')
    p_default.set_defaults(func=cmd_refs_module.cmd_default_branch)

    # git-nubs commit
    p_commit = subparsers.add_parser('commit', help='Print the SHA of a commit ref')
    p_commit.add_argument('ref', nargs='?', default='HEAD', help='Ref (default: HEAD)')
    p_commit.set_defaults(func=cmd_refs_module.cmd_commit)

    # git-nubs count
    p_count = subparsers.add_parser('count', help='Print the number of commits')
    p_count.add_argument('ref', nargs='?', default='HEAD', help='Ref (default: HEAD)')
    p_count.set_defaults(func=cmd_refs_module.cmd_count)

    # git-nubs tag-verify-remote
    p_verify = subparsers.add_parser('tag-verify-remote', help='Check a remote tag points at a commit')
    p_verify.add_argument('tag', help='Tag name')
    p_verify.add_argument('remote', help='Remote name')
    p_verify.add_argument('--commit', help='Expected commit (default: the local tag commit)')
    p_verify.set_defaults(func=cmd_refs_module.cmd_tag_verify_remote)

    # git-nubs root
    p_root = subparsers.add_parser('root', help='Print the project root')
    p_root.add_argument('--logical', '-L', action='store_true', help="Don't resolve symlinks")
    p_root.add_argument('--parent-path', action='store_true', help="Print '../' path up to the root")
    p_root.set_defaults(func=cmd_status_module.cmd_root)

    # git-nubs insist
    p_insist = subparsers.add_parser('insist', help='Fail with an error unless a check passes')
    p_insist.add_argument('check', choices=sorted(cmd_status_module.INSIST_CHECKS))
    p_insist.set_defaults(func=cmd_status_module.cmd_insist)

    # git-nubs nothing-staged
    p_staged = subparsers.add_parser('nothing-staged', help='Exit 0 if nothing is staged')
    p_staged.add_argument('path', nargs='?', help='Only check this path')
    p_staged.set_defaults(func=cmd_status_module.cmd_staged)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    return run_command(args)


if __name__ == '__main__':
    sys.exit(main())
