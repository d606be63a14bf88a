"""Git operations for git-nubs.

Thin wrappers around the git command line. Every function takes the
repository (or any directory inside it) as its first argument.

Return type conventions:
- Functions returning bool: True on success/condition met, False otherwise.
  Examples: branch_exists(), tag_exists(), is_commit()
- Functions returning parsed values (str, int, list): Return None/empty/zero
  on failure. Examples: branch_name() -> None, number_of_commits() -> 0
- insist_* functions return None and raise InsistError when the check fails.
- tag_remote_verify_commit() returns a RemoteTagVerification; callers check
  its status.
"""

from gitnubs.git.runner import GitResult, run_git
from gitnubs.git.branch import (
    NO_BRANCH_MARKER,
    branch_exists,
    branch_name,
    branch_name_full,
    branch_name_check_format,
    tracking_branch,
    tracking_branch_safe,
    upstream,
)
from gitnubs.git.upstream import (
    UpstreamRef,
    UpstreamRefError,
    parse_upstream,
    upstream_remote_name,
    upstream_branch_name,
)
from gitnubs.git.commit import (
    commit_object_name,
    is_same_commit,
    is_commit,
    head_commit_sha,
    first_commit_sha,
    first_commit_message,
    latest_commit_message,
    child_of,
    parent_of,
    number_of_commits,
)
from gitnubs.git.tag import (
    RemoteTagStatus,
    RemoteTagVerification,
    list_tags,
    list_version_tags,
    tag_exists,
    tag_ref_exists,
    tag_object_name,
    tag_commit_object,
    tag_name_check_format,
    versions_tagged_for_commit_object,
    latest_version_basetag,
    latest_version_basetag_safe,
    latest_version_fulltag,
    largest_version_tag,
    tag_remote_verify_commit,
)
from gitnubs.git.remote import (
    remote_exists,
    remote_branch_ref,
    remote_branch_exists,
    remote_branch_object_name,
    remote_default_branch,
)
from gitnubs.git.status import (
    InsistError,
    project_root,
    project_root_absolute,
    project_root_relative,
    parent_path_to_project_root,
    get_status_porcelain,
    is_pristine,
    nothing_staged,
    insist_git_repo,
    insist_pristine,
    insist_tidy,
    insist_nothing_staged,
)
from gitnubs.git.history import (
    commit_epoch_ts,
    most_recent_commit_epoch_ts,
    latest_version_tag_epoch_ts,
    git_init_commit_epoch_ts,
    seconds_since,
)

__all__ = [
    # runner
    "GitResult",
    "run_git",
    # branch
    "NO_BRANCH_MARKER",
    "branch_exists",
    "branch_name",
    "branch_name_full",
    "branch_name_check_format",
    "tracking_branch",
    "tracking_branch_safe",
    "upstream",
    # upstream
    "UpstreamRef",
    "UpstreamRefError",
    "parse_upstream",
    "upstream_remote_name",
    "upstream_branch_name",
    # commit
    "commit_object_name",
    "is_same_commit",
    "is_commit",
    "head_commit_sha",
    "first_commit_sha",
    "first_commit_message",
    "latest_commit_message",
    "child_of",
    "parent_of",
    "number_of_commits",
    # tag
    "RemoteTagStatus",
    "RemoteTagVerification",
    "list_tags",
    "list_version_tags",
    "tag_exists",
    "tag_ref_exists",
    "tag_object_name",
    "tag_commit_object",
    "tag_name_check_format",
    "versions_tagged_for_commit_object",
    "latest_version_basetag",
    "latest_version_basetag_safe",
    "latest_version_fulltag",
    "largest_version_tag",
    "tag_remote_verify_commit",
    # remote
    "remote_exists",
    "remote_branch_ref",
    "remote_branch_exists",
    "remote_branch_object_name",
    "remote_default_branch",
    # status
    "InsistError",
    "project_root",
    "project_root_absolute",
    "project_root_relative",
    "parent_path_to_project_root",
    "get_status_porcelain",
    "is_pristine",
    "nothing_staged",
    "insist_git_repo",
    "insist_pristine",
    "insist_tidy",
    "insist_nothing_staged",
    # history
    "commit_epoch_ts",
    "most_recent_commit_epoch_ts",
    "latest_version_tag_epoch_ts",
    "git_init_commit_epoch_ts",
    "seconds_since",
]
