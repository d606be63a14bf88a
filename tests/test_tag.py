"""Tests for gitnubs.git.tag module."""

from pathlib import Path
from unittest.mock import patch

from gitnubs.git.runner import GitResult
from gitnubs.git.tag import (
    RemoteTagStatus,
    largest_version_tag,
    latest_version_basetag,
    latest_version_basetag_safe,
    latest_version_fulltag,
    list_tags,
    list_version_tags,
    tag_commit_object,
    tag_exists,
    tag_object_name,
    tag_ref_exists,
    tag_remote_verify_commit,
    versions_tagged_for_commit_object,
)
from gitnubs.lib.config import NubsConfig


def ok(stdout=""):
    return GitResult(returncode=0, stdout=stdout, stderr="")


def fail():
    return GitResult(returncode=128, stdout="", stderr="fatal: error")


def fake_git(tags, existing=None):
    """Build a run_git stand-in for a repo with the given tags."""
    existing = set(tags if existing is None else existing)

    def run(args, cwd, timeout=30):
        if args[0] == "tag":
            return ok("".join(f"{t}\n" for t in tags))
        if args[:3] == ["rev-parse", "--verify", "--quiet"]:
            name = args[3][len("refs/tags/"):]
            return ok("sha\n") if name in existing else fail()
        raise AssertionError(f"unexpected git call: {args}")

    return run


class TestListTags:
    """Test tag listing."""

    @patch("gitnubs.git.tag.run_git")
    def test_passes_patterns_and_extra_args(self, mock_run):
        mock_run.return_value = ok("v1.0.0\n1.1.0\n")
        tags = list_tags(Path("/repo"), "v[0-9]*", "[0-9]*", extra_args=["--merged", "HEAD"])
        assert tags == ["v1.0.0", "1.1.0"]
        assert mock_run.call_args[0][0] == [
            "tag", "--list", "--merged", "HEAD", "v[0-9]*", "[0-9]*",
        ]

    @patch("gitnubs.git.tag.run_git")
    def test_list_version_tags_filters_grammar(self, mock_run):
        mock_run.return_value = ok("v1.0.0\n2020-01-01-snapshot\nvnext\n")
        assert list_version_tags(Path("/repo")) == ["v1.0.0"]

    @patch("gitnubs.git.tag.run_git")
    def test_list_version_tags_uses_configured_globs(self, mock_run):
        mock_run.return_value = ok("")
        config = NubsConfig(version_tag_patterns=("v*",))
        list_version_tags(Path("/repo"), config=config)
        assert mock_run.call_args[0][0] == ["tag", "--list", "v*"]

    @patch("gitnubs.git.tag.run_git")
    def test_list_tags_on_error(self, mock_run):
        mock_run.return_value = fail()
        assert list_tags(Path("/tmp")) == []


class TestTagLookups:
    """Test tag existence and object lookups."""

    @patch("gitnubs.git.tag.run_git")
    def test_tag_exists(self, mock_run):
        mock_run.return_value = ok("abc\n")
        assert tag_exists(Path("/repo"), "v1.0.0") is True

    @patch("gitnubs.git.tag.run_git")
    def test_empty_tag_never_exists(self, mock_run):
        assert tag_exists(Path("/repo"), "") is False
        assert tag_object_name(Path("/repo"), "") is None
        mock_run.assert_not_called()

    @patch("gitnubs.git.tag.run_git")
    def test_tag_ref_exists(self, mock_run):
        mock_run.return_value = ok("abc refs/tags/release/1.2.3\n")
        assert tag_ref_exists(Path("/repo"), "1.2.3") is True
        assert mock_run.call_args[0][0] == ["show-ref", "--tags", "--", "1.2.3"]

    @patch("gitnubs.git.tag.run_git")
    def test_tag_ref_missing(self, mock_run):
        mock_run.return_value = GitResult(returncode=1, stdout="", stderr="")
        assert tag_ref_exists(Path("/repo"), "9.9.9") is False

    @patch("gitnubs.git.tag.run_git")
    def test_unknown_tag_object_name(self, mock_run):
        mock_run.return_value = fail()
        assert tag_object_name(Path("/repo"), "nope") is None

    @patch("gitnubs.git.tag.run_git")
    def test_tag_commit_object(self, mock_run):
        mock_run.return_value = ok("c0ffee\n")
        assert tag_commit_object(Path("/repo"), "v1.0.0") == "c0ffee"
        assert mock_run.call_args[0][0] == ["rev-parse", "refs/tags/v1.0.0^{commit}"]

    @patch("gitnubs.git.tag.run_git")
    def test_versions_tagged_for_commit_object(self, mock_run):
        mock_run.return_value = ok("v1.2.3\nlatest\n1.2.3a3\n")
        assert versions_tagged_for_commit_object(Path("/repo")) == ["1.2.3", "1.2.3a3"]
        assert mock_run.call_args[0][0] == ["tag", "--list", "--points-at", "HEAD"]


class TestVersionTagResolution:
    """Test git-backed version tag resolution."""

    @patch("gitnubs.git.tag.run_git")
    def test_largest_release(self, mock_run):
        mock_run.side_effect = fake_git(["1.0.0", "1.0.0-rc.2", "1.0.0-rc.10", "0.9.0"])
        assert largest_version_tag(Path("/repo")) == "1.0.0"

    @patch("gitnubs.git.tag.run_git")
    def test_largest_pre_release(self, mock_run):
        mock_run.side_effect = fake_git(["v1.0.0-rc.2", "v1.0.0-rc.10", "v0.9.0"])
        assert largest_version_tag(Path("/repo")) == "v1.0.0-rc.10"

    @patch("gitnubs.git.tag.run_git")
    def test_v_prefixed_release(self, mock_run):
        mock_run.side_effect = fake_git(["v2.0.0", "v2.0.0-rc.1"])
        assert largest_version_tag(Path("/repo")) == "v2.0.0"

    @patch("gitnubs.git.tag.run_git")
    def test_no_version_tags(self, mock_run):
        mock_run.side_effect = fake_git(["nightly"])
        assert largest_version_tag(Path("/repo")) is None
        assert latest_version_basetag(Path("/repo")) is None

    @patch("gitnubs.git.tag.run_git")
    def test_basetag_safe_fallback(self, mock_run):
        mock_run.side_effect = fake_git([])
        assert latest_version_basetag_safe(Path("/repo")) == "0.0.0"
        config = NubsConfig(fallback_version="0.1.0")
        assert latest_version_basetag_safe(Path("/repo"), config) == "0.1.0"

    @patch("gitnubs.git.tag.run_git")
    def test_basetag(self, mock_run):
        mock_run.side_effect = fake_git(["1.9.9", "1.10.0-rc.1"])
        assert latest_version_basetag(Path("/repo")) == "1.10.0"

    @patch("gitnubs.git.tag.run_git")
    def test_fulltag_globs_major_minor(self, mock_run):
        mock_run.side_effect = fake_git(["1.2.3-beta.1", "1.2.3-rc.1", "1.2.30"])
        assert latest_version_fulltag(Path("/repo"), "1.2.3") == "1.2.3-rc.1"
        tag_calls = [c[0][0] for c in mock_run.call_args_list if c[0][0][0] == "tag"]
        assert tag_calls == [["tag", "--list", "1.2*", "v1.2*"]]

    @patch("gitnubs.git.tag.run_git")
    def test_fulltag_finds_patchless_release(self, mock_run):
        mock_run.side_effect = fake_git(["1.1", "1.1.0-rc.1"])
        assert latest_version_fulltag(Path("/repo"), "1.1.0") == "1.1"
        assert largest_version_tag(Path("/repo")) == "1.1"

    @patch("gitnubs.git.tag.run_git")
    def test_fulltag_rejects_non_version(self, mock_run):
        assert latest_version_fulltag(Path("/repo"), "latest") is None
        mock_run.assert_not_called()

    @patch("gitnubs.git.tag.run_git")
    def test_configured_globs_filter_listed_tags(self, mock_run):
        # A listing that ignores the globs still only yields matching tags
        mock_run.side_effect = fake_git(["v2.0.0", "1.5.0"])
        config = NubsConfig(version_tag_patterns=("[0-9]*",))
        assert largest_version_tag(Path("/repo"), config=config) == "1.5.0"
        assert list_version_tags(Path("/repo"), config=config) == ["1.5.0"]


class TestTagRemoteVerifyCommit:
    """Test tag_remote_verify_commit function."""

    @patch("gitnubs.git.tag.run_git")
    def test_present(self, mock_run):
        mock_run.side_effect = [ok("aaa\trefs/tags/1.0.3\n"), ok("c1\n")]
        result = tag_remote_verify_commit(Path("/repo"), "1.0.3", "origin", "c1")
        assert result.status == RemoteTagStatus.PRESENT
        assert result.remote_object == "aaa"
        assert result.remote_commit is None
        assert not result.needs_push

    @patch("gitnubs.git.tag.run_git")
    def test_absent(self, mock_run):
        mock_run.return_value = ok("")
        result = tag_remote_verify_commit(Path("/repo"), "1.0.3", "origin", "c1")
        assert result.status == RemoteTagStatus.ABSENT
        assert result.needs_push

    @patch("gitnubs.git.tag.run_git")
    def test_conflict_reports_remote_commit(self, mock_run):
        mock_run.side_effect = [ok("aaa\trefs/tags/1.0.3\n"), ok("c2\n")]
        result = tag_remote_verify_commit(Path("/repo"), "1.0.3", "origin", "c1")
        assert result.status == RemoteTagStatus.CONFLICT
        assert result.remote_commit == "c2"

    @patch("gitnubs.git.tag.run_git")
    def test_failed(self, mock_run):
        mock_run.return_value = fail()
        result = tag_remote_verify_commit(Path("/repo"), "1.0.3", "nowhere", "c1")
        assert result.status == RemoteTagStatus.FAILED
        assert int(result.status) == 3

    @patch("gitnubs.git.tag.run_git")
    def test_uses_timeout(self, mock_run):
        mock_run.return_value = ok("")
        tag_remote_verify_commit(Path("/repo"), "1.0.3", "origin", "c1", timeout=7)
        assert mock_run.call_args[1]["timeout"] == 7
