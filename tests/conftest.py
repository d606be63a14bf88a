"""Shared fixtures: throwaway git repositories."""

import os
import shutil
import subprocess

import pytest

GIT_ENV = {
    "GIT_AUTHOR_NAME": "Test",
    "GIT_AUTHOR_EMAIL": "test@example.com",
    "GIT_COMMITTER_NAME": "Test",
    "GIT_COMMITTER_EMAIL": "test@example.com",
    "GIT_CONFIG_NOSYSTEM": "1",
}

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


def git(repo, *args, date=None):
    """Run git in repo for test setup, failing loudly."""
    env = dict(os.environ, **GIT_ENV)
    if date is not None:
        env["GIT_AUTHOR_DATE"] = f"@{date} +0000"
        env["GIT_COMMITTER_DATE"] = f"@{date} +0000"
    result = subprocess.run(
        ["git", "-C", str(repo), *args],
        capture_output=True, text=True, env=env, check=True,
    )
    return result.stdout.strip()


@pytest.fixture
def empty_repo(tmp_path, monkeypatch):
    """A git repo with no commits."""
    monkeypatch.setenv("HOME", str(tmp_path))
    for key, value in GIT_ENV.items():
        monkeypatch.setenv(key, value)
    repo = tmp_path / "repo"
    repo.mkdir()
    git(repo, "init", "-q")
    git(repo, "symbolic-ref", "HEAD", "refs/heads/main")
    return repo


@pytest.fixture
def git_repo(empty_repo):
    """A git repo with two commits on main."""
    repo = empty_repo
    (repo / "README").write_text("hello\n")
    git(repo, "add", "README")
    git(repo, "commit", "-q", "-m", "Initial commit", date=1600000000)
    (repo / "README").write_text("hello again\n")
    git(repo, "commit", "-q", "-am", "Second commit", date=1700000000)
    return repo
