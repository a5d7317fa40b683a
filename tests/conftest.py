"""Shared fixtures for tests that need a real git repository."""

import os
import subprocess

import pytest


def git(repo_path, *args, env=None):
    return subprocess.run(
        ["git", *args],
        cwd=repo_path,
        check=True,
        capture_output=True,
        text=True,
        env=env,
    )


@pytest.fixture
def temp_git_repo(tmp_path):
    """
    Create an empty temporary git repository with proper git config.
    """
    repo_path = tmp_path / "test_repo"
    repo_path.mkdir()

    git(repo_path, "init")
    git(repo_path, "config", "user.name", "Test User")
    git(repo_path, "config", "user.email", "test@example.com")
    git(repo_path, "config", "commit.gpgsign", "false")

    return repo_path


@pytest.fixture
def commit_file(temp_git_repo):
    """
    Return a helper that writes a file and commits it as a given author.

    The helper accepts (relative_path, content, author_name, author_email,
    commit_date) where commit_date is an ISO string or None.
    """

    def _commit(
        rel_path,
        content,
        author_name="Test User",
        author_email="test@example.com",
        commit_date=None,
    ):
        path = temp_git_repo / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        git(temp_git_repo, "add", str(rel_path))

        env = {
            **os.environ,
            "GIT_AUTHOR_NAME": author_name,
            "GIT_AUTHOR_EMAIL": author_email,
        }
        if commit_date:
            env["GIT_AUTHOR_DATE"] = commit_date
            env["GIT_COMMITTER_DATE"] = commit_date

        git(temp_git_repo, "commit", "-m", f"Update {rel_path}", env=env)
        return git(temp_git_repo, "rev-parse", "HEAD").stdout.strip()

    return _commit
