"""Git utilities for reading commit history."""

import subprocess
from collections.abc import Iterable
from datetime import datetime, timezone
from pathlib import Path

from common.errors import ChangeRetrievalError, RepositoryUnavailableError
from common.logger import get_logger

from .models import CommitInfo, Identity

logger = get_logger(__name__)

RECORD_SEPARATOR = "|"


class GitError(RuntimeError):
    """Raised when a git command fails."""


def run_git(args: Iterable[str], repo_root: Path) -> str:
    """
    Run a git sub-command and return its stdout with surrounding whitespace removed.

    Args:
        args: Arguments following "git"
        repo_root: Working directory for the command

    Returns:
        Stripped stdout

    Raises:
        GitError: If git exits non-zero or cannot be started
    """
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=repo_root,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as e:
        raise GitError(f"Could not run git: {e}") from e

    if result.returncode != 0:
        raise GitError(
            result.stderr.strip() or f"git command failed with exit code {result.returncode}"
        )
    return result.stdout.strip()


def is_git_repo(repo_root: Path) -> bool:
    """Check whether repo_root is inside a git work tree."""
    try:
        run_git(["rev-parse", "--git-dir"], repo_root)
        return True
    except GitError:
        return False


def ensure_git_repo(repo_root: Path) -> None:
    """
    Raises:
        RepositoryUnavailableError: If repo_root is not inside a git repository
    """
    if not repo_root.is_dir() or not is_git_repo(repo_root):
        raise RepositoryUnavailableError(
            f"{repo_root} is not a git repository. Run inside a git repository."
        )


def list_identities(repo_root: Path, max_commits: int) -> list[Identity]:
    """
    Collect author identities from recent history.

    Uses: git log --max-count=N --format=%aN|%aE

    Args:
        repo_root: Path to git repository root
        max_commits: How many commits to read

    Returns:
        Identities sorted by commit count, most active first
    """
    try:
        output = run_git(
            ["log", f"--max-count={max_commits}", "--format=%aN|%aE"], repo_root
        )
    except GitError as e:
        # An empty repository has no HEAD, so git log fails
        logger.debug(f"git log failed: {e}")
        return []

    identities: dict[tuple[str, str], Identity] = {}
    for line in output.split("\n"):
        if not line.strip():
            continue
        name, _, email = line.partition(RECORD_SEPARATOR)
        key = (name, email)
        if key not in identities:
            identities[key] = Identity(name=name, email=email)
        identities[key].commit_count += 1

    # sorted() is stable, so ties keep first-seen order
    return sorted(identities.values(), key=lambda i: i.commit_count, reverse=True)


def list_commit_hashes(repo_root: Path, max_commits: int) -> list[str]:
    """Return up to max_commits full commit hashes, newest first."""
    try:
        output = run_git(["log", f"--max-count={max_commits}", "--format=%H"], repo_root)
    except GitError as e:
        logger.debug(f"git log failed: {e}")
        return []
    return [line for line in output.split("\n") if line]


def parse_commit_record(raw: str) -> CommitInfo:
    """
    Parse a "name|email|unix_timestamp|message" record.

    The subject may itself contain "|", so everything after the third
    separator is joined back together.

    Raises:
        ChangeRetrievalError: If the timestamp is missing or not an integer
    """
    parts = raw.strip("\n").split(RECORD_SEPARATOR)
    name = parts[0] if len(parts) > 0 else ""
    email = parts[1] if len(parts) > 1 else ""
    raw_timestamp = parts[2] if len(parts) > 2 and parts[2] else "0"
    message = RECORD_SEPARATOR.join(parts[3:])

    try:
        timestamp = datetime.fromtimestamp(int(raw_timestamp), tz=timezone.utc)
    except (ValueError, OverflowError, OSError) as e:
        raise ChangeRetrievalError(f"Invalid commit timestamp {raw_timestamp!r}") from e

    return CommitInfo(name=name, email=email, timestamp=timestamp, message=message)


def get_commit_info(repo_root: Path, commit_hash: str) -> CommitInfo:
    """
    Get author, timestamp and subject for a commit.

    Raises:
        ChangeRetrievalError: If git fails or the record cannot be parsed
    """
    try:
        output = run_git(["log", "-1", "--format=%aN|%aE|%at|%s", commit_hash], repo_root)
    except GitError as e:
        raise ChangeRetrievalError(f"Could not read commit {commit_hash[:7]}: {e}") from e
    return parse_commit_record(output)


def get_commit_diff(repo_root: Path, commit_hash: str) -> str:
    """
    Get the unified diff of added and modified files for a commit.

    Uses: git show <hash> --format= --unified=5 --diff-filter=AM

    Raises:
        ChangeRetrievalError: If git fails
    """
    try:
        return run_git(
            ["show", commit_hash, "--format=", "--unified=5", "--diff-filter=AM"],
            repo_root,
        )
    except GitError as e:
        raise ChangeRetrievalError(f"Could not read diff for {commit_hash[:7]}: {e}") from e
