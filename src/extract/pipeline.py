"""
Mine commit history for quiz fragments.

Each sampled commit's diff is segmented into source-file sections, its
added lines are classified and grouped into blocks, and each block becomes
at most one fragment. The accumulated pools are then deduplicated, and
high-output days are measured separately.
"""

import random
from collections.abc import Callable, Collection, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from common.errors import ChangeRetrievalError, NoHistoryError
from common.logger import get_logger

from .accumulator import accumulate_blocks
from .classifier import LineClassifier
from .dedup import deduplicate
from .git_utils import (
    ensure_git_repo,
    get_commit_diff,
    get_commit_info,
    list_commit_hashes,
    list_identities,
)
from .models import CodeBlock, CodeFragment, CommentFragment, CommitInfo, DailyStat, Identity
from .segmenter import segment_diff
from .velocity import collect_velocity
from .windower import make_code_fragment, make_comment_fragment

logger = get_logger(__name__)

PROGRESS_EVERY = 30


@dataclass
class Harvest:
    """Deduplicated fragment pools and velocity stats for one run."""

    code_fragments: list[CodeFragment] = field(default_factory=list)
    comment_fragments: list[CommentFragment] = field(default_factory=list)
    velocity: list[DailyStat] = field(default_factory=list)
    commits_scanned: int = 0
    commits_skipped: int = 0

    def split_code(self) -> tuple[list[CodeFragment], list[CodeFragment]]:
        """Return (self-authored, other-authored) code fragments."""
        mine = [f for f in self.code_fragments if f.is_self_authored]
        others = [f for f in self.code_fragments if not f.is_self_authored]
        return mine, others

    def split_comments(self) -> tuple[list[CommentFragment], list[CommentFragment]]:
        """Return (self-authored, other-authored) comment fragments."""
        mine = [f for f in self.comment_fragments if f.is_self_authored]
        others = [f for f in self.comment_fragments if not f.is_self_authored]
        return mine, others


def extract_fragments(
    diff: str,
    author: Identity,
    change_id: str,
    selected: Collection[tuple[str, str]],
    rng: random.Random,
    classifier: LineClassifier | None = None,
) -> tuple[list[CodeFragment], list[CommentFragment]]:
    """
    Extract code and comment fragments from one commit's diff.

    Args:
        diff: Unified diff text for the commit
        author: Identity that authored the commit
        change_id: Commit hash (stored abbreviated to 7 characters)
        selected: Identity keys the quiz taker claims as their own
        rng: Random source for window placement
        classifier: Optional custom line classifier

    Returns:
        Tuple of (code fragments, comment fragments)
    """
    is_mine = author.key in selected
    short_id = change_id[:7]
    code: list[CodeFragment] = []
    comments: list[CommentFragment] = []

    for section in segment_diff(diff):
        for block in accumulate_blocks(section.events, classifier=classifier):
            if isinstance(block, CodeBlock):
                fragment = make_code_fragment(block, section.path, author, short_id, is_mine, rng)
                if fragment:
                    code.append(fragment)
            else:
                comment = make_comment_fragment(block, section.path, author, short_id, is_mine)
                if comment:
                    comments.append(comment)

    return code, comments


def discover_identities(repo_root: Path, max_commits: int) -> list[Identity]:
    """
    List the repository's author identities, most active first.

    Raises:
        RepositoryUnavailableError: If repo_root is not a git repository
        NoHistoryError: If no commits are found
    """
    ensure_git_repo(repo_root)
    identities = list_identities(repo_root, max_commits)
    if not identities:
        raise NoHistoryError(f"No commits found in {repo_root}")
    return identities


def sample_changes(commit_hashes: Sequence[str], sample_size: int, rng: random.Random) -> list[str]:
    """Shuffle the hashes once and keep the first sample_size."""
    shuffled = list(commit_hashes)
    rng.shuffle(shuffled)
    return shuffled[:sample_size]


def harvest(
    repo_root: Path,
    selected: Collection[tuple[str, str]],
    *,
    rng: random.Random,
    max_commits: int,
    sample_size: int,
    on_progress: Callable[[int, int], None] | None = None,
    fetch_info: Callable[[Path, str], CommitInfo] = get_commit_info,
    fetch_diff: Callable[[Path, str], str] = get_commit_diff,
) -> Harvest:
    """
    Scan a random sample of commits and build deduplicated fragment pools.

    Velocity is measured over the first sample_size commits in history
    order, independently of the shuffled extraction sample.

    Args:
        repo_root: Path to git repository root
        selected: Identity keys the quiz taker claims as their own
        rng: Random source for sampling and window placement
        max_commits: How many commits of history to consider
        sample_size: How many commits to scan
        on_progress: Optional callback(processed, total)
        fetch_info: Reads one commit's author and timestamp
        fetch_diff: Reads one commit's diff

    Returns:
        Harvest with both pools and the velocity list

    Raises:
        RepositoryUnavailableError: If repo_root is not a git repository
        NoHistoryError: If there are no commits
    """
    ensure_git_repo(repo_root)
    commit_hashes = list_commit_hashes(repo_root, max_commits)
    if not commit_hashes:
        raise NoHistoryError(f"No commits found in {repo_root}")

    sampled = sample_changes(commit_hashes, sample_size, rng)
    logger.info(f"Scanning [bold]{len(sampled)}[/bold] of {len(commit_hashes)} commit(s)")

    result = Harvest()
    code: list[CodeFragment] = []
    comments: list[CommentFragment] = []

    for index, commit_hash in enumerate(sampled, start=1):
        try:
            info = fetch_info(repo_root, commit_hash)
            diff = fetch_diff(repo_root, commit_hash)
        except ChangeRetrievalError as e:
            logger.debug(f"Skipping {commit_hash[:7]}: {e}")
            result.commits_skipped += 1
            continue

        if diff:
            author = Identity(name=info.name, email=info.email)
            new_code, new_comments = extract_fragments(diff, author, commit_hash, selected, rng)
            code.extend(new_code)
            comments.extend(new_comments)
        result.commits_scanned += 1

        if on_progress and index % PROGRESS_EVERY == 0:
            on_progress(index, len(sampled))

    result.code_fragments = deduplicate(code)
    result.comment_fragments = deduplicate(comments)
    logger.debug(
        f"Kept {len(result.code_fragments)}/{len(code)} code and "
        f"{len(result.comment_fragments)}/{len(comments)} comment fragment(s)"
    )

    result.velocity = collect_velocity(
        repo_root,
        commit_hashes,
        selected,
        sample_size,
        fetch_info=fetch_info,
        fetch_diff=fetch_diff,
    )
    return result
