"""Per-day output volume for the selected identities."""

from collections.abc import Callable, Collection, Iterable, Sequence
from datetime import date, datetime, timezone
from pathlib import Path

from common.constants import HIGH_OUTPUT_LINES, VELOCITY_TOP_N
from common.errors import ChangeRetrievalError
from common.logger import get_logger
from common.numeric import round_half_up

from .git_utils import get_commit_diff, get_commit_info
from .models import CommitInfo, DailyStat
from .segmenter import is_added_line

logger = get_logger(__name__)


def count_added_lines(diff: str) -> int:
    """Count inserted lines across a whole diff, ignoring "+++" file headers.

    No file-type filtering is applied; this measures raw volume.
    """
    return sum(1 for line in diff.split("\n") if is_added_line(line))


def aggregate_daily_stats(
    changes: Iterable[tuple[datetime, int]],
    threshold: int = HIGH_OUTPUT_LINES,
    top_n: int = VELOCITY_TOP_N,
) -> list[DailyStat]:
    """
    Aggregate (timestamp, lines_added) pairs into high-output days.

    Args:
        changes: One pair per commit
        threshold: Days must add strictly more lines than this
        top_n: Maximum number of days returned

    Returns:
        DailyStat list sorted by lines added, largest first
    """
    totals: dict[date, list[int]] = {}
    for timestamp, lines_added in changes:
        day = timestamp.astimezone(timezone.utc).date()
        entry = totals.setdefault(day, [0, 0])
        entry[0] += lines_added
        entry[1] += 1

    stats = [
        DailyStat(
            day=day,
            lines_added=lines,
            commit_count=commits,
            avg_lines_per_commit=round_half_up(lines / commits),
        )
        for day, (lines, commits) in totals.items()
        if lines > threshold
    ]
    stats.sort(key=lambda s: s.lines_added, reverse=True)
    return stats[:top_n]


def collect_velocity(
    repo_root: Path,
    commit_hashes: Sequence[str],
    selected: Collection[tuple[str, str]],
    sample_size: int,
    fetch_info: Callable[[Path, str], CommitInfo] = get_commit_info,
    fetch_diff: Callable[[Path, str], str] = get_commit_diff,
) -> list[DailyStat]:
    """
    Find high-output days among the first sample_size commits.

    Commits by identities outside `selected` are ignored. A commit whose
    metadata or diff cannot be read is skipped.
    """
    changes: list[tuple[datetime, int]] = []

    for commit_hash in commit_hashes[:sample_size]:
        try:
            info = fetch_info(repo_root, commit_hash)
            if info.identity_key not in selected:
                continue
            diff = fetch_diff(repo_root, commit_hash)
        except ChangeRetrievalError as e:
            logger.debug(f"Skipping {commit_hash[:7]} for velocity: {e}")
            continue
        changes.append((info.timestamp, count_added_lines(diff)))

    return aggregate_daily_stats(changes)
