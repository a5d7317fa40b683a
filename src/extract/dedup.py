"""Near-duplicate removal for extracted fragments."""

from collections.abc import Iterable
from typing import TypeVar

from common.constants import SIMILARITY_THRESHOLD

from .models import CodeFragment, CommentFragment

FragmentT = TypeVar("FragmentT", CodeFragment, CommentFragment)


def positional_similarity(a: str, b: str) -> float:
    """
    Share of positions where both strings hold the same character.

    Measured over the shorter string's length; 0.0 if either is empty.
    """
    shortest = min(len(a), len(b))
    if shortest == 0:
        return 0.0
    same = sum(1 for i in range(shortest) if a[i] == b[i])
    return same / shortest


def is_duplicate(a: str, b: str, threshold: float = SIMILARITY_THRESHOLD) -> bool:
    """
    Two fingerprints are duplicates when identical, or when their positional
    similarity is strictly greater than the threshold (exactly 0.8 is kept).
    """
    if a == b:
        return True
    return positional_similarity(a, b) > threshold


def deduplicate(
    fragments: Iterable[FragmentT],
    threshold: float = SIMILARITY_THRESHOLD,
) -> list[FragmentT]:
    """
    Keep the first of every group of near-identical fragments.

    Each fragment is compared against every fragment accepted so far, so the
    cost is quadratic in the pool size. Pools are bounded by the commit
    sample size.

    Args:
        fragments: Fragments in extraction order
        threshold: Similarity above which two fragments are duplicates

    Returns:
        Accepted fragments, in input order
    """
    accepted: list[FragmentT] = []
    seen: set[str] = set()

    for fragment in fragments:
        if fragment.fingerprint in seen:
            continue
        if any(is_duplicate(fragment.fingerprint, kept.fingerprint, threshold) for kept in accepted):
            continue
        seen.add(fragment.fingerprint)
        accepted.append(fragment)

    return accepted
