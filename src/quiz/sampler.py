"""Build balanced question sets from self- and other-authored pools."""

import math
import random
from collections.abc import Sequence
from typing import TypeVar

from common.constants import MIN_QUESTIONS, SELF_SHARE
from common.errors import InsufficientMaterialError
from common.logger import get_logger
from extract.models import CodeFragment, CommentFragment

from .models import QuizPlan, Track

logger = get_logger(__name__)

T = TypeVar("T")


def compute_shares(count: int, self_available: int, other_available: int) -> tuple[int, int]:
    """
    Split `count` question slots between self and other pools.

    Self gets ceil(count * 0.6) first, others fill the remainder, then self
    reclaims any slots an undersized other pool could not fill.

    Returns:
        Tuple of (self_share, other_share)

    Example:
        >>> compute_shares(10, 2, 20)
        (2, 8)
        >>> compute_shares(10, 20, 1)
        (9, 1)
    """
    self_share = min(math.ceil(count * SELF_SHARE), self_available)
    other_share = min(count - self_share, other_available)
    self_share = min(count - other_share, self_available)
    return self_share, other_share


def shuffled(items: Sequence[T], rng: random.Random) -> list[T]:
    result = list(items)
    rng.shuffle(result)
    return result


def sample_questions(
    self_pool: Sequence[T],
    other_pool: Sequence[T],
    count: int,
    rng: random.Random,
) -> list[T]:
    """
    Draw a mixed, shuffled question list from two pools.

    Each pool is shuffled before slicing, and the combined list is shuffled
    again so ownership cannot be read from position.
    """
    self_share, other_share = compute_shares(count, len(self_pool), len(other_pool))
    questions = shuffled(self_pool, rng)[:self_share] + shuffled(other_pool, rng)[:other_share]
    return shuffled(questions, rng)


def build_quiz_plan(
    code_self: Sequence[CodeFragment],
    code_other: Sequence[CodeFragment],
    comment_self: Sequence[CommentFragment],
    comment_other: Sequence[CommentFragment],
    rng: random.Random,
    code_count: int = 10,
    comment_count: int = 10,
    minimum: int = MIN_QUESTIONS,
) -> QuizPlan:
    """
    Sample both question tracks.

    Raises:
        InsufficientMaterialError: If either track ends up with fewer than
            `minimum` questions
    """
    code_questions = sample_questions(code_self, code_other, code_count, rng)
    comment_questions = sample_questions(comment_self, comment_other, comment_count, rng)

    for track, questions in ((Track.CODE, code_questions), (Track.COMMENT, comment_questions)):
        if len(questions) < minimum:
            raise InsufficientMaterialError(track.value, len(questions), minimum)

    logger.debug(
        f"Sampled {len(code_questions)} code and {len(comment_questions)} comment question(s)"
    )
    return QuizPlan(code_questions=tuple(code_questions), comment_questions=tuple(comment_questions))
