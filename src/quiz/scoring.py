"""Recognition scoring based on a Remember/Know-style confidence model.

A higher score means weaker recognition of one's own work:

    forget_rate       = (uncertain + foreign) / self_total
    fuzzy_rate        = familiar / self_total
    false_memory_rate = (remember + familiar on others' work) / other_total
    track_score       = min(100, round(50 * forget + 30 * fuzzy + 20 * false_memory))

The composite blends both tracks with a bonus for high-output days:

    total = min(100, round(0.5 * code + 0.35 * comment + min(3 * days, 15)))
"""

from collections.abc import Iterable

from common.constants import (
    CODE_TRACK_WEIGHT,
    COMMENT_TRACK_WEIGHT,
    FALSE_MEMORY_WEIGHT,
    FORGET_WEIGHT,
    FUZZY_WEIGHT,
    MAX_SCORE,
    VELOCITY_BONUS_CAP,
    VELOCITY_BONUS_PER_DAY,
)
from common.numeric import round_half_up

from .models import Answer, ConfidenceLevel, ScoreBreakdown, TrackScore

CLAIMED = {ConfidenceLevel.REMEMBER, ConfidenceLevel.FAMILIAR}


def score_track(answers: Iterable[Answer]) -> TrackScore:
    """
    Fold a track's answer log into tallies and a 0-100 score.

    Empty ownership groups count as one answer in the denominator, so a
    track with no other-authored questions has a false memory rate of 0.
    """
    counts = {level: 0 for level in ConfidenceLevel}
    self_total = 0
    other_total = 0
    false_memory = 0

    for answer in answers:
        if answer.is_self_authored:
            self_total += 1
            counts[answer.level] += 1
        else:
            other_total += 1
            if answer.level in CLAIMED:
                false_memory += 1

    my_total = max(1, self_total)
    their_total = max(1, other_total)

    forget_rate = (counts[ConfidenceLevel.UNCERTAIN] + counts[ConfidenceLevel.FOREIGN]) / my_total
    fuzzy_rate = counts[ConfidenceLevel.FAMILIAR] / my_total
    false_memory_rate = false_memory / their_total

    score = round_half_up(
        forget_rate * FORGET_WEIGHT
        + fuzzy_rate * FUZZY_WEIGHT
        + false_memory_rate * FALSE_MEMORY_WEIGHT
    )

    return TrackScore(
        self_total=self_total,
        other_total=other_total,
        remembered=counts[ConfidenceLevel.REMEMBER],
        familiar=counts[ConfidenceLevel.FAMILIAR],
        uncertain=counts[ConfidenceLevel.UNCERTAIN],
        misidentified_as_foreign=counts[ConfidenceLevel.FOREIGN],
        correctly_rejected=other_total - false_memory,
        false_memory=false_memory,
        forget_rate=forget_rate,
        fuzzy_rate=fuzzy_rate,
        false_memory_rate=false_memory_rate,
        score=min(MAX_SCORE, score),
    )


def velocity_bonus(high_output_days: int) -> int:
    """Three points per high-output day, capped at 15."""
    return min(high_output_days * VELOCITY_BONUS_PER_DAY, VELOCITY_BONUS_CAP)


def composite_score(code_score: int, comment_score: int, high_output_days: int) -> int:
    """Blend track scores and the velocity bonus, clamped to 100."""
    total = round_half_up(
        code_score * CODE_TRACK_WEIGHT
        + comment_score * COMMENT_TRACK_WEIGHT
        + velocity_bonus(high_output_days)
    )
    return min(MAX_SCORE, total)


def score_session(
    code_answers: Iterable[Answer],
    comment_answers: Iterable[Answer],
    high_output_days: int,
) -> ScoreBreakdown:
    """
    Compute the full breakdown for a finished quiz.

    Args:
        code_answers: Answer log of the code track
        comment_answers: Answer log of the comment track
        high_output_days: Number of days in the velocity list

    Returns:
        ScoreBreakdown with both track scores and the composite total
    """
    code = score_track(code_answers)
    comment = score_track(comment_answers)
    return ScoreBreakdown(
        code=code,
        comment=comment,
        high_output_days=high_output_days,
        velocity_bonus=velocity_bonus(high_output_days),
        total=composite_score(code.score, comment.score, high_output_days),
    )
