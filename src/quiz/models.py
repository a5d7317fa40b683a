"""Data models for quiz questions, answers and scores."""

from dataclasses import dataclass
from enum import Enum

from extract.models import CodeFragment, CommentFragment


class ConfidenceLevel(str, Enum):
    """How sure the quiz taker is that they wrote a fragment.

    Adapted from the Remember/Know paradigm: explicit recollection versus
    mere familiarity, plus two levels of rejection.
    """

    REMEMBER = "remember"  # clearly remember writing it
    FAMILIAR = "familiar"  # looks familiar, probably mine
    UNCERTAIN = "uncertain"  # not sure who wrote it
    FOREIGN = "foreign"  # definitely not mine


class Track(str, Enum):
    """The two question tracks of a quiz."""

    CODE = "code"
    COMMENT = "comment"


@dataclass(frozen=True)
class Answer:
    """One graded answer; appended to a track's answer log, never changed."""

    level: ConfidenceLevel
    is_self_authored: bool


@dataclass(frozen=True)
class QuizPlan:
    """The sampled questions for both tracks, in presentation order."""

    code_questions: tuple[CodeFragment, ...]
    comment_questions: tuple[CommentFragment, ...]


@dataclass(frozen=True)
class TrackScore:
    """Answer tallies and recognition score for one track."""

    self_total: int
    other_total: int
    remembered: int
    familiar: int
    uncertain: int
    misidentified_as_foreign: int
    correctly_rejected: int
    false_memory: int
    forget_rate: float
    fuzzy_rate: float
    false_memory_rate: float
    score: int


@dataclass(frozen=True)
class ScoreBreakdown:
    """Per-track scores combined with the velocity bonus."""

    code: TrackScore
    comment: TrackScore
    high_output_days: int
    velocity_bonus: int
    total: int
