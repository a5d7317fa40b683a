"""Recognition quiz: question sampling, answer logging and scoring."""

from .models import Answer, ConfidenceLevel, QuizPlan, ScoreBreakdown, Track, TrackScore
from .sampler import build_quiz_plan, compute_shares, sample_questions
from .scoring import composite_score, score_session, score_track
from .session import QuizSession

__all__ = [
    "Answer",
    "ConfidenceLevel",
    "QuizPlan",
    "ScoreBreakdown",
    "Track",
    "TrackScore",
    "build_quiz_plan",
    "compute_shares",
    "sample_questions",
    "composite_score",
    "score_session",
    "score_track",
    "QuizSession",
]
