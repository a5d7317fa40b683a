"""Quiz session state: question order and append-only answer logs."""

from collections.abc import Sequence

from extract.models import CodeFragment, CommentFragment, DailyStat

from .models import Answer, ConfidenceLevel, QuizPlan, ScoreBreakdown, Track
from .scoring import score_session

Question = CodeFragment | CommentFragment


class QuizSession:
    """Walk the code track, then the comment track, recording answers.

    The comment track is skipped when it has no questions.
    """

    def __init__(self, plan: QuizPlan):
        self.plan = plan
        self._answers: dict[Track, list[Answer]] = {Track.CODE: [], Track.COMMENT: []}

    def _questions(self, track: Track) -> Sequence[Question]:
        if track is Track.CODE:
            return self.plan.code_questions
        return self.plan.comment_questions

    def answers(self, track: Track) -> tuple[Answer, ...]:
        """Read-only view of a track's answer log."""
        return tuple(self._answers[track])

    @property
    def total_questions(self) -> int:
        return len(self.plan.code_questions) + len(self.plan.comment_questions)

    def current(self) -> tuple[Track, int, Question] | None:
        """Return (track, index within track, question), or None when finished."""
        for track in (Track.CODE, Track.COMMENT):
            questions = self._questions(track)
            index = len(self._answers[track])
            if index < len(questions):
                return track, index, questions[index]
        return None

    @property
    def finished(self) -> bool:
        return self.current() is None

    def answer(self, level: ConfidenceLevel) -> Answer:
        """
        Record an answer to the current question.

        Raises:
            RuntimeError: If every question has already been answered
        """
        position = self.current()
        if position is None:
            raise RuntimeError("Quiz is already finished")

        track, _, question = position
        answer = Answer(level=level, is_self_authored=question.is_self_authored)
        self._answers[track].append(answer)
        return answer

    def breakdown(self, velocity: Sequence[DailyStat]) -> ScoreBreakdown:
        """Score the session; intended for a finished quiz."""
        return score_session(
            self._answers[Track.CODE],
            self._answers[Track.COMMENT],
            high_output_days=len(velocity),
        )
