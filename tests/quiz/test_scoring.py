"""Tests for recognition scoring."""

import pytest

from quiz.models import Answer, ConfidenceLevel
from quiz.scoring import composite_score, score_session, score_track, velocity_bonus

REMEMBER = ConfidenceLevel.REMEMBER
FAMILIAR = ConfidenceLevel.FAMILIAR
UNCERTAIN = ConfidenceLevel.UNCERTAIN
FOREIGN = ConfidenceLevel.FOREIGN


def mine(level, n=1):
    return [Answer(level=level, is_self_authored=True)] * n


def theirs(level, n=1):
    return [Answer(level=level, is_self_authored=False)] * n


class TestScoreTrack:
    """Tests for score_track."""

    def test_mixed_answers(self):
        """Test a full ten/ten track with known rates."""
        answers = (
            mine(REMEMBER, 5)
            + mine(FAMILIAR, 2)
            + mine(UNCERTAIN, 2)
            + mine(FOREIGN, 1)
            + theirs(FAMILIAR, 2)
            + theirs(REMEMBER, 1)
            + theirs(FOREIGN, 5)
            + theirs(UNCERTAIN, 2)
        )

        result = score_track(answers)

        assert result.self_total == 10
        assert result.other_total == 10
        assert result.forget_rate == pytest.approx(0.3)
        assert result.fuzzy_rate == pytest.approx(0.2)
        assert result.false_memory_rate == pytest.approx(0.3)
        assert result.false_memory == 3
        assert result.correctly_rejected == 7
        assert result.score == 27

    def test_perfect_recall(self):
        result = score_track(mine(REMEMBER, 6) + theirs(FOREIGN, 4))
        assert result.score == 0
        assert result.remembered == 6

    def test_worst_case(self):
        """Test that disowning everything and claiming others' work gives 70."""
        result = score_track(mine(FOREIGN, 6) + theirs(REMEMBER, 4))
        assert result.score == 70

    def test_uncertain_on_others_is_not_false_memory(self):
        result = score_track(mine(REMEMBER, 1) + theirs(UNCERTAIN, 3))
        assert result.false_memory == 0
        assert result.correctly_rejected == 3

    def test_empty_log(self):
        """Test that empty groups never divide by zero."""
        result = score_track([])
        assert result.self_total == 0
        assert result.other_total == 0
        assert result.score == 0

    def test_no_other_authored_questions(self):
        result = score_track(mine(UNCERTAIN, 3))
        assert result.false_memory_rate == 0
        assert result.score == 50

    def test_rounds_half_up(self):
        """Test that 12.5 rounds to 13, not to the even neighbour."""
        # forget 1/4 * 50 = 12.5
        result = score_track(mine(REMEMBER, 3) + mine(UNCERTAIN, 1))
        assert result.score == 13


@pytest.mark.parametrize("days, bonus", [(0, 0), (1, 3), (4, 12), (5, 15), (10, 15)])
def test_velocity_bonus(days, bonus):
    assert velocity_bonus(days) == bonus


class TestCompositeScore:
    """Tests for composite_score."""

    def test_weighted_blend(self):
        # 40 * 0.5 + 60 * 0.35 + 6 = 47
        assert composite_score(40, 60, 2) == 47

    def test_clamped_to_100(self):
        assert composite_score(100, 100, 10) == 100

    def test_zero(self):
        assert composite_score(0, 0, 0) == 0


def test_score_session():
    breakdown = score_session(
        mine(FOREIGN, 4) + theirs(FOREIGN, 2),
        mine(REMEMBER, 2) + theirs(FAMILIAR, 1),
        high_output_days=3,
    )

    assert breakdown.code.score == 50
    assert breakdown.comment.score == 20
    assert breakdown.velocity_bonus == 9
    # 50 * 0.5 + 20 * 0.35 + 9 = 41
    assert breakdown.total == 41
    assert breakdown.high_output_days == 3
