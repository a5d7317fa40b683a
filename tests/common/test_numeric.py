"""Tests for numeric helpers."""

import pytest

from common.numeric import round_half_up


@pytest.mark.parametrize(
    "value, expected",
    [(0.0, 0), (0.4, 0), (0.5, 1), (2.5, 3), (12.5, 13), (26.49, 26), (99.5, 100)],
)
def test_round_half_up(value, expected):
    """Test that halves always round toward the larger integer."""
    assert round_half_up(value) == expected
