"""Tests for score report formatting."""

import io
import json
from datetime import date

import pytest
from rich.console import Console

from extract.models import DailyStat
from quiz.models import Answer, ConfidenceLevel, Track
from quiz.report import (
    FINAL_VERDICT,
    TRACK_COMMENTARY,
    ScoreReporter,
    track_commentary,
    verdict_for,
)
from quiz.scoring import score_session


@pytest.fixture
def recording_console():
    return Console(file=io.StringIO(), record=True, width=100)


@pytest.fixture
def breakdown():
    code = [Answer(ConfidenceLevel.UNCERTAIN, True)] * 2 + [Answer(ConfidenceLevel.REMEMBER, True)] * 2
    comment = [Answer(ConfidenceLevel.REMEMBER, True), Answer(ConfidenceLevel.FAMILIAR, False)]
    return score_session(code, comment, high_output_days=1)


VELOCITY = [
    DailyStat(date(2024, 3, 15), 1200, 4, 300),
    DailyStat(date(2024, 3, 2), 650, 1, 650),
]


@pytest.mark.parametrize(
    "total, title",
    [
        (0, "Code Craftsman"),
        (10, "Code Craftsman"),
        (11, "Traditional Programmer"),
        (25, "Traditional Programmer"),
        (40, "Hybrid Developer"),
        (55, "Vibe Coder"),
        (70, "AI Collaborator"),
        (85, "Prompt Engineer"),
        (99, "Human Copilot"),
    ],
)
def test_verdict_tiers(total, title):
    assert verdict_for(total).title == title


def test_perfect_hundred_is_final_verdict():
    assert verdict_for(100) is FINAL_VERDICT


@pytest.mark.parametrize("score, index", [(0, 0), (19, 0), (20, 1), (49, 1), (50, 2), (79, 2), (80, 3)])
def test_track_commentary_bands(score, index):
    assert track_commentary(Track.CODE, score) == TRACK_COMMENTARY[Track.CODE][index]
    assert track_commentary(Track.COMMENT, score) == TRACK_COMMENTARY[Track.COMMENT][index]


def test_report_json(breakdown):
    data = json.loads(ScoreReporter().report_json(breakdown, VELOCITY))

    assert data["code"]["score"] == 25
    assert data["code"]["uncertain"] == 2
    assert data["comment"]["false_memory"] == 1
    assert data["comment"]["score"] == 20
    assert data["velocity_bonus"] == 3
    # 25 * 0.5 + 20 * 0.35 + 3 = 22.5
    assert data["total"] == 23
    assert data["verdict"] == "Traditional Programmer"
    assert data["velocity"][0] == {
        "date": "2024-03-15",
        "lines_added": 1200,
        "commits": 4,
        "avg_lines_per_commit": 300,
    }


def test_report_console(recording_console, breakdown):
    ScoreReporter(console=recording_console).report_console(breakdown, VELOCITY)
    output = recording_console.export_text()

    assert "VIBE SCORE REPORT" in output
    assert "Traditional Programmer" in output
    assert "2024-03-15" in output
    assert "25% × 0.5 = 13" in output
    assert "+3 (1 day(s))" in output


def test_velocity_panel_without_days(recording_console):
    recording_console.print(ScoreReporter(console=recording_console).velocity_panel([]))
    assert "No unusually high-output days" in recording_console.export_text()


def test_velocity_panel_truncates_rows(recording_console):
    days = [DailyStat(date(2024, 1, n), 1000 - n, 2, 500) for n in range(1, 9)]
    recording_console.print(ScoreReporter(console=recording_console).velocity_panel(days))
    output = recording_console.export_text()

    assert "2024-01-05" in output
    assert "2024-01-06" not in output
    assert "and 3 more day(s)" in output
