"""Score report reporters."""

import json
from collections.abc import Sequence
from dataclasses import dataclass

from rich.console import Console, Group
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.table import Table
from rich.text import Text

from common.constants import CODE_TRACK_WEIGHT, COMMENT_TRACK_WEIGHT
from common.logger import console as default_console
from common.numeric import round_half_up
from extract.models import DailyStat

from .models import ScoreBreakdown, Track, TrackScore

VELOCITY_ROWS_SHOWN = 5


@dataclass(frozen=True)
class Verdict:
    """A named tier for the composite score."""

    title: str
    emoji: str
    description: str


# (inclusive upper bound, verdict); a total of 100 falls through to the last tier
VERDICT_TIERS: list[tuple[int, Verdict]] = [
    (10, Verdict("Code Craftsman", "🔨", "Every line is etched into your memory.")),
    (25, Verdict("Traditional Programmer", "👴", "You still remember every variable name.")),
    (40, Verdict("Hybrid Developer", "🔋", "A pragmatic balance of your own hands and assistance.")),
    (55, Verdict("Vibe Coder", "😎", "Coding like dreaming: you wake up remembering the gist.")),
    (70, Verdict("AI Collaborator", "🎸", "You bring the requirements, something else brings the code.")),
    (85, Verdict("Prompt Engineer", "🎯", "Code is a by-product of well-asked questions.")),
    (99, Verdict("Human Copilot", "🤖", "You can no longer tell which lines are yours.")),
]
FINAL_VERDICT = Verdict("AI Puppet", "🎭", "The code just flows through your fingers.")

TRACK_COMMENTARY: dict[Track, list[str]] = {
    Track.CODE: [
        "You remember your code in detail.",
        "Remembered some, forgot some. Perfectly normal.",
        "Write it and forget it: a classic vibe coder.",
        "Are you sure you wrote this code?",
    ],
    Track.COMMENT: [
        "You even remember your comments.",
        "Comments? As long as it runs.",
        "Those comments look borrowed.",
        "Comments are somebody else's job.",
    ],
}


def verdict_for(total: int) -> Verdict:
    """Map a composite score to its verdict tier."""
    for upper, verdict in VERDICT_TIERS:
        if total <= upper:
            return verdict
    return FINAL_VERDICT


def track_commentary(track: Track, score: int) -> str:
    """One-line commentary for a track score (bands: <20, <50, <80, rest)."""
    lines = TRACK_COMMENTARY[track]
    if score < 20:
        return lines[0]
    if score < 50:
        return lines[1]
    if score < 80:
        return lines[2]
    return lines[3]


class ScoreReporter:
    """Format and display a finished quiz's score breakdown."""

    def __init__(self, console: Console | None = None):
        """Initialize the reporter.

        Args:
            console: Console to print to (default: the shared logging console)
        """
        self.console = console or default_console

    def _track_panel(self, track: Track, title: str, result: TrackScore) -> Panel:
        table = Table.grid(padding=(0, 2))
        table.add_column()
        table.add_column(justify="right")
        table.add_row(f"[dim]Your {track.value}s ({result.self_total})[/dim]", "")
        table.add_row("💡 Remembered", f"[green]{result.remembered}[/green]")
        table.add_row("🤔 Familiar", f"[yellow]{result.familiar}[/yellow]")
        table.add_row("❓ Uncertain", f"[cyan]{result.uncertain}[/cyan]")
        table.add_row("🚫 Called foreign", f"[red]{result.misidentified_as_foreign}[/red]")
        if result.other_total > 0:
            table.add_row(f"[dim]Others' {track.value}s ({result.other_total})[/dim]", "")
            table.add_row("✓ Correctly rejected", f"[green]{result.correctly_rejected}[/green]")
            table.add_row("✗ False memory", f"[magenta]{result.false_memory}[/magenta]")

        score_line = Table.grid(padding=(0, 1))
        score_line.add_row(
            ProgressBar(total=100, completed=result.score, width=30),
            Text(f"{result.score}%", style="bold"),
        )
        return Panel(
            Group(table, score_line, Text(f"→ {track_commentary(track, result.score)}", style="dim")),
            title=title,
            title_align="left",
        )

    def velocity_panel(self, velocity: Sequence[DailyStat]) -> Panel:
        if not velocity:
            return Panel("[dim]No unusually high-output days (500+ lines).[/dim]", title="⚡ Velocity")

        table = Table(show_header=True, header_style="bold")
        table.add_column("Date")
        table.add_column("Lines", justify="right")
        table.add_column("Commits", justify="right")
        table.add_column("Avg/commit", justify="right")
        for day in velocity[:VELOCITY_ROWS_SHOWN]:
            table.add_row(
                day.day.isoformat(),
                f"[red]{day.lines_added}[/red]",
                str(day.commit_count),
                str(day.avg_lines_per_commit),
            )
        footer = ""
        if len(velocity) > VELOCITY_ROWS_SHOWN:
            footer = f"[dim]...and {len(velocity) - VELOCITY_ROWS_SHOWN} more day(s)[/dim]"
        return Panel(Group(table, Text.from_markup(footer)), title="⚡ Velocity", title_align="left")

    def report_console(self, breakdown: ScoreBreakdown, velocity: Sequence[DailyStat]) -> None:
        """Print the score report.

        Args:
            breakdown: Score breakdown of the finished quiz
            velocity: High-output days found during the scan
        """
        verdict = verdict_for(breakdown.total)

        self.console.print(Panel(Text("📊 VIBE SCORE REPORT", justify="center", style="bold yellow")))
        self.console.print(self._track_panel(Track.CODE, "🧠 Code memory", breakdown.code))
        self.console.print(self._track_panel(Track.COMMENT, "💬 Comment recognition", breakdown.comment))
        self.console.print(self.velocity_panel(velocity))

        summary = Table.grid(padding=(0, 1))
        summary.add_row(
            ProgressBar(total=100, completed=breakdown.total, width=40),
            Text(f"{breakdown.total}%", style="bold yellow"),
        )
        self.console.print(
            Panel(
                Group(
                    summary,
                    Text(f"{verdict.emoji} {verdict.title}", style="bold"),
                    Text(f'"{verdict.description}"', style="italic dim"),
                ),
                title="🎯 Overall",
                border_style="magenta",
            )
        )

        code_part = round_half_up(breakdown.code.score * CODE_TRACK_WEIGHT)
        comment_part = round_half_up(breakdown.comment.score * COMMENT_TRACK_WEIGHT)
        self.console.print("[dim]Score composition:[/dim]")
        self.console.print(
            f"[dim]  Code memory (50%): {breakdown.code.score}% × 0.5 = {code_part}[/dim]"
        )
        self.console.print(
            f"[dim]  Comment recognition (35%): {breakdown.comment.score}% × 0.35 = {comment_part}[/dim]"
        )
        self.console.print(
            f"[dim]  High-output days: +{breakdown.velocity_bonus} "
            f"({breakdown.high_output_days} day(s))[/dim]"
        )

    def report_json(self, breakdown: ScoreBreakdown, velocity: Sequence[DailyStat]) -> str:
        """Format the breakdown as JSON.

        Returns:
            JSON string representation of the report
        """

        def track_dict(result: TrackScore) -> dict:
            return {
                "self_total": result.self_total,
                "other_total": result.other_total,
                "remembered": result.remembered,
                "familiar": result.familiar,
                "uncertain": result.uncertain,
                "misidentified_as_foreign": result.misidentified_as_foreign,
                "correctly_rejected": result.correctly_rejected,
                "false_memory": result.false_memory,
                "score": result.score,
            }

        verdict = verdict_for(breakdown.total)
        data = {
            "code": track_dict(breakdown.code),
            "comment": track_dict(breakdown.comment),
            "velocity": [
                {
                    "date": day.day.isoformat(),
                    "lines_added": day.lines_added,
                    "commits": day.commit_count,
                    "avg_lines_per_commit": day.avg_lines_per_commit,
                }
                for day in velocity
            ],
            "velocity_bonus": breakdown.velocity_bonus,
            "total": breakdown.total,
            "verdict": verdict.title,
        }
        return json.dumps(data, indent=2, ensure_ascii=False)
