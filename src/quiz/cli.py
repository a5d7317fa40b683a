#!/usr/bin/env python3
"""CLI interface for the vibe-score quiz."""

import argparse
import random
from pathlib import Path

from rich.prompt import Prompt
from rich.syntax import Syntax
from rich.table import Table

from common.env import env
from common.errors import VibeScoreError
from common.logger import (
    console,
    console_to_stderr,
    error,
    get_logger,
    progress,
    setup_logging,
    success,
    warning,
)
from extract.models import CodeFragment, Identity
from extract.pipeline import Harvest, discover_identities, harvest

from .models import ConfidenceLevel, Track
from .report import ScoreReporter
from .sampler import build_quiz_plan
from .session import QuizSession

logger = get_logger(__name__)

ANSWER_CHOICES: list[tuple[str, ConfidenceLevel, str]] = [
    ("1", ConfidenceLevel.REMEMBER, "💡 I remember writing this"),
    ("2", ConfidenceLevel.FAMILIAR, "🤔 Looks familiar, probably mine"),
    ("3", ConfidenceLevel.UNCERTAIN, "❓ Not sure who wrote this"),
    ("4", ConfidenceLevel.FOREIGN, "🚫 Definitely not mine"),
]


def _rng(args) -> random.Random:
    seed = args.seed if args.seed is not None else env.seed()
    return random.Random(seed)


def _print_identities(identities: list[Identity]) -> None:
    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Identity")
    table.add_column("Commits", justify="right")
    for index, identity in enumerate(identities, start=1):
        table.add_row(str(index), str(identity), str(identity.commit_count))
    console.print(table)


def select_identities(identities: list[Identity], requested: list[str] | None) -> set[tuple[str, str]]:
    """
    Resolve the identities the quiz taker claims as their own.

    Args:
        identities: Identities found in history
        requested: Names or emails given with --author; prompt when None

    Returns:
        Set of (name, email) keys, empty if nothing was chosen
    """
    if requested:
        wanted = {value.lower() for value in requested}
        return {
            i.key for i in identities if i.email.lower() in wanted or i.name.lower() in wanted
        }

    _print_identities(identities)
    console.print("[dim]The same person may commit under several name/email pairs.[/dim]")
    raw = Prompt.ask(
        "Which identities are you? (comma-separated numbers, empty to quit)",
        default="",
        console=console,
    )

    selected: set[tuple[str, str]] = set()
    for token in raw.split(","):
        token = token.strip()
        if not token:
            continue
        if not token.isdigit() or not 1 <= int(token) <= len(identities):
            warning(f"Ignoring invalid choice '{token}'")
            continue
        selected.add(identities[int(token) - 1].key)
    return selected


def _collect(args, selected: set[tuple[str, str]], rng: random.Random) -> Harvest:
    def on_progress(done: int, total: int) -> None:
        progress(f"Scanning commits... ({done}/{total})")

    return harvest(
        args.repo.resolve(),
        selected,
        rng=rng,
        max_commits=args.max_commits,
        sample_size=args.sample,
        on_progress=on_progress,
    )


def _ask_confidence(track: Track, number: int, total: int) -> ConfidenceLevel:
    noun = "code" if track is Track.CODE else "comment"
    for key, _, label in ANSWER_CHOICES:
        console.print(f"  [bold]{key}[/bold]  {label}")
    choice = Prompt.ask(
        f"({number}/{total}) Did you write this {noun}?",
        choices=[key for key, _, _ in ANSWER_CHOICES],
        console=console,
    )
    return next(level for key, level, _ in ANSWER_CHOICES if key == choice)


def run_quiz(session: QuizSession) -> None:
    """Present every question and record the answers."""
    while (position := session.current()) is not None:
        track, index, question = position
        total = len(
            session.plan.code_questions if track is Track.CODE else session.plan.comment_questions
        )

        if isinstance(question, CodeFragment):
            console.rule("🧠 Code memory")
            code = "\n".join(question.lines)
            console.print(
                Syntax(code, Syntax.guess_lexer(question.file_path, code), line_numbers=True)
            )
        else:
            console.rule("💬 Comment recognition")
            for line in question.context_lines:
                console.print(line, style="dim", markup=False, highlight=False)
            for line in question.comment_lines:
                console.print(line, style="green", markup=False, highlight=False)

        session.answer(_ask_confidence(track, index + 1, total))


def cmd_authors(args):
    """List author identities found in history.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    identities = discover_identities(args.repo.resolve(), args.max_commits)
    _print_identities(identities)
    return 0


def cmd_scan(args):
    """Scan history and summarize the fragment pools without a quiz."""
    identities = discover_identities(args.repo.resolve(), args.max_commits)
    selected = select_identities(identities, args.author)
    if not selected:
        warning("No identities selected")
        return 0

    result = _collect(args, selected, _rng(args))
    code_mine, code_other = result.split_code()
    comment_mine, comment_other = result.split_comments()

    table = Table(show_header=True, header_style="bold")
    table.add_column("Pool")
    table.add_column("Yours", justify="right")
    table.add_column("Others", justify="right")
    table.add_row("Code", str(len(code_mine)), str(len(code_other)))
    table.add_row("Comments", str(len(comment_mine)), str(len(comment_other)))
    console.print(table)

    logger.info(
        f"Scanned [bold]{result.commits_scanned}[/bold] commit(s), "
        f"skipped {result.commits_skipped}"
    )
    console.print(ScoreReporter().velocity_panel(result.velocity))
    return 0


def cmd_play(args):
    """Run the full quiz and print the score report.

    With --json, stdout carries only the JSON report; everything else the
    quiz prints goes to stderr.
    """
    if args.json:
        with console_to_stderr():
            return _play(args)
    return _play(args)


def _play(args):
    identities = discover_identities(args.repo.resolve(), args.max_commits)
    selected = select_identities(identities, args.author)
    if not selected:
        warning("No identities selected")
        return 0

    rng = _rng(args)
    result = _collect(args, selected, rng)
    code_mine, code_other = result.split_code()
    comment_mine, comment_other = result.split_comments()

    plan = build_quiz_plan(
        code_mine,
        code_other,
        comment_mine,
        comment_other,
        rng,
        code_count=args.code_questions,
        comment_count=args.comment_questions,
    )
    success(
        f"Ready: {len(plan.code_questions)} code and "
        f"{len(plan.comment_questions)} comment question(s)"
    )

    session = QuizSession(plan)
    run_quiz(session)

    reporter = ScoreReporter()
    breakdown = session.breakdown(result.velocity)
    if args.json:
        print(reporter.report_json(breakdown, result.velocity))
    else:
        reporter.report_console(breakdown, result.velocity)
    return 0


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: '{value}'") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--repo",
        type=Path,
        default=Path("."),
        help="Git repository to analyze (default: current directory)",
    )
    parser.add_argument(
        "--max-commits",
        type=positive_int,
        default=env.max_commits(),
        help="How many commits of history to read (default: VIBE_MAX_COMMITS or 2000)",
    )


def _add_scan_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--author",
        action="append",
        default=None,
        help="Name or email of an identity that is yours (repeatable; prompts if omitted)",
    )
    parser.add_argument(
        "--sample",
        type=positive_int,
        default=env.sample_commits(),
        help="How many commits to sample (default: VIBE_SAMPLE_COMMITS or 300)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible sampling (default: VIBE_SEED or unseeded)",
    )


def main(argv: list[str] | None = None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Find out how well you recognize the code you wrote"
    )
    parser.add_argument("--log-level", default=env.log_level(), help="Logging level")
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")

    subparsers = parser.add_subparsers(dest="command", required=True)

    authors_parser = subparsers.add_parser("authors", help="List author identities")
    _add_common_arguments(authors_parser)
    authors_parser.set_defaults(func=cmd_authors)

    scan_parser = subparsers.add_parser("scan", help="Summarize extractable fragments")
    _add_common_arguments(scan_parser)
    _add_scan_arguments(scan_parser)
    scan_parser.set_defaults(func=cmd_scan)

    play_parser = subparsers.add_parser("play", help="Take the recognition quiz")
    _add_common_arguments(play_parser)
    _add_scan_arguments(play_parser)
    play_parser.add_argument(
        "--code-questions",
        type=positive_int,
        default=env.code_questions(),
        help="Number of code questions (default: VIBE_CODE_QUESTIONS or 10)",
    )
    play_parser.add_argument(
        "--comment-questions",
        type=positive_int,
        default=env.comment_questions(),
        help="Number of comment questions (default: VIBE_COMMENT_QUESTIONS or 10)",
    )
    play_parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    play_parser.set_defaults(func=cmd_play)

    args = parser.parse_args(argv)
    setup_logging(level=args.log_level, log_file=args.log_file)

    try:
        return args.func(args)
    except VibeScoreError as e:
        error(str(e))
        return 1


if __name__ == "__main__":
    exit(main())
