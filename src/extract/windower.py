"""Turn finished blocks into quiz fragments."""

import math
import random
import re
from collections.abc import Sequence

from common.constants import (
    FINGERPRINT_LENGTH,
    MAX_SNIPPET_LINES,
    MIN_COMMENT_LINE_GATE,
    MIN_SNIPPET_LINES,
    WINDOW_RATIO,
)

from .models import CodeBlock, CodeFragment, CommentBlock, CommentFragment, Identity

_WHITESPACE_RUN = re.compile(r"\s+")


def fingerprint(lines: Sequence[str]) -> str:
    """
    Normalized content digest used for duplicate detection.

    Lines are joined with newlines, every whitespace run becomes a single
    space, and the result is trimmed and cut to FINGERPRINT_LENGTH chars.
    """
    text = _WHITESPACE_RUN.sub(" ", "\n".join(lines)).strip()
    return text[:FINGERPRINT_LENGTH]


def window_length(block_length: int) -> int:
    """clamp(floor(L * 0.7), MIN_SNIPPET_LINES, min(MAX_SNIPPET_LINES, L))"""
    upper = min(MAX_SNIPPET_LINES, block_length)
    return min(upper, max(MIN_SNIPPET_LINES, math.floor(block_length * WINDOW_RATIO)))


def select_window(lines: Sequence[str], rng: random.Random) -> tuple[str, ...]:
    """
    Pick one contiguous window from a code block.

    The start offset is drawn uniformly from [0, L - len].
    """
    length = window_length(len(lines))
    start = rng.randint(0, max(0, len(lines) - length))
    return tuple(lines[start : start + length])


def make_code_fragment(
    block: CodeBlock,
    file_path: str,
    author: Identity,
    change_id: str,
    is_self_authored: bool,
    rng: random.Random,
) -> CodeFragment | None:
    """Window a code block into exactly one fragment, or None if it is too short."""
    if len(block.lines) < MIN_SNIPPET_LINES:
        return None

    snippet = select_window(block.lines, rng)
    return CodeFragment(
        file_path=file_path,
        lines=snippet,
        author=author,
        change_id=change_id,
        is_self_authored=is_self_authored,
        fingerprint=fingerprint(snippet),
    )


def make_comment_fragment(
    block: CommentBlock,
    file_path: str,
    author: Identity,
    change_id: str,
    is_self_authored: bool,
) -> CommentFragment | None:
    """
    Keep a comment block whole as one fragment.

    Returns None unless at least one comment line is longer than
    MIN_COMMENT_LINE_GATE characters after trimming.
    """
    if not any(len(line.strip()) > MIN_COMMENT_LINE_GATE for line in block.comment_lines):
        return None

    return CommentFragment(
        file_path=file_path,
        comment_lines=block.comment_lines,
        context_lines=block.context_lines,
        author=author,
        change_id=change_id,
        is_self_authored=is_self_authored,
        fingerprint=fingerprint(block.comment_lines),
    )
