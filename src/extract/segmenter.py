"""Split unified diff text into per-file sections of line events."""

import re
from pathlib import PurePosixPath

from common.constants import CODE_EXTENSIONS, IGNORED_PATH_PATTERNS

from .models import DiffEvent, FileSection

_DIFF_HEADER = re.compile(r"^diff --git a/.+ b/(.+)$")
_SECTION_SPLIT = re.compile(r"^(?=diff --git )", re.MULTILINE)


def is_code_file(path: str) -> bool:
    """
    Check whether a path is a quizzable source file.

    Ignored paths (minified, generated, vendored, build output, compiled)
    are rejected first, then the extension must be a known source extension.
    """
    if any(pattern.search(path) for pattern in IGNORED_PATH_PATTERNS):
        return False
    return PurePosixPath(path).suffix.lower() in CODE_EXTENSIONS


def is_added_line(line: str) -> bool:
    """An inserted line, excluding the "+++ b/path" file header."""
    return line.startswith("+") and not line.startswith("+++")


def split_file_sections(diff: str) -> list[tuple[str, list[str]]]:
    """
    Split a diff into (new_path, lines) pairs, one per file header.

    Text before the first "diff --git" header is dropped.
    """
    sections: list[tuple[str, list[str]]] = []
    for chunk in _SECTION_SPLIT.split(diff):
        lines = chunk.split("\n")
        match = _DIFF_HEADER.match(lines[0])
        if not match:
            continue
        sections.append((match.group(1), lines[1:]))
    return sections


def scan_section(lines: list[str]) -> list[DiffEvent]:
    """
    Turn the body of one file section into hunk/added/break events.

    Nothing is emitted until the first hunk header; header lines such as
    "index", "---" and "+++" that precede it are skipped.
    """
    events: list[DiffEvent] = []
    in_hunk = False

    for line in lines:
        if line.startswith("@@"):
            in_hunk = True
            events.append(DiffEvent("hunk"))
            continue

        if not in_hunk:
            continue

        if is_added_line(line):
            events.append(DiffEvent("added", line[1:]))
        elif line.startswith("-") or line.startswith(" "):
            events.append(DiffEvent("break"))

    return events


def segment_diff(diff: str) -> list[FileSection]:
    """
    Segment a commit diff into retained source-file sections.

    Args:
        diff: Unified diff text for one commit

    Returns:
        One FileSection per retained file, in diff order
    """
    return [
        FileSection(path=path, events=scan_section(lines))
        for path, lines in split_file_sections(diff)
        if is_code_file(path)
    ]
