"""Tests for splitting diffs into per-file event streams."""

import pytest

from extract.models import DiffEvent
from extract.segmenter import is_code_file, scan_section, segment_diff, split_file_sections

TWO_FILE_DIFF = """diff --git a/src/app.py b/src/app.py
index 1111111..2222222 100644
--- a/src/app.py
+++ b/src/app.py
@@ -1,3 +1,4 @@
 import os
+total = compute_total(items)
-old = 1
@@ -10,2 +11,3 @@ def run():
+result = total * factor
diff --git a/README.md b/README.md
index 3333333..4444444 100644
--- a/README.md
+++ b/README.md
@@ -1 +1,2 @@
+Some documentation line
"""


@pytest.mark.parametrize(
    "path",
    ["src/app.py", "lib/Widget.TSX", "cmd/main.go", "scripts/deploy.sh", "analysis/model.R"],
)
def test_source_files_are_kept(path):
    """Test that known source extensions are recognized case-insensitively."""
    assert is_code_file(path)


@pytest.mark.parametrize(
    "path",
    [
        "README.md",
        "static/app.min.js",
        "web/node_modules/react/index.js",
        "vendor/lib/util.go",
        "dist/bundle.js",
        "build/output.c",
        "types/index.d.ts",
        "pkg/__pycache__/mod.py",
        "Makefile",
    ],
)
def test_ignored_and_unknown_files_are_dropped(path):
    """Test that generated, vendored and non-source files are rejected."""
    assert not is_code_file(path)


def test_split_file_sections_uses_new_path():
    """Test that each section is keyed by its post-change path."""
    diff = "diff --git a/old/name.py b/new/name.py\n@@ -1 +1 @@\n+x = 1\n"
    sections = split_file_sections(diff)
    assert [path for path, _ in sections] == ["new/name.py"]


def test_split_file_sections_ignores_preamble():
    """Test that text before the first header is dropped."""
    diff = "stray text\ndiff --git a/a.py b/a.py\n@@ -1 +1 @@\n+x = 1\n"
    sections = split_file_sections(diff)
    assert len(sections) == 1
    assert sections[0][0] == "a.py"


def test_scan_section_skips_lines_before_first_hunk():
    """Test that file header lines never become events."""
    events = scan_section(["index 1..2 100644", "--- a/x.py", "+++ b/x.py", "+early"])
    assert events == []


def test_scan_section_event_kinds():
    """Test hunk, added and break events in order."""
    events = scan_section(
        [
            "@@ -1,3 +1,3 @@",
            " context line",
            "+added line",
            "-removed line",
            "\\ No newline at end of file",
            "@@ -9 +9 @@",
        ]
    )
    assert events == [
        DiffEvent("hunk"),
        DiffEvent("break"),
        DiffEvent("added", "added line"),
        DiffEvent("break"),
        DiffEvent("hunk"),
    ]


def test_scan_section_excludes_file_header_marker_inside_hunk():
    """Test that a "+++" line is never treated as an insertion."""
    events = scan_section(["@@ -1 +1 @@", "+++ b/x.py", "+real = 1"])
    assert events == [DiffEvent("hunk"), DiffEvent("added", "real = 1")]


def test_segment_diff_keeps_only_source_files():
    """Test end-to-end segmentation of a two-file diff."""
    sections = segment_diff(TWO_FILE_DIFF)

    assert [s.path for s in sections] == ["src/app.py"]
    added = [e.text for e in sections[0].events if e.kind == "added"]
    assert added == ["total = compute_total(items)", "result = total * factor"]
    assert [e.kind for e in sections[0].events].count("hunk") == 2


def test_segment_empty_diff():
    """Test that an empty diff yields nothing."""
    assert segment_diff("") == []
