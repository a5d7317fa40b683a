"""Line classification rules for added diff lines.

Each added line is matched against an ordered rule table. The first rule
whose predicate accepts the trimmed line decides its category; lines no
rule accepts are substantive code.

Priority: boilerplate > comment > noise > code.
"""

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

from common.constants import MIN_CODE_LINE_LENGTH, MIN_COMMENT_LENGTH


class LineCategory(Enum):
    """What an added line contributes to block accumulation."""

    BOILERPLATE = "boilerplate"  # dropped, does not break a block
    COMMENT = "comment"
    NOISE = "noise"  # dropped, breaks the current code block
    CODE = "code"


@dataclass(frozen=True)
class ClassificationRule:
    """A predicate over a trimmed line and the category it assigns."""

    name: str
    predicate: Callable[[str], bool]
    category: LineCategory


BOILERPLATE_PATTERNS: list[re.Pattern[str]] = [
    # JavaScript/TypeScript
    re.compile(r"^import\s+"),
    re.compile(r"^export\s+(default\s+)?(\{|class|function|const|let|var|interface|type|enum)"),
    re.compile(r"^const\s+\w+\s*=\s*use[A-Z]\w*\("),  # hook call
    re.compile(r"^const\s*\[\s*\w+\s*,\s*set[A-Z]"),  # state hook
    re.compile(r"^const\s+\{\s*\w+\s*\}\s*=\s*use\w+"),  # hook destructuring
    re.compile(r"^module\.exports"),
    re.compile(r"^require\("),
    # Python
    re.compile(r"^from\s+\S+\s+import"),
    re.compile(r"^def\s+__\w+__"),
    re.compile(r"^class\s+\w+\s*(\(|:)"),
    # Go
    re.compile(r"^package\s+"),
    re.compile(r"^import\s*\("),
    re.compile(r"^func\s+\(\w+\s+\*?\w+\)\s+\w+"),
    # Rust
    re.compile(r"^use\s+"),
    re.compile(r"^mod\s+"),
    re.compile(r"^pub\s+(fn|struct|enum|trait|impl|mod|use|const|static)"),
    # Java/Kotlin
    re.compile(r"^public\s+(class|interface|enum)"),
    re.compile(r"^private\s+(class|interface|enum)"),
    # Ruby
    re.compile(r"^require\s+"),
    re.compile(r"^require_relative\s+"),
    re.compile(r"^module\s+"),
    # C/C++/C#
    re.compile(r"^#include\s+"),
    re.compile(r"^#define\s+"),
    re.compile(r"^#pragma\s+"),
    re.compile(r"^using\s+namespace"),
    # Any language
    re.compile(r"^[{}\[\]();,]+$"),
    re.compile(r"^\s*$"),
]

COMMENT_PATTERNS: list[re.Pattern[str]] = [
    re.compile(r"^//"),
    re.compile(r"^/\*"),
    re.compile(r"^\*"),
    re.compile(r"^#(?!!)"),  # not a shebang
    re.compile(r"^--"),
    re.compile(r'^"""'),
    re.compile(r"^'''"),
    re.compile(r"^;"),
    re.compile(r"^\{-"),
]

_PUNCTUATION_ONLY = re.compile(r"^[{}\[\]();,\s]+$")
_CLOSING_TOKEN = re.compile(r"^(else|end|endif|fi|done|esac|\}|\);?)$")


def matches_any(patterns: Sequence[re.Pattern[str]]) -> Callable[[str], bool]:
    """Build a predicate that is true when any pattern matches."""

    def predicate(line: str) -> bool:
        return any(pattern.search(line) for pattern in patterns)

    return predicate


is_boilerplate = matches_any(BOILERPLATE_PATTERNS)
is_comment_start = matches_any(COMMENT_PATTERNS)


def is_noise(line: str) -> bool:
    """Too short, punctuation-only or a bare closing construct."""
    if not line:
        return True
    if len(line) < MIN_CODE_LINE_LENGTH:
        return True
    if _PUNCTUATION_ONLY.match(line):
        return True
    return bool(_CLOSING_TOKEN.match(line))


DEFAULT_RULES: list[ClassificationRule] = [
    ClassificationRule("boilerplate", is_boilerplate, LineCategory.BOILERPLATE),
    ClassificationRule(
        "comment",
        lambda line: is_comment_start(line) and len(line) > MIN_COMMENT_LENGTH,
        LineCategory.COMMENT,
    ),
    ClassificationRule("short_comment", is_comment_start, LineCategory.NOISE),
    ClassificationRule("noise", is_noise, LineCategory.NOISE),
]


class LineClassifier:
    """Classify added lines with an ordered rule table."""

    def __init__(self, rules: Sequence[ClassificationRule] | None = None):
        """
        Args:
            rules: Rules evaluated in order (default: DEFAULT_RULES)
        """
        self.rules = list(rules) if rules is not None else list(DEFAULT_RULES)

    def classify(self, line: str) -> LineCategory:
        """
        Classify one added line (leading "+" already stripped).

        Rules see the line with surrounding whitespace removed.
        """
        trimmed = line.strip()
        for rule in self.rules:
            if rule.predicate(trimmed):
                return rule.category
        return LineCategory.CODE
