"""Group classified added lines into code blocks and comment blocks."""

from collections import deque
from collections.abc import Iterable

from common.constants import COMMENT_CONTEXT_LINES, CONTEXT_WINDOW, MIN_SNIPPET_LINES

from .classifier import LineCategory, LineClassifier
from .models import CodeBlock, CommentBlock, DiffEvent

Block = CodeBlock | CommentBlock


class BlockAccumulator:
    """Accumulate one file section's added lines into finished blocks.

    State:
    - code buffer: the current run of substantive code lines
    - comment buffer: the current run of comment lines
    - context window: the last few accepted code lines, used as the
      context shown alongside a comment block

    Transitions return the blocks they finish (usually none):
    - observe(line) for an added line
    - boundary() for a hunk header, context line or deleted line
    - close() at the end of the file section
    """

    def __init__(
        self,
        classifier: LineClassifier | None = None,
        min_code_lines: int = MIN_SNIPPET_LINES,
        context_size: int = CONTEXT_WINDOW,
    ):
        self.classifier = classifier or LineClassifier()
        self.min_code_lines = min_code_lines
        self.code_buffer: list[str] = []
        self.comment_buffer: list[str] = []
        self.context: deque[str] = deque(maxlen=context_size)

    def observe(self, line: str) -> list[Block]:
        """Feed one added line (leading "+" stripped)."""
        category = self.classifier.classify(line)

        if category is LineCategory.BOILERPLATE:
            return []

        if category is LineCategory.COMMENT:
            self.comment_buffer.append(line)
            return []

        # Any non-comment line ends the comment run
        finished = self._flush_comments()

        if category is LineCategory.NOISE:
            finished.extend(self.boundary())
            return finished

        self.code_buffer.append(line)
        self.context.append(line)
        return finished

    def boundary(self) -> list[Block]:
        """Close the current code run; runs shorter than the minimum are dropped."""
        lines, self.code_buffer = self.code_buffer, []
        if len(lines) >= self.min_code_lines:
            return [CodeBlock(lines=tuple(lines))]
        return []

    def close(self) -> list[Block]:
        """Flush both buffers at the end of a file section and reset state."""
        finished = self.boundary()
        finished.extend(self._flush_comments())
        self.context.clear()
        return finished

    def _flush_comments(self) -> list[Block]:
        if not self.comment_buffer:
            return []
        # Context is captured before the line that ends the run is pushed
        context = tuple(self.context)[-COMMENT_CONTEXT_LINES:]
        block = CommentBlock(comment_lines=tuple(self.comment_buffer), context_lines=context)
        self.comment_buffer = []
        return [block]


def accumulate_blocks(
    events: Iterable[DiffEvent],
    classifier: LineClassifier | None = None,
) -> list[Block]:
    """
    Run a file section's events through a fresh accumulator.

    Args:
        events: Events produced by the segmenter for one file
        classifier: Optional custom classifier

    Returns:
        Finished code and comment blocks in the order they completed
    """
    accumulator = BlockAccumulator(classifier=classifier)
    blocks: list[Block] = []

    for event in events:
        if event.kind == "added":
            blocks.extend(accumulator.observe(event.text))
        else:
            blocks.extend(accumulator.boundary())

    blocks.extend(accumulator.close())
    return blocks
