"""Extract quiz fragments and velocity stats from git history."""

from .models import (
    CodeFragment,
    CommentFragment,
    CommitInfo,
    DailyStat,
    Identity,
)
from .pipeline import Harvest, discover_identities, extract_fragments, harvest

__all__ = [
    "CodeFragment",
    "CommentFragment",
    "CommitInfo",
    "DailyStat",
    "Identity",
    "Harvest",
    "discover_identities",
    "extract_fragments",
    "harvest",
]
