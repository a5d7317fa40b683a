"""Shared exceptions for the extraction and quiz pipeline."""


class VibeScoreError(Exception):
    """Base exception for vibe-score failures."""

    pass


class RepositoryUnavailableError(VibeScoreError):
    """No git repository found at the working location."""

    pass


class NoHistoryError(VibeScoreError):
    """The repository has no commits to analyze."""

    pass


class ChangeRetrievalError(VibeScoreError):
    """A single commit's metadata or diff could not be fetched or parsed."""

    pass


class InsufficientMaterialError(VibeScoreError):
    """Too few questions could be assembled for a quiz track."""

    def __init__(self, track: str, available: int, required: int):
        self.track = track
        self.available = available
        self.required = required
        super().__init__(
            f"Only {available} {track} question(s) could be assembled, "
            f"at least {required} are needed. More commit history is required."
        )
