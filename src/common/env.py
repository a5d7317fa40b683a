"""Environment configuration interface for vibe-score.

This module provides a clean interface for accessing environment variables,
centralizing all environment variable access in one place.
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()


class Environment:
    """Interface for accessing environment configuration."""

    @staticmethod
    def log_level() -> str:
        """Get the default logging level.

        Returns:
            Upper-cased level name, defaults to 'INFO'
        """
        return os.getenv("LOG_LEVEL", "INFO").upper()

    @staticmethod
    def max_commits() -> int:
        """Get how many commits of history are read when listing identities.

        Returns:
            Commit limit, defaults to 2000
        """
        return int(os.getenv("VIBE_MAX_COMMITS", "2000"))

    @staticmethod
    def sample_commits() -> int:
        """Get how many commits are sampled for snippet extraction.

        Returns:
            Sample size, defaults to 300
        """
        return int(os.getenv("VIBE_SAMPLE_COMMITS", "300"))

    @staticmethod
    def code_questions() -> int:
        """Get the number of code questions per quiz.

        Returns:
            Question count, defaults to 10
        """
        return int(os.getenv("VIBE_CODE_QUESTIONS", "10"))

    @staticmethod
    def comment_questions() -> int:
        """Get the number of comment questions per quiz.

        Returns:
            Question count, defaults to 10
        """
        return int(os.getenv("VIBE_COMMENT_QUESTIONS", "10"))

    @staticmethod
    def seed() -> int | None:
        """Get the random seed used for sampling and windowing.

        Returns:
            Integer seed, or None for an unseeded run
        """
        value = os.getenv("VIBE_SEED", "").strip()
        return int(value) if value else None


# Singleton instance for convenient access
env = Environment()
