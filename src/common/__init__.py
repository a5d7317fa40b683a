"""Shared configuration, logging and errors for vibe-score."""
