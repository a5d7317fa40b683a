"""Logging utilities with rich output for the vibe-score CLI.

All modules log through rich so scan progress, skipped commits and the
final report share one console.

Usage:
    from common.logger import get_logger

    logger = get_logger(__name__)
    logger.info("Scanning commits...")
    logger.debug("Skipping commit abc1234")
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.logging import RichHandler

from common.env import env

# Global console instance shared by loggers and the report renderer
console = Console()

# Names of loggers created by get_logger
_configured: set[str] = set()


def _rich_handler(show_time: bool = False, show_path: bool = False) -> RichHandler:
    handler = RichHandler(
        console=console,
        show_time=show_time,
        show_path=show_path,
        rich_tracebacks=True,
        tracebacks_show_locals=True,
        markup=True,
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    return handler


def get_logger(
    name: str,
    level: str | None = None,
    show_time: bool = False,
    show_path: bool = False,
) -> logging.Logger:
    """Get a configured logger with rich output.

    Args:
        name: Logger name (typically __name__ of the module)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               If None, uses LOG_LEVEL from the environment or INFO.
        show_time: Show timestamp in log output
        show_path: Show file path in log output

    Returns:
        Configured logger instance

    Example:
        >>> logger = get_logger(__name__, level="DEBUG")
        >>> logger.debug("Skipping commit abc1234: bad timestamp")
        DEBUG    Skipping commit abc1234: bad timestamp
    """
    logger = logging.getLogger(name)

    # Avoid adding multiple handlers if logger already configured
    if logger.handlers:
        return logger

    logger.setLevel((level or env.log_level()).upper())
    logger.addHandler(_rich_handler(show_time=show_time, show_path=show_path))
    _configured.add(name)

    # Allow propagation so pytest caplog can capture records
    logger.propagate = True

    return logger


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Apply the CLI's logging options once at the entry point.

    Loggers from get_logger already print through rich, so the root logger
    only receives the optional file handler. Records reach it by propagation.

    Args:
        level: Level applied to every logger created by get_logger
        log_file: Optional file path to also log to a file
    """
    level = level.upper()

    for name in _configured:
        logging.getLogger(name).setLevel(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in [h for h in root_logger.handlers if isinstance(h, logging.FileHandler)]:
        root_logger.removeHandler(handler)
        handler.close()

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(file_handler)


@contextmanager
def console_to_stderr() -> Iterator[None]:
    """Send everything printed through the shared console to stderr.

    Used when stdout carries machine-readable output. Log records, progress
    lines and prompts all follow the console.
    """
    previous = console.stderr
    console.stderr = True
    try:
        yield
    finally:
        console.stderr = previous


def progress(message: str) -> None:
    """Print a progress line without the logger prefix.

    Example:
        >>> progress("Scanning commits... (30/300)")
        Scanning commits... (30/300)
    """
    console.print(message)


def success(message: str) -> None:
    """Print a success message with a green checkmark."""
    console.print(f"[green]✓[/green] {message}")


def warning(message: str) -> None:
    """Print a warning message with a yellow warning icon."""
    console.print(f"[yellow]⚠[/yellow] {message}")


def error(message: str) -> None:
    """Print an error message with a red X icon to stderr."""
    Console(stderr=True).print(f"[red]✗[/red] {message}")
