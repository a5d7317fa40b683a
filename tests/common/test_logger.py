"""Tests for logging utilities."""

import logging

from common.logger import console, console_to_stderr, get_logger, progress, setup_logging


class TestGetLogger:
    """Tests for get_logger function."""

    def test_returns_logger_instance(self):
        """Test that get_logger returns a logger instance."""
        logger = get_logger("test")
        assert isinstance(logger, logging.Logger)

    def test_logger_name(self):
        """Test that logger has correct name."""
        logger = get_logger("test.module")
        assert logger.name == "test.module"

    def test_default_level_is_info(self, monkeypatch):
        """Test that default logging level is INFO."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        logger = get_logger("test.default")
        assert logger.level == logging.INFO

    def test_default_level_from_env(self, monkeypatch):
        """Test that LOG_LEVEL sets the default level."""
        monkeypatch.setenv("LOG_LEVEL", "warning")
        logger = get_logger("test.env_level")
        assert logger.level == logging.WARNING

    def test_custom_level(self):
        """Test that custom logging level can be set."""
        logger = get_logger("test.custom", level="DEBUG")
        assert logger.level == logging.DEBUG

    def test_reuses_existing_logger(self):
        """Test that get_logger does not stack handlers."""
        logger1 = get_logger("test.reuse")
        logger2 = get_logger("test.reuse")
        assert logger1 is logger2
        assert len(logger1.handlers) == 1

    def test_logging_output(self, caplog):
        """Test that records propagate to caplog."""
        logger = get_logger("test.output")

        with caplog.at_level(logging.INFO):
            logger.info("Scanning 300 commits")

        assert "Scanning 300 commits" in caplog.text

    def test_info_level_filters_debug(self, caplog):
        """Test that INFO level filters out DEBUG messages."""
        logger = get_logger("test.filter", level="INFO")

        with caplog.at_level(logging.DEBUG):
            logger.debug("Skipping commit abc1234")
            logger.info("Kept 12 fragments")

        assert "Skipping commit abc1234" not in caplog.text
        assert "Kept 12 fragments" in caplog.text


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_applies_level_to_known_loggers(self):
        """Test that the CLI level reaches loggers created earlier."""
        logger = get_logger("test.setup.level", level="INFO")
        try:
            setup_logging(level="debug")
            assert logger.level == logging.DEBUG
        finally:
            setup_logging(level="INFO")

    def test_does_not_add_console_handler_to_root(self):
        """Test that records are not printed twice through the root logger."""
        setup_logging(level="INFO")
        root = logging.getLogger()
        assert not any(type(h).__name__ == "RichHandler" for h in root.handlers)

    def test_log_file(self, tmp_path):
        """Test that log records are also written to a file."""
        log_file = tmp_path / "vibe.log"
        logger = get_logger("test.setup.file")
        try:
            setup_logging(level="INFO", log_file=str(log_file))
            logger.info("written to file")
            for handler in logging.getLogger().handlers:
                handler.flush()
            assert "written to file" in log_file.read_text()
        finally:
            setup_logging(level="INFO")


class TestConsoleToStderr:
    """Tests for console_to_stderr."""

    def test_redirects_and_restores(self, capsys):
        """Test that console output moves to stderr only inside the block."""
        with console_to_stderr():
            progress("Scanning commits... (30/300)")
        progress("Scanned 300 commits")

        captured = capsys.readouterr()
        assert "Scanning commits... (30/300)" in captured.err
        assert "Scanning commits" not in captured.out
        assert "Scanned 300 commits" in captured.out
        assert console.stderr is False

    def test_restores_after_error(self):
        """Test that an exception inside the block still restores stdout."""
        try:
            with console_to_stderr():
                raise ValueError("boom")
        except ValueError:
            pass
        assert console.stderr is False
