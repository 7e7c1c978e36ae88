"""
Tests for logger functionality.
"""

from tokenlists.logger import StructuredLogger, configure_logger, get_logger, reset_logger


class TestStructuredLogger:
    """Test structured logging functionality."""

    def test_logger_creation(self, tmp_path):
        """Logger should be created with default settings."""
        logger = StructuredLogger(
            name="test",
            level="INFO",
            log_dir=tmp_path,
            enable_console=False,
        )

        assert logger.logger.name == "test"
        assert logger.metrics["lists_diffed"] == 0

    def test_log_methods(self, tmp_path):
        """All log level methods should work."""
        logger = StructuredLogger(
            name="test",
            log_dir=tmp_path,
            enable_console=False,
        )

        # Should not raise exceptions
        logger.debug("Debug message")
        logger.info("Info message")
        logger.warning("Warning message")
        logger.error("Error message")
        logger.critical("Critical message")

    def test_log_with_context(self, tmp_path):
        """Context is appended to the message as JSON."""
        logger = StructuredLogger(
            name="test",
            log_dir=tmp_path,
            enable_console=False,
        )

        logger.info("Message with context", path="list.json", added=5)

        log_content = next(tmp_path.glob("*.log")).read_text()
        assert '"added": 5' in log_content

    def test_no_file_without_log_dir(self, tmp_path, monkeypatch):
        """File output needs an explicit directory."""
        monkeypatch.chdir(tmp_path)
        logger = StructuredLogger(name="test", enable_console=False)
        logger.info("Nowhere")

        assert list(tmp_path.rglob("*.log")) == []

    def test_metrics_tracking(self, tmp_path):
        """Metrics should be tracked correctly."""
        logger = StructuredLogger(
            name="test",
            log_dir=tmp_path,
            enable_console=False,
        )

        logger.record_diff(added=2, removed=1, changed=3)
        logger.record_diff(added=0, removed=0, changed=1)
        logger.record_bump("MAJOR")
        logger.record_bump("PATCH")
        logger.record_bump("MAJOR")
        logger.record_validation_failure()

        metrics = logger.get_metrics()

        assert metrics["lists_diffed"] == 2
        assert metrics["tokens_added"] == 2
        assert metrics["tokens_removed"] == 1
        assert metrics["tokens_changed"] == 4
        assert metrics["bumps_by_kind"] == {"MAJOR": 2, "PATCH": 1}
        assert metrics["validation_failures"] == 1

    def test_get_metrics_is_a_copy(self, tmp_path):
        logger = StructuredLogger(name="test", log_dir=tmp_path, enable_console=False)
        logger.get_metrics()["bumps_by_kind"]["MINOR"] = 9

        assert logger.metrics["bumps_by_kind"] == {}

    def test_log_file_creation(self, tmp_path):
        """Log file should be created in specified directory."""
        logger = StructuredLogger(
            name="test",
            log_dir=tmp_path,
            enable_console=False,
        )

        logger.info("Test message")

        log_files = list(tmp_path.glob("*.log"))
        assert len(log_files) == 1

        log_content = log_files[0].read_text()
        assert "Test message" in log_content

    def test_metrics_summary(self, tmp_path):
        logger = StructuredLogger(name="test", log_dir=tmp_path, enable_console=False)
        logger.record_diff(added=1, removed=0, changed=0)
        logger.record_bump("MINOR")

        logger.log_metrics_summary()

        log_content = next(tmp_path.glob("*.log")).read_text()
        assert "Lists diffed: 1" in log_content
        assert "MINOR: 1" in log_content


class TestGlobalLogger:
    """Test global logger singleton."""

    def test_get_logger_singleton(self, tmp_path):
        """get_logger should return same instance."""
        reset_logger()

        logger1 = get_logger(log_dir=tmp_path, enable_console=False)
        logger2 = get_logger()

        assert logger1 is logger2

    def test_reset_logger(self, tmp_path):
        """reset_logger should create new instance."""
        reset_logger()

        logger1 = get_logger(log_dir=tmp_path, enable_console=False)
        logger1.record_bump("NONE")

        reset_logger()

        logger2 = get_logger(log_dir=tmp_path, enable_console=False)

        assert logger2.metrics["bumps_by_kind"] == {}

    def test_configure_keeps_instance(self, tmp_path):
        """Reconfiguring keeps the object that modules already hold."""
        reset_logger()
        logger = get_logger(enable_console=False)
        logger.record_bump("PATCH")

        configured = configure_logger(level="DEBUG", log_dir=tmp_path)

        assert configured is logger
        assert configured.metrics["bumps_by_kind"] == {"PATCH": 1}
        assert configured.logger.isEnabledFor(10)
