"""
Tests for the structured category logger.
"""

import io

from models.enums import LogCategory, LogLevel
from utils.logger import configure_logger, get_category_logger, get_logger


class TestLogger:

    def test_message_and_details(self, capsys):
        configure_logger(LogLevel.INFO, use_colors=False)
        get_logger().info(LogCategory.ANIMATION, "Keyframe complete", remaining=1, stage_ms=350)

        lines = capsys.readouterr().out.splitlines()
        assert "ANIMATION" in lines[0]
        assert lines[0].endswith("Keyframe complete")
        assert lines[1].strip() == "├─ remaining: 1"
        assert lines[2].strip() == "└─ stage_ms: 350"

    def test_level_filter(self, capsys):
        configure_logger(LogLevel.WARN, use_colors=False)
        log = get_category_logger(LogCategory.SERVICE)

        log.info("hidden")
        log.debug("hidden")
        log.warn("shown")

        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "shown" in out

    def test_no_ansi_codes_without_colors(self, capsys):
        configure_logger(LogLevel.INFO, use_colors=False)
        get_logger().error(LogCategory.SYSTEM, "boom")

        assert "\033[" not in capsys.readouterr().out

    def test_colors(self, capsys):
        configure_logger(LogLevel.INFO, use_colors=True)
        get_logger().info(LogCategory.CONFIG, "loaded")

        assert "\033[" in capsys.readouterr().out

    def test_singleton_keeps_bound_loggers_in_sync(self, capsys):
        log = get_logger().for_category(LogCategory.TICKER)
        configure_logger(LogLevel.DEBUG, use_colors=False)

        log.debug("tick")

        assert "tick" in capsys.readouterr().out
        assert get_logger() is get_logger()

    def test_category_override(self, capsys):
        configure_logger(LogLevel.INFO, use_colors=False)
        log = get_category_logger(LogCategory.GENERAL).with_category(LogCategory.CONFIG)

        log.info("reloaded")
        log.log("respun", category=LogCategory.SPRING)

        out = capsys.readouterr().out
        assert "CONFIG" in out
        assert "SPRING" in out

    def test_custom_stream(self, capsys):
        buffer = io.StringIO()
        configure_logger(LogLevel.INFO, use_colors=False, stream=buffer)
        try:
            get_logger().info(LogCategory.SYSTEM, "to buffer", subjects=2)
        finally:
            configure_logger(LogLevel.INFO, use_colors=False)

        assert capsys.readouterr().out == ""
        assert buffer.getvalue().splitlines()[1].strip() == "└─ subjects: 2"
