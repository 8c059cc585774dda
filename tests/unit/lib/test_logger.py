"""
구조화 로깅 설정 테스트
"""

import logging

import pytest
import structlog

from wordfilter.lib import logger as logger_module
from wordfilter.lib.logger import FilterLogger, add_kst_timestamp, configure, get_logger


class TestFilterLogger:
    """FilterLogger 설정"""

    def test_level_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.delenv("NODE_ENV", raising=False)
        assert FilterLogger().log_level == "DEBUG"

    def test_production_defaults_to_warning(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.setenv("NODE_ENV", "production")
        assert FilterLogger().log_level == "WARNING"

    def test_explicit_level_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        assert FilterLogger(level="debug").log_level == "DEBUG"

    @pytest.mark.parametrize(("value", "expected"), [("json", True), ("JSON", True), ("console", False)])
    def test_json_format_switch(self, monkeypatch: pytest.MonkeyPatch, value: str, expected: bool) -> None:
        monkeypatch.setenv("LOG_FORMAT", value)
        assert FilterLogger().json_output is expected

    def test_renderer_is_last_processor(self) -> None:
        assert isinstance(FilterLogger(json_output=True).processors()[-1], structlog.processors.JSONRenderer)
        assert isinstance(FilterLogger(json_output=False).processors()[-1], structlog.dev.ConsoleRenderer)

    def test_context_processor(self) -> None:
        event = FilterLogger._add_context(None, "info", {"event": "x"})
        assert event["service"] == "wordfilter"
        assert "environment" in event

    def test_kst_timestamp(self) -> None:
        event = add_kst_timestamp(None, "info", {})
        assert event["timestamp"].endswith("+09:00")


class TestConfigure:
    """configure() / get_logger()"""

    def test_get_logger_configures_once(self) -> None:
        get_logger(__name__)
        assert logger_module._filter_logger._configured

    def test_package_handler_attached_once(self) -> None:
        configure(level="WARNING")
        configure(level="WARNING")

        package_logger = logging.getLogger("wordfilter")
        marked = [h for h in package_logger.handlers if getattr(h, "_wordfilter", False)]
        assert len(marked) == 1
        assert package_logger.level == logging.WARNING
