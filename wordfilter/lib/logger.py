"""
wordfilter 구조화 로깅 (structlog)

라이브러리이므로 루트 로거는 건드리지 않고 "wordfilter" 로거에만 stdout 핸들러를
붙입니다. 설정은 첫 get_logger() 호출 시 한 번 적용되며, configure()로
레벨/형식을 명시적으로 다시 지정할 수 있습니다.

환경 변수:
    LOG_LEVEL: 로그 레벨 (기본 INFO, NODE_ENV=production이면 WARNING)
    LOG_FORMAT: "json"이면 JSONRenderer, 그 외 ConsoleRenderer
    NODE_ENV: 이벤트의 environment 필드 값
"""

import logging
import os
import sys
from datetime import datetime, timedelta, timezone
from typing import Any, cast

import structlog
from structlog.stdlib import LoggerFactory

ROOT_LOGGER_NAME = "wordfilter"

# KST = UTC+9
KST = timezone(timedelta(hours=9))


def add_kst_timestamp(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    event_dict["timestamp"] = datetime.now(KST).isoformat()
    return event_dict


def _environment() -> str:
    return os.getenv("NODE_ENV", "development")


class FilterLogger:
    """
    wordfilter 로깅 설정 보관자

    Attributes:
        log_level: 적용할 레벨 이름 (대문자)
        json_output: JSON 렌더링 여부
    """

    def __init__(self, level: str | None = None, json_output: bool | None = None) -> None:
        default_level = "WARNING" if _environment() == "production" else "INFO"
        self.log_level = (level or os.getenv("LOG_LEVEL") or default_level).upper()
        self.json_output = self._should_use_json() if json_output is None else json_output
        self._configured = False

    @staticmethod
    def _should_use_json() -> bool:
        return os.getenv("LOG_FORMAT", "console").lower() == "json"

    @staticmethod
    def _add_context(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict.setdefault("service", ROOT_LOGGER_NAME)
        event_dict["environment"] = _environment()
        return event_dict

    def processors(self) -> list[Any]:
        """structlog 프로세서 체인 (마지막이 렌더러)"""
        renderer = structlog.processors.JSONRenderer() if self.json_output else structlog.dev.ConsoleRenderer()
        return [
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            add_kst_timestamp,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            self._add_context,
            renderer,
        ]

    def setup(self) -> None:
        """"wordfilter" 로거 핸들러와 structlog 전역 설정 적용"""
        package_logger = logging.getLogger(ROOT_LOGGER_NAME)
        package_logger.setLevel(getattr(logging, self.log_level, logging.INFO))
        if not any(getattr(h, "_wordfilter", False) for h in package_logger.handlers):
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter("%(message)s"))
            handler._wordfilter = True  # type: ignore[attr-defined]
            package_logger.addHandler(handler)

        structlog.configure(
            processors=self.processors(),
            context_class=dict,
            logger_factory=LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        self._configured = True

    def get_logger(self, name: str | None = None) -> structlog.stdlib.BoundLogger:
        if not self._configured:
            self.setup()
        return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name or ROOT_LOGGER_NAME))


_filter_logger = FilterLogger()


def configure(level: str | None = None, json_output: bool | None = None) -> None:
    """
    로깅 재설정

    Args:
        level: 로그 레벨 이름 (None이면 LOG_LEVEL)
        json_output: JSON 출력 여부 (None이면 LOG_FORMAT)
    """
    global _filter_logger
    _filter_logger = FilterLogger(level=level, json_output=json_output)
    _filter_logger.setup()


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """모듈 로거 반환 (예: get_logger(__name__))"""
    return _filter_logger.get_logger(name)
