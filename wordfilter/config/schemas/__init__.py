"""
Pydantic 기반 설정 스키마 모듈

주요 기능:
- 설정값 타입 검증 (필터 생성 시점에 즉시 검증)
- 환경 변수 치환 (${ENV_VAR:-default})
- 정규식/문자 길이 제약 조건 검증

사용법:
    from wordfilter.config.schemas import validate_config

    config = validate_config({"check_whitelist": True, "mask_char": "#"})
"""

from typing import Any

from pydantic import ValidationError

from wordfilter.lib.errors import ConfigError, ErrorCode

from .base import BaseConfig
from .filter import DEFAULT_NOISE_PATTERN, WordFilterConfig


def format_validation_errors(error: ValidationError) -> list[str]:
    """
    Pydantic v2 에러를 사람이 읽을 수 있는 메시지 목록으로 변환

    Returns:
        ["[mask_char] String should have at most 1 character (type: string_too_long)", ...]
    """
    error_messages = []
    for err in error.errors():
        loc = " → ".join(str(x) for x in err["loc"])
        error_messages.append(f"[{loc}] {err['msg']} (type: {err['type']})")
    return error_messages


def validate_config(config_dict: Any) -> WordFilterConfig:
    """
    설정 딕셔너리를 WordFilterConfig로 검증

    Args:
        config_dict: 필터 설정 딕셔너리

    Returns:
        검증된 WordFilterConfig

    Raises:
        ConfigError: 딕셔너리가 아니거나(CONFIG-002) 검증에 실패한 경우(CONFIG-001)
    """
    if not isinstance(config_dict, dict):
        raise ConfigError(ErrorCode.CONFIG_002, actual_type=type(config_dict).__name__)

    try:
        return WordFilterConfig(**config_dict)
    except ValidationError as e:
        errors = format_validation_errors(e)
        raise ConfigError(ErrorCode.CONFIG_001, reason="; ".join(errors), errors=errors) from e


__all__ = [
    "BaseConfig",
    "WordFilterConfig",
    "DEFAULT_NOISE_PATTERN",
    "validate_config",
    "format_validation_errors",
]
