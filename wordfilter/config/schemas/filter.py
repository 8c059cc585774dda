"""
WordFilter 설정 스키마

화이트리스트 검사 여부, 노이즈 패턴, 마스킹 문자, 대소문자 무시 여부를 정의합니다.
"""

import re

from pydantic import Field, field_validator

from .base import BaseConfig

# 기본 노이즈 패턴: 파이프, 공백, &, %, $, @, * 및 그 연속
DEFAULT_NOISE_PATTERN = r"[\|\s&%$@*]+"


class WordFilterConfig(BaseConfig):
    """
    민감어 필터 설정

    Examples:
        >>> config = WordFilterConfig(check_whitelist=True, mask_char="#")
        >>> config.noise_pattern
        '[\\\\|\\\\s&%$@*]+'
    """

    check_whitelist: bool = Field(
        default=False,
        description="화이트리스트(접두/접미) 예외 검사 활성화 여부",
    )

    noise_pattern: str = Field(
        default=DEFAULT_NOISE_PATTERN,
        description="contains_sensitive() 전에 제거할 노이즈 문자 정규식",
    )

    mask_char: str = Field(
        default="*",
        min_length=1,
        max_length=1,
        description="마스킹 시 사용할 대체 문자 (정확히 한 글자)",
    )

    ignore_case: bool = Field(
        default=False,
        description="대소문자 무시 비교 여부 (생성 시점에만 적용)",
    )

    @field_validator("noise_pattern")
    @classmethod
    def validate_noise_pattern(cls, v: str) -> str:
        """
        노이즈 패턴이 컴파일 가능한 정규식인지 검증
        """
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"invalid noise pattern {v!r}: {e}") from e
        return v
