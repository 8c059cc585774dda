"""
노이즈 정규화 (NoiseNormalizer)

"b|a|d", "b a d" 처럼 구분 문자를 끼워 넣어 민감어 검사를 피하는 것을 막기 위해
설정 가능한 노이즈 문자(기본: 파이프, 공백, &, %, $, @, *)를 제거합니다.

contains_sensitive() 에서만 적용되며 mask/strip/find_all/validate 에는 적용되지
않습니다. 따라서 contains_sensitive() 가 보고하는 구문은 정규화된 텍스트 기준입니다.
"""

from __future__ import annotations

import re

from wordfilter.config.schemas.filter import DEFAULT_NOISE_PATTERN
from wordfilter.lib.errors import ErrorCode, NoisePatternError
from wordfilter.lib.logger import get_logger

logger = get_logger(__name__)


def compile_noise_pattern(pattern: str | re.Pattern[str]) -> re.Pattern[str]:
    """
    노이즈 패턴 컴파일 (잘못된 패턴은 즉시 실패)

    Raises:
        NoisePatternError: 정규식 컴파일 실패
    """
    if isinstance(pattern, re.Pattern):
        compiled = pattern
    else:
        try:
            compiled = re.compile(pattern)
        except (re.error, TypeError) as e:
            raise NoisePatternError(ErrorCode.FILTER_001, pattern=str(pattern), reason=str(e)) from e

    return compiled


class NoiseNormalizer:
    """노이즈 문자 제거기"""

    def __init__(self, pattern: str | re.Pattern[str] = DEFAULT_NOISE_PATTERN):
        self._pattern = compile_noise_pattern(pattern)

    @property
    def pattern(self) -> str:
        return self._pattern.pattern

    def update(self, pattern: str | re.Pattern[str]) -> None:
        """
        노이즈 패턴 교체

        새 패턴이 잘못되면 NoisePatternError를 발생시키고 기존 패턴을 유지합니다.
        """
        self._pattern = compile_noise_pattern(pattern)
        logger.info(f"노이즈 패턴 변경: {self._pattern.pattern!r}")

    def normalize(self, text: str) -> str:
        """노이즈 문자(연속 포함) 제거"""
        if not text:
            return text
        return self._pattern.sub("", text)

    __call__ = normalize


def fold_case(text: str) -> list[str]:
    """
    글자 단위 소문자 변환

    소문자 형태가 한 글자가 아닌 문자('İ' 등)는 그대로 두어
    변환 전후의 코드 포인트 위치가 일치하도록 합니다.
    """
    folded = []
    for ch in text:
        lower = ch.lower()
        folded.append(lower if len(lower) == 1 else ch)
    return folded
