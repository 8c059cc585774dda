"""
민감어 필터 데이터 모델

단어 유형, 탐지된 매치, 검증 결과, 상세 처리 결과를 정의합니다.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class WordType(Enum):
    """
    사전 단어 유형

    BLACK: 민감어 (블랙리스트)
    WHITE_PREFIX: 화이트리스트 접두 구문 (민감어로 끝나는 허용 구문, 예: "not bad")
    WHITE_SUFFIX: 화이트리스트 접미 구문 (민감어로 시작하는 허용 구문, 예: "badge")
    """

    BLACK = "black"
    WHITE_PREFIX = "white_prefix"
    WHITE_SUFFIX = "white_suffix"


@dataclass(frozen=True)
class Match:
    """
    확정된 민감어 매치

    Attributes:
        start: 시작 위치 (코드 포인트 단위, 포함)
        end: 끝 위치 (코드 포인트 단위, 포함)
        phrase: 원본 텍스트에서 잘라낸 매치 문자열
    """

    start: int
    end: int
    phrase: str

    def __post_init__(self) -> None:
        """유효성 검증"""
        if self.start < 0:
            raise ValueError(f"start must be non-negative, got {self.start}")
        if self.end < self.start:
            raise ValueError(f"end ({self.end}) must be >= start ({self.start})")

    @property
    def length(self) -> int:
        """매치 길이"""
        return self.end - self.start + 1

    def to_dict(self) -> dict[str, Any]:
        return {"start": self.start, "end": self.end, "phrase": self.phrase}


@dataclass(frozen=True)
class ValidationResult:
    """
    검증 결과

    튜플처럼 언패킹 가능합니다:
        >>> is_valid, first = word_filter.validate("text")
    """

    is_valid: bool
    first_match: str = ""

    def __iter__(self) -> Iterator[Any]:
        return iter((self.is_valid, self.first_match))

    def __bool__(self) -> bool:
        return self.is_valid


@dataclass
class FilterResult:
    """
    상세 처리 결과 (inspect)

    Attributes:
        original_text: 원본 텍스트
        masked_text: 마스킹된 텍스트
        matches: 확정된 매치 목록 (등장 순서)
        processing_time_ms: 처리 시간 (밀리초)
    """

    original_text: str
    masked_text: str
    matches: list[Match] = field(default_factory=list)
    processing_time_ms: float = 0.0

    @property
    def contains_sensitive(self) -> bool:
        return bool(self.matches)

    @property
    def phrases(self) -> list[str]:
        """중복 제거된 매치 문자열 (첫 등장 순서 유지)"""
        return list(dict.fromkeys(m.phrase for m in self.matches))

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리 변환"""
        return {
            "masked_text": self.masked_text,
            "matches": [m.to_dict() for m in self.matches],
            "phrases": self.phrases,
            "contains_sensitive": self.contains_sensitive,
            "processing_time_ms": self.processing_time_ms,
        }
