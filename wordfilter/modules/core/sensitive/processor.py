"""
민감어 필터 Facade (WordFilter)

사전 관리(추가/삭제), 설정(화이트리스트 검사, 노이즈 패턴), 텍스트 처리
(마스킹, 제거, 검증, 전체 탐지)를 하나의 인터페이스로 제공합니다.

사용 예시:
    >>> word_filter = WordFilter()
    >>> word_filter.add_words(WordType.BLACK, ["bad"])
    >>> word_filter.add_words(WordType.WHITE_PREFIX, ["not bad"])
    >>> word_filter.set_whitelist_enabled(True)
    >>> word_filter.validate("this is not bad at all")
    ValidationResult(is_valid=True, first_match='')
    >>> word_filter.mask("bad news")
    '*** news'

동시성:
    사전 변경은 잠금 아래에서 복사본을 수정한 뒤 참조를 교체합니다(copy-on-write).
    스캔은 호출 시작 시점의 사전 참조 하나만 사용하므로 잠금이 필요 없습니다.
    사전 변경은 바뀌는 경로의 노드만 복사하므로 비용은 구문 길이에 비례합니다.
"""

from __future__ import annotations

import re
import threading
import time
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from wordfilter.lib.errors import ConfigError, ErrorCode
from wordfilter.lib.logger import get_logger

from .dictionary import WordDictionary, coerce_word_type
from .models import FilterResult, Match, ValidationResult, WordType
from .noise import NoiseNormalizer, fold_case
from .scanner import Scanner, render
from .whitelist import WhitelistResolver

if TYPE_CHECKING:
    from wordfilter.config.schemas import WordFilterConfig

logger = get_logger(__name__)


class WordFilter:
    """
    민감어 필터

    Args:
        check_whitelist: 화이트리스트 예외 검사 활성화 여부 (기본 비활성화)
        noise_pattern: contains_sensitive()에서 제거할 노이즈 정규식 (None이면 기본값)
        mask_char: mask()의 기본 대체 문자 (정확히 한 글자)
        ignore_case: 글자 단위 소문자 비교 (생성 시점에만 지정 가능)

    Raises:
        ConfigError: mask_char가 한 글자가 아님 (CONFIG-001)
        NoisePatternError: 잘못된 노이즈 패턴 (FILTER-001)
    """

    def __init__(
        self,
        check_whitelist: bool = False,
        noise_pattern: str | re.Pattern[str] | None = None,
        mask_char: str = "*",
        ignore_case: bool = False,
    ):
        if not isinstance(mask_char, str) or len(mask_char) != 1:
            raise ConfigError(
                ErrorCode.CONFIG_001,
                reason=f"mask_char must be exactly one character, got {mask_char!r}",
            )

        self._dictionary = WordDictionary()
        self._lock = threading.Lock()
        self._check_whitelist = check_whitelist
        self._normalizer = NoiseNormalizer() if noise_pattern is None else NoiseNormalizer(noise_pattern)
        self._mask_char = mask_char
        self._ignore_case = ignore_case

        logger.info(
            f"WordFilter 초기화: check_whitelist={check_whitelist}, "
            f"noise_pattern={self._normalizer.pattern!r}, mask_char={mask_char!r}, "
            f"ignore_case={ignore_case}"
        )

    @classmethod
    def from_config(cls, config: WordFilterConfig) -> WordFilter:
        """검증된 설정으로 필터 생성"""
        return cls(
            check_whitelist=config.check_whitelist,
            noise_pattern=config.noise_pattern,
            mask_char=config.mask_char,
            ignore_case=config.ignore_case,
        )

    # ========================================
    # 속성
    # ========================================

    @property
    def dictionary(self) -> WordDictionary:
        """현재 공개된 사전 스냅샷 (읽기 전용으로 취급)"""
        return self._dictionary

    @property
    def check_whitelist(self) -> bool:
        return self._check_whitelist

    @property
    def noise_pattern(self) -> str:
        return self._normalizer.pattern

    @property
    def mask_char(self) -> str:
        return self._mask_char

    @property
    def ignore_case(self) -> bool:
        return self._ignore_case

    @property
    def is_empty(self) -> bool:
        """블랙리스트가 비어 있는지 여부"""
        return self._dictionary.is_empty

    # ========================================
    # 사전 관리
    # ========================================

    def _normalize_word(self, word: str) -> str:
        return "".join(fold_case(word)) if self._ignore_case else word

    def add_words(self, kind: WordType | str, words: Iterable[str]) -> None:
        """
        사전에 구문 추가

        WHITE_PREFIX 구문은 자연스러운 읽기 순서로 전달합니다 (역방향 저장은 내부 처리).

        Raises:
            WordTypeError: 알 수 없는 유형
        """
        kind = coerce_word_type(kind)
        normalized = [self._normalize_word(w) for w in words if w]
        if not normalized:
            return
        with self._lock:
            self._dictionary = self._dictionary.with_words(kind, normalized)
        logger.info(f"사전 단어 추가: type={kind.value}, count={len(normalized)}")

    def add_word(self, kind: WordType | str, word: str) -> None:
        self.add_words(kind, [word])

    def delete_word(self, word: str, kind: WordType | str = WordType.BLACK) -> None:
        """
        사전에서 구문 삭제 (기본: 블랙리스트)

        없는 구문이면 아무 것도 하지 않습니다.
        """
        kind = coerce_word_type(kind)
        if not word:
            return
        with self._lock:
            self._dictionary = self._dictionary.without_word(kind, self._normalize_word(word))
        logger.debug(f"사전 단어 삭제: type={kind.value}, word={word!r}")

    def contains(self, kind: WordType | str, word: str) -> bool:
        """정확히 일치하는 구문이 해당 사전에 있는지 확인"""
        return self._dictionary.contains(kind, self._normalize_word(word))

    # ========================================
    # 설정
    # ========================================

    def set_whitelist_enabled(self, enabled: bool) -> None:
        """화이트리스트 예외 검사 활성화/비활성화"""
        self._check_whitelist = bool(enabled)
        logger.info(f"화이트리스트 검사: {'활성화' if self._check_whitelist else '비활성화'}")

    def update_noise_pattern(self, pattern: str | re.Pattern[str]) -> None:
        """
        노이즈 패턴 교체

        Raises:
            NoisePatternError: 잘못된 정규식 (기존 패턴 유지)
        """
        self._normalizer.update(pattern)

    def remove_noise(self, text: str) -> str:
        return self._normalizer.normalize(text)

    # ========================================
    # 텍스트 처리
    # ========================================

    def _scanner(self) -> Scanner:
        return Scanner(
            self._dictionary,
            check_whitelist=self._check_whitelist,
            ignore_case=self._ignore_case,
        )

    def mask(self, text: str, repl: str | None = None) -> str:
        """
        민감어를 글자 단위로 대체

        Args:
            text: 원본 텍스트
            repl: 대체 문자 (None이면 mask_char)
        """
        return self._scanner().mask(text, self._mask_char if repl is None else repl)

    def strip(self, text: str) -> str:
        """민감어를 제거한 텍스트"""
        return self._scanner().strip(text)

    def validate(self, text: str) -> ValidationResult:
        """
        텍스트 검증

        Returns:
            ValidationResult(is_valid, first_match). 민감어가 있으면 첫 매치 구문 포함
        """
        return self._scanner().validate(text)

    def contains_sensitive(self, text: str) -> tuple[bool, str]:
        """
        노이즈 제거 후 민감어 포함 여부 확인

        Returns:
            (포함 여부, 첫 매치 구문). 구문은 노이즈 제거된 텍스트 기준
        """
        result = self.validate(self.remove_noise(text))
        return not result.is_valid, result.first_match

    def find_all(self, text: str) -> list[str]:
        """중복 제거된 민감어 목록 (첫 등장 순서, 없으면 빈 리스트)"""
        return self._scanner().find_all(text)

    def find_matches(self, text: str) -> list[Match]:
        """확정된 매치 구간 전체 (등장 순서)"""
        return self._scanner().find_matches(text)

    def is_whitelisted(self, text: str, left: int, position: int) -> bool:
        """
        구간 [left, position]이 화이트리스트 예외 대상인지 확인

        화이트리스트 검사가 비활성화되어 있으면 항상 False.
        """
        if not self._check_whitelist or not text:
            return False
        chars = fold_case(text) if self._ignore_case else list(text)
        dictionary = self._dictionary
        resolver = WhitelistResolver(dictionary.white_prefix, dictionary.white_suffix)
        return resolver.is_excepted(chars, left, position)

    def inspect(self, text: str, repl: str | None = None) -> FilterResult:
        """
        상세 처리 결과 반환 (마스킹 텍스트 + 매치 구간 + 처리 시간)
        """
        start_time = time.perf_counter()
        repl = self._mask_char if repl is None else repl

        matches = self._scanner().find_matches(text)
        masked = render(text, matches, repl)

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        return FilterResult(
            original_text=text,
            masked_text=masked,
            matches=matches,
            processing_time_ms=elapsed_ms,
        )

    def inspect_batch(self, texts: Sequence[str], repl: str | None = None) -> list[FilterResult]:
        """여러 텍스트 일괄 처리"""
        return [self.inspect(text, repl) for text in texts]

    def stats(self) -> dict[str, int]:
        """유형별 저장 구문 수"""
        return self._dictionary.stats()


# ========================================
# 편의 함수 (싱글톤 사용)
# ========================================
_default_filter: WordFilter | None = None


def get_word_filter() -> WordFilter:
    """
    기본 WordFilter 싱글톤 인스턴스 반환

    Returns:
        WordFilter 싱글톤 인스턴스
    """
    global _default_filter
    if _default_filter is None:
        _default_filter = WordFilter()
    return _default_filter


def reset_word_filter() -> None:
    """
    싱글톤 인스턴스 리셋 (테스트용)
    """
    global _default_filter
    _default_filter = None
