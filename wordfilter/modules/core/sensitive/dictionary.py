"""
단어 사전 (WordDictionary)

블랙리스트, 접두 화이트리스트(역방향 키), 접미 화이트리스트 세 개의 Trie를 소유합니다.

공개된 사전은 제자리에서 변경하지 않습니다. with_words()/without_word()는
변경 대상 Trie를 경로 복사 방식으로 수정한 새 사전을 돌려주고, 호출자(WordFilter)가
참조를 교체합니다. 스캔은 시작 시점의 사전 참조 하나만 읽으므로 잠금 없이
동시에 실행할 수 있습니다.
"""

from __future__ import annotations

from collections.abc import Iterable

from wordfilter.lib.errors import ErrorCode, WordTypeError

from .models import WordType
from .trie import ReversedTrie, Trie


def coerce_word_type(kind: WordType | str) -> WordType:
    """
    WordType 또는 그 값 문자열("black" 등)을 WordType으로 변환

    Raises:
        WordTypeError: 알 수 없는 유형
    """
    if isinstance(kind, WordType):
        return kind
    try:
        return WordType(kind)
    except ValueError as e:
        raise WordTypeError(ErrorCode.FILTER_002, kind=str(kind)) from e


class WordDictionary:
    """세 개의 Trie로 구성된 불변 취급 사전"""

    __slots__ = ("black", "white_prefix", "white_suffix")

    def __init__(
        self,
        black: Trie | None = None,
        white_prefix: ReversedTrie | None = None,
        white_suffix: Trie | None = None,
    ):
        self.black = black if black is not None else Trie()
        self.white_prefix = white_prefix if white_prefix is not None else ReversedTrie()
        self.white_suffix = white_suffix if white_suffix is not None else Trie()

    def trie_for(self, kind: WordType | str) -> Trie:
        kind = coerce_word_type(kind)
        if kind is WordType.BLACK:
            return self.black
        if kind is WordType.WHITE_PREFIX:
            return self.white_prefix
        return self.white_suffix

    def _replace(self, kind: WordType, trie: Trie) -> WordDictionary:
        tries = {
            WordType.BLACK: self.black,
            WordType.WHITE_PREFIX: self.white_prefix,
            WordType.WHITE_SUFFIX: self.white_suffix,
        }
        tries[kind] = trie
        return WordDictionary(
            black=tries[WordType.BLACK],
            white_prefix=tries[WordType.WHITE_PREFIX],  # type: ignore[arg-type]
            white_suffix=tries[WordType.WHITE_SUFFIX],
        )

    def with_words(self, kind: WordType | str, words: Iterable[str]) -> WordDictionary:
        """구문을 추가한 새 사전 반환 (변경 대상 Trie의 바뀌는 경로만 복사)"""
        kind = coerce_word_type(kind)
        trie = self.trie_for(kind).copy()
        trie.add(*words)
        return self._replace(kind, trie)

    def without_word(self, kind: WordType | str, word: str) -> WordDictionary:
        """구문을 삭제한 새 사전 반환 (변경 대상 Trie의 바뀌는 경로만 복사)"""
        kind = coerce_word_type(kind)
        trie = self.trie_for(kind).copy()
        trie.delete(word)
        return self._replace(kind, trie)

    def contains(self, kind: WordType | str, word: str) -> bool:
        return self.trie_for(kind).contains(word)

    @property
    def is_empty(self) -> bool:
        """블랙리스트가 비어 있는지 여부"""
        return self.black.is_empty

    def stats(self) -> dict[str, int]:
        """유형별 저장 구문 수"""
        return {
            WordType.BLACK.value: len(self.black),
            WordType.WHITE_PREFIX.value: len(self.white_prefix),
            WordType.WHITE_SUFFIX.value: len(self.white_suffix),
        }
