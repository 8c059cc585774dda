"""
화이트리스트 예외 검색 (WhitelistResolver)

블랙리스트 후보 구간 [left, position]이 더 긴 허용 구문의 일부인지 확인합니다.

- 접두 검사: 텍스트를 position에서 앞쪽(0 방향)으로 훑으며 역방향 저장된
  접두 화이트리스트를 탐색합니다. "not bad"는 "bad"로 끝나는 허용 구문입니다.
- 접미 검사: 텍스트를 left에서 뒤쪽으로 훑으며 접미 화이트리스트를 탐색합니다.
  "badge"는 "bad"로 시작하는 허용 구문입니다.

두 검사 모두 후보 길이 L만큼의 거리 제한을 둡니다. 간선 불일치가 기준점에서
L을 넘는 거리에서 발생하면 그 방향의 검색은 실패합니다. 멀리 떨어진 무관한
화이트리스트 구문이 매치를 무효화하지 못하게 하기 위함입니다.
"""

from __future__ import annotations

from collections.abc import Sequence

from .trie import Direction, ReversedTrie, Trie
from .walker import TrieWalker


class WhitelistResolver:
    """
    접두/접미 화이트리스트 기반 예외(veto) 판정기

    Args:
        prefix_trie: 접두 화이트리스트 (역방향 키)
        suffix_trie: 접미 화이트리스트 (정방향 키)
    """

    def __init__(self, prefix_trie: ReversedTrie, suffix_trie: Trie):
        self._prefix_trie = prefix_trie
        self._suffix_trie = suffix_trie

    def find_prefix(self, chars: Sequence[str], left: int, position: int) -> str | None:
        """
        후보 앞쪽의 접두 화이트리스트 구문 찾기

        Returns:
            예외를 일으킨 화이트리스트 구문 (읽기 순서), 없으면 None
        """
        if left <= 0 or self._prefix_trie.is_empty:
            return None
        bound = position - left + 1
        walker = TrieWalker(self._prefix_trie, chars, origin=position, bound=bound, direction=Direction.BACKWARD)
        span = next(iter(walker), None)
        if span is None:
            return None
        return "".join(chars[span[0] : span[1] + 1])

    def find_suffix(self, chars: Sequence[str], left: int, position: int) -> str | None:
        """
        후보 뒤쪽의 접미 화이트리스트 구문 찾기

        Returns:
            예외를 일으킨 화이트리스트 구문, 없으면 None
        """
        if position >= len(chars) - 1 or self._suffix_trie.is_empty:
            return None
        bound = position - left + 1
        walker = TrieWalker(self._suffix_trie, chars, origin=left, bound=bound, direction=Direction.FORWARD)
        span = next(iter(walker), None)
        if span is None:
            return None
        return "".join(chars[span[0] : span[1] + 1])

    def is_excepted(self, chars: Sequence[str], left: int, position: int) -> bool:
        """접두 또는 접미 화이트리스트에 의해 후보가 무효화되는지 여부"""
        return (
            self.find_prefix(chars, left, position) is not None
            or self.find_suffix(chars, left, position) is not None
        )
