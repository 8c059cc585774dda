"""
재시작 방식의 단방향 Trie 탐색기 (TrieWalker)

실패 링크(Aho-Corasick) 없이, 간선이 없으면 후보 시작점을 한 글자 옮기고
루트부터 다시 탐색합니다. 스캐너(정방향, 무제한)와 화이트리스트 예외 검색
(역방향/정방향, 거리 제한)이 이 한 가지 구현을 공유합니다.

오프셋은 기준점(origin)으로부터의 거리(0부터)이며, 방향에 따라
origin + offset(정방향) 또는 origin - offset(역방향) 인덱스의 문자를 읽습니다.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from .trie import Direction, Trie


class TrieWalker:
    """
    텍스트 버퍼 위를 한 방향으로 훑으며 저장된 구문을 찾는 탐색기

    이터레이션은 종료 노드에 도달할 때마다 (시작 인덱스, 끝 인덱스)를
    오름차순 절대 인덱스로 내놓습니다. 소비자가 accept()를 호출하면 방금 내놓은
    구문 바로 다음 글자에서 루트부터 새로 탐색하고, 호출하지 않으면 같은 시작점에서
    더 긴 구문을 찾아 계속 진행합니다.

    사용 예시:
        walker = TrieWalker(trie, list(text))
        for start, end in walker:
            if confirmed(start, end):
                walker.accept()

    Args:
        trie: 탐색할 Trie (방향은 trie.direction을 따름)
        chars: 코드 포인트 시퀀스
        origin: 탐색 기준 인덱스
        bound: 간선 불일치가 이 거리를 넘어서 발생하면 탐색 종료 (None이면 무제한)
        direction: trie.direction 대신 사용할 방향
    """

    def __init__(
        self,
        trie: Trie,
        chars: Sequence[str],
        origin: int = 0,
        bound: int | None = None,
        direction: Direction | None = None,
    ):
        self._root = trie.root
        self._chars = chars
        self._origin = origin
        self._step = int(direction if direction is not None else trie.direction)
        self._bound = bound

        self._left = 0
        self._pos = 0
        self._node = self._root

    def _index(self, offset: int) -> int:
        return self._origin + self._step * offset

    def _in_range(self, offset: int) -> bool:
        return 0 <= self._index(offset) < len(self._chars)

    def _span(self, first: int, last: int) -> tuple[int, int]:
        a, b = self._index(first), self._index(last)
        return (a, b) if a <= b else (b, a)

    @property
    def candidate_start(self) -> int:
        """현재 후보 시작점의 절대 인덱스"""
        return self._index(self._left)

    def accept(self) -> None:
        """방금 내놓은 구문을 확정하고 그 다음 글자부터 새로 탐색"""
        self._left = self._pos
        self._node = self._root

    def __iter__(self) -> Iterator[tuple[int, int]]:
        while self._in_range(self._left):
            child = None
            if self._in_range(self._pos):
                child = self._node.children.get(self._chars[self._index(self._pos)])

            if child is None:
                # 불일치 또는 버퍼 끝: 후보 시작점을 한 글자 옮겨 재시작
                if self._bound is not None and self._pos > self._bound:
                    return
                self._left += 1
                self._pos = self._left
                self._node = self._root
                continue

            self._node = child
            self._pos += 1
            if child.is_end:
                yield self._span(self._left, self._pos - 1)
