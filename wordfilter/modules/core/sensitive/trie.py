"""
문자 단위 Trie (사전 트리)

민감어(블랙리스트)와 화이트리스트 접두/접미 구문을 저장합니다.
키는 바이트가 아닌 유니코드 코드 포인트 단위입니다.

- Trie: 구문을 정방향으로 저장하고 텍스트를 앞으로 훑으며 탐색
- ReversedTrie: 구문을 뒤집어 저장하고 텍스트를 뒤로 훑으며 탐색
  (화이트리스트 접두 구문용. 호출자는 자연스러운 읽기 순서로 전달)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import IntEnum


class Direction(IntEnum):
    """텍스트 탐색 방향 (값은 인덱스 증분)"""

    FORWARD = 1
    BACKWARD = -1


class TrieNode:
    """
    Trie의 단일 노드

    owner는 이 노드를 제자리에서 수정할 수 있는 Trie의 소유 토큰입니다.
    다른 Trie와 공유 중인 노드는 수정 전에 복사됩니다.
    """

    __slots__ = ("character", "children", "is_end", "is_root", "owner")

    def __init__(self, character: str = "", is_root: bool = False, owner: object | None = None):
        self.character = character
        self.is_root = is_root
        self.is_end = False
        self.owner = owner
        self.children: dict[str, TrieNode] = {}

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def copy(self, owner: object) -> TrieNode:
        """얕은 복사 (자식 노드는 공유, 자식 맵만 새로 생성)"""
        node = TrieNode(self.character, self.is_root, owner)
        node.is_end = self.is_end
        node.children = dict(self.children)
        return node

    def __repr__(self) -> str:
        return f"TrieNode({self.character!r}, is_end={self.is_end}, children={len(self.children)})"


class Trie:
    """
    구문 집합을 저장하는 Trie

    copy()는 루트를 공유하는 O(1) 복사본을 만들고, 이후 어느 쪽이든
    추가/삭제할 때 바뀌는 경로의 노드만 복사합니다(path copying).
    변경 비용은 구문 길이에 비례하고 건드리지 않은 하위 트리는 계속 공유됩니다.
    """

    direction = Direction.FORWARD

    def __init__(self) -> None:
        self._owner = object()
        self.root = TrieNode(is_root=True, owner=self._owner)

    def _key(self, phrase: str) -> str:
        """저장 키 변환 (ReversedTrie에서 재정의)"""
        return phrase

    def _own(self, node: TrieNode, parent: TrieNode | None) -> TrieNode:
        """수정 가능한 노드 반환 (공유 중이면 복사해 parent에 연결, parent는 이미 소유한 노드)"""
        if node.owner is self._owner:
            return node
        owned = node.copy(self._owner)
        if parent is None:
            self.root = owned
        else:
            parent.children[owned.character] = owned
        return owned

    def add(self, *phrases: str) -> None:
        """구문 여러 개 추가"""
        for phrase in phrases:
            self.insert(phrase)

    def insert(self, phrase: str) -> None:
        """
        구문 추가

        같은 구문을 두 번 넣어도 변화 없음. 빈 문자열은 무시.
        """
        if not phrase or self.contains(phrase):
            return
        node = self._own(self.root, None)
        for ch in self._key(phrase):
            child = node.children.get(ch)
            if child is None:
                child = TrieNode(ch, owner=self._owner)
                node.children[ch] = child
            else:
                child = self._own(child, node)
            node = child
        node.is_end = True

    def delete(self, phrase: str) -> None:
        """
        구문 삭제

        경로가 없거나 구문이 저장되어 있지 않으면 아무 것도 하지 않습니다.
        있으면 마지막 노드의 종료 표시를 지우고 루트 방향으로 되돌아가며 자식이
        없는 노드를 제거합니다. 되돌아가는 도중 (마지막 노드가 아닌) 종료 노드를
        만나면 더 짧은 구문을 보존하기 위해 그 자리에서 전체 정리를 중단합니다.
        """
        key = self._key(phrase)
        target = self._walk(key)
        if target is None or target.is_root or not target.is_end:
            return

        node = self._own(self.root, None)
        path: list[tuple[TrieNode, TrieNode]] = []  # (child, parent)
        for ch in key:
            child = self._own(node.children[ch], node)
            path.append((child, node))
            node = child

        last = len(path) - 1
        for i in range(last, -1, -1):
            child, parent = path[i]
            if i != last:
                if child.is_end:
                    # 경로 위에 더 짧은 구문이 있음
                    return
            elif child.is_end:
                child.is_end = False
            if child.is_leaf:
                del parent.children[child.character]

    def contains(self, phrase: str) -> bool:
        """
        정확히 일치하는 구문이 저장되어 있는지 확인

        모든 문자의 간선이 존재하고 마지막 노드가 종료 노드여야 합니다.
        경로만 존재하는 접두어는 포함되지 않습니다.
        """
        node = self._walk(self._key(phrase))
        return node is not None and not node.is_root and node.is_end

    def has_prefix(self, prefix: str) -> bool:
        return self._walk(self._key(prefix)) is not None

    def _walk(self, key: str) -> TrieNode | None:
        node = self.root
        for ch in key:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def copy(self) -> Trie:
        """
        같은 변형(정방향/역방향)의 독립 복사본 (O(1))

        원본과 복사본 모두 소유 토큰을 새로 받으므로, 이후 어느 쪽의 변경도
        공유 노드를 제자리에서 수정하지 않습니다.
        """
        clone = type(self).__new__(type(self))
        clone._owner = object()
        clone.root = self.root
        self._owner = object()
        return clone

    def __iter__(self) -> Iterator[str]:
        """저장된 구문을 자연스러운 읽기 순서로 순회"""
        stack: list[tuple[TrieNode, str]] = [(self.root, "")]
        while stack:
            node, key = stack.pop()
            if node.is_end:
                yield self._key(key)
            for ch, child in node.children.items():
                stack.append((child, key + ch))

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __contains__(self, phrase: object) -> bool:
        return isinstance(phrase, str) and self.contains(phrase)

    @property
    def is_empty(self) -> bool:
        return self.root.is_leaf

    @classmethod
    def from_phrases(cls, phrases: Iterable[str]) -> Trie:
        trie = cls()
        trie.add(*phrases)
        return trie


class ReversedTrie(Trie):
    """
    역방향 키 Trie

    구문을 뒤집어 저장하므로, 텍스트를 특정 위치에서 뒤로 훑으면
    저장된 구문을 앞으로 훑는 것과 같습니다. 추가/삭제/조회 모두 같은
    키 변환을 거치므로 호출자는 뒤집기를 신경 쓰지 않습니다.
    """

    direction = Direction.BACKWARD

    def _key(self, phrase: str) -> str:
        return phrase[::-1]
