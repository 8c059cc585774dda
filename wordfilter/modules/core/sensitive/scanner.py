"""
민감어 스캐너 (Scanner)

텍스트를 왼쪽에서 오른쪽으로 한 번 훑으며 블랙리스트 구문을 찾습니다.

탐색 규칙:
- 간선이 없으면 후보 시작점을 한 글자 옮기고 루트부터 다시 탐색 (실패 링크 없음)
- 종료 노드에 도달하면 후보 [left, position]을 화이트리스트 예외 검색으로 판정
  - 예외: 무시하고 같은 시작점에서 더 긴 구문을 계속 탐색
  - 확정: 매치로 기록하고 position + 1부터 새로 탐색 (겹치는 매치 없음)
- 한 경로에서는 가장 먼저 확정된(가장 짧은) 구문이 이깁니다
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .dictionary import WordDictionary
from .models import Match, ValidationResult
from .noise import fold_case
from .walker import TrieWalker
from .whitelist import WhitelistResolver


def render(text: str, matches: Iterable[Match], repl: str | None) -> str:
    """
    매치 구간을 대체하거나 제거한 텍스트 생성

    repl이 None이면 매치 구간을 제거하고, 아니면 구간의 글자마다 repl로 대체합니다.
    """
    pieces: list[str] = []
    last = 0
    for match in matches:
        pieces.append(text[last : match.start])
        if repl is not None:
            pieces.append(repl * match.length)
        last = match.end + 1
    if not pieces:
        return text
    pieces.append(text[last:])
    return "".join(pieces)


class Scanner:
    """
    사전 스냅샷 하나에 대한 읽기 전용 스캐너

    Args:
        dictionary: 스캔에 사용할 사전 (변경하지 않음)
        check_whitelist: 화이트리스트 예외 검색 활성화 여부
        ignore_case: 글자 단위 소문자 비교 여부
    """

    def __init__(
        self,
        dictionary: WordDictionary,
        check_whitelist: bool = False,
        ignore_case: bool = False,
    ):
        self._dictionary = dictionary
        self._ignore_case = ignore_case
        self._resolver: WhitelistResolver | None = None
        if check_whitelist:
            self._resolver = WhitelistResolver(dictionary.white_prefix, dictionary.white_suffix)

    def _chars(self, text: str) -> list[str]:
        return fold_case(text) if self._ignore_case else list(text)

    def iter_matches(self, text: str) -> Iterator[Match]:
        """확정된 매치를 등장 순서대로 생성"""
        if not text or self._dictionary.black.is_empty:
            return

        chars = self._chars(text)
        walker = TrieWalker(self._dictionary.black, chars)
        for start, end in walker:
            if self._resolver is not None and self._resolver.is_excepted(chars, start, end):
                continue
            walker.accept()
            yield Match(start=start, end=end, phrase=text[start : end + 1])

    def find_matches(self, text: str) -> list[Match]:
        return list(self.iter_matches(text))

    def mask(self, text: str, repl: str = "*") -> str:
        """확정된 매치의 각 글자를 repl로 대체 (나머지 글자는 위치 그대로 유지)"""
        return render(text, self.iter_matches(text), repl)

    def strip(self, text: str) -> str:
        """확정된 매치를 제거하고 나머지를 순서대로 연결"""
        return render(text, self.iter_matches(text), None)

    def validate(self, text: str) -> ValidationResult:
        """첫 확정 매치에서 즉시 중단"""
        first = next(self.iter_matches(text), None)
        if first is None:
            return ValidationResult(is_valid=True, first_match="")
        return ValidationResult(is_valid=False, first_match=first.phrase)

    def find_all(self, text: str) -> list[str]:
        """중복 제거된 매치 문자열 (첫 등장 순서 유지)"""
        return list(dict.fromkeys(m.phrase for m in self.iter_matches(text)))
