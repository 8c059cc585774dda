"""
TrieWalker 단위 테스트

재시작 방식 탐색, accept() 동작, 역방향 탐색, 거리 제한을 검증합니다.
"""

from wordfilter.modules.core.sensitive import ReversedTrie, Trie, TrieWalker


def _walk_all(walker: TrieWalker) -> list[tuple[int, int]]:
    return list(walker)


def _walk_accepting(walker: TrieWalker) -> list[tuple[int, int]]:
    spans = []
    for span in walker:
        spans.append(span)
        walker.accept()
    return spans


class TestForwardWalk:
    """정방향 무제한 탐색"""

    def test_yields_every_end_node_without_accept(self) -> None:
        """accept() 없이 진행하면 같은 시작점에서 더 긴 구문도 내놓음"""
        trie = Trie.from_phrases(["ab", "abc"])
        assert _walk_all(TrieWalker(trie, list("abc"))) == [(0, 1), (0, 2)]

    def test_accept_restarts_after_span(self) -> None:
        trie = Trie.from_phrases(["ab", "abc"])
        assert _walk_accepting(TrieWalker(trie, list("abcab"))) == [(0, 1), (3, 4)]

    def test_restart_by_one_on_mismatch(self) -> None:
        """불일치 시 후보 시작점을 한 글자만 옮김"""
        trie = Trie.from_phrases(["aab"])
        assert _walk_accepting(TrieWalker(trie, list("aaab"))) == [(1, 3)]

    def test_end_of_buffer_retries_next_start(self) -> None:
        """버퍼 끝에서 끊긴 경로도 다음 시작점에서 재시도"""
        trie = Trie.from_phrases(["abc", "b"])
        assert _walk_accepting(TrieWalker(trie, list("ab"))) == [(1, 1)]

    def test_empty_buffer(self) -> None:
        trie = Trie.from_phrases(["a"])
        assert _walk_all(TrieWalker(trie, [])) == []

    def test_candidate_start(self) -> None:
        trie = Trie.from_phrases(["b"])
        walker = TrieWalker(trie, list("ab"))
        spans = iter(walker)
        assert next(spans) == (1, 1)
        assert walker.candidate_start == 1


class TestBackwardWalk:
    """역방향 탐색"""

    def test_reversed_trie_walks_backward_from_origin(self) -> None:
        trie = ReversedTrie.from_phrases(["not bad"])
        chars = list("is not bad")
        walker = TrieWalker(trie, chars, origin=len(chars) - 1)
        assert _walk_all(walker) == [(3, 9)]

    def test_backward_walk_stops_at_buffer_start(self) -> None:
        trie = ReversedTrie.from_phrases(["xbad"])
        chars = list("bad")
        assert _walk_all(TrieWalker(trie, chars, origin=2)) == []


class TestBoundedWalk:
    """거리 제한 탐색"""

    def test_mismatch_beyond_bound_fails(self) -> None:
        """거리 제한을 넘는 위치의 불일치에서 탐색 종료"""
        trie = Trie.from_phrases(["xyz"])
        assert _walk_all(TrieWalker(trie, list("abcdxyz"), bound=2)) == []

    def test_match_found_within_bound(self) -> None:
        trie = Trie.from_phrases(["xyz"])
        assert _walk_all(TrieWalker(trie, list("abcdxyz"), bound=3)) == [(4, 6)]

    def test_path_may_extend_past_bound(self) -> None:
        """거리 제한은 불일치 위치에만 적용 (일치 경로는 제한 없이 진행)"""
        trie = Trie.from_phrases(["abcdef"])
        assert _walk_all(TrieWalker(trie, list("abcdef"), bound=1)) == [(0, 5)]
