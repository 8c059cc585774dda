"""
민감어 필터 모듈

사전(Trie) 기반으로 민감어를 탐지/마스킹/제거하고, 화이트리스트 접두/접미
구문으로 오탐을 예외 처리합니다.

주요 컴포넌트:
- WordFilter: 통합 Facade (권장 진입점)
- Scanner: 단일 패스 스캐너
- WhitelistResolver: 거리 제한이 있는 화이트리스트 예외 검색
- TrieWalker: 스캐너와 예외 검색이 공유하는 재시작 방식 Trie 탐색
- Trie / ReversedTrie: 정방향/역방향 키 사전 트리
- NoiseNormalizer: 노이즈 문자 제거

사용 예시:
    >>> from wordfilter.modules.core.sensitive import WordFilter, WordType
    >>> word_filter = WordFilter(check_whitelist=True)
    >>> word_filter.add_words(WordType.BLACK, ["bad"])
    >>> word_filter.add_words(WordType.WHITE_SUFFIX, ["badge"])
    >>> word_filter.find_all("bad and badge")
    ['bad']
    >>> word_filter.contains_sensitive("b|a|d")
    (True, 'bad')
"""

from .dictionary import WordDictionary, coerce_word_type
from .models import FilterResult, Match, ValidationResult, WordType
from .noise import NoiseNormalizer, compile_noise_pattern, fold_case
from .processor import WordFilter, get_word_filter, reset_word_filter
from .scanner import Scanner, render
from .trie import Direction, ReversedTrie, Trie, TrieNode
from .walker import TrieWalker
from .whitelist import WhitelistResolver

__all__ = [
    # Facade (권장)
    "WordFilter",
    "get_word_filter",
    "reset_word_filter",
    # 모델
    "WordType",
    "Match",
    "ValidationResult",
    "FilterResult",
    # 엔진
    "Scanner",
    "render",
    "WhitelistResolver",
    "TrieWalker",
    "WordDictionary",
    "coerce_word_type",
    # 자료구조
    "Trie",
    "ReversedTrie",
    "TrieNode",
    "Direction",
    # 노이즈
    "NoiseNormalizer",
    "compile_noise_pattern",
    "fold_case",
]
