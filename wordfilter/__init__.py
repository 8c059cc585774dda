"""
wordfilter: 사전 기반 민감어 필터

사용 예시:
    >>> from wordfilter import WordFilter, WordType
    >>> word_filter = WordFilter()
    >>> word_filter.add_words(WordType.BLACK, ["bad"])
    >>> word_filter.mask("bad news")
    '*** news'
"""

from wordfilter.config import WordFilterConfig, validate_config
from wordfilter.lib.errors import (
    ConfigError,
    ErrorCode,
    FilterError,
    NoisePatternError,
    WordFilterException,
    WordTypeError,
)
from wordfilter.modules.core.sensitive import (
    FilterResult,
    Match,
    ValidationResult,
    WordFilter,
    WordType,
    get_word_filter,
    reset_word_filter,
)

__version__ = "1.0.0"

__all__ = [
    "WordFilter",
    "WordType",
    "Match",
    "ValidationResult",
    "FilterResult",
    "get_word_filter",
    "reset_word_filter",
    "WordFilterConfig",
    "validate_config",
    "ErrorCode",
    "WordFilterException",
    "ConfigError",
    "FilterError",
    "NoisePatternError",
    "WordTypeError",
]
