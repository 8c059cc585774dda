"""wordfilter 에러 코드와 예외.

    >>> from wordfilter.lib.errors import NoisePatternError
    >>> try:
    ...     word_filter.update_noise_pattern("[")
    ... except NoisePatternError as e:
    ...     e.error_code, e.to_dict(lang="en")["message"]
    ('FILTER-001', 'Cannot compile noise pattern: [ (unterminated character set at position 0)')
"""

from wordfilter.lib.errors.codes import ErrorCode
from wordfilter.lib.errors.exceptions import (
    ConfigError,
    FilterError,
    GeneralError,
    NoisePatternError,
    WordFilterException,
    WordTypeError,
    get_exception_class,
    wrap_exception,
)
from wordfilter.lib.errors.formatter import (
    error_code_value,
    format_error_response,
    get_all_error_codes,
    get_default_language,
    get_error_codes_by_domain,
    get_error_message,
    get_error_solutions,
)

__all__ = [
    "ErrorCode",
    # 예외
    "WordFilterException",
    "ConfigError",
    "FilterError",
    "NoisePatternError",
    "WordTypeError",
    "GeneralError",
    "get_exception_class",
    "wrap_exception",
    # 응답 포맷팅
    "error_code_value",
    "format_error_response",
    "get_error_message",
    "get_error_solutions",
    "get_default_language",
    "get_all_error_codes",
    "get_error_codes_by_domain",
]
