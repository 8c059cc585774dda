"""wordfilter 예외 계층.

모든 예외는 에러 코드(error_code)와 메시지 템플릿 값(context)을 가지며,
str(exc)는 한국어 메시지, to_dict(lang=...)는 양언어 응답 딕셔너리입니다.

    WordFilterException
    ├── ConfigError          CONFIG-*
    ├── FilterError          FILTER-*
    │   ├── NoisePatternError    FILTER-001
    │   └── WordTypeError        FILTER-002
    └── GeneralError         GENERAL-*
"""

from typing import Any

from wordfilter.lib.errors.codes import ErrorCode
from wordfilter.lib.errors.formatter import error_code_value, format_error_response


class WordFilterException(Exception):
    """wordfilter 기본 예외.

    Attributes:
        error_code: "FILTER-001" 형식의 코드 문자열
        context: 메시지 템플릿에 채울 값
    """

    def __init__(self, error_code: str | ErrorCode, **context: Any) -> None:
        self.error_code = error_code_value(error_code)
        self.context = context
        super().__init__(self.to_dict(lang="ko", include_solutions=False)["message"])

    def to_dict(self, lang: str = "ko", include_solutions: bool = True) -> dict[str, Any]:
        return format_error_response(self.error_code, lang=lang, include_solutions=include_solutions, **self.context)


class ConfigError(WordFilterException):
    """필터 설정 검증 실패."""


class FilterError(WordFilterException):
    """필터 API 사용 오류."""


class NoisePatternError(FilterError):
    """노이즈 패턴 컴파일 실패."""


class WordTypeError(FilterError):
    """알 수 없는 단어 유형."""


class GeneralError(WordFilterException):
    pass


_CODE_CLASSES: dict[str, type[WordFilterException]] = {
    ErrorCode.FILTER_001.value: NoisePatternError,
    ErrorCode.FILTER_002.value: WordTypeError,
}

_DOMAIN_CLASSES: dict[str, type[WordFilterException]] = {
    "CONFIG": ConfigError,
    "FILTER": FilterError,
    "GENERAL": GeneralError,
}


def get_exception_class(error_code: str | ErrorCode) -> type[WordFilterException]:
    """에러 코드에 대응하는 예외 클래스 (코드별 전용 클래스 우선, 없으면 도메인 클래스).

    Example:
        >>> get_exception_class("FILTER-001").__name__
        'NoisePatternError'
    """
    code = error_code_value(error_code)
    if code in _CODE_CLASSES:
        return _CODE_CLASSES[code]
    return _DOMAIN_CLASSES.get(code.split("-", 1)[0], WordFilterException)


def wrap_exception(
    error: Exception,
    default_code: str | ErrorCode = ErrorCode.GENERAL_001,
    **context: Any,
) -> WordFilterException:
    """임의의 예외를 코드에 맞는 WordFilterException으로 변환.

    이미 WordFilterException이면 그대로 반환합니다. 원본 예외의 타입 이름과
    메시지는 context의 original_error_type / original_error_message에 담깁니다.
    """
    if isinstance(error, WordFilterException):
        return error

    code = error_code_value(default_code)
    context.update(original_error_type=type(error).__name__, original_error_message=str(error))
    return get_exception_class(code)(code, **context)
