"""에러 응답 생성 유틸리티.

ErrorCode 또는 코드 문자열을 받아 지정 언어의 메시지/해결 방법을 만들고
{"error_code", "message", "solutions"} 형태의 응답 딕셔너리로 묶습니다.
언어를 지정하지 않으면 ERROR_LANGUAGE 환경변수(기본 "ko")를 따릅니다.
"""

import os
from typing import Any

from wordfilter.lib.errors.codes import ErrorCode
from wordfilter.lib.errors.messages import (
    ERROR_MESSAGES,
    SUPPORTED_LANGUAGES,
    get_message_template,
    get_solutions_list,
)


def error_code_value(error_code: str | ErrorCode) -> str:
    return error_code.value if isinstance(error_code, ErrorCode) else error_code


def get_default_language() -> str:
    """ERROR_LANGUAGE 환경변수 값 (지원하지 않는 값이면 "ko")"""
    lang = os.getenv("ERROR_LANGUAGE", "ko")
    return lang if lang in SUPPORTED_LANGUAGES else "ko"


def get_error_message(error_code: str | ErrorCode, lang: str | None = None, **kwargs: Any) -> str:
    """컨텍스트로 채운 에러 메시지.

    템플릿에 필요한 키가 kwargs에 없으면 예외 대신 템플릿 원문에
    누락된 키 이름을 덧붙여 돌려줍니다.

    Example:
        >>> get_error_message(ErrorCode.FILTER_002, lang="en", kind="grey")
        'Unknown word type: grey'
    """
    template = get_message_template(error_code_value(error_code), lang or get_default_language())
    if not kwargs:
        return template
    try:
        return template.format(**kwargs)
    except KeyError as e:
        return f"{template} (포맷팅 오류: {e.args[0]} 누락)"


def get_error_solutions(error_code: str | ErrorCode, lang: str | None = None) -> list[str]:
    return get_solutions_list(error_code_value(error_code), lang or get_default_language())


def format_error_response(
    error_code: str | ErrorCode,
    lang: str | None = None,
    include_solutions: bool = True,
    **context: Any,
) -> dict[str, Any]:
    """에러 응답 딕셔너리 생성.

    Args:
        error_code: 에러 코드
        lang: "ko" 또는 "en" (None이면 ERROR_LANGUAGE)
        include_solutions: "solutions" 키 포함 여부
        **context: 메시지 템플릿 값

    Example:
        >>> format_error_response("FILTER-001", lang="en", include_solutions=False, pattern="[", reason="x")
        {'error_code': 'FILTER-001', 'message': 'Cannot compile noise pattern: [ (x)'}
    """
    code = error_code_value(error_code)
    lang = lang or get_default_language()

    response: dict[str, Any] = {"error_code": code, "message": get_error_message(code, lang, **context)}
    if include_solutions:
        response["solutions"] = get_error_solutions(code, lang)
    return response


def get_all_error_codes() -> list[str]:
    return sorted(ERROR_MESSAGES)


def get_error_codes_by_domain(domain: str) -> list[str]:
    """도메인("CONFIG", "FILTER", "GENERAL")에 속한 코드 목록"""
    return [code for code in get_all_error_codes() if code.split("-", 1)[0] == domain]
