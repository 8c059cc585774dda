"""에러 코드별 양언어(ko/en) 메시지 템플릿과 해결 방법 목록."""

from typing import Any


# 에러 메시지 저장소: {error_code: {"ko": "한국어 메시지", "en": "English message"}}
ERROR_MESSAGES: dict[str, dict[str, str]] = {
    # CONFIG (설정 관리)
    "CONFIG-001": {
        "ko": "필터 설정 검증 실패: {reason}",
        "en": "Filter configuration validation failed: {reason}",
    },
    "CONFIG-002": {
        "ko": "잘못된 설정 형식: dict가 필요하지만 {actual_type}이(가) 전달되었습니다",
        "en": "Invalid configuration format: expected dict, got {actual_type}",
    },
    # FILTER (필터 사용 오류)
    "FILTER-001": {
        "ko": "노이즈 패턴을 컴파일할 수 없습니다: {pattern} ({reason})",
        "en": "Cannot compile noise pattern: {pattern} ({reason})",
    },
    "FILTER-002": {
        "ko": "알 수 없는 단어 유형입니다: {kind}",
        "en": "Unknown word type: {kind}",
    },
    # GENERAL (일반 오류)
    "GENERAL-001": {
        "ko": "알 수 없는 오류가 발생했습니다",
        "en": "An unknown error occurred",
    },
}

# 에러 해결 방법 저장소: {error_code: {"ko": [...], "en": [...]}}
ERROR_SOLUTIONS: dict[str, dict[str, list[str]]] = {
    "CONFIG-001": {
        "ko": [
            "mask_char가 정확히 한 글자인지 확인하세요",
            "noise_pattern이 올바른 정규식인지 확인하세요",
        ],
        "en": [
            "Make sure mask_char is exactly one character",
            "Make sure noise_pattern is a valid regular expression",
        ],
    },
    "CONFIG-002": {
        "ko": [
            "설정은 키-값 딕셔너리로 전달하세요",
        ],
        "en": [
            "Pass the configuration as a key-value dictionary",
        ],
    },
    "FILTER-001": {
        "ko": [
            "정규식 문법을 확인하세요 (괄호, 문자 클래스 닫힘 여부)",
            "기본 패턴 [\\|\\s&%$@*]+ 을 참고하세요",
        ],
        "en": [
            "Check the regular expression syntax (unclosed groups or classes)",
            "See the default pattern [\\|\\s&%$@*]+ for reference",
        ],
    },
    "FILTER-002": {
        "ko": [
            "WordType.BLACK, WordType.WHITE_PREFIX, WordType.WHITE_SUFFIX 중 하나를 사용하세요",
        ],
        "en": [
            "Use one of WordType.BLACK, WordType.WHITE_PREFIX, WordType.WHITE_SUFFIX",
        ],
    },
    "GENERAL-001": {
        "ko": [
            "로그를 확인하세요",
        ],
        "en": [
            "Check the logs",
        ],
    },
}


SUPPORTED_LANGUAGES = ("ko", "en")


def _lookup(table: dict[str, dict[str, Any]], error_code: str, lang: str) -> Any:
    entry = table.get(error_code)
    if entry is None:
        raise KeyError(f"Unknown error code: {error_code}")
    if lang not in SUPPORTED_LANGUAGES:
        raise ValueError(f"Unsupported language: {lang}")
    return entry[lang]


def get_message_template(error_code: str, lang: str = "ko") -> str:
    """포맷팅 전 메시지 템플릿 (없는 코드는 KeyError, 미지원 언어는 ValueError)"""
    return _lookup(ERROR_MESSAGES, error_code, lang)


def get_solutions_list(error_code: str, lang: str = "ko") -> list[str]:
    """해결 방법 목록의 사본"""
    return list(_lookup(ERROR_SOLUTIONS, error_code, lang))
