"""에러 코드 정의 모듈.

모든 wordfilter 에러 코드를 Enum으로 정의합니다.
도메인별로 그룹화되어 있어 에러 분류 및 추적이 용이합니다.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """wordfilter 에러 코드 Enum.

    형식: {DOMAIN}-{NUMBER}
    - CONFIG: 설정 관리
    - FILTER: 필터 사용 오류 (잘못된 노이즈 패턴, 단어 유형 등)
    - GENERAL: 일반 오류
    """

    # CONFIG (설정 관리) - 2개
    CONFIG_001 = "CONFIG-001"  # 설정 검증 실패
    CONFIG_002 = "CONFIG-002"  # 잘못된 설정 형식 (dict 아님)

    # FILTER (필터 사용 오류) - 2개
    FILTER_001 = "FILTER-001"  # 노이즈 패턴 컴파일 실패
    FILTER_002 = "FILTER-002"  # 알 수 없는 단어 유형

    # GENERAL (일반 오류) - 1개
    GENERAL_001 = "GENERAL-001"  # 알 수 없는 오류
