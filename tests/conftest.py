"""
테스트 공통 설정 및 픽스처

pytest conftest.py - 모든 테스트에서 공유되는 설정과 픽스처 정의.
"""

import os
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# 프로젝트 루트 경로를 sys.path에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


def pytest_configure(config: pytest.Config) -> None:
    """
    pytest 설정 훅

    테스트 환경임을 명시하고 로그 출력을 줄입니다.
    """
    os.environ["ENVIRONMENT"] = "test"
    os.environ.setdefault("LOG_LEVEL", "WARNING")


@pytest.fixture(scope="session")
def project_root_path() -> Path:
    """프로젝트 루트 경로"""
    return project_root


@pytest.fixture(autouse=True)
def _reset_singleton() -> Iterator[None]:
    """테스트 간 WordFilter 싱글톤 격리"""
    from wordfilter.modules.core.sensitive import reset_word_filter

    reset_word_filter()
    yield
    reset_word_filter()
