"""
공용 라이브러리 (로깅, 에러)
"""

from .logger import configure, get_logger

__all__ = [
    "configure",
    "get_logger",
]
