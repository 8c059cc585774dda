"""
Configuration package
"""

from .schemas import DEFAULT_NOISE_PATTERN, WordFilterConfig, validate_config

__all__ = [
    "DEFAULT_NOISE_PATTERN",
    "WordFilterConfig",
    "validate_config",
]
