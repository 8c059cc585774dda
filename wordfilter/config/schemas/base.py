"""
설정 스키마 공통 부모 (pydantic v2)

문자열 값 안의 ${ENV_VAR} / ${ENV_VAR:-default} 참조를 검증 전에 환경 변수 값으로
치환합니다. 미설정 변수는 기본값, 기본값이 없으면 빈 문자열이 됩니다.
"""

import os
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

ENV_REFERENCE = re.compile(r"\$\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?::-(?P<default>[^}]*))?\}")


def substitute_env(value: str) -> str:
    """
    문자열의 모든 환경 변수 참조 치환

    Examples:
        >>> os.environ["WORDFILTER_MASK_CHAR"] = "#"
        >>> substitute_env("${WORDFILTER_MASK_CHAR:-*}")
        '#'
        >>> substitute_env("[${UNSET_VAR:--}]+")
        '[-]+'
    """
    return ENV_REFERENCE.sub(lambda m: os.getenv(m["name"], m["default"] or ""), value)


class BaseConfig(BaseModel):
    """
    설정 스키마 부모 클래스

    - 알 수 없는 키 허용 (extra="allow")
    - 할당 시 재검증 (validate_assignment)
    """

    model_config = ConfigDict(
        extra="allow",
        validate_assignment=True,
        populate_by_name=True,
    )

    @field_validator("*", mode="before")
    @classmethod
    def substitute_env_vars(cls, value: Any) -> Any:
        if isinstance(value, str) and "${" in value:
            return substitute_env(value)
        return value

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
