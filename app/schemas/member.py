"""회원 검색 관련 Pydantic 스키마 정의.

Member search Pydantic schema definitions.
Includes the search condition bound from query parameters, the flattened
member/team result row, and the small projection DTOs.

All schemas serialise with camelCase aliases (``memberId``, ``teamName``)
and accept snake_case field names when constructed in Python.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


def blank_to_none(value: Any) -> Any:
    """빈 문자열(공백 포함)을 None으로 변환 — Treat a blank string as absent."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


class MemberSearchCondition(BaseModel):
    """회원 검색 조건 — 모든 필드는 선택값.

    Member search condition. Every field is optional and an absent field
    imposes no filter. A blank string counts as absent. ``age_goe`` and
    ``age_loe`` are not checked against each other; an inverted range
    simply matches nothing.

    Attributes:
        username: 회원 이름 일치 (Exact member name)
        team_name: 팀 이름 일치 (Exact team name)
        age_goe: 나이 하한, 포함 (Minimum age, inclusive)
        age_loe: 나이 상한, 포함 (Maximum age, inclusive)
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    username: str | None = None
    team_name: str | None = None
    age_goe: int | None = None
    age_loe: int | None = None

    @field_validator("username", "team_name", "age_goe", "age_loe", mode="before")
    @classmethod
    def _blank_is_absent(cls, value: Any) -> Any:
        return blank_to_none(value)


class MemberTeamDto(BaseModel):
    """회원+팀 평탄화 결과 행.

    Flattened result row combining member and team columns.
    ``team_id``/``team_name`` are None for a member without a team.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    member_id: int
    username: str | None
    age: int
    team_id: int | None = None
    team_name: str | None = None


class MemberDto(BaseModel):
    """회원 이름/나이 프로젝션 DTO (Name and age projection)."""

    username: str | None
    age: int


class UserDto(BaseModel):
    """별칭 프로젝션 DTO — username을 name으로 받음.

    Projection DTO whose field names differ from the entity
    (``username`` is selected as ``name``).
    """

    name: str | None
    age: int


class AgeStatistics(BaseModel):
    """회원 나이 집계 결과.

    Member count and age aggregates. Every aggregate except ``count``
    is None when there are no members.
    """

    count: int
    total: int | None
    average: float | None
    maximum: int | None
    minimum: int | None
