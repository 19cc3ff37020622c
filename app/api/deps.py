"""FastAPI 의존성 주입 모듈 — 검색 조건 및 페이지 요청 바인딩.

FastAPI dependency injection module — Query-string binding.
Turns query parameters into the search condition and page request used by
the member endpoints.

Binding rules:
    - teamName, ageGoe, ageLoe, username: 모두 선택값, 없으면 필터 없음
      (All optional; an absent or blank parameter imposes no filter)
    - page: 0부터 시작, 음수는 422 (Zero-based; negative is rejected with 422)
    - size: 1..MAX_PAGE_SIZE, 범위 밖이면 422 (Out of range is rejected with 422)
    - sort: 반복 가능, "property,asc|desc[,nullsfirst|nullslast]"
      (Repeatable Spring-style sort parameter)
"""

from typing import Annotated

from fastapi import Query
from pydantic import BeforeValidator

from app.config import settings
from app.schemas.member import MemberSearchCondition, blank_to_none
from app.utils.pagination import PageRequest

# `?teamName=&ageGoe=` 처럼 빈 값은 파라미터 없음으로 취급
# Blank values such as `?teamName=&ageGoe=` bind as None
BlankAsNone = BeforeValidator(blank_to_none)


def get_search_condition(
    team_name: Annotated[str | None, Query(alias="teamName"), BlankAsNone] = None,
    age_goe: Annotated[int | None, Query(alias="ageGoe"), BlankAsNone] = None,
    age_loe: Annotated[int | None, Query(alias="ageLoe"), BlankAsNone] = None,
    username: Annotated[str | None, Query(), BlankAsNone] = None,
) -> MemberSearchCondition:
    """쿼리 파라미터를 회원 검색 조건으로 바인딩합니다.

    Bind query parameters into a MemberSearchCondition.
    """
    return MemberSearchCondition(
        username=username,
        team_name=team_name,
        age_goe=age_goe,
        age_loe=age_loe,
    )


def get_page_request(
    page: Annotated[int, Query(ge=0)] = 0,
    size: Annotated[int, Query(ge=1, le=settings.MAX_PAGE_SIZE)] = settings.DEFAULT_PAGE_SIZE,
    sort: Annotated[list[str] | None, Query()] = None,
) -> PageRequest:
    """쿼리 파라미터를 페이지 요청으로 바인딩합니다.

    Bind page, size and sort parameters into a PageRequest.
    """
    return PageRequest(page=page, size=size, sort=PageRequest.parse_sort(sort))
