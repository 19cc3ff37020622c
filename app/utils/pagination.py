"""페이지네이션 유틸리티 모듈.

Pagination utility module for SQLAlchemy async queries.
Provides the page request (page index, size, sort orders), the generic Page
response model, and a paginate helper that counts through a subquery.

Page numbers are zero-based and the JSON shape follows Spring Data's Page:
``content``, ``totalElements``, ``totalPages``, ``size``, ``number``, ...
"""

import math
from typing import Any, Generic, Literal, Sequence, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar("T")

# 정렬 방향 / NULL 정렬 토큰 — Tokens recognised inside a sort parameter
_DIRECTIONS: set[str] = {"asc", "desc"}
_NULL_HANDLING: dict[str, str] = {"nullsfirst": "first", "nullslast": "last"}


class SortOrder(BaseModel):
    """단일 정렬 조건.

    A single sort key. ``nulls`` selects where NULL keys go;
    ``native`` leaves the database default in place.

    Attributes:
        property: 정렬 대상 속성명 (Property name, e.g. "username")
        direction: 정렬 방향 (asc | desc)
        nulls: NULL 정렬 위치 (native | first | last)
    """

    property: str
    direction: Literal["asc", "desc"] = "asc"
    nulls: Literal["native", "first", "last"] = "native"


class PageRequest(BaseModel):
    """페이지 요청 — 0부터 시작하는 페이지 번호, 크기, 정렬.

    Page request with a zero-based page index. Negative values are rejected
    by validation, so a PageRequest that exists is always usable.

    Attributes:
        page: 페이지 번호, 0부터 시작 (Page index, 0-based)
        size: 페이지당 항목 수 (Items per page, >= 1)
        sort: 정렬 조건 목록 (Ordered sort keys)
    """

    page: int = Field(default=0, ge=0)
    size: int = Field(default=20, ge=1)
    sort: list[SortOrder] = Field(default_factory=list)

    @property
    def offset(self) -> int:
        """OFFSET 값 (page * size)."""
        return self.page * self.size

    @staticmethod
    def parse_sort(values: Sequence[str] | None) -> list[SortOrder]:
        """Spring 형식의 sort 파라미터를 파싱합니다.

        Parse Spring-style sort parameters. Each value is
        ``property[,property...][,asc|desc][,nullsfirst|nullslast]``;
        the direction and null handling apply to every property in the value.

        Args:
            values: sort 쿼리 파라미터 목록 (e.g. ["username,desc", "age"])

        Returns:
            list[SortOrder]: 파싱된 정렬 조건 (Parsed sort orders, in order)
        """
        orders: list[SortOrder] = []
        for value in values or []:
            tokens: list[str] = [t.strip() for t in value.split(",") if t.strip()]
            direction: str = "asc"
            nulls: str = "native"
            properties: list[str] = []
            for token in tokens:
                lowered: str = token.lower()
                if lowered in _DIRECTIONS:
                    direction = lowered
                elif lowered in _NULL_HANDLING:
                    nulls = _NULL_HANDLING[lowered]
                else:
                    properties.append(token)
            orders.extend(
                SortOrder(property=p, direction=direction, nulls=nulls) for p in properties
            )
        return orders


class Page(BaseModel, Generic[T]):
    """페이지네이션 결과 모델.

    Pagination result model. ``total_elements`` is exact and independent of
    the requested page; the remaining metadata is derived in :meth:`of`.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    content: list[T]  # 현재 페이지 항목 목록 (Items for the current page)
    total_elements: int  # 전체 항목 수 (Total matching rows)
    total_pages: int  # 전체 페이지 수 (ceil(total/size))
    size: int  # 요청 페이지 크기 (Requested page size)
    number: int  # 현재 페이지 번호, 0부터 (Current page index)
    number_of_elements: int  # 현재 페이지 항목 수 (len(content))
    first: bool
    last: bool
    empty: bool
    sort: list[SortOrder] = Field(default_factory=list)

    @classmethod
    def of(cls, content: Sequence[T], page_request: PageRequest, total: int) -> "Page[T]":
        """컨텐츠와 전체 개수로 페이지를 구성합니다.

        Build a page from its content, the request that produced it and the total count.
        """
        total_pages: int = math.ceil(total / page_request.size) if total else 0
        return cls(
            content=list(content),
            total_elements=total,
            total_pages=total_pages,
            size=page_request.size,
            number=page_request.page,
            number_of_elements=len(content),
            first=page_request.page == 0,
            last=page_request.page + 1 >= total_pages,
            empty=len(content) == 0,
            sort=page_request.sort,
        )


async def paginate(
    db: AsyncSession,
    query: Select[Any],
    page_request: PageRequest,
) -> tuple[Sequence[Any], int]:
    """SQLAlchemy 쿼리에 대한 페이지네이션을 수행합니다.

    Execute a paginated SQLAlchemy query, returning rows and total count.
    Runs two queries: one for the total count (the query wrapped as a
    subquery) and one for the requested page with OFFSET/LIMIT.

    Args:
        db: 비동기 DB 세션 (Async database session)
        query: SQLAlchemy Select 쿼리 (Base query; ORDER BY is dropped for the count)
        page_request: 페이지 요청 (Page request)

    Returns:
        tuple[Sequence[Any], int]: (행 목록, 전체 개수) 튜플
            (Tuple of page rows and total count)
    """
    # 전체 개수 조회 — 서브쿼리로 감싸서 COUNT 실행 (Count total via subquery)
    count_query = select(func.count()).select_from(query.order_by(None).subquery())
    total: int = (await db.execute(count_query)).scalar() or 0

    # 페이지 항목 조회 — OFFSET/LIMIT 적용 (Fetch page rows with offset/limit)
    result = await db.execute(query.offset(page_request.offset).limit(page_request.size))
    rows: Sequence[Any] = result.all()

    return rows, total
