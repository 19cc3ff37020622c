"""회원 검색 라우터 — v1(전체 조회), v2(페이징 조회) 엔드포인트.

Member Search Router — v1 returns every matching row, v2 returns one page.

Examples:
    GET /v1/members?teamName=teamB&ageGoe=31&ageLoe=35
    GET /v2/members?size=5&page=2&sort=username,desc
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_page_request, get_search_condition
from app.database import get_db
from app.schemas.member import MemberSearchCondition, MemberTeamDto
from app.services.member_service import member_service
from app.utils.pagination import Page, PageRequest

router: APIRouter = APIRouter()


@router.get("/v1/members", response_model=list[MemberTeamDto])
async def search_member_v1(
    db: Annotated[AsyncSession, Depends(get_db)],
    condition: Annotated[MemberSearchCondition, Depends(get_search_condition)],
) -> list[MemberTeamDto]:
    """조건에 맞는 회원을 모두 조회합니다.

    Search all members matching the query-string condition.
    """
    return await member_service.search_members(db, condition)


@router.get("/v2/members", response_model=Page[MemberTeamDto])
async def search_member_v2(
    db: Annotated[AsyncSession, Depends(get_db)],
    condition: Annotated[MemberSearchCondition, Depends(get_search_condition)],
    page_request: Annotated[PageRequest, Depends(get_page_request)],
) -> Page[MemberTeamDto]:
    """조건에 맞는 회원을 페이지 단위로 조회합니다.

    Search members matching the query-string condition, one page at a time.
    """
    return await member_service.search_members_page(db, condition, page_request)
