"""회원 서비스 — 회원 검색 비즈니스 로직.

Member Service — Business logic for member search.
Read-only: neither operation opens a transaction or mutates the session.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.repositories.member_repository import member_repository
from app.schemas.member import MemberSearchCondition, MemberTeamDto
from app.utils.pagination import Page, PageRequest


class MemberService:
    """회원 검색을 처리하는 서비스.

    Service handling member search. Delegates query assembly to
    MemberRepository and returns flattened rows.
    """

    async def search_members(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
    ) -> list[MemberTeamDto]:
        """조건에 맞는 모든 회원을 조회합니다.

        Search every member matching the condition (no paging).

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            condition: 회원 검색 조건 (Member search condition)

        Returns:
            list[MemberTeamDto]: 검색 결과 (Flattened result rows)
        """
        return await member_repository.search(db, condition)

    async def search_members_page(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
        page_request: PageRequest,
    ) -> Page[MemberTeamDto]:
        """조건에 맞는 회원을 페이지 단위로 조회합니다.

        Search members matching the condition, one page at a time.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            condition: 회원 검색 조건 (Member search condition)
            page_request: 페이지 요청 (Page index, size and sort)

        Returns:
            Page[MemberTeamDto]: 결과 페이지 (Page with exact total count)

        Raises:
            BadRequestError: 정렬 속성이 잘못된 경우 (Unknown sort property)
        """
        return await member_repository.search_page(db, condition, page_request)


# 싱글턴 인스턴스 — Singleton instance
member_service: MemberService = MemberService()
