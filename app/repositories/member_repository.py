"""회원 레포지토리 — 회원 검색(동적 쿼리, 페이징) 및 집계/벌크 쿼리.

Member Repository — Dynamic search with paging, plus aggregate, subquery
and bulk statements over members.

Search results are flattened rows (MemberTeamDto) projected from
member LEFT OUTER JOIN team, so callers never receive lazy-loading entities
and members without a team still appear (with null team fields).
"""

from typing import Sequence

from sqlalchemy import Select, delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from app.models.member import Member
from app.models.team import Team
from app.repositories.base import BaseRepository
from app.repositories.predicates import build_where, references_team
from app.schemas.member import AgeStatistics, MemberSearchCondition, MemberTeamDto
from app.utils.exceptions import BadRequestError
from app.utils.pagination import Page, PageRequest, SortOrder, paginate

# 정렬 허용 속성 — 응답 필드명(camelCase)과 snake_case 모두 허용
# Sortable properties, keyed by response field name (camelCase or snake_case)
_SORTABLE_COLUMNS = {
    "memberId": Member.id,
    "member_id": Member.id,
    "username": Member.username,
    "age": Member.age,
    "teamId": Team.id,
    "team_id": Team.id,
    "teamName": Team.name,
    "team_name": Team.name,
}


class MemberRepository(BaseRepository[Member]):
    """회원 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the member table.
    Holds no per-call state; the singleton is safe to share across requests.
    """

    def __init__(self) -> None:
        """MemberRepository를 초기화합니다.

        Initialize the MemberRepository with the Member model.
        """
        super().__init__(Member)

    # ------------------------------------------------------------------
    # 기본 조회 — Basic lookups
    # ------------------------------------------------------------------

    async def find_by_username(self, db: AsyncSession, username: str) -> list[Member]:
        """이름이 일치하는 회원 목록을 조회합니다.

        Retrieve members with the given username, in insertion order.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            username: 회원 이름 (Member name)

        Returns:
            list[Member]: 회원 목록 (Matching members)
        """
        query: Select = select(Member).where(Member.username == username).order_by(Member.id)
        result = await db.execute(query)
        return list(result.scalars().all())

    # ------------------------------------------------------------------
    # 검색 — Search (dynamic predicates + flattened projection)
    # ------------------------------------------------------------------

    def _member_team_query(self, condition: MemberSearchCondition) -> Select:
        """평탄화 프로젝션 + 외부 조인 + 동적 조건절 쿼리를 구성합니다.

        Build the content query: flattened projection over
        member LEFT OUTER JOIN team, filtered by the condition's clauses.
        """
        return (
            select(
                Member.id.label("member_id"),
                Member.username,
                Member.age,
                Team.id.label("team_id"),
                Team.name.label("team_name"),
            )
            .select_from(Member)
            .outerjoin(Member.team)
            .where(*build_where(condition))
        )

    def _count_query(self, condition: MemberSearchCondition) -> Select:
        """컨텐츠와 분리된 count 쿼리를 구성합니다.

        Build the count query. It shares the condition's clauses with the
        content query but never carries ORDER BY/OFFSET/LIMIT, and joins
        team only when a clause references a team column.
        """
        query: Select = select(func.count(Member.id)).select_from(Member)
        if references_team(condition):
            query = query.outerjoin(Member.team)
        return query.where(*build_where(condition))

    def _order_by(self, sort: Sequence[SortOrder]) -> list:
        """정렬 조건을 ORDER BY 절로 변환합니다.

        Translate sort orders into ORDER BY clauses. No implicit tie-breaker
        is added.

        Raises:
            BadRequestError: 정렬할 수 없는 속성 (Unknown sort property)
        """
        clauses: list = []
        for order in sort:
            column = _SORTABLE_COLUMNS.get(order.property)
            if column is None:
                raise BadRequestError(f"Unknown sort property: {order.property}")

            clause = column.desc() if order.direction == "desc" else column.asc()
            if order.nulls == "first":
                clause = clause.nulls_first()
            elif order.nulls == "last":
                clause = clause.nulls_last()
            clauses.append(clause)
        return clauses

    async def search(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
    ) -> list[MemberTeamDto]:
        """조건에 맞는 회원+팀 행을 모두 조회합니다 (페이징 없음).

        Return every row matching the condition. Ordering is unspecified.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            condition: 회원 검색 조건 (Member search condition)

        Returns:
            list[MemberTeamDto]: 평탄화된 결과 행 목록 (Flattened result rows)
        """
        result = await db.execute(self._member_team_query(condition))
        return [MemberTeamDto.model_validate(dict(row._mapping)) for row in result.all()]

    async def search_page(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
        page_request: PageRequest,
    ) -> Page[MemberTeamDto]:
        """컨텐츠 쿼리와 count 쿼리를 분리하여 페이지를 조회합니다.

        Fetch one page with the content and count queries kept separate.
        The count query is skipped when the page itself proves the total:
        a first page shorter than the page size, or a non-empty short page
        further along. The total is exact in every case.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            condition: 회원 검색 조건 (Member search condition)
            page_request: 페이지 요청 (Page index, size and sort)

        Returns:
            Page[MemberTeamDto]: 결과 페이지 (Page of flattened rows with exact total)
        """
        query: Select = (
            self._member_team_query(condition)
            .order_by(*self._order_by(page_request.sort))
            .offset(page_request.offset)
            .limit(page_request.size)
        )
        result = await db.execute(query)
        content: list[MemberTeamDto] = [
            MemberTeamDto.model_validate(dict(row._mapping)) for row in result.all()
        ]

        # 마지막 페이지가 확실하면 count 쿼리 생략 — Skip the count when the page proves the total
        if len(content) < page_request.size and (page_request.offset == 0 or content):
            total: int = page_request.offset + len(content)
        else:
            total = (await db.execute(self._count_query(condition))).scalar() or 0

        return Page[MemberTeamDto].of(content, page_request, total)

    async def search_page_simple(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
        page_request: PageRequest,
    ) -> Page[MemberTeamDto]:
        """컨텐츠 쿼리를 서브쿼리로 감싸 count를 구하는 단순 페이징.

        Simple paging variant: the total always comes from the content query
        wrapped as a subquery, so the two queries can never disagree on the join.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            condition: 회원 검색 조건 (Member search condition)
            page_request: 페이지 요청 (Page index, size and sort)

        Returns:
            Page[MemberTeamDto]: 결과 페이지 (Page of flattened rows)
        """
        query: Select = self._member_team_query(condition).order_by(
            *self._order_by(page_request.sort)
        )
        rows, total = await paginate(db, query, page_request)
        content: list[MemberTeamDto] = [
            MemberTeamDto.model_validate(dict(row._mapping)) for row in rows
        ]
        return Page[MemberTeamDto].of(content, page_request, total)

    # ------------------------------------------------------------------
    # 집계 / 서브쿼리 — Aggregates and subqueries
    # ------------------------------------------------------------------

    async def age_statistics(self, db: AsyncSession) -> AgeStatistics:
        """회원 수와 나이 합계/평균/최대/최소를 조회합니다.

        Count members and aggregate their ages in one query.
        Aggregates are None when there are no members.
        """
        query: Select = select(
            func.count(Member.id),
            func.sum(Member.age),
            func.avg(Member.age),
            func.max(Member.age),
            func.min(Member.age),
        )
        count, total, average, maximum, minimum = (await db.execute(query)).one()
        return AgeStatistics(
            count=count,
            total=total,
            average=float(average) if average is not None else None,
            maximum=maximum,
            minimum=minimum,
        )

    async def average_age_by_team(self, db: AsyncSession) -> list[tuple[str, float]]:
        """팀 이름별 평균 나이를 조회합니다 (팀 없는 회원 제외).

        Average member age per team name, ordered by team name.
        Members without a team are excluded by the inner join.
        """
        query: Select = (
            select(Team.name, func.avg(Member.age))
            .select_from(Member)
            .join(Member.team)
            .group_by(Team.name)
            .order_by(Team.name)
        )
        result = await db.execute(query)
        return [(name, float(average)) for name, average in result.all()]

    async def find_oldest(self, db: AsyncSession) -> list[Member]:
        """나이가 가장 많은 회원을 조회합니다 (WHERE age = (SELECT max(age)))."""
        member_sub = aliased(Member)
        max_age = select(func.max(member_sub.age)).scalar_subquery()
        result = await db.execute(
            select(Member).where(Member.age == max_age).order_by(Member.id)
        )
        return list(result.scalars().all())

    async def find_at_least_average_age(self, db: AsyncSession) -> list[Member]:
        """나이가 평균 이상인 회원을 조회합니다 (WHERE age >= (SELECT avg(age)))."""
        member_sub = aliased(Member)
        avg_age = select(func.avg(member_sub.age)).scalar_subquery()
        result = await db.execute(
            select(Member).where(Member.age >= avg_age).order_by(Member.id)
        )
        return list(result.scalars().all())

    async def find_with_age_in_subquery(self, db: AsyncSession, greater_than: int) -> list[Member]:
        """서브쿼리 결과에 나이가 포함된 회원을 조회합니다 (WHERE age IN (SELECT ...))."""
        member_sub = aliased(Member)
        ages = select(member_sub.age).where(member_sub.age > greater_than)
        result = await db.execute(
            select(Member).where(Member.age.in_(ages)).order_by(Member.id)
        )
        return list(result.scalars().all())

    # ------------------------------------------------------------------
    # 벌크 연산 — Bulk statements
    # ------------------------------------------------------------------
    # 단일 UPDATE/DELETE 문으로 실행되어 세션의 엔티티 상태를 거치지 않음.
    # 실행 후 세션을 만료시켜 이후 조회가 DB 값을 다시 읽도록 함.
    # Each runs as one statement that bypasses in-session entity state;
    # the session is expired afterwards so later reads reload from the DB.

    async def bulk_rename_younger_than(self, db: AsyncSession, age: int, username: str) -> int:
        """나이가 age 미만인 회원의 이름을 일괄 변경합니다.

        Rename every member younger than ``age``.

        Returns:
            int: 변경된 행 수 (Affected row count)
        """
        await db.flush()
        result = await db.execute(
            update(Member)
            .where(Member.age < age)
            .values(username=username)
            .execution_options(synchronize_session=False)
        )
        db.expire_all()
        return result.rowcount

    async def bulk_add_age(self, db: AsyncSession, delta: int) -> int:
        """모든 회원의 나이에 delta를 더합니다 (음수면 감소).

        Add ``delta`` to every member's age.

        Returns:
            int: 변경된 행 수 (Affected row count)
        """
        await db.flush()
        result = await db.execute(
            update(Member)
            .values(age=Member.age + delta)
            .execution_options(synchronize_session=False)
        )
        db.expire_all()
        return result.rowcount

    async def bulk_delete_older_than(self, db: AsyncSession, age: int) -> int:
        """나이가 age 초과인 회원을 일괄 삭제합니다.

        Delete every member older than ``age``.

        Returns:
            int: 삭제된 행 수 (Affected row count)
        """
        await db.flush()
        result = await db.execute(
            delete(Member)
            .where(Member.age > age)
            .execution_options(synchronize_session=False)
        )
        db.expire_all()
        return result.rowcount


# 싱글턴 인스턴스 — Singleton instance
member_repository: MemberRepository = MemberRepository()
