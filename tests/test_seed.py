"""시드 데이터 테스트.

Seed data tests — team split and member ages.
"""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.models import Member, Team
from app.repositories.member_repository import member_repository
from app.schemas.member import MemberSearchCondition
import app.seed
from app.seed import seed, seed_members


class TestSeedMembers:
    async def test_creates_two_teams_and_members(self, db: AsyncSession):
        team_a, team_b = await seed_members(db, 10)

        assert (team_a.name, team_b.name) == ("teamA", "teamB")
        assert (await db.execute(select(func.count(Team.id)))).scalar() == 2
        assert (await db.execute(select(func.count(Member.id)))).scalar() == 10

    async def test_even_ages_in_team_a(self, db: AsyncSession):
        """짝수 나이는 teamA, 홀수 나이는 teamB."""
        await seed_members(db, 10)

        rows = await member_repository.search(db, MemberSearchCondition())
        for row in rows:
            assert row.username == f"member{row.age}"
            assert row.team_name == ("teamA" if row.age % 2 == 0 else "teamB")

    async def test_searchable_after_seed(self, db: AsyncSession):
        await seed_members(db, 100)

        rows = await member_repository.search(
            db, MemberSearchCondition(team_name="teamB", age_goe=35, age_loe=40)
        )
        assert sorted(r.age for r in rows) == [35, 37, 39]


class _EngineSpy:
    """begin()은 실제 엔진에 위임하고 dispose() 호출 횟수만 기록."""

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine
        self.disposed = 0

    def begin(self):
        return self._engine.begin()

    async def dispose(self) -> None:
        self.disposed += 1


class TestSeed:
    async def test_seed_twice_disposes_engine_each_time(self, engine: AsyncEngine, monkeypatch):
        """두 번째 실행은 건너뛰지만 엔진은 매번 정리."""
        spy = _EngineSpy(engine)
        factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
        monkeypatch.setattr(app.seed, "engine", spy)
        monkeypatch.setattr(app.seed, "async_session", factory)
        monkeypatch.setattr(app.seed.settings, "SEED_MEMBER_COUNT", 4)

        await seed()
        await seed()

        assert spy.disposed == 2
        async with factory() as db:
            assert (await db.execute(select(func.count(Team.id)))).scalar() == 2
            assert (await db.execute(select(func.count(Member.id)))).scalar() == 4
