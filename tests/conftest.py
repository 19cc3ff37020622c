"""테스트 인프라 — 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — In-memory SQLite (aiosqlite) engine, session, and httpx
client fixtures. Each test gets a fresh database, so no server is needed and
no cleanup between tests is required.
"""

from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models import Member, Team

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진 — 단일 커넥션을 공유하는 인메모리 DB."""
    eng = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def teams(db: AsyncSession) -> dict[str, Team]:
    """teamA, teamB를 생성합니다."""
    team_a = Team("teamA")
    team_b = Team("teamB")
    db.add_all([team_a, team_b])
    await db.flush()
    return {"teamA": team_a, "teamB": team_b}


@pytest_asyncio.fixture
async def members(db: AsyncSession, teams: dict[str, Team]) -> list[Member]:
    """member1~4를 생성합니다 (10/20 → teamA, 30/40 → teamB)."""
    result = [
        Member("member1", 10, teams["teamA"]),
        Member("member2", 20, teams["teamA"]),
        Member("member3", 30, teams["teamB"]),
        Member("member4", 40, teams["teamB"]),
    ]
    db.add_all(result)
    await db.flush()
    return result
