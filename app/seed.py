"""로컬 초기 데이터 시드 스크립트 — 팀 2개와 회원 N명 생성.

Seed script — Creates two teams and SEED_MEMBER_COUNT members for local use.
Run this once against a development database to try the search endpoints.

Usage:
    python -m app.seed

Creates:
    - 2개 팀: teamA, teamB (2 teams)
    - N명 회원: member0..member{N-1}, 나이 = i, 짝수는 teamA / 홀수는 teamB
      (Members with age i; even i → teamA, odd i → teamB)
"""

import asyncio

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import async_session, engine, Base
from app.models import Member, Team


async def seed_members(db: AsyncSession, count: int) -> tuple[Team, Team]:
    """팀 2개와 회원 count명을 세션에 추가합니다 (커밋하지 않음).

    Add teamA, teamB and ``count`` members to the session and flush.
    The caller owns the transaction.
    """
    team_a: Team = Team("teamA")
    team_b: Team = Team("teamB")
    db.add_all([team_a, team_b])

    for i in range(count):
        db.add(Member(f"member{i}", i, team_a if i % 2 == 0 else team_b))

    await db.flush()
    return team_a, team_b


async def seed() -> None:
    """데이터베이스를 초기 데이터로 시드합니다.

    Seed the database with initial data.
    Creates tables if they don't exist, then inserts the teams and members.

    Idempotent: 이미 시드된 경우 건너뜁니다 (Skips if already seeded).
    """
    # 테이블 생성 — DDL 실행 (Create all tables from ORM metadata)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    try:
        async with async_session() as db:
            # 팀이 하나라도 있으면 건너뜀 (Skip when any team already exists)
            result = await db.execute(select(Team).limit(1))
            if result.scalar_one_or_none():
                print("Already seeded. Skipping.")
                return

            await seed_members(db, settings.SEED_MEMBER_COUNT)
            await db.commit()
            print(f"Seeded: 2 teams, {settings.SEED_MEMBER_COUNT} members")
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(seed())
