"""초기 데이터 시드 스크립트 — 팀과 회원 샘플 데이터 생성.

Seed script — Creates the sample teams and members.
Run this script once to bootstrap the database.

Usage:
    python -m app.seed

Creates:
    - 2개 팀: teamA, teamB (2 teams)
    - 4개 회원: member1(10, teamA), member2(20, teamA),
      member3(30, teamB), member4(40, teamB) (4 members)
"""

import asyncio

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import async_session, engine, Base
from app.models import Member, Team

# (이름, 나이, 팀 이름) — (username, age, team name)
SAMPLE_MEMBERS: list[tuple[str, int, str]] = [
    ("member1", 10, "teamA"),
    ("member2", 20, "teamA"),
    ("member3", 30, "teamB"),
    ("member4", 40, "teamB"),
]


async def load_sample_data(db: AsyncSession) -> dict[str, Member]:
    """샘플 팀/회원을 세션에 추가하고 flush합니다. 커밋은 호출자 몫.

    Add the sample teams and members to the session and flush.

    Returns:
        dict[str, Member]: 이름별 회원 (Members keyed by username)
    """
    teams: dict[str, Team] = {}
    for name in sorted({team_name for _, _, team_name in SAMPLE_MEMBERS}):
        teams[name] = Team(name)
        db.add(teams[name])

    members: dict[str, Member] = {}
    for username, age, team_name in SAMPLE_MEMBERS:
        members[username] = Member(username, age, teams[team_name])
        db.add(members[username])

    await db.flush()
    return members


async def seed() -> None:
    """데이터베이스를 샘플 데이터로 시드합니다.

    Create tables if they don't exist, then insert the sample data.
    Idempotent: 팀이 하나라도 있으면 건너뜁니다 (Skips if any team exists).
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        result = await db.execute(select(Team).limit(1))
        if result.scalar_one_or_none():
            print("Already seeded. Skipping.")
            return

        members = await load_sample_data(db)
        await db.commit()
        print(f"Seeded: {len(members)} members")


if __name__ == "__main__":
    asyncio.run(seed())
