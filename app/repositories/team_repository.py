"""팀 레포지토리 — 팀 조회 쿼리.

Team Repository — Database queries for the teams table.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.team import Team
from app.repositories.base import BaseRepository


class TeamRepository(BaseRepository[Team]):
    """팀 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Team)

    async def find_by_name(
        self,
        db: AsyncSession,
        name: str,
    ) -> Team | None:
        """이름으로 팀을 조회합니다."""
        query: Select = select(Team).where(Team.name == name)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def list_all(self, db: AsyncSession) -> list[Team]:
        """모든 팀을 이름 순으로 조회합니다."""
        return list(await self.get_all(db, order_by=Team.name))


# 싱글턴 인스턴스 — Singleton instance
team_repository: TeamRepository = TeamRepository()
