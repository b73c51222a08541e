"""팀 라우터 — 팀 목록 및 팀별 평균 나이.

Team Router — Team list and per-team age statistics.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.member import TeamAgeStats, TeamResponse
from app.services.member_service import member_service

router: APIRouter = APIRouter()


@router.get("", response_model=list[TeamResponse])
async def list_teams(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[TeamResponse]:
    """팀 목록을 이름 순으로 조회합니다."""
    return await member_service.list_teams(db)


@router.get("/stats", response_model=list[TeamAgeStats])
async def team_stats(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[TeamAgeStats]:
    """팀별 평균 나이를 조회합니다."""
    return await member_service.team_stats(db)
