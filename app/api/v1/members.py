"""회원 라우터 — 동적 검색 및 상세 조회 엔드포인트.

Member Router — Dynamic search and detail endpoints.
Query parameters that are not supplied add no filter to the search.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.member import MemberResponse, MemberSearchCondition
from app.services.member_service import member_service
from app.utils.pagination import Page

router: APIRouter = APIRouter()


@router.get("", response_model=Page)
async def search_members(
    db: Annotated[AsyncSession, Depends(get_db)],
    username: Annotated[str | None, Query(description="회원 이름 일치")] = None,
    team_name: Annotated[str | None, Query(description="팀 이름 일치")] = None,
    age_goe: Annotated[int | None, Query(description="최소 나이 (이상)")] = None,
    age_loe: Annotated[int | None, Query(description="최대 나이 (이하)")] = None,
    page: int = 1,
    per_page: int | None = None,
) -> Page:
    """회원을 동적 조건으로 검색합니다.

    Search members with their team. Every filter is optional.
    """
    condition = MemberSearchCondition(
        username=username,
        age_goe=age_goe,
        age_loe=age_loe,
        team_name=team_name,
    )
    return await member_service.search_members(db, condition, page=page, per_page=per_page)


@router.get("/{member_id}", response_model=MemberResponse)
async def get_member(
    member_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MemberResponse:
    """회원 상세 정보를 조회합니다 (팀 포함)."""
    return await member_service.get_member(db, member_id)
