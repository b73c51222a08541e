"""회원 서비스 — 회원 검색/조회 비즈니스 로직.

Member Service — Business logic for member search and lookup.
Validates paging input, delegates queries to the repositories,
and converts ORM rows into response schemas.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.models.member import Member
from app.models.team import Team
from app.repositories.member_repository import member_repository
from app.repositories.team_repository import team_repository
from app.schemas.member import (
    MemberResponse,
    MemberSearchCondition,
    TeamAgeStats,
    TeamResponse,
)
from app.utils.exceptions import BadRequestError, NotFoundError
from app.utils.pagination import Page


class MemberService:
    """회원 관련 비즈니스 로직을 처리하는 서비스.

    Service handling member search and detail retrieval.
    """

    def _team_to_response(self, team: Team) -> TeamResponse:
        return TeamResponse(id=str(team.id), name=team.name)

    def _to_response(self, member: Member) -> MemberResponse:
        """회원 모델을 응답 스키마로 변환합니다 (팀은 미리 로드되어 있어야 함).

        Convert a Member with its team already loaded to a MemberResponse.
        """
        return MemberResponse(
            id=str(member.id),
            username=member.username,
            age=member.age,
            team=self._team_to_response(member.team) if member.team is not None else None,
            created_at=member.created_at,
        )

    async def search_members(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
        page: int = 1,
        per_page: int | None = None,
    ) -> Page:
        """검색 조건으로 회원+팀 목록을 페이지 단위로 조회합니다.

        Search members with their team, one page at a time.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            condition: 회원 검색 조건 (Search condition; absent fields add no filter)
            page: 페이지 번호, 1부터 시작 (Page number, 1-based)
            per_page: 페이지당 항목 수, None이면 기본값 (Items per page, default if None)

        Returns:
            Page: MemberTeamDto 페이지 (Page of MemberTeamDto items)

        Raises:
            BadRequestError: 페이지 번호/크기가 범위를 벗어날 때
                             (Page number or size out of range)
        """
        if per_page is None:
            per_page = settings.DEFAULT_PAGE_SIZE
        if page < 1:
            raise BadRequestError("page must be >= 1")
        if per_page < 1 or per_page > settings.MAX_PAGE_SIZE:
            raise BadRequestError(f"per_page must be between 1 and {settings.MAX_PAGE_SIZE}")

        items, total = await member_repository.search_page(db, condition, page, per_page)
        return Page.build(items, total, page, per_page)

    async def get_member(
        self,
        db: AsyncSession,
        member_id: UUID,
    ) -> MemberResponse:
        """회원 상세 정보를 팀과 함께 조회합니다.

        Raises:
            NotFoundError: 회원을 찾을 수 없을 때 (Member not found)
        """
        member: Member | None = await member_repository.get_detail(db, member_id)
        if member is None:
            raise NotFoundError("Member not found")
        return self._to_response(member)

    async def list_teams(self, db: AsyncSession) -> list[TeamResponse]:
        """팀 목록을 이름 순으로 조회합니다."""
        teams: list[Team] = await team_repository.list_all(db)
        return [self._team_to_response(t) for t in teams]

    async def team_stats(self, db: AsyncSession) -> list[TeamAgeStats]:
        """팀별 평균 나이를 조회합니다."""
        return await member_repository.average_age_by_team(db)


# 싱글턴 인스턴스 — Singleton instance
member_service: MemberService = MemberService()
