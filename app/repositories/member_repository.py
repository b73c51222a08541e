"""회원 레포지토리 — 회원 조회, 조인, 프로젝션, 동적 검색, 벌크 연산.

Member Repository — Typed SQLAlchemy queries over members and teams.
Extends BaseRepository with lookups, ordering, paging, aggregation,
joins, sub-queries, DTO projections, dynamic search through the
predicate composer, and bulk update/delete statements.
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import Select, delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased, contains_eager, selectinload

from app.models.member import Member
from app.models.team import Team
from app.query import predicates
from app.repositories.base import BaseRepository
from app.schemas.member import (
    MemberAggregate,
    MemberDto,
    MemberSearchCondition,
    MemberTeamDto,
    TeamAgeStats,
)
from app.utils.pagination import paginate


class MemberRepository(BaseRepository[Member]):
    """회원 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the members table.
    """

    def __init__(self) -> None:
        super().__init__(Member)

    # ------------------------------------------------------------------
    # 단건 조회 — Lookups
    # ------------------------------------------------------------------
    async def find_by_username(
        self,
        db: AsyncSession,
        username: str,
    ) -> Member | None:
        """이름으로 회원을 조회합니다.

        Retrieve a member by username. The team relationship is not loaded.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            username: 회원 이름 (Username)

        Returns:
            Member | None: 조회된 회원 또는 None (Found member or None)
        """
        query: Select = select(Member).where(Member.username == username)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def find_by_username_and_age(
        self,
        db: AsyncSession,
        username: str,
        age: int,
    ) -> Member | None:
        """이름과 나이가 모두 일치하는 회원을 조회합니다."""
        query: Select = select(Member).where(Member.username == username, Member.age == age)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def get_detail(
        self,
        db: AsyncSession,
        member_id: UUID,
    ) -> Member | None:
        """회원 상세 정보를 팀과 함께 조회합니다.

        Retrieve member detail with team eagerly loaded.
        """
        query: Select = (
            select(Member)
            .options(selectinload(Member.team))
            .where(Member.id == member_id)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def find_with_team(
        self,
        db: AsyncSession,
        username: str,
    ) -> Member | None:
        """페치 조인으로 회원과 팀을 한 번에 조회합니다.

        Fetch join: members.team is populated from the same SELECT.
        """
        query: Select = (
            select(Member)
            .join(Member.team)
            .options(contains_eager(Member.team))
            .where(Member.username == username)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()

    # ------------------------------------------------------------------
    # 정렬/페이징 — Ordering and paging
    # ------------------------------------------------------------------
    async def find_all_sorted(
        self,
        db: AsyncSession,
        age: int,
    ) -> list[Member]:
        """나이로 필터 후 나이 내림차순, 이름 오름차순(NULL은 마지막) 정렬.

        Members of the given age ordered by age desc, username asc
        with NULL usernames last.
        """
        query: Select = (
            select(Member)
            .where(Member.age == age)
            .order_by(Member.age.desc(), Member.username.asc().nulls_last())
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def find_page(
        self,
        db: AsyncSession,
        offset: int,
        limit: int,
    ) -> list[Member]:
        """이름 내림차순으로 offset/limit 페이지를 조회합니다."""
        query: Select = (
            select(Member)
            .order_by(Member.username.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def find_page_with_total(
        self,
        db: AsyncSession,
        page: int,
        per_page: int,
    ) -> tuple[Sequence[Member], int]:
        """페이지 항목과 전체 개수를 별도 쿼리로 조회합니다.

        Page of members (username desc) plus a separate COUNT query.
        """
        query: Select = select(Member).order_by(Member.username.desc())
        return await paginate(db, query, page, per_page)

    # ------------------------------------------------------------------
    # 집계 — Aggregation
    # ------------------------------------------------------------------
    async def aggregate(self, db: AsyncSession) -> MemberAggregate:
        """회원 수와 나이 합계/평균/최대/최소를 집계합니다."""
        query: Select = select(
            func.count(Member.id),
            func.sum(Member.age),
            func.avg(Member.age),
            func.max(Member.age),
            func.min(Member.age),
        )
        count, age_sum, age_avg, age_max, age_min = (await db.execute(query)).one()
        return MemberAggregate(
            count=count,
            age_sum=age_sum,
            age_avg=age_avg,
            age_max=age_max,
            age_min=age_min,
        )

    async def average_age_by_team(self, db: AsyncSession) -> list[TeamAgeStats]:
        """팀 이름으로 그룹화한 평균 나이를 팀 이름 순으로 반환합니다."""
        query: Select = (
            select(Team.name, func.avg(Member.age))
            .select_from(Member)
            .join(Member.team)
            .group_by(Team.name)
            .order_by(Team.name)
        )
        result = await db.execute(query)
        return [TeamAgeStats(team_name=name, age_avg=avg) for name, avg in result.all()]

    # ------------------------------------------------------------------
    # 조인 — Joins
    # ------------------------------------------------------------------
    async def find_by_team_name(
        self,
        db: AsyncSession,
        team_name: str,
    ) -> list[Member]:
        """팀과 내부 조인하여 팀 이름으로 회원을 조회합니다."""
        query: Select = (
            select(Member)
            .join(Member.team)
            .where(Team.name == team_name)
            .order_by(Member.username)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def find_by_team_name_implicit(
        self,
        db: AsyncSession,
        team_name: str,
    ) -> list[Member]:
        """명시적 조인 없이 관계 경로(has)로 팀 이름을 필터링합니다.

        Path-style filter on the team relationship, rendered as EXISTS.
        """
        query: Select = (
            select(Member)
            .where(Member.team.has(Team.name == team_name))
            .order_by(Member.username)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def find_theta_join(self, db: AsyncSession) -> list[Member]:
        """연관관계 없는 세타 조인 — 회원 이름이 팀 이름과 같은 회원.

        Join on unrelated columns: members whose username equals a team name.
        """
        query: Select = (
            select(Member)
            .where(Member.username == Team.name)
            .order_by(Member.username)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def find_with_team_filtered_on(
        self,
        db: AsyncSession,
        team_name: str,
    ) -> list[tuple[Member, Team | None]]:
        """ON 절에서 팀을 필터링하는 외부 조인.

        Left outer join with the team filter in the ON clause: every member
        is returned, paired with its team only when the team name matches.
        """
        query: Select = (
            select(Member, Team)
            .outerjoin(Member.team.and_(Team.name == team_name))
            .order_by(Member.username)
        )
        result = await db.execute(query)
        return [(member, team) for member, team in result.all()]

    # ------------------------------------------------------------------
    # 서브쿼리 — Sub-queries
    # ------------------------------------------------------------------
    async def find_oldest(self, db: AsyncSession) -> list[Member]:
        """나이가 최대인 회원 (서브쿼리)."""
        member_sub = aliased(Member, name="member_sub")
        query: Select = select(Member).where(
            Member.age == select(func.max(member_sub.age)).scalar_subquery()
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def find_at_least_average_age(self, db: AsyncSession) -> list[Member]:
        """나이가 평균 이상인 회원 (서브쿼리)."""
        member_sub = aliased(Member, name="member_sub")
        query: Select = (
            select(Member)
            .where(Member.age >= select(func.avg(member_sub.age)).scalar_subquery())
            .order_by(Member.age)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    # ------------------------------------------------------------------
    # DTO 프로젝션 — DTO projections
    # ------------------------------------------------------------------
    async def find_member_dtos(self, db: AsyncSession) -> list[MemberDto]:
        """이름/나이 컬럼만 조회하여 MemberDto로 변환합니다."""
        query: Select = select(Member.username, Member.age).order_by(Member.username)
        result = await db.execute(query)
        return [MemberDto(username=row.username, age=row.age) for row in result.all()]

    async def find_member_dtos_with_max_age(self, db: AsyncSession) -> list[MemberDto]:
        """이름과 전체 최대 나이(서브쿼리, 별칭 age)를 MemberDto로 조회합니다.

        The scalar sub-query is labelled "age" so it lands on MemberDto.age.
        """
        member_sub = aliased(Member, name="member_sub")
        max_age = select(func.max(member_sub.age)).scalar_subquery().label("age")
        query: Select = select(Member.username, max_age).order_by(Member.username)
        result = await db.execute(query)
        return [MemberDto(**row._mapping) for row in result.all()]

    # ------------------------------------------------------------------
    # 동적 검색 — Dynamic search
    # ------------------------------------------------------------------
    async def search_member(
        self,
        db: AsyncSession,
        username: str | None = None,
        age: int | None = None,
    ) -> list[Member]:
        """이름/나이 선택 조건으로 회원을 검색합니다. None인 조건은 무시.

        Search members by optional username and age.
        """
        predicate = predicates.all_of(
            predicates.username_eq(username),
            predicates.age_eq(age),
        )
        query: Select = predicates.apply(select(Member), predicate).order_by(Member.username)
        result = await db.execute(query)
        return list(result.scalars().all())

    def _search_query(self, condition: MemberSearchCondition) -> Select:
        """회원+팀 프로젝션 검색 쿼리 — 팀은 외부 조인."""
        query: Select = (
            select(
                Member.id.label("member_id"),
                Member.username,
                Member.age,
                Team.id.label("team_id"),
                Team.name.label("team_name"),
            )
            .select_from(Member)
            .outerjoin(Member.team)
        )
        return predicates.apply(query, predicates.compose(condition)).order_by(
            Member.username
        )

    async def search(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
    ) -> list[MemberTeamDto]:
        """검색 조건으로 회원+팀을 조회합니다.

        Search members with their team. Absent condition fields add no
        filter; an all-absent condition returns every member.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            condition: 회원 검색 조건 (Member search condition)

        Returns:
            list[MemberTeamDto]: 검색 결과 (Matching member/team rows)
        """
        result = await db.execute(self._search_query(condition))
        return [MemberTeamDto(**row._mapping) for row in result.all()]

    async def search_page(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
        page: int = 1,
        per_page: int = 20,
    ) -> tuple[list[MemberTeamDto], int]:
        """검색 결과의 한 페이지와 전체 개수를 조회합니다."""
        rows, total = await paginate(
            db, self._search_query(condition), page, per_page, scalars=False
        )
        return [MemberTeamDto(**row._mapping) for row in rows], total

    # ------------------------------------------------------------------
    # 벌크 연산 — Bulk statements
    # ------------------------------------------------------------------
    async def bulk_rename_younger_than(
        self,
        db: AsyncSession,
        age: int,
        username: str,
    ) -> int:
        """나이가 기준 미만인 회원의 이름을 일괄 변경합니다.

        Returns:
            int: 변경된 행 수 (Number of updated rows)
        """
        result = await db.execute(
            update(Member).where(Member.age < age).values(username=username)
        )
        return result.rowcount

    async def bulk_add_age(self, db: AsyncSession, amount: int) -> int:
        """모든 회원의 나이에 amount를 더합니다."""
        result = await db.execute(update(Member).values(age=Member.age + amount))
        return result.rowcount

    async def bulk_delete_older_than(self, db: AsyncSession, age: int) -> int:
        """나이가 기준 초과인 회원을 일괄 삭제합니다."""
        result = await db.execute(delete(Member).where(Member.age > age))
        return result.rowcount


# 싱글턴 인스턴스 — Singleton instance
member_repository: MemberRepository = MemberRepository()
