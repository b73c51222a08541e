"""회원/팀 Pydantic 요청/응답 스키마 정의.

Member and Team Pydantic request/response schema definitions.
Covers the dynamic search condition and the DTO projections produced
by member queries.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


# === 검색 조건 (Search condition) ===

class MemberSearchCondition(BaseModel):
    """회원 동적 검색 조건.

    Optional criteria for a single member search. Every field is
    independently optional; an absent field contributes no filter.
    Field declaration order is the order predicates are combined in.

    Attributes:
        username: 이름 일치 (Username equals)
        age_goe: 최소 나이 (Age greater than or equal)
        age_loe: 최대 나이 (Age less than or equal)
        team_name: 팀 이름 일치 (Team name equals)
    """

    model_config = ConfigDict(frozen=True)

    username: str | None = None
    age_goe: int | None = None
    age_loe: int | None = None
    team_name: str | None = None


# === 프로젝션 DTO (Projection DTOs) ===

class MemberDto(BaseModel):
    """회원 이름/나이 프로젝션.

    Username/age projection of a member row.
    """

    username: str | None = None
    age: int | None = None


class MemberTeamDto(BaseModel):
    """회원 + 팀 프로젝션 — 검색 결과 행.

    Member joined with its team. team_id/team_name are None for members
    without a team (left outer join).
    """

    member_id: UUID
    username: str | None = None
    age: int
    team_id: UUID | None = None
    team_name: str | None = None


class MemberAggregate(BaseModel):
    """회원 나이 집계 결과 (count/sum/avg/max/min)."""

    count: int
    age_sum: int | None = None
    age_avg: float | None = None
    age_max: int | None = None
    age_min: int | None = None


class TeamAgeStats(BaseModel):
    """팀별 평균 나이."""

    team_name: str
    age_avg: float


# === 응답 (Responses) ===

class TeamResponse(BaseModel):
    """팀 응답 스키마.

    Team response schema.

    Attributes:
        id: 팀 UUID (Team unique identifier)
        name: 팀 이름 (Team name)
    """

    id: str  # 팀 UUID 문자열 (Team UUID as string)
    name: str  # 팀 이름 (Team name)


class MemberResponse(BaseModel):
    """회원 상세 응답 스키마.

    Member detail response schema.

    Attributes:
        id: 회원 UUID (Member unique identifier)
        username: 회원 이름 (Username, nullable)
        age: 나이 (Age)
        team: 소속 팀 (Owning team, nullable)
        created_at: 생성 일시 (Creation timestamp)
    """

    id: str  # 회원 UUID 문자열 (Member UUID as string)
    username: str | None = None  # 회원 이름 (Username)
    age: int  # 나이 (Age)
    team: TeamResponse | None = None  # 소속 팀 (Team, None if unassigned)
    created_at: datetime | None = None  # 생성 일시 UTC (Creation timestamp)
