"""회원 SQLAlchemy ORM 모델 정의.

Member SQLAlchemy ORM model definition.

Tables:
    - members: 회원 (Member, optionally belonging to a team)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, Integer, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.models.team import Team


class Member(Base):
    """회원 모델.

    Member model. `username` is nullable: members without a name are
    allowed and sort after named members when ordering with NULLS LAST.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        username: 회원 이름 (Username, nullable)
        age: 나이 (Age)
        team_id: 소속 팀 FK (Team foreign key, nullable)
        created_at: 생성 일시 UTC (Creation timestamp)

    Relationships:
        team: 소속 팀 (Owning team, many-to-one)
    """

    __tablename__ = "members"

    # 회원 고유 식별자 — Member unique identifier (UUID v4, auto-generated)
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 회원 이름 — Username (nullable)
    username: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    # 나이 — Member age
    age: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    # 소속 팀 FK — Owning team (SET NULL: 팀 삭제 시 회원은 무소속)
    team_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("teams.id", ondelete="SET NULL"), nullable=True, index=True)
    # 생성 일시 — Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    team = relationship("Team", back_populates="members")

    def __init__(
        self,
        username: str | None = None,
        age: int = 0,
        team: Team | None = None,
        **kwargs,
    ) -> None:
        super().__init__(username=username, age=age, **kwargs)
        if team is not None:
            self.change_team(team)

    def change_team(self, team: Team) -> None:
        """소속 팀을 변경합니다 — 양방향 관계를 함께 갱신.

        Move the member to another team, keeping both sides of the
        relationship in sync (back_populates appends to team.members).
        """
        self.team = team

    def __repr__(self) -> str:
        return f"Member(id={self.id}, username={self.username!r}, age={self.age})"
