"""팀 SQLAlchemy ORM 모델 정의.

Team SQLAlchemy ORM model definition.

Tables:
    - teams: 회원이 소속되는 팀 (Team that members belong to)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Team(Base):
    """팀 모델.

    Team model — groups members. Deleting a team leaves its members
    without a team (members.team_id SET NULL).

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        name: 팀 이름 (Team name)
        created_at: 생성 일시 UTC (Creation timestamp in UTC)

    Relationships:
        members: 소속 회원 목록 (Members of this team)
    """

    __tablename__ = "teams"

    # 팀 고유 식별자 — Team unique identifier (UUID v4, auto-generated)
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 팀 이름 — Team display name
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    # 생성 일시 — Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    members = relationship("Member", back_populates="team")

    def __init__(self, name: str, **kwargs) -> None:
        super().__init__(name=name, **kwargs)

    def __repr__(self) -> str:
        return f"Team(id={self.id}, name={self.name!r})"
