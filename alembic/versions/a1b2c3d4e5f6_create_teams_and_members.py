"""create_teams_and_members

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-19 09:00:00.000000

팀(teams) 및 회원(members) 테이블 생성.
Create teams and members tables.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID


# revision identifiers, used by Alembic.
revision: str = 'a1b2c3d4e5f6'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # teams — 회원이 소속되는 팀
    op.create_table(
        'teams',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    # members — 회원 (username nullable, 팀 삭제 시 무소속)
    # Members (nullable username; team deletion leaves members without a team)
    op.create_table(
        'members',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('username', sa.String(255), nullable=True),
        sa.Column('age', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('team_id', UUID(as_uuid=True), sa.ForeignKey('teams.id', ondelete='SET NULL'), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    # 인덱스 — 검색 조건 컬럼 (Search condition columns)
    op.create_index('ix_members_username', 'members', ['username'])
    op.create_index('ix_members_team_id', 'members', ['team_id'])
    op.create_index('ix_teams_name', 'teams', ['name'])


def downgrade() -> None:
    # 인덱스는 테이블과 함께 삭제됨 (Indexes are dropped with the tables)
    op.drop_table('members')
    op.drop_table('teams')
