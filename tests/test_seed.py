"""시드 스크립트 테스트.

Seed script tests — the sample data is inserted once and a second run is
skipped.
"""

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app import seed as seed_module
from app.models import Member, Team


@pytest.fixture
def seed_engine(monkeypatch, engine: AsyncEngine) -> AsyncEngine:
    """seed()가 테스트 엔진을 사용하도록 교체합니다."""
    monkeypatch.setattr(seed_module, "engine", engine)
    monkeypatch.setattr(
        seed_module,
        "async_session",
        async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False),
    )
    return engine


async def _count(engine: AsyncEngine, model) -> int:
    async with AsyncSession(engine) as session:
        return (await session.execute(select(func.count()).select_from(model))).scalar_one()


class TestSeed:
    async def test_seed_inserts_sample_data(self, seed_engine, capsys):
        await seed_module.seed()

        assert "Seeded: 4 members" in capsys.readouterr().out
        assert await _count(seed_engine, Team) == 2
        assert await _count(seed_engine, Member) == 4

    async def test_second_run_is_skipped(self, seed_engine, capsys):
        await seed_module.seed()
        capsys.readouterr()

        await seed_module.seed()

        assert "Already seeded. Skipping." in capsys.readouterr().out
        assert await _count(seed_engine, Team) == 2
        assert await _count(seed_engine, Member) == 4
