"""Axiom 로깅 미들웨어 테스트.

Axiom logging middleware tests — uses a fake Axiom client to check the
logged events (search filters, paging, masking, error detail).
"""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.config import settings
from app.middleware import axiom_logging
from app.middleware.axiom_logging import AxiomLoggingMiddleware
from app.utils.exceptions import NotFoundError


class FakeAxiomClient:
    """ingest_events 호출을 기록하는 가짜 Axiom 클라이언트."""

    instances: list["FakeAxiomClient"] = []

    def __init__(self, token: str) -> None:
        self.token = token
        self.ingested: list[tuple[str, dict]] = []
        FakeAxiomClient.instances.append(self)

    def ingest_events(self, dataset: str, events: list[dict]) -> None:
        self.ingested.extend((dataset, e) for e in events)


@pytest.fixture
def axiom(monkeypatch) -> type[FakeAxiomClient]:
    FakeAxiomClient.instances = []
    monkeypatch.setattr(axiom_logging, "AxiomClient", FakeAxiomClient)
    monkeypatch.setattr(settings, "AXIOM_API_TOKEN", "test-token")
    monkeypatch.setattr(settings, "AXIOM_DATASET", "api-logs")
    return FakeAxiomClient


def make_app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(AxiomLoggingMiddleware)

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok"}

    @app.get("/members")
    async def members() -> dict:
        return {"items": []}

    @app.get("/members/missing")
    async def missing() -> dict:
        raise NotFoundError("Member not found")

    return app


async def _get(app: FastAPI, path: str, **kwargs):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        return await ac.get(path, **kwargs)


class TestAxiomLogging:
    async def test_logs_filters_and_paging(self, axiom):
        res = await _get(
            make_app(),
            "/members",
            params={"team_name": "teamB", "page": 2, "api_key": "abc"},
        )
        assert res.status_code == 200

        dataset, event = axiom.instances[0].ingested[0]
        assert dataset == "api-logs"
        assert event["method"] == "GET"
        assert event["path"] == "/members"
        assert event["status_code"] == 200
        assert event["search_filters"] == {"team_name": "teamB", "api_key": "***"}
        assert event["paging"] == {"page": "2"}
        assert "error" not in event
        assert event["duration_ms"] >= 0

    async def test_logs_error_detail_and_keeps_response(self, axiom):
        res = await _get(make_app(), "/members/missing")

        assert res.status_code == 404
        assert res.json() == {"detail": "Member not found"}
        _, event = axiom.instances[0].ingested[0]
        assert event["status_code"] == 404
        assert event["error"] == "Member not found"

    async def test_skips_health(self, axiom):
        res = await _get(make_app(), "/health")

        assert res.status_code == 200
        assert axiom.instances[0].ingested == []

    async def test_pass_through_when_not_configured(self, monkeypatch):
        monkeypatch.setattr(settings, "AXIOM_API_TOKEN", "")
        res = await _get(make_app(), "/members")
        assert res.status_code == 200
