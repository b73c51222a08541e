"""v1 API 라우터 패키지 — 회원/팀 조회 엔드포인트 통합.

v1 API Router package — Aggregates the member and team endpoints
into a single router for inclusion in the FastAPI application.

Included routers:
    - members: 회원 동적 검색 및 상세 (Dynamic member search and detail)
    - teams: 팀 목록 및 팀별 통계 (Team list and per-team statistics)
"""

from fastapi import APIRouter

from app.api.v1.members import router as members_router
from app.api.v1.teams import router as teams_router

api_router: APIRouter = APIRouter()

api_router.include_router(members_router, prefix="/members", tags=["Members"])
api_router.include_router(teams_router, prefix="/teams", tags=["Teams"])
