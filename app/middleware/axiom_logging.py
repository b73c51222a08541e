"""Axiom API 로깅 미들웨어.

Axiom API logging middleware.
Sends one structured event per API request to Axiom: method, path,
status code, duration, the search filters that were supplied, and the
error detail for failed requests. Sensitive keys are masked.
"""

import json
import re
import time
from typing import Any

from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.config import settings

# 마스킹 대상 키 패턴 — Keys to mask in logged parameters
_SENSITIVE_KEYS = re.compile(
    r"(password|secret|token|authorization|api_key|apikey|credential)",
    re.IGNORECASE,
)

# 로깅 제외 경로 — Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}

# 검색 필터가 아닌 쿼리 파라미터 — Query params that are paging, not filters
_PAGING_PARAMS = {"page", "per_page"}

_MAX_DETAIL_LEN = 500


def _mask(params: dict[str, Any]) -> dict[str, Any]:
    """민감 키 마스킹 — Mask values of sensitive keys."""
    return {k: "***" if _SENSITIVE_KEYS.search(k) else v for k, v in params.items()}


def _split_query_params(request: Request) -> tuple[dict[str, Any], dict[str, Any]]:
    """쿼리 파라미터를 (검색 필터, 페이징)으로 분리합니다."""
    filters: dict[str, Any] = {}
    paging: dict[str, Any] = {}
    for key, value in request.query_params.items():
        (paging if key in _PAGING_PARAMS else filters)[key] = value
    return _mask(filters), paging


async def _read_error_detail(response: Response) -> tuple[Response, str]:
    """오류 응답 본문에서 detail을 추출하고, 소비한 본문으로 응답을 재구성합니다.

    Extract "detail" from an error response. The body iterator is consumed,
    so a new Response carrying the same body is returned.
    """
    body = b""
    async for chunk in response.body_iterator:
        body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")

    try:
        detail = json.loads(body).get("detail", "")
        detail = detail if isinstance(detail, str) else json.dumps(detail, default=str)
    except (json.JSONDecodeError, UnicodeDecodeError, AttributeError):
        detail = body.decode("utf-8", errors="replace")

    rebuilt = Response(
        content=body,
        status_code=response.status_code,
        headers=dict(response.headers),
        media_type=response.media_type,
    )
    return rebuilt, detail[:_MAX_DETAIL_LEN]


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청을 Axiom에 로깅하는 미들웨어.

    Middleware that logs every API request to Axiom. Passes requests
    through untouched when Axiom is not configured.
    """

    def __init__(self, app: Any) -> None:
        super().__init__(app)
        self._client: AxiomClient | None = None
        self._dataset: str = settings.AXIOM_DATASET

        if settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if self._client is None or request.url.path in _SKIP_PATHS:
            return await call_next(request)

        start_time = time.time()
        filters, paging = _split_query_params(request)
        event: dict[str, Any] = {
            "method": request.method,
            "path": request.url.path,
            "status_code": 500,
        }
        if filters:
            event["search_filters"] = filters
        if paging:
            event["paging"] = paging

        try:
            response = await call_next(request)
            event["status_code"] = response.status_code
            if response.status_code >= 400:
                response, event["error"] = await _read_error_detail(response)
        except Exception as exc:
            event["error"] = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            event["duration_ms"] = round((time.time() - start_time) * 1000, 2)
            try:
                self._client.ingest_events(self._dataset, [event])
            except Exception:
                pass  # 로깅 실패가 요청 처리에 영향주지 않도록 — Never break a request on log failure

        return response
