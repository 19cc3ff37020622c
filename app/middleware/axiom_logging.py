"""Axiom API 로깅 미들웨어.

Axiom API logging middleware.
Captures request/response data and sends structured logs to Axiom.
Logs: API endpoint, method, query params, status code, duration, error reason.
Sensitive query parameters (password, token, secret) are automatically masked.
"""

import json
import re
import time
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from axiom_py import Client as AxiomClient

from app.config import settings

# 마스킹 대상 필드 패턴 — Keys to mask in logged parameters
_SENSITIVE_KEYS = re.compile(
    r"(password|passwd|secret|token|authorization|api_key|apikey|access_token|refresh_token|credential)",
    re.IGNORECASE,
)

# 로깅 제외 경로 — Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}


def _mask_dict(data: Any, depth: int = 0) -> Any:
    """민감 필드 자동 마스킹 — Recursively mask sensitive fields in dicts/lists."""
    if depth > 5:
        return "..."
    if isinstance(data, dict):
        return {
            k: "***" if _SENSITIVE_KEYS.search(k) else _mask_dict(v, depth + 1)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [_mask_dict(item, depth + 1) for item in data[:20]]
    return data


def _query_params(request: Request) -> dict[str, Any] | None:
    """쿼리 파라미터 추출 — 반복 키(sort 등)는 리스트로 보존.

    Collect query parameters; a repeated key keeps every value as a list.
    """
    params: dict[str, Any] = {}
    for key in request.query_params.keys():
        values = request.query_params.getlist(key)
        params[key] = values[0] if len(values) == 1 else values
    return params or None


def _error_detail(body: bytes) -> str:
    """에러 응답 body에서 사유 추출 — Extract the error reason from a response body."""
    try:
        data = json.loads(body)
        detail = data.get("detail", data) if isinstance(data, dict) else data
        text = detail if isinstance(detail, str) else json.dumps(detail, ensure_ascii=False)
    except (json.JSONDecodeError, UnicodeDecodeError):
        text = body.decode("utf-8", errors="replace")
    return text[:500] + "..." if len(text) > 500 else text


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청/응답을 Axiom에 로깅하는 미들웨어.

    Middleware that logs API requests and responses to Axiom.
    Captures: method, path, query params, status code, duration, error detail.
    Passes requests through untouched when no client is configured.
    """

    def __init__(self, app: Any, client: Any | None = None, dataset: str | None = None) -> None:
        super().__init__(app)
        self._client: Any | None = client
        self._dataset: str = dataset if dataset is not None else settings.AXIOM_DATASET

        if self._client is None and settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # 제외 경로 스킵 — Skip excluded paths
        if request.url.path in _SKIP_PATHS:
            return await call_next(request)

        # Axiom 미설정시 패스스루 — Pass through if Axiom not configured
        if not self._client:
            return await call_next(request)

        start_time = time.time()

        method = request.method
        path = request.url.path
        query_params = _query_params(request)

        error_detail: str | None = None
        status_code: int = 500
        try:
            response = await call_next(request)
            status_code = response.status_code

            # 에러 응답시 body에서 사유 추출 — Extract error detail from error responses
            if status_code >= 400:
                resp_body = b""
                async for chunk in response.body_iterator:
                    resp_body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")
                error_detail = _error_detail(resp_body)

                # 소비한 body를 다시 응답으로 반환 — Re-wrap consumed body
                response = Response(
                    content=resp_body,
                    status_code=status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
        except Exception as exc:
            error_detail = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            duration_ms = round((time.time() - start_time) * 1000, 2)

            # Axiom 로그 이벤트 구성 — Build Axiom log event
            log_event: dict[str, Any] = {
                "method": method,
                "path": path,
                "status_code": status_code,
                "duration_ms": duration_ms,
            }
            if query_params:
                log_event["query_params"] = _mask_dict(query_params)
            if error_detail:
                log_event["error"] = error_detail

            try:
                self._client.ingest_events(self._dataset, [log_event])
            except Exception:
                pass  # 로깅 실패가 요청 처리에 영향주지 않도록 — Never break request on log failure

        return response
