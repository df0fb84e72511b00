"""Axiom API 로깅 미들웨어.

Axiom API logging middleware.
Captures request/response data and sends one structured event per request to
Axiom: endpoint, method, space, path/query params, request body, status code,
duration and error reason. Sensitive fields are masked; nothing is sent when
no Axiom token is configured.
"""

import json
import re
import time
from typing import Any

from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from peoplemover.config import settings

# 마스킹 대상 필드 패턴 — Fields to mask in request bodies and query params
_SENSITIVE_KEYS = re.compile(
    r"(password|secret|token|authorization|api_key|apikey|credential)",
    re.IGNORECASE,
)

# 로깅 제외 경로 — Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}

# 에러 사유 최대 길이 — Max length of the logged error reason
_MAX_ERROR_LEN = 500


def _mask(data: Any, depth: int = 0) -> Any:
    """민감 필드 자동 마스킹 — Recursively mask sensitive fields in dicts/lists."""
    if depth > 5:
        return "..."
    if isinstance(data, dict):
        return {
            k: "***" if _SENSITIVE_KEYS.search(str(k)) else _mask(v, depth + 1)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [_mask(item, depth + 1) for item in data[:20]]
    if isinstance(data, str) and len(data) > 2000:
        return data[:2000] + "...(truncated)"
    return data


def _error_reason(body: bytes) -> str:
    """에러 응답 본문에서 사유 추출 — FastAPI ``detail`` or the raw body."""
    try:
        data = json.loads(body)
        reason = data.get("detail", data) if isinstance(data, dict) else data
    except (json.JSONDecodeError, UnicodeDecodeError):
        reason = body.decode("utf-8", errors="replace")
    if not isinstance(reason, str):
        reason = json.dumps(reason, default=str)
    return reason[:_MAX_ERROR_LEN]


async def _read_json_body(request: Request) -> Any:
    """요청 본문을 JSON으로 읽고 마스킹 — Masked JSON body, or a marker."""
    try:
        body_bytes = await request.body()
        if not body_bytes:
            return None
        return _mask(json.loads(body_bytes))
    except (json.JSONDecodeError, UnicodeDecodeError):
        return "(non-json body)"


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청/응답을 Axiom에 로깅하는 미들웨어.

    Middleware that logs every API request and response to Axiom.
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
        # 제외 경로 또는 Axiom 미설정 — Skipped path or Axiom not configured
        if request.url.path in _SKIP_PATHS or self._client is None:
            return await call_next(request)

        start_time = time.time()
        request_body: Any = None
        if request.method in ("POST", "PUT", "PATCH"):
            request_body = await _read_json_body(request)

        error_detail: str | None = None
        status_code: int = 500
        try:
            response = await call_next(request)
            status_code = response.status_code

            # 에러 응답은 body를 소비해 사유를 기록한 뒤 다시 감쌈
            # Error responses: consume the body for the reason, then re-wrap it
            if status_code >= 400:
                resp_body = b""
                async for chunk in response.body_iterator:
                    resp_body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")
                error_detail = _error_reason(resp_body)
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
            self._send(request, status_code, start_time, request_body, error_detail)

        return response

    def _send(
        self,
        request: Request,
        status_code: int,
        start_time: float,
        request_body: Any,
        error_detail: str | None,
    ) -> None:
        """로그 이벤트 구성 후 Axiom 전송 — Build the event and ingest it."""
        # 라우팅 후 경로 파라미터가 채워짐 — Path params are set once routing ran
        path_params: dict[str, Any] = dict(request.path_params)

        log_event: dict[str, Any] = {
            "method": request.method,
            "path": request.url.path,
            "status_code": status_code,
            "duration_ms": round((time.time() - start_time) * 1000, 2),
        }
        if "space_id" in path_params:
            log_event["space_id"] = path_params["space_id"]
        if path_params:
            log_event["path_params"] = {k: str(v) for k, v in path_params.items()}
        if request.query_params:
            log_event["query_params"] = _mask(dict(request.query_params))
        if request_body is not None:
            log_event["request_body"] = request_body
        if error_detail:
            log_event["error"] = error_detail

        try:
            self._client.ingest_events(self._dataset, [log_event])
        except Exception:
            pass  # 로깅 실패가 요청 처리에 영향주지 않도록 — Never break a request on log failure
