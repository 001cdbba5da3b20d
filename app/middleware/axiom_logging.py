"""Axiom API 로깅 미들웨어.

Axiom API logging middleware.
Captures request/response data and sends one structured event per request
to Axiom: endpoint, method, query/path params, masked body, status code,
duration and the envelope `message` of error responses.
Sensitive fields (password, token, secret, payment ids) are masked.
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

# 마스킹 대상 필드 패턴 - camelCase/snake_case 모두 매칭 (Matches both key styles)
_SENSITIVE_KEYS = re.compile(
    r"(password|passwd|secret|token|authorization|api_?key|credential|imp_?uid|stream_?key)",
    re.IGNORECASE,
)

# 로깅 제외 경로 - Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}

_MAX_ERROR_LEN = 500


def _mask_dict(data: Any, depth: int = 0) -> Any:
    """민감 필드 자동 마스킹 — Recursively mask sensitive fields in dicts/lists."""
    if depth > 5:
        return "..."
    if isinstance(data, dict):
        return {
            k: "***" if _SENSITIVE_KEYS.search(str(k)) else _mask_dict(v, depth + 1)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [_mask_dict(item, depth + 1) for item in data[:20]]
    return data


def _error_message(body: bytes) -> str:
    """에러 응답 본문에서 message를 추출합니다.

    Error bodies have the shape {"status", "message", "errors"?}; the
    field list of validation failures is appended to the message.
    """
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return body.decode("utf-8", errors="replace")[:_MAX_ERROR_LEN]

    if not isinstance(data, dict):
        return str(data)[:_MAX_ERROR_LEN]
    message = str(data.get("message", data))
    errors = data.get("errors")
    if errors:
        fields = ", ".join(str(e.get("field")) for e in errors if isinstance(e, dict))
        message = f"{message} [{fields}]"
    if len(message) > _MAX_ERROR_LEN:
        message = message[:_MAX_ERROR_LEN] + "..."
    return message


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청/응답을 Axiom에 로깅하는 미들웨어.

    Middleware that logs all API requests and responses to Axiom.
    Passes requests through untouched when Axiom is not configured.

    Args:
        app: ASGI 앱
        client: 테스트용 Axiom 클라이언트 주입 (Injected ingest client, for tests)
        dataset: 데이터셋 이름 (Defaults to settings.AXIOM_DATASET)
    """

    def __init__(self, app: Any, client: Any = None, dataset: str | None = None) -> None:
        super().__init__(app)
        self._client: Any = client
        self._dataset: str = dataset or settings.AXIOM_DATASET

        if self._client is None and settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # 제외 경로 또는 Axiom 미설정시 패스스루 - Skip excluded paths / unconfigured Axiom
        if request.url.path in _SKIP_PATHS or self._client is None:
            return await call_next(request)

        start_time = time.time()
        method = request.method
        path = request.url.path
        query_params = dict(request.query_params) if request.query_params else None

        # Request body 읽기 - JSON 본문만 (Only JSON bodies; uploads are skipped)
        request_body: Any = None
        if method in ("POST", "PUT", "PATCH") and "json" in request.headers.get("content-type", ""):
            try:
                body_bytes = await request.body()
                if body_bytes:
                    request_body = _mask_dict(json.loads(body_bytes))
            except (json.JSONDecodeError, UnicodeDecodeError):
                request_body = "(non-json body)"

        error_message: str | None = None
        status_code: int = 500
        try:
            response = await call_next(request)
            status_code = response.status_code

            # 에러 응답시 body에서 message 추출 - Extract the envelope message of errors
            if status_code >= 400:
                resp_body = b""
                async for chunk in response.body_iterator:
                    resp_body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")
                error_message = _error_message(resp_body)

                # 소비한 body를 다시 응답으로 반환 - Re-wrap consumed body
                response = Response(
                    content=resp_body,
                    status_code=status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
        except Exception as exc:
            error_message = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            log_event: dict[str, Any] = {
                "method": method,
                "path": path,
                "status_code": status_code,
                "duration_ms": round((time.time() - start_time) * 1000, 2),
            }
            if query_params:
                log_event["query_params"] = _mask_dict(query_params)
            path_params = request.path_params
            if path_params:
                log_event["path_params"] = dict(path_params)
            if request_body is not None:
                log_event["request_body"] = request_body
            if error_message:
                log_event["error"] = error_message

            try:
                self._client.ingest_events(self._dataset, [log_event])
            except Exception:
                pass  # 로깅 실패가 요청 처리에 영향주지 않도록 - Never break request on log failure

        return response
