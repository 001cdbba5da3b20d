"""FastAPI 애플리케이션 엔트리포인트 — 미들웨어, 예외 핸들러, 라우터 등록.

FastAPI application entry point — Middleware, exception handlers and router
registration. Every error leaves the API as `{"status", "message"}`, with a
field list added for request validation failures.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import settings
from app.middleware.axiom_logging import AxiomLoggingMiddleware
from app.schemas.common import FieldError
from app.services.storage_service import UPLOADS_DIR, storage_service
from app.utils.messages import MESSAGES

app: FastAPI = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Axiom API 로깅 미들웨어 - Axiom API request/response logging
# CORS보다 먼저 등록하여 모든 요청을 캡처 (Registered before CORS to capture all requests)
app.add_middleware(AxiomLoggingMiddleware)

# CORS 미들웨어 - Cross-Origin Resource Sharing middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# 예외 핸들러 - Exception handlers
# ---------------------------------------------------------------------------
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """서비스 예외를 {status, message} 본문으로 변환합니다."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"status": exc.status_code, "message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """요청 검증 실패를 400과 필드별 오류 목록으로 변환합니다.

    Validation failures are reported as 400 with one entry per failing
    field, e.g. `{"field": "body.content", "message": "..."}`.
    """
    errors = [
        FieldError(
            field=".".join(str(part) for part in error["loc"]),
            message=error["msg"],
        ).model_dump()
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={
            "status": 400,
            "message": MESSAGES["COMMON"]["VALIDATION"]["BAD_REQUEST"],
            "errors": errors,
        },
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """예상하지 못한 예외 — 상세 내용은 로깅 미들웨어가 기록합니다."""
    return JSONResponse(
        status_code=500,
        content={"status": 500, "message": MESSAGES["COMMON"]["SERVER"]["ERROR"]},
    )


@app.get("/health")
async def health_check() -> dict[str, str]:
    """서버 상태 확인 엔드포인트.

    Health check endpoint for load balancers and monitoring.
    """
    return {"status": "ok"}


# 로컬 업로드 모드에서는 저장된 파일을 직접 서빙 (Serve uploaded files in local storage mode)
if storage_service.is_local:
    app.mount("/uploads", StaticFiles(directory=UPLOADS_DIR, check_dir=False), name="uploads")


# ---------------------------------------------------------------------------
# 라우터 등록 - Router registration
# ---------------------------------------------------------------------------
from app.api.v1 import v1_router  # noqa: E402

app.include_router(v1_router, prefix=f"{settings.API_PREFIX}/v1")
