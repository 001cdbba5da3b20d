"""스토리지 라우터 — presigned URL 생성 + 로컬 업로드 API.

Storage Router — Issues presigned upload URLs (S3 or local mode).
로컬 모드에서는 PUT 엔드포인트로 파일을 직접 받아 저장합니다.
"""

from fastapi import APIRouter, Request

from app.api.deps import CurrentContext
from app.schemas.media import PresignRequest, PresignResponse
from app.services.storage_service import storage_service
from app.utils.messages import MESSAGES
from app.utils.response import ApiResponse, create_response

router: APIRouter = APIRouter()


@router.post("/presigned-url", response_model=ApiResponse[PresignResponse], status_code=201)
async def create_presigned_url(data: PresignRequest, ctx: CurrentContext) -> ApiResponse:
    """presigned upload URL을 생성합니다 (S3 또는 로컬)."""
    return storage_service.presign_upload(
        filename=data.filename,
        content_type=data.content_type,
        folder=data.folder,
    )


@router.put("/upload/{key:path}", response_model=ApiResponse[None])
async def upload_local(key: str, request: Request, ctx: CurrentContext) -> ApiResponse:
    """로컬 모드 전용. 로그인한 사용자의 파일을 서버에 직접 저장합니다.

    Local-mode stand-in for the S3 PUT; requires the same bearer token as
    the presign call.
    """
    body = await request.body()
    storage_service.save_local(key, body)
    return create_response(200, MESSAGES["STORAGE"]["UPLOAD"]["SUCCEED"])
