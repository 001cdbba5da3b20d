"""굿즈샵 라우터 — Storefront product creation."""

from fastapi import APIRouter

from app.api.deps import CurrentContext, DbSession
from app.schemas.merchandise import ProductCreate, ProductResponse
from app.services.merchandise_service import merchandise_service
from app.utils.response import ApiResponse

router: APIRouter = APIRouter()


@router.post("", response_model=ApiResponse[ProductResponse], status_code=201)
async def create_product(data: ProductCreate, db: DbSession, ctx: CurrentContext) -> ApiResponse:
    """굿즈샵 생성 — 카테고리 이름 목록을 함께 받습니다."""
    result: ApiResponse = await merchandise_service.create_product(db, ctx, data)
    await db.commit()
    return result
