"""굿즈 라우터 — 굿즈 판매글 CRUD.

Merchandise Router. Storefront products are created through
`app/api/v1/product.py`.
"""

from typing import Annotated

from fastapi import APIRouter, Query

from app.api.deps import CurrentContext, DbSession
from app.schemas.merchandise import MerchandiseCreate, MerchandiseResponse, MerchandiseUpdate
from app.services.merchandise_service import merchandise_service
from app.utils.response import ApiResponse

router: APIRouter = APIRouter()


@router.post("", response_model=ApiResponse[MerchandiseResponse], status_code=201)
async def create_merchandise(data: MerchandiseCreate, db: DbSession, ctx: CurrentContext) -> ApiResponse:
    """굿즈 판매글 등록 — 옵션과 이미지를 함께 저장합니다."""
    result: ApiResponse = await merchandise_service.create(db, ctx, data)
    await db.commit()
    return result


@router.get("", response_model=ApiResponse[list[MerchandiseResponse]])
async def list_merchandise(
    product_id: Annotated[int, Query(alias="productId")],
    db: DbSession,
) -> ApiResponse:
    return await merchandise_service.find_by_product(db, product_id)


@router.get("/{merchandise_post_id}", response_model=ApiResponse[MerchandiseResponse])
async def get_merchandise(merchandise_post_id: int, db: DbSession) -> ApiResponse:
    return await merchandise_service.find_one(db, merchandise_post_id)


@router.patch("/{merchandise_post_id}", response_model=ApiResponse[MerchandiseResponse])
async def update_merchandise(
    merchandise_post_id: int,
    data: MerchandiseUpdate,
    db: DbSession,
    ctx: CurrentContext,
) -> ApiResponse:
    result: ApiResponse = await merchandise_service.update(db, ctx, merchandise_post_id, data)
    await db.commit()
    return result


@router.delete("/{merchandise_post_id}", response_model=ApiResponse[None])
async def delete_merchandise(merchandise_post_id: int, db: DbSession, ctx: CurrentContext) -> ApiResponse:
    result: ApiResponse = await merchandise_service.remove(db, ctx, merchandise_post_id)
    await db.commit()
    return result
