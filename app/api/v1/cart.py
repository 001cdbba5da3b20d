"""장바구니 라우터 — 조회, 담기, 수량 변경, 삭제, 주문.

Cart Router. Every endpoint acts on the caller's own cart.
"""

from fastapi import APIRouter

from app.api.deps import CurrentContext, DbSession
from app.schemas.merchandise import CartItemCreate, CartItemUpdate, CartResponse, CheckoutResponse
from app.services.cart_service import cart_service
from app.utils.response import ApiResponse

router: APIRouter = APIRouter()


@router.get("", response_model=ApiResponse[CartResponse])
async def get_cart(db: DbSession, ctx: CurrentContext) -> ApiResponse:
    """내 장바구니 조회 — 처음 조회 시 빈 장바구니가 생성됩니다."""
    result: ApiResponse = await cart_service.get_cart(db, ctx)
    await db.commit()
    return result


@router.post("/items", response_model=ApiResponse[CartResponse], status_code=201)
async def add_cart_item(data: CartItemCreate, db: DbSession, ctx: CurrentContext) -> ApiResponse:
    result: ApiResponse = await cart_service.add_item(db, ctx, data)
    await db.commit()
    return result


@router.patch("/items/{cart_item_id}", response_model=ApiResponse[CartResponse])
async def update_cart_item(
    cart_item_id: int,
    data: CartItemUpdate,
    db: DbSession,
    ctx: CurrentContext,
) -> ApiResponse:
    result: ApiResponse = await cart_service.update_item(db, ctx, cart_item_id, data.quantity)
    await db.commit()
    return result


@router.delete("/items/{cart_item_id}", response_model=ApiResponse[CartResponse])
async def remove_cart_item(cart_item_id: int, db: DbSession, ctx: CurrentContext) -> ApiResponse:
    result: ApiResponse = await cart_service.remove_item(db, ctx, cart_item_id)
    await db.commit()
    return result


@router.post("/checkout", response_model=ApiResponse[CheckoutResponse])
async def checkout(db: DbSession, ctx: CurrentContext) -> ApiResponse:
    """장바구니 주문 — 재고를 차감하고 장바구니를 비웁니다."""
    result: ApiResponse = await cart_service.checkout(db, ctx)
    await db.commit()
    return result
