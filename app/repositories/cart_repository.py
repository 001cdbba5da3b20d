"""장바구니 레포지토리 — 사용자별 장바구니와 항목 쿼리.

Cart Repository — Queries for the per-user cart and its lines.
"""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.cart import Cart, CartItem
from app.repositories.base import BaseRepository


class CartRepository(BaseRepository[Cart]):
    """장바구니 테이블 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Cart)

    async def get_by_user(self, db: AsyncSession, user_id: int) -> Cart | None:
        """항목과 옵션을 포함한 사용자 장바구니를 조회합니다.

        Retrieve the user's cart with lines and their options loaded.
        """
        result = await db.execute(
            select(Cart)
            .options(selectinload(Cart.items).selectinload(CartItem.merchandise_option))
            .where(Cart.user_id == user_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_or_create(self, db: AsyncSession, user_id: int) -> Cart:
        """장바구니가 없으면 생성합니다 (Lazily create the cart)."""
        cart: Cart | None = await self.get_by_user(db, user_id)
        if cart is None:
            await self.create(db, {"user_id": user_id})
            cart = await self.get_by_user(db, user_id)
        return cart


class CartItemRepository(BaseRepository[CartItem]):
    """장바구니 항목 테이블 레포지토리."""

    def __init__(self) -> None:
        super().__init__(CartItem)

    async def get_line(
        self,
        db: AsyncSession,
        cart_id: int,
        merchandise_post_id: int,
        merchandise_option_id: int,
    ) -> CartItem | None:
        result = await db.execute(
            select(CartItem).where(
                CartItem.cart_id == cart_id,
                CartItem.merchandise_post_id == merchandise_post_id,
                CartItem.merchandise_option_id == merchandise_option_id,
            )
        )
        return result.scalar_one_or_none()

    async def get_with_cart(self, db: AsyncSession, cart_item_id: int) -> CartItem | None:
        result = await db.execute(
            select(CartItem)
            .options(selectinload(CartItem.cart), selectinload(CartItem.merchandise_option))
            .where(CartItem.id == cart_item_id)
        )
        return result.scalar_one_or_none()

    async def clear(self, db: AsyncSession, cart_id: int) -> None:
        await db.execute(
            delete(CartItem)
            .where(CartItem.cart_id == cart_id)
            .execution_options(synchronize_session="fetch")
        )
        await db.flush()


# 싱글턴 인스턴스 - Singleton instances
cart_repository: CartRepository = CartRepository()
cart_item_repository: CartItemRepository = CartItemRepository()
