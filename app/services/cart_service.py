"""장바구니 서비스 — 담기, 조회, 수량 변경, 삭제, 주문.

Cart Service — Per-user cart. The cart is created lazily on the first add,
a repeated (merchandise, option) pair merges into one line, and checkout
decrements stock and empties the cart in one transaction.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.database import transaction
from app.models.cart import Cart, CartItem
from app.models.merchandise import MerchandiseOption
from app.repositories.cart_repository import cart_item_repository, cart_repository
from app.repositories.merchandise_repository import merchandise_option_repository, merchandise_repository
from app.schemas.merchandise import CartItemCreate, CartItemResponse, CartResponse, CheckoutResponse
from app.services.role_service import AuthContext
from app.utils.exceptions import BadRequestError, NotFoundError
from app.utils.messages import MESSAGES
from app.utils.response import ApiResponse, create_response


class CartService:
    """장바구니 서비스."""

    def to_response(self, cart: Cart) -> CartResponse:
        return CartResponse(
            cart_id=cart.id,
            items=[
                CartItemResponse(
                    cart_item_id=item.id,
                    merchandise_post_id=item.merchandise_post_id,
                    merchandise_option_id=item.merchandise_option_id,
                    quantity=item.quantity,
                )
                for item in cart.items
            ],
            total_price=sum(item.merchandise_option.price * item.quantity for item in cart.items),
        )

    async def _get_option(self, db: AsyncSession, merchandise_post_id: int, option_id: int) -> MerchandiseOption:
        if not await merchandise_repository.exists(db, {"id": merchandise_post_id}):
            raise NotFoundError(MESSAGES["MERCHANDISE"]["FIND_ONE"]["NOT_FOUND"])
        option: MerchandiseOption | None = await merchandise_option_repository.get_by_id(db, option_id)
        if option is None or option.merchandise_post_id != merchandise_post_id:
            raise BadRequestError(MESSAGES["CART"]["ADD"]["BAD_OPTION"])
        return option

    async def _get_own_item(self, db: AsyncSession, ctx: AuthContext, cart_item_id: int) -> CartItem:
        item: CartItem | None = await cart_item_repository.get_with_cart(db, cart_item_id)
        # 다른 사용자의 항목은 존재하지 않는 것으로 취급 (Other users' lines look absent)
        if item is None or item.cart.user_id != ctx.user_id:
            raise NotFoundError(MESSAGES["CART"]["ITEM"]["NOT_FOUND"])
        return item

    async def add_item(
        self,
        db: AsyncSession,
        ctx: AuthContext,
        data: CartItemCreate,
    ) -> ApiResponse:
        """장바구니에 굿즈를 담습니다.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            ctx: 요청 인가 컨텍스트
            data: merchandisePostId, merchandiseOptionId, quantity

        Returns:
            ApiResponse: status 201, data = CartResponse

        Raises:
            BadRequestError: 수량 < 1, 다른 굿즈의 옵션, 재고 부족
            NotFoundError: 굿즈 없음
        """
        if data.quantity < 1:
            raise BadRequestError(MESSAGES["CART"]["ADD"]["BAD_QUANTITY"])
        option = await self._get_option(db, data.merchandise_post_id, data.merchandise_option_id)

        cart = await cart_repository.get_or_create(db, ctx.user_id)
        line = await cart_item_repository.get_line(db, cart.id, data.merchandise_post_id, option.id)
        quantity = data.quantity + (line.quantity if line is not None else 0)
        if quantity > option.stock:
            raise BadRequestError(MESSAGES["CART"]["ADD"]["OUT_OF_STOCK"])

        if line is None:
            await cart_item_repository.create(
                db,
                {
                    "cart_id": cart.id,
                    "merchandise_post_id": data.merchandise_post_id,
                    "merchandise_option_id": option.id,
                    "quantity": quantity,
                },
            )
        else:
            await cart_item_repository.update(db, line.id, {"quantity": quantity})

        cart = await cart_repository.get_by_user(db, ctx.user_id)
        return create_response(201, MESSAGES["CART"]["ADD"]["SUCCEED"], self.to_response(cart))

    async def get_cart(self, db: AsyncSession, ctx: AuthContext) -> ApiResponse:
        cart = await cart_repository.get_or_create(db, ctx.user_id)
        return create_response(200, MESSAGES["CART"]["FIND"]["SUCCEED"], self.to_response(cart))

    async def update_item(
        self,
        db: AsyncSession,
        ctx: AuthContext,
        cart_item_id: int,
        quantity: int,
    ) -> ApiResponse:
        """장바구니 항목 수량을 변경합니다 (본인 항목만).

        Raises:
            NotFoundError: 항목 없음 또는 타인 항목
            BadRequestError: 수량 < 1 또는 재고 부족
        """
        item = await self._get_own_item(db, ctx, cart_item_id)
        if quantity < 1:
            raise BadRequestError(MESSAGES["CART"]["ADD"]["BAD_QUANTITY"])
        if quantity > item.merchandise_option.stock:
            raise BadRequestError(MESSAGES["CART"]["ADD"]["OUT_OF_STOCK"])

        await cart_item_repository.update(db, item.id, {"quantity": quantity})
        cart = await cart_repository.get_by_user(db, ctx.user_id)
        return create_response(200, MESSAGES["CART"]["UPDATE"]["SUCCEED"], self.to_response(cart))

    async def remove_item(
        self,
        db: AsyncSession,
        ctx: AuthContext,
        cart_item_id: int,
    ) -> ApiResponse:
        item = await self._get_own_item(db, ctx, cart_item_id)
        await cart_item_repository.delete(db, item.id)
        cart = await cart_repository.get_by_user(db, ctx.user_id)
        return create_response(200, MESSAGES["CART"]["REMOVE"]["SUCCEED"], self.to_response(cart))

    async def checkout(self, db: AsyncSession, ctx: AuthContext) -> ApiResponse:
        """장바구니 전체를 주문합니다.

        Every line's stock is checked before any is decremented, so a
        shortage on one line leaves all stock and the cart untouched.

        Raises:
            BadRequestError: 빈 장바구니 또는 재고 부족
        """
        cart: Cart | None = await cart_repository.get_by_user(db, ctx.user_id)
        if cart is None or not cart.items:
            raise BadRequestError(MESSAGES["CART"]["CHECKOUT"]["EMPTY"])

        for item in cart.items:
            if item.quantity > item.merchandise_option.stock:
                raise BadRequestError(MESSAGES["CART"]["ADD"]["OUT_OF_STOCK"])

        item_count = sum(item.quantity for item in cart.items)
        total_price = sum(item.merchandise_option.price * item.quantity for item in cart.items)

        async with transaction(db):
            for item in cart.items:
                item.merchandise_option.stock -= item.quantity
            await db.flush()
            await cart_item_repository.clear(db, cart.id)

        return create_response(
            200,
            MESSAGES["CART"]["CHECKOUT"]["SUCCEED"],
            CheckoutResponse(item_count=item_count, total_price=total_price),
        )


# 싱글턴 인스턴스 - Singleton instance
cart_service: CartService = CartService()
