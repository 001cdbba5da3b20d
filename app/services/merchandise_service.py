"""굿즈 서비스 — 굿즈샵 생성과 굿즈 판매글 CRUD.

Merchandise Service — Storefront products and merchandise posts with their
options and images. Writes are limited to the community's managers and
platform admins; reads are public.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.database import transaction
from app.models.merchandise import MerchandisePost, Product
from app.repositories.merchandise_repository import merchandise_repository, product_repository
from app.schemas.merchandise import (
    MerchandiseCreate,
    MerchandiseImageResponse,
    MerchandiseOptionInput,
    MerchandiseOptionResponse,
    MerchandiseResponse,
    MerchandiseUpdate,
    ProductCategoryResponse,
    ProductCreate,
    ProductResponse,
)
from app.services.community_service import community_service
from app.services.role_service import AuthContext
from app.utils.exceptions import BadRequestError, NotFoundError
from app.utils.messages import MESSAGES
from app.utils.response import ApiResponse, create_response


def _option_rows(options: list[MerchandiseOptionInput]) -> list[dict]:
    return [{"name": o.option_name, "price": o.option_price, "stock": o.stock} for o in options]


class MerchandiseService:
    """굿즈샵/굿즈 판매글 서비스."""

    def product_response(self, product: Product) -> ProductResponse:
        return ProductResponse(
            product_id=product.id,
            community_id=product.community_id,
            product_name=product.name,
            categories=[ProductCategoryResponse(category_id=c.id, name=c.name) for c in product.categories],
        )

    def to_response(self, merchandise: MerchandisePost) -> MerchandiseResponse:
        return MerchandiseResponse(
            merchandise_post_id=merchandise.id,
            product_id=merchandise.product_id,
            category_id=merchandise.category_id,
            title=merchandise.title,
            content=merchandise.content,
            price=merchandise.price,
            thumbnail=merchandise.thumbnail,
            options=[
                MerchandiseOptionResponse(option_id=o.id, option_name=o.name, option_price=o.price, stock=o.stock)
                for o in merchandise.options
            ],
            images=[MerchandiseImageResponse(image_id=i.id, image_url=i.image_url) for i in merchandise.images],
            created_at=merchandise.created_at,
        )

    async def _get_product(self, db: AsyncSession, product_id: int) -> Product:
        product: Product | None = await product_repository.get_by_id(db, product_id)
        if product is None:
            raise NotFoundError(MESSAGES["PRODUCT"]["FIND_ONE"]["NOT_FOUND"])
        return product

    async def _get_merchandise(self, db: AsyncSession, merchandise_post_id: int) -> MerchandisePost:
        merchandise = await merchandise_repository.get_detail(db, merchandise_post_id)
        if merchandise is None:
            raise NotFoundError(MESSAGES["MERCHANDISE"]["FIND_ONE"]["NOT_FOUND"])
        return merchandise

    async def _check_category(self, db: AsyncSession, product_id: int, category_id: int | None) -> None:
        if category_id is None:
            return
        category = await product_repository.get_category(db, category_id)
        if category is None or category.product_id != product_id:
            raise BadRequestError(MESSAGES["PRODUCT"]["CATEGORY"]["NOT_FOUND"])

    async def create_product(
        self,
        db: AsyncSession,
        ctx: AuthContext,
        data: ProductCreate,
    ) -> ApiResponse:
        """굿즈샵을 생성합니다 (커뮤니티 매니저 또는 관리자).

        Raises:
            NotFoundError: 커뮤니티 없음
            PermissionDeniedError: 매니저/관리자가 아님
        """
        await community_service.get_or_404(db, data.community_id)
        ctx.require_manager(data.community_id, MESSAGES["MERCHANDISE"]["CREATE"]["UNAUTHORIZED"])

        async with transaction(db):
            product = await product_repository.create(
                db, {"community_id": data.community_id, "name": data.product_name}
            )
            if data.categories:
                await product_repository.add_categories(db, product.id, data.categories)

        product = await product_repository.get_with_categories(db, product.id)
        return create_response(201, MESSAGES["PRODUCT"]["CREATE"]["SUCCEED"], self.product_response(product))

    async def create(
        self,
        db: AsyncSession,
        ctx: AuthContext,
        data: MerchandiseCreate,
    ) -> ApiResponse:
        """굿즈 판매글을 옵션/이미지와 함께 등록합니다.

        Raises:
            NotFoundError: 굿즈샵 없음
            PermissionDeniedError: 매니저/관리자가 아님
            BadRequestError: 다른 굿즈샵의 카테고리
        """
        product = await self._get_product(db, data.product_id)
        ctx.require_manager(product.community_id, MESSAGES["MERCHANDISE"]["CREATE"]["UNAUTHORIZED"])
        await self._check_category(db, product.id, data.category_id)

        async with transaction(db):
            merchandise = await merchandise_repository.create(
                db,
                {
                    "product_id": product.id,
                    "category_id": data.category_id,
                    "title": data.title,
                    "content": data.content,
                    "price": data.price,
                    "thumbnail": data.thumbnail,
                },
            )
            if data.options:
                await merchandise_repository.add_options(db, merchandise.id, _option_rows(data.options))
            if data.image_urls:
                await merchandise_repository.add_images(db, merchandise.id, data.image_urls)

        merchandise = await self._get_merchandise(db, merchandise.id)
        return create_response(201, MESSAGES["MERCHANDISE"]["CREATE"]["SUCCEED"], self.to_response(merchandise))

    async def find_by_product(self, db: AsyncSession, product_id: int) -> ApiResponse:
        await self._get_product(db, product_id)
        items = await merchandise_repository.list_by_product(db, product_id)
        return create_response(
            200,
            MESSAGES["MERCHANDISE"]["FIND_ALL"]["SUCCEED"],
            [self.to_response(m) for m in items],
        )

    async def find_one(self, db: AsyncSession, merchandise_post_id: int) -> ApiResponse:
        merchandise = await self._get_merchandise(db, merchandise_post_id)
        return create_response(200, MESSAGES["MERCHANDISE"]["FIND_ONE"]["SUCCEED"], self.to_response(merchandise))

    async def update(
        self,
        db: AsyncSession,
        ctx: AuthContext,
        merchandise_post_id: int,
        data: MerchandiseUpdate,
    ) -> ApiResponse:
        """굿즈 판매글을 수정합니다.

        Scalar fields are patched; options and images, when given,
        replace the existing rows in the same transaction.
        """
        merchandise = await self._get_merchandise(db, merchandise_post_id)
        product = await self._get_product(db, merchandise.product_id)
        ctx.require_manager(product.community_id, MESSAGES["MERCHANDISE"]["UPDATE"]["UNAUTHORIZED"])

        update_data = data.model_dump(exclude_unset=True, exclude={"options", "image_urls"})
        if "category_id" in update_data:
            await self._check_category(db, product.id, update_data["category_id"])
        for key in ("title", "price", "content"):
            if key in update_data and update_data[key] is None:
                update_data.pop(key)

        async with transaction(db):
            if update_data:
                await merchandise_repository.update(db, merchandise_post_id, update_data)
            if data.options is not None:
                await merchandise_repository.replace_options(db, merchandise_post_id, _option_rows(data.options))
            if data.image_urls is not None:
                await merchandise_repository.replace_images(db, merchandise_post_id, data.image_urls)

        merchandise = await self._get_merchandise(db, merchandise_post_id)
        return create_response(200, MESSAGES["MERCHANDISE"]["UPDATE"]["SUCCEED"], self.to_response(merchandise))

    async def remove(
        self,
        db: AsyncSession,
        ctx: AuthContext,
        merchandise_post_id: int,
    ) -> ApiResponse:
        merchandise = await self._get_merchandise(db, merchandise_post_id)
        product = await self._get_product(db, merchandise.product_id)
        ctx.require_manager(product.community_id, MESSAGES["MERCHANDISE"]["REMOVE"]["UNAUTHORIZED"])

        async with transaction(db):
            await merchandise_repository.delete_with_dependents(db, merchandise_post_id)
        return create_response(200, MESSAGES["MERCHANDISE"]["REMOVE"]["SUCCEED"])


# 싱글턴 인스턴스 - Singleton instance
merchandise_service: MerchandiseService = MerchandiseService()
