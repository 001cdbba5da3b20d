"""굿즈 레포지토리 — 굿즈샵/카테고리/판매글/옵션/이미지 쿼리.

Merchandise Repository — Queries for storefront products, categories,
merchandise posts and their options and images.
"""

from typing import Sequence

from sqlalchemy import Select, delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.cart import CartItem
from app.models.merchandise import (
    MerchandiseImage,
    MerchandiseOption,
    MerchandisePost,
    Product,
    ProductCategory,
)
from app.repositories.base import BaseRepository


class ProductRepository(BaseRepository[Product]):
    """굿즈샵 테이블 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Product)

    async def get_with_categories(self, db: AsyncSession, product_id: int) -> Product | None:
        result = await db.execute(
            select(Product)
            .options(selectinload(Product.categories))
            .where(Product.id == product_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def add_categories(self, db: AsyncSession, product_id: int, names: list[str]) -> None:
        db.add_all([ProductCategory(product_id=product_id, name=name) for name in names])
        await db.flush()

    async def get_category(self, db: AsyncSession, category_id: int) -> ProductCategory | None:
        result = await db.execute(select(ProductCategory).where(ProductCategory.id == category_id))
        return result.scalar_one_or_none()


class MerchandiseRepository(BaseRepository[MerchandisePost]):
    """굿즈 판매글 테이블 레포지토리."""

    def __init__(self) -> None:
        super().__init__(MerchandisePost)

    async def get_detail(self, db: AsyncSession, merchandise_post_id: int) -> MerchandisePost | None:
        """옵션과 이미지를 포함한 판매글을 조회합니다.

        Retrieve a merchandise post with its options and images loaded.
        """
        result = await db.execute(
            select(MerchandisePost)
            .options(
                selectinload(MerchandisePost.options),
                selectinload(MerchandisePost.images),
            )
            .where(MerchandisePost.id == merchandise_post_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def list_by_product(self, db: AsyncSession, product_id: int) -> Sequence[MerchandisePost]:
        query: Select = (
            select(MerchandisePost)
            .options(
                selectinload(MerchandisePost.options),
                selectinload(MerchandisePost.images),
            )
            .where(MerchandisePost.product_id == product_id)
            .order_by(MerchandisePost.created_at.desc(), MerchandisePost.id.desc())
        )
        result = await db.execute(query)
        return result.scalars().all()

    async def replace_options(
        self,
        db: AsyncSession,
        merchandise_post_id: int,
        options: list[dict],
    ) -> None:
        """판매 옵션을 전부 교체합니다.

        Replace every option of a merchandise post. Cart lines pointing at
        the old options are dropped along with them. Deleted rows are evicted
        from the session so reused ids do not collide with stale objects.
        """
        old_option_ids = select(MerchandiseOption.id).where(
            MerchandiseOption.merchandise_post_id == merchandise_post_id
        )
        for statement in (
            delete(CartItem).where(CartItem.merchandise_option_id.in_(old_option_ids)),
            delete(MerchandiseOption).where(MerchandiseOption.merchandise_post_id == merchandise_post_id),
        ):
            await db.execute(statement.execution_options(synchronize_session="fetch"))
        await self.add_options(db, merchandise_post_id, options)

    async def add_options(self, db: AsyncSession, merchandise_post_id: int, options: list[dict]) -> None:
        db.add_all([MerchandiseOption(merchandise_post_id=merchandise_post_id, **option) for option in options])
        await db.flush()

    async def replace_images(self, db: AsyncSession, merchandise_post_id: int, image_urls: list[str]) -> None:
        await db.execute(
            delete(MerchandiseImage)
            .where(MerchandiseImage.merchandise_post_id == merchandise_post_id)
            .execution_options(synchronize_session="fetch")
        )
        await self.add_images(db, merchandise_post_id, image_urls)

    async def add_images(self, db: AsyncSession, merchandise_post_id: int, image_urls: list[str]) -> None:
        db.add_all([MerchandiseImage(merchandise_post_id=merchandise_post_id, image_url=url) for url in image_urls])
        await db.flush()

    async def delete_with_dependents(self, db: AsyncSession, merchandise_post_id: int) -> None:
        for statement in (
            delete(CartItem).where(CartItem.merchandise_post_id == merchandise_post_id),
            delete(MerchandiseImage).where(MerchandiseImage.merchandise_post_id == merchandise_post_id),
            delete(MerchandiseOption).where(MerchandiseOption.merchandise_post_id == merchandise_post_id),
            delete(MerchandisePost).where(MerchandisePost.id == merchandise_post_id),
        ):
            await db.execute(statement.execution_options(synchronize_session=False))
        await db.flush()


class MerchandiseOptionRepository(BaseRepository[MerchandiseOption]):
    """판매 옵션 테이블 레포지토리."""

    def __init__(self) -> None:
        super().__init__(MerchandiseOption)


# 싱글턴 인스턴스 - Singleton instances
product_repository: ProductRepository = ProductRepository()
merchandise_repository: MerchandiseRepository = MerchandiseRepository()
merchandise_option_repository: MerchandiseOptionRepository = MerchandiseOptionRepository()
