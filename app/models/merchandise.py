"""굿즈샵 관련 SQLAlchemy ORM 모델 정의.

Merchandise storefront ORM model definitions.

Tables:
    - products: 커뮤니티 굿즈샵 (A community's storefront)
    - product_categories: 굿즈샵 카테고리 (Storefront categories)
    - merchandise_posts: 굿즈 판매글 (Storefront listings)
    - merchandise_options: 굿즈 옵션 (Variants with their own price and stock)
    - merchandise_images: 굿즈 이미지 (Listing images)
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Product(Base):
    """굿즈샵 모델 — 커뮤니티당 판매 단위.

    Attributes:
        community_id: 커뮤니티 FK (CASCADE)
        name: 굿즈샵 이름
    """

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    community_id: Mapped[int] = mapped_column(Integer, ForeignKey("communities.id", ondelete="CASCADE"), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    categories = relationship("ProductCategory", back_populates="product", cascade="all, delete-orphan", order_by="ProductCategory.id")


class ProductCategory(Base):
    __tablename__ = "product_categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[int] = mapped_column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)

    product = relationship("Product", back_populates="categories")


class MerchandisePost(Base):
    """굿즈 판매글 모델.

    Attributes:
        product_id: 굿즈샵 FK (CASCADE)
        category_id: 카테고리 FK, 선택 (Optional category, SET NULL)
        title: 판매글 제목
        content: 상세 설명
        price: 기본 가격 (Base price; options carry their own price)
        thumbnail: 썸네일 URL

    Relationships:
        options: 옵션 목록 (cascade delete)
        images: 이미지 목록 (cascade delete)
    """

    __tablename__ = "merchandise_posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[int] = mapped_column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True)
    category_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("product_categories.id", ondelete="SET NULL"), nullable=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    price: Mapped[int] = mapped_column(Integer, nullable=False)
    thumbnail: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    options = relationship("MerchandiseOption", back_populates="merchandise_post", cascade="all, delete-orphan", order_by="MerchandiseOption.id")
    images = relationship("MerchandiseImage", back_populates="merchandise_post", cascade="all, delete-orphan", order_by="MerchandiseImage.id")


class MerchandiseOption(Base):
    """굿즈 옵션 모델 — 가격과 재고를 가진 변형 상품."""

    __tablename__ = "merchandise_options"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    merchandise_post_id: Mapped[int] = mapped_column(Integer, ForeignKey("merchandise_posts.id", ondelete="CASCADE"), nullable=False)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False)
    stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    merchandise_post = relationship("MerchandisePost", back_populates="options")


class MerchandiseImage(Base):
    __tablename__ = "merchandise_images"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    merchandise_post_id: Mapped[int] = mapped_column(Integer, ForeignKey("merchandise_posts.id", ondelete="CASCADE"), nullable=False)
    image_url: Mapped[str] = mapped_column(String(1000), nullable=False)

    merchandise_post = relationship("MerchandisePost", back_populates="images")
