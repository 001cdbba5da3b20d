"""굿즈샵/장바구니 관련 Pydantic 요청/응답 스키마 정의.

Storefront (product, merchandise) and cart schema definitions.
"""

from datetime import datetime

from pydantic import Field

from app.schemas.common import CamelModel


# === 굿즈샵 (Product) 스키마 ===

class ProductCreate(CamelModel):
    """굿즈샵 생성 요청 스키마.

    Attributes:
        community_id: 커뮤니티 ID
        product_name: 굿즈샵 이름
        categories: 카테고리 이름 목록 (Category names created with the product)
    """

    community_id: int
    product_name: str = Field(min_length=1, max_length=200)
    categories: list[str] = Field(default_factory=list)


class ProductCategoryResponse(CamelModel):
    category_id: int
    name: str


class ProductResponse(CamelModel):
    product_id: int
    community_id: int
    product_name: str
    categories: list[ProductCategoryResponse] = Field(default_factory=list)


# === 굿즈 판매글 (Merchandise) 스키마 ===

class MerchandiseOptionInput(CamelModel):
    option_name: str = Field(min_length=1, max_length=200)
    option_price: int = Field(ge=0)
    stock: int = Field(default=0, ge=0)


class MerchandiseCreate(CamelModel):
    """굿즈 판매글 생성 요청 스키마."""

    product_id: int
    category_id: int | None = None
    title: str = Field(min_length=1, max_length=500)
    content: str = ""
    price: int = Field(ge=0)
    thumbnail: str | None = None
    image_urls: list[str] = Field(default_factory=list)
    options: list[MerchandiseOptionInput] = Field(default_factory=list)


class MerchandiseUpdate(CamelModel):
    """굿즈 판매글 수정 요청 스키마 (부분 업데이트).

    options/image_urls가 주어지면 전체 교체합니다.
    When options or image_urls are given they replace the existing rows.
    """

    category_id: int | None = None
    title: str | None = Field(default=None, min_length=1, max_length=500)
    content: str | None = None
    price: int | None = Field(default=None, ge=0)
    thumbnail: str | None = None
    image_urls: list[str] | None = None
    options: list[MerchandiseOptionInput] | None = None


class MerchandiseOptionResponse(CamelModel):
    option_id: int
    option_name: str
    option_price: int
    stock: int


class MerchandiseImageResponse(CamelModel):
    image_id: int
    image_url: str


class MerchandiseResponse(CamelModel):
    """굿즈 판매글 응답 스키마."""

    merchandise_post_id: int
    product_id: int
    category_id: int | None
    title: str
    content: str
    price: int
    thumbnail: str | None
    options: list[MerchandiseOptionResponse] = Field(default_factory=list)
    images: list[MerchandiseImageResponse] = Field(default_factory=list)
    created_at: datetime


# === 장바구니 (Cart) 스키마 ===

class CartItemCreate(CamelModel):
    """장바구니 담기 요청 스키마."""

    merchandise_post_id: int
    merchandise_option_id: int
    quantity: int = 1


class CartItemUpdate(CamelModel):
    quantity: int


class CartItemResponse(CamelModel):
    cart_item_id: int
    merchandise_post_id: int
    merchandise_option_id: int
    quantity: int


class CartResponse(CamelModel):
    """장바구니 응답 스키마 (Includes the computed total price)."""

    cart_id: int
    items: list[CartItemResponse] = Field(default_factory=list)
    total_price: int = 0


class CheckoutResponse(CamelModel):
    """주문 완료 응답 스키마."""

    item_count: int
    total_price: int
