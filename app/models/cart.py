"""장바구니 관련 SQLAlchemy ORM 모델 정의.

Cart ORM model definitions.

Tables:
    - carts: 사용자 장바구니 (One cart per user, created lazily)
    - cart_items: 장바구니 항목 (Listing + option + quantity)
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Cart(Base):
    __tablename__ = "carts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    items = relationship("CartItem", back_populates="cart", cascade="all, delete-orphan", order_by="CartItem.id")


class CartItem(Base):
    """장바구니 항목 모델.

    Attributes:
        cart_id: 장바구니 FK (CASCADE)
        merchandise_post_id: 굿즈 판매글 FK (CASCADE)
        merchandise_option_id: 굿즈 옵션 FK (CASCADE)
        quantity: 수량 (>= 1)
    """

    __tablename__ = "cart_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    cart_id: Mapped[int] = mapped_column(Integer, ForeignKey("carts.id", ondelete="CASCADE"), nullable=False)
    merchandise_post_id: Mapped[int] = mapped_column(Integer, ForeignKey("merchandise_posts.id", ondelete="CASCADE"), nullable=False)
    merchandise_option_id: Mapped[int] = mapped_column(Integer, ForeignKey("merchandise_options.id", ondelete="CASCADE"), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    cart = relationship("Cart", back_populates="items")
    merchandise_post = relationship("MerchandisePost")
    merchandise_option = relationship("MerchandiseOption")
