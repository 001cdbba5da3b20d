"""공지사항 관련 SQLAlchemy ORM 모델 정의.

Notice SQLAlchemy ORM model definitions.

Tables:
    - notices: 커뮤니티 공지사항 (Community announcements posted by staff)
    - notice_images: 공지 이미지 (Attached image URLs, max 3 per notice)
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Notice(Base):
    """공지사항 모델.

    Attributes:
        community_id: 커뮤니티 FK (CASCADE)
        community_user_id: 작성자 FK, 작성자가 관리자이고 미가입이면 NULL
                           (Author; NULL when a platform admin without membership posts)
        title: 제목
        content: 본문
    """

    __tablename__ = "notices"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    community_id: Mapped[int] = mapped_column(Integer, ForeignKey("communities.id", ondelete="CASCADE"), nullable=False, index=True)
    community_user_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("community_users.id", ondelete="SET NULL"), nullable=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    images = relationship("NoticeImage", back_populates="notice", cascade="all, delete-orphan", order_by="NoticeImage.id")


class NoticeImage(Base):
    __tablename__ = "notice_images"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    notice_id: Mapped[int] = mapped_column(Integer, ForeignKey("notices.id", ondelete="CASCADE"), nullable=False)
    image_url: Mapped[str] = mapped_column(String(1000), nullable=False)

    notice = relationship("Notice", back_populates="images")
