"""게시글/댓글/좋아요 관련 SQLAlchemy ORM 모델 정의.

Post, comment and like SQLAlchemy ORM model definitions.

Tables:
    - posts: 게시글 (Member-authored posts, optionally attributed to an artist)
    - post_images: 게시글 이미지 (Attached image URLs, replaced wholesale on update)
    - comments: 댓글 (Replies to a post)
    - likes: 좋아요 (A user's reaction to a post or comment, keyed by (user, item, type))
"""

from datetime import datetime, timezone
from enum import Enum

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Post(Base):
    """게시글 모델.

    Attributes:
        id: 고유 식별자 (Primary key)
        community_id: 커뮤니티 FK (CASCADE)
        community_user_id: 작성자 커뮤니티 사용자 FK (Author, CASCADE)
        artist_id: 작성자가 아티스트면 아티스트 FK (Set when the author is an artist)
        content: 본문 (Body text)

    Relationships:
        images: 첨부 이미지 (PostImage rows, cascade delete)
        comments: 댓글 (Comment rows, cascade delete)
    """

    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    community_id: Mapped[int] = mapped_column(Integer, ForeignKey("communities.id", ondelete="CASCADE"), nullable=False, index=True)
    community_user_id: Mapped[int] = mapped_column(Integer, ForeignKey("community_users.id", ondelete="CASCADE"), nullable=False)
    # 아티스트 FK - 아티스트 권한 회수 시 NULL (SET NULL when the artist role is revoked)
    artist_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("artists.id", ondelete="SET NULL"), nullable=True, index=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    images = relationship("PostImage", back_populates="post", cascade="all, delete-orphan", order_by="PostImage.id")
    comments = relationship("Comment", back_populates="post", cascade="all, delete-orphan")


class PostImage(Base):
    """게시글 이미지 모델 — 업로드된 이미지의 공개 URL."""

    __tablename__ = "post_images"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    post_id: Mapped[int] = mapped_column(Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False)
    image_url: Mapped[str] = mapped_column(String(1000), nullable=False)

    post = relationship("Post", back_populates="images")


class Comment(Base):
    """댓글 모델.

    Attributes:
        post_id: 게시글 FK (CASCADE)
        community_user_id: 작성자 커뮤니티 사용자 FK (CASCADE)
        content: 댓글 내용 (Comment text)
    """

    __tablename__ = "comments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    post_id: Mapped[int] = mapped_column(Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True)
    community_user_id: Mapped[int] = mapped_column(Integer, ForeignKey("community_users.id", ondelete="CASCADE"), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    post = relationship("Post", back_populates="comments")


class ItemType(str, Enum):
    """좋아요 대상 유형 — Like target type."""

    POST = "POST"
    COMMENT = "COMMENT"


class Like(Base):
    """좋아요 모델.

    Like — upserted per interaction. "Unlike" keeps the row with
    status=False, so counts must filter on status.

    Attributes:
        user_id: 사용자 FK (CASCADE)
        item_id: 대상 게시글/댓글 ID (Target post or comment id; no FK, polymorphic)
        item_type: 대상 유형 (POST / COMMENT)
        status: 좋아요 여부 (True = liked)

    Constraints:
        uq_like_user_item: (user_id, item_id, item_type) 고유
    """

    __tablename__ = "likes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    item_id: Mapped[int] = mapped_column(Integer, nullable=False)
    item_type: Mapped[str] = mapped_column(String(20), nullable=False)
    status: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        UniqueConstraint("user_id", "item_id", "item_type", name="uq_like_user_item"),
    )
