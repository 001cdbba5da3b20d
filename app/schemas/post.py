"""게시글/댓글/좋아요 관련 Pydantic 요청/응답 스키마 정의.

Post, comment and like request/response schema definitions.
"""

from datetime import datetime

from pydantic import Field

from app.models.post import ItemType
from app.schemas.common import CamelModel


# === 게시글 (Post) 스키마 ===

class PostCreate(CamelModel):
    """게시글 생성 요청 스키마.

    Attributes:
        community_id: 게시할 커뮤니티 ID
        content: 본문 (빈 문자열 불가, must not be blank)
        post_images: 첨부 이미지 URL 목록 (Uploaded image URLs, optional)
    """

    community_id: int
    content: str
    post_images: list[str] = Field(default_factory=list)


class PostUpdate(CamelModel):
    """게시글 수정 요청 스키마.

    post_images가 비어 있으면 기존 이미지를 유지하고, 값이 있으면 전체 교체합니다.
    An empty post_images keeps the existing images; a non-empty list replaces them.
    """

    content: str
    post_images: list[str] = Field(default_factory=list)


class PostImageResponse(CamelModel):
    post_image_id: int
    post_image_url: str


class PostResponse(CamelModel):
    """게시글 응답 스키마."""

    post_id: int
    community_id: int
    community_user_id: int
    artist_id: int | None
    content: str
    post_images: list[PostImageResponse] = Field(default_factory=list)
    like_count: int = 0  # status=True만 집계 (Counts status=True likes only)
    created_at: datetime
    updated_at: datetime


# === 댓글 (Comment) 스키마 ===

class CommentCreate(CamelModel):
    content: str


class CommentUpdate(CamelModel):
    content: str


class CommentResponse(CamelModel):
    """댓글 응답 스키마."""

    comment_id: int
    post_id: int
    community_user_id: int
    content: str
    created_at: datetime
    updated_at: datetime


# === 좋아요 (Like) 스키마 ===

class LikeRequest(CamelModel):
    """좋아요 상태 변경 요청 스키마."""

    status: bool  # True = 좋아요, False = 좋아요 취소 (True = like, False = unlike)


class LikeResponse(CamelModel):
    like_id: int
    user_id: int
    item_id: int
    item_type: ItemType
    status: bool
