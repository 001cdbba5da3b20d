"""공지사항 관련 Pydantic 요청/응답 스키마 정의.

Notice request/response schema definitions.
"""

from datetime import datetime

from pydantic import Field

from app.schemas.common import CamelModel


class NoticeCreate(CamelModel):
    """공지사항 작성 요청 스키마.

    Attributes:
        title: 제목
        content: 본문
        notice_image_url: 첨부 이미지 URL 목록, 최대 3개 (Up to 3 image URLs)
    """

    title: str = Field(min_length=1, max_length=500)
    content: str = Field(min_length=1)
    notice_image_url: list[str] = Field(default_factory=list, max_length=3)


class NoticeUpdate(CamelModel):
    """공지사항 수정 요청 스키마 (부분 업데이트)."""

    title: str | None = Field(default=None, min_length=1, max_length=500)
    content: str | None = Field(default=None, min_length=1)


class NoticeImageResponse(CamelModel):
    notice_image_id: int
    notice_image_url: str


class NoticeResponse(CamelModel):
    """공지사항 응답 스키마."""

    notice_id: int
    community_id: int
    community_user_id: int | None
    title: str
    content: str
    notice_images: list[NoticeImageResponse] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime
