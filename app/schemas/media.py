"""미디어/라이브 관련 Pydantic 요청/응답 스키마 정의.

Media gallery and live listing schema definitions.
"""

from datetime import datetime

from pydantic import Field

from app.schemas.common import CamelModel


class MediaCreate(CamelModel):
    """미디어 등록 요청 스키마."""

    title: str = Field(min_length=1, max_length=500)
    content: str = ""
    thumbnail_image: str | None = None
    media_files: list[str] = Field(default_factory=list)


class MediaResponse(CamelModel):
    media_id: int
    community_id: int
    title: str
    content: str
    thumbnail_image: str | None
    media_files: list[str] = Field(default_factory=list)
    created_at: datetime


class LiveCreate(CamelModel):
    title: str = Field(min_length=1, max_length=500)


class LiveResponse(CamelModel):
    """라이브 응답 스키마. ended_at이 없으면 방송 중."""

    live_id: int
    community_id: int
    artist_id: int | None
    title: str
    stream_key: str
    started_at: datetime
    ended_at: datetime | None


class PresignRequest(CamelModel):
    """업로드 URL 발급 요청 스키마."""

    filename: str = Field(min_length=1)
    content_type: str = Field(min_length=1)
    folder: str = "posts"


class PresignResponse(CamelModel):
    upload_url: str
    file_url: str
    key: str
