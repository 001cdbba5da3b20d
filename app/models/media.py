"""미디어 갤러리 및 라이브 관련 SQLAlchemy ORM 모델 정의.

Media gallery and live-stream listing ORM model definitions.

Tables:
    - media: 미디어 갤러리 (Community media galleries)
    - media_files: 미디어 파일 (Files belonging to a gallery)
    - lives: 라이브 방송 목록 (Live-stream listings opened by artists)
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Media(Base):
    """미디어 갤러리 모델.

    Attributes:
        community_id: 커뮤니티 FK (CASCADE)
        title: 제목
        content: 설명
        thumbnail_image: 썸네일 URL (Thumbnail URL, optional)
    """

    __tablename__ = "media"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    community_id: Mapped[int] = mapped_column(Integer, ForeignKey("communities.id", ondelete="CASCADE"), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    thumbnail_image: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    files = relationship("MediaFile", back_populates="media", cascade="all, delete-orphan", order_by="MediaFile.id")


class MediaFile(Base):
    __tablename__ = "media_files"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    media_id: Mapped[int] = mapped_column(Integer, ForeignKey("media.id", ondelete="CASCADE"), nullable=False)
    file_url: Mapped[str] = mapped_column(String(1000), nullable=False)

    media = relationship("Media", back_populates="files")


class Live(Base):
    """라이브 모델 — 아티스트가 연 라이브 방송.

    ended_at이 NULL이면 방송 중 (NULL ended_at = currently on air).
    """

    __tablename__ = "lives"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    community_id: Mapped[int] = mapped_column(Integer, ForeignKey("communities.id", ondelete="CASCADE"), nullable=False, index=True)
    artist_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("artists.id", ondelete="SET NULL"), nullable=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    stream_key: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    started_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    ended_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
