"""미디어 레포지토리 — 미디어 갤러리/라이브 쿼리.

Media Repository — Queries for media galleries and live listings.
"""

from typing import Sequence

from sqlalchemy import Select, delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.media import Live, Media, MediaFile
from app.repositories.base import BaseRepository


class MediaRepository(BaseRepository[Media]):
    """미디어 테이블 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Media)

    async def get_with_files(self, db: AsyncSession, media_id: int) -> Media | None:
        result = await db.execute(
            select(Media)
            .options(selectinload(Media.files))
            .where(Media.id == media_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def list_by_community(self, db: AsyncSession, community_id: int) -> Sequence[Media]:
        query: Select = (
            select(Media)
            .options(selectinload(Media.files))
            .where(Media.community_id == community_id)
            .order_by(Media.created_at.desc(), Media.id.desc())
        )
        result = await db.execute(query)
        return result.scalars().all()

    async def add_files(self, db: AsyncSession, media_id: int, file_urls: list[str]) -> None:
        db.add_all([MediaFile(media_id=media_id, file_url=url) for url in file_urls])
        await db.flush()

    async def delete_with_files(self, db: AsyncSession, media_id: int) -> None:
        for statement in (
            delete(MediaFile).where(MediaFile.media_id == media_id),
            delete(Media).where(Media.id == media_id),
        ):
            await db.execute(statement.execution_options(synchronize_session=False))
        await db.flush()


class LiveRepository(BaseRepository[Live]):
    """라이브 테이블 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Live)

    async def list_by_community(self, db: AsyncSession, community_id: int) -> Sequence[Live]:
        """커뮤니티 라이브 목록 (최신 시작순, most recent first)."""
        return await self.get_all(
            db,
            filters={"community_id": community_id},
            order_by=Live.started_at.desc(),
        )


# 싱글턴 인스턴스 - Singleton instances
media_repository: MediaRepository = MediaRepository()
live_repository: LiveRepository = LiveRepository()
