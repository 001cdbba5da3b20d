"""공지사항 레포지토리 — 공지사항/공지 이미지 쿼리.

Notice Repository — Queries for community notices and their images.
"""

from typing import Sequence

from sqlalchemy import Select, delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.notice import Notice, NoticeImage
from app.repositories.base import BaseRepository


class NoticeRepository(BaseRepository[Notice]):
    """공지사항 테이블 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Notice)

    async def get_with_images(self, db: AsyncSession, notice_id: int) -> Notice | None:
        query: Select = (
            select(Notice)
            .options(selectinload(Notice.images))
            .where(Notice.id == notice_id)
            .execution_options(populate_existing=True)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def list_by_community(self, db: AsyncSession, community_id: int) -> Sequence[Notice]:
        """커뮤니티 공지사항 목록 (최신순, newest first)."""
        query: Select = (
            select(Notice)
            .options(selectinload(Notice.images))
            .where(Notice.community_id == community_id)
            .order_by(Notice.created_at.desc(), Notice.id.desc())
        )
        result = await db.execute(query)
        return result.scalars().all()

    async def add_images(self, db: AsyncSession, notice_id: int, image_urls: list[str]) -> None:
        db.add_all([NoticeImage(notice_id=notice_id, image_url=url) for url in image_urls])
        await db.flush()

    async def delete_with_images(self, db: AsyncSession, notice_id: int) -> None:
        for statement in (
            delete(NoticeImage).where(NoticeImage.notice_id == notice_id),
            delete(Notice).where(Notice.id == notice_id),
        ):
            await db.execute(statement.execution_options(synchronize_session=False))
        await db.flush()


# 싱글턴 인스턴스 - Singleton instance
notice_repository: NoticeRepository = NoticeRepository()
