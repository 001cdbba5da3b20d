"""좋아요 레포지토리 — (사용자, 대상, 유형) 키 기반 조회/집계.

Like Repository — Lookup by the (user, item, type) key and like counts.
"""

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.post import Like
from app.repositories.base import BaseRepository


class LikeRepository(BaseRepository[Like]):
    """좋아요 테이블 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Like)

    async def get_by_key(
        self,
        db: AsyncSession,
        user_id: int,
        item_id: int,
        item_type: str,
    ) -> Like | None:
        result = await db.execute(
            select(Like).where(
                Like.user_id == user_id,
                Like.item_id == item_id,
                Like.item_type == item_type,
            )
        )
        return result.scalar_one_or_none()

    async def count_active(
        self,
        db: AsyncSession,
        item_id: int,
        item_type: str,
    ) -> int:
        """status=True 인 좋아요 수를 집계합니다.

        Count likes with status=True; rows kept after an unlike are ignored.
        """
        query: Select = select(func.count()).select_from(Like).where(
            Like.item_id == item_id,
            Like.item_type == item_type,
            Like.status.is_(True),
        )
        return (await db.execute(query)).scalar() or 0

    async def count_active_for_items(
        self,
        db: AsyncSession,
        item_ids: list[int],
        item_type: str,
    ) -> dict[int, int]:
        """여러 대상의 좋아요 수를 한 번에 집계합니다.

        Returns:
            dict[int, int]: {item_id: like_count}, 좋아요가 없는 대상은 생략
        """
        if not item_ids:
            return {}
        query: Select = (
            select(Like.item_id, func.count())
            .where(
                Like.item_id.in_(item_ids),
                Like.item_type == item_type,
                Like.status.is_(True),
            )
            .group_by(Like.item_id)
        )
        result = await db.execute(query)
        return {item_id: count for item_id, count in result.all()}


# 싱글턴 인스턴스 - Singleton instance
like_repository: LikeRepository = LikeRepository()
