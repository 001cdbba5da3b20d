"""좋아요 서비스 — 게시글/댓글 좋아요 상태 변경과 집계.

Like Service — Sets a user's like status on a post or comment and counts
active likes. One row per (user, item, type); unliking flips its status.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.post import ItemType, Like
from app.repositories.like_repository import like_repository
from app.repositories.post_repository import comment_repository, post_repository
from app.schemas.post import LikeResponse
from app.services.role_service import AuthContext
from app.utils.exceptions import NotFoundError
from app.utils.messages import MESSAGES
from app.utils.response import ApiResponse, create_response


class LikeService:
    """좋아요 서비스."""

    async def _item_exists(self, db: AsyncSession, item_id: int, item_type: ItemType) -> bool:
        if item_type == ItemType.POST:
            return await post_repository.exists(db, {"id": item_id})
        return await comment_repository.exists(db, {"id": item_id})

    async def update_like_status(
        self,
        db: AsyncSession,
        ctx: AuthContext,
        item_id: int,
        status: bool,
        item_type: ItemType,
    ) -> ApiResponse:
        """좋아요 상태를 설정합니다 (업서트).

        Upsert the caller's like on a post or comment. Calling it again
        with the same key updates the same row.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            ctx: 요청 인가 컨텍스트
            item_id: 대상 게시글/댓글 ID
            status: True = 좋아요, False = 취소
            item_type: POST / COMMENT

        Returns:
            ApiResponse: data = LikeResponse

        Raises:
            NotFoundError: 대상 없음 (Target item does not exist)
        """
        if not await self._item_exists(db, item_id, item_type):
            raise NotFoundError(MESSAGES["LIKE"]["ITEM"]["NOT_FOUND"])

        like: Like | None = await like_repository.get_by_key(db, ctx.user_id, item_id, item_type.value)
        if like is None:
            like = await like_repository.create(
                db,
                {"user_id": ctx.user_id, "item_id": item_id, "item_type": item_type.value, "status": status},
            )
        else:
            like = await like_repository.update(db, like.id, {"status": status})

        return create_response(
            200,
            MESSAGES["LIKE"]["UPDATE_STATUS"]["SUCCEED"],
            LikeResponse(
                like_id=like.id,
                user_id=like.user_id,
                item_id=like.item_id,
                item_type=like.item_type,
                status=like.status,
            ),
        )

    async def count_likes(self, db: AsyncSession, item_id: int, item_type: ItemType) -> int:
        """status=True 인 좋아요 수 (Unliked rows are not counted)."""
        return await like_repository.count_active(db, item_id, item_type.value)

    async def count_likes_for_items(
        self, db: AsyncSession, item_ids: list[int], item_type: ItemType
    ) -> dict[int, int]:
        """목록 화면용 일괄 집계. 좋아요가 없는 대상은 키가 없습니다."""
        return await like_repository.count_active_for_items(db, item_ids, item_type.value)


# 싱글턴 인스턴스 - Singleton instance
like_service: LikeService = LikeService()
