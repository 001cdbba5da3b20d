"""공지사항 서비스 — 커뮤니티 공지 CRUD 비즈니스 로직.

Notice Service — Community notices, writable by the community's managers
and platform admins, readable by anyone.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.database import transaction
from app.models.notice import Notice
from app.repositories.notice_repository import notice_repository
from app.schemas.notice import NoticeCreate, NoticeImageResponse, NoticeResponse, NoticeUpdate
from app.services.community_service import community_service
from app.services.role_service import AuthContext
from app.utils.exceptions import NotFoundError
from app.utils.messages import MESSAGES
from app.utils.response import ApiResponse, create_response


class NoticeService:
    """공지사항 서비스."""

    def to_response(self, notice: Notice) -> NoticeResponse:
        return NoticeResponse(
            notice_id=notice.id,
            community_id=notice.community_id,
            community_user_id=notice.community_user_id,
            title=notice.title,
            content=notice.content,
            notice_images=[
                NoticeImageResponse(notice_image_id=image.id, notice_image_url=image.image_url)
                for image in notice.images
            ],
            created_at=notice.created_at,
            updated_at=notice.updated_at,
        )

    async def _get_or_404(self, db: AsyncSession, notice_id: int) -> Notice:
        notice: Notice | None = await notice_repository.get_with_images(db, notice_id)
        if notice is None:
            raise NotFoundError(MESSAGES["NOTICE"]["FIND_ONE"]["NOT_FOUND"])
        return notice

    async def create(
        self,
        db: AsyncSession,
        ctx: AuthContext,
        community_id: int,
        data: NoticeCreate,
    ) -> ApiResponse:
        """공지사항을 작성합니다 (커뮤니티 매니저 또는 관리자).

        Raises:
            NotFoundError: 커뮤니티 없음
            PermissionDeniedError: 매니저/관리자가 아님
        """
        await community_service.get_or_404(db, community_id)
        ctx.require_manager(community_id, MESSAGES["NOTICE"]["CREATE"]["UNAUTHORIZED"])

        async with transaction(db):
            notice = await notice_repository.create(
                db,
                {
                    "community_id": community_id,
                    # 관리자가 가입하지 않은 커뮤니티면 작성자 없음 (No author identity for non-member admins)
                    "community_user_id": ctx.community_user_id_in(community_id),
                    "title": data.title,
                    "content": data.content,
                },
            )
            if data.notice_image_url:
                await notice_repository.add_images(db, notice.id, data.notice_image_url)

        notice = await self._get_or_404(db, notice.id)
        return create_response(201, MESSAGES["NOTICE"]["CREATE"]["SUCCEED"], self.to_response(notice))

    async def find_all(self, db: AsyncSession, community_id: int) -> ApiResponse:
        await community_service.get_or_404(db, community_id)
        notices = await notice_repository.list_by_community(db, community_id)
        return create_response(
            200,
            MESSAGES["NOTICE"]["FIND_ALL"]["SUCCEED"],
            [self.to_response(n) for n in notices],
        )

    async def find_one(self, db: AsyncSession, notice_id: int) -> ApiResponse:
        notice = await self._get_or_404(db, notice_id)
        return create_response(200, MESSAGES["NOTICE"]["FIND_ONE"]["SUCCEED"], self.to_response(notice))

    async def update(
        self,
        db: AsyncSession,
        ctx: AuthContext,
        notice_id: int,
        data: NoticeUpdate,
    ) -> ApiResponse:
        """공지사항을 수정합니다 (부분 업데이트).

        Raises:
            NotFoundError: 공지 없음
            PermissionDeniedError: 매니저/관리자가 아님
        """
        notice = await self._get_or_404(db, notice_id)
        ctx.require_manager(notice.community_id, MESSAGES["NOTICE"]["UPDATE"]["UNAUTHORIZED"])

        update_data = {k: v for k, v in data.model_dump(exclude_unset=True).items() if v is not None}
        if update_data:
            await notice_repository.update(db, notice_id, update_data)

        notice = await self._get_or_404(db, notice_id)
        return create_response(200, MESSAGES["NOTICE"]["UPDATE"]["SUCCEED"], self.to_response(notice))

    async def remove(
        self,
        db: AsyncSession,
        ctx: AuthContext,
        notice_id: int,
    ) -> ApiResponse:
        notice = await self._get_or_404(db, notice_id)
        ctx.require_manager(notice.community_id, MESSAGES["NOTICE"]["REMOVE"]["UNAUTHORIZED"])

        async with transaction(db):
            await notice_repository.delete_with_images(db, notice_id)
        return create_response(200, MESSAGES["NOTICE"]["REMOVE"]["SUCCEED"])


# 싱글턴 인스턴스 - Singleton instance
notice_service: NoticeService = NoticeService()
