"""미디어/라이브 서비스 — 미디어 갤러리와 라이브 목록.

Media Service — Media galleries (managers and admins write, anyone reads)
and live listings (artists of the community and admins open and close them).
"""

import secrets
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from app.database import transaction
from app.models.media import Live, Media
from app.repositories.community_repository import artist_repository
from app.repositories.media_repository import live_repository, media_repository
from app.schemas.media import LiveCreate, LiveResponse, MediaCreate, MediaResponse
from app.services.community_service import community_service
from app.services.role_service import AuthContext
from app.utils.exceptions import BadRequestError, NotFoundError, PermissionDeniedError
from app.utils.messages import MESSAGES
from app.utils.response import ApiResponse, create_response


class MediaService:
    """미디어 갤러리 서비스."""

    def to_response(self, media: Media) -> MediaResponse:
        return MediaResponse(
            media_id=media.id,
            community_id=media.community_id,
            title=media.title,
            content=media.content,
            thumbnail_image=media.thumbnail_image,
            media_files=[f.file_url for f in media.files],
            created_at=media.created_at,
        )

    async def _get_or_404(self, db: AsyncSession, media_id: int) -> Media:
        media: Media | None = await media_repository.get_with_files(db, media_id)
        if media is None:
            raise NotFoundError(MESSAGES["MEDIA"]["FIND_ONE"]["NOT_FOUND"])
        return media

    async def create(
        self,
        db: AsyncSession,
        ctx: AuthContext,
        community_id: int,
        data: MediaCreate,
    ) -> ApiResponse:
        """미디어를 등록합니다 (커뮤니티 매니저 또는 관리자).

        Raises:
            NotFoundError: 커뮤니티 없음
            PermissionDeniedError: 매니저/관리자가 아님
        """
        await community_service.get_or_404(db, community_id)
        ctx.require_manager(community_id, MESSAGES["MEDIA"]["CREATE"]["UNAUTHORIZED"])

        async with transaction(db):
            media = await media_repository.create(
                db,
                {
                    "community_id": community_id,
                    "title": data.title,
                    "content": data.content,
                    "thumbnail_image": data.thumbnail_image,
                },
            )
            if data.media_files:
                await media_repository.add_files(db, media.id, data.media_files)

        media = await self._get_or_404(db, media.id)
        return create_response(201, MESSAGES["MEDIA"]["CREATE"]["SUCCEED"], self.to_response(media))

    async def find_all(self, db: AsyncSession, community_id: int) -> ApiResponse:
        await community_service.get_or_404(db, community_id)
        items = await media_repository.list_by_community(db, community_id)
        return create_response(200, MESSAGES["MEDIA"]["FIND_ALL"]["SUCCEED"], [self.to_response(m) for m in items])

    async def find_one(self, db: AsyncSession, media_id: int) -> ApiResponse:
        media = await self._get_or_404(db, media_id)
        return create_response(200, MESSAGES["MEDIA"]["FIND_ONE"]["SUCCEED"], self.to_response(media))

    async def remove(self, db: AsyncSession, ctx: AuthContext, media_id: int) -> ApiResponse:
        media = await self._get_or_404(db, media_id)
        ctx.require_manager(media.community_id, MESSAGES["MEDIA"]["REMOVE"]["UNAUTHORIZED"])

        async with transaction(db):
            await media_repository.delete_with_files(db, media_id)
        return create_response(200, MESSAGES["MEDIA"]["REMOVE"]["SUCCEED"])


class LiveService:
    """라이브 목록 서비스 — 스트리밍 자체는 외부 서비스가 담당합니다.

    Live listing service; the stream itself is served elsewhere.
    """

    def to_response(self, live: Live) -> LiveResponse:
        return LiveResponse(
            live_id=live.id,
            community_id=live.community_id,
            artist_id=live.artist_id,
            title=live.title,
            stream_key=live.stream_key,
            started_at=live.started_at,
            ended_at=live.ended_at,
        )

    async def start(
        self,
        db: AsyncSession,
        ctx: AuthContext,
        community_id: int,
        data: LiveCreate,
    ) -> ApiResponse:
        """라이브를 시작합니다 (해당 커뮤니티 아티스트 또는 관리자).

        Raises:
            NotFoundError: 커뮤니티 없음
            PermissionDeniedError: 아티스트/관리자가 아님
        """
        await community_service.get_or_404(db, community_id)

        artist_id: int | None = None
        community_user_id = ctx.community_user_id_in(community_id)
        if community_user_id is not None:
            artist = await artist_repository.get_by_community_user(db, community_user_id)
            artist_id = artist.id if artist is not None else None
        if artist_id is None and not ctx.is_admin:
            raise PermissionDeniedError(MESSAGES["LIVE"]["CREATE"]["UNAUTHORIZED"])

        live = await live_repository.create(
            db,
            {
                "community_id": community_id,
                "artist_id": artist_id,
                "title": data.title,
                "stream_key": secrets.token_urlsafe(24),
            },
        )
        return create_response(201, MESSAGES["LIVE"]["CREATE"]["SUCCEED"], self.to_response(live))

    async def find_all(self, db: AsyncSession, community_id: int) -> ApiResponse:
        await community_service.get_or_404(db, community_id)
        lives = await live_repository.list_by_community(db, community_id)
        return create_response(200, MESSAGES["LIVE"]["FIND_ALL"]["SUCCEED"], [self.to_response(l) for l in lives])

    async def end(self, db: AsyncSession, ctx: AuthContext, live_id: int) -> ApiResponse:
        """라이브를 종료합니다 (방송한 아티스트 또는 관리자).

        Raises:
            NotFoundError: 라이브 없음
            PermissionDeniedError: 방송한 아티스트/관리자가 아님
            BadRequestError: 이미 종료됨
        """
        live: Live | None = await live_repository.get_by_id(db, live_id)
        if live is None:
            raise NotFoundError(MESSAGES["LIVE"]["END"]["NOT_FOUND"])

        if not ctx.is_admin:
            community_user_id = ctx.community_user_id_in(live.community_id)
            artist = (
                await artist_repository.get_by_community_user(db, community_user_id)
                if community_user_id is not None
                else None
            )
            if artist is None or artist.id != live.artist_id:
                raise PermissionDeniedError(MESSAGES["LIVE"]["END"]["UNAUTHORIZED"])
        if live.ended_at is not None:
            raise BadRequestError(MESSAGES["LIVE"]["END"]["ALREADY_ENDED"])

        live = await live_repository.update(db, live_id, {"ended_at": datetime.now(timezone.utc)})
        return create_response(200, MESSAGES["LIVE"]["END"]["SUCCEED"], self.to_response(live))


# 싱글턴 인스턴스 - Singleton instances
media_service: MediaService = MediaService()
live_service: LiveService = LiveService()
