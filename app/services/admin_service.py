"""관리자 서비스 — 아티스트/매니저 권한 부여 및 회수.

Admin Service — Grants and revokes the per-community artist and manager
roles. Platform admins only.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.community import CommunityUser
from app.repositories.base import BaseRepository
from app.repositories.community_repository import (
    artist_repository,
    community_user_repository,
    manager_repository,
)
from app.schemas.community import RoleGrantResponse
from app.services.role_service import AuthContext
from app.utils.exceptions import DuplicateError, NotFoundError
from app.utils.messages import MESSAGES
from app.utils.response import ApiResponse, create_response

# 역할 키 → 레포지토리 (Role key to repository)
_ROLE_REPOSITORIES: dict[str, BaseRepository] = {
    "ARTIST": artist_repository,
    "MANAGER": manager_repository,
}


class AdminService:
    """관리자 권한 관리 서비스."""

    async def _get_community_user(self, db: AsyncSession, community_user_id: int) -> CommunityUser:
        community_user: CommunityUser | None = await community_user_repository.get_by_id(db, community_user_id)
        if community_user is None:
            raise NotFoundError(MESSAGES["ADMIN"]["ROLE"]["NOT_FOUND"])
        return community_user

    async def _grant(
        self,
        db: AsyncSession,
        ctx: AuthContext,
        community_user_id: int,
        role_key: str,
    ) -> ApiResponse:
        ctx.require_admin()
        community_user = await self._get_community_user(db, community_user_id)
        repository = _ROLE_REPOSITORIES[role_key]

        if await repository.get_by_community_user(db, community_user.id) is not None:
            raise DuplicateError(MESSAGES["ADMIN"][role_key]["DUPLICATE"])

        row = await repository.create(
            db,
            {"community_user_id": community_user.id, "community_id": community_user.community_id},
        )
        return create_response(
            201,
            MESSAGES["ADMIN"][role_key]["GRANT"],
            RoleGrantResponse(id=row.id, community_user_id=row.community_user_id, community_id=row.community_id),
        )

    async def _revoke(
        self,
        db: AsyncSession,
        ctx: AuthContext,
        community_user_id: int,
        role_key: str,
    ) -> ApiResponse:
        ctx.require_admin()
        await self._get_community_user(db, community_user_id)
        repository = _ROLE_REPOSITORIES[role_key]

        row = await repository.get_by_community_user(db, community_user_id)
        if row is None:
            raise NotFoundError(MESSAGES["ADMIN"][role_key]["NOT_FOUND"])
        await repository.delete(db, row.id)
        return create_response(200, MESSAGES["ADMIN"][role_key]["REVOKE"])

    async def grant_artist(self, db: AsyncSession, ctx: AuthContext, community_user_id: int) -> ApiResponse:
        """아티스트 권한을 부여합니다.

        Raises:
            PermissionDeniedError: 관리자가 아님
            NotFoundError: 커뮤니티 사용자 없음
            DuplicateError: 이미 아티스트
        """
        return await self._grant(db, ctx, community_user_id, "ARTIST")

    async def revoke_artist(self, db: AsyncSession, ctx: AuthContext, community_user_id: int) -> ApiResponse:
        return await self._revoke(db, ctx, community_user_id, "ARTIST")

    async def grant_manager(self, db: AsyncSession, ctx: AuthContext, community_user_id: int) -> ApiResponse:
        """매니저 권한을 부여합니다.

        Raises:
            PermissionDeniedError: 관리자가 아님
            NotFoundError: 커뮤니티 사용자 없음
            DuplicateError: 이미 매니저
        """
        return await self._grant(db, ctx, community_user_id, "MANAGER")

    async def revoke_manager(self, db: AsyncSession, ctx: AuthContext, community_user_id: int) -> ApiResponse:
        return await self._revoke(db, ctx, community_user_id, "MANAGER")


# 싱글턴 인스턴스 - Singleton instance
admin_service: AdminService = AdminService()
