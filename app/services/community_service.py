"""커뮤니티 서비스 — 커뮤니티 CRUD, 가입, 삭제 정리 비즈니스 로직.

Community Service — Community CRUD, joining, and the explicit cleanup that
runs when a community is deleted.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.database import transaction
from app.models.community import Community, CommunityUser
from app.repositories.community_repository import community_repository, community_user_repository
from app.schemas.community import (
    CommunityCreate,
    CommunityResponse,
    CommunityUpdate,
    CommunityUserResponse,
)
from app.services.role_service import AuthContext
from app.utils.exceptions import BadRequestError, DuplicateError, NotFoundError
from app.utils.messages import MESSAGES
from app.utils.response import ApiResponse, create_response

# 요청 필드명 → 모델 컬럼명 (Request field name to model column)
_UPDATE_COLUMNS: dict[str, str] = {
    "community_name": "name",
    "membership_price": "membership_price",
    "community_logo_image": "logo_image",
    "community_cover_image": "cover_image",
}


class CommunityService:
    """커뮤니티 서비스."""

    def to_response(self, community: Community) -> CommunityResponse:
        return CommunityResponse(
            community_id=community.id,
            community_name=community.name,
            membership_price=community.membership_price,
            community_logo_image=community.logo_image,
            community_cover_image=community.cover_image,
            created_at=community.created_at,
        )

    async def get_or_404(self, db: AsyncSession, community_id: int) -> Community:
        community: Community | None = await community_repository.get_by_id(db, community_id)
        if community is None:
            raise NotFoundError(MESSAGES["COMMUNITY"]["FIND_ONE"]["NOT_FOUND"])
        return community

    async def create(
        self,
        db: AsyncSession,
        ctx: AuthContext,
        data: CommunityCreate,
    ) -> ApiResponse:
        """커뮤니티를 생성합니다 (관리자 전용).

        Raises:
            PermissionDeniedError: 관리자가 아님 (Caller is not a platform admin)
            DuplicateError: 이미 존재하는 이름 (Name already taken)
        """
        ctx.require_admin(MESSAGES["COMMUNITY"]["CREATE"]["UNAUTHORIZED"])
        if await community_repository.get_by_name(db, data.community_name) is not None:
            raise DuplicateError(MESSAGES["COMMUNITY"]["CREATE"]["DUPLICATE"])

        community = await community_repository.create(
            db,
            {
                "name": data.community_name,
                "membership_price": data.membership_price,
                "logo_image": data.community_logo_image,
                "cover_image": data.community_cover_image,
            },
        )
        return create_response(201, MESSAGES["COMMUNITY"]["CREATE"]["SUCCEED"], self.to_response(community))

    async def find_all(self, db: AsyncSession) -> ApiResponse:
        communities = await community_repository.list_all(db)
        return create_response(
            200,
            MESSAGES["COMMUNITY"]["FIND_ALL"]["SUCCEED"],
            [self.to_response(c) for c in communities],
        )

    async def find_one(self, db: AsyncSession, community_id: int) -> ApiResponse:
        community = await self.get_or_404(db, community_id)
        return create_response(200, MESSAGES["COMMUNITY"]["FIND_ONE"]["SUCCEED"], self.to_response(community))

    async def find_my(self, db: AsyncSession, ctx: AuthContext) -> ApiResponse:
        """내가 가입한 커뮤니티 목록 (Communities the caller has joined)."""
        communities = await community_repository.list_joined(db, ctx.user_id)
        return create_response(
            200,
            MESSAGES["COMMUNITY"]["FIND_MY"]["SUCCEED"],
            [self.to_response(c) for c in communities],
        )

    async def join(
        self,
        db: AsyncSession,
        ctx: AuthContext,
        community_id: int,
        nickname: str,
    ) -> ApiResponse:
        """커뮤니티에 가입합니다.

        Create the caller's CommunityUser identity in the community.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            ctx: 요청 인가 컨텍스트 (Request AuthContext)
            community_id: 가입할 커뮤니티 ID
            nickname: 커뮤니티 닉네임

        Returns:
            ApiResponse: data = CommunityUserResponse

        Raises:
            NotFoundError: 커뮤니티 없음
            DuplicateError: 이미 가입함 (Already joined)
            BadRequestError: 빈 닉네임 (Blank nickname)
        """
        await self.get_or_404(db, community_id)
        if ctx.community_user_id_in(community_id) is not None or await community_user_repository.exists(
            db, {"user_id": ctx.user_id, "community_id": community_id}
        ):
            raise DuplicateError(MESSAGES["COMMUNITY"]["JOIN"]["DUPLICATE"])
        if not nickname or not nickname.strip():
            raise BadRequestError(MESSAGES["COMMUNITY"]["JOIN"]["BAD_REQUEST"])

        community_user: CommunityUser = await community_user_repository.create(
            db,
            {"user_id": ctx.user_id, "community_id": community_id, "nickname": nickname.strip()},
        )
        return create_response(
            201,
            MESSAGES["COMMUNITY"]["JOIN"]["SUCCEED"],
            CommunityUserResponse(
                community_user_id=community_user.id,
                user_id=community_user.user_id,
                community_id=community_user.community_id,
                nick_name=community_user.nickname,
                created_at=community_user.created_at,
            ),
        )

    async def update(
        self,
        db: AsyncSession,
        ctx: AuthContext,
        community_id: int,
        data: CommunityUpdate,
    ) -> ApiResponse:
        """커뮤니티 정보를 수정합니다 (해당 커뮤니티 매니저 또는 관리자).

        Raises:
            NotFoundError: 커뮤니티 없음
            PermissionDeniedError: 매니저/관리자가 아님
            DuplicateError: 다른 커뮤니티와 이름 중복
        """
        community = await self.get_or_404(db, community_id)
        ctx.require_manager(community_id, MESSAGES["COMMUNITY"]["UPDATE"]["UNAUTHORIZED"])

        update_data = {
            _UPDATE_COLUMNS[key]: value
            for key, value in data.model_dump(exclude_unset=True).items()
            if key in _UPDATE_COLUMNS
        }
        if update_data.get("name") is None:
            update_data.pop("name", None)
        if update_data.get("membership_price", 0) is None:
            update_data.pop("membership_price")

        new_name = update_data.get("name")
        if new_name is not None and new_name != community.name:
            if await community_repository.get_by_name(db, new_name) is not None:
                raise DuplicateError(MESSAGES["COMMUNITY"]["CREATE"]["DUPLICATE"])

        community = await community_repository.update(db, community_id, update_data)
        return create_response(200, MESSAGES["COMMUNITY"]["UPDATE"]["SUCCEED"], self.to_response(community))

    async def remove(
        self,
        db: AsyncSession,
        ctx: AuthContext,
        community_id: int,
    ) -> ApiResponse:
        """커뮤니티를 삭제합니다 (관리자 전용).

        Every dependent row (community users, posts with their images,
        comments and likes, memberships, roles, notices, media, lives and
        the storefront) is deleted inside one transaction before the
        community row itself.

        Raises:
            PermissionDeniedError: 관리자가 아님
            NotFoundError: 커뮤니티 없음
        """
        ctx.require_admin(MESSAGES["COMMUNITY"]["REMOVE"]["UNAUTHORIZED"])
        await self.get_or_404(db, community_id)

        async with transaction(db):
            await community_repository.delete_with_dependents(db, community_id)

        return create_response(200, MESSAGES["COMMUNITY"]["REMOVE"]["SUCCEED"])


# 싱글턴 인스턴스 - Singleton instance
community_service: CommunityService = CommunityService()
