"""사용자 서비스 — 내 정보 조회/수정/탈퇴 비즈니스 로직.

User Service — Business logic for the caller's own profile.
"""

from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User
from app.repositories.auth_repository import auth_repository
from app.repositories.user_repository import user_repository
from app.schemas.user import UserResponse, UserUpdate
from app.services.role_service import AuthContext
from app.utils.exceptions import BadRequestError, NotFoundError
from app.utils.messages import MESSAGES
from app.utils.password import hash_password
from app.utils.response import ApiResponse, create_response


class UserService:
    """사용자 프로필 서비스."""

    def to_response(self, user: User) -> UserResponse:
        return UserResponse(
            id=user.id,
            name=user.name,
            email=user.email,
            profile_image=user.profile_image,
            role=user.role,
            created_at=user.created_at,
        )

    async def _get_self(self, db: AsyncSession, ctx: AuthContext) -> User:
        user: User | None = await user_repository.get_active(db, ctx.user_id)
        if user is None:
            raise NotFoundError(MESSAGES["AUTH"]["TOKEN"]["USER_NOT_FOUND"])
        return user

    async def get_me(self, db: AsyncSession, ctx: AuthContext) -> ApiResponse:
        user = await self._get_self(db, ctx)
        return create_response(200, MESSAGES["USER"]["FIND_ME"]["SUCCEED"], self.to_response(user))

    async def update_me(
        self,
        db: AsyncSession,
        ctx: AuthContext,
        data: UserUpdate,
    ) -> ApiResponse:
        """내 정보를 수정합니다 (부분 업데이트).

        Update name, profile image and/or password. Only fields present in
        the request body are changed.

        Raises:
            BadRequestError: 수정할 필드가 없음 (Empty update body)
        """
        update_data = data.model_dump(exclude_unset=True)
        if not update_data:
            raise BadRequestError(MESSAGES["USER"]["UPDATE"]["BAD_REQUEST"])

        password = update_data.pop("password", None)
        if password is not None:
            update_data["password_hash"] = hash_password(password)
        if update_data.get("name", "") is None:
            # 이름은 비울 수 없음 (Name cannot be cleared)
            update_data.pop("name")

        user = await self._get_self(db, ctx)
        user = await user_repository.update(db, user.id, update_data)
        return create_response(200, MESSAGES["USER"]["UPDATE"]["SUCCEED"], self.to_response(user))

    async def delete_me(self, db: AsyncSession, ctx: AuthContext) -> ApiResponse:
        """회원 탈퇴 — deleted_at 설정 후 모든 리프레시 토큰을 폐기합니다.

        Soft delete: the row stays so authored content keeps its references.
        """
        user = await self._get_self(db, ctx)
        await user_repository.update(db, user.id, {"deleted_at": datetime.now(timezone.utc)})
        await auth_repository.delete_user_refresh_tokens(db, user.id)
        return create_response(200, MESSAGES["USER"]["REMOVE"]["SUCCEED"])


# 싱글턴 인스턴스 - Singleton instance
user_service: UserService = UserService()
