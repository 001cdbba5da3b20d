"""인증 서비스 — 회원가입, 로그인, 토큰 갱신, 로그아웃 비즈니스 로직.

Auth Service — Business logic for sign-up, sign-in, token rotation and
sign-out. Refresh tokens are persisted so they can be rotated and revoked.
"""

from datetime import datetime, timedelta, timezone

import jwt
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.models.token import RefreshToken
from app.models.user import User, UserRole
from app.repositories.auth_repository import auth_repository
from app.repositories.user_repository import user_repository
from app.schemas.auth import RefreshRequest, SignInRequest, SignUpRequest, TokenResponse
from app.services.user_service import user_service
from app.utils.exceptions import DuplicateError, UnauthorizedError
from app.utils.jwt import build_token_payload, create_access_token, create_refresh_token, decode_token
from app.utils.messages import MESSAGES
from app.utils.password import hash_password, verify_password
from app.utils.response import ApiResponse, create_response


class AuthService:
    """인증 관련 비즈니스 로직을 처리하는 서비스.

    Service handling authentication business logic.
    """

    async def _generate_tokens(
        self,
        db: AsyncSession,
        user: User,
    ) -> TokenResponse:
        """액세스 토큰과 리프레시 토큰을 생성합니다.

        Generate an access/refresh token pair and persist the refresh token.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user: 사용자 모델 (User model instance)

        Returns:
            TokenResponse: 토큰 응답 (Token response with access and refresh tokens)
        """
        payload = build_token_payload(user.id, user.role)
        access_token: str = create_access_token(payload)
        refresh_token: str = create_refresh_token(payload)

        expires_at: datetime = datetime.now(timezone.utc) + timedelta(
            days=settings.JWT_REFRESH_TOKEN_EXPIRE_DAYS
        )
        await auth_repository.create_refresh_token(
            db, user_id=user.id, token=refresh_token, expires_at=expires_at
        )

        return TokenResponse(access_token=access_token, refresh_token=refresh_token)

    async def sign_up(
        self,
        db: AsyncSession,
        data: SignUpRequest,
    ) -> ApiResponse:
        """회원가입을 처리합니다.

        Register a new account with the `User` role.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 회원가입 요청 데이터 (Sign-up request data)

        Returns:
            ApiResponse: data = UserResponse

        Raises:
            DuplicateError: 이미 가입된 이메일 (Email already registered)
        """
        if await user_repository.email_exists(db, data.email):
            raise DuplicateError(MESSAGES["AUTH"]["SIGN_UP"]["DUPLICATE"])

        user: User = await user_repository.create(
            db,
            {
                "name": data.name,
                "email": data.email,
                "password_hash": hash_password(data.password),
                "profile_image": data.profile_image,
                "role": UserRole.USER.value,
            },
        )
        return create_response(201, MESSAGES["AUTH"]["SIGN_UP"]["SUCCEED"], user_service.to_response(user))

    async def sign_in(
        self,
        db: AsyncSession,
        data: SignInRequest,
    ) -> ApiResponse:
        """로그인을 처리합니다.

        Raises:
            UnauthorizedError: 잘못된 인증 정보 또는 탈퇴한 계정
                               (Invalid credentials or soft-deleted account)
        """
        user: User | None = await auth_repository.get_user_by_email(db, data.email.strip().lower())
        if user is None or not verify_password(data.password, user.password_hash):
            raise UnauthorizedError(MESSAGES["AUTH"]["SIGN_IN"]["UNAUTHORIZED"])
        if not user.is_active:
            raise UnauthorizedError(MESSAGES["AUTH"]["SIGN_IN"]["UNAUTHORIZED"])

        tokens = await self._generate_tokens(db, user)
        return create_response(200, MESSAGES["AUTH"]["SIGN_IN"]["SUCCEED"], tokens)

    async def refresh(
        self,
        db: AsyncSession,
        data: RefreshRequest,
    ) -> ApiResponse:
        """리프레시 토큰으로 토큰 쌍을 재발급합니다 (회전).

        Rotate the token pair. The presented refresh token is deleted, so
        it cannot be used a second time.

        Raises:
            UnauthorizedError: 알 수 없는/만료된/손상된 토큰 (Unknown, expired or malformed token)
        """
        try:
            payload: dict = decode_token(data.refresh_token)
        except jwt.ExpiredSignatureError:
            raise UnauthorizedError(MESSAGES["AUTH"]["REFRESH"]["EXPIRED"])
        except jwt.InvalidTokenError:
            raise UnauthorizedError(MESSAGES["AUTH"]["REFRESH"]["UNAUTHORIZED"])

        if payload.get("type") != "refresh":
            raise UnauthorizedError(MESSAGES["AUTH"]["REFRESH"]["UNAUTHORIZED"])

        stored: RefreshToken | None = await auth_repository.get_refresh_token(db, data.refresh_token)
        if stored is None:
            raise UnauthorizedError(MESSAGES["AUTH"]["REFRESH"]["UNAUTHORIZED"])

        expires_at = stored.expires_at
        # SQLite는 tz 정보를 보존하지 않음 (Naive timestamps are stored as UTC)
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        if expires_at < datetime.now(timezone.utc):
            await auth_repository.delete_refresh_token(db, data.refresh_token)
            raise UnauthorizedError(MESSAGES["AUTH"]["REFRESH"]["EXPIRED"])

        user: User | None = await user_repository.get_active(db, stored.user_id)
        if user is None:
            raise UnauthorizedError(MESSAGES["AUTH"]["TOKEN"]["USER_NOT_FOUND"])

        await auth_repository.delete_refresh_token(db, data.refresh_token)
        tokens = await self._generate_tokens(db, user)
        return create_response(200, MESSAGES["AUTH"]["REFRESH"]["SUCCEED"], tokens)

    async def sign_out(
        self,
        db: AsyncSession,
        data: RefreshRequest,
    ) -> ApiResponse:
        """로그아웃 — 리프레시 토큰을 폐기합니다. 알 수 없는 토큰도 성공 처리합니다.

        Revoke the refresh token; unknown tokens are treated as already revoked.
        """
        await auth_repository.delete_refresh_token(db, data.refresh_token)
        return create_response(200, MESSAGES["AUTH"]["SIGN_OUT"]["SUCCEED"])


# 싱글턴 인스턴스 - Singleton instance
auth_service: AuthService = AuthService()
