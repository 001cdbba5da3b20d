"""FastAPI 의존성 주입 모듈 — 인증 및 요청 인가 컨텍스트.

FastAPI dependency injection module — Authentication and the per-request
authorization context.

Authentication Flow:
    1. 클라이언트가 Authorization: Bearer <token> 헤더를 전송
       (Client sends Authorization: Bearer <token> header)
    2. HTTPBearer가 토큰을 추출 (HTTPBearer extracts the token)
    3. decode_token()이 JWT를 검증하고 페이로드를 반환
       (decode_token verifies JWT and returns payload)
    4. 페이로드의 "sub" 필드로 DB에서 탈퇴하지 않은 사용자를 조회
       (Active user is fetched from DB using payload "sub" field)
    5. role_service가 가입 커뮤니티별 역할로 AuthContext를 구성
       (role_service builds the AuthContext from per-community roles)
"""

from typing import Annotated

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.user import User
from app.repositories.user_repository import user_repository
from app.services.role_service import AuthContext, role_service
from app.utils.exceptions import UnauthorizedError
from app.utils.jwt import decode_token
from app.utils.messages import MESSAGES

# HTTP Bearer 토큰 추출기 - 헤더가 없으면 403 대신 401을 직접 반환
# (Missing header is reported as 401 by get_current_user, not 403)
security: HTTPBearer = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> User:
    """JWT 토큰에서 현재 인증된 사용자를 추출합니다.

    Decode the access token from the Authorization header and return the
    authenticated, non-deleted user.

    Args:
        credentials: HTTP Bearer 토큰 자격 증명 (Bearer token credentials from header)
        db: 비동기 DB 세션 (Async database session)

    Returns:
        User: 인증된 사용자 ORM 인스턴스 (Authenticated user ORM instance)

    Raises:
        UnauthorizedError: 토큰 누락/만료/손상, 또는 탈퇴한 사용자
                           (Missing, expired or invalid token, or deleted user)
    """
    if credentials is None:
        raise UnauthorizedError(MESSAGES["AUTH"]["TOKEN"]["INVALID"])
    try:
        payload: dict = decode_token(credentials.credentials)
    except jwt.InvalidTokenError:
        raise UnauthorizedError(MESSAGES["AUTH"]["TOKEN"]["INVALID"])

    # 리프레시 토큰을 액세스 토큰으로 사용하는 것을 거부 (Reject refresh tokens used as access tokens)
    if payload.get("type") != "access":
        raise UnauthorizedError(MESSAGES["AUTH"]["TOKEN"]["INVALID"])
    try:
        user_id = int(payload["sub"])
    except (KeyError, TypeError, ValueError):
        raise UnauthorizedError(MESSAGES["AUTH"]["TOKEN"]["INVALID"])

    user: User | None = await user_repository.get_active(db, user_id)
    if user is None:
        raise UnauthorizedError(MESSAGES["AUTH"]["TOKEN"]["USER_NOT_FOUND"])
    return user


async def get_auth_context(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> AuthContext:
    """요청 단위 AuthContext를 구성합니다 (Built once per request)."""
    return await role_service.build_context(db, current_user)


# 라우터용 타입 별칭 - Annotated aliases used by routers
DbSession = Annotated[AsyncSession, Depends(get_db)]
CurrentContext = Annotated[AuthContext, Depends(get_auth_context)]
