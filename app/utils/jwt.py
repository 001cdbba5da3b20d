"""JWT 토큰 생성 및 검증 유틸리티 모듈.

JWT token creation and verification utility module.

JWT Payload Structure:
    {
        "sub": "42",                # 사용자 ID 문자열 (User id as string)
        "role": "User"|"Admin",     # 플랫폼 역할 (Platform role)
        "exp": 1234567890,          # 만료 시간 UNIX timestamp (Expiration)
        "type": "access"|"refresh"  # 토큰 유형 (Token type discriminator)
    }

커뮤니티 역할(ARTIST/MANAGER 등)은 토큰에 담지 않고 요청마다 DB에서 해석합니다.
Community roles are never carried in the token; they are resolved per request.
"""

from datetime import datetime, timedelta, timezone
from typing import Any
import uuid

import jwt

from app.config import settings


def build_token_payload(user_id: int, role: str) -> dict[str, Any]:
    """사용자 정보로 JWT 기본 페이로드를 구성합니다.

    Args:
        user_id: 사용자 ID (User id)
        role: 플랫폼 역할 값 (Platform role value)

    Returns:
        dict[str, Any]: {"sub", "role"} 페이로드
    """
    return {"sub": str(user_id), "role": role}


def _encode(data: dict[str, Any], expires_delta: timedelta, token_type: str) -> str:
    to_encode: dict[str, Any] = data.copy()
    expire: datetime = datetime.now(timezone.utc) + expires_delta
    # jti: 같은 초에 발급된 리프레시 토큰도 서로 달라야 함 (Unique even within the same second)
    to_encode.update({"exp": expire, "type": token_type, "jti": uuid.uuid4().hex})
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def create_access_token(data: dict[str, Any]) -> str:
    """JWT 액세스 토큰을 생성합니다.

    Generate a JWT access token, valid for JWT_ACCESS_TOKEN_EXPIRE_MINUTES.

    Args:
        data: JWT 페이로드 데이터 (build_token_payload 결과)

    Returns:
        str: 인코딩된 JWT 문자열 (Encoded JWT token string)
    """
    return _encode(data, timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES), "access")


def create_refresh_token(data: dict[str, Any]) -> str:
    """JWT 리프레시 토큰을 생성합니다.

    Generate a JWT refresh token, valid for JWT_REFRESH_TOKEN_EXPIRE_DAYS.
    발급된 토큰은 refresh_tokens 테이블에 저장되어 회전/폐기됩니다.
    Issued tokens are stored server side so they can be rotated and revoked.
    """
    return _encode(data, timedelta(days=settings.JWT_REFRESH_TOKEN_EXPIRE_DAYS), "refresh")


def decode_token(token: str) -> dict[str, Any]:
    """JWT 토큰을 디코딩하고 검증합니다.

    Args:
        token: JWT 토큰 문자열 (Encoded JWT token string)

    Returns:
        dict[str, Any]: 디코딩된 페이로드 딕셔너리 (Decoded payload dictionary)

    Raises:
        jwt.ExpiredSignatureError: 토큰 만료 시 (When token has expired)
        jwt.InvalidTokenError: 유효하지 않은 토큰 (When token is invalid)
    """
    return jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
