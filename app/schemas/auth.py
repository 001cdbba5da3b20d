"""인증 관련 Pydantic 요청/응답 스키마 정의.

Authentication-related Pydantic request/response schema definitions.
Covers sign-up, sign-in, token issuance/refresh and sign-out.
"""

import re
from typing import Annotated

from pydantic import AfterValidator, Field

from app.schemas.common import CamelModel

# 이메일 형식 - 최소 형식 검사 (Minimal shape check: local@domain.tld)
_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def validate_email(value: str) -> str:
    """이메일 형식을 검사하고 소문자로 정규화합니다."""
    value = value.strip().lower()
    if not _EMAIL_PATTERN.match(value):
        raise ValueError("이메일 형식에 맞지 않습니다.")
    return value


def validate_strong_password(value: str) -> str:
    """비밀번호 강도를 검사합니다.

    영문 대/소문자, 숫자, 특수문자(!@#$%^&*)를 모두 포함한 8자리 이상.
    Requires upper/lower case letters, a digit and a special character,
    at least 8 characters long.
    """
    if (
        len(value) < 8
        or not re.search(r"[a-z]", value)
        or not re.search(r"[A-Z]", value)
        or not re.search(r"\d", value)
        or not re.search(r"[!@#$%^&*]", value)
    ):
        raise ValueError(
            "비밀번호는 영문 알파벳 대,소문자, 숫자, 특수문자(!@#$%^&*)를 포함해서 8자리 이상으로 입력해야 합니다."
        )
    return value


Email = Annotated[str, AfterValidator(validate_email)]
StrongPassword = Annotated[str, AfterValidator(validate_strong_password)]


class SignUpRequest(CamelModel):
    """회원가입 요청 스키마.

    Attributes:
        name: 이름 (Display name)
        email: 이메일 (Login email, unique)
        password: 비밀번호 (Plain text, bcrypt-hashed on server)
        profile_image: 프로필 이미지 URL (Optional profile image URL)
    """

    name: str = Field(min_length=1, max_length=100)
    email: Email
    password: StrongPassword
    profile_image: str | None = None


class SignInRequest(CamelModel):
    """로그인 요청 스키마."""

    email: str  # 로그인 이메일 (Login email)
    password: str  # 평문 비밀번호, 서버에서 bcrypt 해시와 비교 (Compared to bcrypt hash)


class TokenResponse(CamelModel):
    """JWT 토큰 발급 응답 스키마.

    Returned after sign-in or token refresh.

    Attributes:
        access_token: JWT 액세스 토큰 (Short-lived access token)
        refresh_token: JWT 리프레시 토큰 (Long-lived refresh token)
        token_type: 토큰 유형 (Always "bearer")
    """

    access_token: str
    refresh_token: str
    token_type: str = "bearer"


class RefreshRequest(CamelModel):
    """토큰 갱신/로그아웃 요청 스키마."""

    refresh_token: str  # 기존 리프레시 토큰 (Current refresh token)
