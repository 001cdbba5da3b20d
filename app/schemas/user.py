"""사용자 프로필 관련 Pydantic 요청/응답 스키마 정의.

User profile Pydantic request/response schema definitions.
The password hash never appears in any response schema.
"""

from datetime import datetime

from pydantic import Field

from app.schemas.auth import StrongPassword
from app.schemas.common import CamelModel


class UserResponse(CamelModel):
    """사용자 응답 스키마.

    Attributes:
        id: 사용자 ID
        name: 이름
        email: 이메일
        profile_image: 프로필 이미지 URL
        role: 전역 역할 ("User" / "Admin")
        created_at: 가입 일시
    """

    id: int
    name: str
    email: str
    profile_image: str | None
    role: str
    created_at: datetime


class UserUpdate(CamelModel):
    """내 정보 수정 요청 스키마 (부분 업데이트).

    Only provided fields are updated; omitted fields remain unchanged.
    """

    name: str | None = Field(default=None, min_length=1, max_length=100)
    profile_image: str | None = None
    password: StrongPassword | None = None
