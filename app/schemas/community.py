"""커뮤니티 관련 Pydantic 요청/응답 스키마 정의.

Community, join and role-grant schema definitions.
"""

from datetime import datetime

from pydantic import Field

from app.schemas.common import CamelModel


class CommunityCreate(CamelModel):
    """커뮤니티 생성 요청 스키마 (관리자 전용).

    Attributes:
        community_name: 커뮤니티 이름 (unique)
        membership_price: 멤버십 가격 (KRW, >= 0)
        community_logo_image: 로고 이미지 URL
        community_cover_image: 커버 이미지 URL
    """

    community_name: str = Field(min_length=1, max_length=100)
    membership_price: int = Field(default=0, ge=0)
    community_logo_image: str | None = None
    community_cover_image: str | None = None


class CommunityUpdate(CamelModel):
    """커뮤니티 수정 요청 스키마 (부분 업데이트)."""

    community_name: str | None = Field(default=None, min_length=1, max_length=100)
    membership_price: int | None = Field(default=None, ge=0)
    community_logo_image: str | None = None
    community_cover_image: str | None = None


class CommunityResponse(CamelModel):
    """커뮤니티 응답 스키마."""

    community_id: int
    community_name: str
    membership_price: int
    community_logo_image: str | None = None
    community_cover_image: str | None = None
    created_at: datetime


class JoinCommunityRequest(CamelModel):
    """커뮤니티 가입 요청 스키마."""

    nick_name: str  # 커뮤니티에서 사용할 닉네임 (Nickname used inside the community)


class CommunityUserResponse(CamelModel):
    """커뮤니티 사용자 응답 스키마."""

    community_user_id: int
    user_id: int
    community_id: int
    nick_name: str
    created_at: datetime


class RoleGrantResponse(CamelModel):
    """아티스트/매니저 권한 응답 스키마 — Artist or Manager grant."""

    id: int
    community_user_id: int
    community_id: int
