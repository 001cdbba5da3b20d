"""사용자 관련 SQLAlchemy ORM 모델 정의.

User SQLAlchemy ORM model definitions.
A User is a global account; per-community identity and roles live in
CommunityUser / Artist / Manager (see app.models.community).

Tables:
    - users: 사용자 계정 (Global user accounts, soft-deleted via deleted_at)
"""

from datetime import datetime, timezone
from enum import Enum

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class UserRole(str, Enum):
    """플랫폼 전역 역할 — Platform-wide role stored on the user row."""

    USER = "User"
    ADMIN = "Admin"


class User(Base):
    """사용자 모델 — 플랫폼 계정 정보.

    User model — Platform account information.
    Email is globally unique. The password is stored only as a bcrypt hash
    and is never serialized by any response schema.

    Attributes:
        id: 고유 식별자 (Auto-increment primary key)
        name: 이름 (Display name)
        email: 이메일, 로그인 아이디 (Login email, unique)
        password_hash: bcrypt 해시된 비밀번호 (bcrypt-hashed password)
        profile_image: 프로필 이미지 URL (Profile image URL)
        role: 전역 역할 (Global role: "User" or "Admin")
        deleted_at: 탈퇴 일시, NULL이면 활성 (Tombstone timestamp; NULL = active)
        created_at: 생성 일시 UTC (Creation timestamp)
        updated_at: 수정 일시 UTC (Last update timestamp)

    Relationships:
        community_users: 커뮤니티별 가입 정보 (Per-community identities, cascade delete)
        refresh_tokens: 리프레시 토큰 목록 (Active refresh tokens, cascade delete)
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    # 이메일 - 전역 고유 (Globally unique login email)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    # 비밀번호 해시 - 평문 저장 금지 (never store plaintext)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    profile_image: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    role: Mapped[str] = mapped_column(String(20), nullable=False, default=UserRole.USER.value)
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # 관계 - Relationships
    community_users = relationship("CommunityUser", back_populates="user", cascade="all, delete-orphan")
    refresh_tokens = relationship("RefreshToken", back_populates="user", cascade="all, delete-orphan")

    @property
    def is_active(self) -> bool:
        """탈퇴하지 않은 계정인지 여부 (True unless soft-deleted)."""
        return self.deleted_at is None
