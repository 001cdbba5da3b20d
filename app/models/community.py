"""커뮤니티 및 커뮤니티 내 역할 관련 SQLAlchemy ORM 모델 정의.

Community and per-community role SQLAlchemy ORM model definitions.
A user's authorization is resolved per community through these tables:
CommunityUser (member), Artist and Manager (elevated roles).

Tables:
    - communities: 팬 커뮤니티 (Fan communities)
    - community_users: 커뮤니티 가입 정보 (A user's identity within one community)
    - artists: 커뮤니티 아티스트 (Artist role scoped to a community)
    - managers: 커뮤니티 매니저 (Manager role scoped to a community)
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Community(Base):
    """커뮤니티 모델 — 아티스트 팬 커뮤니티.

    Attributes:
        id: 고유 식별자 (Primary key)
        name: 커뮤니티 이름 (Community name, unique)
        membership_price: 멤버십 가격, 원 단위 (Membership price in KRW)
        logo_image: 로고 이미지 URL (Logo image URL)
        cover_image: 커버 이미지 URL (Cover image URL)

    Relationships:
        community_users: 가입자 목록 (Joined members, cascade delete)
    """

    __tablename__ = "communities"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    membership_price: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    logo_image: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    cover_image: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    community_users = relationship("CommunityUser", back_populates="community", cascade="all, delete-orphan")


class CommunityUser(Base):
    """커뮤니티 사용자 모델 — 한 커뮤니티 안에서의 사용자 정체성.

    CommunityUser — a user's membership identity within one community.
    Content (posts, comments, notices) is authored by a CommunityUser,
    never directly by a User.

    Attributes:
        id: 고유 식별자 (Primary key)
        user_id: 사용자 FK (CASCADE on user delete)
        community_id: 커뮤니티 FK (CASCADE on community delete)
        nickname: 커뮤니티에서 사용할 닉네임 (Nickname used inside the community)

    Constraints:
        uq_community_user: 사용자당 커뮤니티 1회 가입 (One identity per user per community)
    """

    __tablename__ = "community_users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    community_id: Mapped[int] = mapped_column(Integer, ForeignKey("communities.id", ondelete="CASCADE"), nullable=False)
    nickname: Mapped[str] = mapped_column(String(100), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        UniqueConstraint("user_id", "community_id", name="uq_community_user"),
    )

    user = relationship("User", back_populates="community_users")
    community = relationship("Community", back_populates="community_users")


class Artist(Base):
    """아티스트 모델 — 커뮤니티 범위의 아티스트 역할.

    Attributes:
        id: 아티스트 식별자 (Artist id, referenced by Post.artist_id)
        community_user_id: 아티스트의 커뮤니티 사용자 FK
        community_id: 커뮤니티 FK
    """

    __tablename__ = "artists"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    community_user_id: Mapped[int] = mapped_column(Integer, ForeignKey("community_users.id", ondelete="CASCADE"), unique=True, nullable=False)
    community_id: Mapped[int] = mapped_column(Integer, ForeignKey("communities.id", ondelete="CASCADE"), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))


class Manager(Base):
    """매니저 모델 — 커뮤니티 범위의 운영 권한.

    Attributes:
        id: 매니저 식별자 (Manager id)
        community_user_id: 매니저의 커뮤니티 사용자 FK
        community_id: 커뮤니티 FK
    """

    __tablename__ = "managers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    community_user_id: Mapped[int] = mapped_column(Integer, ForeignKey("community_users.id", ondelete="CASCADE"), unique=True, nullable=False)
    community_id: Mapped[int] = mapped_column(Integer, ForeignKey("communities.id", ondelete="CASCADE"), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
