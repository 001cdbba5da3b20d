"""역할 서비스 — 커뮤니티별 역할 해석과 요청 단위 인가 컨텍스트.

Role Service — Resolves a user's role inside each community and builds the
per-request AuthContext that every domain service receives.

Role precedence within one community:
    ADMIN (플랫폼 관리자) > MANAGER > ARTIST > MEMBER > NONE
"""

from dataclasses import dataclass, field
from enum import Enum

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User, UserRole
from app.repositories.community_repository import (
    artist_repository,
    community_user_repository,
    manager_repository,
)
from app.repositories.user_repository import user_repository
from app.utils.exceptions import PermissionDeniedError
from app.utils.messages import MESSAGES

# 플랫폼 관리자 권한 이름 (Capability granted to platform admins)
ADMIN_CAPABILITY: str = "platform:admin"


class CommunityRole(str, Enum):
    """커뮤니티 내 역할 — Role of a user inside one community."""

    NONE = "NONE"
    MEMBER = "MEMBER"
    ARTIST = "ARTIST"
    MANAGER = "MANAGER"
    ADMIN = "ADMIN"


@dataclass(frozen=True)
class AuthContext:
    """요청 단위 인가 컨텍스트.

    Built once per request from the authenticated user and passed
    explicitly into service calls. Services read roles from here and
    never re-query the user's global role.

    Attributes:
        user_id: 요청 사용자 ID (Caller's user id)
        capabilities: 전역 권한 집합 (Global capabilities, e.g. {"platform:admin"})
        communities: {community_id: (community_user_id, role)} 가입 정보
    """

    user_id: int
    capabilities: frozenset[str] = frozenset()
    communities: dict[int, tuple[int, CommunityRole]] = field(default_factory=dict)

    @property
    def is_admin(self) -> bool:
        return ADMIN_CAPABILITY in self.capabilities

    def role_in(self, community_id: int) -> CommunityRole:
        """커뮤니티 내 역할을 반환합니다 (관리자는 항상 ADMIN)."""
        if self.is_admin:
            return CommunityRole.ADMIN
        entry = self.communities.get(community_id)
        return entry[1] if entry is not None else CommunityRole.NONE

    def community_user_id_in(self, community_id: int) -> int | None:
        entry = self.communities.get(community_id)
        return entry[0] if entry is not None else None

    def require_member(self, community_id: int, message: str | None = None) -> int:
        """커뮤니티 가입 여부를 확인하고 커뮤니티 사용자 ID를 반환합니다.

        Admins are not exempt: authoring content needs a community identity.

        Args:
            community_id: 커뮤니티 ID
            message: 실패 시 메시지 (Error message override)

        Returns:
            int: 요청자의 커뮤니티 사용자 ID (Caller's community user id)

        Raises:
            PermissionDeniedError: 가입하지 않은 커뮤니티 (Not a member)
        """
        community_user_id = self.community_user_id_in(community_id)
        if community_user_id is None:
            raise PermissionDeniedError(message or MESSAGES["COMMUNITY"]["MEMBER"]["UNAUTHORIZED"])
        return community_user_id

    def can_manage(self, community_id: int) -> bool:
        """해당 커뮤니티의 매니저이거나 플랫폼 관리자인지 확인합니다."""
        return self.role_in(community_id) in (CommunityRole.MANAGER, CommunityRole.ADMIN)

    def require_manager(self, community_id: int, message: str) -> None:
        if not self.can_manage(community_id):
            raise PermissionDeniedError(message)

    def require_admin(self, message: str | None = None) -> None:
        if not self.is_admin:
            raise PermissionDeniedError(message or MESSAGES["ADMIN"]["ROLE"]["UNAUTHORIZED"])


class RoleService:
    """커뮤니티 역할 해석 서비스."""

    async def resolve_role(
        self,
        db: AsyncSession,
        user_id: int,
        community_id: int,
    ) -> CommunityRole:
        """단일 커뮤니티에서의 사용자 역할을 해석합니다.

        Resolve one user's role in one community.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user_id: 사용자 ID (User id)
            community_id: 커뮤니티 ID (Community id)

        Returns:
            CommunityRole: NONE / MEMBER / ARTIST / MANAGER / ADMIN
        """
        user: User | None = await user_repository.get_active(db, user_id)
        if user is not None and user.role == UserRole.ADMIN.value:
            return CommunityRole.ADMIN

        community_user = await community_user_repository.get_by_user_and_community(db, user_id, community_id)
        if community_user is None:
            return CommunityRole.NONE

        manager = await manager_repository.get_by_community_user(db, community_user.id)
        if manager is not None and manager.community_id == community_id:
            return CommunityRole.MANAGER

        artist = await artist_repository.get_by_community_user(db, community_user.id)
        if artist is not None and artist.community_id == community_id:
            return CommunityRole.ARTIST

        return CommunityRole.MEMBER

    async def build_context(
        self,
        db: AsyncSession,
        user: User,
    ) -> AuthContext:
        """인증된 사용자로부터 AuthContext를 구성합니다.

        Build the request AuthContext with a single role query covering
        every community the user has joined.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user: 인증된 사용자 (Authenticated user)

        Returns:
            AuthContext: 요청 단위 인가 컨텍스트 (Per-request authorization context)
        """
        rows = await community_user_repository.get_memberships_with_roles(db, user.id)

        communities: dict[int, tuple[int, CommunityRole]] = {}
        for community_id, community_user_id, is_manager, is_artist in rows:
            if is_manager:
                role = CommunityRole.MANAGER
            elif is_artist:
                role = CommunityRole.ARTIST
            else:
                role = CommunityRole.MEMBER
            communities[community_id] = (community_user_id, role)

        capabilities: frozenset[str] = (
            frozenset({ADMIN_CAPABILITY}) if user.role == UserRole.ADMIN.value else frozenset()
        )
        return AuthContext(user_id=user.id, capabilities=capabilities, communities=communities)


# 싱글턴 인스턴스 - Singleton instance
role_service: RoleService = RoleService()
