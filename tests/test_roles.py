"""역할 해석 테스트 — resolve_role 과 AuthContext 의 일관성.

Role resolution tests. `resolve_role` answers for one community with
per-table lookups; `build_context` resolves every joined community with a
single query. Both must agree.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.community import Community
from app.models.user import User
from app.services.role_service import CommunityRole, role_service
from tests.conftest import join, make_artist, make_community, make_manager


async def _assert_role(db: AsyncSession, user: User, community: Community, expected: CommunityRole) -> None:
    assert await role_service.resolve_role(db, user.id, community.id) == expected
    ctx = await role_service.build_context(db, user)
    assert ctx.role_in(community.id) == expected


class TestResolveRole:
    """커뮤니티 역할 해석 테스트."""

    async def test_role_progression(self, db: AsyncSession, fan_user, community):
        """미가입 → 회원 → 아티스트 → 매니저 순으로 역할이 올라감."""
        await _assert_role(db, fan_user, community, CommunityRole.NONE)

        member = await join(db, fan_user, community)
        await _assert_role(db, fan_user, community, CommunityRole.MEMBER)

        await make_artist(db, member)
        await _assert_role(db, fan_user, community, CommunityRole.ARTIST)

        # 매니저가 아티스트보다 우선 (Manager outranks artist)
        await make_manager(db, member)
        await _assert_role(db, fan_user, community, CommunityRole.MANAGER)

    async def test_admin_without_membership(self, db: AsyncSession, admin_user, community):
        await _assert_role(db, admin_user, community, CommunityRole.ADMIN)

        ctx = await role_service.build_context(db, admin_user)
        assert ctx.is_admin
        assert ctx.community_user_id_in(community.id) is None

    async def test_roles_are_scoped_per_community(self, db: AsyncSession, fan_user, community):
        other = await make_community(db, "Other Community")
        await make_manager(db, await join(db, fan_user, community))
        await join(db, fan_user, other)

        await _assert_role(db, fan_user, community, CommunityRole.MANAGER)
        await _assert_role(db, fan_user, other, CommunityRole.MEMBER)

    async def test_unknown_community(self, db: AsyncSession, fan_user):
        assert await role_service.resolve_role(db, fan_user.id, 9999) == CommunityRole.NONE
