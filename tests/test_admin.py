"""관리자 API 테스트 — 아티스트/매니저 권한 부여 및 회수.

Admin role grant/revoke API tests.
"""

import pytest
from httpx import AsyncClient

from tests.conftest import API, auth_header

ADMIN = f"{API}/admin"


@pytest.mark.parametrize("role", ["artists", "managers"])
class TestRoleGrants:
    """역할 부여/회수 테스트."""

    async def test_grant_and_revoke(self, client: AsyncClient, fan_member, admin_user, admin_token, role):
        res = await client.post(f"{ADMIN}/{role}/{fan_member.id}", headers=auth_header(admin_token))
        assert res.status_code == 201
        data = res.json()["data"]
        assert data["communityUserId"] == fan_member.id
        assert data["communityId"] == fan_member.community_id

        res = await client.delete(f"{ADMIN}/{role}/{fan_member.id}", headers=auth_header(admin_token))
        assert res.status_code == 200

    async def test_grant_twice(self, client: AsyncClient, fan_member, admin_user, admin_token, role):
        await client.post(f"{ADMIN}/{role}/{fan_member.id}", headers=auth_header(admin_token))
        res = await client.post(f"{ADMIN}/{role}/{fan_member.id}", headers=auth_header(admin_token))
        assert res.status_code == 409

    async def test_revoke_without_grant(self, client: AsyncClient, fan_member, admin_user, admin_token, role):
        res = await client.delete(f"{ADMIN}/{role}/{fan_member.id}", headers=auth_header(admin_token))
        assert res.status_code == 404

    async def test_unknown_community_user(self, client: AsyncClient, admin_user, admin_token, role):
        res = await client.post(f"{ADMIN}/{role}/9999", headers=auth_header(admin_token))
        assert res.status_code == 404

    async def test_non_admin_forbidden(self, client: AsyncClient, fan_member, fan_token, role):
        res = await client.post(f"{ADMIN}/{role}/{fan_member.id}", headers=auth_header(fan_token))
        assert res.status_code == 403


class TestGrantedRoleTakesEffect:
    """부여된 매니저 권한이 다음 요청부터 적용되는지 확인."""

    async def test_manager_grant_allows_notice(self, client: AsyncClient, fan_member, fan_token, admin_user,
                                               admin_token, community):
        notice = {"title": "hello", "content": "world"}
        res = await client.post(f"{API}/notice", params={"communityId": community.id}, json=notice,
                                headers=auth_header(fan_token))
        assert res.status_code == 403

        await client.post(f"{ADMIN}/managers/{fan_member.id}", headers=auth_header(admin_token))
        res = await client.post(f"{API}/notice", params={"communityId": community.id}, json=notice,
                                headers=auth_header(fan_token))
        assert res.status_code == 201
