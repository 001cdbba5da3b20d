"""공지사항 API 테스트 — 매니저/관리자 작성, 공개 조회, 부분 수정, 삭제.

Notice API tests.
"""

from httpx import AsyncClient

from tests.conftest import API, auth_header, join, make_community, make_manager

NOTICE = f"{API}/notice"


async def _create(client: AsyncClient, token: str, community_id: int, **extra):
    body = {"title": "공지", "content": "내용", **extra}
    return await client.post(NOTICE, params={"communityId": community_id}, json=body, headers=auth_header(token))


class TestNotice:
    """공지사항 CRUD 테스트."""

    async def test_manager_creates_with_images(self, client: AsyncClient, db, fan_member, fan_token, community):
        await make_manager(db, fan_member)
        res = await _create(client, fan_token, community.id, noticeImageUrl=["http://img/1.png"])
        assert res.status_code == 201
        data = res.json()["data"]
        assert data["communityUserId"] == fan_member.id
        assert [i["noticeImageUrl"] for i in data["noticeImages"]] == ["http://img/1.png"]

    async def test_admin_without_membership_creates(self, client: AsyncClient, admin_user, admin_token, community):
        res = await _create(client, admin_token, community.id)
        assert res.status_code == 201
        assert res.json()["data"]["communityUserId"] is None

    async def test_member_cannot_create(self, client: AsyncClient, fan_member, fan_token, community):
        res = await _create(client, fan_token, community.id)
        assert res.status_code == 403

    async def test_more_than_three_images_rejected(self, client: AsyncClient, admin_user, admin_token, community):
        res = await _create(client, admin_token, community.id, noticeImageUrl=[f"http://img/{i}" for i in range(4)])
        assert res.status_code == 400

    async def test_public_list_and_get(self, client: AsyncClient, admin_user, admin_token, community):
        notice_id = (await _create(client, admin_token, community.id)).json()["data"]["noticeId"]

        res = await client.get(NOTICE, params={"communityId": community.id})
        assert [n["noticeId"] for n in res.json()["data"]] == [notice_id]

        res = await client.get(f"{NOTICE}/{notice_id}")
        assert res.json()["data"]["title"] == "공지"

    async def test_partial_update(self, client: AsyncClient, admin_user, admin_token, community):
        notice_id = (await _create(client, admin_token, community.id)).json()["data"]["noticeId"]

        res = await client.patch(f"{NOTICE}/{notice_id}", json={"title": "수정됨"}, headers=auth_header(admin_token))
        assert res.status_code == 200
        data = res.json()["data"]
        assert data["title"] == "수정됨"
        assert data["content"] == "내용"

    async def test_manager_of_other_community_cannot_update(self, client: AsyncClient, db, admin_user, admin_token,
                                                            community, other_user, other_token):
        notice_id = (await _create(client, admin_token, community.id)).json()["data"]["noticeId"]
        other_community = await make_community(db, "Elsewhere")
        await make_manager(db, await join(db, other_user, other_community))

        res = await client.patch(f"{NOTICE}/{notice_id}", json={"title": "x"}, headers=auth_header(other_token))
        assert res.status_code == 403

    async def test_remove(self, client: AsyncClient, admin_user, admin_token, community):
        notice_id = (await _create(client, admin_token, community.id, noticeImageUrl=["http://img/1.png"])
                     ).json()["data"]["noticeId"]
        res = await client.delete(f"{NOTICE}/{notice_id}", headers=auth_header(admin_token))
        assert res.status_code == 200

        res = await client.get(f"{NOTICE}/{notice_id}")
        assert res.status_code == 404
