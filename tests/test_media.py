"""미디어/라이브 API 테스트.

Media gallery and live listing API tests.
"""

from httpx import AsyncClient

from tests.conftest import API, auth_header, join, make_artist, make_manager, make_token, make_user

MEDIA = f"{API}/media"
LIVE = f"{API}/live"


class TestMedia:
    """미디어 갤러리 테스트."""

    async def test_manager_creates_and_anyone_reads(self, client: AsyncClient, db, fan_member, fan_token,
                                                    community):
        await make_manager(db, fan_member)
        res = await client.post(MEDIA, params={"communityId": community.id}, json={
            "title": "Concert",
            "content": "Day 1",
            "thumbnailImage": "http://img/thumb.png",
            "mediaFiles": ["http://cdn/1.mp4", "http://cdn/2.mp4"],
        }, headers=auth_header(fan_token))
        assert res.status_code == 201
        media = res.json()["data"]
        assert media["mediaFiles"] == ["http://cdn/1.mp4", "http://cdn/2.mp4"]

        res = await client.get(MEDIA, params={"communityId": community.id})
        assert [m["mediaId"] for m in res.json()["data"]] == [media["mediaId"]]

        res = await client.get(f"{MEDIA}/{media['mediaId']}")
        assert res.json()["data"]["title"] == "Concert"

    async def test_member_cannot_create(self, client: AsyncClient, fan_member, fan_token, community):
        res = await client.post(MEDIA, params={"communityId": community.id}, json={"title": "x"},
                                headers=auth_header(fan_token))
        assert res.status_code == 403

    async def test_admin_removes(self, client: AsyncClient, admin_user, admin_token, community):
        media_id = (await client.post(MEDIA, params={"communityId": community.id}, json={
            "title": "Gone", "mediaFiles": ["http://cdn/x.mp4"],
        }, headers=auth_header(admin_token))).json()["data"]["mediaId"]

        res = await client.delete(f"{MEDIA}/{media_id}", headers=auth_header(admin_token))
        assert res.status_code == 200
        assert (await client.get(f"{MEDIA}/{media_id}")).status_code == 404


class TestLive:
    """라이브 목록 테스트."""

    async def test_artist_starts_and_ends(self, client: AsyncClient, db, fan_member, fan_token, community):
        artist = await make_artist(db, fan_member)
        res = await client.post(LIVE, params={"communityId": community.id}, json={"title": "Late night talk"},
                                headers=auth_header(fan_token))
        assert res.status_code == 201
        live = res.json()["data"]
        assert live["artistId"] == artist.id
        assert live["streamKey"]
        assert live["endedAt"] is None

        res = await client.get(LIVE, params={"communityId": community.id})
        assert [l["liveId"] for l in res.json()["data"]] == [live["liveId"]]

        res = await client.patch(f"{LIVE}/{live['liveId']}/end", headers=auth_header(fan_token))
        assert res.status_code == 200
        assert res.json()["data"]["endedAt"] is not None

        res = await client.patch(f"{LIVE}/{live['liveId']}/end", headers=auth_header(fan_token))
        assert res.status_code == 400

    async def test_member_cannot_start(self, client: AsyncClient, fan_member, fan_token, community):
        res = await client.post(LIVE, params={"communityId": community.id}, json={"title": "nope"},
                                headers=auth_header(fan_token))
        assert res.status_code == 403

    async def test_other_artist_cannot_end(self, client: AsyncClient, db, fan_member, fan_token, community):
        await make_artist(db, fan_member)
        live_id = (await client.post(LIVE, params={"communityId": community.id}, json={"title": "mine"},
                                     headers=auth_header(fan_token))).json()["data"]["liveId"]

        rival = await make_user(db, "rival@test.com", "Rival")
        await make_artist(db, await join(db, rival, community))
        res = await client.patch(f"{LIVE}/{live_id}/end", headers=auth_header(make_token(rival)))
        assert res.status_code == 403

    async def test_missing_live(self, client: AsyncClient, admin_user, admin_token):
        res = await client.patch(f"{LIVE}/9999/end", headers=auth_header(admin_token))
        assert res.status_code == 404
