"""커뮤니티 API 테스트 — 생성, 가입, 내 커뮤니티, 수정, 삭제(하위 데이터 정리).

Community API tests, including the dependent-row cleanup on delete.
"""

from datetime import datetime, timedelta, timezone

from httpx import AsyncClient
from sqlalchemy import func, select

from app.models.community import Artist, Community, CommunityUser, Manager
from app.models.membership import Membership
from app.models.notice import Notice, NoticeImage
from app.models.post import Comment, Like, Post, PostImage
from tests.conftest import API, auth_header, join, make_artist, make_community, make_manager, make_token, make_user

COMMUNITY = f"{API}/community"


async def _count(db, model, *where) -> int:
    return await db.scalar(select(func.count()).select_from(model).where(*where))


class TestCreateCommunity:
    """커뮤니티 생성 테스트."""

    async def test_admin_creates(self, client: AsyncClient, admin_user, admin_token):
        res = await client.post(COMMUNITY, json={"communityName": "Stars", "membershipPrice": 5000},
                                headers=auth_header(admin_token))
        assert res.status_code == 201
        data = res.json()["data"]
        assert data["communityName"] == "Stars"
        assert data["membershipPrice"] == 5000

    async def test_user_cannot_create(self, client: AsyncClient, fan_user, fan_token):
        res = await client.post(COMMUNITY, json={"communityName": "Stars"}, headers=auth_header(fan_token))
        assert res.status_code == 403

    async def test_duplicate_name(self, client: AsyncClient, community, admin_user, admin_token):
        res = await client.post(COMMUNITY, json={"communityName": community.name},
                                headers=auth_header(admin_token))
        assert res.status_code == 409

    async def test_negative_price_rejected(self, client: AsyncClient, admin_user, admin_token):
        res = await client.post(COMMUNITY, json={"communityName": "Cheap", "membershipPrice": -1},
                                headers=auth_header(admin_token))
        assert res.status_code == 400


class TestReadCommunity:
    """커뮤니티 조회 테스트."""

    async def test_list_and_get(self, client: AsyncClient, community):
        res = await client.get(COMMUNITY)
        assert res.status_code == 200
        assert [c["communityId"] for c in res.json()["data"]] == [community.id]

        res = await client.get(f"{COMMUNITY}/{community.id}")
        assert res.json()["data"]["communityName"] == community.name

    async def test_get_missing(self, client: AsyncClient):
        res = await client.get(f"{COMMUNITY}/9999")
        assert res.status_code == 404

    async def test_my_lists_joined_only(self, client: AsyncClient, db, fan_member, fan_token, community):
        await make_community(db, "Not Joined")
        res = await client.get(f"{COMMUNITY}/my", headers=auth_header(fan_token))
        assert res.status_code == 200
        assert [c["communityId"] for c in res.json()["data"]] == [community.id]


class TestJoinCommunity:
    """커뮤니티 가입 테스트."""

    async def test_join(self, client: AsyncClient, fan_user, fan_token, community):
        res = await client.post(f"{COMMUNITY}/{community.id}/join", json={"nickName": "starfan"},
                                headers=auth_header(fan_token))
        assert res.status_code == 201
        data = res.json()["data"]
        assert data["nickName"] == "starfan"
        assert data["userId"] == fan_user.id

    async def test_join_twice(self, client: AsyncClient, fan_member, fan_token, community):
        res = await client.post(f"{COMMUNITY}/{community.id}/join", json={"nickName": "again"},
                                headers=auth_header(fan_token))
        assert res.status_code == 409

    async def test_join_missing_community(self, client: AsyncClient, fan_user, fan_token):
        res = await client.post(f"{COMMUNITY}/9999/join", json={"nickName": "x"}, headers=auth_header(fan_token))
        assert res.status_code == 404

    async def test_join_blank_nickname(self, client: AsyncClient, fan_user, fan_token, community):
        res = await client.post(f"{COMMUNITY}/{community.id}/join", json={"nickName": "  "},
                                headers=auth_header(fan_token))
        assert res.status_code == 400


class TestUpdateCommunity:
    """커뮤니티 수정 테스트."""

    async def test_manager_updates(self, client: AsyncClient, db, community, other_user, other_token):
        await make_manager(db, await join(db, other_user, community))
        res = await client.patch(f"{COMMUNITY}/{community.id}", json={"membershipPrice": 20000},
                                 headers=auth_header(other_token))
        assert res.status_code == 200
        assert res.json()["data"]["membershipPrice"] == 20000

    async def test_member_cannot_update(self, client: AsyncClient, fan_member, fan_token, community):
        res = await client.patch(f"{COMMUNITY}/{community.id}", json={"membershipPrice": 1},
                                 headers=auth_header(fan_token))
        assert res.status_code == 403


class TestRemoveCommunity:
    """커뮤니티 삭제 — 하위 데이터 정리 테스트."""

    async def _populate(self, db, community, fan_member, other_user) -> None:
        artist_member = await join(db, other_user, community, "artist")
        artist = await make_artist(db, artist_member)
        await make_manager(db, artist_member)

        post = Post(community_id=community.id, community_user_id=artist_member.id, artist_id=artist.id,
                    content="hello")
        db.add(post)
        await db.flush()
        comment = Comment(post_id=post.id, community_user_id=fan_member.id, content="hi")
        db.add_all([PostImage(post_id=post.id, image_url="http://img/p.png"), comment])
        await db.flush()
        db.add_all([
            Like(user_id=fan_member.user_id, item_id=post.id, item_type="POST", status=True),
            Like(user_id=fan_member.user_id, item_id=comment.id, item_type="COMMENT", status=True),
        ])
        notice = Notice(community_id=community.id, community_user_id=artist_member.id, title="t", content="c")
        db.add(notice)
        await db.flush()
        now = datetime.now(timezone.utc)
        db.add_all([
            NoticeImage(notice_id=notice.id, image_url="http://img/n.png"),
            Membership(community_user_id=fan_member.id, price=10000, status="ACTIVE", started_at=now,
                       expires_at=now + timedelta(days=365)),
        ])
        await db.flush()

    async def test_admin_removes_with_dependents(self, client: AsyncClient, db, community, fan_member, other_user,
                                                 admin_user, admin_token):
        await self._populate(db, community, fan_member, other_user)

        res = await client.delete(f"{COMMUNITY}/{community.id}", headers=auth_header(admin_token))
        assert res.status_code == 200

        assert await _count(db, Community, Community.id == community.id) == 0
        assert await _count(db, CommunityUser, CommunityUser.community_id == community.id) == 0
        assert await _count(db, Post, Post.community_id == community.id) == 0
        assert await _count(db, Membership) == 0
        assert await _count(db, Artist) == 0
        assert await _count(db, Manager) == 0
        assert await _count(db, Comment) == 0
        assert await _count(db, PostImage) == 0
        assert await _count(db, Like) == 0
        assert await _count(db, Notice) == 0
        assert await _count(db, NoticeImage) == 0

    async def test_other_community_untouched(self, client: AsyncClient, db, community, fan_user, admin_user,
                                             admin_token):
        other = await make_community(db, "Survivor")
        member = await join(db, fan_user, other)
        db.add(Post(community_id=other.id, community_user_id=member.id, content="still here"))
        await db.flush()

        res = await client.delete(f"{COMMUNITY}/{community.id}", headers=auth_header(admin_token))
        assert res.status_code == 200
        assert await _count(db, Post, Post.community_id == other.id) == 1
        assert await _count(db, CommunityUser, CommunityUser.community_id == other.id) == 1

    async def test_manager_cannot_remove(self, client: AsyncClient, db, community):
        manager_user = await make_user(db, "manager@test.com", "Manager")
        await make_manager(db, await join(db, manager_user, community))
        res = await client.delete(f"{COMMUNITY}/{community.id}", headers=auth_header(make_token(manager_user)))
        assert res.status_code == 403

    async def test_remove_missing(self, client: AsyncClient, admin_user, admin_token):
        res = await client.delete(f"{COMMUNITY}/9999", headers=auth_header(admin_token))
        assert res.status_code == 404
