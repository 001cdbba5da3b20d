"""API 클라이언트 테스트 — 401 시 토큰 갱신 후 1회 재시도.

Client API tests. Unit tests drive TokenRefreshAuth through an
httpx.MockTransport; the end-to-end test runs the client against the app
over ASGITransport.
"""

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from app.client import CommunityApiClient, CommunityApiError, SessionExpiredError
from app.main import app
from tests.conftest import PASSWORD

BASE_URL = "http://test/api"


def _envelope(data=None, status: int = 200, message: str = "ok") -> dict:
    return {"status": status, "message": message, "data": data}


class FakeServer:
    """토큰 하나만 유효하다고 판단하는 가짜 서버 (Accepts exactly one access token)."""

    def __init__(self, valid_access: str, refresh_ok: bool = True, always_401: bool = False) -> None:
        self.valid_access = valid_access
        self.refresh_ok = refresh_ok
        self.always_401 = always_401
        self.calls: list[tuple[str, str, str | None]] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append((request.method, request.url.path, request.headers.get("Authorization")))
        if request.url.path == "/api/v1/auth/refresh":
            if not self.refresh_ok:
                return httpx.Response(401, json={"status": 401, "message": "expired"})
            return httpx.Response(200, json=_envelope({
                "accessToken": self.valid_access, "refreshToken": "refresh-2", "tokenType": "bearer",
            }))
        if self.always_401 or request.headers.get("Authorization") != f"Bearer {self.valid_access}":
            return httpx.Response(401, json={"status": 401, "message": "invalid token"})
        return httpx.Response(200, json=_envelope({"postId": 1}))


class TestTokenRefreshAuth:
    """토큰 갱신 흐름 테스트."""

    async def test_refreshes_once_and_retries(self):
        server = FakeServer(valid_access="access-2")
        async with CommunityApiClient(BASE_URL, "access-1", "refresh-1",
                                      transport=httpx.MockTransport(server)) as client:
            body = await client.get_post(1)

        assert body["data"] == {"postId": 1}
        assert client.access_token == "access-2"
        assert client.refresh_token == "refresh-2"
        assert [path for _, path, _ in server.calls] == ["/api/v1/post/1", "/api/v1/auth/refresh", "/api/v1/post/1"]
        assert server.calls[-1][2] == "Bearer access-2"

    async def test_failed_refresh_clears_tokens(self):
        server = FakeServer(valid_access="access-2", refresh_ok=False)
        client = CommunityApiClient(BASE_URL, "access-1", "refresh-1", transport=httpx.MockTransport(server))

        with pytest.raises(SessionExpiredError):
            await client.get_post(1)
        assert client.access_token is None
        assert client.refresh_token is None
        await client.aclose()

    async def test_retries_only_once(self):
        server = FakeServer(valid_access="access-2", always_401=True)
        client = CommunityApiClient(BASE_URL, "access-1", "refresh-1", transport=httpx.MockTransport(server))

        with pytest.raises(CommunityApiError) as exc_info:
            await client.get_post(1)
        assert exc_info.value.status == 401
        assert len([c for c in server.calls if c[1] == "/api/v1/auth/refresh"]) == 1
        await client.aclose()

    async def test_sign_in_failure_does_not_refresh(self):
        server = FakeServer(valid_access="access-2")
        client = CommunityApiClient(BASE_URL, refresh_token="refresh-1", transport=httpx.MockTransport(server))

        with pytest.raises(CommunityApiError):
            await client.sign_in("fan@test.com", "wrong")
        assert [path for _, path, _ in server.calls] == ["/api/v1/auth/sign-in"]
        await client.aclose()


class TestClientAgainstApp:
    """실제 앱을 대상으로 한 종단 간 테스트 (End-to-end over ASGITransport)."""

    async def test_full_session(self, client: AsyncClient, fan_member, community):
        # client 픽스처가 get_db 오버라이드를 설치함 (The fixture installs the DB override)
        api = CommunityApiClient(BASE_URL, transport=ASGITransport(app=app))
        await api.sign_in("fan@test.com", PASSWORD)

        await api.create_post(community.id, "first", ["http://img/1.png"])

        # 액세스 토큰이 무효가 되어도 리프레시로 복구 (Recovers through refresh)
        api.auth.access_token = "broken"
        created = await api.create_post(community.id, "second")
        assert api.access_token != "broken"

        await api.like("post", created["data"]["postId"])
        page = await api.list_posts(community.id)
        assert page["total"] == 2
        assert page["data"][0]["postId"] == created["data"]["postId"]
        assert page["data"][0]["likeCount"] == 1

        notices = await api.list_notices(community.id)
        assert notices["data"] == []

        await api.sign_out()
        assert api.refresh_token is None
        await api.aclose()
