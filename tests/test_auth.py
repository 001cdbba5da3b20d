"""인증/내 정보 API 테스트 — 회원가입, 로그인, 토큰 회전, 로그아웃, 탈퇴.

Auth and account API tests — Sign-up, sign-in, refresh token rotation,
sign-out, and the /users/me endpoints.
"""

from httpx import AsyncClient

from tests.conftest import API, PASSWORD, auth_header

AUTH = f"{API}/auth"
ME = f"{API}/users/me"


async def _sign_in(client: AsyncClient, email: str, password: str = PASSWORD) -> dict:
    res = await client.post(f"{AUTH}/sign-in", json={"email": email, "password": password})
    assert res.status_code == 200
    return res.json()["data"]


# ===== Sign Up =====

class TestSignUp:
    """회원가입 테스트."""

    async def test_sign_up_success(self, client: AsyncClient):
        res = await client.post(f"{AUTH}/sign-up", json={
            "name": "New Fan",
            "email": "New@Test.com",
            "password": PASSWORD,
        })
        assert res.status_code == 201
        body = res.json()
        assert body["status"] == 201
        assert body["data"]["email"] == "new@test.com"
        assert body["data"]["role"] == "User"
        assert "password" not in body["data"]
        assert "passwordHash" not in body["data"]

    async def test_sign_up_duplicate_email(self, client: AsyncClient, fan_user):
        res = await client.post(f"{AUTH}/sign-up", json={
            "name": "Dup",
            "email": "fan@test.com",
            "password": PASSWORD,
        })
        assert res.status_code == 409
        assert res.json()["status"] == 409

    async def test_sign_up_weak_password_lists_field(self, client: AsyncClient):
        """약한 비밀번호는 400과 필드 오류 목록을 반환."""
        res = await client.post(f"{AUTH}/sign-up", json={
            "name": "Weak",
            "email": "weak@test.com",
            "password": "password",
        })
        assert res.status_code == 400
        body = res.json()
        assert body["status"] == 400
        assert any(e["field"] == "body.password" for e in body["errors"])

    async def test_sign_up_invalid_email(self, client: AsyncClient):
        res = await client.post(f"{AUTH}/sign-up", json={
            "name": "Bad",
            "email": "not-an-email",
            "password": PASSWORD,
        })
        assert res.status_code == 400
        assert any(e["field"] == "body.email" for e in res.json()["errors"])


# ===== Sign In =====

class TestSignIn:
    """로그인 테스트."""

    async def test_sign_in_success(self, client: AsyncClient, fan_user):
        data = await _sign_in(client, "fan@test.com")
        assert data["accessToken"]
        assert data["refreshToken"]
        assert data["tokenType"] == "bearer"

    async def test_sign_in_email_is_case_insensitive(self, client: AsyncClient, fan_user):
        await _sign_in(client, "FAN@test.com")

    async def test_sign_in_wrong_password(self, client: AsyncClient, fan_user):
        res = await client.post(f"{AUTH}/sign-in", json={"email": "fan@test.com", "password": "Wrong0rd!"})
        assert res.status_code == 401
        assert res.json()["message"]

    async def test_sign_in_unknown_user(self, client: AsyncClient):
        res = await client.post(f"{AUTH}/sign-in", json={"email": "ghost@test.com", "password": PASSWORD})
        assert res.status_code == 401


# ===== Refresh / Sign Out =====

class TestTokenRotation:
    """리프레시 토큰 회전 테스트."""

    async def test_refresh_rotates_and_rejects_old_token(self, client: AsyncClient, fan_user):
        tokens = await _sign_in(client, "fan@test.com")

        res = await client.post(f"{AUTH}/refresh", json={"refreshToken": tokens["refreshToken"]})
        assert res.status_code == 200
        rotated = res.json()["data"]
        assert rotated["refreshToken"] != tokens["refreshToken"]

        # 이전 리프레시 토큰은 재사용 불가 (The old refresh token is gone)
        res = await client.post(f"{AUTH}/refresh", json={"refreshToken": tokens["refreshToken"]})
        assert res.status_code == 401

        # 새 액세스 토큰은 동작 (The new access token works)
        res = await client.get(ME, headers=auth_header(rotated["accessToken"]))
        assert res.status_code == 200

    async def test_refresh_rejects_access_token(self, client: AsyncClient, fan_user):
        tokens = await _sign_in(client, "fan@test.com")
        res = await client.post(f"{AUTH}/refresh", json={"refreshToken": tokens["accessToken"]})
        assert res.status_code == 401

    async def test_refresh_rejects_garbage(self, client: AsyncClient):
        res = await client.post(f"{AUTH}/refresh", json={"refreshToken": "not-a-jwt"})
        assert res.status_code == 401

    async def test_sign_out_revokes_refresh_token(self, client: AsyncClient, fan_user):
        tokens = await _sign_in(client, "fan@test.com")
        res = await client.post(f"{AUTH}/sign-out", json={"refreshToken": tokens["refreshToken"]})
        assert res.status_code == 200

        res = await client.post(f"{AUTH}/refresh", json={"refreshToken": tokens["refreshToken"]})
        assert res.status_code == 401

    async def test_sign_out_unknown_token_succeeds(self, client: AsyncClient):
        res = await client.post(f"{AUTH}/sign-out", json={"refreshToken": "unknown"})
        assert res.status_code == 200


# ===== /users/me =====

class TestMe:
    """내 정보 조회/수정/탈퇴 테스트."""

    async def test_me_requires_token(self, client: AsyncClient):
        res = await client.get(ME)
        assert res.status_code == 401
        assert res.json()["status"] == 401

    async def test_me_rejects_refresh_token_as_bearer(self, client: AsyncClient, fan_user):
        tokens = await _sign_in(client, "fan@test.com")
        res = await client.get(ME, headers=auth_header(tokens["refreshToken"]))
        assert res.status_code == 401

    async def test_me_success(self, client: AsyncClient, fan_user, fan_token):
        res = await client.get(ME, headers=auth_header(fan_token))
        assert res.status_code == 200
        assert res.json()["data"]["id"] == fan_user.id

    async def test_update_me(self, client: AsyncClient, fan_user, fan_token):
        res = await client.patch(ME, json={"name": "Renamed", "profileImage": "http://img/p.png"},
                                  headers=auth_header(fan_token))
        assert res.status_code == 200
        data = res.json()["data"]
        assert data["name"] == "Renamed"
        assert data["profileImage"] == "http://img/p.png"

    async def test_update_me_empty_body(self, client: AsyncClient, fan_user, fan_token):
        res = await client.patch(ME, json={}, headers=auth_header(fan_token))
        assert res.status_code == 400

    async def test_update_password_then_sign_in(self, client: AsyncClient, fan_user, fan_token):
        res = await client.patch(ME, json={"password": "N3wPass!!"}, headers=auth_header(fan_token))
        assert res.status_code == 200
        await _sign_in(client, "fan@test.com", "N3wPass!!")

    async def test_delete_me_blocks_sign_in_and_token(self, client: AsyncClient, fan_user, fan_token):
        res = await client.delete(ME, headers=auth_header(fan_token))
        assert res.status_code == 200

        res = await client.get(ME, headers=auth_header(fan_token))
        assert res.status_code == 401

        res = await client.post(f"{AUTH}/sign-in", json={"email": "fan@test.com", "password": PASSWORD})
        assert res.status_code == 401
