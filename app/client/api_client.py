"""커뮤니티 API 클라이언트 — httpx 기반, 401 시 토큰 자동 갱신.

Community API client built on httpx.

TokenRefreshAuth attaches `Authorization: Bearer <access token>` to every
request. When the server answers 401 it calls `POST /v1/auth/refresh`
once, stores the rotated pair and replays the original request once.
A failed refresh clears both tokens and raises SessionExpiredError.
"""

from typing import Any, Callable, Generator

import httpx

# 갱신을 시도하지 않는 인증 경로 (Auth endpoints never trigger a refresh)
_AUTH_PATHS: tuple[str, ...] = ("/v1/auth/sign-in", "/v1/auth/sign-up", "/v1/auth/refresh")


class CommunityApiError(Exception):
    """API 오류 응답 — Raised for any non-2xx envelope.

    Attributes:
        status: HTTP 상태 코드
        message: 서버 메시지 카탈로그 문구
        errors: 검증 실패 필드 목록 (400 validation failures only)
    """

    def __init__(self, status: int, message: str, errors: list[dict] | None = None) -> None:
        super().__init__(f"{status}: {message}")
        self.status = status
        self.message = message
        self.errors = errors or []


class SessionExpiredError(CommunityApiError):
    """리프레시 토큰도 거부됨 — 다시 로그인해야 합니다 (Sign in again)."""

    def __init__(self, message: str = "세션이 만료되었습니다. 다시 로그인해주세요.") -> None:
        super().__init__(401, message)


class TokenRefreshAuth(httpx.Auth):
    """Bearer 토큰 인증 + 1회 갱신 재시도 흐름.

    The flow is a plain generator, so it works with both httpx.Client and
    httpx.AsyncClient.

    Args:
        access_token: 현재 액세스 토큰
        refresh_token: 현재 리프레시 토큰
        on_refresh: 갱신 성공 시 새 토큰 쌍을 받는 콜백 (Called with the new pair)
    """

    requires_response_body = True

    def __init__(
        self,
        access_token: str | None = None,
        refresh_token: str | None = None,
        on_refresh: Callable[[str, str], None] | None = None,
    ) -> None:
        self.access_token = access_token
        self.refresh_token = refresh_token
        self.on_refresh = on_refresh

    def set_tokens(self, access_token: str | None, refresh_token: str | None) -> None:
        self.access_token = access_token
        self.refresh_token = refresh_token

    def clear(self) -> None:
        self.set_tokens(None, None)

    def _authorize(self, request: httpx.Request) -> None:
        if self.access_token:
            request.headers["Authorization"] = f"Bearer {self.access_token}"

    def _refresh_url(self, request: httpx.Request) -> httpx.URL:
        # 원 요청의 API prefix를 유지 (Keep the API prefix of the original request)
        path = request.url.path
        prefix = path[: path.find("/v1/")] if "/v1/" in path else ""
        return request.url.copy_with(path=f"{prefix}/v1/auth/refresh", query=None)

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        self._authorize(request)
        response = yield request

        if response.status_code != 401 or request.url.path.endswith(_AUTH_PATHS):
            return
        if not self.refresh_token:
            self.clear()
            raise SessionExpiredError()

        refresh_response = yield httpx.Request(
            "POST",
            self._refresh_url(request),
            json={"refreshToken": self.refresh_token},
        )
        if refresh_response.status_code != 200:
            self.clear()
            raise SessionExpiredError()

        tokens = refresh_response.json()["data"]
        self.set_tokens(tokens["accessToken"], tokens["refreshToken"])
        if self.on_refresh is not None:
            self.on_refresh(tokens["accessToken"], tokens["refreshToken"])

        # 원 요청 1회 재시도 - Replay the original request once
        self._authorize(request)
        yield request


class CommunityApiClient:
    """커뮤니티 REST API 비동기 클라이언트.

    Usage:
        async with CommunityApiClient("http://localhost:8000/api") as client:
            await client.sign_in("fan@example.com", "Passw0rd!")
            page = await client.list_posts(community_id=3)

    Args:
        base_url: API_PREFIX까지 포함한 서버 주소 (Server URL including API_PREFIX)
        access_token: 기존 액세스 토큰 (Optional, e.g. restored from storage)
        refresh_token: 기존 리프레시 토큰
        transport: 테스트용 httpx 트랜스포트 (Injected transport, for tests)
        timeout: 요청 타임아웃(초)
    """

    def __init__(
        self,
        base_url: str,
        access_token: str | None = None,
        refresh_token: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 10.0,
    ) -> None:
        self.auth = TokenRefreshAuth(access_token, refresh_token)
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            auth=self.auth,
            transport=transport,
            timeout=timeout,
        )

    @property
    def access_token(self) -> str | None:
        return self.auth.access_token

    @property
    def refresh_token(self) -> str | None:
        return self.auth.refresh_token

    async def __aenter__(self) -> "CommunityApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs: Any) -> dict:
        """요청을 보내고 응답 봉투(dict)를 반환합니다.

        Raises:
            CommunityApiError: 2xx가 아닌 응답 (Any non-2xx response)
            SessionExpiredError: 토큰 갱신 실패
        """
        response = await self._client.request(method, path, **kwargs)
        try:
            body = response.json()
        except ValueError:
            body = {"message": response.text}
        if response.is_error:
            raise CommunityApiError(
                response.status_code,
                body.get("message", response.reason_phrase),
                body.get("errors"),
            )
        return body

    # ------------------------------------------------------------------
    # 인증 - Auth
    # ------------------------------------------------------------------
    async def sign_in(self, email: str, password: str) -> dict:
        """로그인 후 토큰 쌍을 저장합니다 (Stores the issued pair)."""
        body = await self._request("POST", "/v1/auth/sign-in", json={"email": email, "password": password})
        self.auth.set_tokens(body["data"]["accessToken"], body["data"]["refreshToken"])
        return body

    async def sign_out(self) -> dict:
        """로그아웃 — 서버의 리프레시 토큰을 폐기하고 로컬 토큰을 지웁니다."""
        body = await self._request("POST", "/v1/auth/sign-out", json={"refreshToken": self.refresh_token or ""})
        self.auth.clear()
        return body

    # ------------------------------------------------------------------
    # 게시글/좋아요/공지 - Posts, likes, notices
    # ------------------------------------------------------------------
    async def list_posts(
        self,
        community_id: int,
        page: int = 1,
        limit: int = 20,
        artist_id: int | None = None,
    ) -> dict:
        params: dict[str, Any] = {"communityId": community_id, "page": page, "limit": limit}
        if artist_id is not None:
            params["artistId"] = artist_id
        return await self._request("GET", "/v1/post", params=params)

    async def get_post(self, post_id: int) -> dict:
        return await self._request("GET", f"/v1/post/{post_id}")

    async def create_post(self, community_id: int, content: str, post_images: list[str] | None = None) -> dict:
        return await self._request(
            "POST",
            "/v1/post",
            json={"communityId": community_id, "content": content, "postImages": post_images or []},
        )

    async def like(self, item_type: str, item_id: int, status: bool = True) -> dict:
        """좋아요 상태 설정 — item_type은 "POST" 또는 "COMMENT"."""
        return await self._request("POST", f"/v1/like/{item_type.upper()}/{item_id}", json={"status": status})

    async def list_notices(self, community_id: int) -> dict:
        return await self._request("GET", "/v1/notice", params={"communityId": community_id})
