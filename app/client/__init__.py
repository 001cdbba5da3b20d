"""커뮤니티 API 클라이언트 패키지 — Python client for the community REST API."""

from app.client.api_client import CommunityApiClient, CommunityApiError, SessionExpiredError, TokenRefreshAuth

__all__ = ["CommunityApiClient", "CommunityApiError", "SessionExpiredError", "TokenRefreshAuth"]
