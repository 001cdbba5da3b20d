"""스토리지 API 테스트 — 로컬 모드 presigned URL 발급 및 업로드.

Storage API tests, run in local mode (no AWS keys configured).
"""

import pytest
from httpx import AsyncClient

from app.services import storage_service as storage_module
from tests.conftest import API, auth_header

STORAGE = f"{API}/storage"


@pytest.fixture
def uploads_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(storage_module, "UPLOADS_DIR", tmp_path)
    return tmp_path


class TestStorage:
    """업로드 URL 발급 테스트."""

    async def test_presign_local_mode(self, client: AsyncClient, fan_user, fan_token):
        res = await client.post(f"{STORAGE}/presigned-url", json={
            "filename": "photo.PNG",
            "contentType": "image/png",
            "folder": "posts",
        }, headers=auth_header(fan_token))
        assert res.status_code == 201
        data = res.json()["data"]
        assert data["key"].startswith("posts/")
        assert data["key"].endswith(".png")
        assert data["uploadUrl"].endswith(f"/api/v1/storage/upload/{data['key']}")
        assert data["fileUrl"].endswith(f"/uploads/{data['key']}")

    async def test_presign_rejects_unknown_folder(self, client: AsyncClient, fan_user, fan_token):
        res = await client.post(f"{STORAGE}/presigned-url", json={
            "filename": "a.png", "contentType": "image/png", "folder": "../etc",
        }, headers=auth_header(fan_token))
        assert res.status_code == 400

    async def test_presign_requires_auth(self, client: AsyncClient):
        res = await client.post(f"{STORAGE}/presigned-url", json={"filename": "a.png", "contentType": "image/png"})
        assert res.status_code == 401

    async def test_local_upload_writes_file(self, client: AsyncClient, uploads_dir, fan_user, fan_token):
        res = await client.put(f"{STORAGE}/upload/posts/2026/01/01/abc.png", content=b"\x89PNG",
                               headers=auth_header(fan_token))
        assert res.status_code == 200
        assert (uploads_dir / "posts/2026/01/01/abc.png").read_bytes() == b"\x89PNG"

    async def test_local_upload_requires_auth(self, client: AsyncClient, uploads_dir):
        res = await client.put(f"{STORAGE}/upload/posts/2026/01/01/anon.png", content=b"\x89PNG")
        assert res.status_code == 401
        assert not (uploads_dir / "posts/2026/01/01/anon.png").exists()
