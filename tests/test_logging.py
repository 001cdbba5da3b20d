"""Axiom 로깅 미들웨어 테스트 — 마스킹, 에러 메시지 추출.

Logging middleware tests, using an in-memory ingest client in place of Axiom.
"""

from fastapi import FastAPI, HTTPException
from httpx import ASGITransport, AsyncClient
from pydantic import BaseModel

from app.middleware.axiom_logging import AxiomLoggingMiddleware, _error_message, _mask_dict


class FakeAxiom:
    """ingest_events 호출을 기록하는 가짜 클라이언트."""

    def __init__(self) -> None:
        self.events: list[tuple[str, list[dict]]] = []

    def ingest_events(self, dataset: str, events: list[dict]) -> None:
        self.events.append((dataset, events))


class PaymentBody(BaseModel):
    impUid: str
    amount: int


def _make_app(fake: FakeAxiom) -> FastAPI:
    app = FastAPI()
    app.add_middleware(AxiomLoggingMiddleware, client=fake, dataset="test-dataset")

    @app.post("/pay")
    async def pay(body: PaymentBody):
        return {"status": 201, "message": "ok", "data": None}

    @app.get("/fail")
    async def fail():
        raise HTTPException(status_code=403, detail="nope")

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


class TestMasking:
    def test_nested_sensitive_keys(self):
        masked = _mask_dict({
            "email": "fan@test.com",
            "password": "Passw0rd!",
            "refreshToken": "abc",
            "payment": {"imp_uid": "imp_1", "amount": 100},
            "items": [{"streamKey": "k"}],
        })
        assert masked["email"] == "fan@test.com"
        assert masked["password"] == "***"
        assert masked["refreshToken"] == "***"
        assert masked["payment"] == {"imp_uid": "***", "amount": 100}
        assert masked["items"] == [{"streamKey": "***"}]

    def test_error_message_includes_fields(self):
        body = b'{"status": 400, "message": "bad", "errors": [{"field": "body.email", "message": "x"}]}'
        assert _error_message(body) == "bad [body.email]"

    def test_error_message_non_json(self):
        assert _error_message(b"plain failure") == "plain failure"


class TestMiddleware:
    async def test_logs_masked_request_body(self):
        fake = FakeAxiom()
        async with AsyncClient(transport=ASGITransport(app=_make_app(fake)), base_url="http://test") as ac:
            res = await ac.post("/pay", json={"impUid": "imp_123", "amount": 1000})
        assert res.status_code == 200

        dataset, events = fake.events[0]
        assert dataset == "test-dataset"
        event = events[0]
        assert event["method"] == "POST"
        assert event["path"] == "/pay"
        assert event["status_code"] == 200
        assert event["request_body"] == {"impUid": "***", "amount": 1000}
        assert "error" not in event

    async def test_error_response_is_preserved_and_logged(self):
        fake = FakeAxiom()
        async with AsyncClient(transport=ASGITransport(app=_make_app(fake)), base_url="http://test") as ac:
            res = await ac.get("/fail")
        assert res.status_code == 403
        assert res.json() == {"detail": "nope"}

        event = fake.events[0][1][0]
        assert event["status_code"] == 403
        assert "nope" in event["error"]

    async def test_skipped_paths_are_not_logged(self):
        fake = FakeAxiom()
        async with AsyncClient(transport=ASGITransport(app=_make_app(fake)), base_url="http://test") as ac:
            await ac.get("/health")
        assert fake.events == []
