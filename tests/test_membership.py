"""멤버십 API 테스트 — 결제 검증, 금액 불일치, imp_uid 재사용, 만료 처리.

Membership API tests. The payment gateway is replaced with a PortOneGateway
talking to an httpx.MockTransport.
"""

from datetime import datetime, timedelta, timezone

import httpx
import pytest
from httpx import AsyncClient
from sqlalchemy import func, select

from app.models.membership import Membership
from app.services.membership_service import membership_service
from app.services.payment_gateway import PortOneGateway
from tests.conftest import API, auth_header

MEMBERSHIP = f"{API}/membership"


def _portone_handler(payments: dict[str, dict]):
    """PortOne REST API를 흉내내는 핸들러 (Fake PortOne REST API)."""

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/users/getToken":
            return httpx.Response(200, json={"code": 0, "response": {"access_token": "gw-token"}})
        imp_uid = request.url.path.rsplit("/", 1)[-1]
        if request.headers.get("Authorization") != "gw-token" or imp_uid not in payments:
            return httpx.Response(200, json={"code": -1, "message": "존재하지 않는 결제정보입니다.",
                                             "response": None})
        return httpx.Response(200, json={"code": 0, "response": payments[imp_uid]})

    return handler


@pytest.fixture
def payments(monkeypatch) -> dict[str, dict]:
    """게이트웨이에 등록된 결제 목록 — 테스트가 직접 채웁니다."""
    store: dict[str, dict] = {}
    gateway = PortOneGateway(base_url="http://portone.test", transport=httpx.MockTransport(_portone_handler(store)))
    monkeypatch.setattr(membership_service, "gateway", gateway)
    return store


def _paid(imp_uid: str, amount: int, status: str = "paid") -> dict:
    return {"imp_uid": imp_uid, "merchant_uid": f"order-{imp_uid}", "amount": amount, "status": status}


async def _confirm(client: AsyncClient, token: str, community_id: int, imp_uid: str):
    return await client.post(f"{MEMBERSHIP}/payment", json={
        "communityId": community_id,
        "impUid": imp_uid,
        "merchantUid": f"order-{imp_uid}",
    }, headers=auth_header(token))


class TestConfirmPayment:
    """결제 확인 테스트."""

    async def test_paid_payment_issues_membership(self, client: AsyncClient, payments, fan_member, fan_token,
                                                  community):
        payments["imp_1"] = _paid("imp_1", community.membership_price)

        res = await _confirm(client, fan_token, community.id, "imp_1")
        assert res.status_code == 201
        data = res.json()["data"]
        assert data["communityUserId"] == fan_member.id
        assert data["status"] == "ACTIVE"
        assert data["price"] == community.membership_price

        res = await client.get(MEMBERSHIP, params={"communityId": community.id}, headers=auth_header(fan_token))
        assert res.status_code == 200
        assert res.json()["data"]["membershipId"] == data["membershipId"]

    async def test_amount_mismatch(self, client: AsyncClient, payments, fan_member, fan_token, community):
        payments["imp_2"] = _paid("imp_2", community.membership_price - 1)
        res = await _confirm(client, fan_token, community.id, "imp_2")
        assert res.status_code == 400

    async def test_merchant_uid_mismatch(self, client: AsyncClient, db, payments, fan_member, fan_token,
                                         community):
        """게이트웨이 주문번호와 다르면 400, 멤버십은 생성되지 않음."""
        payments["imp_m"] = _paid("imp_m", community.membership_price)
        res = await client.post(f"{MEMBERSHIP}/payment", json={
            "communityId": community.id,
            "impUid": "imp_m",
            "merchantUid": "order-someone-else",
        }, headers=auth_header(fan_token))
        assert res.status_code == 400

        count = await db.scalar(
            select(func.count()).select_from(Membership).where(Membership.community_user_id == fan_member.id)
        )
        assert count == 0

    async def test_not_paid(self, client: AsyncClient, payments, fan_member, fan_token, community):
        payments["imp_3"] = _paid("imp_3", community.membership_price, status="ready")
        res = await _confirm(client, fan_token, community.id, "imp_3")
        assert res.status_code == 400

    async def test_reused_imp_uid(self, client: AsyncClient, payments, fan_member, fan_token, community):
        payments["imp_4"] = _paid("imp_4", community.membership_price)
        assert (await _confirm(client, fan_token, community.id, "imp_4")).status_code == 201
        res = await _confirm(client, fan_token, community.id, "imp_4")
        assert res.status_code == 409

    async def test_unknown_payment_is_gateway_error(self, client: AsyncClient, payments, fan_member, fan_token,
                                                    community):
        res = await _confirm(client, fan_token, community.id, "imp_missing")
        assert res.status_code == 502

    async def test_non_member_denied(self, client: AsyncClient, payments, fan_user, fan_token, community):
        payments["imp_5"] = _paid("imp_5", community.membership_price)
        res = await _confirm(client, fan_token, community.id, "imp_5")
        assert res.status_code == 403


class TestMyMembership:
    """내 멤버십 조회 테스트."""

    async def test_none_yet(self, client: AsyncClient, fan_member, fan_token, community):
        res = await client.get(MEMBERSHIP, params={"communityId": community.id}, headers=auth_header(fan_token))
        assert res.status_code == 404

    async def test_past_expiry_reported_expired(self, client: AsyncClient, db, fan_member, fan_token, community):
        started = datetime.now(timezone.utc) - timedelta(days=400)
        db.add(Membership(community_user_id=fan_member.id, price=10000, status="ACTIVE",
                          started_at=started, expires_at=started + timedelta(days=365)))
        await db.flush()

        res = await client.get(MEMBERSHIP, params={"communityId": community.id}, headers=auth_header(fan_token))
        assert res.status_code == 200
        assert res.json()["data"]["status"] == "EXPIRED"
