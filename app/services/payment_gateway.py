"""결제 게이트웨이 클라이언트 — PortOne(아임포트) REST API 결제 조회.

Payment gateway client — Looks up a payment on the PortOne REST API so the
server can verify what the browser-side payment window reported.

Flow:
    1. POST /users/getToken {imp_key, imp_secret} → access_token
    2. GET /payments/{imp_uid} (Authorization: access_token) → payment
"""

from dataclasses import dataclass

import httpx

from app.config import settings
from app.utils.exceptions import PaymentGatewayError
from app.utils.messages import MESSAGES


@dataclass(frozen=True)
class GatewayPayment:
    """게이트웨이가 보고한 결제 정보 (Payment as reported by the gateway)."""

    imp_uid: str
    merchant_uid: str
    amount: int
    status: str  # "ready" / "paid" / "cancelled" / "failed"


class PortOneGateway:
    """PortOne REST API 클라이언트.

    Attributes:
        base_url: API 기본 주소 (PORTONE_API_URL)
        transport: httpx 전송 계층 주입 (Optional transport, used by tests)
    """

    def __init__(
        self,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url: str = (base_url or settings.PORTONE_API_URL).rstrip("/")
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(8.0, connect=5.0),
            transport=self.transport,
        )

    @staticmethod
    def _unwrap(resp: httpx.Response) -> dict:
        """PortOne 응답 {code, message, response}에서 response를 꺼냅니다."""
        if resp.status_code >= 400:
            raise PaymentGatewayError(MESSAGES["MEMBERSHIP"]["PAYMENT"]["GATEWAY_ERROR"])
        body = resp.json()
        if body.get("code") != 0 or body.get("response") is None:
            raise PaymentGatewayError(body.get("message") or MESSAGES["MEMBERSHIP"]["PAYMENT"]["GATEWAY_ERROR"])
        return body["response"]

    async def get_payment(self, imp_uid: str) -> GatewayPayment:
        """결제 고유번호로 결제 정보를 조회합니다.

        Args:
            imp_uid: 게이트웨이 결제 고유번호 (Gateway payment id)

        Returns:
            GatewayPayment: 조회된 결제 정보

        Raises:
            PaymentGatewayError: 인증/조회 실패 또는 네트워크 오류 (Auth, lookup or network failure)
        """
        try:
            async with self._client() as client:
                token_resp = await client.post(
                    "/users/getToken",
                    json={"imp_key": settings.PORTONE_API_KEY, "imp_secret": settings.PORTONE_API_SECRET},
                )
                access_token: str = self._unwrap(token_resp)["access_token"]

                payment_resp = await client.get(
                    f"/payments/{imp_uid}",
                    headers={"Authorization": access_token},
                )
                payment: dict = self._unwrap(payment_resp)
        except httpx.HTTPError:
            raise PaymentGatewayError(MESSAGES["MEMBERSHIP"]["PAYMENT"]["GATEWAY_ERROR"])

        return GatewayPayment(
            imp_uid=payment["imp_uid"],
            merchant_uid=payment.get("merchant_uid") or "",
            amount=int(payment["amount"]),
            status=payment["status"],
        )


# 싱글턴 인스턴스 - Singleton instance
portone_gateway: PortOneGateway = PortOneGateway()
