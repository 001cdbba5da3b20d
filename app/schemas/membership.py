"""멤버십 결제 관련 Pydantic 요청/응답 스키마 정의.

Membership payment request/response schema definitions.
"""

from datetime import datetime

from pydantic import Field

from app.schemas.common import CamelModel


class PaymentConfirmRequest(CamelModel):
    """결제 확인 요청 스키마.

    클라이언트가 결제창 콜백에서 받은 값을 그대로 전달합니다.
    Values the client received from the payment window callback.

    Attributes:
        community_id: 멤버십을 구매할 커뮤니티 ID
        imp_uid: 게이트웨이 결제 고유번호 (Gateway payment id)
        merchant_uid: 가맹점 주문번호 (Merchant order id)
    """

    community_id: int
    imp_uid: str = Field(min_length=1)
    merchant_uid: str = Field(min_length=1)


class MembershipResponse(CamelModel):
    """멤버십 응답 스키마."""

    membership_id: int
    community_user_id: int
    price: int
    status: str
    started_at: datetime
    expires_at: datetime
