"""멤버십 라우터 — 결제 확인 및 내 멤버십 조회.

Membership Router. The payment is verified against the gateway before a
membership is issued.
"""

from typing import Annotated

from fastapi import APIRouter, Query

from app.api.deps import CurrentContext, DbSession
from app.schemas.membership import MembershipResponse, PaymentConfirmRequest
from app.services.membership_service import membership_service
from app.utils.response import ApiResponse

router: APIRouter = APIRouter()


@router.post("/payment", response_model=ApiResponse[MembershipResponse], status_code=201)
async def confirm_payment(data: PaymentConfirmRequest, db: DbSession, ctx: CurrentContext) -> ApiResponse:
    """결제 확인 — 게이트웨이 결제 내역 검증 후 멤버십을 발급합니다."""
    result: ApiResponse = await membership_service.confirm_payment(db, ctx, data)
    await db.commit()
    return result


@router.get("", response_model=ApiResponse[MembershipResponse])
async def get_my_membership(
    community_id: Annotated[int, Query(alias="communityId")],
    db: DbSession,
    ctx: CurrentContext,
) -> ApiResponse:
    """내 멤버십 조회 — 만료된 멤버십은 EXPIRED로 갱신되므로 커밋합니다."""
    result: ApiResponse = await membership_service.find_my_membership(db, ctx, community_id)
    await db.commit()
    return result
