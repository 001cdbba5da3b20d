"""멤버십 서비스 — 결제 확인 후 멤버십 발급, 내 멤버십 조회.

Membership Service — Verifies a gateway payment and activates a paid
membership for the caller's community identity.
"""

from datetime import datetime, timedelta, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import transaction
from app.models.membership import Membership, MembershipStatus
from app.repositories.membership_repository import membership_payment_repository, membership_repository
from app.schemas.membership import MembershipResponse, PaymentConfirmRequest
from app.services.community_service import community_service
from app.services.payment_gateway import GatewayPayment, PortOneGateway, portone_gateway
from app.services.role_service import AuthContext
from app.utils.exceptions import BadRequestError, DuplicateError, NotFoundError
from app.utils.messages import MESSAGES
from app.utils.response import ApiResponse, create_response


class MembershipService:
    """멤버십 서비스.

    Attributes:
        gateway: 결제 조회 클라이언트 (Payment lookup client, swappable in tests)
    """

    def __init__(self, gateway: PortOneGateway) -> None:
        self.gateway = gateway

    def to_response(self, membership: Membership) -> MembershipResponse:
        return MembershipResponse(
            membership_id=membership.id,
            community_user_id=membership.community_user_id,
            price=membership.price,
            status=membership.status,
            started_at=membership.started_at,
            expires_at=membership.expires_at,
        )

    async def confirm_payment(
        self,
        db: AsyncSession,
        ctx: AuthContext,
        data: PaymentConfirmRequest,
    ) -> ApiResponse:
        """결제를 검증하고 멤버십을 발급합니다.

        The gateway's record is the source of truth: the payment must be
        `paid`, its amount must equal the community's membership price
        and its merchant_uid must match the order the client reports.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            ctx: 요청 인가 컨텍스트
            data: communityId, impUid, merchantUid

        Returns:
            ApiResponse: status 201, data = MembershipResponse

        Raises:
            NotFoundError: 커뮤니티 없음
            PermissionDeniedError: 커뮤니티 미가입
            DuplicateError: 이미 처리된 imp_uid (Reused gateway payment id)
            BadRequestError: 미결제, 금액 또는 주문번호 불일치 (Not paid, amount or order mismatch)
            PaymentGatewayError: 게이트웨이 조회 실패
        """
        community = await community_service.get_or_404(db, data.community_id)
        community_user_id = ctx.require_member(data.community_id)

        if await membership_payment_repository.imp_uid_exists(db, data.imp_uid):
            raise DuplicateError(MESSAGES["MEMBERSHIP"]["PAYMENT"]["DUPLICATE"])

        payment: GatewayPayment = await self.gateway.get_payment(data.imp_uid)
        if payment.status != "paid":
            raise BadRequestError(MESSAGES["MEMBERSHIP"]["PAYMENT"]["NOT_PAID"])
        if payment.amount != community.membership_price:
            raise BadRequestError(MESSAGES["MEMBERSHIP"]["PAYMENT"]["AMOUNT_MISMATCH"])
        if payment.merchant_uid != data.merchant_uid:
            raise BadRequestError(MESSAGES["MEMBERSHIP"]["PAYMENT"]["MERCHANT_MISMATCH"])

        started_at = datetime.now(timezone.utc)
        async with transaction(db):
            await membership_payment_repository.create(
                db,
                {
                    "user_id": ctx.user_id,
                    "community_id": data.community_id,
                    "imp_uid": payment.imp_uid,
                    "merchant_uid": payment.merchant_uid,
                    "amount": payment.amount,
                    "status": payment.status,
                },
            )
            membership = await membership_repository.create(
                db,
                {
                    "community_user_id": community_user_id,
                    "price": payment.amount,
                    "status": MembershipStatus.ACTIVE.value,
                    "started_at": started_at,
                    "expires_at": started_at + timedelta(days=settings.MEMBERSHIP_DURATION_DAYS),
                },
            )

        return create_response(201, MESSAGES["MEMBERSHIP"]["PAYMENT"]["SUCCEED"], self.to_response(membership))

    async def find_my_membership(
        self,
        db: AsyncSession,
        ctx: AuthContext,
        community_id: int,
    ) -> ApiResponse:
        """해당 커뮤니티에서의 최신 멤버십을 조회합니다.

        Expired memberships are reported with status EXPIRED.

        Raises:
            PermissionDeniedError: 커뮤니티 미가입
            NotFoundError: 멤버십 없음
        """
        community_user_id = ctx.require_member(community_id)
        membership: Membership | None = await membership_repository.get_latest(db, community_user_id)
        if membership is None:
            raise NotFoundError(MESSAGES["MEMBERSHIP"]["FIND_MY"]["NOT_FOUND"])

        expires_at = membership.expires_at
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        if membership.status == MembershipStatus.ACTIVE.value and expires_at < datetime.now(timezone.utc):
            membership = await membership_repository.update(
                db, membership.id, {"status": MembershipStatus.EXPIRED.value}
            )

        return create_response(200, MESSAGES["MEMBERSHIP"]["FIND_MY"]["SUCCEED"], self.to_response(membership))


# 싱글턴 인스턴스 - Singleton instance
membership_service: MembershipService = MembershipService(portone_gateway)
