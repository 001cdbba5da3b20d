"""멤버십 레포지토리 — 멤버십/결제 기록 쿼리.

Membership Repository — Queries for memberships and gateway payment records.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.membership import Membership, MembershipPayment
from app.repositories.base import BaseRepository


class MembershipRepository(BaseRepository[Membership]):
    """멤버십 테이블 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Membership)

    async def get_latest(self, db: AsyncSession, community_user_id: int) -> Membership | None:
        """가장 최근 시작된 멤버십을 조회합니다 (Most recently started membership)."""
        result = await db.execute(
            select(Membership)
            .where(Membership.community_user_id == community_user_id)
            .order_by(Membership.started_at.desc(), Membership.id.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()


class MembershipPaymentRepository(BaseRepository[MembershipPayment]):
    """결제 기록 테이블 레포지토리."""

    def __init__(self) -> None:
        super().__init__(MembershipPayment)

    async def imp_uid_exists(self, db: AsyncSession, imp_uid: str) -> bool:
        return await self.exists(db, {"imp_uid": imp_uid})


# 싱글턴 인스턴스 - Singleton instances
membership_repository: MembershipRepository = MembershipRepository()
membership_payment_repository: MembershipPaymentRepository = MembershipPaymentRepository()
