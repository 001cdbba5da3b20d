"""멤버십 및 결제 관련 SQLAlchemy ORM 모델 정의.

Membership and payment SQLAlchemy ORM model definitions.

Tables:
    - memberships: 유료 멤버십 (Paid tier linking a CommunityUser to benefits)
    - membership_payments: 결제 기록 (One row per confirmed gateway payment)
"""

from datetime import datetime, timezone
from enum import Enum

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class MembershipStatus(str, Enum):
    ACTIVE = "ACTIVE"
    EXPIRED = "EXPIRED"


class Membership(Base):
    """멤버십 모델.

    Membership — created when a payment is confirmed. A CommunityUser keeps
    one row per purchase; the latest row is the current membership.

    Attributes:
        id: 고유 식별자 (Primary key)
        community_user_id: 커뮤니티 사용자 FK (CASCADE)
        price: 결제 당시 가격 (Price tier at purchase time)
        status: 상태 (ACTIVE / EXPIRED)
        started_at: 시작 일시 (Start timestamp)
        expires_at: 만료 일시 (Expiration timestamp)
    """

    __tablename__ = "memberships"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    community_user_id: Mapped[int] = mapped_column(Integer, ForeignKey("community_users.id", ondelete="CASCADE"), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default=MembershipStatus.ACTIVE.value)
    started_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))


class MembershipPayment(Base):
    """멤버십 결제 기록 모델.

    Attributes:
        imp_uid: 게이트웨이 결제 고유번호 (Gateway payment id, unique)
        merchant_uid: 가맹점 주문번호 (Merchant order id)
        amount: 결제 금액 (Paid amount)
        status: 게이트웨이 결제 상태 (Gateway status, e.g. "paid")
    """

    __tablename__ = "membership_payments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    community_id: Mapped[int] = mapped_column(Integer, ForeignKey("communities.id", ondelete="CASCADE"), nullable=False)
    imp_uid: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    merchant_uid: Mapped[str] = mapped_column(String(100), nullable=False)
    amount: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
