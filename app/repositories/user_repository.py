"""사용자 레포지토리 — 사용자 CRUD 쿼리.

User Repository — CRUD queries for platform user accounts.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User
from app.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """사용자 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리."""

    def __init__(self) -> None:
        super().__init__(User)

    async def get_active(
        self,
        db: AsyncSession,
        user_id: int,
    ) -> User | None:
        """탈퇴하지 않은 사용자를 ID로 조회합니다.

        Retrieve a user by id, skipping soft-deleted accounts.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user_id: 사용자 ID (User id)

        Returns:
            User | None: 활성 사용자 또는 None (Active user or None)
        """
        result = await db.execute(
            select(User).where(User.id == user_id, User.deleted_at.is_(None))
        )
        return result.scalar_one_or_none()

    async def email_exists(self, db: AsyncSession, email: str) -> bool:
        return await self.exists(db, {"email": email})


# 싱글턴 인스턴스 - Singleton instance
user_repository: UserRepository = UserRepository()
