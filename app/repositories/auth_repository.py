"""인증 레포지토리 — 리프레시 토큰 저장소.

Refresh token store. Tokens are single-use: rotation and sign-out delete
the row, and expired rows of a user are purged whenever a new token is
issued to that user.
"""

from datetime import datetime, timezone

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.token import RefreshToken
from app.models.user import User
from app.repositories.base import BaseRepository


class AuthRepository(BaseRepository[RefreshToken]):
    def __init__(self) -> None:
        super().__init__(RefreshToken)

    async def get_user_by_email(self, db: AsyncSession, email: str) -> User | None:
        """로그인용 이메일 조회. 탈퇴 회원도 반환하며 판단은 서비스가 합니다.

        Soft-deleted accounts are returned too; the caller rejects them.
        """
        return await db.scalar(select(User).where(User.email == email))

    async def create_refresh_token(
        self,
        db: AsyncSession,
        user_id: int,
        token: str,
        expires_at: datetime,
    ) -> RefreshToken:
        # 발급 시점에 만료된 토큰 정리 (Purge this user's expired tokens)
        await db.execute(
            delete(RefreshToken).where(
                RefreshToken.user_id == user_id,
                RefreshToken.expires_at < datetime.now(timezone.utc),
            )
        )
        return await self.create(db, {"user_id": user_id, "token": token, "expires_at": expires_at})

    async def get_refresh_token(self, db: AsyncSession, token: str) -> RefreshToken | None:
        return await db.scalar(select(RefreshToken).where(RefreshToken.token == token))

    async def delete_refresh_token(self, db: AsyncSession, token: str) -> bool:
        """토큰 행을 삭제합니다. 없던 토큰이면 False (False when nothing matched)."""
        result = await db.execute(delete(RefreshToken).where(RefreshToken.token == token))
        await db.flush()
        return result.rowcount > 0

    async def delete_user_refresh_tokens(self, db: AsyncSession, user_id: int) -> int:
        """사용자의 모든 토큰을 폐기합니다 (탈퇴 시 전 기기 로그아웃).

        Returns:
            삭제된 토큰 수 (Number of revoked tokens)
        """
        result = await db.execute(delete(RefreshToken).where(RefreshToken.user_id == user_id))
        await db.flush()
        return result.rowcount


# 싱글턴 인스턴스 - Singleton instance
auth_repository: AuthRepository = AuthRepository()
