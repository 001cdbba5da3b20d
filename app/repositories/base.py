"""공통 레포지토리 — 정수 PK 모델에 대한 조회/쓰기 헬퍼.

Shared repository base for integer-keyed models. Subclasses bind a model
and add their own queries; writes only flush, so the router that owns the
request decides when to commit.

Usage:
    class NoticeRepository(BaseRepository[Notice]):
        def __init__(self) -> None:
            super().__init__(Notice)
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """모델 하나에 묶인 제네릭 레포지토리.

    Attributes:
        model: 대상 ORM 모델 (Bound ORM model class)
    """

    def __init__(self, model: type[ModelType]) -> None:
        self.model: type[ModelType] = model

    def _where(self, query: Select, filters: dict[str, Any] | None) -> Select:
        # {컬럼명: 값} 동등 조건, 값이 None이면 건너뜀 (None values are ignored)
        for column_name, value in (filters or {}).items():
            column = getattr(self.model, column_name, None)
            if column is not None and value is not None:
                query = query.where(column == value)
        return query

    async def get_by_id(self, db: AsyncSession, record_id: int) -> ModelType | None:
        """PK로 조회합니다. 항상 DB를 조회하므로 벌크 삭제 이후에도 안전합니다.

        Always issues a SELECT, so rows removed by bulk deletes read as None.
        """
        result = await db.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def get_all(
        self,
        db: AsyncSession,
        filters: dict[str, Any] | None = None,
        order_by: Any | None = None,
    ) -> Sequence[ModelType]:
        """필터에 맞는 전체 목록 (Every row matching the equality filters)."""
        query = self._where(select(self.model), filters)
        if order_by is not None:
            query = query.order_by(order_by)
        return (await db.execute(query)).scalars().all()

    async def get_paginated(
        self,
        db: AsyncSession,
        query: Select,
        page: int = 1,
        limit: int = 20,
    ) -> tuple[Sequence[ModelType], int]:
        """정렬된 쿼리의 한 페이지와 전체 개수를 반환합니다.

        Returns one page of an already-ordered query together with the
        total row count of the unpaged query.

        Args:
            db: 비동기 세션
            query: 정렬/로딩 옵션이 포함된 SELECT (Ordered SELECT, may carry loader options)
            page: 1부터 시작하는 페이지 번호
            limit: 페이지 크기

        Returns:
            (페이지 항목, 전체 개수) (Page items, total)
        """
        # ORDER BY 없이 서브쿼리로 집계 (Count the unordered subquery)
        total: int = await db.scalar(select(func.count()).select_from(query.order_by(None).subquery())) or 0
        result = await db.execute(query.offset((page - 1) * limit).limit(limit))
        return result.scalars().all(), total

    async def count(self, db: AsyncSession, filters: dict[str, Any] | None = None) -> int:
        query = self._where(select(func.count()).select_from(self.model), filters)
        return await db.scalar(query) or 0

    async def exists(self, db: AsyncSession, filters: dict[str, Any]) -> bool:
        return await self.count(db, filters) > 0

    async def create(self, db: AsyncSession, obj_data: dict[str, Any]) -> ModelType:
        """행을 추가하고 flush 후 DB 기본값까지 채워서 반환합니다.

        Adds the row, flushes, and refreshes so server defaults and the new
        id are populated.
        """
        db_obj: ModelType = self.model(**obj_data)
        db.add(db_obj)
        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def update(
        self,
        db: AsyncSession,
        record_id: int,
        update_data: dict[str, Any],
    ) -> ModelType | None:
        """전달된 필드만 변경합니다. 행이 없으면 None.

        Applies only the given fields (callers pass exclude_unset dumps).
        Unknown keys are ignored.
        """
        db_obj = await self.get_by_id(db, record_id)
        if db_obj is None:
            return None

        for field, value in update_data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)
        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def delete(self, db: AsyncSession, record_id: int) -> bool:
        db_obj = await self.get_by_id(db, record_id)
        if db_obj is None:
            return False
        await db.delete(db_obj)
        await db.flush()
        return True
