"""배정 레포지토리 — 배정 이력(타임라인) 관련 DB 쿼리 담당.

Assignment Repository — Timeline store for effective-dated assignment rows.
Extends BaseRepository with the per-person history queries used by the
temporal resolution and reassignment services.

Row Order:
    모든 목록 쿼리는 (effective_date, created_at, id) 순으로 정렬됩니다.
    Every list query orders rows by creation within an effective date, so
    product names joined from them come out in a reproducible order.
"""

from datetime import date
from typing import Sequence
from uuid import UUID

from sqlalchemy import Select, delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from peoplemover.models.assignment import Assignment
from peoplemover.models.product import Product
from peoplemover.repositories.base import BaseRepository


class AssignmentRepository(BaseRepository[Assignment]):
    """배정 레포지토리.

    Assignment repository with person/product/date history queries.

    Extends:
        BaseRepository[Assignment]
    """

    def __init__(self) -> None:
        super().__init__(Assignment)

    @staticmethod
    def _ordered(query: Select) -> Select:
        """배정 행 기본 정렬 — Stable row order within an effective date."""
        return query.order_by(
            Assignment.effective_date.asc(),
            Assignment.created_at.asc(),
            Assignment.id.asc(),
        )

    async def get_by_person(
        self,
        db: AsyncSession,
        person_id: UUID,
    ) -> Sequence[Assignment]:
        """특정 사람의 모든 배정 행을 조회합니다.

        Retrieve every assignment row of a person, dated or not.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            person_id: 사람 UUID (Person UUID)

        Returns:
            Sequence[Assignment]: 배정 목록 (Assignment rows)
        """
        query: Select = select(Assignment).where(Assignment.person_id == person_id)
        result = await db.execute(self._ordered(query))
        return result.scalars().all()

    async def get_by_person_and_effective_date(
        self,
        db: AsyncSession,
        person_id: UUID,
        effective_date: date,
    ) -> Sequence[Assignment]:
        """특정 날짜에 적용되는 사람의 배정 행을 조회합니다.

        Retrieve the rows of a person whose effective date is exactly the given date.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            person_id: 사람 UUID (Person UUID)
            effective_date: 적용 시작일 (Exact effective date)

        Returns:
            Sequence[Assignment]: 해당 날짜의 배정 목록 (Rows at that date)
        """
        query: Select = select(Assignment).where(
            Assignment.person_id == person_id,
            Assignment.effective_date == effective_date,
        )
        result = await db.execute(self._ordered(query))
        return result.scalars().all()

    async def get_by_person_effective_on_or_before(
        self,
        db: AsyncSession,
        person_id: UUID,
        requested_date: date,
    ) -> Sequence[Assignment]:
        """요청일 이전(포함)에 적용된 날짜 있는 배정을 오름차순으로 조회합니다.

        Retrieve a person's dated rows with effective_date <= requested_date,
        ascending by effective date. NULL-dated rows are excluded.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            person_id: 사람 UUID (Person UUID)
            requested_date: 기준일 (Date to resolve at)

        Returns:
            Sequence[Assignment]: 날짜 오름차순 배정 목록 (Dated rows, ascending)
        """
        query: Select = select(Assignment).where(
            Assignment.person_id == person_id,
            Assignment.effective_date.is_not(None),
            Assignment.effective_date <= requested_date,
        )
        result = await db.execute(self._ordered(query))
        return result.scalars().all()

    async def get_by_person_without_effective_date(
        self,
        db: AsyncSession,
        person_id: UUID,
    ) -> Sequence[Assignment]:
        """날짜 없는 기준 배정을 조회합니다.

        Retrieve a person's baseline rows (NULL effective date).
        """
        query: Select = select(Assignment).where(
            Assignment.person_id == person_id,
            Assignment.effective_date.is_(None),
        )
        result = await db.execute(self._ordered(query))
        return result.scalars().all()

    async def get_by_product(
        self,
        db: AsyncSession,
        product_id: UUID,
    ) -> Sequence[Assignment]:
        """특정 제품을 참조하는 모든 배정을 조회합니다.

        Retrieve every row referencing a product.
        """
        query: Select = select(Assignment).where(Assignment.product_id == product_id)
        result = await db.execute(self._ordered(query))
        return result.scalars().all()

    async def get_by_person_and_board(
        self,
        db: AsyncSession,
        person_id: UUID,
        board_id: UUID,
    ) -> Sequence[Assignment]:
        """특정 보드의 제품에 대한 사람의 배정을 조회합니다.

        Retrieve a person's rows whose product belongs to the given board.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            person_id: 사람 UUID (Person UUID)
            board_id: 보드 UUID (Board UUID)

        Returns:
            Sequence[Assignment]: 보드 내 배정 목록 (Rows on that board)
        """
        query: Select = (
            select(Assignment)
            .join(Product, Product.id == Assignment.product_id)
            .where(Assignment.person_id == person_id, Product.board_id == board_id)
        )
        result = await db.execute(self._ordered(query))
        return result.scalars().all()

    async def check_duplicate(
        self,
        db: AsyncSession,
        person_id: UUID,
        product_id: UUID,
    ) -> bool:
        """같은 사람-제품 조합의 배정이 이미 있는지 확인합니다.

        Check whether the person already holds a row for the product.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            person_id: 사람 UUID (Person UUID)
            product_id: 제품 UUID (Product UUID)

        Returns:
            bool: 중복 존재 여부 (Whether a duplicate exists)
        """
        count: int = (
            await db.execute(
                select(func.count())
                .select_from(Assignment)
                .where(
                    Assignment.person_id == person_id,
                    Assignment.product_id == product_id,
                )
            )
        ).scalar() or 0
        return count > 0

    async def delete_rows(
        self,
        db: AsyncSession,
        rows: Sequence[Assignment],
    ) -> int:
        """주어진 배정 행들을 삭제합니다.

        Delete the given rows and flush. Returns the number of deleted rows.
        """
        for row in rows:
            await db.delete(row)
        await db.flush()
        return len(rows)

    async def delete_by_product(
        self,
        db: AsyncSession,
        product_id: UUID,
    ) -> int:
        """제품을 참조하는 모든 배정을 일괄 삭제합니다.

        Bulk delete every row referencing a product.

        Returns:
            int: 삭제된 행 수 (Number of deleted rows)
        """
        result = await db.execute(
            delete(Assignment)
            .where(Assignment.product_id == product_id)
            .execution_options(synchronize_session="fetch")
        )
        await db.flush()
        return result.rowcount or 0


# 싱글턴 인스턴스 — Singleton instance
assignment_repository: AssignmentRepository = AssignmentRepository()
