"""제품 레포지토리 — 제품 CRUD 및 이름 조회.

Product Repository — CRUD and name lookups for products.
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import Select, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from peoplemover.models.product import Product
from peoplemover.repositories.base import BaseRepository


class ProductRepository(BaseRepository[Product]):
    """제품 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the products table.
    """

    def __init__(self) -> None:
        super().__init__(Product)

    async def get_by_space(
        self,
        db: AsyncSession,
        space_id: UUID,
    ) -> Sequence[Product]:
        """스페이스의 모든 제품을 생성 순으로 조회합니다.

        Retrieve every product of a space in creation order.
        """
        query: Select = (
            select(Product)
            .where(Product.space_id == space_id)
            .order_by(Product.created_at, Product.id)
        )
        result = await db.execute(query)
        return result.scalars().all()

    async def get_by_board_and_name(
        self,
        db: AsyncSession,
        board_id: UUID,
        name: str,
    ) -> Product | None:
        """보드 내 이름으로 제품을 조회합니다.

        Retrieve a product by its name within a board.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            board_id: 보드 UUID (Board UUID)
            name: 제품 이름 (Product name)

        Returns:
            Product | None: 조회된 제품 또는 None (Found product or None)
        """
        query: Select = select(Product).where(
            Product.board_id == board_id,
            Product.name == name,
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def get_name_map(
        self,
        db: AsyncSession,
        space_id: UUID,
    ) -> dict[UUID, str]:
        """스페이스 제품의 ID → 이름 매핑 — Product id to name map for a space."""
        result = await db.execute(
            select(Product.id, Product.name).where(Product.space_id == space_id)
        )
        return {row.id: row.name for row in result.all()}

    async def clear_location(
        self,
        db: AsyncSession,
        space_location_id: UUID,
    ) -> None:
        """삭제되는 위치를 참조하는 제품의 위치를 비웁니다 — Unset a location on its products."""
        await db.execute(
            update(Product)
            .where(Product.space_location_id == space_location_id)
            .values(space_location_id=None)
            .execution_options(synchronize_session="fetch")
        )
        await db.flush()


# 싱글턴 인스턴스 — Singleton instance
product_repository: ProductRepository = ProductRepository()
