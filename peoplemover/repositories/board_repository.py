"""보드 레포지토리 — 보드 CRUD 및 제품 포함 조회.

Board Repository — CRUD and product eager loading for boards.
"""

from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from peoplemover.models.space import Board
from peoplemover.repositories.base import BaseRepository


class BoardRepository(BaseRepository[Board]):
    """보드 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the boards table.
    """

    def __init__(self) -> None:
        super().__init__(Board)

    async def get_by_space(
        self,
        db: AsyncSession,
        space_id: UUID,
    ) -> list[Board]:
        """스페이스의 모든 보드를 제품과 함께 조회합니다.

        Retrieve every board of a space with its products eagerly loaded.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            space_id: 스페이스 UUID (Space UUID)

        Returns:
            list[Board]: 보드 목록 (Boards in creation order)
        """
        query: Select = (
            select(Board)
            .options(selectinload(Board.products))
            .where(Board.space_id == space_id)
            .order_by(Board.created_at)
            .execution_options(populate_existing=True)
        )
        result = await db.execute(query)
        return list(result.scalars().all())


# 싱글턴 인스턴스 — Singleton instance
board_repository: BoardRepository = BoardRepository()
