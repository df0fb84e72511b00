"""보드 서비스 — 보드 생성/조회/삭제 비즈니스 로직.

Board Service — Business logic for boards.
Every board owns exactly one "unassigned" product that people fall back to
when they have no other assignment on the board; the board keeps an
explicit reference to it.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from peoplemover.config import settings
from peoplemover.models.product import Product
from peoplemover.models.space import Board
from peoplemover.repositories.assignment_repository import assignment_repository
from peoplemover.repositories.board_repository import board_repository
from peoplemover.repositories.product_repository import product_repository
from peoplemover.repositories.space_repository import space_repository
from peoplemover.schemas.common import MessageResponse
from peoplemover.schemas.space import BoardCreate, BoardResponse
from peoplemover.utils.exceptions import BadRequestError, DuplicateError, NotFoundError


class BoardService:
    """보드 관련 비즈니스 로직을 처리하는 서비스.

    Service handling board business logic.
    """

    def _to_response(self, board: Board, products: list[Product]) -> BoardResponse:
        """보드 모델을 응답 스키마로 변환합니다.

        Convert a Board and its products to a BoardResponse.
        """
        from peoplemover.services.product_service import product_service

        return BoardResponse(
            id=str(board.id),
            space_id=str(board.space_id),
            name=board.name,
            unassigned_product_id=(
                str(board.unassigned_product_id) if board.unassigned_product_id else None
            ),
            products=[product_service.to_response(p) for p in products],
        )

    async def get_board_or_404(
        self,
        db: AsyncSession,
        board_id: UUID,
        space_id: UUID | None = None,
    ) -> Board:
        """보드를 조회하고 없으면 404를 발생시킵니다.

        Raises:
            NotFoundError: 보드를 찾을 수 없을 때 (Board not found)
        """
        board: Board | None = await board_repository.get_by_id(db, board_id, space_id)
        if board is None:
            raise NotFoundError("Board not found")
        return board

    async def list_boards(
        self,
        db: AsyncSession,
        space_id: UUID,
    ) -> list[BoardResponse]:
        """스페이스의 보드 목록을 제품과 함께 조회합니다.

        List the boards of a space, each with its products.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            space_id: 스페이스 UUID (Space UUID)

        Returns:
            list[BoardResponse]: 보드 목록 (Boards in creation order)
        """
        if await space_repository.get_by_id(db, space_id) is None:
            raise NotFoundError("Space not found")

        boards: list[Board] = await board_repository.get_by_space(db, space_id)
        return [self._to_response(b, list(b.products)) for b in boards]

    async def create_board(
        self,
        db: AsyncSession,
        space_id: UUID,
        data: BoardCreate,
    ) -> BoardResponse:
        """새 보드와 그 보드의 미배정 제품을 생성합니다.

        Create a board together with its unassigned product, and record the
        product on the board.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            space_id: 소속 스페이스 UUID (Parent space)
            data: 보드 생성 데이터 (Board creation data)

        Returns:
            BoardResponse: 생성된 보드 응답 (Created board response)

        Raises:
            NotFoundError: 스페이스를 찾을 수 없을 때 (Space not found)
            BadRequestError: 이름이 비어 있을 때 (Empty name)
            DuplicateError: 같은 스페이스에 같은 이름의 보드가 있을 때
                            (Board name already used in the space)
        """
        if await space_repository.get_by_id(db, space_id) is None:
            raise NotFoundError("Space not found")

        name: str = data.name.strip()
        if not name:
            raise BadRequestError("Board name is required")

        if await board_repository.exists(db, {"space_id": space_id, "name": name}):
            raise DuplicateError(f"Board already exists: {name}")

        board: Board = await board_repository.create(db, {"space_id": space_id, "name": name})

        unassigned: Product = await product_repository.create(
            db,
            {
                "space_id": space_id,
                "board_id": board.id,
                "name": settings.UNASSIGNED_PRODUCT_NAME,
            },
        )
        board.unassigned_product_id = unassigned.id
        await db.flush()

        await space_repository.touch(db, space_id)
        return self._to_response(board, [unassigned])

    async def delete_board(
        self,
        db: AsyncSession,
        space_id: UUID,
        board_id: UUID,
    ) -> MessageResponse:
        """보드와 소속 제품, 해당 제품의 모든 배정을 삭제합니다.

        Delete a board with its products and every assignment to them.

        Raises:
            NotFoundError: 보드를 찾을 수 없을 때 (Board not found)
        """
        board: Board = await self.get_board_or_404(db, board_id, space_id)

        products = await product_repository.get_all(db, filters={"board_id": board.id})
        for product in products:
            await assignment_repository.delete_by_product(db, product.id)
            await db.delete(product)
        await db.flush()

        await db.delete(board)
        await db.flush()

        await space_repository.touch(db, space_id)
        return MessageResponse(message="Board deleted")


# 싱글턴 인스턴스 — Singleton instance
board_service: BoardService = BoardService()
