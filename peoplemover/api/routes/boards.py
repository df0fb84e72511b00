"""보드 라우터 — 스페이스 하위 보드 엔드포인트.

Board Router — Endpoints for the boards of a space.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from peoplemover.database import get_db
from peoplemover.schemas.common import MessageResponse
from peoplemover.schemas.space import BoardCreate, BoardResponse
from peoplemover.services.board_service import board_service

router: APIRouter = APIRouter()


@router.get("/spaces/{space_id}/boards", response_model=list[BoardResponse])
async def list_boards(
    space_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[BoardResponse]:
    """스페이스의 보드 목록을 제품과 함께 조회합니다.

    List the boards of a space with their products.
    """
    return await board_service.list_boards(db, space_id)


@router.post("/spaces/{space_id}/boards", response_model=BoardResponse, status_code=201)
async def create_board(
    space_id: UUID,
    data: BoardCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> BoardResponse:
    """새 보드를 생성합니다 (미배정 제품 포함).

    Create a board with its unassigned product.
    """
    result: BoardResponse = await board_service.create_board(db, space_id, data)
    await db.commit()
    return result


@router.delete("/spaces/{space_id}/boards/{board_id}", response_model=MessageResponse)
async def delete_board(
    space_id: UUID,
    board_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MessageResponse:
    """보드와 소속 제품, 그 배정을 삭제합니다.

    Delete a board, its products and their assignments.
    """
    result: MessageResponse = await board_service.delete_board(db, space_id, board_id)
    await db.commit()
    return result
