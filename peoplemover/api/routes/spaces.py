"""스페이스 라우터 — 스페이스 생성/조회 엔드포인트.

Space Router — Endpoints for spaces and their last-modified timestamp.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from peoplemover.database import get_db
from peoplemover.schemas.space import SpaceCreate, SpaceResponse, TimestampResponse
from peoplemover.services.space_service import space_service

router: APIRouter = APIRouter()


@router.get("", response_model=list[SpaceResponse])
async def list_spaces(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[SpaceResponse]:
    """스페이스 목록을 조회합니다 — List all spaces."""
    return await space_service.list_spaces(db)


@router.post("", response_model=SpaceResponse, status_code=201)
async def create_space(
    data: SpaceCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> SpaceResponse:
    """새 스페이스를 생성합니다 (기본 보드 포함).

    Create a space with its default board.
    """
    result: SpaceResponse = await space_service.create_space(db, data)
    await db.commit()
    return result


@router.get("/{space_id}", response_model=SpaceResponse)
async def get_space(
    space_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> SpaceResponse:
    """스페이스 상세를 조회합니다 — Retrieve one space."""
    return await space_service.get_space(db, space_id)


@router.get("/{space_id}/last-modified", response_model=TimestampResponse)
async def get_last_modified(
    space_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TimestampResponse:
    """스페이스 마지막 변경 일시를 조회합니다.

    Retrieve when anything in the space last changed.
    """
    return await space_service.get_last_modified(db, space_id)
