"""위치 라우터 — 스페이스 위치 CRUD 엔드포인트.

Location Router — CRUD endpoints for the locations of a space.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from peoplemover.database import get_db
from peoplemover.schemas.common import MessageResponse
from peoplemover.schemas.trait import LocationCreate, LocationResponse, LocationUpdate
from peoplemover.services.location_service import location_service

router: APIRouter = APIRouter()


@router.get("/spaces/{space_id}/locations", response_model=list[LocationResponse])
async def list_locations(
    space_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[LocationResponse]:
    """스페이스의 위치 목록을 조회합니다 — List the locations of a space."""
    return await location_service.list_locations(db, space_id)


@router.post("/spaces/{space_id}/locations", response_model=LocationResponse, status_code=201)
async def create_location(
    space_id: UUID,
    data: LocationCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> LocationResponse:
    """새 위치를 추가합니다 — Add a location to a space."""
    result: LocationResponse = await location_service.create_location(db, space_id, data)
    await db.commit()
    return result


@router.put("/spaces/{space_id}/locations/{location_id}", response_model=LocationResponse)
async def update_location(
    space_id: UUID,
    location_id: UUID,
    data: LocationUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> LocationResponse:
    """위치 이름을 변경합니다 — Rename a location."""
    result: LocationResponse = await location_service.update_location(db, space_id, location_id, data)
    await db.commit()
    return result


@router.delete("/spaces/{space_id}/locations/{location_id}", response_model=MessageResponse)
async def delete_location(
    space_id: UUID,
    location_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MessageResponse:
    """위치를 삭제합니다 — Delete a location."""
    result: MessageResponse = await location_service.delete_location(db, space_id, location_id)
    await db.commit()
    return result
