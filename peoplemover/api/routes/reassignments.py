"""재배정 라우터 — 특정 날짜의 이동 내역 조회.

Reassignment Router — Who moved between products on a date.
"""

from datetime import date
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from peoplemover.api.deps import get_requested_date
from peoplemover.database import get_db
from peoplemover.schemas.assignment import ReassignmentResponse
from peoplemover.services.reassignment_service import reassignment_service

router: APIRouter = APIRouter()


@router.get("/{space_id}/{requested_date}", response_model=list[ReassignmentResponse])
async def get_reassignments(
    space_id: UUID,
    target_date: Annotated[date, Depends(get_requested_date)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[ReassignmentResponse]:
    """요청일에 제품이 바뀐 사람들의 이동 내역을 조회합니다.

    List the people whose products changed on the requested date.
    """
    return await reassignment_service.get_reassignments(db, space_id, target_date)
