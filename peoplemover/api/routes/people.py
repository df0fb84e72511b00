"""사람 라우터 — 사람 CRUD 엔드포인트.

Person Router — CRUD endpoints for the people of a space.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from peoplemover.database import get_db
from peoplemover.schemas.common import MessageResponse
from peoplemover.schemas.person import PersonCreate, PersonResponse, PersonUpdate
from peoplemover.services.person_service import person_service

router: APIRouter = APIRouter()


@router.get("/spaces/{space_id}/people", response_model=list[PersonResponse])
async def list_people(
    space_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[PersonResponse]:
    """스페이스의 사람 목록을 조회합니다 — List the people of a space."""
    return await person_service.list_people(db, space_id)


@router.post("/spaces/{space_id}/people", response_model=PersonResponse, status_code=201)
async def create_person(
    space_id: UUID,
    data: PersonCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> PersonResponse:
    """새 사람을 생성합니다 — Create a person."""
    result: PersonResponse = await person_service.create_person(db, space_id, data)
    await db.commit()
    return result


@router.put("/people/{person_id}", response_model=PersonResponse)
async def update_person(
    person_id: UUID,
    data: PersonUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> PersonResponse:
    """사람 정보를 수정합니다 — Update a person."""
    result: PersonResponse = await person_service.update_person(db, person_id, data)
    await db.commit()
    return result


@router.delete("/people/{person_id}", response_model=MessageResponse)
async def delete_person(
    person_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MessageResponse:
    """사람과 그 사람의 모든 배정을 삭제합니다.

    Delete a person together with all of their assignments.
    """
    result: MessageResponse = await person_service.delete_person(db, person_id)
    await db.commit()
    return result
