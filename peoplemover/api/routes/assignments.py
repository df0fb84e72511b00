"""배정 라우터 — 시점별 배정 조회 및 배정 변경 엔드포인트.

Assignment Router — Date-resolved reads and assignment mutations.

Endpoints:
    GET    /assignments/{space_id}/date/{requested_date}  날짜별 활성 배정
    GET    /assignments/person/{person_id}                 사람의 모든 배정
    POST   /assignments                                    단일 배정 생성
    POST   /assignments/date                               날짜별 일괄 교체
    PUT    /assignments/{assignment_id}                    임시 여부/제품 변경
    DELETE /assignments/{assignment_id}                    단일 배정 삭제
    DELETE /assignments/person/{person_id}                 사람의 모든 배정 삭제
"""

from datetime import date
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from peoplemover.api.deps import get_requested_date
from peoplemover.database import get_db
from peoplemover.schemas.assignment import (
    AssignmentCreate,
    AssignmentResponse,
    AssignmentUpdate,
    CreateAssignmentsForDateRequest,
)
from peoplemover.schemas.common import MessageResponse
from peoplemover.services.assignment_service import assignment_service

router: APIRouter = APIRouter()


@router.get("/{space_id}/date/{requested_date}", response_model=list[AssignmentResponse])
async def get_assignments_by_date(
    space_id: UUID,
    target_date: Annotated[date, Depends(get_requested_date)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[AssignmentResponse]:
    """요청일에 유효한 스페이스의 모든 배정을 조회합니다.

    List every assignment active in the space on the requested date.
    """
    return await assignment_service.get_assignments_by_date(db, space_id, target_date)


@router.get("/person/{person_id}", response_model=list[AssignmentResponse])
async def get_assignments_for_person(
    person_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[AssignmentResponse]:
    """한 사람의 모든 배정 행을 조회합니다 — Every row of a person."""
    return await assignment_service.get_assignments_for_person(db, person_id)


@router.post("", response_model=AssignmentResponse, status_code=201)
async def create_assignment(
    data: AssignmentCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> AssignmentResponse:
    """사람을 제품에 배정합니다.

    Assign a person to a product (undated).
    """
    result: AssignmentResponse = await assignment_service.create_assignment(db, data)
    await db.commit()
    return result


@router.post("/date", response_model=list[AssignmentResponse])
async def bulk_replace_assignments_for_date(
    data: CreateAssignmentsForDateRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[AssignmentResponse]:
    """특정 날짜부터 적용되는 사람의 배정 집합을 교체합니다.

    Replace the person's assignments taking effect on the requested date.
    """
    result: list[AssignmentResponse] = await assignment_service.bulk_replace_assignments_for_date(db, data)
    await db.commit()
    return result


@router.put("/{assignment_id}", response_model=AssignmentResponse)
async def update_assignment(
    assignment_id: UUID,
    data: AssignmentUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> AssignmentResponse:
    """배정의 임시 여부와 제품을 변경합니다 — Update placeholder or product."""
    result: AssignmentResponse = await assignment_service.update_assignment(db, assignment_id, data)
    await db.commit()
    return result


@router.delete("/person/{person_id}", response_model=MessageResponse)
async def delete_assignments_for_person(
    person_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MessageResponse:
    """한 사람의 모든 배정을 삭제합니다 — Delete every row of a person."""
    result: MessageResponse = await assignment_service.delete_assignments_for_person(db, person_id)
    await db.commit()
    return result


@router.delete("/{assignment_id}", response_model=MessageResponse)
async def delete_assignment(
    assignment_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MessageResponse:
    """배정을 삭제합니다.

    Delete one assignment; a person left with nothing on the board goes back
    to the board's unassigned product.
    """
    result: MessageResponse = await assignment_service.delete_assignment(db, assignment_id)
    await db.commit()
    return result
