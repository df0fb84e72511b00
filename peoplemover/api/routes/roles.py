"""역할 라우터 — 스페이스 역할 CRUD 엔드포인트.

Role Router — CRUD endpoints for the roles of a space.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from peoplemover.database import get_db
from peoplemover.schemas.common import MessageResponse
from peoplemover.schemas.trait import RoleCreate, RoleResponse, RoleUpdate
from peoplemover.services.role_service import role_service

router: APIRouter = APIRouter()


@router.get("/spaces/{space_id}/roles", response_model=list[RoleResponse])
async def list_roles(
    space_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[RoleResponse]:
    """스페이스의 역할 목록을 조회합니다 — List the roles of a space."""
    return await role_service.list_roles(db, space_id)


@router.post("/spaces/{space_id}/roles", response_model=RoleResponse, status_code=201)
async def create_role(
    space_id: UUID,
    data: RoleCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> RoleResponse:
    """새 역할을 추가합니다 — Add a role to a space."""
    result: RoleResponse = await role_service.create_role(db, space_id, data)
    await db.commit()
    return result


@router.put("/spaces/{space_id}/roles/{role_id}", response_model=RoleResponse)
async def update_role(
    space_id: UUID,
    role_id: UUID,
    data: RoleUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> RoleResponse:
    """역할을 수정합니다 — Update a role."""
    result: RoleResponse = await role_service.update_role(db, space_id, role_id, data)
    await db.commit()
    return result


@router.delete("/spaces/{space_id}/roles/{role_id}", response_model=MessageResponse)
async def delete_role(
    space_id: UUID,
    role_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MessageResponse:
    """역할을 삭제합니다 — Delete a role."""
    result: MessageResponse = await role_service.delete_role(db, space_id, role_id)
    await db.commit()
    return result
