"""역할 서비스 — 스페이스 역할 CRUD 비즈니스 로직.

Role Service — Business logic for the roles of a space.
Role names are unique within a space ignoring case. Deleting a role
unsets it on every person who held it.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from peoplemover.models.trait import SpaceRole
from peoplemover.repositories.person_repository import person_repository
from peoplemover.repositories.space_repository import space_repository
from peoplemover.repositories.trait_repository import space_role_repository
from peoplemover.schemas.common import MessageResponse
from peoplemover.schemas.trait import RoleCreate, RoleResponse, RoleUpdate
from peoplemover.utils.exceptions import BadRequestError, DuplicateError, NotFoundError


class RoleService:
    """역할 관련 비즈니스 로직을 처리하는 서비스.

    Service handling space role business logic.
    """

    def _to_response(self, role: SpaceRole) -> RoleResponse:
        return RoleResponse(
            id=str(role.id),
            space_id=str(role.space_id),
            name=role.name,
            color=role.color,
            created_at=role.created_at,
        )

    async def get_role_or_404(
        self,
        db: AsyncSession,
        role_id: UUID,
        space_id: UUID | None = None,
    ) -> SpaceRole:
        """역할을 조회하고 없으면 404를 발생시킵니다.

        Raises:
            NotFoundError: 역할을 찾을 수 없을 때 (Role not found in the space)
        """
        role: SpaceRole | None = await space_role_repository.get_by_id(db, role_id, space_id)
        if role is None:
            raise NotFoundError("Role not found")
        return role

    async def _check_name(
        self,
        db: AsyncSession,
        space_id: UUID,
        name: str | None,
        current_id: UUID | None = None,
    ) -> str:
        """이름 검증 — Non-blank and unused in the space ignoring case."""
        name = (name or "").strip()
        if not name:
            raise BadRequestError("Role name is required")
        existing: SpaceRole | None = await space_role_repository.get_by_name_ignore_case(
            db, space_id, name
        )
        if existing is not None and existing.id != current_id:
            raise DuplicateError(f"Role already exists: {name}")
        return name

    async def list_roles(
        self,
        db: AsyncSession,
        space_id: UUID,
    ) -> list[RoleResponse]:
        """스페이스의 역할 목록을 조회합니다 — List the roles of a space."""
        if await space_repository.get_by_id(db, space_id) is None:
            raise NotFoundError("Space not found")

        roles = await space_role_repository.get_by_space(db, space_id)
        return [self._to_response(r) for r in roles]

    async def create_role(
        self,
        db: AsyncSession,
        space_id: UUID,
        data: RoleCreate,
    ) -> RoleResponse:
        """새 역할을 생성합니다.

        Create a role in a space.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            space_id: 소속 스페이스 UUID (Parent space)
            data: 역할 생성 데이터 (Role creation data)

        Returns:
            RoleResponse: 생성된 역할 응답 (Created role response)

        Raises:
            NotFoundError: 스페이스를 찾을 수 없을 때 (Space not found)
            BadRequestError: 이름이 비어 있을 때 (Blank name)
            DuplicateError: 같은 이름(대소문자 무시)의 역할이 있을 때
                            (A role with the same name ignoring case exists)
        """
        if await space_repository.get_by_id(db, space_id) is None:
            raise NotFoundError("Space not found")

        name: str = await self._check_name(db, space_id, data.name)
        role: SpaceRole = await space_role_repository.create(
            db,
            {"space_id": space_id, "name": name, "color": data.color},
        )
        await space_repository.touch(db, space_id)
        return self._to_response(role)

    async def update_role(
        self,
        db: AsyncSession,
        space_id: UUID,
        role_id: UUID,
        data: RoleUpdate,
    ) -> RoleResponse:
        """역할 이름/색상을 수정합니다 (부분 업데이트).

        Rename or recolor a role.

        Raises:
            NotFoundError: 역할을 찾을 수 없을 때 (Role not found in the space)
            BadRequestError: 이름이 비어 있을 때 (Blank name)
            DuplicateError: 다른 역할이 같은 이름을 쓸 때 (Name used by another role)
        """
        role: SpaceRole = await self.get_role_or_404(db, role_id, space_id)
        update_data: dict = data.model_dump(exclude_unset=True)
        if "name" in update_data:
            update_data["name"] = await self._check_name(db, space_id, update_data["name"], role.id)

        updated: SpaceRole | None = await space_role_repository.update(db, role.id, update_data)
        await space_repository.touch(db, space_id)
        return self._to_response(updated)

    async def delete_role(
        self,
        db: AsyncSession,
        space_id: UUID,
        role_id: UUID,
    ) -> MessageResponse:
        """역할을 삭제하고 해당 역할을 가진 사람의 역할을 비웁니다.

        Delete a role; people who held it are left without a role.

        Raises:
            NotFoundError: 역할을 찾을 수 없을 때 (Role not found in the space)
        """
        role: SpaceRole = await self.get_role_or_404(db, role_id, space_id)
        await person_repository.clear_role(db, role.id)

        await space_role_repository.delete(db, role.id)
        await space_repository.touch(db, space_id)
        return MessageResponse(message="Role deleted")


# 싱글턴 인스턴스 — Singleton instance
role_service: RoleService = RoleService()
