"""사람 서비스 — 사람 CRUD 비즈니스 로직.

Person Service — Business logic for the people of a space.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from peoplemover.models.person import Person
from peoplemover.repositories.person_repository import person_repository
from peoplemover.repositories.space_repository import space_repository
from peoplemover.schemas.common import MessageResponse
from peoplemover.schemas.person import PersonCreate, PersonResponse, PersonUpdate
from peoplemover.services.role_service import role_service
from peoplemover.utils.exceptions import BadRequestError, NotFoundError
from peoplemover.utils.parsing import parse_uuid


class PersonService:
    """사람 관련 비즈니스 로직을 처리하는 서비스.

    Service handling person business logic.
    """

    def to_response(self, person: Person) -> PersonResponse:
        """사람 모델을 응답 스키마로 변환합니다."""
        return PersonResponse(
            id=str(person.id),
            space_id=str(person.space_id),
            name=person.name,
            space_role_id=str(person.space_role_id) if person.space_role_id else None,
            notes=person.notes,
            new_person=person.new_person,
            created_at=person.created_at,
        )

    async def get_person_or_404(
        self,
        db: AsyncSession,
        person_id: UUID,
    ) -> Person:
        """사람을 조회하고 없으면 404를 발생시킵니다.

        Raises:
            NotFoundError: 사람을 찾을 수 없을 때 (Person not found)
        """
        person: Person | None = await person_repository.get_by_id(db, person_id)
        if person is None:
            raise NotFoundError("Person not found")
        return person

    async def _resolve_role(
        self,
        db: AsyncSession,
        space_id: UUID,
        space_role_id: str | None,
    ) -> UUID | None:
        """역할 참조 확인 — The role must belong to the person's space (404 otherwise)."""
        if space_role_id is None:
            return None
        role = await role_service.get_role_or_404(db, parse_uuid(space_role_id, "Role"), space_id)
        return role.id

    async def list_people(
        self,
        db: AsyncSession,
        space_id: UUID,
    ) -> list[PersonResponse]:
        """스페이스의 사람 목록을 조회합니다 — List the people of a space."""
        if await space_repository.get_by_id(db, space_id) is None:
            raise NotFoundError("Space not found")

        people = await person_repository.get_by_space(db, space_id)
        return [self.to_response(p) for p in people]

    async def create_person(
        self,
        db: AsyncSession,
        space_id: UUID,
        data: PersonCreate,
    ) -> PersonResponse:
        """새 사람을 생성합니다.

        Create a person in a space.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            space_id: 소속 스페이스 UUID (Parent space)
            data: 사람 생성 데이터 (Person creation data)

        Returns:
            PersonResponse: 생성된 사람 응답 (Created person response)

        Raises:
            NotFoundError: 스페이스를 찾을 수 없을 때 (Space not found)
            BadRequestError: 이름이 공백뿐일 때 (Blank name)
            NotFoundError: 역할이 스페이스에 없을 때 (Role not found in the space)
        """
        if await space_repository.get_by_id(db, space_id) is None:
            raise NotFoundError("Space not found")

        name: str = data.name.strip()
        if not name:
            raise BadRequestError("Person name is required")

        person: Person = await person_repository.create(
            db,
            {
                "space_id": space_id,
                "name": name,
                "space_role_id": await self._resolve_role(db, space_id, data.space_role_id),
                "notes": data.notes,
                "new_person": data.new_person,
            },
        )
        await space_repository.touch(db, space_id)
        return self.to_response(person)

    async def update_person(
        self,
        db: AsyncSession,
        person_id: UUID,
        data: PersonUpdate,
    ) -> PersonResponse:
        """사람 정보를 수정합니다 (부분 업데이트).

        Update a person with the fields that were sent.

        Raises:
            NotFoundError: 사람 또는 역할을 찾을 수 없을 때 (Person or role not found)
        """
        person: Person = await self.get_person_or_404(db, person_id)
        update_data: dict = data.model_dump(exclude_unset=True)
        if "name" in update_data:
            name: str = (update_data["name"] or "").strip()
            if not name:
                raise BadRequestError("Person name is required")
            update_data["name"] = name
        if "space_role_id" in update_data:
            update_data["space_role_id"] = await self._resolve_role(
                db, person.space_id, update_data["space_role_id"]
            )

        updated: Person | None = await person_repository.update(db, person.id, update_data)
        await space_repository.touch(db, person.space_id)
        return self.to_response(updated)

    async def delete_person(
        self,
        db: AsyncSession,
        person_id: UUID,
    ) -> MessageResponse:
        """사람과 그 사람의 모든 배정을 삭제합니다.

        Delete a person after removing all of their assignments.

        Raises:
            NotFoundError: 사람을 찾을 수 없을 때 (Person not found)
        """
        from peoplemover.services.assignment_service import assignment_service

        person: Person = await self.get_person_or_404(db, person_id)
        space_id: UUID = person.space_id
        await assignment_service.delete_assignments_for_person(db, person.id)

        await person_repository.delete(db, person.id)
        await space_repository.touch(db, space_id)
        return MessageResponse(message="Person deleted")


# 싱글턴 인스턴스 — Singleton instance
person_service: PersonService = PersonService()
