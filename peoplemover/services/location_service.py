"""위치 서비스 — 스페이스 위치 CRUD 비즈니스 로직.

Location Service — Business logic for the locations of a space.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from peoplemover.models.trait import SpaceLocation
from peoplemover.repositories.product_repository import product_repository
from peoplemover.repositories.space_repository import space_repository
from peoplemover.repositories.trait_repository import space_location_repository
from peoplemover.schemas.common import MessageResponse
from peoplemover.schemas.trait import LocationCreate, LocationResponse, LocationUpdate
from peoplemover.utils.exceptions import BadRequestError, DuplicateError, NotFoundError


class LocationService:
    """위치 관련 비즈니스 로직을 처리하는 서비스.

    Service handling space location business logic.
    """

    def _to_response(self, location: SpaceLocation) -> LocationResponse:
        return LocationResponse(
            id=str(location.id),
            space_id=str(location.space_id),
            name=location.name,
            created_at=location.created_at,
        )

    async def get_location_or_404(
        self,
        db: AsyncSession,
        location_id: UUID,
        space_id: UUID | None = None,
    ) -> SpaceLocation:
        """위치를 조회하고 없으면 404를 발생시킵니다.

        Raises:
            NotFoundError: 위치를 찾을 수 없을 때 (Location not found in the space)
        """
        location: SpaceLocation | None = await space_location_repository.get_by_id(
            db, location_id, space_id
        )
        if location is None:
            raise NotFoundError("Location not found")
        return location

    async def _check_name(
        self,
        db: AsyncSession,
        space_id: UUID,
        name: str | None,
        current_id: UUID | None = None,
    ) -> str:
        name = (name or "").strip()
        if not name:
            raise BadRequestError("Location name is required")
        # 대소문자 무시 이름 중복 확인 — Case-insensitive name uniqueness
        existing: SpaceLocation | None = await space_location_repository.get_by_name_ignore_case(
            db, space_id, name
        )
        if existing is not None and existing.id != current_id:
            raise DuplicateError(f"Location already exists: {name}")
        return name

    async def list_locations(
        self,
        db: AsyncSession,
        space_id: UUID,
    ) -> list[LocationResponse]:
        """스페이스의 위치 목록을 조회합니다 — List the locations of a space."""
        if await space_repository.get_by_id(db, space_id) is None:
            raise NotFoundError("Space not found")

        locations = await space_location_repository.get_by_space(db, space_id)
        return [self._to_response(loc) for loc in locations]

    async def create_location(
        self,
        db: AsyncSession,
        space_id: UUID,
        data: LocationCreate,
    ) -> LocationResponse:
        """새 위치를 추가합니다.

        Add a location to a space.

        Raises:
            NotFoundError: 스페이스를 찾을 수 없을 때 (Space not found)
            BadRequestError: 이름이 비어 있을 때 (Blank name)
            DuplicateError: 같은 이름(대소문자 무시)의 위치가 있을 때
                            (A location with the same name ignoring case exists)
        """
        if await space_repository.get_by_id(db, space_id) is None:
            raise NotFoundError("Space not found")

        name: str = await self._check_name(db, space_id, data.name)
        location: SpaceLocation = await space_location_repository.create(
            db,
            {"space_id": space_id, "name": name},
        )
        await space_repository.touch(db, space_id)
        return self._to_response(location)

    async def update_location(
        self,
        db: AsyncSession,
        space_id: UUID,
        location_id: UUID,
        data: LocationUpdate,
    ) -> LocationResponse:
        """위치 이름을 변경합니다 — Rename a location.

        Raises:
            NotFoundError: 위치를 찾을 수 없을 때 (Location not found in the space)
            BadRequestError: 이름이 비어 있을 때 (Blank name)
            DuplicateError: 다른 위치가 같은 이름을 쓸 때 (Name used by another location)
        """
        location: SpaceLocation = await self.get_location_or_404(db, location_id, space_id)
        update_data: dict = data.model_dump(exclude_unset=True)
        if "name" in update_data:
            update_data["name"] = await self._check_name(
                db, space_id, update_data["name"], location.id
            )

        updated: SpaceLocation | None = await space_location_repository.update(
            db, location.id, update_data
        )
        await space_repository.touch(db, space_id)
        return self._to_response(updated)

    async def delete_location(
        self,
        db: AsyncSession,
        space_id: UUID,
        location_id: UUID,
    ) -> MessageResponse:
        """위치를 삭제하고 해당 위치의 제품에서 위치를 비웁니다.

        Delete a location; products placed there are left without one.

        Raises:
            NotFoundError: 위치를 찾을 수 없을 때 (Location not found in the space)
        """
        location: SpaceLocation = await self.get_location_or_404(db, location_id, space_id)
        await product_repository.clear_location(db, location.id)

        await space_location_repository.delete(db, location.id)
        await space_repository.touch(db, space_id)
        return MessageResponse(message="Location deleted")


# 싱글턴 인스턴스 — Singleton instance
location_service: LocationService = LocationService()
