"""스페이스 서비스 — 스페이스 CRUD 비즈니스 로직.

Space Service — Business logic for space creation and retrieval.
A new space always starts with a default board (and that board's
unassigned product).
"""

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from peoplemover.config import settings
from peoplemover.models.space import Space
from peoplemover.repositories.space_repository import space_repository
from peoplemover.schemas.space import BoardCreate, SpaceCreate, SpaceResponse, TimestampResponse
from peoplemover.utils.exceptions import BadRequestError, DuplicateError, NotFoundError


class SpaceService:
    """스페이스 관련 비즈니스 로직을 처리하는 서비스.

    Service handling space business logic.
    """

    def _to_response(self, space: Space) -> SpaceResponse:
        """스페이스 모델을 응답 스키마로 변환합니다."""
        return SpaceResponse(
            id=str(space.id),
            name=space.name,
            last_modified_date=space.last_modified_date,
            created_at=space.created_at,
        )

    async def get_space_or_404(
        self,
        db: AsyncSession,
        space_id: UUID,
    ) -> Space:
        """스페이스를 조회하고 없으면 404를 발생시킵니다.

        Retrieve a space or raise NotFoundError.

        Raises:
            NotFoundError: 스페이스를 찾을 수 없을 때 (Space not found)
        """
        space: Space | None = await space_repository.get_by_id(db, space_id)
        if space is None:
            raise NotFoundError("Space not found")
        return space

    async def list_spaces(self, db: AsyncSession) -> list[SpaceResponse]:
        """모든 스페이스 목록을 조회합니다 — List all spaces."""
        spaces: list[Space] = await space_repository.list_all(db)
        return [self._to_response(s) for s in spaces]

    async def get_space(
        self,
        db: AsyncSession,
        space_id: UUID,
    ) -> SpaceResponse:
        """스페이스 상세를 조회합니다 — Retrieve one space."""
        return self._to_response(await self.get_space_or_404(db, space_id))

    async def create_space(
        self,
        db: AsyncSession,
        data: SpaceCreate,
    ) -> SpaceResponse:
        """새 스페이스를 기본 보드와 함께 생성합니다.

        Create a new space together with its default board.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 스페이스 생성 데이터 (Space creation data)

        Returns:
            SpaceResponse: 생성된 스페이스 응답 (Created space response)

        Raises:
            BadRequestError: 이름이 비어 있을 때 (Empty name)
            DuplicateError: 같은 이름(대소문자 무시)의 스페이스가 있을 때
                            (A space with the same name ignoring case exists)
        """
        name: str = data.name.strip()
        if not name:
            raise BadRequestError("Space name is required")

        # 대소문자 무시 이름 중복 확인 — Case-insensitive name uniqueness
        if await space_repository.get_by_name_ignore_case(db, name) is not None:
            raise DuplicateError(f"Space already exists: {name}")

        space: Space = await space_repository.create(
            db,
            {"name": name, "last_modified_date": datetime.now(timezone.utc)},
        )

        # 기본 보드 생성 — Default board (with its unassigned product)
        from peoplemover.services.board_service import board_service

        await board_service.create_board(db, space.id, BoardCreate(name=settings.DEFAULT_BOARD_NAME))
        return self._to_response(space)

    async def get_last_modified(
        self,
        db: AsyncSession,
        space_id: UUID,
    ) -> TimestampResponse:
        """스페이스 마지막 변경 일시를 조회합니다 — Last write time of a space."""
        space: Space = await self.get_space_or_404(db, space_id)
        return TimestampResponse(last_modified_date=space.last_modified_date)


# 싱글턴 인스턴스 — Singleton instance
space_service: SpaceService = SpaceService()
