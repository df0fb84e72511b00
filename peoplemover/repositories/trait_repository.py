"""역할/위치 레포지토리 — 스페이스 소유 이름 목록 조회.

Trait Repository — Queries shared by the named lists a space owns
(roles and locations).
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from peoplemover.models.trait import SpaceLocation, SpaceRole
from peoplemover.repositories.base import BaseRepository, ModelType


class TraitRepository(BaseRepository[ModelType]):
    """스페이스 역할/위치 테이블에 대한 레포지토리.

    Repository for a space-owned named list.

    Extends:
        BaseRepository[SpaceRole | SpaceLocation]
    """

    async def get_by_space(
        self,
        db: AsyncSession,
        space_id: UUID,
    ) -> Sequence[ModelType]:
        """스페이스의 항목을 생성 순으로 조회합니다 — Items of a space in creation order."""
        query: Select = (
            select(self.model)
            .where(self.model.space_id == space_id)
            .order_by(self.model.created_at, self.model.id)
        )
        result = await db.execute(query)
        return result.scalars().all()

    async def get_by_name_ignore_case(
        self,
        db: AsyncSession,
        space_id: UUID,
        name: str,
    ) -> ModelType | None:
        """대소문자를 무시하고 스페이스 내 이름으로 조회합니다.

        Retrieve an item of the space by name, ignoring case.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            space_id: 스페이스 UUID (Space UUID)
            name: 이름 (Name to look up)

        Returns:
            ModelType | None: 조회된 항목 또는 None (Found item or None)
        """
        query: Select = select(self.model).where(
            self.model.space_id == space_id,
            func.lower(self.model.name) == name.lower(),
        )
        result = await db.execute(query)
        return result.scalars().first()


# 싱글턴 인스턴스 — Singleton instances
space_role_repository: TraitRepository[SpaceRole] = TraitRepository(SpaceRole)
space_location_repository: TraitRepository[SpaceLocation] = TraitRepository(SpaceLocation)
