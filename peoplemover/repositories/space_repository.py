"""스페이스 레포지토리 — 스페이스 CRUD 및 변경 일시 갱신.

Space Repository — CRUD, case-insensitive name lookup, and
last-modified tracking for spaces.
"""

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import Select, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from peoplemover.models.space import Space
from peoplemover.repositories.base import BaseRepository


class SpaceRepository(BaseRepository[Space]):
    """스페이스 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the spaces table.
    """

    def __init__(self) -> None:
        super().__init__(Space)

    async def get_by_name_ignore_case(
        self,
        db: AsyncSession,
        name: str,
    ) -> Space | None:
        """대소문자를 무시하고 이름으로 스페이스를 조회합니다.

        Retrieve a space by name, ignoring case.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            name: 스페이스 이름 (Space name)

        Returns:
            Space | None: 조회된 스페이스 또는 None (Found space or None)
        """
        query: Select = select(Space).where(func.lower(Space.name) == name.lower())
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def list_all(self, db: AsyncSession) -> list[Space]:
        """모든 스페이스를 생성 순으로 조회합니다 — All spaces in creation order."""
        result = await db.execute(select(Space).order_by(Space.created_at))
        return list(result.scalars().all())

    async def touch(
        self,
        db: AsyncSession,
        space_id: UUID,
    ) -> None:
        """스페이스의 마지막 변경 일시를 현재 시각으로 갱신합니다.

        Set the space's last_modified_date to now. Called by every write to
        the people, products or assignments of the space.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            space_id: 스페이스 UUID (Space UUID)
        """
        await db.execute(
            update(Space)
            .where(Space.id == space_id)
            .values(last_modified_date=datetime.now(timezone.utc))
            .execution_options(synchronize_session="fetch")
        )
        await db.flush()


# 싱글턴 인스턴스 — Singleton instance
space_repository: SpaceRepository = SpaceRepository()
