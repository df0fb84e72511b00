"""사람 레포지토리 — 스페이스 구성원 조회.

Person Repository — Queries for the people of a space.
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import Select, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from peoplemover.models.person import Person
from peoplemover.repositories.base import BaseRepository


class PersonRepository(BaseRepository[Person]):
    """사람 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the people table.
    """

    def __init__(self) -> None:
        super().__init__(Person)

    async def get_by_space(
        self,
        db: AsyncSession,
        space_id: UUID,
    ) -> Sequence[Person]:
        """스페이스의 모든 사람을 생성 순으로 조회합니다.

        Retrieve every person of a space in creation order.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            space_id: 스페이스 UUID (Space UUID)

        Returns:
            Sequence[Person]: 사람 목록 (People of the space)
        """
        query: Select = (
            select(Person)
            .where(Person.space_id == space_id)
            .order_by(Person.created_at, Person.id)
        )
        result = await db.execute(query)
        return result.scalars().all()

    async def clear_role(
        self,
        db: AsyncSession,
        space_role_id: UUID,
    ) -> None:
        """삭제되는 역할을 가진 사람의 역할을 비웁니다 — Unset a role on every person holding it."""
        await db.execute(
            update(Person)
            .where(Person.space_role_id == space_role_id)
            .values(space_role_id=None)
            .execution_options(synchronize_session="fetch")
        )
        await db.flush()


# 싱글턴 인스턴스 — Singleton instance
person_repository: PersonRepository = PersonRepository()
