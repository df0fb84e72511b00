"""재배정 서비스 — 특정 날짜의 제품 이동 요약.

Reassignment Service — Who moved from which products to which on a date.
Only people whose active set took effect exactly on the requested date are
reported; the comparison is against the set that was active right before.
"""

from datetime import date
from typing import Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from peoplemover.models.assignment import Assignment
from peoplemover.models.person import Person
from peoplemover.repositories.assignment_repository import assignment_repository
from peoplemover.repositories.person_repository import person_repository
from peoplemover.repositories.product_repository import product_repository
from peoplemover.repositories.space_repository import space_repository
from peoplemover.schemas.assignment import ReassignmentResponse
from peoplemover.services import timeline
from peoplemover.services.person_service import person_service
from peoplemover.utils.exceptions import NotFoundError


class ReassignmentService:
    """재배정 계산 서비스.

    Service computing per-person product transitions on a date.
    """

    async def get_reassignments(
        self,
        db: AsyncSession,
        space_id: UUID,
        requested_date: date,
    ) -> list[ReassignmentResponse]:
        """요청일에 제품이 바뀐 사람들의 이동 내역을 계산합니다.

        Compute the reassignments of a space on a date.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            space_id: 스페이스 UUID (Space UUID)
            requested_date: 기준일 (Date of the transitions)

        Returns:
            list[ReassignmentResponse]: 사람별 이동 내역, 사람 생성 순
                                        (One entry per moved person, people in creation order)

        Raises:
            NotFoundError: 스페이스를 찾을 수 없을 때 (Space not found)
        """
        if await space_repository.get_by_id(db, space_id) is None:
            raise NotFoundError("Space not found")

        product_names: dict[UUID, str] = await product_repository.get_name_map(db, space_id)
        people: Sequence[Person] = await person_repository.get_by_space(db, space_id)

        reassignments: list[ReassignmentResponse] = []
        for person in people:
            dated: Sequence[Assignment] = await assignment_repository.get_by_person_effective_on_or_before(
                db, person.id, requested_date
            )
            # 날짜 있는 행이 없으면 요청일에 시작된 집합도 없음
            if not dated:
                continue

            current = timeline.resolve(dated, [])
            if current.anchor != timeline.Dated(requested_date):
                continue

            baseline: Sequence[Assignment] = await assignment_repository.get_by_person_without_effective_date(
                db, person.id
            )
            previous = timeline.resolve_preceding(current, dated, baseline)
            from_name, to_name = timeline.diff_product_names(previous, current, product_names)
            if not from_name and not to_name:
                continue

            reassignments.append(
                ReassignmentResponse(
                    person=person_service.to_response(person),
                    from_product_name=from_name,
                    to_product_name=to_name,
                )
            )
        return reassignments


# 싱글턴 인스턴스 — Singleton instance
reassignment_service: ReassignmentService = ReassignmentService()
