"""배정 서비스 — 시점별 배정 해석과 배정 변경 비즈니스 로직.

Assignment Service — Temporal resolution and assignment mutations.

Timeline:
    한 사람의 배정 이력은 날짜 없는 기준 행과 적용 시작일이 있는 행으로 구성됩니다.
    A person's history is a set of undated baseline rows plus rows that take
    effect on a date. The set active on a date is every row at the latest
    effective date on or before it, or the baseline rows when none qualify.

Unassigned fallback:
    사람이 보드에 배정이 하나도 없으면 해당 보드의 미배정 제품에 배정됩니다.
    When a delete leaves a person with nothing on a board, they are put on
    that board's unassigned product. Creating a real assignment on the board
    removes that fallback row again.
"""

from datetime import date
from typing import Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from peoplemover.models.assignment import Assignment
from peoplemover.models.person import Person
from peoplemover.models.product import Product
from peoplemover.models.space import Board
from peoplemover.repositories.assignment_repository import assignment_repository
from peoplemover.repositories.board_repository import board_repository
from peoplemover.repositories.person_repository import person_repository
from peoplemover.repositories.product_repository import product_repository
from peoplemover.repositories.space_repository import space_repository
from peoplemover.schemas.assignment import (
    AssignmentCreate,
    AssignmentResponse,
    AssignmentUpdate,
    CreateAssignmentsForDateRequest,
)
from peoplemover.schemas.common import MessageResponse
from peoplemover.services import timeline
from peoplemover.services.person_service import person_service
from peoplemover.utils.exceptions import DuplicateError, NotFoundError, NothingToCreateError
from peoplemover.utils.parsing import parse_uuid


class AssignmentService:
    """배정 관련 비즈니스 로직을 처리하는 서비스.

    Service handling assignment resolution and mutations.
    """

    def to_response(self, assignment: Assignment) -> AssignmentResponse:
        """배정 모델을 응답 스키마로 변환합니다.

        Convert an Assignment model instance to an AssignmentResponse schema.

        Args:
            assignment: 배정 모델 (Assignment model instance)

        Returns:
            AssignmentResponse: 배정 응답 (Assignment response)
        """
        return AssignmentResponse(
            id=str(assignment.id),
            person_id=str(assignment.person_id),
            product_id=str(assignment.product_id),
            space_id=str(assignment.space_id),
            placeholder=assignment.placeholder,
            effective_date=assignment.effective_date,
        )

    async def _get_product_in_space(
        self,
        db: AsyncSession,
        product_id: str,
        space_id: UUID,
    ) -> Product:
        """사람과 같은 스페이스의 제품을 조회합니다.

        Raises:
            NotFoundError: 제품이 없거나 다른 스페이스에 있을 때
                           (Product missing or in another space)
        """
        product: Product | None = await product_repository.get_by_id(
            db, parse_uuid(product_id, "Product"), space_id
        )
        if product is None:
            raise NotFoundError("Product not found")
        return product

    # --- 시점별 해석 (Temporal resolution) ---

    async def resolve_active_assignments(
        self,
        db: AsyncSession,
        person_id: UUID,
        requested_date: date,
    ) -> timeline.ResolvedAssignments:
        """요청일에 유효한 한 사람의 배정 집합을 해석합니다.

        Resolve the set of rows active for a person on a date.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            person_id: 사람 UUID (Person UUID)
            requested_date: 기준일 (Date to resolve at)

        Returns:
            timeline.ResolvedAssignments: 기준 날짜와 활성 행
                                          (Anchor date and active rows)
        """
        dated: Sequence[Assignment] = await assignment_repository.get_by_person_effective_on_or_before(
            db, person_id, requested_date
        )
        baseline: Sequence[Assignment] = []
        if not dated:
            baseline = await assignment_repository.get_by_person_without_effective_date(db, person_id)
        return timeline.resolve(dated, baseline)

    async def get_assignments_by_date(
        self,
        db: AsyncSession,
        space_id: UUID,
        requested_date: date,
    ) -> list[AssignmentResponse]:
        """스페이스의 모든 사람에 대해 요청일의 활성 배정을 조회합니다.

        Union of every person's active set on the date, people in creation order.

        Raises:
            NotFoundError: 스페이스를 찾을 수 없을 때 (Space not found)
        """
        if await space_repository.get_by_id(db, space_id) is None:
            raise NotFoundError("Space not found")

        people: Sequence[Person] = await person_repository.get_by_space(db, space_id)
        result: list[AssignmentResponse] = []
        for person in people:
            resolved = await self.resolve_active_assignments(db, person.id, requested_date)
            result.extend(self.to_response(row) for row in resolved.rows)
        return result

    async def get_assignments_for_person(
        self,
        db: AsyncSession,
        person_id: UUID,
    ) -> list[AssignmentResponse]:
        """한 사람의 모든 배정 행을 조회합니다 — Every row of a person, dated or not."""
        person: Person = await person_service.get_person_or_404(db, person_id)
        rows: Sequence[Assignment] = await assignment_repository.get_by_person(db, person.id)
        return [self.to_response(row) for row in rows]

    # --- 배정 변경 (Mutations) ---

    async def _ensure_board_fallback(
        self,
        db: AsyncSession,
        person: Person,
        board_id: UUID,
    ) -> Assignment | None:
        """보드에 남은 배정이 없으면 미배정 제품 배정을 만듭니다.

        Put the person on the board's unassigned product when they have no
        row left on the board. Returns the created row, if any.
        """
        remaining = await assignment_repository.get_by_person_and_board(db, person.id, board_id)
        if remaining:
            return None

        board: Board | None = await board_repository.get_by_id(db, board_id)
        if board is None or board.unassigned_product_id is None:
            return None

        return await assignment_repository.create(
            db,
            {
                "person_id": person.id,
                "product_id": board.unassigned_product_id,
                "space_id": person.space_id,
                "placeholder": False,
                "effective_date": None,
            },
        )

    async def _clear_board_fallback(
        self,
        db: AsyncSession,
        person: Person,
        product: Product,
        keep_id: UUID,
    ) -> None:
        """같은 보드의 미배정 제품 배정을 제거합니다 (새로 만든 행 제외).

        Remove the person's rows to the unassigned product of ``product``'s
        board, except the row ``keep_id``.
        """
        board: Board | None = await board_repository.get_by_id(db, product.board_id)
        if board is None or board.unassigned_product_id in (None, product.id):
            return

        rows = await assignment_repository.get_by_person_and_board(db, person.id, board.id)
        stale = [
            row for row in rows
            if row.product_id == board.unassigned_product_id and row.id != keep_id
        ]
        if stale:
            await assignment_repository.delete_rows(db, stale)

    async def create_assignment(
        self,
        db: AsyncSession,
        data: AssignmentCreate,
    ) -> AssignmentResponse:
        """사람을 제품에 배정합니다 (날짜 없는 기준 배정).

        Create an undated assignment, then drop the person's unassigned row
        on the same board.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 배정 생성 데이터 (Assignment creation data)

        Returns:
            AssignmentResponse: 생성된 배정 응답 (Created assignment response)

        Raises:
            NotFoundError: 사람 또는 제품을 찾을 수 없을 때 (Person or product not found)
            DuplicateError: 같은 사람-제품 배정이 이미 있을 때
                            (Person already holds a row for the product)
        """
        person: Person = await person_service.get_person_or_404(
            db, parse_uuid(data.person_id, "Person")
        )
        product: Product = await self._get_product_in_space(db, data.product_id, person.space_id)

        if await assignment_repository.check_duplicate(db, person.id, product.id):
            raise DuplicateError("Assignment already exists")

        assignment: Assignment = await assignment_repository.create(
            db,
            {
                "person_id": person.id,
                "product_id": product.id,
                "space_id": person.space_id,
                "placeholder": data.placeholder,
                "effective_date": None,
            },
        )
        await self._clear_board_fallback(db, person, product, assignment.id)

        await space_repository.touch(db, person.space_id)
        return self.to_response(assignment)

    async def update_assignment(
        self,
        db: AsyncSession,
        assignment_id: UUID,
        data: AssignmentUpdate,
    ) -> AssignmentResponse:
        """배정의 임시 여부를 변경하고, 선택적으로 제품을 바꿉니다.

        Toggle the placeholder flag and optionally re-point the product.
        Re-pointing follows the same rules as create and delete: no second
        row for a product the person already holds, the target board's
        unassigned row is dropped, and the old board falls back to its
        unassigned product when nothing is left there.

        Raises:
            NotFoundError: 배정 또는 제품을 찾을 수 없을 때 (Assignment or product not found)
            DuplicateError: 대상 제품 배정이 이미 있을 때
                            (Person already holds a row for the target product)
        """
        assignment: Assignment | None = await assignment_repository.get_by_id(db, assignment_id)
        if assignment is None:
            raise NotFoundError("Assignment not found")

        update_data: dict = {"placeholder": data.placeholder}
        target: Product | None = None
        old_product: Product | None = None
        if data.product_id is not None:
            product: Product = await self._get_product_in_space(
                db, data.product_id, assignment.space_id
            )
            if product.id != assignment.product_id:
                if await assignment_repository.check_duplicate(db, assignment.person_id, product.id):
                    raise DuplicateError("Assignment already exists")
                target = product
                old_product = await product_repository.get_by_id(db, assignment.product_id)
            update_data["product_id"] = product.id

        updated: Assignment | None = await assignment_repository.update(db, assignment.id, update_data)

        if target is not None:
            person: Person = await person_service.get_person_or_404(db, updated.person_id)
            await self._clear_board_fallback(db, person, target, updated.id)
            if old_product is not None and old_product.board_id != target.board_id:
                await self._ensure_board_fallback(db, person, old_product.board_id)

        await space_repository.touch(db, updated.space_id)
        return self.to_response(updated)

    async def delete_assignment(
        self,
        db: AsyncSession,
        assignment_id: UUID,
    ) -> MessageResponse:
        """배정을 삭제하고, 보드에 남은 배정이 없으면 미배정 제품에 배정합니다.

        Delete one assignment; a person left with nothing on the board is put
        on the board's unassigned product.

        Raises:
            NotFoundError: 배정을 찾을 수 없을 때 (Assignment not found)
        """
        assignment: Assignment | None = await assignment_repository.get_by_id(db, assignment_id)
        if assignment is None:
            raise NotFoundError("Assignment not found")

        person: Person = await person_service.get_person_or_404(db, assignment.person_id)
        product: Product | None = await product_repository.get_by_id(db, assignment.product_id)

        await assignment_repository.delete_rows(db, [assignment])
        if product is not None:
            await self._ensure_board_fallback(db, person, product.board_id)

        await space_repository.touch(db, person.space_id)
        return MessageResponse(message="Assignment deleted")

    async def bulk_replace_assignments_for_date(
        self,
        db: AsyncSession,
        data: CreateAssignmentsForDateRequest,
    ) -> list[AssignmentResponse]:
        """특정 날짜부터 적용되는 사람의 배정 집합을 교체합니다.

        Replace the person's rows at ``requested_date`` with one row per
        listed product. Every reference is validated before anything is
        written.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 날짜별 일괄 배정 요청 (Bulk replace request)

        Returns:
            list[AssignmentResponse]: 새로 생성된 배정 목록 (Created rows, in request order)

        Raises:
            NothingToCreateError: 제품 목록이 비었을 때 (Empty product list)
            NotFoundError: 사람 또는 제품을 찾을 수 없을 때 (Person or product not found)
        """
        if not data.products:
            raise NothingToCreateError()

        person: Person = await person_service.get_person_or_404(
            db, parse_uuid(data.person_id, "Person")
        )

        # 쓰기 전에 모든 제품 검증 — Validate every product before writing
        products: list[Product] = []
        for pair in data.products:
            products.append(await self._get_product_in_space(db, pair.product_id, person.space_id))

        existing = await assignment_repository.get_by_person_and_effective_date(
            db, person.id, data.requested_date
        )
        await assignment_repository.delete_rows(db, existing)

        created: list[Assignment] = []
        seen: set[UUID] = set()
        for pair, product in zip(data.products, products):
            if product.id in seen:
                continue
            seen.add(product.id)
            created.append(
                await assignment_repository.create(
                    db,
                    {
                        "person_id": person.id,
                        "product_id": product.id,
                        "space_id": person.space_id,
                        "placeholder": pair.placeholder,
                        "effective_date": data.requested_date,
                    },
                )
            )

        await space_repository.touch(db, person.space_id)
        return [self.to_response(row) for row in created]

    async def delete_assignments_for_product(
        self,
        db: AsyncSession,
        product: Product,
    ) -> int:
        """제품의 모든 배정을 삭제하고 영향받은 사람에게 미배정 배정을 채웁니다.

        Delete every row referencing the product, then give each affected
        person the board's unassigned product if nothing else is left there.

        Returns:
            int: 삭제된 배정 수 (Number of deleted rows)
        """
        rows = await assignment_repository.get_by_product(db, product.id)
        person_ids: list[UUID] = list(dict.fromkeys(row.person_id for row in rows))

        deleted: int = await assignment_repository.delete_by_product(db, product.id)

        for person_id in person_ids:
            person: Person | None = await person_repository.get_by_id(db, person_id)
            if person is not None:
                await self._ensure_board_fallback(db, person, product.board_id)
        return deleted

    async def delete_assignments_for_person(
        self,
        db: AsyncSession,
        person_id: UUID,
    ) -> MessageResponse:
        """한 사람의 모든 배정을 삭제합니다 — Delete every row of a person.

        Raises:
            NotFoundError: 사람을 찾을 수 없을 때 (Person not found)
        """
        person: Person = await person_service.get_person_or_404(db, person_id)
        rows = await assignment_repository.get_by_person(db, person.id)
        await assignment_repository.delete_rows(db, rows)

        await space_repository.touch(db, person.space_id)
        return MessageResponse(message="Assignments deleted")


# 싱글턴 인스턴스 — Singleton instance
assignment_service: AssignmentService = AssignmentService()
