"""제품 서비스 — 제품 CRUD 비즈니스 로직.

Product Service — Business logic for products.
Deleting a product removes every assignment to it and puts the affected
people back on their board's unassigned product when nothing else is left.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from peoplemover.config import settings
from peoplemover.models.product import Product
from peoplemover.models.space import Board
from peoplemover.repositories.product_repository import product_repository
from peoplemover.repositories.space_repository import space_repository
from peoplemover.schemas.common import MessageResponse
from peoplemover.schemas.product import ProductCreate, ProductResponse, ProductUpdate
from peoplemover.services.board_service import board_service
from peoplemover.services.location_service import location_service
from peoplemover.utils.exceptions import BadRequestError, DuplicateError, NotFoundError
from peoplemover.utils.parsing import parse_uuid


class ProductService:
    """제품 관련 비즈니스 로직을 처리하는 서비스.

    Service handling product business logic.
    """

    def to_response(self, product: Product) -> ProductResponse:
        """제품 모델을 응답 스키마로 변환합니다.

        Convert a Product model instance to a ProductResponse schema.

        Args:
            product: 제품 모델 (Product model instance)

        Returns:
            ProductResponse: 제품 응답 (Product response)
        """
        return ProductResponse(
            id=str(product.id),
            space_id=str(product.space_id),
            board_id=str(product.board_id),
            name=product.name,
            notes=product.notes,
            space_location_id=str(product.space_location_id) if product.space_location_id else None,
            start_date=product.start_date,
            end_date=product.end_date,
            archived=product.archived,
            created_at=product.created_at,
        )

    def _validate_notes(self, notes: str | None) -> None:
        """메모 길이 검증 — Notes must fit the configured limit."""
        if notes is not None and len(notes) > settings.PRODUCT_NOTES_MAX_LENGTH:
            raise BadRequestError(
                f"Notes must be at most {settings.PRODUCT_NOTES_MAX_LENGTH} characters"
            )

    async def get_product_or_404(
        self,
        db: AsyncSession,
        product_id: UUID,
        space_id: UUID | None = None,
    ) -> Product:
        """제품을 조회하고 없으면 404를 발생시킵니다.

        Raises:
            NotFoundError: 제품을 찾을 수 없을 때 (Product not found)
        """
        product: Product | None = await product_repository.get_by_id(db, product_id, space_id)
        if product is None:
            raise NotFoundError("Product not found")
        return product

    async def _resolve_location(
        self,
        db: AsyncSession,
        space_id: UUID,
        space_location_id: str | None,
    ) -> UUID | None:
        """위치 참조 확인 — The location must belong to the product's space (404 otherwise)."""
        if space_location_id is None:
            return None
        location = await location_service.get_location_or_404(
            db, parse_uuid(space_location_id, "Location"), space_id
        )
        return location.id

    async def list_products(
        self,
        db: AsyncSession,
        space_id: UUID,
    ) -> list[ProductResponse]:
        """스페이스의 제품 목록을 조회합니다 — List the products of a space."""
        if await space_repository.get_by_id(db, space_id) is None:
            raise NotFoundError("Space not found")

        products = await product_repository.get_by_space(db, space_id)
        return [self.to_response(p) for p in products]

    async def create_product(
        self,
        db: AsyncSession,
        space_id: UUID,
        data: ProductCreate,
    ) -> ProductResponse:
        """새 제품을 생성합니다.

        Create a product on a board of the space.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            space_id: 소속 스페이스 UUID (Parent space)
            data: 제품 생성 데이터 (Product creation data)

        Returns:
            ProductResponse: 생성된 제품 응답 (Created product response)

        Raises:
            BadRequestError: 이름이 비었거나 메모가 너무 길 때
                             (Empty name or notes over the limit)
            NotFoundError: 보드나 위치를 찾을 수 없을 때 (Board or location not found in the space)
            DuplicateError: 같은 보드에 같은 이름의 제품이 있을 때
                            (Product name already used on the board)
        """
        name: str = data.name.strip()
        if not name:
            raise BadRequestError("Invalid Product")
        self._validate_notes(data.notes)

        board_id: UUID = parse_uuid(data.board_id, "Board")
        board: Board = await board_service.get_board_or_404(db, board_id, space_id)

        if await product_repository.get_by_board_and_name(db, board.id, name) is not None:
            raise DuplicateError(f"Product already exists: {name}")

        space_location_id: UUID | None = await self._resolve_location(
            db, space_id, data.space_location_id
        )

        product: Product = await product_repository.create(
            db,
            {
                "space_id": space_id,
                "board_id": board.id,
                "name": name,
                "notes": data.notes,
                "space_location_id": space_location_id,
                "start_date": data.start_date,
                "end_date": data.end_date,
            },
        )
        await space_repository.touch(db, space_id)
        return self.to_response(product)

    async def update_product(
        self,
        db: AsyncSession,
        product_id: UUID,
        data: ProductUpdate,
    ) -> ProductResponse:
        """제품 정보를 수정합니다 (부분 업데이트).

        Update a product with the fields that were sent.

        Raises:
            NotFoundError: 제품을 찾을 수 없을 때 (Product not found)
            BadRequestError: 이름이 비었거나 메모가 너무 길 때
                             (Empty name or notes over the limit)
            DuplicateError: 변경할 이름이 보드에 이미 있을 때
                            (New name already used on the board)
        """
        product: Product = await self.get_product_or_404(db, product_id)
        update_data: dict = data.model_dump(exclude_unset=True)

        if "name" in update_data:
            name: str = (update_data["name"] or "").strip()
            if not name:
                raise BadRequestError("Invalid Product")
            existing: Product | None = await product_repository.get_by_board_and_name(
                db, product.board_id, name
            )
            if existing is not None and existing.id != product.id:
                raise DuplicateError(f"Product already exists: {name}")
            update_data["name"] = name

        if "notes" in update_data:
            self._validate_notes(update_data["notes"])
        if "space_location_id" in update_data:
            update_data["space_location_id"] = await self._resolve_location(
                db, product.space_id, update_data["space_location_id"]
            )

        updated: Product | None = await product_repository.update(db, product.id, update_data)
        await space_repository.touch(db, product.space_id)
        return self.to_response(updated)

    async def delete_product(
        self,
        db: AsyncSession,
        product_id: UUID,
    ) -> MessageResponse:
        """제품과 그 배정을 삭제합니다. 보드의 미배정 제품은 삭제할 수 없습니다.

        Delete a product together with its assignments; affected people get
        their board's unassigned product back when nothing else is left.

        Raises:
            NotFoundError: 제품을 찾을 수 없을 때 (Product not found)
            BadRequestError: 보드의 미배정 제품일 때 (Product is a board's unassigned product)
        """
        from peoplemover.services.assignment_service import assignment_service

        product: Product = await self.get_product_or_404(db, product_id)
        board: Board = await board_service.get_board_or_404(db, product.board_id)
        if board.unassigned_product_id == product.id:
            raise BadRequestError("The unassigned product of a board cannot be deleted")

        space_id: UUID = product.space_id
        await assignment_service.delete_assignments_for_product(db, product)

        await db.delete(product)
        await db.flush()
        await space_repository.touch(db, space_id)
        return MessageResponse(message="Product deleted")


# 싱글턴 인스턴스 — Singleton instance
product_service: ProductService = ProductService()
