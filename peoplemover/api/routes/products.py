"""제품 라우터 — 제품 CRUD 엔드포인트.

Product Router — CRUD endpoints for products.
Listing and creation are nested under the space; update and delete address
the product directly.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from peoplemover.database import get_db
from peoplemover.schemas.common import MessageResponse
from peoplemover.schemas.product import ProductCreate, ProductResponse, ProductUpdate
from peoplemover.services.product_service import product_service

router: APIRouter = APIRouter()


@router.get("/spaces/{space_id}/products", response_model=list[ProductResponse])
async def list_products(
    space_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[ProductResponse]:
    """스페이스의 제품 목록을 조회합니다 — List the products of a space."""
    return await product_service.list_products(db, space_id)


@router.post("/spaces/{space_id}/products", response_model=ProductResponse, status_code=201)
async def create_product(
    space_id: UUID,
    data: ProductCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ProductResponse:
    """새 제품을 생성합니다 — Create a product on a board."""
    result: ProductResponse = await product_service.create_product(db, space_id, data)
    await db.commit()
    return result


@router.put("/products/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: UUID,
    data: ProductUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ProductResponse:
    """제품 정보를 수정합니다 — Update a product."""
    result: ProductResponse = await product_service.update_product(db, product_id, data)
    await db.commit()
    return result


@router.delete("/products/{product_id}", response_model=MessageResponse)
async def delete_product(
    product_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MessageResponse:
    """제품과 그 배정을 삭제합니다.

    Delete a product; people left without an assignment on its board are
    moved to the board's unassigned product.
    """
    result: MessageResponse = await product_service.delete_product(db, product_id)
    await db.commit()
    return result
