"""스페이스 및 보드 관련 Pydantic 요청/응답 스키마 정의.

Space and Board Pydantic request/response schema definitions.
"""

from datetime import datetime
from pydantic import BaseModel

from peoplemover.schemas.product import ProductResponse


# === 스페이스 (Space) 스키마 ===

class SpaceCreate(BaseModel):
    """스페이스 생성 요청 스키마.

    Space creation request schema.

    Attributes:
        name: 스페이스 이름 (Space name, unique ignoring case)
    """

    name: str  # 스페이스 이름 (Space display name)


class SpaceResponse(BaseModel):
    """스페이스 응답 스키마.

    Space response schema returned from API.
    """

    id: str  # 스페이스 UUID 문자열 (Space UUID as string)
    name: str  # 스페이스 이름 (Space name)
    last_modified_date: datetime | None  # 마지막 변경 일시 (Last write inside the space)
    created_at: datetime  # 생성 일시 UTC (Creation timestamp)


class TimestampResponse(BaseModel):
    """스페이스 마지막 변경 일시 응답 — Last-modified timestamp of a space."""

    last_modified_date: datetime | None


# === 보드 (Board) 스키마 ===

class BoardCreate(BaseModel):
    """보드 생성 요청 스키마.

    Board creation request schema. space_id comes from the URL path.
    """

    name: str  # 보드 이름 (Board name, unique per space)


class BoardResponse(BaseModel):
    """보드 응답 스키마 — 소속 제품 포함.

    Board response schema with its products.

    Attributes:
        id: 보드 UUID (Board identifier)
        space_id: 소속 스페이스 UUID (Parent space)
        name: 보드 이름 (Board name)
        unassigned_product_id: 미배정 제품 UUID (Sentinel fallback product)
        products: 소속 제품 목록 (Products of the board)
    """

    id: str
    space_id: str
    name: str
    unassigned_product_id: str | None
    products: list[ProductResponse] = []
