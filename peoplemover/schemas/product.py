"""제품 관련 Pydantic 요청/응답 스키마 정의.

Product Pydantic request/response schema definitions.
"""

from datetime import date, datetime
from pydantic import BaseModel


class ProductCreate(BaseModel):
    """제품 생성 요청 스키마.

    Product creation request schema. space_id comes from the URL path.

    Attributes:
        name: 제품 이름 (Product name, unique per board)
        board_id: 소속 보드 UUID (Owning board)
        notes: 메모 (Notes, optional)
        space_location_id: 위치 UUID (Location, optional)
        start_date: 시작일 (Start date, optional)
        end_date: 종료일 (End date, optional)
    """

    name: str  # 제품 이름 (Product name)
    board_id: str  # 소속 보드 UUID (Board identifier)
    notes: str | None = None  # 메모 (Free-text notes)
    space_location_id: str | None = None  # 위치 UUID (Location identifier)
    start_date: date | None = None  # 시작일 (Start date)
    end_date: date | None = None  # 종료일 (End date)


class ProductUpdate(BaseModel):
    """제품 수정 요청 스키마 (부분 업데이트).

    Product update request schema (partial update).
    """

    name: str | None = None  # 변경할 제품 이름 (New name, optional)
    notes: str | None = None  # 변경할 메모 (New notes, optional)
    space_location_id: str | None = None  # 변경할 위치, null이면 해제 (New location; null clears it)
    start_date: date | None = None  # 변경할 시작일 (New start date, optional)
    end_date: date | None = None  # 변경할 종료일 (New end date, optional)
    archived: bool | None = None  # 보관 여부 변경 (Archive toggle, optional)


class ProductResponse(BaseModel):
    """제품 응답 스키마.

    Product response schema returned from API.
    """

    id: str  # 제품 UUID 문자열 (Product UUID as string)
    space_id: str  # 소속 스페이스 UUID (Space UUID as string)
    board_id: str  # 소속 보드 UUID (Board UUID as string)
    name: str  # 제품 이름 (Product name)
    notes: str | None  # 메모 (Notes, may be null)
    space_location_id: str | None  # 위치 UUID (Location, may be null)
    start_date: date | None  # 시작일 (Start date, may be null)
    end_date: date | None  # 종료일 (End date, may be null)
    archived: bool  # 보관 여부 (Archived flag)
    created_at: datetime  # 생성 일시 UTC (Creation timestamp)
