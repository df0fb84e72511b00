"""배정 및 재배정 관련 Pydantic 요청/응답 스키마 정의.

Assignment and reassignment Pydantic request/response schema definitions.
"""

from datetime import date
from pydantic import BaseModel, field_validator

from peoplemover.schemas.person import PersonResponse
from peoplemover.utils.parsing import parse_requested_date


# === 배정 (Assignment) 스키마 ===

class AssignmentCreate(BaseModel):
    """단일 배정 생성 요청 스키마.

    Single assignment creation request schema.
    Creates an undated (baseline) row for the person on the product.

    Attributes:
        person_id: 배정 대상 사람 UUID (Person to assign)
        product_id: 대상 제품 UUID (Target product)
        placeholder: 임시 배정 여부 (Provisional staffing flag)
    """

    person_id: str  # 배정 대상 사람 UUID (Person identifier)
    product_id: str  # 대상 제품 UUID (Product identifier)
    placeholder: bool = False  # 임시 배정 여부 (Placeholder flag)


class AssignmentUpdate(BaseModel):
    """배정 수정 요청 스키마.

    Assignment update request schema. Only the placeholder flag and the
    product reference can change in place.
    """

    placeholder: bool  # 임시 배정 여부 (Placeholder flag)
    product_id: str | None = None  # 변경할 제품 UUID (New product, optional)


class ProductPlaceholderPair(BaseModel):
    """날짜별 일괄 배정의 제품 항목 — One product of a bulk date request."""

    product_id: str  # 제품 UUID (Product identifier)
    placeholder: bool = False  # 임시 배정 여부 (Placeholder flag)


class CreateAssignmentsForDateRequest(BaseModel):
    """날짜별 일괄 배정 교체 요청 스키마.

    Bulk replace request: the person's rows at ``requested_date`` are
    replaced by one row per listed product.

    Attributes:
        person_id: 대상 사람 UUID (Person whose timeline changes)
        requested_date: 적용 시작일 (Effective date of the new set)
        products: 새 제품 집합 (Desired products with placeholder flags)
    """

    person_id: str
    requested_date: date
    products: list[ProductPlaceholderPair] = []

    @field_validator("requested_date", mode="before")
    @classmethod
    def _strict_iso_date(cls, value):
        # 경로 날짜와 같은 규칙 (400) — Same YYYY-MM-DD rule as path dates
        if isinstance(value, date):
            return value
        return parse_requested_date(value)


class AssignmentResponse(BaseModel):
    """배정 응답 스키마.

    Assignment response schema returned from API.
    """

    id: str  # 배정 UUID 문자열 (Assignment UUID as string)
    person_id: str  # 사람 UUID 문자열 (Person UUID as string)
    product_id: str  # 제품 UUID 문자열 (Product UUID as string)
    space_id: str  # 스페이스 UUID 문자열 (Space UUID as string)
    placeholder: bool  # 임시 배정 여부 (Placeholder flag)
    effective_date: date | None  # 적용 시작일, null=기준 배정 (Null marks a baseline row)


# === 재배정 (Reassignment) 스키마 ===

class ReassignmentResponse(BaseModel):
    """재배정 응답 스키마 — 특정 날짜의 제품 이동 요약.

    Summary of one person's product change on a date.

    Attributes:
        person: 대상 사람 (Person who moved)
        from_product_name: 떠난 제품 이름, " & " 연결 (Products left, joined)
        to_product_name: 새로 합류한 제품 이름, " & " 연결 (Products joined, joined)
    """

    person: PersonResponse
    from_product_name: str  # 첫 배정이면 빈 문자열 (Empty for a first assignment)
    to_product_name: str  # 배정 취소면 빈 문자열 (Empty for a cancellation)
