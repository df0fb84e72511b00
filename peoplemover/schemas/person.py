"""사람 관련 Pydantic 요청/응답 스키마 정의.

Person Pydantic request/response schema definitions.
"""

from datetime import datetime
from pydantic import BaseModel, Field


class PersonCreate(BaseModel):
    """사람 생성 요청 스키마.

    Person creation request schema. space_id comes from the URL path.
    """

    name: str = Field(..., min_length=1)  # 이름 (Display name, required)
    space_role_id: str | None = None  # 역할 UUID (Role in the space, optional)
    notes: str | None = None  # 메모 (Notes, optional)
    new_person: bool = False  # 신규 인원 여부 (New person flag)


class PersonUpdate(BaseModel):
    """사람 수정 요청 스키마 (부분 업데이트).

    Person update request schema (partial update).
    """

    name: str | None = Field(None, min_length=1)
    space_role_id: str | None = None
    notes: str | None = None
    new_person: bool | None = None


class PersonResponse(BaseModel):
    """사람 응답 스키마.

    Person response schema returned from API.
    """

    id: str  # 사람 UUID 문자열 (Person UUID as string)
    space_id: str  # 소속 스페이스 UUID (Space UUID as string)
    name: str  # 이름 (Display name)
    space_role_id: str | None  # 역할 UUID (Role, may be null)
    notes: str | None  # 메모 (Notes, may be null)
    new_person: bool  # 신규 인원 여부 (New person flag)
    created_at: datetime  # 생성 일시 UTC (Creation timestamp)
