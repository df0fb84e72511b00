"""스페이스 역할/위치 관련 Pydantic 요청/응답 스키마 정의.

Space role and location Pydantic request/response schema definitions.
"""

from datetime import datetime
from pydantic import BaseModel


# === 역할 (Role) 스키마 ===

class RoleCreate(BaseModel):
    """역할 생성 요청 스키마.

    Role creation request schema. space_id comes from the URL path.

    Attributes:
        name: 역할 이름 (Role name, unique per space ignoring case)
        color: 표시 색상 (Display color, optional)
    """

    name: str
    color: str | None = None


class RoleUpdate(BaseModel):
    """역할 수정 요청 스키마 (부분 업데이트) — Role update (partial)."""

    name: str | None = None
    color: str | None = None


class RoleResponse(BaseModel):
    """역할 응답 스키마."""

    id: str  # 역할 UUID 문자열 (Role UUID as string)
    space_id: str  # 소속 스페이스 UUID (Space UUID as string)
    name: str  # 역할 이름 (Role name)
    color: str | None  # 표시 색상 (Display color, may be null)
    created_at: datetime  # 생성 일시 UTC (Creation timestamp)


# === 위치 (Location) 스키마 ===

class LocationCreate(BaseModel):
    """위치 생성 요청 스키마 — Location creation request."""

    name: str  # 위치 이름 (Location name, unique per space ignoring case)


class LocationUpdate(BaseModel):
    """위치 수정 요청 스키마 — Location rename request."""

    name: str | None = None


class LocationResponse(BaseModel):
    """위치 응답 스키마."""

    id: str  # 위치 UUID 문자열 (Location UUID as string)
    space_id: str  # 소속 스페이스 UUID (Space UUID as string)
    name: str  # 위치 이름 (Location name)
    created_at: datetime  # 생성 일시 UTC (Creation timestamp)
