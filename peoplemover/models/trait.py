"""스페이스 역할/위치 SQLAlchemy ORM 모델 정의.

Space role and location SQLAlchemy ORM model definitions.
Roles label people and locations label products; both are named lists
owned by a space.

Tables:
    - space_roles: 스페이스 역할 (Roles people can hold in a space)
    - space_locations: 스페이스 위치 (Locations products can be placed at)
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import String, DateTime, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from peoplemover.database import Base


class SpaceRole(Base):
    """스페이스 역할 모델.

    Space role model — A role a person can hold, with an optional display color.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        space_id: 소속 스페이스 FK (Owning space)
        name: 역할 이름 (Role name, unique per space ignoring case)
        color: 표시 색상 (Display color such as "#FFD7B3", optional)
        created_at: 생성 일시 UTC (Creation timestamp)
    """

    __tablename__ = "space_roles"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    space_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("spaces.id", ondelete="CASCADE"), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    color: Mapped[str | None] = mapped_column(String(32), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        UniqueConstraint("space_id", "name", name="uq_space_role_space_name"),
    )


class SpaceLocation(Base):
    """스페이스 위치 모델.

    Space location model — Where a product is run from.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        space_id: 소속 스페이스 FK (Owning space)
        name: 위치 이름 (Location name, unique per space ignoring case)
        created_at: 생성 일시 UTC (Creation timestamp)
    """

    __tablename__ = "space_locations"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    space_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("spaces.id", ondelete="CASCADE"), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        UniqueConstraint("space_id", "name", name="uq_space_location_space_name"),
    )
