"""사람 SQLAlchemy ORM 모델 정의.

Person SQLAlchemy ORM model definition.

Tables:
    - people: 스페이스 구성원 (Members of a space)
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import String, Boolean, DateTime, Text, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from peoplemover.database import Base


class Person(Base):
    """사람 모델 — 제품에 배정되는 스페이스 구성원.

    Person model — A member of a space who can be assigned to products.
    Assignments reference people; they never own them.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        space_id: 소속 스페이스 FK (Owning space)
        name: 이름 (Display name)
        space_role_id: 역할 FK (Role held in the space, optional)
        notes: 메모 (Free-text notes, optional)
        new_person: 신규 인원 여부 (Marks a newly joined person)
        created_at: 생성 일시 UTC (Creation timestamp)
    """

    __tablename__ = "people"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 소속 스페이스 FK — Owning space (CASCADE: 스페이스 삭제 시 구성원도 삭제)
    space_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("spaces.id", ondelete="CASCADE"), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # 역할 FK — Role in the space (SET NULL: 역할 삭제 시 해제)
    space_role_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("space_roles.id", ondelete="SET NULL"), nullable=True
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    new_person: Mapped[bool] = mapped_column(Boolean, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
