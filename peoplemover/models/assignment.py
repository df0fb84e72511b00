"""배정 관련 SQLAlchemy ORM 모델 정의.

Assignment SQLAlchemy ORM model definition.
An assignment states that a person works on a product from its effective
date onward, until a row with a later effective date supersedes it.

Effective Date Semantics:
    effective_date가 NULL인 행은 날짜 없는 기준(baseline) 배정입니다.
    Rows with a NULL effective_date are undated "baseline" assignments,
    active until the person gets any dated row on or before the queried date.
    Rows sharing one effective_date form a same-day split across products.

Tables:
    - assignments: 사람-제품 배정 이력 (Person-to-product assignment history)
"""

import uuid
from datetime import date, datetime, timezone
from sqlalchemy import Boolean, Date, DateTime, ForeignKey, Index, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from peoplemover.database import Base


class Assignment(Base):
    """배정 모델 — 사람의 제품 배정 이력 한 행.

    Assignment model — One effective-dated row of a person's product history.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier, immutable)
        person_id: 배정 대상 사람 FK (Person this row concerns)
        product_id: 배정 제품 FK (Product the person is assigned to)
        space_id: 소속 스페이스 FK (Denormalized from person for space queries)
        placeholder: 임시 배정 여부 (Provisional staffing flag)
        effective_date: 적용 시작일, NULL=기준 배정 (Start date; NULL = baseline)
        created_at: 생성 일시 UTC (Creation timestamp, also the row order within a date)
    """

    __tablename__ = "assignments"

    # 배정 고유 식별자 — Assignment unique identifier (UUID v4, auto-generated)
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 배정 대상 FK — Person (CASCADE: 사람 삭제 시 배정도 삭제)
    person_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("people.id", ondelete="CASCADE"), nullable=False)
    # 제품 FK — Product (CASCADE: 제품 삭제 시 배정도 삭제)
    product_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("products.id", ondelete="CASCADE"), nullable=False)
    # 소속 스페이스 FK — Denormalized tenant scope
    space_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("spaces.id", ondelete="CASCADE"), nullable=False)
    # 임시 배정 — Placeholder (unconfirmed) staffing
    placeholder: Mapped[bool] = mapped_column(Boolean, default=False)
    # 적용 시작일 — NULL이면 기준(baseline) 배정 (NULL marks an undated baseline row)
    effective_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    # 생성 일시 — Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        Index("ix_assignments_person_effective_date", "person_id", "effective_date"),
        Index("ix_assignments_product", "product_id"),
    )
