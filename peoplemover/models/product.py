"""제품(워크스트림) SQLAlchemy ORM 모델 정의.

Product (workstream) SQLAlchemy ORM model definition.

Tables:
    - products: 보드 하위 제품 (Products grouped under a board)
"""

import uuid
from datetime import date, datetime, timezone
from sqlalchemy import String, Boolean, Date, DateTime, Text, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from peoplemover.database import Base


class Product(Base):
    """제품 모델 — 사람이 배정되는 단위.

    Product model — The workstream people are assigned to.
    Belongs to exactly one board; ``space_id`` is denormalized from the board
    for space-scoped queries.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        space_id: 소속 스페이스 FK (Owning space)
        board_id: 소속 보드 FK (Owning board)
        name: 제품 이름 (Product name, unique per board)
        notes: 메모 (Free-text notes, optional)
        space_location_id: 위치 FK (Location of the product, optional)
        start_date: 시작일 (Product start date, optional)
        end_date: 종료일 (Product end date, optional)
        archived: 보관 여부 (Archived flag)
        created_at: 생성 일시 UTC (Creation timestamp)

    Constraints:
        uq_product_board_name: 보드 내 제품 이름 고유 (Unique product name per board)
    """

    __tablename__ = "products"

    # 제품 고유 식별자 — Product unique identifier (UUID v4, auto-generated)
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 소속 스페이스 FK — Owning space
    space_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("spaces.id", ondelete="CASCADE"), nullable=False)
    # 소속 보드 FK — Owning board (CASCADE: 보드 삭제 시 제품도 삭제)
    board_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("boards.id", ondelete="CASCADE"), nullable=False)
    # 제품 이름 — Product display name
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    # 위치 FK — Location (SET NULL: 위치 삭제 시 해제)
    space_location_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("space_locations.id", ondelete="SET NULL"), nullable=True
    )
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    archived: Mapped[bool] = mapped_column(Boolean, default=False)
    # 생성 일시 — Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        UniqueConstraint("board_id", "name", name="uq_product_board_name"),
    )

    # 관계 — Relationships
    board = relationship("Board", back_populates="products")
