"""스페이스/보드 관련 SQLAlchemy ORM 모델 정의.

Space and Board SQLAlchemy ORM model definitions.
A Space is the tenant boundary; Boards group the products of a space.

Tables:
    - spaces: 최상위 테넌트 (Top-level tenant)
    - boards: 스페이스 하위 보드 (Product grouping under a space)
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import String, DateTime, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from peoplemover.database import Base


class Space(Base):
    """스페이스(테넌트) 모델 — 시스템의 최상위 엔티티.

    Space (tenant) model — Top-level entity in the system.
    Boards, products, people and assignments are all scoped to a space.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        name: 스페이스 이름, 대소문자 무시 고유 (Space name, unique ignoring case)
        last_modified_date: 마지막 변경 일시 (Touched by every write inside the space)
        created_at: 생성 일시 UTC (Creation timestamp in UTC)

    Relationships:
        boards: 소속 보드 목록 (Boards of this space, cascade delete)
    """

    __tablename__ = "spaces"

    # 스페이스 고유 식별자 — Space unique identifier (UUID v4, auto-generated)
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 스페이스 이름 — Space display name (max 255 chars, required)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    # 마지막 변경 일시 — Last write to people/products/assignments of this space
    last_modified_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    # 생성 일시 — Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    # 관계 — Relationships (cascade: 스페이스 삭제 시 보드 일괄 삭제)
    boards = relationship("Board", back_populates="space", cascade="all, delete-orphan")


class Board(Base):
    """보드 모델 — 스페이스 내 제품 그룹.

    Board model — Named grouping of products within a space.
    Every board owns exactly one sentinel "unassigned" product, created with
    the board; its id is kept in ``unassigned_product_id`` so the fallback
    product is resolved by reference rather than by name.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        space_id: 소속 스페이스 FK (Parent space)
        name: 보드 이름 (Board name, unique per space)
        unassigned_product_id: 미배정 제품 ID (Sentinel fallback product of this board)
        created_at: 생성 일시 UTC (Creation timestamp)

    Constraints:
        uq_board_space_name: 스페이스 내 보드 이름 고유 (Unique board name per space)
    """

    __tablename__ = "boards"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 소속 스페이스 FK — Parent space (CASCADE: 스페이스 삭제 시 보드도 삭제)
    space_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("spaces.id", ondelete="CASCADE"), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # 미배정 제품 참조 — Set right after the sentinel product is created (boards <-> products cycle, no FK)
    unassigned_product_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        UniqueConstraint("space_id", "name", name="uq_board_space_name"),
    )

    # 관계 — Relationships
    space = relationship("Space", back_populates="boards")
    products = relationship(
        "Product",
        back_populates="board",
        cascade="all, delete-orphan",
        order_by="Product.created_at",
    )
