"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for Alembic migrations and
relationship resolution.

Modules:
    space: 스페이스와 보드 (Space and Board)
    product: 제품 (Product)
    person: 사람 (Person)
    assignment: 배정 이력 (Effective-dated assignments)
    trait: 스페이스 역할과 위치 (Space roles and locations)
"""

from peoplemover.models.space import Space, Board
from peoplemover.models.trait import SpaceRole, SpaceLocation
from peoplemover.models.product import Product
from peoplemover.models.person import Person
from peoplemover.models.assignment import Assignment

__all__ = [
    "Space", "Board",
    "SpaceRole", "SpaceLocation",
    "Product",
    "Person",
    "Assignment",
]
