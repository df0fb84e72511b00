"""테스트 인프라 — 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — In-memory SQLite DB, session, and httpx client fixtures.
Each test gets a fresh in-memory database (aiosqlite + StaticPool) with the
schema created from the ORM metadata, so no external server is needed.
"""

from collections.abc import AsyncGenerator, Awaitable, Callable
from datetime import date

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from peoplemover.database import Base, get_db
from peoplemover.main import app
from peoplemover.models import *  # noqa: F401,F403 — register all models with metadata
from peoplemover.models.assignment import Assignment
from peoplemover.models.person import Person
from peoplemover.models.product import Product
from peoplemover.models.space import Board, Space

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

MAR1 = date(2019, 3, 1)
APR1 = date(2019, 4, 1)
APR2 = date(2019, 4, 2)


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 매 테스트마다 새 스키마를 생성합니다."""
    eng = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
async def _add(db: AsyncSession, obj):
    db.add(obj)
    await db.flush()
    await db.refresh(obj)
    return obj


@pytest_asyncio.fixture
async def space(db: AsyncSession) -> Space:
    """테스트 스페이스를 생성합니다."""
    return await _add(db, Space(name="Test Space"))


@pytest_asyncio.fixture
async def board(db: AsyncSession, space: Space) -> Board:
    """미배정 제품이 연결된 테스트 보드를 생성합니다."""
    b = await _add(db, Board(space_id=space.id, name="My Board"))
    unassigned = await _add(db, Product(space_id=space.id, board_id=b.id, name="unassigned"))
    b.unassigned_product_id = unassigned.id
    await db.flush()
    return b


@pytest_asyncio.fixture
async def other_board(db: AsyncSession, space: Space) -> Board:
    """두 번째 보드 (미배정 제품 포함)를 생성합니다."""
    b = await _add(db, Board(space_id=space.id, name="Other Board"))
    unassigned = await _add(db, Product(space_id=space.id, board_id=b.id, name="unassigned"))
    b.unassigned_product_id = unassigned.id
    await db.flush()
    return b


@pytest_asyncio.fixture
async def products(db: AsyncSession, space: Space, board: Board) -> dict[str, Product]:
    """생성 순서가 정해진 제품 4개를 생성합니다.

    Justice League → Avengers → Thor → Hulk, created in that order.
    """
    result = {}
    for key, name in [("one", "Justice League"), ("two", "Avengers"), ("three", "Thor"), ("four", "Hulk")]:
        result[key] = await _add(db, Product(space_id=space.id, board_id=board.id, name=name))
    return result


@pytest_asyncio.fixture
async def person(db: AsyncSession, space: Space) -> Person:
    """테스트 사람을 생성합니다."""
    return await _add(db, Person(space_id=space.id, name="Bruce Wayne"))


@pytest_asyncio.fixture
async def person_two(db: AsyncSession, space: Space, person: Person) -> Person:
    """두 번째 테스트 사람 (person 이후 생성)."""
    return await _add(db, Person(space_id=space.id, name="Diana Prince"))


@pytest_asyncio.fixture
async def make_assignment(
    db: AsyncSession,
) -> Callable[..., Awaitable[Assignment]]:
    """배정 행을 직접 저장하는 헬퍼를 반환합니다.

    Returns a helper that stores an assignment row as-is, bypassing the
    service rules, to set up timelines.
    """
    async def _make(
        person: Person,
        product: Product,
        effective_date: date | None = None,
        placeholder: bool = False,
    ) -> Assignment:
        return await _add(
            db,
            Assignment(
                person_id=person.id,
                product_id=product.id,
                space_id=person.space_id,
                placeholder=placeholder,
                effective_date=effective_date,
            ),
        )

    return _make
