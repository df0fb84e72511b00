"""FastAPI 의존성 주입 모듈 — 경로 값 변환.

FastAPI dependency injection module — Path value conversion.
Dates arrive as path segments; they are parsed here so services only ever
see ``datetime.date`` values and malformed input fails with 400 before any
database work.
"""

from datetime import date

from peoplemover.utils.parsing import parse_requested_date


async def get_requested_date(requested_date: str) -> date:
    """경로의 ``requested_date`` 세그먼트를 date로 변환합니다.

    Parse the ``requested_date`` path segment (``YYYY-MM-DD``).

    Raises:
        BadRequestError: 날짜 형식이 잘못되었을 때 (Malformed date)
    """
    return parse_requested_date(requested_date)
