"""요청 값 파싱 유틸리티 모듈.

Request value parsing utilities.
Path segments and request bodies carry ids and dates as strings; these
helpers turn them into typed values or raise the matching HTTP error
before any service logic runs.
"""

import re
from datetime import date
from uuid import UUID

from peoplemover.utils.exceptions import BadRequestError, NotFoundError

# ISO-8601 달력 날짜 형식 — Calendar date in extended form (YYYY-MM-DD)
_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_requested_date(value: str) -> date:
    """ISO-8601 날짜 문자열을 date로 변환합니다.

    Parse a ``YYYY-MM-DD`` string.

    Args:
        value: 날짜 문자열 (Date string from the request)

    Returns:
        date: 변환된 날짜 (Parsed date)

    Raises:
        BadRequestError: 형식이 잘못되었거나 존재하지 않는 날짜일 때
                         (Malformed or impossible calendar date)
    """
    if not isinstance(value, str) or not _ISO_DATE.match(value):
        raise BadRequestError(f"Invalid date format: {value}")
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise BadRequestError(f"Invalid date format: {value}")


def parse_uuid(value: str, resource: str) -> UUID:
    """UUID 문자열을 변환합니다. 잘못된 값은 존재하지 않는 리소스로 취급.

    Parse an id string; a malformed id cannot reference anything, so it is
    reported as a missing resource.

    Args:
        value: UUID 문자열 (Id string)
        resource: 리소스 이름, 오류 메시지용 (Resource name for the error message)

    Raises:
        NotFoundError: UUID 형식이 아닐 때 (Malformed id)
    """
    try:
        return UUID(value)
    except (ValueError, TypeError, AttributeError):
        raise NotFoundError(f"{resource} not found")
