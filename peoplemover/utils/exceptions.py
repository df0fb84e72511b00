"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses for the error kinds raised
by services. Services raise them directly; routers let them propagate.

Usage:
    from peoplemover.utils.exceptions import NotFoundError, DuplicateError
    raise NotFoundError("Person not found")
    raise DuplicateError("Assignment already exists")
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용.

    Raised when a referenced space, board, product, person or assignment
    does not exist.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class DuplicateError(HTTPException):
    """409 Conflict 예외 — 중복 리소스 생성 시도 시 사용.

    Raised when a write would violate a uniqueness rule
    (e.g. duplicate space name, duplicate product name on a board,
    a second assignment of a person to the same product).

    Args:
        detail: 오류 메시지 (Error message, default: "Resource already exists")
    """

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 잘못된 요청 데이터 시 사용.

    Raised when the request data is invalid beyond what Pydantic validation
    catches (e.g. malformed date path segment, empty product name).

    Args:
        detail: 오류 메시지 (Error message, default: "Bad request")
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class NothingToCreateError(BadRequestError):
    """일괄 배정 요청에 제품 목록이 비어 있을 때 사용.

    Raised when a bulk assignment request carries an empty product list.
    """

    def __init__(self, detail: str = "No assignments to create") -> None:
        super().__init__(detail=detail)
