"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses so repositories and services
can reject bad input without specifying status codes at each call site.

Usage:
    from app.utils.exceptions import BadRequestError
    raise BadRequestError("Unknown sort property: nickname")
"""

from fastapi import HTTPException, status


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 잘못된 요청 데이터 시 사용.

    400 Bad Request exception.
    Raised when the request is well-formed for Pydantic but cannot be turned
    into a query (e.g. a sort parameter naming an unknown property).

    Args:
        detail: 오류 메시지 (Error message, default: "Bad request")
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
