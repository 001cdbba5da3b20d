"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses for the error taxonomy
shared by every service. Services raise these on the first failing
precondition; the exception handlers in app.main turn them into a
`{"status": code, "message": text}` JSON body.

Usage:
    from app.utils.exceptions import NotFoundError, PermissionDeniedError
    raise NotFoundError(MESSAGES["POST"]["FIND_ONE"]["NOT_FOUND"])
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용.

    Raised when a target entity (post, comment, community, ...) does not exist.
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class DuplicateError(HTTPException):
    """409 Conflict 예외 — 중복 리소스 생성 시도 시 사용.

    Raised when a uniqueness rule would be violated
    (e.g. duplicate email, joining the same community twice).
    """

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class PermissionDeniedError(HTTPException):
    """403 Forbidden 예외 — 멤버십/소유권/역할이 부족할 때 사용.

    Raised when the caller lacks the membership, ownership or role
    the operation requires.
    """

    def __init__(self, detail: str = "Insufficient permissions") -> None:
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class UnauthorizedError(HTTPException):
    """401 Unauthorized 예외 — 인증 실패 시 사용.

    Raised when authentication is missing, invalid, or expired.
    """

    def __init__(self, detail: str = "Authentication required") -> None:
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 잘못된 요청 데이터 시 사용.

    Raised on business-rule validation failures beyond what Pydantic catches
    (empty content, quantity out of range, payment amount mismatch).
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class PaymentGatewayError(HTTPException):
    """502 Bad Gateway 예외 — 결제 게이트웨이 호출 실패 시 사용."""

    def __init__(self, detail: str = "Payment gateway unavailable") -> None:
        super().__init__(status_code=status.HTTP_502_BAD_GATEWAY, detail=detail)
