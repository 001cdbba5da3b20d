"""공통 응답 봉투 — 모든 성공 응답의 {status, message, data} 형태.

Uniform response envelope returned by every successful service call.
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel

DataT = TypeVar("DataT")


class ApiResponse(BaseModel, Generic[DataT]):
    """성공 응답 봉투.

    Attributes:
        status: HTTP 상태 코드 (HTTP-style status code)
        message: 메시지 카탈로그에서 가져온 안내 문구 (Message from the catalog)
        data: 결과 데이터 (Result payload)
    """

    status: int
    message: str
    data: DataT | None = None


class PageResponse(ApiResponse[list[DataT]], Generic[DataT]):
    """페이지네이션 응답 봉투 — 클라이언트 페이지 계산용 메타 포함."""

    total: int
    page: int
    limit: int


def create_response(status: int, message: str, data: Any = None) -> ApiResponse[Any]:
    """응답 봉투를 생성합니다.

    Build an ApiResponse envelope.

    Args:
        status: HTTP 상태 코드 (e.g. 200, 201)
        message: 메시지 카탈로그 문구
        data: 결과 데이터 (schema instance, list, or scalar)
    """
    return ApiResponse[Any](status=status, message=message, data=data)


def create_page_response(
    status: int,
    message: str,
    items: list[Any],
    total: int,
    page: int,
    limit: int,
) -> PageResponse[Any]:
    """페이지네이션 응답 봉투를 생성합니다."""
    return PageResponse[Any](
        status=status,
        message=message,
        data=items,
        total=total,
        page=page,
        limit=limit,
    )
