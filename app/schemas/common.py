"""공통 Pydantic 스키마 정의.

Common Pydantic schema definitions shared across API domains.
Every request/response schema extends CamelModel so JSON bodies use the
camelCase keys the web client sends (`communityId`, `postImages`, ...)
while Python code keeps snake_case attributes. snake_case keys are
accepted on input as well.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """camelCase 별칭을 사용하는 베이스 스키마.

    Base schema with camelCase aliases, name population and ORM
    attribute loading enabled.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class FieldError(CamelModel):
    """요청 검증 실패 필드 정보 — One entry of a 400 validation error body."""

    field: str  # 실패한 필드 경로 (Dotted path of the failing field, e.g. "body.content")
    message: str  # 실패 사유 (Human-readable reason)
