"""공통 API 스키마

이 모듈은 API 응답의 일관된 구조와 공통 베이스 스키마를 정의합니다.

Usage::

    # 단일 데이터 응답 (헬스 체크 등)
    from app.core.schemas import create_response
    return create_response(data={"status": "healthy"}, message="OK")

    # 페이지네이션 헤더
    from app.core.schemas import PaginationMeta
    response.headers["X-Pagination"] = meta.to_header()

Note:
    리소스 엔드포인트는 DTO를 그대로 반환하고, 에러만 ErrorResponse 구조를
    사용합니다.
"""

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DataT = TypeVar("DataT")


class BaseSchema(BaseModel):
    """기본 스키마 (ORM 모델 변환 + camelCase 직렬화)"""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class APIResponse(BaseModel, Generic[DataT]):
    """단일 데이터 API 응답

    Example::

        @app.get("/health", response_model=APIResponse[dict[str, Any]])
        async def health_check():
            return APIResponse(success=True, message="OK", data={...})
    """

    success: bool = True
    message: str = "요청이 성공적으로 처리되었습니다."
    data: Optional[DataT] = None


def create_response(
    data: Optional[DataT] = None,
    message: str = "요청이 성공적으로 처리되었습니다.",
    success: bool = True,
) -> APIResponse[DataT]:
    """API 응답 생성 팩토리 함수

    Args:
        data: 응답 데이터
        message: 응답 메시지
        success: 성공 여부

    Returns:
        APIResponse 인스턴스
    """
    return APIResponse(success=success, message=message, data=data)


class PaginationMeta(BaseSchema):
    """페이지네이션 메타 정보 (X-Pagination 헤더)"""

    previous_page_link: Optional[str] = Field(
        default=None, description="이전 페이지 URL (첫 페이지면 null)"
    )
    next_page_link: Optional[str] = Field(
        default=None, description="다음 페이지 URL (마지막 페이지면 null)"
    )
    total_count: int = Field(..., description="전체 아이템 수")
    page_size: int = Field(..., description="페이지 크기")
    current_page: int = Field(..., description="현재 페이지")
    total_pages: int = Field(..., description="전체 페이지 수")

    def to_header(self) -> str:
        """헤더 값으로 사용할 JSON 문자열"""
        return self.model_dump_json(by_alias=True)


class ErrorDetail(BaseModel):
    """에러 상세 정보"""

    code: str = Field(..., description="에러 코드")
    message: str = Field(..., description="에러 메시지")
    detail: Optional[dict[str, Any]] = Field(default=None, description="추가 정보")


class ErrorResponse(BaseModel):
    """에러 API 응답

    Example::

        {
            "success": false,
            "message": "사용자 데이터가 유효하지 않습니다.",
            "error": {
                "code": "USER_VALIDATION_FAILED",
                "message": "사용자 데이터가 유효하지 않습니다.",
                "detail": {"login": ["Login must not be null"]}
            }
        }
    """

    success: bool = False
    message: str
    error: ErrorDetail
