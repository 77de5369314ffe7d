"""스키마 단위 테스트"""

import json

from app.core.schemas import (
    APIResponse,
    ErrorDetail,
    ErrorResponse,
    PaginationMeta,
    create_response,
)


class TestAPIResponse:
    """APIResponse 테스트"""

    def test_success_response_with_data(self):
        """데이터가 있는 성공 응답"""
        response = APIResponse(
            success=True,
            data={"status": "healthy"},
            message="OK",
        )

        assert response.success is True
        assert response.message == "OK"
        assert response.data == {"status": "healthy"}

    def test_default_message(self):
        """기본 메시지"""
        response = APIResponse(success=True)

        assert response.message == "요청이 성공적으로 처리되었습니다."
        assert response.data is None

    def test_create_response(self):
        """팩토리 함수"""
        response = create_response(data={"version": "1.0.0"}, message="v1")

        assert response.success is True
        assert response.data == {"version": "1.0.0"}


class TestPaginationMeta:
    """PaginationMeta 테스트"""

    def test_header_uses_camel_case(self):
        """X-Pagination 헤더는 camelCase JSON"""
        meta = PaginationMeta(
            previous_page_link=None,
            next_page_link="http://test/api/v1/users?pageNumber=2&pageSize=10",
            total_count=15,
            page_size=10,
            current_page=1,
            total_pages=2,
        )

        header = json.loads(meta.to_header())

        assert header == {
            "previousPageLink": None,
            "nextPageLink": "http://test/api/v1/users?pageNumber=2&pageSize=10",
            "totalCount": 15,
            "pageSize": 10,
            "currentPage": 1,
            "totalPages": 2,
        }


class TestErrorResponse:
    """ErrorResponse 테스트"""

    def test_error_response_structure(self):
        """에러 응답 구조 검증"""
        error = ErrorResponse(
            message="사용자를 찾을 수 없습니다.",
            error=ErrorDetail(
                code="USER_NOT_FOUND",
                message="사용자를 찾을 수 없습니다.",
                detail={"user_id": "00000000-0000-0000-0000-000000000001"},
            ),
        )

        assert error.success is False
        assert error.error.code == "USER_NOT_FOUND"
        assert error.error.detail == {
            "user_id": "00000000-0000-0000-0000-000000000001"
        }
