"""예외 단위 테스트"""

import json
import uuid

import pytest
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.exceptions import (
    BadRequestException,
    ErrorCode,
    NotFoundException,
    UnprocessableEntityException,
    base_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from app.domains.users.exceptions import (
    InvalidUserRequestException,
    UserErrorCode,
    UserNotFoundException,
    UserValidationException,
)


class TestGlobalExceptions:
    """전역 예외 테스트"""

    def test_not_found_exception(self):
        """NotFoundException 기본값"""
        exc = NotFoundException()

        assert exc.status_code == 404
        assert exc.error_code == ErrorCode.NOT_FOUND
        assert exc.message == "리소스를 찾을 수 없습니다."
        assert exc.detail_info == {}

    def test_not_found_exception_custom(self):
        """NotFoundException 커스텀 메시지"""
        exc = NotFoundException(
            message="게임을 찾을 수 없습니다.",
            detail={"game_id": "g-1"},
        )

        assert exc.message == "게임을 찾을 수 없습니다."
        assert exc.detail_info == {"game_id": "g-1"}

    def test_bad_request_exception(self):
        """BadRequestException"""
        exc = BadRequestException(message="잘못된 입력입니다.")

        assert exc.status_code == 400
        assert exc.error_code == ErrorCode.BAD_REQUEST

    def test_unprocessable_entity_exception(self):
        """UnprocessableEntityException"""
        exc = UnprocessableEntityException(detail={"login": ["required"]})

        assert exc.status_code == 422
        assert exc.error_code == ErrorCode.UNPROCESSABLE_ENTITY
        assert exc.detail_info == {"login": ["required"]}


class TestDomainExceptions:
    """도메인 예외 테스트"""

    def test_user_not_found_exception(self):
        """UserNotFoundException"""
        user_id = uuid.uuid4()
        exc = UserNotFoundException(user_id=user_id)

        assert exc.status_code == 404
        assert exc.error_code == UserErrorCode.USER_NOT_FOUND
        assert exc.message == "사용자를 찾을 수 없습니다."
        assert exc.detail_info == {"user_id": str(user_id)}

    def test_user_not_found_exception_without_id(self):
        """UserNotFoundException (ID 없이)"""
        exc = UserNotFoundException()

        assert exc.detail_info == {}

    def test_invalid_user_request_exception(self):
        """InvalidUserRequestException"""
        exc = InvalidUserRequestException(reason="body is required")

        assert exc.status_code == 400
        assert exc.error_code == UserErrorCode.INVALID_USER_REQUEST
        assert exc.detail_info == {"reason": "body is required"}

    def test_user_validation_exception(self):
        """UserValidationException은 필드별 에러 맵을 유지"""
        errors = {"login": ["Login must not be null"]}
        exc = UserValidationException(errors)

        assert exc.status_code == 422
        assert exc.error_code == UserErrorCode.USER_VALIDATION_FAILED
        assert exc.errors == errors
        assert exc.detail_info == errors


class TestExceptionHandlers:
    """예외 핸들러 테스트"""

    @pytest.mark.asyncio
    async def test_base_exception_handler_envelope(self):
        """BaseAPIException -> 에러 응답 구조"""
        exc = UserValidationException({"login": ["invalid"]})

        response = await base_exception_handler(None, exc)

        assert response.status_code == 422
        body = json.loads(response.body)
        assert body["success"] is False
        assert body["error"]["code"] == "USER_VALIDATION_FAILED"
        assert body["error"]["detail"] == {"login": ["invalid"]}

    @pytest.mark.asyncio
    async def test_validation_exception_handler_groups_by_field(self):
        """RequestValidationError -> {field: [messages]}"""
        exc = RequestValidationError(
            [
                {"loc": ("body", "login"), "msg": "first", "type": "x"},
                {"loc": ("body", "login"), "msg": "second", "type": "x"},
                {"loc": ("query", "pageSize"), "msg": "int", "type": "x"},
            ]
        )

        response = await validation_exception_handler(None, exc)

        assert response.status_code == 422
        body = json.loads(response.body)
        assert body["error"]["code"] == "VALIDATION_ERROR"
        assert body["error"]["detail"] == {
            "login": ["first", "second"],
            "query.pageSize": ["int"],
        }

    @pytest.mark.asyncio
    async def test_validation_exception_handler_malformed_json(self):
        """JSON 해석 실패 -> 400 MALFORMED_REQUEST"""
        exc = RequestValidationError(
            [
                {
                    "type": "json_invalid",
                    "loc": ("body", 1),
                    "msg": "JSON decode error",
                    "input": {},
                    "ctx": {"error": "Expecting property name"},
                }
            ]
        )

        response = await validation_exception_handler(None, exc)

        assert response.status_code == 400
        body = json.loads(response.body)
        assert body["error"]["code"] == "MALFORMED_REQUEST"
        assert body["error"]["detail"] == {"reason": "Expecting property name"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "status_code, code",
        [
            (400, "BAD_REQUEST"),
            (404, "NOT_FOUND"),
            (405, "METHOD_NOT_ALLOWED"),
            (409, "BAD_REQUEST"),
            (503, "INTERNAL_ERROR"),
        ],
    )
    async def test_http_exception_handler_code_follows_status(
        self, status_code, code
    ):
        """HTTPException 에러 코드는 상태 코드에서 결정"""
        response = await http_exception_handler(
            None, StarletteHTTPException(status_code=status_code)
        )

        assert response.status_code == status_code
        assert json.loads(response.body)["error"]["code"] == code
