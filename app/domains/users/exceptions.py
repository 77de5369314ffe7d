"""Users 도메인 예외 정의"""

import uuid
from enum import Enum

from app.core.exceptions import (
    BadRequestException,
    NotFoundException,
    UnprocessableEntityException,
)


class UserErrorCode(str, Enum):
    """사용자 도메인 에러 코드"""

    USER_NOT_FOUND = "USER_NOT_FOUND"
    INVALID_USER_REQUEST = "INVALID_USER_REQUEST"
    USER_VALIDATION_FAILED = "USER_VALIDATION_FAILED"


class UserNotFoundException(NotFoundException):
    """사용자를 찾을 수 없는 경우"""

    def __init__(self, user_id: uuid.UUID | None = None):
        detail = {"user_id": str(user_id)} if user_id else {}
        super().__init__(
            message="사용자를 찾을 수 없습니다.",
            error_code=UserErrorCode.USER_NOT_FOUND,
            detail=detail,
        )


class InvalidUserRequestException(BadRequestException):
    """요청 본문이 없거나 ID가 비어 있는 경우"""

    def __init__(self, reason: str | None = None):
        detail = {"reason": reason} if reason else {}
        super().__init__(
            message="잘못된 사용자 요청입니다.",
            error_code=UserErrorCode.INVALID_USER_REQUEST,
            detail=detail,
        )


class UserValidationException(UnprocessableEntityException):
    """필드 검증 또는 패치 적용에 실패한 경우"""

    def __init__(self, errors: dict[str, list[str]]):
        self.errors = errors
        super().__init__(
            message="사용자 데이터가 유효하지 않습니다.",
            error_code=UserErrorCode.USER_VALIDATION_FAILED,
            detail=errors,
        )
