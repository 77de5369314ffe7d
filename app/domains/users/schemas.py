"""Users 도메인 스키마 정의

입력 DTO의 필수 여부/형식 검증은 pydantic이 아니라 validators 모듈에서
명시적으로 수행합니다. 따라서 입력 필드는 모두 Optional로 선언합니다.
"""

import uuid
from typing import Optional

from pydantic import Field

from app.core.schemas import BaseSchema


class UserDto(BaseSchema):
    """사용자 조회 응답 스키마"""

    id: uuid.UUID
    login: Optional[str] = None
    full_name: str = Field(..., description="'성 이름' 형태의 전체 이름")
    games_played: int = 0
    current_game_id: Optional[uuid.UUID] = None


class PostUserDto(BaseSchema):
    """사용자 생성 요청 스키마"""

    login: Optional[str] = Field(default=None, description="로그인 (영문자/숫자)")
    first_name: Optional[str] = Field(default="John", description="이름")
    last_name: Optional[str] = Field(default="Doe", description="성")


class PutUserDto(BaseSchema):
    """사용자 전체 수정(Upsert) 요청 스키마"""

    login: Optional[str] = Field(default=None, description="로그인 (필수)")
    first_name: Optional[str] = Field(default=None, description="이름 (필수)")
    last_name: Optional[str] = Field(default=None, description="성 (필수)")


class PatchUserDto(BaseSchema):
    """사용자 부분 수정 대상 스키마 (패치 적용 후 PutUserDto와 동일 규칙으로 검증)"""

    login: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    @classmethod
    def field_types(cls) -> dict[str, tuple[type, ...]]:
        """패치 경로(camelCase)별 허용 타입"""
        return {
            field.alias or name: (str, type(None))
            for name, field in cls.model_fields.items()
        }
