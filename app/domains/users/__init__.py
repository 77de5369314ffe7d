"""Users 도메인 모듈

사용자 리소스 CRUD, Upsert, JSON Patch, 페이지네이션을 제공하는 도메인입니다.

구조:
    - models.py: SQLAlchemy 모델 정의 (User)
    - schemas.py: Pydantic DTO (UserDto, PostUserDto, PutUserDto, PatchUserDto)
    - validators.py: DTO별 명시적 검증 함수
    - mapper.py: 엔티티 <-> DTO 변환
    - repository.py: 데이터 접근 계층 (조회/생성/Upsert/삭제/페이지)
    - service.py: 비즈니스 로직 (요청 하나 → 저장소 호출 하나)
    - router.py: API 엔드포인트 (상태 코드, 헤더, 콘텐츠 협상)
    - exceptions.py: 도메인 예외
"""

from app.domains.users.exceptions import (
    InvalidUserRequestException,
    UserErrorCode,
    UserNotFoundException,
    UserValidationException,
)
from app.domains.users.mapper import UserMapper
from app.domains.users.models import User
from app.domains.users.repository import UserRepository
from app.domains.users.router import router
from app.domains.users.schemas import (
    PatchUserDto,
    PostUserDto,
    PutUserDto,
    UserDto,
)
from app.domains.users.service import UserService

__all__ = [
    "User",
    "UserDto",
    "PostUserDto",
    "PutUserDto",
    "PatchUserDto",
    "UserMapper",
    "UserRepository",
    "UserService",
    "router",
    "UserErrorCode",
    "UserNotFoundException",
    "InvalidUserRequestException",
    "UserValidationException",
]
