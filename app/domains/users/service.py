"""Users 도메인 서비스

HTTP 요청 하나를 저장소 호출 하나로 변환하는 비즈니스 로직 계층입니다.
검증은 항상 저장소 변경 이전에 수행합니다.
"""

import uuid
from typing import Any, Optional

from app.core.config import settings
from app.core.logging import get_logger
from app.core.middlewares.context import get_request_id
from app.core.patch import (
    InvalidPatchDocumentError,
    apply_patch,
    parse_patch_document,
)
from app.core.utils.pagination import Page
from app.domains.users.exceptions import (
    InvalidUserRequestException,
    UserNotFoundException,
    UserValidationException,
)
from app.domains.users.mapper import UserMapper
from app.domains.users.models import User
from app.domains.users.repository import UserRepository
from app.domains.users.schemas import PatchUserDto, PostUserDto, PutUserDto
from app.domains.users.validators import (
    merge_errors,
    validate_patch_user,
    validate_post_user,
    validate_put_user,
)

logger = get_logger(__name__)

NIL_UUID = uuid.UUID(int=0)


def parse_user_id(value: str) -> uuid.UUID:
    """경로의 사용자 ID 해석 (UUID가 아니면 빈 ID로 취급)"""
    try:
        return uuid.UUID(value)
    except ValueError:
        return NIL_UUID


class UserService:
    """사용자 서비스"""

    def __init__(
        self,
        repository: UserRepository,
        mapper: Optional[UserMapper] = None,
        persist_patches: Optional[bool] = None,
    ):
        self.repository = repository
        self.mapper = mapper or UserMapper()
        self.persist_patches = (
            settings.persist_user_patches
            if persist_patches is None
            else persist_patches
        )

    def _log(self, message: str, user_id: uuid.UUID, action: str) -> None:
        logger.info(
            message,
            extra={
                "request_id": get_request_id(),
                "user_id": str(user_id),
                "action": action,
            },
        )

    async def get_user(self, user_id: uuid.UUID) -> User:
        """사용자 조회

        Raises:
            UserNotFoundException: 사용자를 찾을 수 없는 경우
        """
        user = await self.repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundException(user_id=user_id)
        return user

    async def create_user(self, dto: Optional[PostUserDto]) -> uuid.UUID:
        """사용자 생성

        Args:
            dto: 생성 요청 (없으면 400)

        Returns:
            새로 할당된 사용자 ID

        Raises:
            InvalidUserRequestException: 요청 본문이 없는 경우
            UserValidationException: login이 없거나 형식이 잘못된 경우
        """
        if dto is None:
            raise InvalidUserRequestException(reason="body is required")

        errors = validate_post_user(dto)
        if errors:
            raise UserValidationException(errors)

        created = await self.repository.insert(self.mapper.to_entity(dto))
        self._log("User created", created.id, "created")
        return created.id

    async def upsert_user(
        self, dto: Optional[PutUserDto], user_id: uuid.UUID
    ) -> bool:
        """사용자 전체 수정 또는 생성 (Upsert)

        경로의 ID가 항상 우선하며, 식별자는 변경되지 않습니다.

        Returns:
            새로 생성되었으면 True, 기존 사용자를 덮어썼으면 False

        Raises:
            InvalidUserRequestException: 본문이 없거나 ID가 비어 있는 경우
            UserValidationException: 필수 필드 누락 또는 형식 오류
        """
        if dto is None or user_id == NIL_UUID:
            raise InvalidUserRequestException(
                reason="body and non-empty userId are required"
            )

        errors = validate_put_user(dto)
        if errors:
            raise UserValidationException(errors)

        user = self.mapper.apply(
            dto, User(id=user_id, games_played=0, current_game_id=None)
        )
        is_inserted = await self.repository.update_or_insert(user)

        self._log(
            "User upserted", user_id, "created" if is_inserted else "updated"
        )
        return is_inserted

    async def patch_user(self, document: Any, user_id: uuid.UUID) -> None:
        """사용자 부분 수정

        엔티티를 PatchUserDto로 투영하고 연산을 순서대로 적용한 뒤 검증합니다.
        persist_patches가 꺼져 있으면(기본) 검증만 하고 저장하지 않습니다.

        Raises:
            InvalidUserRequestException: 패치 문서가 없거나 배열이 아닌 경우
            UserNotFoundException: ID가 비어 있거나 사용자가 없는 경우
            UserValidationException: 연산 적용 또는 결과 검증 실패
        """
        if document is None:
            raise InvalidUserRequestException(reason="patch document is required")

        try:
            operations = parse_patch_document(document)
        except InvalidPatchDocumentError as e:
            raise InvalidUserRequestException(reason=str(e)) from e

        if user_id == NIL_UUID:
            raise UserNotFoundException(user_id=user_id)

        user = await self.get_user(user_id)

        target = self.mapper.to_patch_dto(user).model_dump(by_alias=True)
        patch_errors = apply_patch(
            operations, target, PatchUserDto.field_types()
        )
        patched = PatchUserDto.model_validate(target)

        errors = merge_errors(patch_errors, validate_patch_user(patched))
        if errors:
            raise UserValidationException(errors)

        if self.persist_patches:
            await self.repository.update(self.mapper.apply_patch(patched, user))
            self._log("User patched", user_id, "patched")
        else:
            self._log("User patch validated", user_id, "validated")

    async def delete_user(self, user_id: uuid.UUID) -> None:
        """사용자 삭제

        Raises:
            UserNotFoundException: ID가 비어 있거나 사용자가 없는 경우
        """
        if user_id == NIL_UUID:
            raise UserNotFoundException(user_id=user_id)

        await self.get_user(user_id)
        await self.repository.delete(user_id)
        self._log("User deleted", user_id, "deleted")

    async def get_users(self, page_number: int, page_size: int) -> Page[User]:
        """사용자 페이지 조회 (page_number/page_size는 이미 보정된 값)"""
        return await self.repository.get_page(page_number, page_size)
