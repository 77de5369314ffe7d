"""Users 도메인 매퍼

엔티티(User)와 DTO 간 변환을 담당합니다.
"""

from typing import Iterable

from app.domains.users.models import User
from app.domains.users.schemas import (
    PatchUserDto,
    PostUserDto,
    PutUserDto,
    UserDto,
)


class UserMapper:
    """User <-> DTO 매퍼"""

    def to_dto(self, user: User) -> UserDto:
        return UserDto(
            id=user.id,
            login=user.login,
            full_name=f"{user.last_name or ''} {user.first_name or ''}".strip(),
            games_played=user.games_played or 0,
            current_game_id=user.current_game_id,
        )

    def to_dtos(self, users: Iterable[User]) -> list[UserDto]:
        return [self.to_dto(user) for user in users]

    def to_entity(self, dto: PostUserDto) -> User:
        """생성 요청 -> 새 엔티티 (ID는 저장소가 할당)"""
        return User(
            login=dto.login,
            first_name=dto.first_name,
            last_name=dto.last_name,
            games_played=0,
        )

    def apply(self, dto: PutUserDto, user: User) -> User:
        """전체 수정 요청을 엔티티에 덮어쓰기 (ID는 유지)"""
        user.login = dto.login
        user.first_name = dto.first_name
        user.last_name = dto.last_name
        return user

    def to_patch_dto(self, user: User) -> PatchUserDto:
        return PatchUserDto(
            login=user.login,
            first_name=user.first_name,
            last_name=user.last_name,
        )

    def apply_patch(self, dto: PatchUserDto, user: User) -> User:
        """검증된 패치 결과를 엔티티에 반영"""
        user.login = dto.login
        user.first_name = dto.first_name
        user.last_name = dto.last_name
        return user
