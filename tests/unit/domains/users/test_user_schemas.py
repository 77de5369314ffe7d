"""Users 도메인 테스트 - 스키마, 검증, 매퍼"""

import uuid

import pytest

from app.domains.users.mapper import UserMapper
from app.domains.users.models import User
from app.domains.users.schemas import (
    PatchUserDto,
    PostUserDto,
    PutUserDto,
    UserDto,
)
from app.domains.users.validators import (
    LOGIN_CHARSET_MESSAGE,
    LOGIN_NULL_MESSAGE,
    is_letters_or_digits,
    merge_errors,
    validate_patch_user,
    validate_post_user,
    validate_put_user,
)


class TestUserSchemas:
    """사용자 스키마 테스트"""

    def test_post_user_defaults(self):
        """PostUserDto 기본 이름"""
        dto = PostUserDto.model_validate({"login": "neo"})

        assert dto.first_name == "John"
        assert dto.last_name == "Doe"

    def test_post_user_accepts_camel_case(self):
        """camelCase 입력 허용"""
        dto = PostUserDto.model_validate(
            {"login": "neo", "firstName": "Thomas", "lastName": "Anderson"}
        )

        assert dto.first_name == "Thomas"
        assert dto.last_name == "Anderson"

    def test_put_user_fields_are_optional(self):
        """PutUserDto는 필수 여부를 validators에서 검증"""
        dto = PutUserDto.model_validate({})

        assert dto.login is None
        assert dto.first_name is None
        assert dto.last_name is None

    def test_user_dto_serializes_camel_case(self):
        """UserDto 직렬화는 camelCase"""
        dto = UserDto(
            id=uuid.UUID(int=1),
            login="neo",
            full_name="Anderson Thomas",
        )

        data = dto.model_dump(by_alias=True)

        assert data["fullName"] == "Anderson Thomas"
        assert data["gamesPlayed"] == 0
        assert data["currentGameId"] is None

    def test_patch_field_types_use_aliases(self):
        """패치 경로는 camelCase 필드명"""
        assert set(PatchUserDto.field_types()) == {
            "login",
            "firstName",
            "lastName",
        }


class TestUserValidators:
    """입력 검증 테스트"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("neo", True),
            ("Agent007", True),
            ("Юзер42", True),
            ("", True),
            ("neo!", False),
            ("first last", False),
            ("user_1", False),
            ("²", False),
        ],
    )
    def test_is_letters_or_digits(self, value, expected):
        assert is_letters_or_digits(value) is expected

    def test_post_login_required(self):
        assert validate_post_user(PostUserDto()) == {"login": [LOGIN_NULL_MESSAGE]}

    def test_post_login_charset(self):
        errors = validate_post_user(PostUserDto(login="neo!"))

        assert errors == {"login": [LOGIN_CHARSET_MESSAGE]}

    def test_post_valid(self):
        assert validate_post_user(PostUserDto(login="neo")) == {}

    def test_put_requires_all_fields(self):
        errors = validate_put_user(PutUserDto())

        assert errors == {
            "login": ["The login field is required."],
            "firstName": ["The firstName field is required."],
            "lastName": ["The lastName field is required."],
        }

    def test_put_rejects_blank_values(self):
        errors = validate_put_user(
            PutUserDto(login="neo", first_name=" ", last_name="")
        )

        assert set(errors) == {"firstName", "lastName"}

    def test_put_login_charset(self):
        errors = validate_put_user(
            PutUserDto(login="ne o", first_name="A", last_name="B")
        )

        assert errors == {"login": [LOGIN_CHARSET_MESSAGE]}

    def test_patch_uses_put_rules(self):
        dto = PatchUserDto(login="neo", first_name=None, last_name="B")

        assert validate_patch_user(dto) == {
            "firstName": ["The firstName field is required."]
        }

    def test_merge_errors(self):
        merged = merge_errors(
            {"login": ["a"], "/x": ["b"]},
            {"login": ["c"]},
            {},
        )

        assert merged == {"login": ["a", "c"], "/x": ["b"]}


class TestUserMapper:
    """User <-> DTO 매퍼 테스트"""

    @pytest.fixture
    def mapper(self):
        return UserMapper()

    def test_to_dto_builds_full_name(self, mapper):
        game_id = uuid.uuid4()
        user = User(
            id=uuid.uuid4(),
            login="neo",
            first_name="Thomas",
            last_name="Anderson",
            games_played=7,
            current_game_id=game_id,
        )

        dto = mapper.to_dto(user)

        assert dto.id == user.id
        assert dto.full_name == "Anderson Thomas"
        assert dto.games_played == 7
        assert dto.current_game_id == game_id

    def test_to_entity_starts_with_no_games(self, mapper):
        user = mapper.to_entity(PostUserDto(login="neo"))

        assert user.login == "neo"
        assert user.first_name == "John"
        assert user.last_name == "Doe"
        assert user.games_played == 0

    def test_apply_keeps_id(self, mapper):
        user_id = uuid.uuid4()
        user = User(id=user_id, login="old", first_name="O", last_name="L")

        mapper.apply(
            PutUserDto(login="new", first_name="N", last_name="W"), user
        )

        assert user.id == user_id
        assert user.login == "new"
        assert user.first_name == "N"
        assert user.last_name == "W"

    def test_patch_projection_round_trip(self, mapper):
        user = User(
            id=uuid.uuid4(),
            login="neo",
            first_name="Thomas",
            last_name="Anderson",
            games_played=2,
        )

        patched = mapper.to_patch_dto(user).model_copy(update={"login": "one"})
        mapper.apply_patch(patched, user)

        assert user.login == "one"
        assert user.first_name == "Thomas"
        assert user.games_played == 2
