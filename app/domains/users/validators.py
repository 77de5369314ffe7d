"""Users 도메인 입력 검증

각 DTO별 검증 함수는 {필드명(camelCase): [메시지]} 형태의 에러 맵을 반환합니다.
빈 dict이면 유효한 입력입니다.
"""

from typing import Optional

from app.domains.users.schemas import PatchUserDto, PostUserDto, PutUserDto

ErrorMap = dict[str, list[str]]

LOGIN_NULL_MESSAGE = "Login must not be null"
LOGIN_CHARSET_MESSAGE = "Login must contain only letters or digits"


def is_letters_or_digits(value: str) -> bool:
    """모든 문자가 유니코드 문자 또는 10진 숫자인지 여부"""
    return all(ch.isalpha() or ch.isdecimal() for ch in value)


def _add_error(errors: ErrorMap, field: str, message: str) -> None:
    errors.setdefault(field, []).append(message)


def _require(errors: ErrorMap, field: str, value: Optional[str]) -> bool:
    if value is None or not value.strip():
        _add_error(errors, field, f"The {field} field is required.")
        return False
    return True


def validate_post_user(dto: PostUserDto) -> ErrorMap:
    """생성 요청 검증: login 필수 + 영문자/숫자만 허용"""
    errors: ErrorMap = {}
    if dto.login is None:
        _add_error(errors, "login", LOGIN_NULL_MESSAGE)
    elif not is_letters_or_digits(dto.login):
        _add_error(errors, "login", LOGIN_CHARSET_MESSAGE)
    return errors


def _validate_full_user(dto: PutUserDto | PatchUserDto) -> ErrorMap:
    errors: ErrorMap = {}
    if _require(errors, "login", dto.login) and not is_letters_or_digits(
        dto.login
    ):
        _add_error(errors, "login", LOGIN_CHARSET_MESSAGE)
    _require(errors, "firstName", dto.first_name)
    _require(errors, "lastName", dto.last_name)
    return errors


def validate_put_user(dto: PutUserDto) -> ErrorMap:
    """전체 수정 요청 검증: 모든 필드 필수"""
    return _validate_full_user(dto)


def validate_patch_user(dto: PatchUserDto) -> ErrorMap:
    """패치 적용 결과 검증: 전체 수정과 동일한 규칙"""
    return _validate_full_user(dto)


def merge_errors(*error_maps: ErrorMap) -> ErrorMap:
    """여러 에러 맵을 하나로 합침"""
    merged: ErrorMap = {}
    for error_map in error_maps:
        for field, messages in error_map.items():
            merged.setdefault(field, []).extend(messages)
    return merged
