"""JSON Patch 스타일 부분 수정 인터프리터

평면(flat) DTO를 dict로 투영한 대상에 add/remove/replace/move/copy/test
연산을 순서대로 적용합니다. 실패한 연산은 즉시 중단하지 않고 에러를
모아서 반환합니다.

Example::

    operations = parse_patch_document(
        [{"op": "replace", "path": "/login", "value": "neo"}]
    )
    target = {"login": "trinity", "firstName": "T", "lastName": "A"}
    errors = apply_patch(operations, target, {"login": (str, type(None))})
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional

_MISSING = object()


class PatchOperationType(str, Enum):
    """지원하는 패치 연산 종류"""

    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"
    MOVE = "move"
    COPY = "copy"
    TEST = "test"


class InvalidPatchDocumentError(ValueError):
    """패치 문서 자체의 형식이 잘못된 경우 (배열이 아님 등)"""


@dataclass(frozen=True)
class PatchOperation:
    """패치 연산 하나"""

    op: str
    path: str
    value: Any = None
    from_path: Optional[str] = None

    @property
    def key(self) -> str:
        """에러 맵에서 사용할 키"""
        return self.path or "patch"


def parse_patch_document(raw: Any) -> list[PatchOperation]:
    """요청 본문을 패치 연산 목록으로 변환

    Args:
        raw: 역직렬화된 요청 본문

    Returns:
        PatchOperation 목록

    Raises:
        InvalidPatchDocumentError: 본문이 배열이 아니거나 요소가 객체가 아닌 경우
    """
    if not isinstance(raw, list):
        raise InvalidPatchDocumentError("Patch document must be a JSON array.")

    operations = []
    for index, item in enumerate(raw):
        if not isinstance(item, dict):
            raise InvalidPatchDocumentError(
                f"Patch operation at index {index} must be a JSON object."
            )
        from_path = item.get("from")
        operations.append(
            PatchOperation(
                op=str(item.get("op") or "").lower(),
                path=str(item.get("path") or ""),
                value=item.get("value"),
                from_path=str(from_path) if from_path is not None else None,
            )
        )
    return operations


def _normalize(name: str) -> str:
    return name.replace("_", "").lower()


def _resolve(path: Optional[str], target: Mapping[str, Any]) -> Optional[str]:
    """'/field' 경로를 대상 dict의 키로 변환 (대소문자, snake_case 무시)"""
    if not path or not path.startswith("/"):
        return None

    segment = path[1:].replace("~1", "/").replace("~0", "~")
    if not segment or "/" in path[1:]:
        return None

    wanted = _normalize(segment)
    for key in target:
        if _normalize(key) == wanted:
            return key
    return None


def _segment(path: Optional[str]) -> str:
    return (path or "").lstrip("/")


def _not_found(path: Optional[str]) -> str:
    return (
        f"The target location specified by path segment "
        f"'{_segment(path)}' was not found."
    )


def _check_type(
    key: str, value: Any, field_types: Mapping[str, tuple[type, ...]]
) -> Optional[str]:
    allowed = field_types.get(key)
    if allowed is not None and not isinstance(value, allowed):
        return f"The value '{value}' is invalid for target location."
    return None


def apply_operation(
    operation: PatchOperation,
    target: dict[str, Any],
    field_types: Mapping[str, tuple[type, ...]],
) -> Optional[str]:
    """연산 하나를 대상에 적용

    Args:
        operation: 적용할 연산
        target: DTO 투영 dict (제자리 수정)
        field_types: 필드별 허용 타입

    Returns:
        실패 시 에러 메시지, 성공 시 None
    """
    try:
        op = PatchOperationType(operation.op)
    except ValueError:
        return f"Invalid JsonPatch operation '{operation.op}'."

    key = _resolve(operation.path, target)
    if key is None:
        return _not_found(operation.path)

    if op in (PatchOperationType.ADD, PatchOperationType.REPLACE):
        error = _check_type(key, operation.value, field_types)
        if error:
            return error
        target[key] = operation.value
        return None

    if op is PatchOperationType.REMOVE:
        # 고정 필드 DTO에서는 값을 비우는 것으로 처리
        target[key] = None
        return None

    if op is PatchOperationType.TEST:
        current = target.get(key, _MISSING)
        if current != operation.value:
            return (
                f"The current value '{current}' at path '{_segment(operation.path)}' "
                f"is not equal to the test value '{operation.value}'."
            )
        return None

    # move / copy
    source_key = _resolve(operation.from_path, target)
    if source_key is None:
        return _not_found(operation.from_path)

    value = target[source_key]
    error = _check_type(key, value, field_types)
    if error:
        return error

    if op is PatchOperationType.MOVE and source_key != key:
        target[source_key] = None
    target[key] = value
    return None


def apply_patch(
    operations: list[PatchOperation],
    target: dict[str, Any],
    field_types: Mapping[str, tuple[type, ...]],
) -> dict[str, list[str]]:
    """연산 목록을 순서대로 적용하고 에러를 수집

    Args:
        operations: 패치 연산 목록
        target: DTO 투영 dict (제자리 수정)
        field_types: 필드별 허용 타입 (키는 target의 키와 동일)

    Returns:
        {경로: [에러 메시지]} 형태의 에러 맵 (성공 시 빈 dict)
    """
    errors: dict[str, list[str]] = {}
    for operation in operations:
        error = apply_operation(operation, target, field_types)
        if error:
            errors.setdefault(operation.key, []).append(error)
    return errors
