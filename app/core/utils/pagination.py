"""페이지네이션 유틸리티"""

import math
from dataclasses import dataclass, field
from typing import Generic, Optional, Sequence, TypeVar

from fastapi import Query

from app.core.config import settings

ItemT = TypeVar("ItemT")


def parse_int(value: Optional[str]) -> Optional[int]:
    """쿼리 문자열을 정수로 변환 (변환할 수 없으면 None)"""
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def clamp_page_number(page_number: Optional[int]) -> int:
    """페이지 번호 보정 (없으면 1, 최소 1)"""
    if page_number is None:
        return 1
    return max(1, page_number)


def clamp_page_size(
    page_size: Optional[int],
    default: Optional[int] = None,
    maximum: Optional[int] = None,
) -> int:
    """페이지 크기 보정 (없으면 기본값, [1, 최대값] 범위로 제한)"""
    default = settings.default_page_size if default is None else default
    maximum = settings.max_page_size if maximum is None else maximum
    if page_size is None:
        return default
    return min(maximum, max(1, page_size))


class PageParams:
    """페이지네이션 파라미터 의존성

    범위를 벗어난 값은 허용 범위로 보정하고, 정수가 아닌 값은 기본값으로
    처리합니다.

    Example::

        from app.core.utils.pagination import PageParams

        @router.get("", name="get_users")
        async def get_users(page_params: PageParams = Depends()):
            page = await repository.get_page(
                page_params.page_number, page_params.page_size
            )
    """

    def __init__(
        self,
        page_number: Optional[str] = Query(
            None, alias="pageNumber", description="페이지 번호 (기본 1)"
        ),
        page_size: Optional[str] = Query(
            None, alias="pageSize", description="페이지 크기 (기본 10, 최대 20)"
        ),
    ):
        self.page_number = clamp_page_number(parse_int(page_number))
        self.page_size = clamp_page_size(parse_int(page_size))


@dataclass
class Page(Generic[ItemT]):
    """전체 컬렉션 중 한 페이지 분량의 결과"""

    items: Sequence[ItemT]
    total_count: int
    current_page: int
    page_size: int
    total_pages: int = field(init=False)

    def __post_init__(self) -> None:
        self.total_pages = (
            math.ceil(self.total_count / self.page_size)
            if self.page_size > 0
            else 0
        )

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
