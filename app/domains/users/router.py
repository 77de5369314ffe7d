"""Users 도메인 라우터

사용자 리소스 CRUD/페이지네이션 API 엔드포인트입니다.
응답은 Accept 헤더에 따라 JSON 또는 XML로 직렬화됩니다.
"""

import uuid
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.negotiation import negotiate
from app.core.schemas import ErrorResponse, PaginationMeta
from app.core.utils.pagination import Page, PageParams
from app.domains.users.mapper import UserMapper
from app.domains.users.models import User
from app.domains.users.repository import UserRepository
from app.domains.users.schemas import PostUserDto, PutUserDto, UserDto
from app.domains.users.service import UserService, parse_user_id

router = APIRouter()

ALLOWED_METHODS = "GET, POST, OPTIONS"

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "잘못된 요청"},
    404: {"model": ErrorResponse, "description": "사용자 없음"},
    422: {"model": ErrorResponse, "description": "검증 실패"},
}


def get_user_repository(
    session: AsyncSession = Depends(get_db),
) -> UserRepository:
    """UserRepository 의존성"""
    return UserRepository(session)


def get_user_mapper() -> UserMapper:
    """UserMapper 의존성"""
    return UserMapper()


def get_user_service(
    repository: UserRepository = Depends(get_user_repository),
    mapper: UserMapper = Depends(get_user_mapper),
) -> UserService:
    """UserService 의존성"""
    return UserService(repository, mapper)


def _created_at_user(request: Request, user_id: uuid.UUID) -> Response:
    """201 Created + Location(get_user_by_id) + 본문(ID)"""
    location = request.url_for("get_user_by_id", user_id=str(user_id))
    return negotiate(
        request,
        user_id,
        root_tag="id",
        status_code=status.HTTP_201_CREATED,
        headers={"Location": str(location)},
    )


def _page_link(request: Request, page: Page[User], page_number: int) -> str:
    url = request.url_for("get_users").include_query_params(
        pageNumber=page_number, pageSize=page.page_size
    )
    return str(url)


def build_pagination_meta(request: Request, page: Page[User]) -> PaginationMeta:
    """X-Pagination 헤더 메타 정보 생성"""
    return PaginationMeta(
        previous_page_link=(
            _page_link(request, page, page.current_page - 1)
            if page.has_previous
            else None
        ),
        next_page_link=(
            _page_link(request, page, page.current_page + 1)
            if page.has_next
            else None
        ),
        total_count=page.total_count,
        page_size=page.page_size,
        current_page=page.current_page,
        total_pages=page.total_pages,
    )


@router.get(
    "/{user_id}",
    name="get_user_by_id",
    response_model=UserDto,
    responses={404: ERROR_RESPONSES[404]},
)
@router.head("/{user_id}", include_in_schema=False)
async def get_user_by_id(
    user_id: str,
    request: Request,
    service: UserService = Depends(get_user_service),
):
    """사용자 상세 조회 (HEAD는 본문 없이 상태만 반환)"""
    user = await service.get_user(parse_user_id(user_id))
    if request.method == "HEAD":
        return Response(status_code=status.HTTP_200_OK)
    return negotiate(request, service.mapper.to_dto(user), root_tag="user")


@router.post(
    "",
    name="create_user",
    status_code=status.HTTP_201_CREATED,
    response_model=uuid.UUID,
    responses={400: ERROR_RESPONSES[400], 422: ERROR_RESPONSES[422]},
)
async def create_user(
    request: Request,
    user: Optional[PostUserDto] = Body(None),
    service: UserService = Depends(get_user_service),
):
    """사용자 생성"""
    user_id = await service.create_user(user)
    return _created_at_user(request, user_id)


@router.put(
    "/{user_id}",
    name="update_user",
    responses={
        201: {"description": "새 사용자 생성"},
        204: {"description": "기존 사용자 덮어쓰기"},
        400: ERROR_RESPONSES[400],
        422: ERROR_RESPONSES[422],
    },
)
async def update_user(
    user_id: str,
    request: Request,
    user: Optional[PutUserDto] = Body(None),
    service: UserService = Depends(get_user_service),
):
    """사용자 전체 수정 (Upsert)"""
    parsed_id = parse_user_id(user_id)
    is_inserted = await service.upsert_user(user, parsed_id)
    if is_inserted:
        return _created_at_user(request, parsed_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch(
    "/{user_id}",
    name="partially_update_user",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        400: ERROR_RESPONSES[400],
        404: ERROR_RESPONSES[404],
        422: ERROR_RESPONSES[422],
    },
)
async def partially_update_user(
    user_id: str,
    patch_document: Any = Body(None),
    service: UserService = Depends(get_user_service),
):
    """사용자 부분 수정 (JSON Patch)"""
    await service.patch_user(patch_document, parse_user_id(user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{user_id}",
    name="delete_user",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: ERROR_RESPONSES[404]},
)
async def delete_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
):
    """사용자 삭제"""
    await service.delete_user(parse_user_id(user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("", name="get_users", response_model=list[UserDto])
async def get_users(
    request: Request,
    page_params: PageParams = Depends(),
    service: UserService = Depends(get_user_service),
):
    """사용자 목록 조회 (X-Pagination 헤더 포함)"""
    page = await service.get_users(page_params.page_number, page_params.page_size)
    meta = build_pagination_meta(request, page)
    return negotiate(
        request,
        service.mapper.to_dtos(page),
        root_tag="users",
        headers={"X-Pagination": meta.to_header()},
    )


@router.options("", name="user_options")
async def user_options():
    """지원하는 메서드 안내"""
    return Response(
        status_code=status.HTTP_200_OK, headers={"Allow": ALLOWED_METHODS}
    )
