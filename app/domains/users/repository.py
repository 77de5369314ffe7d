"""Users 도메인 리포지토리

사용자 엔티티 저장/조회를 위한 데이터 접근 계층입니다.
트랜잭션 경계(커밋/롤백)는 요청 단위 세션(get_db)이 담당합니다.
"""

import uuid
from typing import Optional, Sequence, cast

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.utils.pagination import Page
from app.domains.users.models import User


class UserRepository:
    """사용자 리포지토리"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_id(self, user_id: uuid.UUID) -> Optional[User]:
        """ID로 사용자 조회

        Args:
            user_id: 사용자 ID

        Returns:
            사용자 객체 또는 None
        """
        return await self.session.get(User, user_id)

    async def insert(self, user: User) -> User:
        """사용자 생성

        Args:
            user: 생성할 사용자 객체 (ID가 없으면 새로 할당)

        Returns:
            ID가 할당된 사용자 객체
        """
        if user.id is None:
            user.id = uuid.uuid4()
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def update_or_insert(self, user: User) -> bool:
        """사용자 전체 덮어쓰기 또는 생성 (Upsert)

        Args:
            user: 저장할 사용자 객체 (ID 필수)

        Returns:
            새로 생성되었으면 True, 기존 레코드를 덮어썼으면 False
        """
        existing = await self.find_by_id(user.id)

        if existing is None:
            await self.insert(user)
            return True

        existing.login = user.login
        existing.first_name = user.first_name
        existing.last_name = user.last_name
        existing.games_played = user.games_played or 0
        existing.current_game_id = user.current_game_id
        await self.session.flush()
        return False

    async def update(self, user: User) -> User:
        """변경된 사용자 반영"""
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def delete(self, user_id: uuid.UUID) -> None:
        """사용자 삭제

        Args:
            user_id: 삭제할 사용자 ID
        """
        await self.session.execute(delete(User).where(User.id == user_id))
        await self.session.flush()

    async def count(self) -> int:
        """전체 사용자 수 조회"""
        result = await self.session.execute(select(func.count(User.id)))
        return int(result.scalar_one())

    async def get_page(self, page_number: int, page_size: int) -> Page[User]:
        """사용자 페이지 조회

        login, id 순으로 정렬하여 페이지 간 순서가 안정적입니다.
        마지막 페이지를 넘는 번호는 조회 없이 빈 페이지를 반환합니다.

        Args:
            page_number: 페이지 번호 (1부터)
            page_size: 페이지 크기

        Returns:
            Page[User]
        """
        total = await self.count()
        page = Page(
            items=[],
            total_count=total,
            current_page=page_number,
            page_size=page_size,
        )
        if page_number > max(page.total_pages, 1):
            return page

        query = (
            select(User)
            .order_by(User.login.asc(), User.id.asc())
            .offset((page_number - 1) * page_size)
            .limit(page_size)
        )
        result = await self.session.execute(query)
        page.items = list(cast(Sequence[User], result.scalars().all()))
        return page
