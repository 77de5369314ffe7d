"""테스트 설정"""

import os
from typing import AsyncGenerator

# 앱 임포트 전에 테스트용 환경 변수 설정 (PostgreSQL 없이 SQLite 메모리 DB 사용)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
os.environ.setdefault("DATABASE_URL", TEST_DATABASE_URL)
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("AUTO_MIGRATE", "false")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.core.database import Base, get_db  # noqa: E402
from app.main import app  # noqa: E402

USERS_URL = "/api/v1/users"


@pytest_asyncio.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트마다 새 메모리 DB 엔진 (단일 커넥션 공유)"""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_maker(
    db_engine: AsyncEngine,
) -> async_sessionmaker[AsyncSession]:
    """테스트 세션 팩토리"""
    return async_sessionmaker(
        bind=db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest_asyncio.fixture
async def db_session(session_maker) -> AsyncGenerator[AsyncSession, None]:
    """리포지토리 테스트용 세션"""
    async with session_maker() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client(session_maker) -> AsyncGenerator[AsyncClient, None]:
    """비동기 테스트 클라이언트 (요청마다 커밋/롤백하는 테스트 DB 세션 사용)"""

    async def override_get_db():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport, base_url="http://test"
    ) as client:
        yield client

    # 정리
    app.dependency_overrides.clear()


@pytest.fixture
def create_user(client):
    """사용자 생성 헬퍼 (생성된 ID 반환)"""

    async def _create(login: str, first_name: str = "John", last_name: str = "Doe"):
        response = await client.post(
            USERS_URL,
            json={"login": login, "firstName": first_name, "lastName": last_name},
        )
        assert response.status_code == 201
        return response.json()

    return _create
