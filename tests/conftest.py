"""테스트 인프라 — 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — In-memory SQLite database, session, and httpx client
fixtures. Each test gets a fresh schema created from the ORM metadata.

SQLite 드라이버는 SAVEPOINT와 외래키를 기본으로 처리하지 않으므로
연결 시 autocommit 모드 + PRAGMA foreign_keys=ON을 설정하고
BEGIN을 직접 발행합니다 (SQLAlchemy documented pysqlite recipe).
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models import *  # noqa: F401,F403 - register all models with metadata
from app.models.community import Artist, Community, CommunityUser, Manager
from app.models.user import User, UserRole
from app.utils.jwt import build_token_payload, create_access_token
from app.utils.password import hash_password

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

API = "/api/v1"
PASSWORD = "Passw0rd!"


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 테스트마다 스키마를 새로 생성합니다."""
    eng = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(eng.sync_engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        # 드라이버의 암묵적 BEGIN 비활성화 + 외래키 강제
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(eng.sync_engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
async def make_user(
    db: AsyncSession,
    email: str,
    name: str = "Tester",
    role: UserRole = UserRole.USER,
) -> User:
    user = User(
        name=name,
        email=email,
        password_hash=hash_password(PASSWORD),
        role=role.value,
    )
    db.add(user)
    await db.flush()
    await db.refresh(user)
    return user


async def make_community(db: AsyncSession, name: str = "Test Community", price: int = 10000) -> Community:
    community = Community(name=name, membership_price=price)
    db.add(community)
    await db.flush()
    await db.refresh(community)
    return community


async def join(db: AsyncSession, user: User, community: Community, nickname: str | None = None) -> CommunityUser:
    """사용자를 커뮤니티에 가입시킵니다."""
    community_user = CommunityUser(
        user_id=user.id,
        community_id=community.id,
        nickname=nickname or f"{user.name}-{community.id}",
    )
    db.add(community_user)
    await db.flush()
    await db.refresh(community_user)
    return community_user


async def make_artist(db: AsyncSession, community_user: CommunityUser) -> Artist:
    artist = Artist(community_user_id=community_user.id, community_id=community_user.community_id)
    db.add(artist)
    await db.flush()
    await db.refresh(artist)
    return artist


async def make_manager(db: AsyncSession, community_user: CommunityUser) -> Manager:
    manager = Manager(community_user_id=community_user.id, community_id=community_user.community_id)
    db.add(manager)
    await db.flush()
    await db.refresh(manager)
    return manager


def make_token(user: User) -> str:
    """테스트용 JWT 액세스 토큰을 생성합니다."""
    return create_access_token(build_token_payload(user.id, user.role))


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


# ---------------------------------------------------------------------------
# 픽스처: 사용자, 커뮤니티, 가입 정보
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def fan_user(db: AsyncSession) -> User:
    return await make_user(db, "fan@test.com", "Fan")


@pytest_asyncio.fixture
async def other_user(db: AsyncSession) -> User:
    return await make_user(db, "other@test.com", "Other")


@pytest_asyncio.fixture
async def admin_user(db: AsyncSession) -> User:
    return await make_user(db, "admin@test.com", "Admin", UserRole.ADMIN)


@pytest_asyncio.fixture
async def community(db: AsyncSession) -> Community:
    return await make_community(db)


@pytest_asyncio.fixture
async def fan_member(db: AsyncSession, fan_user: User, community: Community) -> CommunityUser:
    """fan_user의 커뮤니티 가입 정보."""
    return await join(db, fan_user, community, "fan")


@pytest.fixture
def fan_token(fan_user: User) -> str:
    return make_token(fan_user)


@pytest.fixture
def other_token(other_user: User) -> str:
    return make_token(other_user)


@pytest.fixture
def admin_token(admin_user: User) -> str:
    return make_token(admin_user)
