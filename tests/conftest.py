import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from readpulse.database import Base, get_session
from readpulse.app import create_app
import readpulse.models  # noqa: F401

TEST_DB_URL = "sqlite+aiosqlite://"  # in-memory

engine = create_async_engine(TEST_DB_URL, echo=False)
TestSession = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture(autouse=True)
async def setup_db():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def session():
    async with TestSession() as s:
        yield s


@pytest.fixture
async def client():
    app = create_app()

    async def override_session():
        async with TestSession() as s:
            yield s

    app.dependency_overrides[get_session] = override_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


async def create_user(client, username="reader", timezone="UTC") -> dict:
    body = {"username": username}
    if timezone is not None:
        body["timezone"] = timezone
    resp = await client.post("/api/users", json=body)
    assert resp.status_code == 201, resp.text
    user = resp.json()
    user["headers"] = {"X-User-Id": str(user["id"])}
    return user


@pytest.fixture
async def user(client):
    return await create_user(client)


@pytest.fixture
async def other_user(client):
    return await create_user(client, username="someone-else")
