import bcrypt
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from config import ApplicationConfig
from src.adapter.database import Database
from src.api.app import create_app
from src.api.utils.jwt import generate_jwt
from src.app.use_cases.seed import SeedDatabaseUseCase, SeedDocument
from src.domain.entities import User, UserRole
from tests.fixtures.json_loader import TestDataLoader

TEST_PASSWORD = "password123"


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def database():
    database = Database("sqlite+aiosqlite:///./test.db")
    await database.drop_all()
    await database.create_all()
    yield database
    await database.drop_all()
    await database.dispose()


@pytest_asyncio.fixture
async def db_session(database):
    async with database.session() as session:
        yield session


@pytest_asyncio.fixture
async def app(database):
    return create_app(ApplicationConfig, database=database)


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    await app.state.audit_dispatcher.drain()


@pytest_asyncio.fixture
async def users(db_session):
    """One active user per role, all sharing TEST_PASSWORD"""
    password_hash = bcrypt.hashpw(TEST_PASSWORD.encode(), bcrypt.gensalt(4)).decode()
    created = {}
    for role in UserRole:
        user = User(
            email=f"{role.value.lower()}@example.com",
            password_hash=password_hash,
            name=f"{role.value.title()} User",
            role=role,
        )
        db_session.add(user)
        created[role] = user
    await db_session.commit()
    return created


def _headers(user: User) -> dict:
    return {"Authorization": f"Bearer {generate_jwt(user.id, user.role.value)}"}


@pytest_asyncio.fixture
async def admin_headers(users):
    return _headers(users[UserRole.ADMIN])


@pytest_asyncio.fixture
async def editor_headers(users):
    return _headers(users[UserRole.EDITOR])


@pytest_asyncio.fixture
async def viewer_headers(users):
    return _headers(users[UserRole.VIEWER])


@pytest_asyncio.fixture
async def atlas(database, test_data):
    """Regions, sources, people and events loaded through the seed use case"""
    document = SeedDocument.model_validate(test_data.get_copy("atlas"))
    async with database.unit_of_work() as uow:
        result = await SeedDatabaseUseCase(uow, bcrypt_rounds=4).execute(document)
    assert result.is_ok()
    return result.value


@pytest_asyncio.fixture
async def event_ids(client, atlas):
    """Seeded event ids keyed by title"""
    response = await client.get("/events", params={"limit": 100})
    return {event["title"]: event["id"] for event in response.json()["data"]}


@pytest_asyncio.fixture
async def region_ids(client, atlas):
    """Seeded region ids keyed by code"""
    response = await client.get("/regions")
    return {region["code"]: region["id"] for region in response.json()}
