import os
import uuid

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from tortoise import Tortoise

from storerating.core import db as db_module
from storerating.core.security import Role, hash_password
from storerating.main import app
from storerating.models.store import Store
from storerating.models.user import User


TEST_DB_URL = "sqlite://:memory:"
os.environ["DATABASE_URL"] = TEST_DB_URL
db_module.DB_URL = TEST_DB_URL
db_module.TORTOISE_ORM["connections"]["default"] = TEST_DB_URL

DEFAULT_PASSWORD = "Passw0rd!"


async def _init_test_db() -> None:
    """
    Initialize a clean in-memory SQLite database for every test.
    Ensures tables are recreated from scratch.
    """
    if Tortoise._inited:
        await Tortoise.close_connections()
    await Tortoise.init(config=db_module.TORTOISE_ORM)
    await Tortoise.generate_schemas()


def _long_name(prefix: str) -> str:
    """Names must be 20-60 characters."""
    return f"{prefix} {uuid.uuid4().hex[:8]} Account Holder"


@pytest_asyncio.fixture
async def db():
    """Fresh database for service-level tests that do not need HTTP."""
    await _init_test_db()
    yield
    await Tortoise.close_connections()


@pytest_asyncio.fixture
async def client(db):
    """
    Provide an HTTPX AsyncClient bound to the FastAPI app with a fresh DB.
    The app lifespan is not run; the db fixture owns the connection.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client


@pytest_asyncio.fixture
async def create_account(db):
    """
    Factory fixture creating accounts of any role directly via ORM.
    Returns (user, plain_password).
    """

    async def _create_account(role: Role = Role.USER, password: str = DEFAULT_PASSWORD, name: str | None = None):
        user = await User.create(
            name=name or _long_name(role.value.replace("_", " ").title()),
            email=f"{role.value}_{uuid.uuid4().hex[:8]}@example.com",
            password_hash=hash_password(password),
            address="42 Market Street, Springfield",
            role=role,
        )
        return user, password

    return _create_account


@pytest_asyncio.fixture
async def create_admin(create_account):
    async def _create_admin(password: str = DEFAULT_PASSWORD):
        return await create_account(Role.ADMIN, password)

    return _create_admin


@pytest_asyncio.fixture
async def create_user(create_account):
    async def _create_user(password: str = DEFAULT_PASSWORD, name: str | None = None):
        return await create_account(Role.USER, password, name=name)

    return _create_user


@pytest_asyncio.fixture
async def create_owner(create_account):
    async def _create_owner(password: str = DEFAULT_PASSWORD):
        return await create_account(Role.STORE_OWNER, password)

    return _create_owner


@pytest_asyncio.fixture
async def create_store(create_owner):
    """
    Factory fixture creating a store (and its owner unless one is given).
    Returns (store, owner).
    """

    async def _create_store(name: str | None = None, owner: User | None = None, address: str = "7 High Road, Riverside"):
        if owner is None:
            owner, _ = await create_owner()
        store = await Store.create(
            name=name or _long_name("Corner Grocery"),
            email=f"store_{uuid.uuid4().hex[:8]}@example.com",
            address=address,
            owner=owner,
        )
        return store, owner

    return _create_store


@pytest_asyncio.fixture
async def auth_header_factory(client):
    """
    Helper fixture to obtain Authorization headers via the login endpoint.
    """

    async def _get_headers(email: str, password: str = DEFAULT_PASSWORD) -> dict[str, str]:
        resp = await client.post(
            "/api/auth/login",
            json={"email": email, "password": password},
        )
        assert resp.status_code == 200, resp.text
        token = resp.json()["data"]["accessToken"]
        # Drop the session cookie so each request authenticates only through its header
        client.cookies.clear()
        return {"Authorization": f"Bearer {token}"}

    return _get_headers
