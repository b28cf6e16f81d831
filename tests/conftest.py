"""
Shared pytest fixtures for all tests.

The application reads its settings once at import time, so the test
environment is set up before any `storefront` import.
"""

import os
import tempfile
from collections.abc import AsyncGenerator
from decimal import Decimal

# Ensure test environment
_TEST_DB_PATH = os.path.join(tempfile.gettempdir(), f"storefront_test_{os.getpid()}.db")
os.environ["DATABASE_URL"] = os.getenv("TEST_DATABASE_URL", f"sqlite+aiosqlite:///{_TEST_DB_PATH}")
os.environ["JWT_SECRET_KEY"] = "test-secret-key-not-for-production"
os.environ["ENVIRONMENT"] = "test"
os.environ["DEBUG"] = "true"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["SENTRY_DSN"] = ""

import httpx  # noqa: E402
import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker  # noqa: E402

from storefront.database.async_db import AsyncSessionLocal, async_engine  # noqa: E402
from storefront.domains.commerce.domain.value_objects import Role  # noqa: E402
from storefront.models.db import Base, Product, Store, UserDB, UserStore  # noqa: E402
from storefront.services.token_service import TokenService  # noqa: E402

# ============================================================================
# DATABASE FIXTURES
# ============================================================================


@pytest_asyncio.fixture
async def database():
    """Fresh schema for every test."""
    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield async_engine
    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await async_engine.dispose()


@pytest.fixture
def session_factory(database) -> async_sessionmaker:
    return AsyncSessionLocal


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


# ============================================================================
# DATA FIXTURES
# ============================================================================


@pytest.fixture
def token_service() -> TokenService:
    return TokenService()


@pytest.fixture
def make_user(session_factory, token_service):
    async def _make_user(name: str = "Store Owner", email: str = "owner@example.com", password: str = "secret123"):
        user = UserDB(name=name, email=email, password_hash=token_service.get_password_hash(password))
        async with session_factory() as session:
            session.add(user)
            await session.commit()
        return user

    return _make_user


@pytest.fixture
def make_store(session_factory):
    async def _make_store(owner: UserDB, name: str = "Corner Shop") -> Store:
        store = Store(name=name, user_id=owner.id)
        async with session_factory() as session:
            session.add(store)
            await session.flush()
            session.add(UserStore(user_id=owner.id, store_id=store.id, role=Role.OWNER.value))
            await session.commit()
        return store

    return _make_store


@pytest.fixture
def add_member(session_factory):
    async def _add_member(store: Store, user: UserDB, role: Role) -> UserStore:
        membership = UserStore(user_id=user.id, store_id=store.id, role=role.value)
        async with session_factory() as session:
            session.add(membership)
            await session.commit()
        return membership

    return _add_member


@pytest.fixture
def make_product(session_factory):
    async def _make_product(
        store: Store,
        sku: str = "SKU-1",
        name: str = "Coffee Beans",
        price: str = "9.99",
        stock: int = 10,
    ) -> Product:
        product = Product(store_id=store.id, sku=sku, name=name, price=Decimal(price), stock=stock)
        async with session_factory() as session:
            session.add(product)
            await session.commit()
        return product

    return _make_product


# ============================================================================
# HTTP FIXTURES
# ============================================================================


@pytest.fixture
def app(database):
    from storefront.core.app_factory import create_app

    return create_app()


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[httpx.AsyncClient, None]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def auth_headers(token_service):
    def _auth_headers(user: UserDB) -> dict[str, str]:
        token = token_service.create_access_token({"sub": str(user.id)})
        return {"Authorization": f"Bearer {token}"}

    return _auth_headers
