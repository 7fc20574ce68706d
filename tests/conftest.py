"""Pytest configuration and fixtures for bizdirectory.

Uses bizdirectory.main:app for HTTP tests. Repository and API tests run
against an in-memory SQLite database (aiosqlite) built from the ORM
metadata; the app's get_db dependency is overridden to use it.

SQLite lower() only folds ASCII, so accented values in tests keep the same
case on both sides of a comparison.
"""

from collections.abc import AsyncIterator, Iterable
from decimal import Decimal

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from bizdirectory.core.config import get_settings
from bizdirectory.core.limiter import limiter
from bizdirectory.infrastructure.persistence import database
from bizdirectory.infrastructure.persistence.database import Base, get_db
from bizdirectory.infrastructure.persistence.models import (
    Business,
    Dish,
    MenuCategory,
    Post,
    PostalCodeCatalog,
    User,
    UserAddress,
)
from bizdirectory.main import app

TEST_DATABASE_URL = "sqlite+aiosqlite://"

# Catalog entries used across tests: postal code, colonia, alcaldía
CATALOG = [
    ("04000", "Del Carmen", "Coyoacán"),
    ("04100", "Santa Catarina", "Coyoacán"),
    ("09000", "San Lucas", "Iztapalapa"),
    ("06700", "Roma Norte", "Cuauhtémoc"),
]


class DirectorySeeder:
    """Builds directory rows (users, businesses, addresses, dishes, reviews) for tests."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self._categories: dict[str, MenuCategory] = {}
        self._next_dish_price = Decimal("50.00")
        self._next_reviewer_id = 10_000

    async def catalog(self, entries: Iterable[tuple[str, str, str]] = CATALOG) -> None:
        for postal_code, colonia, alcaldia in entries:
            self.session.add(
                PostalCodeCatalog(
                    postal_code=postal_code, colonia=colonia, alcaldia=alcaldia
                )
            )
        await self.session.flush()

    async def category(self, name: str) -> MenuCategory:
        if name not in self._categories:
            existing = (
                await self.session.execute(
                    select(MenuCategory).where(MenuCategory.name == name)
                )
            ).scalar_one_or_none()
            if existing is None:
                existing = MenuCategory(name=name)
                self.session.add(existing)
                await self.session.flush()
            self._categories[name] = existing
        return self._categories[name]

    async def address(self, user_id: int, postal_code: str, colonia: str) -> None:
        self.session.add(
            UserAddress(
                user_id=user_id,
                postal_code=postal_code,
                colonia=colonia,
                street="Calle 1",
                number="10",
            )
        )
        await self.session.flush()

    async def user(self, user_id: int, name: str | None = None) -> User:
        user = User(id=user_id, user_type="customer", name=name)
        self.session.add(user)
        await self.session.flush()
        return user

    async def business(
        self,
        business_id: int,
        name: str | None,
        *,
        address: tuple[str, str] | None = None,
        categories: Iterable[str] = (),
        ratings: Iterable[int] = (),
        is_active: bool = True,
        avatar_url: str | None = None,
    ) -> Business:
        """Owner user + business, plus optional address, one dish per category, reviews."""
        self.session.add(
            User(id=business_id, user_type="business", name=name, avatar_url=avatar_url)
        )
        business = Business(id=business_id, is_active=is_active)
        self.session.add(business)
        await self.session.flush()
        if address is not None:
            await self.address(business_id, *address)
        for label in categories:
            category = await self.category(label)
            self.session.add(
                Dish(
                    business_id=business_id,
                    category_id=category.id,
                    name=f"{label} special",
                    description="",
                    price=self._next_dish_price,
                )
            )
        for rating in ratings:
            reviewer_id = self._next_reviewer_id
            self._next_reviewer_id += 1
            self.session.add(User(id=reviewer_id, user_type="customer", name=None))
            self.session.add(
                Post(
                    author_user_id=reviewer_id,
                    reviewed_business_id=business_id,
                    rating=rating,
                    description="",
                )
            )
        await self.session.flush()
        return business

    async def commit(self) -> None:
        await self.session.commit()


@pytest.fixture
async def engine() -> AsyncIterator[AsyncEngine]:
    """Fresh in-memory schema per test (one shared connection via StaticPool)."""
    test_engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """Database session for repository/integration tests."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def seeder(db_session: AsyncSession) -> DirectorySeeder:
    return DirectorySeeder(db_session)


@pytest.fixture
async def scenario(seeder: DirectorySeeder) -> DirectorySeeder:
    """Three-business reference data set.

    1 Taquería Don Pepe (Coyoacán, Tacos), 2 Café Luna (Coyoacán, Bebidas +
    Postres), 3 Tacos El Rey (Iztapalapa, Tacos).
    """
    await seeder.catalog()
    await seeder.business(
        1, "Taquería Don Pepe", address=("04000", "Del Carmen"), categories=["Tacos"]
    )
    await seeder.business(
        2,
        "Café Luna",
        address=("04100", "Santa Catarina"),
        categories=["Bebidas", "Postres"],
    )
    await seeder.business(
        3, "Tacos El Rey", address=("09000", "San Lucas"), categories=["Tacos"]
    )
    await seeder.commit()
    return seeder


@pytest.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI) backed by the test database."""

    async def _override_get_db() -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _override_get_db
    limiter.reset()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.pop(get_db, None)


@pytest.fixture
async def unconfigured_client(monkeypatch: pytest.MonkeyPatch) -> AsyncIterator[AsyncClient]:
    """Client whose get_db sees no DATABASE_URL (no override, no engine)."""
    monkeypatch.setenv("DATABASE_URL", "")
    monkeypatch.setattr(database, "engine", None)
    monkeypatch.setattr(database, "AsyncSessionLocal", None)
    get_settings.cache_clear()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    get_settings.cache_clear()
