"""Pytest configuration and fixtures."""

import secrets
from datetime import date, datetime, timezone
from decimal import Decimal

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from api.app import create_app
from database.base import enable_sqlite_foreign_keys, init_db
from database.models import CarModel, Customer, Rental, RentalStatus, User, UserRole


TODAY = date(2026, 6, 1)


@pytest.fixture
def today() -> date:
    """Fixed current date for reproducible discounts."""
    return TODAY


@pytest.fixture
async def engine():
    """In-memory SQLite engine with all tables created."""
    engine = enable_sqlite_foreign_keys(create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    ))
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def create_user(session):
    """Factory for users with API tokens."""

    async def _create(role: UserRole = UserRole.CLIENT, username: str = None) -> User:
        user = User(
            username=username or f"user-{secrets.token_hex(4)}",
            api_token=secrets.token_hex(32),
            role=role,
        )
        session.add(user)
        await session.commit()
        return user

    return _create


@pytest.fixture
def create_customer(session):
    """Factory for customer profiles."""

    async def _create(user: User, **overrides) -> Customer:
        data = {
            "last_name": "Ivanov",
            "first_name": "Ivan",
            "patronymic": "Ivanovich",
            "address": "Moscow, Tverskaya 1",
            "phone": "+79990000000",
        }
        data.update(overrides)
        customer = Customer(user_id=user.id, **data)
        session.add(customer)
        await session.commit()
        return customer

    return _create


@pytest.fixture
def create_car_model(session):
    """Factory for car models. Defaults to a one-year-old Economy car."""

    async def _create(**overrides) -> CarModel:
        data = {
            "brand": "Kia Rio",
            "category": "Economy",
            "year": TODAY.year - 1,
            "engine_type": "Petrol",
            "price": Decimal("1000000.00"),
            "rental_price": Decimal("100.00"),
        }
        data.update(overrides)
        car_model = CarModel(**data)
        session.add(car_model)
        await session.commit()
        return car_model

    return _create


@pytest.fixture
def create_rental(session):
    """Factory for persisted rentals."""

    async def _create(customer: Customer, car_model: CarModel, **overrides) -> Rental:
        data = {
            "issue_date": datetime(2024, 1, 1, tzinfo=timezone.utc),
            "return_date": datetime(2024, 1, 4, tzinfo=timezone.utc),
            "calculated_cost": Decimal("120.00"),
            "final_cost": Decimal("220.00"),
            "deposit": Decimal("100.00"),
            "discount": 0,
            "penalty": Decimal("0"),
            "status": RentalStatus.ACTIVE,
        }
        data.update(overrides)
        rental = Rental(customer_id=customer.id, car_model_id=car_model.id, **data)
        session.add(rental)
        await session.commit()
        return rental

    return _create


@pytest.fixture
async def client_user(create_user):
    return await create_user()


@pytest.fixture
async def admin_user(create_user):
    return await create_user(role=UserRole.ADMIN, username="admin")


@pytest.fixture
async def client_customer(create_customer, client_user):
    return await create_customer(client_user)


@pytest.fixture
async def client(aiohttp_client, session_factory):
    """HTTP test client bound to the in-memory database."""
    app = create_app(session_factory=session_factory, today=lambda: TODAY)
    return await aiohttp_client(app)


def auth_headers(user: User) -> dict:
    return {"x-auth-token": user.api_token}


@pytest.fixture
def headers():
    return auth_headers
