"""Pytest fixtures shared by every test layer."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from food_orders.adapters.db.memory.store import InMemoryStore
from food_orders.adapters.db.memory.uow import InMemoryUnitOfWork
from food_orders.adapters.db.sqlalchemy import models
from food_orders.adapters.db.sqlalchemy.database import build_session_factory, create_tables
from food_orders.adapters.db.sqlalchemy.uow import SQLAlchemyUnitOfWork
from food_orders.application.dto import RegisterOrderInput
from food_orders.domain.catalog import Category, Product, Restaurant
from food_orders.domain.order import OrderLine

CONSUMER_WITH_ADDRESS = 1
OTHER_CONSUMER = 2
CONSUMER_WITHOUT_ADDRESS = 3

CATEGORY = Category(id=1, name="Pizza", image="pizza.png")
RESTAURANT = Restaurant(
    id=1, name="Bella Napoli", image="bella.png", delivery_fee=500, category_id=1
)
PRODUCTS = [
    Product(id=1, restaurant_id=1, name="Margherita", price=1000, image="margherita.png"),
    Product(id=2, restaurant_id=1, name="Calabresa", price=1500, image="calabresa.png"),
    Product(id=3, restaurant_id=1, name="Seasonal Special", price=800, active=False),
]


@pytest.fixture
def memory_store():
    """In-memory store seeded with one restaurant, its products and two addresses."""
    store = InMemoryStore()
    store.add_category(CATEGORY)
    store.add_restaurant(RESTAURANT)
    for product in PRODUCTS:
        store.add_product(product)
    store.add_address(CONSUMER_WITH_ADDRESS)
    store.add_address(OTHER_CONSUMER)
    return store


@pytest.fixture
def memory_uow(memory_store):
    return InMemoryUnitOfWork(memory_store)


@pytest.fixture
def sqlite_engine():
    """SQLite in-memory database with the same seed data as ``memory_store``."""
    engine = create_engine(
        "sqlite+pysqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(engine)

    with Session(engine) as session:
        session.add(models.Category(**CATEGORY.model_dump()))
        session.add(models.Restaurant(**RESTAURANT.model_dump()))
        session.add_all([models.Product(**p.model_dump()) for p in PRODUCTS])
        for consumer_id in (CONSUMER_WITH_ADDRESS, OTHER_CONSUMER, CONSUMER_WITHOUT_ADDRESS):
            session.add(
                models.Consumer(id=consumer_id, name=f"Consumer {consumer_id}", email=f"c{consumer_id}@example.com")
            )
        session.add_all([
            models.ConsumerAddress(consumer_id=CONSUMER_WITH_ADDRESS, zip_code="01001-000", address="Rua A, 10"),
            models.ConsumerAddress(consumer_id=OTHER_CONSUMER, zip_code="01002-000", address="Rua B, 20"),
        ])
        session.commit()

    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(sqlite_engine):
    return build_session_factory(sqlite_engine)


@pytest.fixture
def sql_uow(session_factory):
    return SQLAlchemyUnitOfWork(session_factory)


@pytest.fixture
def order_input():
    """Factory for a consistent order submission for restaurant 1."""

    def make(consumer_id=CONSUMER_WITH_ADDRESS, lines=((1, 2),), **overrides):
        products = [
            OrderLine(
                product_id=product_id,
                quantity=quantity,
                price=PRODUCTS[product_id - 1].price,
                subtotal=quantity * PRODUCTS[product_id - 1].price,
            )
            for product_id, quantity in lines
        ]
        subtotal = sum(p.subtotal for p in products)
        fields = dict(
            consumer_id=consumer_id,
            restaurant_id=RESTAURANT.id,
            subtotal=subtotal,
            delivery_fee=RESTAURANT.delivery_fee,
            total=subtotal + RESTAURANT.delivery_fee,
            products=products,
        )
        fields.update(overrides)
        return RegisterOrderInput(**fields)

    return make
