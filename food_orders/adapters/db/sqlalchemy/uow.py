from sqlalchemy.orm import Session, sessionmaker

from food_orders.adapters.db.sqlalchemy.address_repository import SQLAlchemyConsumerAddressRepository
from food_orders.adapters.db.sqlalchemy.catalog_repository import (
    SQLAlchemyProductRepository,
    SQLAlchemyRestaurantRepository,
)
from food_orders.adapters.db.sqlalchemy.order_repository import SQLAlchemyOrderRepository
from food_orders.application.ports import (
    ConsumerAddressRepository,
    OrderRepository,
    ProductRepository,
    RestaurantRepository,
    UnitOfWork,
)

# Wraps one use case's reads and writes in a single database transaction
class SQLAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory
        self.session: Session | None = None
        self._restaurants: RestaurantRepository | None = None
        self._products: ProductRepository | None = None
        self._addresses: ConsumerAddressRepository | None = None
        self._orders: OrderRepository | None = None

    def __enter__(self) -> "SQLAlchemyUnitOfWork":
        self.session = self._session_factory()
        assert self.session is not None, "UnitOfWork is not entered."
        self.session.begin()
        self._restaurants = SQLAlchemyRestaurantRepository(self.session)
        self._products = SQLAlchemyProductRepository(self.session)
        self._addresses = SQLAlchemyConsumerAddressRepository(self.session)
        self._orders = SQLAlchemyOrderRepository(self.session)
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        try:
            if exc_type:
                self.rollback()
        finally:
            if self.session:
                # closing also discards a transaction that was never committed
                self.session.close()
            self.session = None

    @property
    def restaurants(self) -> RestaurantRepository:
        assert self._restaurants is not None, "UnitOfWork is not entered."
        return self._restaurants

    @property
    def products(self) -> ProductRepository:
        assert self._products is not None, "UnitOfWork is not entered."
        return self._products

    @property
    def addresses(self) -> ConsumerAddressRepository:
        assert self._addresses is not None, "UnitOfWork is not entered."
        return self._addresses

    @property
    def orders(self) -> OrderRepository:
        assert self._orders is not None, "UnitOfWork is not entered."
        return self._orders

    def commit(self) -> None:
        assert self.session is not None, "UnitOfWork is not entered."
        self.session.commit()

    def rollback(self) -> None:
        assert self.session is not None, "UnitOfWork is not entered."
        self.session.rollback()
