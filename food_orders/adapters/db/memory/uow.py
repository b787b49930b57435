from food_orders.adapters.db.memory.repositories import (
    InMemoryConsumerAddressRepository,
    InMemoryOrderRepository,
    InMemoryProductRepository,
    InMemoryRestaurantRepository,
)
from food_orders.adapters.db.memory.store import InMemoryStore, Tables
from food_orders.application.ports import (
    ConsumerAddressRepository,
    OrderRepository,
    ProductRepository,
    RestaurantRepository,
    UnitOfWork,
)


class InMemoryUnitOfWork(UnitOfWork):
    def __init__(self, store: InMemoryStore):
        self.store = store
        self._base: Tables | None = None
        self._tables: Tables | None = None
        self.committed = False

    def __enter__(self) -> "InMemoryUnitOfWork":
        self._begin()
        self.committed = False
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        # uncommitted changes live only in the working copy and are dropped here
        self._base = None
        self._tables = None

    def _begin(self) -> None:
        self._base = self.store.snapshot()
        self._tables = self.store.snapshot()

    def _working_tables(self) -> Tables:
        assert self._tables is not None, "UnitOfWork is not entered."
        return self._tables

    @property
    def restaurants(self) -> RestaurantRepository:
        return InMemoryRestaurantRepository(self._working_tables())

    @property
    def products(self) -> ProductRepository:
        return InMemoryProductRepository(self._working_tables())

    @property
    def addresses(self) -> ConsumerAddressRepository:
        return InMemoryConsumerAddressRepository(self._working_tables())

    @property
    def orders(self) -> OrderRepository:
        return InMemoryOrderRepository(self._working_tables(), self.store)

    def commit(self) -> None:
        assert self._base is not None, "UnitOfWork is not entered."
        self.store.merge(self._base, self._working_tables())
        self._begin()
        self.committed = True

    def rollback(self) -> None:
        self._begin()
