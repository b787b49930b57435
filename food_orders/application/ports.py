from abc import ABC, abstractmethod

from food_orders.domain.catalog import Product, Restaurant
from food_orders.domain.order import Order, OrderItemView, OrderLine, OrderSummary


class RestaurantRepository(ABC):
    @abstractmethod
    def get(self, restaurant_id: int) -> Restaurant | None: ...


class ProductRepository(ABC):
    @abstractmethod
    def get_many(self, product_ids: list[int], for_update: bool = False) -> dict[int, Product]:
        """Fetch every product in ``product_ids`` in one call, keyed by id.

        Missing ids are simply absent from the result. ``for_update`` asks the
        store to lock the rows until the surrounding transaction ends.
        """


class ConsumerAddressRepository(ABC):
    @abstractmethod
    def exists_for(self, consumer_id: int) -> bool: ...


class OrderRepository(ABC):
    @abstractmethod
    def add(self, order: Order) -> Order | None:
        """Insert the order header and return the created row, or None."""

    @abstractmethod
    def add_items(self, order_id: int, items: list[OrderLine]) -> list[OrderLine]:
        """Insert the line items of an order and return the created rows."""

    @abstractmethod
    def get_for_consumer(self, order_id: int, consumer_id: int) -> Order | None: ...

    @abstractmethod
    def set_delivered(self, order_id: int, consumer_id: int, delivered: bool) -> int:
        """Update the delivered flag and return the affected row count."""

    @abstractmethod
    def list_summaries(self, consumer_id: int, delivered: bool) -> list[OrderSummary]: ...

    @abstractmethod
    def items_by_order(self, order_ids: list[int]) -> dict[int, list[OrderItemView]]: ...


class UnitOfWork(ABC):
    @abstractmethod
    def __enter__(self) -> "UnitOfWork": ...

    @abstractmethod
    def __exit__(self, exc_type, exc_value, traceback) -> None: ...

    @property
    @abstractmethod
    def restaurants(self) -> RestaurantRepository: ...

    @property
    @abstractmethod
    def products(self) -> ProductRepository: ...

    @property
    @abstractmethod
    def addresses(self) -> ConsumerAddressRepository: ...

    @property
    @abstractmethod
    def orders(self) -> OrderRepository: ...

    @abstractmethod
    def commit(self) -> None: ...

    @abstractmethod
    def rollback(self) -> None: ...
