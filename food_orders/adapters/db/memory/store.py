import copy
from dataclasses import dataclass, field

from food_orders.domain.catalog import Category, Product, Restaurant
from food_orders.domain.order import Order, OrderLine


@dataclass
class OrderItemRecord:
    id: int
    order_id: int
    line: OrderLine


@dataclass
class Tables:
    categories: dict[int, Category] = field(default_factory=dict)
    restaurants: dict[int, Restaurant] = field(default_factory=dict)
    products: dict[int, Product] = field(default_factory=dict)
    consumer_addresses: set[int] = field(default_factory=set)
    orders: dict[int, Order] = field(default_factory=dict)
    order_items: list[OrderItemRecord] = field(default_factory=list)


class InMemoryStore:
    """Process-local stand-in for the relational store.

    A unit of work edits a private copy of ``tables`` and merges its own
    changes back on commit, so uncommitted writes are never visible to other
    units of work and overlapping commits do not overwrite each other. Ids come
    from store-level sequences that are never part of a snapshot.
    """

    def __init__(self):
        self.tables = Tables()
        self._next_order_id = 1
        self._next_item_id = 1

    def add_category(self, category: Category) -> None:
        self.tables.categories[category.id] = category

    def add_restaurant(self, restaurant: Restaurant) -> None:
        self.tables.restaurants[restaurant.id] = restaurant

    def add_product(self, product: Product) -> None:
        self.tables.products[product.id] = product

    def add_address(self, consumer_id: int) -> None:
        self.tables.consumer_addresses.add(consumer_id)

    def set_product_active(self, product_id: int, active: bool) -> None:
        product = self.tables.products[product_id]
        self.tables.products[product_id] = product.model_copy(update={"active": active})

    def next_order_id(self) -> int:
        order_id = self._next_order_id
        self._next_order_id += 1
        return order_id

    def next_item_id(self) -> int:
        item_id = self._next_item_id
        self._next_item_id += 1
        return item_id

    def snapshot(self) -> Tables:
        return copy.deepcopy(self.tables)

    def merge(self, base: Tables, working: Tables) -> None:
        """Apply the order rows changed between ``base`` and ``working``."""
        for order_id, order in working.orders.items():
            if base.orders.get(order_id) != order:
                self.tables.orders[order_id] = order
        known_items = {record.id for record in base.order_items}
        self.tables.order_items.extend(
            record for record in working.order_items if record.id not in known_items
        )
