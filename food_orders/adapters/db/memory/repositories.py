from collections import defaultdict

from food_orders.adapters.db.memory.store import InMemoryStore, OrderItemRecord, Tables
from food_orders.application.ports import (
    ConsumerAddressRepository,
    OrderRepository,
    ProductRepository,
    RestaurantRepository,
)
from food_orders.domain.catalog import Product, Restaurant
from food_orders.domain.order import Order, OrderItemView, OrderLine, OrderSummary


class InMemoryRestaurantRepository(RestaurantRepository):
    def __init__(self, tables: Tables):
        self.tables = tables

    def get(self, restaurant_id: int) -> Restaurant | None:
        return self.tables.restaurants.get(restaurant_id)


class InMemoryProductRepository(ProductRepository):
    def __init__(self, tables: Tables):
        self.tables = tables

    def get_many(self, product_ids: list[int], for_update: bool = False) -> dict[int, Product]:
        return {
            product_id: self.tables.products[product_id]
            for product_id in set(product_ids)
            if product_id in self.tables.products
        }


class InMemoryConsumerAddressRepository(ConsumerAddressRepository):
    def __init__(self, tables: Tables):
        self.tables = tables

    def exists_for(self, consumer_id: int) -> bool:
        return consumer_id in self.tables.consumer_addresses


class InMemoryOrderRepository(OrderRepository):
    def __init__(self, tables: Tables, store: InMemoryStore):
        self.tables = tables
        self.store = store

    def add(self, order: Order) -> Order | None:
        created = order.model_copy(update={"id": self.store.next_order_id(), "items": []})
        self.tables.orders[created.id] = created
        return created

    def add_items(self, order_id: int, items: list[OrderLine]) -> list[OrderLine]:
        created = []
        for item in items:
            self.tables.order_items.append(
                OrderItemRecord(id=self.store.next_item_id(), order_id=order_id, line=item)
            )
            created.append(item)
        return created

    def get_for_consumer(self, order_id: int, consumer_id: int) -> Order | None:
        order = self.tables.orders.get(order_id)
        if order and order.consumer_id == consumer_id:
            return order
        return None

    def set_delivered(self, order_id: int, consumer_id: int, delivered: bool) -> int:
        order = self.get_for_consumer(order_id, consumer_id)
        if order is None:
            return 0
        self.tables.orders[order_id] = order.model_copy(update={"delivered": delivered})
        return 1

    def list_summaries(self, consumer_id: int, delivered: bool) -> list[OrderSummary]:
        summaries = []
        for order in sorted(self.tables.orders.values(), key=lambda o: o.id, reverse=True):
            if order.consumer_id != consumer_id or order.delivered != delivered:
                continue
            # inner joins: orders without a restaurant or category are dropped
            restaurant = self.tables.restaurants.get(order.restaurant_id)
            if restaurant is None:
                continue
            category = self.tables.categories.get(restaurant.category_id)
            if category is None:
                continue
            summaries.append(
                OrderSummary(
                    order_id=order.id,
                    restaurant_name=restaurant.name,
                    restaurant_image=restaurant.image,
                    category_image=category.image,
                    subtotal=order.subtotal,
                    total=order.total,
                    delivery_fee=order.delivery_fee,
                    out_for_delivery=order.out_for_delivery,
                    delivered=order.delivered,
                )
            )
        return summaries

    def items_by_order(self, order_ids: list[int]) -> dict[int, list[OrderItemView]]:
        wanted = set(order_ids)
        grouped: dict[int, list[OrderItemView]] = defaultdict(list)
        for record in sorted(self.tables.order_items, key=lambda r: r.id):
            product = self.tables.products.get(record.line.product_id)
            if record.order_id not in wanted or product is None:
                continue
            grouped[record.order_id].append(
                OrderItemView(
                    product_name=product.name,
                    product_image=product.image,
                    quantity=record.line.quantity,
                    subtotal=record.line.subtotal,
                )
            )
        return dict(grouped)
