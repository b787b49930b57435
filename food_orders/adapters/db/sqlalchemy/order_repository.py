from collections import defaultdict

from sqlalchemy.orm import Session

from food_orders.adapters.db.sqlalchemy import models
from food_orders.application.ports import OrderRepository
from food_orders.domain.order import Order, OrderItemView, OrderLine, OrderSummary


def _to_order(model: models.Order) -> Order:
    return Order(
        id=model.id,
        consumer_id=model.consumer_id,
        restaurant_id=model.restaurant_id,
        subtotal=model.subtotal,
        delivery_fee=model.delivery_fee,
        total=model.total,
        out_for_delivery=model.out_for_delivery,
        delivered=model.delivered,
    )


class SQLAlchemyOrderRepository(OrderRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, order: Order) -> Order | None:
        order_model = models.Order(
            consumer_id=order.consumer_id,
            restaurant_id=order.restaurant_id,
            subtotal=order.subtotal,
            delivery_fee=order.delivery_fee,
            total=order.total,
            out_for_delivery=order.out_for_delivery,
            delivered=order.delivered,
        )
        self.session.add(order_model)
        # flush to obtain the generated id inside the open transaction
        self.session.flush()
        if order_model.id is None:
            return None
        return _to_order(order_model)

    def add_items(self, order_id: int, items: list[OrderLine]) -> list[OrderLine]:
        item_models = [
            models.OrderItem(
                order_id=order_id,
                product_id=item.product_id,
                quantity=item.quantity,
                price=item.price,
                subtotal=item.subtotal,
            ) for item in items
        ]
        self.session.add_all(item_models)
        self.session.flush()
        return [
            OrderLine(
                product_id=item_model.product_id,
                quantity=item_model.quantity,
                price=item_model.price,
                subtotal=item_model.subtotal,
            ) for item_model in item_models if item_model.id is not None
        ]

    def get_for_consumer(self, order_id: int, consumer_id: int) -> Order | None:
        order_model = (
            self.session.query(models.Order)
            .filter_by(id=order_id, consumer_id=consumer_id)
            .first()
        )
        if order_model:
            return _to_order(order_model)
        return None

    def set_delivered(self, order_id: int, consumer_id: int, delivered: bool) -> int:
        return (
            self.session.query(models.Order)
            .filter_by(id=order_id, consumer_id=consumer_id)
            .update({models.Order.delivered: delivered}, synchronize_session="fetch")
        )

    def list_summaries(self, consumer_id: int, delivered: bool) -> list[OrderSummary]:
        rows = (
            self.session.query(
                models.Order.id.label("order_id"),
                models.Restaurant.name.label("restaurant_name"),
                models.Restaurant.image.label("restaurant_image"),
                models.Category.image.label("category_image"),
                models.Order.subtotal,
                models.Order.total,
                models.Order.delivery_fee,
                models.Order.out_for_delivery,
                models.Order.delivered,
            )
            .join(models.Restaurant, models.Order.restaurant_id == models.Restaurant.id)
            .join(models.Category, models.Restaurant.category_id == models.Category.id)
            .filter(models.Order.consumer_id == consumer_id)
            .filter(models.Order.delivered == delivered)
            .order_by(models.Order.id.desc())
            .all()
        )
        return [OrderSummary(**row._asdict()) for row in rows]

    def items_by_order(self, order_ids: list[int]) -> dict[int, list[OrderItemView]]:
        if not order_ids:
            return {}
        rows = (
            self.session.query(
                models.OrderItem.order_id,
                models.Product.name.label("product_name"),
                models.Product.image.label("product_image"),
                models.OrderItem.quantity,
                models.OrderItem.subtotal,
            )
            .join(models.Product, models.OrderItem.product_id == models.Product.id)
            .filter(models.OrderItem.order_id.in_(order_ids))
            .order_by(models.OrderItem.id)
            .all()
        )
        grouped: dict[int, list[OrderItemView]] = defaultdict(list)
        for row in rows:
            grouped[row.order_id].append(
                OrderItemView(
                    product_name=row.product_name,
                    product_image=row.product_image,
                    quantity=row.quantity,
                    subtotal=row.subtotal,
                )
            )
        return dict(grouped)
