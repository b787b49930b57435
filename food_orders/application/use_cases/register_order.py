from food_orders.application.dto import RegisterOrderInput
from food_orders.application.ports import UnitOfWork
from food_orders.domain.errors import (
    ConflictError,
    NotFoundError,
    PreconditionFailedError,
    WriteFailedError,
)
from food_orders.domain.order import Order
from food_orders.domain.validation import validate_order
from food_orders.utils.logging import get_logger

logger = get_logger(__name__)


class RegisterOrderUseCase:
    """Persist an order header and its line items as one transaction.

    Nothing is committed unless the header and every line item were created;
    any error raised inside the unit of work rolls the whole attempt back.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    def execute(self, input: RegisterOrderInput) -> Order:
        error = validate_order(
            input.subtotal,
            input.delivery_fee,
            input.total,
            input.restaurant_id,
            input.products,
        )
        if error:
            logger.info("Order rejected", consumer_id=input.consumer_id, reason=error.message)
            raise error

        with self.uow:
            if not self.uow.addresses.exists_for(input.consumer_id):
                raise PreconditionFailedError(
                    "An address is required to place an order.",
                    consumer_id=input.consumer_id,
                )

            product_ids = [line.product_id for line in input.products]
            products = self.uow.products.get_many(product_ids, for_update=True)
            for product_id in product_ids:
                product = products.get(product_id)
                if product is None:
                    raise NotFoundError("Product not found.", product_id=product_id)
                if not product.active:
                    raise ConflictError(
                        f"Product {product.name} is no longer active.",
                        product_id=product_id,
                    )

            restaurant = self.uow.restaurants.get(input.restaurant_id)
            if restaurant is None:
                raise NotFoundError("Restaurant not found.", restaurant_id=input.restaurant_id)

            order = self.uow.orders.add(
                Order(
                    consumer_id=input.consumer_id,
                    restaurant_id=restaurant.id,
                    subtotal=input.subtotal,
                    delivery_fee=input.delivery_fee,
                    total=input.total,
                )
            )
            if order is None or order.id is None:
                raise WriteFailedError("Failed to register the order.")

            # submitted lines are stored as-is; their totals were validated above
            items = self.uow.orders.add_items(order.id, input.products)
            if len(items) != len(input.products):
                raise WriteFailedError("Failed to register the order items.", order_id=order.id)

            order = order.model_copy(update={"items": items})
            if not order.reconciles():
                raise WriteFailedError("Stored order does not reconcile with its items.", order_id=order.id)

            self.uow.commit()

        logger.info(
            "Order registered",
            order_id=order.id,
            consumer_id=input.consumer_id,
            restaurant_id=restaurant.id,
            item_count=len(items),
            total=order.total,
        )
        return order
