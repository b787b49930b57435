from food_orders.application.ports import UnitOfWork
from food_orders.domain.errors import NotFoundError, WriteFailedError
from food_orders.utils.logging import get_logger

logger = get_logger(__name__)


class ChangeDeliveryStatusUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    def execute(self, order_id: int, consumer_id: int, delivered: bool) -> None:
        with self.uow:
            # scoping by consumer keeps other consumers' orders invisible
            order = self.uow.orders.get_for_consumer(order_id, consumer_id)
            if order is None:
                raise NotFoundError("Order not found.", order_id=order_id)

            updated = self.uow.orders.set_delivered(order_id, consumer_id, delivered)
            if updated == 0:
                raise WriteFailedError("Failed to update the delivery status.", order_id=order_id)

            self.uow.commit()

        logger.info(
            "Delivery status changed",
            order_id=order_id,
            consumer_id=consumer_id,
            delivered=delivered,
        )

    def mark_delivered(self, order_id: int, consumer_id: int) -> None:
        self.execute(order_id, consumer_id, delivered=True)

    def mark_undelivered(self, order_id: int, consumer_id: int) -> None:
        self.execute(order_id, consumer_id, delivered=False)
