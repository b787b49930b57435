from food_orders.application.ports import UnitOfWork
from food_orders.domain.errors import NotFoundError
from food_orders.domain.order import OrderSummary


class ListOrdersUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    def execute(self, consumer_id: int, delivered: bool = False) -> list[OrderSummary]:
        with self.uow:
            summaries = self.uow.orders.list_summaries(consumer_id, delivered)
            if not summaries:
                raise NotFoundError("No orders found.", consumer_id=consumer_id, delivered=delivered)

            items = self.uow.orders.items_by_order([s.order_id for s in summaries])
            return [
                summary.model_copy(update={"items": items.get(summary.order_id, [])})
                for summary in summaries
            ]
