from sqlalchemy.orm import Session

from food_orders.adapters.db.sqlalchemy import models
from food_orders.application.ports import ConsumerAddressRepository


class SQLAlchemyConsumerAddressRepository(ConsumerAddressRepository):
    def __init__(self, session: Session):
        self.session = session

    def exists_for(self, consumer_id: int) -> bool:
        return (
            self.session.query(models.ConsumerAddress.id)
            .filter_by(consumer_id=consumer_id)
            .first()
        ) is not None
