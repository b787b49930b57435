from sqlalchemy import Select, select
from sqlalchemy.orm import Session

from food_orders.adapters.db.sqlalchemy import models
from food_orders.application.ports import ProductRepository, RestaurantRepository
from food_orders.domain.catalog import Product, Restaurant


def _to_restaurant(model: models.Restaurant) -> Restaurant:
    return Restaurant(
        id=model.id,
        name=model.name,
        description=model.description,
        image=model.image,
        delivery_fee=model.delivery_fee,
        category_id=model.category_id,
    )


def _to_product(model: models.Product) -> Product:
    return Product(
        id=model.id,
        restaurant_id=model.restaurant_id,
        name=model.name,
        description=model.description,
        price=model.price,
        image=model.image,
        active=model.active,
    )


class SQLAlchemyRestaurantRepository(RestaurantRepository):
    def __init__(self, session: Session):
        self.session = session

    def get(self, restaurant_id: int) -> Restaurant | None:
        model = self.session.query(models.Restaurant).filter_by(id=restaurant_id).first()
        if model:
            return _to_restaurant(model)
        return None


def select_products(product_ids: list[int], for_update: bool = False) -> Select:
    stmt = select(models.Product).where(models.Product.id.in_(sorted(set(product_ids))))
    if for_update:
        stmt = stmt.with_for_update()
    return stmt


class SQLAlchemyProductRepository(ProductRepository):
    def __init__(self, session: Session):
        self.session = session

    def get_many(self, product_ids: list[int], for_update: bool = False) -> dict[int, Product]:
        if not product_ids:
            return {}
        product_models = self.session.scalars(select_products(product_ids, for_update)).all()
        return {model.id: _to_product(model) for model in product_models}
