from food_orders.application.dto import CartLineInput
from food_orders.application.ports import UnitOfWork
from food_orders.domain.errors import NotFoundError, ValidationFailedError
from food_orders.domain.pricing import PricedCart, price_cart
from food_orders.utils.logging import get_logger

logger = get_logger(__name__)


class PriceCartUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    def execute(self, cart: list[CartLineInput]) -> PricedCart:
        if not cart:
            raise ValidationFailedError(["cart must contain at least one item."])
        invalid = [
            f"cart[{index}]: quantity must be greater than zero."
            for index, line in enumerate(cart) if line.quantity <= 0
        ]
        if invalid:
            raise ValidationFailedError(invalid)

        # every line belongs to the restaurant of the first one
        restaurant_id = cart[0].restaurant_id

        with self.uow:
            restaurant = self.uow.restaurants.get(restaurant_id)
            if restaurant is None:
                raise NotFoundError("Restaurant not found.", restaurant_id=restaurant_id)

            products = self.uow.products.get_many([line.product_id for line in cart])
            missing = [line.product_id for line in cart if line.product_id not in products]
            if missing:
                raise NotFoundError("Product not found.", product_ids=missing)

            quote = price_cart(
                restaurant,
                [(products[line.product_id], line.quantity) for line in cart],
            )

        logger.info(
            "Cart priced",
            restaurant_id=restaurant_id,
            line_count=len(cart),
            subtotal=quote.subtotal,
            total=quote.total,
        )
        return quote
