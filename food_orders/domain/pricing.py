from pydantic import BaseModel, ConfigDict

from food_orders.domain.catalog import Product, Restaurant


class PricedProduct(Product):
    quantity: int
    subtotal: int


class PricedCart(BaseModel):
    restaurant: Restaurant
    products: list[PricedProduct]
    subtotal: int
    total: int
    model_config = ConfigDict(frozen=True)


def price_cart(restaurant: Restaurant, lines: list[tuple[Product, int]]) -> PricedCart:
    # Uses the current catalogue price; active status is checked at registration
    priced = [
        PricedProduct(**product.model_dump(), quantity=quantity, subtotal=quantity * product.price)
        for product, quantity in lines
    ]
    subtotal = sum(p.subtotal for p in priced)
    return PricedCart(
        restaurant=restaurant,
        products=priced,
        subtotal=subtotal,
        total=subtotal + restaurant.delivery_fee,
    )
