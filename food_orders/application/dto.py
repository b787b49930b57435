from pydantic import BaseModel

from food_orders.domain.order import OrderLine

# DTO (Data Transfer Object)

class CartLineInput(BaseModel):
    product_id: int
    quantity: int
    restaurant_id: int


class RegisterOrderInput(BaseModel):
    consumer_id: int
    restaurant_id: int | None
    subtotal: int
    delivery_fee: int
    total: int
    products: list[OrderLine]
