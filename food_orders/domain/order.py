from pydantic import BaseModel, ConfigDict, Field

#
# Value object: one product entry of an order, frozen at order time
#
class OrderLine(BaseModel):
    product_id: int
    quantity: int
    price: int
    subtotal: int
    model_config = ConfigDict(frozen=True)

    def expected_subtotal(self) -> int:
        return self.quantity * self.price

#
# Entity: the order header. Only ``delivered`` changes after creation.
#
class Order(BaseModel):
    id: int | None = None
    consumer_id: int
    restaurant_id: int
    subtotal: int
    delivery_fee: int
    total: int
    out_for_delivery: bool = False
    delivered: bool = False
    items: list[OrderLine] = Field(default_factory=list)

    def items_subtotal(self) -> int:
        return sum(item.subtotal for item in self.items)

    def reconciles(self) -> bool:
        return (
            self.total == self.subtotal + self.delivery_fee
            and self.subtotal == self.items_subtotal()
        )


class OrderItemView(BaseModel):
    product_name: str
    product_image: str | None = None
    quantity: int
    subtotal: int


class OrderSummary(BaseModel):
    """Order header joined with its restaurant and category display fields."""
    order_id: int
    restaurant_name: str
    restaurant_image: str | None = None
    category_image: str | None = None
    subtotal: int
    total: int
    delivery_fee: int
    out_for_delivery: bool
    delivered: bool
    items: list[OrderItemView] = Field(default_factory=list)
