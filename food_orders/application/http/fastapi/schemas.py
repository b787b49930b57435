from pydantic import BaseModel, Field


class CartLineRequest(BaseModel):
    product_id: int
    quantity: int = Field(gt=0)
    restaurant_id: int


class OrderProductRequest(BaseModel):
    id: int
    quantity: int
    price: int
    subtotal: int


class RegisterOrderRequest(BaseModel):
    restaurant_id: int | None = None
    subtotal: int
    delivery_fee: int
    total: int
    products: list[OrderProductRequest] = Field(default_factory=list)


class RestaurantResponse(BaseModel):
    id: int
    name: str
    description: str | None = None
    image: str | None = None
    delivery_fee: int
    category_id: int


class PricedProductResponse(BaseModel):
    id: int
    restaurant_id: int
    name: str
    description: str | None = None
    price: int
    image: str | None = None
    active: bool
    quantity: int
    subtotal: int


class PricedCartResponse(BaseModel):
    restaurant: RestaurantResponse
    products: list[PricedProductResponse]
    subtotal: int
    total: int


class OrderItemResponse(BaseModel):
    product_name: str
    product_image: str | None = None
    quantity: int
    subtotal: int


class OrderResponse(BaseModel):
    order_id: int
    restaurant_name: str
    restaurant_image: str | None = None
    category_image: str | None = None
    subtotal: int
    total: int
    delivery_fee: int
    out_for_delivery: bool
    delivered: bool
    items: list[OrderItemResponse]
