from pydantic import BaseModel, ConfigDict

#
# Read-only catalogue entities. Restaurant-side tooling owns their lifecycle.
#

class Category(BaseModel):
    id: int
    name: str
    image: str | None = None
    model_config = ConfigDict(frozen=True)


class Restaurant(BaseModel):
    id: int
    name: str
    description: str | None = None
    image: str | None = None
    delivery_fee: int
    category_id: int
    model_config = ConfigDict(frozen=True)


class Product(BaseModel):
    id: int
    restaurant_id: int
    name: str
    description: str | None = None
    price: int
    image: str | None = None
    active: bool = True
    model_config = ConfigDict(frozen=True)
