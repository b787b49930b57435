from food_orders.domain.catalog import Product, Restaurant
from food_orders.domain.order import Order, OrderLine
from food_orders.domain.pricing import price_cart

RESTAURANT = Restaurant(id=1, name="Bella Napoli", delivery_fee=500, category_id=1)


def product(id, price, active=True):
    return Product(id=id, restaurant_id=1, name=f"Product {id}", price=price, active=active)


def test_single_line_scenario():
    quote = price_cart(RESTAURANT, [(product(1, 1000), 2)])

    assert quote.subtotal == 2000
    assert quote.total == 2500
    assert quote.products[0].quantity == 2
    assert quote.products[0].subtotal == 2000


def test_totals_reconcile_for_several_lines():
    quote = price_cart(RESTAURANT, [(product(1, 1000), 2), (product(2, 1550), 3), (product(3, 99), 1)])

    assert quote.subtotal == sum(p.subtotal for p in quote.products) == 6749
    assert quote.total == quote.subtotal + RESTAURANT.delivery_fee


def test_inactive_products_are_still_priced():
    quote = price_cart(RESTAURANT, [(product(1, 1000, active=False), 1)])
    assert quote.products[0].active is False
    assert quote.total == 1500


def test_priced_products_keep_catalogue_fields():
    quote = price_cart(RESTAURANT, [(product(7, 1200), 1)])
    priced = quote.products[0]
    assert (priced.id, priced.name, priced.price, priced.restaurant_id) == (7, "Product 7", 1200, 1)
    assert quote.restaurant == RESTAURANT


def test_order_reconciles_with_its_items():
    items = [
        OrderLine(product_id=1, quantity=2, price=1000, subtotal=2000),
        OrderLine(product_id=2, quantity=1, price=1500, subtotal=1500),
    ]
    order = Order(consumer_id=1, restaurant_id=1, subtotal=3500, delivery_fee=500, total=4000, items=items)
    assert order.items_subtotal() == 3500
    assert order.reconciles()

    assert not order.model_copy(update={"total": 3900}).reconciles()
