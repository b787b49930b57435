"""Tests for the pure order validator."""

from food_orders.domain.errors import ErrorKind, ValidationFailedError
from food_orders.domain.order import OrderLine
from food_orders.domain.validation import validate_order


def line(quantity=2, price=1000, subtotal=None, product_id=1):
    if subtotal is None:
        subtotal = quantity * price
    return OrderLine(product_id=product_id, quantity=quantity, price=price, subtotal=subtotal)


class TestValidOrders:
    def test_consistent_order_returns_none(self):
        assert validate_order(2000, 500, 2500, 1, [line()]) is None

    def test_multiple_lines_sum_to_subtotal(self):
        products = [line(quantity=2, price=1000), line(quantity=1, price=1500, product_id=2)]
        assert validate_order(3500, 500, 4000, 1, products) is None

    def test_free_products_and_delivery_are_allowed(self):
        assert validate_order(0, 0, 0, 1, [line(quantity=3, price=0)]) is None


class TestStructuralChecks:
    def test_empty_products(self):
        error = validate_order(0, 500, 500, 1, [])
        assert isinstance(error, ValidationFailedError)
        assert error.kind is ErrorKind.VALIDATION_FAILED
        assert "at least one item" in error.message

    def test_missing_restaurant(self):
        error = validate_order(2000, 500, 2500, None, [line()])
        assert error is not None
        assert error.message == "restaurant_id is required."

    def test_zero_quantity(self):
        error = validate_order(0, 500, 500, 1, [line(quantity=0)])
        assert error is not None
        assert "quantity must be greater than zero" in error.message

    def test_negative_price(self):
        error = validate_order(-1000, 500, -500, 1, [line(quantity=1, price=-1000)])
        assert error is not None
        assert any("price must not be negative" in v for v in error.violations)

    def test_negative_delivery_fee(self):
        error = validate_order(2000, -100, 1900, 1, [line()])
        assert error is not None
        assert "delivery_fee must not be negative." in error.violations


class TestConsistencyChecks:
    def test_subtotal_not_matching_products(self):
        # subtotal=20.00 but the products only add up to 15.00
        error = validate_order(2000, 500, 2500, 1, [line(quantity=1, price=1500)])
        assert error is not None
        assert error.violations == ["subtotal does not match the sum of the product subtotals."]

    def test_total_not_matching_subtotal_plus_fee(self):
        error = validate_order(2000, 500, 2400, 1, [line()])
        assert error is not None
        assert error.violations == ["total must equal subtotal plus delivery_fee."]

    def test_line_subtotal_not_matching_quantity_times_price(self):
        error = validate_order(1900, 500, 2400, 1, [line(quantity=2, price=1000, subtotal=1900)])
        assert error is not None
        assert error.violations == ["products[0]: subtotal must equal quantity times price."]

    def test_all_violations_are_reported(self):
        error = validate_order(100, 500, 0, None, [line(quantity=0)])
        assert error is not None
        assert len(error.violations) == 4
        assert error.to_dict()["violations"] == error.violations
