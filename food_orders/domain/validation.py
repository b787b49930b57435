from food_orders.domain.errors import ValidationFailedError
from food_orders.domain.order import OrderLine


def _line_violations(index: int, line: OrderLine) -> list[str]:
    label = f"products[{index}]"
    violations = []
    if line.quantity <= 0:
        violations.append(f"{label}: quantity must be greater than zero.")
    if line.price < 0:
        violations.append(f"{label}: price must not be negative.")
    if line.subtotal < 0:
        violations.append(f"{label}: subtotal must not be negative.")
    elif line.subtotal != line.expected_subtotal():
        violations.append(f"{label}: subtotal must equal quantity times price.")
    return violations


def validate_order(
    subtotal: int,
    delivery_fee: int,
    total: int,
    restaurant_id: int | None,
    products: list[OrderLine],
) -> ValidationFailedError | None:
    """Check a proposed order before anything touches the store.

    Returns ``None`` when the submission is consistent, otherwise a
    ``ValidationFailedError`` listing every violation found (the first one is
    used as the message). Amounts are integer cents, so comparisons are exact.
    """
    violations: list[str] = []

    if restaurant_id is None:
        violations.append("restaurant_id is required.")
    if not products:
        violations.append("products must contain at least one item.")
    for index, line in enumerate(products):
        violations.extend(_line_violations(index, line))

    if delivery_fee < 0:
        violations.append("delivery_fee must not be negative.")
    if products and subtotal != sum(line.subtotal for line in products):
        violations.append("subtotal does not match the sum of the product subtotals.")
    if total != subtotal + delivery_fee:
        violations.append("total must equal subtotal plus delivery_fee.")

    if violations:
        return ValidationFailedError(violations)
    return None
