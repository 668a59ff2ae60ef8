# models/cart.py
from dataclasses import dataclass
from decimal import Decimal
import logging

from services.pricing_service import (
    MAX_QUANTITY,
    MAX_UNIT_PRICE,
    to_decimal,
    round_money,
    normalize_code,
    discount_rate,
    compute_discount,
    compute_tax,
)
from services.report_service import ReportService
from utils.logger import get_logger

# Cart model representing a single customer's shopping cart.
# Not thread-safe: callers serialize access (one Cart per session).


@dataclass
class LineItem:
    product: str
    unit_price: Decimal
    quantity: int

    @property
    def line_total(self) -> Decimal:
        return round_money(self.unit_price * self.quantity)


def validate_product(product) -> str:
    if not isinstance(product, str) or product == "":
        raise ValueError("Invalid product name: must be a non-empty string.")
    return product


def validate_price(price) -> Decimal:
    # bool is an int subclass, True is not a price
    if isinstance(price, bool) or not isinstance(price, (int, float, Decimal)):
        raise ValueError("Price must be a non-negative number.")
    value = to_decimal(price)
    if not value.is_finite() or value < 0:
        raise ValueError("Price must be a non-negative number.")
    if value > MAX_UNIT_PRICE:
        raise ValueError(f"Price must not exceed {MAX_UNIT_PRICE}.")
    return value


def validate_quantity(quantity) -> int:
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
        raise ValueError("Quantity must be a positive integer.")
    if quantity > MAX_QUANTITY:
        raise ValueError(f"Quantity must not exceed {MAX_QUANTITY}.")
    return quantity


class Cart:
    """
    In-memory shopping cart.

    Holds line items keyed by product name (insertion ordered) and at
    most one applied discount. Every figure is derived from the current
    items on each call, except the discount amount, which is fixed in
    currency at the moment a code is applied and is NOT recomputed when
    items change afterwards.

    Mutating operations never raise for bad input: they return False,
    log a warning and record the message in ``last_error``.
    """

    def __init__(self, logger: logging.Logger | None = None):
        self._items: dict[str, LineItem] = {}
        self._applied_discount = Decimal("0")
        self.applied_code: str | None = None
        self.last_error: str | None = None
        self.logger = logger or get_logger("cart")
        self._reports = ReportService()

    # mutations

    def add_item(self, product, price, quantity=1) -> bool:
        existing = None
        try:
            product = validate_product(product)
            unit_price = validate_price(price)
            quantity = validate_quantity(quantity)
            existing = self._items.get(product)
            if existing is not None:
                validate_quantity(existing.quantity + quantity)
        except ValueError as e:
            return self._reject("add_item", e)

        if existing is not None:
            # first price wins, only the quantity accumulates
            existing.quantity += quantity
            self.logger.info(f"cart: {product} quantity +{quantity} -> {existing.quantity}")
        else:
            self._items[product] = LineItem(product, unit_price, quantity)
            self.logger.info(f"cart: added {product} @ {unit_price} x {quantity}")

        self.last_error = None
        return True

    def remove_item(self, product) -> bool:
        try:
            product = validate_product(product)
            self._require(product)
        except ValueError as e:
            return self._reject("remove_item", e)

        del self._items[product]
        self.logger.info(f"cart: removed {product}")
        self.last_error = None
        return True

    def update_quantity(self, product, quantity) -> bool:
        try:
            product = validate_product(product)
            self._require(product)
            quantity = validate_quantity(quantity)
        except ValueError as e:
            return self._reject("update_quantity", e)

        self._items[product].quantity = quantity
        self.logger.info(f"cart: {product} quantity set to {quantity}")
        self.last_error = None
        return True

    def apply_discount(self, code) -> bool:
        try:
            if not isinstance(code, str) or code == "":
                raise ValueError("Invalid discount code: must be a non-empty string.")
            rate = discount_rate(code)
            if rate is None:
                raise ValueError(f'Invalid discount code: "{code}"')
        except ValueError as e:
            return self._reject("apply_discount", e)

        # Overwrites any previous code, discounts never stack.
        self._applied_discount = compute_discount(self._subtotal(), rate)
        self.applied_code = normalize_code(code)
        self.logger.info(
            f"cart: applied {self.applied_code} ({rate * 100:.0f}% off), "
            f"discount={self._applied_discount}"
        )
        self.last_error = None
        return True

    def clear_cart(self) -> None:
        self._items.clear()
        self._applied_discount = Decimal("0")
        self.applied_code = None
        self.last_error = None
        self.logger.info("cart: cleared")

    # queries

    def get_subtotal(self) -> float:
        return float(self._subtotal())

    def get_discount(self) -> float:
        return float(round_money(self._applied_discount))

    def get_tax(self) -> float:
        return float(self._tax())

    def get_total(self) -> float:
        # Each figure is rounded on its own before being combined, which can
        # differ by a cent from rounding only the final total.
        discounted = round_money(self._subtotal() - self._applied_discount)
        return float(round_money(discounted + self._tax()))

    def get_cart_items(self) -> list[dict]:
        return [self._snapshot(it) for it in self._items.values()]

    def get_item(self, product) -> dict | None:
        it = self._items.get(product) if isinstance(product, str) else None
        return self._snapshot(it) if it is not None else None

    def get_item_count(self) -> int:
        # distinct products, not units
        return len(self._items)

    def get_summary(self) -> str:
        return self._reports.cart_summary(self)

    def __len__(self) -> int:
        return self.get_item_count()

    def __contains__(self, product) -> bool:
        return product in self._items

    # helpers

    def _subtotal(self) -> Decimal:
        raw = sum((it.unit_price * it.quantity for it in self._items.values()), Decimal("0"))
        return round_money(raw)

    def _tax(self) -> Decimal:
        return compute_tax(self._subtotal() - self._applied_discount)

    def _require(self, product: str) -> None:
        if product not in self._items:
            raise ValueError(f'Product "{product}" not found in cart')

    def _reject(self, operation: str, error: ValueError) -> bool:
        self.last_error = str(error)
        self.logger.warning(f"cart: {operation} rejected: {error}")
        return False

    @staticmethod
    def _snapshot(it: LineItem) -> dict:
        return {
            "product": it.product,
            "price": float(it.unit_price),
            "quantity": it.quantity,
            "item_total": float(it.line_total),
        }
