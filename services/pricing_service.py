# services/pricing_service.py

from __future__ import annotations
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Dict, Any, Optional

# Tax is charged on the amount left after the discount.
TAX_RATE = Decimal("0.10")

# Promotional codes -> percentage off the subtotal (0.10 = 10% off).
# Codes are matched after strip() + upper().
DISCOUNT_CODES: Dict[str, Decimal] = {
    "SAVE10": Decimal("0.10"),
    "SAVE20": Decimal("0.20"),
}

CENT = Decimal("0.01")

# Upper bounds for one line. A full line (1e7 * 1e5 = 1e12) plus cents
# stays well inside the default 28-digit decimal context and converts
# back to float without losing the cents.
MAX_UNIT_PRICE = Decimal("10000000")
MAX_QUANTITY = 100_000



def to_decimal(value: Any) -> Decimal:
    # Convert a caller-supplied number to Decimal through its str() form,
    # so 0.01 stays 0.01 instead of the binary float approximation.
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError) as e:
        raise ValueError(f"Not a number: {value!r}") from e


def round_money(amount: Decimal) -> Decimal:
    # Round to the nearest cent, halves away from zero.
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def normalize_code(code: str) -> str:
    return code.strip().upper()


def discount_rate(code: str) -> Optional[Decimal]:
    """
    Look up the discount percentage for a promotional code.

    Returns None for unknown codes. Matching ignores case and
    surrounding whitespace, so " save10 " resolves like "SAVE10".
    """
    return DISCOUNT_CODES.get(normalize_code(code))


def compute_discount(subtotal: Decimal, rate: Decimal) -> Decimal:
    # Left unrounded; Cart.get_discount() rounds it on read.
    return subtotal * rate


def compute_tax(taxable_amount: Decimal) -> Decimal:
    return round_money(taxable_amount * TAX_RATE)
