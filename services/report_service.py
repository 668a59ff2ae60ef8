# services/report_service.py
# report_service.py is a service module (Service Layer)
# with the class name ReportService, responsible for rendering a cart as text.

from services.pricing_service import round_money, to_decimal

EMPTY_CART_MESSAGE = "Cart is empty"
SUMMARY_HEADER = "=== CART SUMMARY ==="
SUMMARY_SEPARATOR = "=================="


def money(value) -> str:
    # Cent rounding, halves away from zero (0.125 -> 0.13).
    return f"{round_money(to_decimal(value)):.2f}"


class ReportService:
    def cart_summary(self, cart) -> str:
        # Reads only the public query operations of the cart, never its state.
        if cart.get_item_count() == 0:
            return EMPTY_CART_MESSAGE

        lines = [SUMMARY_HEADER]
        for it in cart.get_cart_items():
            lines.append(
                f"{it['product']}: ${money(it['price'])} x {it['quantity']} "
                f"= ${money(it['item_total'])}"
            )

        lines.append("")
        lines.append(f"Subtotal: ${money(cart.get_subtotal())}")

        discount = cart.get_discount()
        if discount > 0:
            lines.append(f"Discount: -${money(discount)}")

        lines.append(f"Tax (10%): ${money(cart.get_tax())}")
        lines.append(SUMMARY_SEPARATOR)
        lines.append(f"TOTAL: ${money(cart.get_total())}")
        return "\n".join(lines)
