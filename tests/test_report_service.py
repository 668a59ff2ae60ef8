from services.report_service import EMPTY_CART_MESSAGE, ReportService


class FakeCart:
    # Only the public query surface ReportService reads.
    def __init__(self, items, subtotal, discount, tax, total):
        self.items, self.subtotal = items, subtotal
        self.discount, self.tax, self.total = discount, tax, total

    def get_item_count(self):
        return len(self.items)

    def get_cart_items(self):
        return self.items

    def get_subtotal(self):
        return self.subtotal

    def get_discount(self):
        return self.discount

    def get_tax(self):
        return self.tax

    def get_total(self):
        return self.total


def test_empty_cart_message():
    assert ReportService().cart_summary(FakeCart([], 0, 0, 0, 0)) == EMPTY_CART_MESSAGE


def test_prices_are_padded_to_two_decimals():
    cart = FakeCart(
        [{"product": "Widget", "price": 5.0, "quantity": 4, "item_total": 20.0}],
        subtotal=20.0, discount=4.0, tax=1.6, total=17.6,
    )

    lines = ReportService().cart_summary(cart).splitlines()

    assert lines == [
        "=== CART SUMMARY ===",
        "Widget: $5.00 x 4 = $20.00",
        "",
        "Subtotal: $20.00",
        "Discount: -$4.00",
        "Tax (10%): $1.60",
        "==================",
        "TOTAL: $17.60",
    ]


def test_half_cent_price_rounds_away_from_zero():
    cart = FakeCart(
        [{"product": "Bolt", "price": 0.125, "quantity": 2, "item_total": 0.25}],
        subtotal=0.25, discount=0.0, tax=0.03, total=0.28,
    )

    lines = ReportService().cart_summary(cart).splitlines()

    assert lines[1] == "Bolt: $0.13 x 2 = $0.25"
    assert not any(line.startswith("Discount") for line in lines)
