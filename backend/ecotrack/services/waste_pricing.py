"""
Weight / price-per-kg / financial value reconciliation for waste records.

The three fields satisfy financial_value = weight_kg * price_per_kg. Whichever
of price or financial value the user entered last is the anchor: editing the
weight holds the anchor and recomputes the other one.

Entry forms follow these rules while the user edits; records arriving at the
server go through `from_price` when only a unit price is given.
"""
from typing import NamedTuple

ANCHOR_PRICE = "price"
ANCHOR_FINANCIAL = "financial"


def derive_price_per_kg(weight_kg: float, financial_value: float) -> float:
    """Display price per kg; 0 when there is no weight to divide by."""
    if not weight_kg or weight_kg <= 0:
        return 0.0
    return financial_value / weight_kg


class WastePricing(NamedTuple):
    weight_kg: float
    price_per_kg: float
    financial_value: float
    anchor: str = ANCHOR_FINANCIAL

    @classmethod
    def from_financial(cls, weight_kg: float, financial_value: float) -> "WastePricing":
        """State of a stored record: weight and financial value are authoritative."""
        return cls(
            weight_kg=weight_kg,
            price_per_kg=derive_price_per_kg(weight_kg, financial_value),
            financial_value=financial_value,
            anchor=ANCHOR_FINANCIAL,
        )

    @classmethod
    def from_price(cls, weight_kg: float, price_per_kg: float) -> "WastePricing":
        return cls(
            weight_kg=weight_kg,
            price_per_kg=price_per_kg,
            financial_value=weight_kg * price_per_kg,
            anchor=ANCHOR_PRICE,
        )

    def with_weight(self, weight_kg: float) -> "WastePricing":
        if self.anchor == ANCHOR_FINANCIAL and self.financial_value:
            return self._replace(
                weight_kg=weight_kg,
                price_per_kg=derive_price_per_kg(weight_kg, self.financial_value),
            )
        # No financial value to hold on to: keep the unit price
        return self._replace(
            weight_kg=weight_kg,
            financial_value=weight_kg * self.price_per_kg,
        )

    def with_financial(self, financial_value: float) -> "WastePricing":
        return self._replace(
            financial_value=financial_value,
            price_per_kg=derive_price_per_kg(self.weight_kg, financial_value),
            anchor=ANCHOR_FINANCIAL,
        )

    def with_price(self, price_per_kg: float) -> "WastePricing":
        return self._replace(
            price_per_kg=price_per_kg,
            financial_value=(self.weight_kg or 0.0) * price_per_kg,
            anchor=ANCHOR_PRICE,
        )
