"""Withdrawal tax rules."""

from __future__ import annotations


class TaxCalculator:
    """Computes the tax owed when a position is sold.

    Every withdrawal pays a flat rate on the gross amount. A withdrawal that
    realizes a gain additionally pays the capital-gains rate on that gain.
    Amounts are not rounded.
    """

    def __init__(self, capital_gains_tax_rate: float, flat_withdrawal_tax_rate: float) -> None:
        self.capital_gains_tax_rate = capital_gains_tax_rate
        self.flat_withdrawal_tax_rate = flat_withdrawal_tax_rate

    def tax(self, capital_gain: float, gross_amount: float) -> float:
        flat_tax = gross_amount * self.flat_withdrawal_tax_rate
        if capital_gain <= 0:
            return flat_tax
        return capital_gain * self.capital_gains_tax_rate + flat_tax
