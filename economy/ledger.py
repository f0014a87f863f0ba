"""Portfolio ledger: moves money between the wallet and open positions.

Both operations are pure: they take a ``PlayerPortfolio`` and return a new
one, or ``None`` when the request is rejected. A rejected request leaves the
caller's state as it was; callers should treat ``None`` as a no-op rather
than retrying.
"""

from __future__ import annotations

import logging
import math

from models.asset import Asset
from models.game_date import GameDate
from models.portfolio import Investment, PlayerPortfolio, SellOutcome, WithdrawalResult
from economy.tax import TaxCalculator

logger = logging.getLogger(__name__)


class Ledger:
    """Executes buys and sells against a portfolio snapshot."""

    def __init__(self, tax_calculator: TaxCalculator) -> None:
        self._tax = tax_calculator

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def buy(
        self,
        portfolio: PlayerPortfolio,
        asset: Asset,
        amount: float,
        date: GameDate,
    ) -> PlayerPortfolio | None:
        """Spend *amount* of cash on fractional shares of *asset*.

        The new investment is appended at the end of the investment list.
        Returns ``None`` if *amount* is not a positive number or exceeds the wallet.
        """
        if not math.isfinite(amount) or amount <= 0:
            logger.info("Buy rejected: amount must be a positive number, got %s.", amount)
            return None
        if amount > portfolio.wallet_balance:
            logger.info(
                "Buy rejected: insufficient funds for %s (cost $%.2f, available $%.2f).",
                asset.id,
                amount,
                portfolio.wallet_balance,
            )
            return None

        investment = Investment(
            asset_id=asset.id,
            amount_invested=amount,
            shares_owned=amount / asset.current_price,
            purchase_price=asset.current_price,
            purchase_date=date.model_copy(),
        )
        logger.info(
            "Bought %.6f shares of %s at $%.2f ($%.2f).",
            investment.shares_owned,
            asset.id,
            asset.current_price,
            amount,
        )
        return PlayerPortfolio(
            wallet_balance=portfolio.wallet_balance - amount,
            investments=[*portfolio.investments, investment],
        )

    def sell(
        self,
        portfolio: PlayerPortfolio,
        investment_index: int,
        asset: Asset,
        shares_to_sell: float,
    ) -> SellOutcome | None:
        """Sell *shares_to_sell* shares of the investment at *investment_index*.

        Proceeds after tax go to the wallet. A position sold down to zero is
        removed; a partial sell scales the cost basis by the fraction of
        shares kept. Returns ``None`` for an unknown index or a share count
        that is not positive or exceeds the position.
        """
        rejection = self._validate_sell(portfolio, investment_index, shares_to_sell)
        if rejection is not None:
            logger.info("Sell rejected: %s", rejection)
            return None

        investment = portfolio.investments[investment_index]
        gross_amount = shares_to_sell * asset.current_price
        original_cost = shares_to_sell * investment.purchase_price
        capital_gain = gross_amount - original_cost
        tax_amount = self._tax.tax(capital_gain, gross_amount)
        net_amount = gross_amount - tax_amount

        remaining_shares = investment.shares_owned - shares_to_sell
        investments = list(portfolio.investments)
        if remaining_shares <= 0:
            del investments[investment_index]
        else:
            investments[investment_index] = investment.model_copy(
                update={
                    "shares_owned": remaining_shares,
                    "amount_invested": investment.amount_invested
                    * (remaining_shares / investment.shares_owned),
                }
            )

        result = WithdrawalResult(
            gross_amount=gross_amount,
            tax_amount=tax_amount,
            net_amount=net_amount,
            capital_gain=capital_gain,
        )
        logger.info(
            "Sold %.6f shares of %s: gross $%.2f, tax $%.2f, net $%.2f.",
            shares_to_sell,
            investment.asset_id,
            gross_amount,
            tax_amount,
            net_amount,
        )
        return SellOutcome(
            portfolio=PlayerPortfolio(
                wallet_balance=portfolio.wallet_balance + net_amount,
                investments=investments,
            ),
            result=result,
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _validate_sell(
        portfolio: PlayerPortfolio,
        investment_index: int,
        shares_to_sell: float,
    ) -> str | None:
        """Return an error message if the sell is invalid, else ``None``."""
        if not 0 <= investment_index < len(portfolio.investments):
            return (
                f"No investment at index {investment_index} "
                f"({len(portfolio.investments)} open)."
            )
        if not math.isfinite(shares_to_sell) or shares_to_sell <= 0:
            return f"Share count must be a positive number, got {shares_to_sell}."
        held = portfolio.investments[investment_index].shares_owned
        if shares_to_sell > held:
            return f"Cannot sell {shares_to_sell} shares, only {held} held."
        return None
