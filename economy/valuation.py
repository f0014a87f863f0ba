"""Mark-to-market valuation queries over a portfolio and the asset list."""

from __future__ import annotations

from models.asset import Asset
from models.portfolio import Investment, PlayerPortfolio


def find_asset(assets: list[Asset], asset_id: str) -> Asset | None:
    """Look up an asset by id; ``None`` if it is not listed."""
    return next((a for a in assets if a.id == asset_id), None)


def wallet_balance(portfolio: PlayerPortfolio) -> float:
    return portfolio.wallet_balance


def invested_value(portfolio: PlayerPortfolio, assets: list[Asset]) -> float:
    """Current value of all open investments.

    An investment whose asset is no longer listed is valued at zero.
    """
    prices = {a.id: a.current_price for a in assets}
    return sum(
        inv.shares_owned * prices[inv.asset_id]
        for inv in portfolio.investments
        if inv.asset_id in prices
    )


def net_worth(portfolio: PlayerPortfolio, assets: list[Asset]) -> float:
    """Wallet balance plus the mark-to-market value of open investments."""
    return wallet_balance(portfolio) + invested_value(portfolio, assets)


def calculate_roi(investment: Investment, current_price: float) -> float:
    """Return on investment in percent against the remaining cost basis."""
    current_value = investment.shares_owned * current_price
    return ((current_value - investment.amount_invested) / investment.amount_invested) * 100


def format_money(amount: float) -> str:
    """Dollar amount with thousands separators, e.g. ``$1,234.56``."""
    if amount < 0:
        return f"-${-amount:,.2f}"
    return f"${amount:,.2f}"
