"""Win condition."""

from __future__ import annotations

from models.asset import Asset
from models.portfolio import PlayerPortfolio
from economy.valuation import net_worth


class WinEvaluator:
    """Checks whether a portfolio's net worth has reached the goal.

    A pure query; callers decide what a win means (e.g. force-pause).
    """

    def __init__(self, goal_amount: float) -> None:
        self.goal_amount = goal_amount

    def has_won(self, portfolio: PlayerPortfolio, assets: list[Asset]) -> bool:
        return net_worth(portfolio, assets) >= self.goal_amount
