"""Portfolio state models: open positions, the player's portfolio, sell results."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from models.game_date import GameDate


class Investment(BaseModel):
    """An open position in one asset.

    ``asset_id`` is a lookup key into the session's asset list, not an
    ownership link: an investment may outlive its asset.
    """

    model_config = ConfigDict(frozen=True)

    asset_id: str
    amount_invested: float  # Cost basis, reduced proportionally on partial sells
    shares_owned: float = Field(gt=0)
    purchase_price: float
    purchase_date: GameDate


class PlayerPortfolio(BaseModel):
    """Cash on hand plus open investments in acquisition order.

    The list index is the identity callers use when selling.
    """

    model_config = ConfigDict(frozen=True)

    wallet_balance: float = Field(ge=0)
    investments: list[Investment] = []


class WithdrawalResult(BaseModel):
    """Cash breakdown of a completed sell, returned for display only."""

    model_config = ConfigDict(frozen=True)

    gross_amount: float
    tax_amount: float
    net_amount: float
    capital_gain: float  # Negative for a loss


class SellOutcome(BaseModel):
    """Updated portfolio together with the withdrawal that produced it."""

    model_config = ConfigDict(frozen=True)

    portfolio: PlayerPortfolio
    result: WithdrawalResult
