"""Stochastic asset price engine.

Each tick an asset's price moves by a daily drift derived from its annual
base return plus uniform noise scaled by its volatility, and the whole move
is scaled by the multiplier configured for its risk level::

    change = (base_return_rate / 365 + uniform(-1, 1) * volatility) * multiplier
    new_price = max(0.01, current_price * (1 + change))

Assets move independently; there is no cross-asset correlation.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Mapping
from typing import Protocol

from models.asset import Asset, RiskLevel

logger = logging.getLogger(__name__)

PRICE_FLOOR = 0.01
HISTORY_LIMIT = 100
DAYS_PER_YEAR = 365


class RandomSource(Protocol):
    """Anything that can draw a uniform float (``random.Random``, numpy ``Generator``)."""

    def uniform(self, low: float, high: float) -> float: ...


class MissingRiskMultiplierError(KeyError):
    """Raised when an asset's risk level has no configured multiplier."""


class PriceEngine:
    """Produces the next price for assets given per-risk-level multipliers.

    The random source is injected so tests can run with a seeded or stubbed
    generator.
    """

    def __init__(
        self,
        risk_multipliers: Mapping[RiskLevel, float],
        rng: RandomSource | None = None,
    ) -> None:
        self._risk_multipliers = dict(risk_multipliers)
        self._rng = rng if rng is not None else random.Random()

    def price_change(self, asset: Asset) -> float:
        """Fractional price change for one tick, e.g. ``0.02`` for +2%."""
        try:
            multiplier = self._risk_multipliers[asset.risk_level]
        except KeyError:
            raise MissingRiskMultiplierError(
                f"No risk multiplier configured for {asset.risk_level.value} "
                f"(asset '{asset.id}')."
            ) from None

        drift = asset.base_return_rate / DAYS_PER_YEAR
        noise = self._rng.uniform(-1.0, 1.0) * asset.volatility
        return (drift + noise) * multiplier

    def next_price(self, asset: Asset) -> float:
        """Next price for *asset*, never below ``PRICE_FLOOR``."""
        return max(PRICE_FLOOR, asset.current_price * (1 + self.price_change(asset)))

    def update_all(self, assets: list[Asset]) -> list[Asset]:
        """Return new ``Asset`` values with moved prices and extended history.

        The input assets are left untouched. History keeps the most recent
        ``HISTORY_LIMIT`` prices.
        """
        updated: list[Asset] = []
        for asset in assets:
            new_price = self.next_price(asset)
            history = [*asset.price_history, new_price][-HISTORY_LIMIT:]
            updated.append(
                asset.model_copy(update={"current_price": new_price, "price_history": history})
            )
            logger.debug("%s: %.4f -> %.4f", asset.id, asset.current_price, new_price)
        return updated
