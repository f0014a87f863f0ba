"""Game session: composes the calendar, price engine, ledger and win check.

The session holds the configuration and the engine components built from it;
it does not hold game state. Every operation takes a ``GameState`` snapshot
and returns a new one, so the caller (a UI or the command-line driver) owns
the current state and must serialize ticks against buys and sells.

Pacing is a two-state machine, paused and running. ``advance`` only moves
time while running; the game speed only tells the scheduler how often to
call ``advance`` (see ``tick_interval_seconds``).
"""

from __future__ import annotations

import logging
import math

from models.asset import Asset
from models.config import GameConfig
from models.game import GameState
from models.portfolio import PlayerPortfolio, WithdrawalResult
from economy import valuation
from economy.calendar import format_date, increment_date
from economy.ledger import Ledger
from economy.pricing import PriceEngine, RandomSource
from economy.tax import TaxCalculator
from economy.win import WinEvaluator

logger = logging.getLogger(__name__)


class GameSession:
    """Engine facade for one game, configured once at construction."""

    def __init__(self, config: GameConfig, rng: RandomSource | None = None) -> None:
        self._config = config
        self.price_engine = PriceEngine(config.risk_multipliers, rng)
        self.tax_calculator = TaxCalculator(
            config.capital_gains_tax_rate,
            config.flat_withdrawal_tax_rate,
        )
        self.ledger = Ledger(self.tax_calculator)
        self.win_evaluator = WinEvaluator(config.goal_amount)

    @property
    def config(self) -> GameConfig:
        return self._config

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def initialize(self) -> GameState:
        """Fresh game: starting wallet, start date, catalog prices, paused."""
        assets = [
            Asset(
                id=spec.id,
                name=spec.name,
                type=spec.type,
                risk_level=spec.risk_level,
                base_return_rate=spec.base_return_rate,
                volatility=spec.volatility,
                current_price=spec.initial_price,
                price_history=[spec.initial_price],
            )
            for spec in self._config.assets
        ]
        logger.info(
            "New game: $%.2f wallet, %d asset(s), goal $%.2f.",
            self._config.starting_money,
            len(assets),
            self._config.goal_amount,
        )
        return GameState(
            portfolio=PlayerPortfolio(wallet_balance=self._config.starting_money),
            current_date=self._config.start_date.model_copy(),
            assets=assets,
            game_speed=self._config.default_game_speed,
            is_paused=True,
        )

    def advance(self, state: GameState) -> GameState:
        """One tick: move the calendar and every asset price.

        A paused state is returned as-is.
        """
        if state.is_paused:
            return state

        new_date = increment_date(state.current_date, self._config.days_per_tick)
        new_assets = self.price_engine.update_all(state.assets)
        logger.debug("Tick -> %s", format_date(new_date))
        return state.model_copy(update={"current_date": new_date, "assets": new_assets})

    # ------------------------------------------------------------------
    # Pacing
    # ------------------------------------------------------------------

    @staticmethod
    def pause(state: GameState) -> GameState:
        if state.is_paused:
            return state
        return state.model_copy(update={"is_paused": True})

    @staticmethod
    def resume(state: GameState) -> GameState:
        if not state.is_paused:
            return state
        return state.model_copy(update={"is_paused": False})

    @staticmethod
    def set_speed(state: GameState, speed: float) -> GameState:
        """Change the speed multiplier; a non-positive or non-finite speed is ignored."""
        if not math.isfinite(speed) or speed <= 0:
            logger.warning("Ignoring invalid game speed %s.", speed)
            return state
        return state.model_copy(update={"game_speed": speed})

    def tick_interval_seconds(self, state: GameState) -> float:
        """Real-time delay between ticks at the state's current speed."""
        return self._config.tick_interval_ms / state.game_speed / 1000

    # ------------------------------------------------------------------
    # Trading
    # ------------------------------------------------------------------

    def buy(self, state: GameState, asset_id: str, amount: float) -> GameState | None:
        """Buy *amount* worth of *asset_id*; ``None`` if rejected."""
        asset = valuation.find_asset(state.assets, asset_id)
        if asset is None:
            logger.info("Buy rejected: unknown asset '%s'.", asset_id)
            return None

        portfolio = self.ledger.buy(state.portfolio, asset, amount, state.current_date)
        if portfolio is None:
            return None
        return state.model_copy(update={"portfolio": portfolio})

    def sell(
        self,
        state: GameState,
        investment_index: int,
        shares_to_sell: float | None = None,
    ) -> tuple[GameState, WithdrawalResult] | None:
        """Sell from the investment at *investment_index*.

        ``shares_to_sell=None`` sells the whole position. Returns ``None`` if
        the sell is rejected or the investment's asset is no longer listed.
        """
        investments = state.portfolio.investments
        if not 0 <= investment_index < len(investments):
            logger.info("Sell rejected: no investment at index %d.", investment_index)
            return None

        investment = investments[investment_index]
        asset = valuation.find_asset(state.assets, investment.asset_id)
        if asset is None:
            logger.info("Sell rejected: asset '%s' is not listed.", investment.asset_id)
            return None

        if shares_to_sell is None:
            shares_to_sell = investment.shares_owned

        outcome = self.ledger.sell(state.portfolio, investment_index, asset, shares_to_sell)
        if outcome is None:
            return None
        return state.model_copy(update={"portfolio": outcome.portfolio}), outcome.result

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @staticmethod
    def wallet_balance(state: GameState) -> float:
        return valuation.wallet_balance(state.portfolio)

    @staticmethod
    def invested_value(state: GameState) -> float:
        return valuation.invested_value(state.portfolio, state.assets)

    @staticmethod
    def net_worth(state: GameState) -> float:
        return valuation.net_worth(state.portfolio, state.assets)

    def has_won(self, state: GameState) -> bool:
        return self.win_evaluator.has_won(state.portfolio, state.assets)
