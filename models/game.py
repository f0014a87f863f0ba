"""Aggregate game state owned by a single session."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from models.asset import Asset
from models.game_date import GameDate
from models.portfolio import PlayerPortfolio


class GameState(BaseModel):
    """Full snapshot of one game: portfolio, calendar, market, pacing.

    Every engine operation takes a ``GameState`` and returns a new one; a
    snapshot is never edited after construction.
    """

    model_config = ConfigDict(frozen=True)

    portfolio: PlayerPortfolio
    current_date: GameDate
    assets: list[Asset]
    game_speed: float = Field(gt=0)
    is_paused: bool = True
