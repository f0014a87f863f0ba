"""Data models for the CapitalQuest economy engine.

The engine (``economy``) and the command-line driver both import from models.
"""

from models.asset import Asset, AssetType, RiskLevel
from models.config import AssetSpec, GameConfig, SpeedOption, default_config_path
from models.game import GameState
from models.game_date import GameDate
from models.portfolio import Investment, PlayerPortfolio, SellOutcome, WithdrawalResult

__all__ = [
    # asset
    "Asset",
    "AssetType",
    "RiskLevel",
    # config
    "AssetSpec",
    "GameConfig",
    "SpeedOption",
    "default_config_path",
    # game
    "GameState",
    "GameDate",
    # portfolio
    "Investment",
    "PlayerPortfolio",
    "SellOutcome",
    "WithdrawalResult",
]
