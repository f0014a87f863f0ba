"""Game configuration models, loaded from YAML.

Configuration is read once when a session starts and is immutable afterwards;
the engine components receive the values they need from it explicitly.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, model_validator

from models.asset import AssetType, RiskLevel
from models.game_date import GameDate

_DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "default_config.yaml"


def default_config_path() -> Path:
    """Location of the stock game configuration shipped inside the package."""
    return _DEFAULT_CONFIG_PATH


class AssetSpec(BaseModel):
    """Catalog entry describing an asset at the start of a game."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    type: AssetType
    risk_level: RiskLevel
    base_return_rate: float
    volatility: float = Field(ge=0)
    initial_price: float = Field(gt=0)


class SpeedOption(BaseModel):
    """A selectable game speed, e.g. ``2x``."""

    model_config = ConfigDict(frozen=True)

    label: str
    multiplier: float = Field(gt=0)


def _default_risk_multipliers() -> dict[RiskLevel, float]:
    return {
        RiskLevel.LOW: 0.2,
        RiskLevel.MEDIUM: 0.3,
        RiskLevel.HIGH: 1.0,
        RiskLevel.EXTREME: 2.0,
    }


def _default_speed_options() -> list[SpeedOption]:
    return [SpeedOption(label=f"{n}x", multiplier=n) for n in (1, 2, 5, 10)]


class GameConfig(BaseModel):
    """Top-level configuration for a game session."""

    model_config = ConfigDict(frozen=True)

    starting_money: float = Field(default=1000.0, ge=0, description="Initial wallet balance.")
    goal_amount: float = Field(default=10_000.0, description="Net worth needed to win.")
    start_date: GameDate = Field(default_factory=lambda: GameDate(year=2000, month=1, day=1))
    default_game_speed: float = Field(default=10.0, gt=0)
    days_per_tick: int = Field(default=1, ge=0, description="Simulated days per tick.")
    capital_gains_tax_rate: float = Field(default=0.15, ge=0, le=1)
    flat_withdrawal_tax_rate: float = Field(default=0.01, ge=0, le=1)
    risk_multipliers: dict[RiskLevel, float] = Field(default_factory=_default_risk_multipliers)
    speed_options: list[SpeedOption] = Field(default_factory=_default_speed_options)
    tick_interval_ms: int = Field(
        default=1000,
        gt=0,
        description="Real-time milliseconds between ticks at 1x speed.",
    )
    assets: list[AssetSpec] = []

    @model_validator(mode="after")
    def _check_catalog(self) -> GameConfig:
        seen: set[str] = set()
        for spec in self.assets:
            if spec.id in seen:
                raise ValueError(f"Duplicate asset id in catalog: {spec.id}")
            seen.add(spec.id)
            if spec.risk_level not in self.risk_multipliers:
                raise ValueError(
                    f"Asset '{spec.id}' uses risk level {spec.risk_level.value} "
                    "which has no entry in risk_multipliers."
                )
        return self

    @classmethod
    def from_yaml(cls, path: str | Path) -> GameConfig:
        """Load and validate a ``GameConfig`` from a YAML file.

        Raises ``FileNotFoundError`` if the file does not exist and
        ``ValueError`` if the content is not a valid YAML mapping.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with path.open(encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)

        if not isinstance(raw, dict):
            raise ValueError(
                f"Expected a YAML mapping in {path}, got {type(raw).__name__}."
            )

        return cls(**raw)
