"""Tests for game configuration loading and validation."""

from pathlib import Path

import pytest
from pydantic import ValidationError

import models
from models.asset import AssetType, RiskLevel
from models.config import AssetSpec, GameConfig, default_config_path
from models.game_date import GameDate


def _spec(**overrides) -> dict:
    fields = dict(
        id="Apple",
        name="Apple Inc. (AAPL)",
        type="stock",
        risk_level="medium",
        base_return_rate=0.15,
        volatility=0.015,
        initial_price=230.0,
    )
    fields.update(overrides)
    return fields


def test_defaults():
    config = GameConfig()
    assert config.starting_money == 1000.0
    assert config.start_date == GameDate(year=2000, month=1, day=1)
    assert config.capital_gains_tax_rate == 0.15
    assert config.flat_withdrawal_tax_rate == 0.01
    assert config.risk_multipliers[RiskLevel.EXTREME] == 2.0
    assert [o.label for o in config.speed_options] == ["1x", "2x", "5x", "10x"]


def test_enums_accept_any_case():
    spec = AssetSpec(**_spec(type="CRYPTO", risk_level="Extreme"))
    assert spec.type is AssetType.CRYPTO
    assert spec.risk_level is RiskLevel.EXTREME


def test_catalog_risk_level_needs_multiplier():
    with pytest.raises(ValidationError, match="risk_multipliers"):
        GameConfig(risk_multipliers={"low": 0.2}, assets=[_spec()])


def test_duplicate_asset_ids_rejected():
    with pytest.raises(ValidationError, match="Duplicate"):
        GameConfig(assets=[_spec(), _spec()])


def test_non_positive_initial_price_rejected():
    with pytest.raises(ValidationError):
        AssetSpec(**_spec(initial_price=0))


def test_config_is_immutable():
    config = GameConfig()
    with pytest.raises(ValidationError):
        config.goal_amount = 1.0


def test_from_yaml(tmp_path: Path):
    path = tmp_path / "game.yaml"
    path.write_text(
        "starting_money: 250\n"
        "goal_amount: 500\n"
        "risk_multipliers: {low: 0.5}\n"
        "assets:\n"
        "  - {id: Bond, name: Bond, type: bond, risk_level: low,\n"
        "     base_return_rate: 0.04, volatility: 0.002, initial_price: 100}\n",
        encoding="utf-8",
    )
    config = GameConfig.from_yaml(path)

    assert config.starting_money == 250
    assert config.risk_multipliers == {RiskLevel.LOW: 0.5}
    assert config.assets[0].type is AssetType.BOND


def test_from_yaml_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        GameConfig.from_yaml(tmp_path / "nope.yaml")


def test_from_yaml_requires_mapping(tmp_path: Path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError, match="mapping"):
        GameConfig.from_yaml(path)


def test_default_config_loads():
    config = GameConfig.from_yaml(default_config_path())
    ids = [a.id for a in config.assets]
    assert ids == ["Apple", "US-Treasury-Bonds", "S&P-500", "Bitcoin-ETF", "NVIDIA"]
    assert all(a.risk_level in config.risk_multipliers for a in config.assets)


@pytest.mark.parametrize(
    "month, day",
    [(2, 29), (2, 31), (4, 31), (12, 32)],
)
def test_game_date_day_must_fit_month(month, day):
    with pytest.raises(ValidationError, match="out of range"):
        GameDate(year=2000, month=month, day=day)


def test_game_date_accepts_last_day_of_month():
    assert GameDate(year=2000, month=2, day=28).day == 28
    assert GameDate(year=2000, month=12, day=31).day == 31


def test_start_date_outside_month_rejected(tmp_path: Path):
    path = tmp_path / "game.yaml"
    path.write_text("start_date: {year: 2000, month: 2, day: 31}\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        GameConfig.from_yaml(path)


def test_default_config_ships_inside_models_package():
    path = default_config_path()
    assert path.parent == Path(models.__file__).resolve().parent
    assert path.is_file()
