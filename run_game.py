#!/usr/bin/env python3
"""CLI entrypoint for a headless CapitalQuest game.

Usage::

    python run_game.py --ticks 365
    python run_game.py --config models/default_config.yaml --buy NVIDIA=500 --ticks 730 --seed 7
    python run_game.py --buy Apple=400 --buy Bitcoin-ETF=200 --speed 5 --realtime

The driver plays the scheduling role: it resumes the session, places any
``--buy`` orders before the first tick, then advances the game one tick at a
time. When the goal is reached the game is paused and the run stops.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time

from economy.calendar import format_date
from economy.session import GameSession
from economy.valuation import calculate_roi, find_asset, format_money
from models.config import GameConfig, default_config_path
from models.game import GameState


def _parse_buy(value: str) -> tuple[str, float]:
    asset_id, sep, amount = value.rpartition("=")
    if not sep or not asset_id:
        raise argparse.ArgumentTypeError(f"Expected ASSET_ID=AMOUNT, got '{value}'.")
    try:
        return asset_id, float(amount)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid amount in '{value}'.") from None


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run a headless CapitalQuest investment game.",
    )
    parser.add_argument(
        "--config",
        default=str(default_config_path()),
        type=str,
        help="Path to the YAML game configuration (default: the stock config bundled with the package).",
    )
    parser.add_argument(
        "--ticks",
        default=365,
        type=int,
        help="Number of ticks to advance (default: 365).",
    )
    parser.add_argument(
        "--buy",
        action="append",
        default=[],
        type=_parse_buy,
        metavar="ASSET_ID=AMOUNT",
        help="Invest AMOUNT in ASSET_ID before the first tick. May be repeated.",
    )
    parser.add_argument(
        "--seed",
        default=None,
        type=int,
        help="Seed for the price engine's random source.",
    )
    parser.add_argument(
        "--speed",
        default=None,
        type=float,
        help="Game speed multiplier (default: from config).",
    )
    parser.add_argument(
        "--realtime",
        action="store_true",
        help="Sleep the configured tick interval between ticks.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: INFO).",
    )
    return parser.parse_args()


def _setup_logging(level: str) -> None:
    """Configure root logger with a clean format."""
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )


def _log_summary(logger: logging.Logger, session: GameSession, state: GameState) -> None:
    logger.info(
        "%s | wallet %s | invested %s | net worth %s",
        format_date(state.current_date),
        format_money(session.wallet_balance(state)),
        format_money(session.invested_value(state)),
        format_money(session.net_worth(state)),
    )
    for idx, inv in enumerate(state.portfolio.investments):
        asset = find_asset(state.assets, inv.asset_id)
        if asset is None:
            logger.info("  [%d] %s: delisted", idx, inv.asset_id)
            continue
        logger.info(
            "  [%d] %s: %.4f shares @ %s, ROI %.2f%%",
            idx,
            inv.asset_id,
            inv.shares_owned,
            format_money(asset.current_price),
            calculate_roi(inv, asset.current_price),
        )


def main() -> None:
    args = _parse_args()
    _setup_logging(args.log_level)

    logger = logging.getLogger(__name__)
    logger.info("Loading config from '%s'...", args.config)

    config = GameConfig.from_yaml(args.config)
    rng = random.Random(args.seed) if args.seed is not None else None

    session = GameSession(config, rng=rng)
    state = session.initialize()
    if args.speed is not None:
        state = session.set_speed(state, args.speed)

    for asset_id, amount in args.buy:
        bought = session.buy(state, asset_id, amount)
        if bought is None:
            logger.warning("Order %s=%s was not applied.", asset_id, amount)
            continue
        state = bought

    state = session.resume(state)
    for tick in range(args.ticks):
        state = session.advance(state)
        if session.has_won(state):
            state = session.pause(state)
            logger.info(
                "Goal of %s reached after %d tick(s)!",
                format_money(config.goal_amount),
                tick + 1,
            )
            break
        if args.realtime:
            time.sleep(session.tick_interval_seconds(state))

    _log_summary(logger, session, state)


if __name__ == "__main__":
    main()
