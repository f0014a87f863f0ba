"""
CapitalQuest economy engine.

  - Calendar arithmetic on a fixed, leap-year-free month table
  - Stochastic price engine with injectable randomness
  - Portfolio ledger with withdrawal tax
  - Session facade with pause/resume/speed pacing and a win check
"""

from .calendar import format_date, increment_date
from .ledger import Ledger
from .pricing import PriceEngine, RandomSource
from .session import GameSession
from .tax import TaxCalculator
from .win import WinEvaluator

__all__ = [
    "format_date", "increment_date", "Ledger", "PriceEngine", "RandomSource",
    "GameSession", "TaxCalculator", "WinEvaluator",
]
