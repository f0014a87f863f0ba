"""Simulated calendar date."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Fixed month lengths; the game calendar has no leap years.
DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class GameDate(BaseModel):
    """Year/month/day on the game calendar (no leap years)."""

    model_config = ConfigDict(frozen=True)

    year: int
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1)

    @model_validator(mode="after")
    def _check_day_in_month(self) -> GameDate:
        month_length = DAYS_IN_MONTH[self.month - 1]
        if self.day > month_length:
            raise ValueError(
                f"Day {self.day} is out of range for month {self.month} "
                f"({month_length} days)."
            )
        return self
