"""Market asset models: asset classification and the live Asset record."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class _CaseInsensitiveEnum(str, Enum):
    """String enum that also accepts its values in any letter case."""

    @classmethod
    def _missing_(cls, value: object):
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.lower():
                    return member
        return None


class AssetType(_CaseInsensitiveEnum):
    STOCK = "Stock"
    BOND = "Bond"
    FUND = "Fund"
    CRYPTO = "Crypto"


class RiskLevel(_CaseInsensitiveEnum):
    """Qualitative volatility class; mapped to a numeric multiplier by config."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    EXTREME = "Extreme"


class Asset(BaseModel):
    """A tradeable synthetic asset and its recent price path.

    Only the price engine produces new ``Asset`` values; everything else
    treats the asset list as the authoritative price source.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    type: AssetType
    risk_level: RiskLevel
    base_return_rate: float = Field(description="Annualized drift as a decimal, e.g. 0.05.")
    volatility: float = Field(ge=0, description="Daily noise scale.")
    current_price: float = Field(gt=0)
    price_history: list[float] = []  # Most recent last
