"""Trade observation and risk level models"""

from dataclasses import dataclass
from enum import Enum


class RiskLevel(Enum):
    """Risk appetite applied to an aggregate signal."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def multiplier(self) -> float:
        """Fixed scalar applied to the summed dollar value."""
        return _RISK_MULTIPLIERS[self]


_RISK_MULTIPLIERS = {
    RiskLevel.LOW: 0.35,
    RiskLevel.MEDIUM: 0.67,
    RiskLevel.HIGH: 1.0,
}


@dataclass(frozen=True)
class Observation:
    """Single trade: unit price, quantity exchanged and logical trade time.

    Values are accepted as given. Negative prices, NaN volumes or
    decreasing timestamps are not rejected here.
    """
    price: float       # Unit price of the asset at trade time
    volume: float      # Quantity exchanged
    timestamp: int     # Logical trade time

    def get_price(self) -> float:
        return self.price

    def get_volume(self) -> float:
        return self.volume

    def get_time(self) -> int:
        return self.timestamp

    def dollar_value(self) -> float:
        """Dollar value of the trade (price * volume)"""
        return self.price * self.volume
