"""
Append-only observation series and risk-weighted signal aggregation.

The weighted signal is the risk multiplier applied to the sum of every
stored observation's dollar value. Summation always runs left to right in
insertion order so identical data yields bit-identical results.
"""

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Optional, Union

from ..models.observation import Observation, RiskLevel


def risk_multiplier(level: Any) -> float:
    """
    Resolve a risk level to its multiplier.

    Args:
        level: RiskLevel member

    Returns:
        Multiplier from the fixed table, or 0.0 for anything that is not
        a RiskLevel member
    """
    if isinstance(level, RiskLevel):
        return level.multiplier
    return 0.0


@dataclass(frozen=True)
class SignalSnapshot:
    """Weighted signal together with the inputs that produced it"""
    risk_level: RiskLevel
    multiplier: float
    cardinality: int
    total_dollar_value: float
    weighted_signal: float


class ObservationView(Sequence):
    """Read-only, live view over a series' observations in insertion order"""

    __slots__ = ("_items",)

    def __init__(self, items: list[Observation]):
        self._items = items

    def __getitem__(self, index: Union[int, slice]) -> Union[Observation, tuple[Observation, ...]]:
        if isinstance(index, slice):
            return tuple(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Observation]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"ObservationView({self._items!r})"


class SignalSeries:
    """Ordered, append-only collection of trade observations"""

    def __init__(self, observations: Optional[Iterable[Observation]] = None):
        self._series: list[Observation] = []
        self._view = ObservationView(self._series)

        if observations is not None:
            for observation in observations:
                self.insert(observation)

    def insert(self, observation: Observation) -> None:
        """Append an observation to the end of the series."""
        self._series.append(observation)

    def observations(self) -> ObservationView:
        """Read-only view of the stored observations in insertion order."""
        return self._view

    def cardinality(self) -> int:
        """Number of stored observations."""
        return len(self._series)

    def risk_multiplier(self, level: Any) -> float:
        """Multiplier for ``level``; 0.0 when the level is not recognised."""
        return risk_multiplier(level)

    def total_dollar_value(self) -> float:
        """Sum of dollar values, accumulated in insertion order."""
        total = 0.0
        for observation in self._series:
            total += observation.dollar_value()
        return total

    def weighted_signal(self, level: RiskLevel) -> float:
        """
        Compute the risk-weighted signal for the current contents.

        Args:
            level: Risk level selecting the multiplier

        Returns:
            multiplier * sum of dollar values, 0.0 for an empty series
        """
        multiplier = self.risk_multiplier(level)
        return multiplier * self.total_dollar_value()

    def snapshot(self, level: RiskLevel) -> SignalSnapshot:
        """Capture the weighted signal and its inputs for ``level``."""
        multiplier = self.risk_multiplier(level)
        total = self.total_dollar_value()
        return SignalSnapshot(
            risk_level=level,
            multiplier=multiplier,
            cardinality=len(self._series),
            total_dollar_value=total,
            weighted_signal=multiplier * total,
        )

    def __len__(self) -> int:
        return len(self._series)

    def __iter__(self) -> Iterator[Observation]:
        return iter(self._series)

    def __repr__(self) -> str:
        return f"SignalSeries(cardinality={len(self._series)})"
