"""Signal aggregation over ordered observation series"""

from .series import ObservationView, SignalSeries, SignalSnapshot, risk_multiplier

__all__ = [
    "ObservationView",
    "SignalSeries",
    "SignalSnapshot",
    "risk_multiplier",
]
