"""
Quant Signals - Risk-Weighted Market Signal Pipeline

Collects individual trade observations into an ordered series and computes
a risk-weighted aggregate signal over the series' dollar values.
"""

from .models.observation import Observation, RiskLevel
from .rendering.formatter import render
from .signals.series import SignalSeries

__version__ = "0.1.0"
__author__ = "Quant Signals Team"

__all__ = ["Observation", "RiskLevel", "SignalSeries", "render"]
