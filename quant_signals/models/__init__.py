"""
Data models module.

Immutable value types for trade observations and risk levels.
"""
from .observation import Observation, RiskLevel

__all__ = ["Observation", "RiskLevel"]
