"""
Record parsing module.

Converts raw mappings and sequences into observations and risk levels.
"""
from .parsers import parse_observation, parse_risk_level

__all__ = ["parse_observation", "parse_risk_level"]
