"""
Logging configuration and utilities for the signal pipeline.
"""
from .config import configure_logging, get_logger, get_signal_logger, log_signal_computation

__all__ = ["configure_logging", "get_logger", "get_signal_logger", "log_signal_computation"]
