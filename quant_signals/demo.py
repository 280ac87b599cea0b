"""
Demonstration entry point.

Builds a series from the configured BTC/USD sample trades, prints one line
per observation and logs the weighted signal for the configured risk level.
"""

import sys
from collections.abc import Iterable
from typing import Any, Optional, TextIO

import structlog

from .config.defaults import DEFAULT_SCENARIO
from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .data.parsers import parse_observation, parse_risk_level
from .errors import ConfigurationError
from .logging.config import configure_logging, get_signal_logger, log_signal_computation
from .rendering.stdout import StdoutRenderer
from .signals.series import SignalSeries

logger = structlog.get_logger(__name__)

__all__ = ["DEFAULT_SCENARIO", "build_series", "load_config", "run_demo", "main"]


def build_series(records: Iterable[Any]) -> SignalSeries:
    """Parse raw observation records and insert them in order."""
    series = SignalSeries()
    for record in records:
        series.insert(parse_observation(record))
    return series


def load_config(overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
    """
    Load and validate the merged configuration.

    Raises:
        ConfigurationError: The merged configuration is invalid
    """
    config = ConfigLoader.create().merge_config(overrides)

    errors = ConfigValidator.validate_config(config)
    if errors:
        raise ConfigurationError(
            f"Invalid configuration ({len(errors)} error(s))",
            errors=errors
        )

    return config


def run_demo(config: Optional[dict[str, Any]] = None,
             stream: Optional[TextIO] = None) -> SignalSeries:
    """
    Render the sample scenario to ``stream``.

    Args:
        config: Merged configuration; loaded and validated when omitted
        stream: Output stream, stdout when omitted

    Returns:
        The populated series

    Raises:
        ConfigurationError: The loaded configuration is invalid
    """
    if config is None:
        config = load_config()

    if not structlog.is_configured():
        _configure_from(config)

    scenario = config["scenario"]
    render_params = config["render"]

    series = build_series(scenario["observations"])

    renderer = StdoutRenderer(
        stream=stream,
        underline_char=render_params["underline_char"],
        underline_width=render_params["underline_width"],
    )
    renderer.write_header(scenario["title"])
    renderer.write_series(series)

    level = parse_risk_level(scenario["risk_level"])
    log_signal_computation(get_signal_logger(__name__), series.snapshot(level))

    return series


def _configure_from(config: dict[str, Any]) -> None:
    logging_params = config["logging"]
    configure_logging(
        level=logging_params["level"],
        format_json=logging_params["format_json"],
        include_timestamp=logging_params["include_timestamp"],
    )


def main() -> int:
    """Console entry point."""
    try:
        config = load_config()
    except ConfigurationError as e:
        configure_logging(level="ERROR")
        logger.error(
            "Configuration validation failed",
            errors=[f"{err.field}: {err.message} (got: {err.value})" for err in e.errors]
        )
        return 1

    _configure_from(config)
    run_demo(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
