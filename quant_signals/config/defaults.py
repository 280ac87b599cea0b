"""Default configuration parameters for the signal pipeline."""

from dataclasses import dataclass, field

# BTC/USD sample trades: [price, volume, timestamp]
DEFAULT_SCENARIO: tuple[tuple[float, float, int], ...] = (
    (96601.02, 1.23, 4500),
    (96601.08, 0.56, 4501),
    (96601.10, 0.22, 4502),
    (96601.09, 1.57, 4503),
)


@dataclass(frozen=True)
class LoggingParams:
    """Logging parameters."""
    level: str = "WARNING"
    format_json: bool = False
    include_timestamp: bool = True


@dataclass(frozen=True)
class ScenarioParams:
    """Demonstration scenario parameters."""
    title: str = "ILLUSTRATION: LOGGING BITCOIN/US DOLLAR TRANSACTIONS"
    risk_level: str = "HIGH"                 # Level reported after rendering
    observations: list = field(
        default_factory=lambda: [list(record) for record in DEFAULT_SCENARIO]
    )


@dataclass(frozen=True)
class RenderParams:
    """Console rendering parameters."""
    underline_char: str = "_"
    underline_width: int = 50


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    logging: LoggingParams
    scenario: ScenarioParams
    render: RenderParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        logging=LoggingParams(),
        scenario=ScenarioParams(),
        render=RenderParams(),
    )
