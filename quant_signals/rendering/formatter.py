"""Fixed-format text rendering of observations"""

from collections.abc import Iterable

from ..models.observation import Observation


def render(observation: Observation) -> str:
    """
    Render an observation as a single display line.

    Price and volume use two-decimal fixed point; the timestamp is
    left-filled with zeros to at least six characters, sign included, and
    never truncated.

    Example:
        Price: $96601.02 | Volume: 1.23 | Timestamp: 004500
    """
    return (
        f"Price: ${observation.price:.2f}"
        f" | Volume: {observation.volume:.2f}"
        f" | Timestamp: {observation.timestamp:0>6}"
    )


def render_lines(observations: Iterable[Observation]) -> list[str]:
    """Render every observation, preserving order."""
    return [render(observation) for observation in observations]
