#!/usr/bin/env python3
"""
Basic Usage Example - Quant Signals

This script demonstrates the core data model directly:
- Create trade observations
- Insert them into a SignalSeries
- Render each observation
- Compare the weighted signal across risk levels

Run: python examples/basic_usage.py
"""

from quant_signals import Observation, RiskLevel, SignalSeries, render
from quant_signals.logging import configure_logging


def main():
    """Run the basic usage example."""
    configure_logging(level="WARNING")

    print("🚀 Quant Signals - Basic Usage Example")
    print("=" * 50)
    print()

    print("1. Creating BTC/USD observations...")
    trades = [
        Observation(96601.02, 1.23, 4500),
        Observation(96601.08, 0.56, 4501),
        Observation(96601.10, 0.22, 4502),
        Observation(96601.09, 1.57, 4503),
    ]

    series = SignalSeries()
    for trade in trades:
        series.insert(trade)
    print(f"   Inserted {series.cardinality()} observations")
    print()

    print("2. Rendering series contents:")
    for observation in series.observations():
        print(f"   {render(observation)}")
    print()

    print("3. Weighted signal by risk level:")
    for level in RiskLevel:
        signal = series.weighted_signal(level)
        print(f"   {level.name:<6} (x{level.multiplier:.2f}): {signal:,.2f}")
    print()

    print("✅ Example completed successfully!")


if __name__ == "__main__":
    main()
