"""
helpers.py - Shared assertions for margin_sim tests
"""

from decimal import Decimal

from margin_sim import SimulationPoint


def assert_point(point: SimulationPoint, market_value, equity, maintenance_margin,
                 excess_liquidity, buying_power, margin_call: bool) -> None:
    """Check every amount field of a point against expected values."""
    assert point.market_value == Decimal(str(market_value))
    assert point.equity == Decimal(str(equity))
    assert point.maintenance_margin == Decimal(str(maintenance_margin))
    assert point.excess_liquidity == Decimal(str(excess_liquidity))
    assert point.buying_power == Decimal(str(buying_power))
    assert point.margin_call is margin_call
