"""
test_decline_scenarios.py - End-to-end decline scenarios

Walks realistic accounts through the full simulate -> summarize -> chart
path and checks the story each tells:
- A conservatively levered account survives most of the decline
- A highly levered account is called almost immediately
- An unlevered account is never called
- Raising the margin rate moves the call earlier
"""

import pytest
from decimal import Decimal

from margin_sim import (
    DEFAULT_MARKET_VALUE, DEFAULT_LOAN, DEFAULT_MARGIN_RATE,
    simulate, summarize, chart_series, reference_lines, format_summary,
)


class TestDeclineScenarios:
    """Scenario tests across leverage levels."""

    def test_default_inputs(self):
        assert DEFAULT_MARKET_VALUE == Decimal("20000")
        assert DEFAULT_LOAN == Decimal("5000")
        assert DEFAULT_MARGIN_RATE == Decimal("30")

    def test_low_leverage_account(self):
        result = simulate(100000, 10000, 25)
        summary = summarize(result)

        # Exact crossing at 10000 / 0.75 = 13333.33, sampled every 2500
        assert result.step == Decimal("2500")
        assert summary.margin_call_market_value == Decimal("12500")
        assert summary.drop_percentage == Decimal("87.5")
        assert summary.current_buying_power == Decimal("260000")

    def test_high_leverage_account(self):
        result = simulate(100000, 65000, 30)

        # Crossing at 65000 / 0.7 = 92857.14; first sample below is 92500
        assert result.margin_call_market_value == Decimal("92500")
        assert result.drop_percentage == Decimal("7.5")
        assert result.current_buying_power == Decimal("20000")

    def test_unlevered_account_never_called(self):
        result = simulate(50000, 0, 30)

        assert result.margin_call_point is None
        assert all(p.excess_liquidity == p.market_value * Decimal("0.7") for p in result.points)
        assert all(p.leverage == Decimal("1") for p in result.points if p.market_value > 0)

    @pytest.mark.parametrize("low_rate,high_rate", [(10, 30), (30, 50), (50, 90)])
    def test_higher_rate_calls_earlier(self, low_rate, high_rate):
        low = simulate(40000, 10000, low_rate)
        high = simulate(40000, 10000, high_rate)

        assert high.margin_call_market_value >= low.margin_call_market_value
        assert high.drop_percentage <= low.drop_percentage

    def test_report_pieces_agree(self):
        result = simulate(20000, 5000, 30)
        summary = summarize(result)
        series = chart_series(result)
        call_line, loan_line = reference_lines(result)

        assert call_line.market_value == summary.margin_call_market_value
        assert loan_line.market_value == summary.loan
        first_call = series['market_value'][series['margin_call']][0]
        assert first_call == float(summary.margin_call_market_value)
        assert "65.00%" in format_summary(result)

    def test_leverage_rises_until_equity_exhausted(self):
        result = simulate(20000, 5000, 30)
        levered = [p.leverage for p in result.points if p.equity > 0]

        assert levered == sorted(levered)
        assert all(p.leverage == 0 for p in result.points if p.equity <= 0)
