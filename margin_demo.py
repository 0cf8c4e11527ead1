#!/usr/bin/env python3
"""
Margin Account Decline Demo

Walks the default account (market value $20,000, loan $5,000, 30%
maintenance margin) down to zero and shows where the margin call lands.

Key concepts:
- Equity = market value - loan
- Maintenance margin = market value * margin rate
- Excess liquidity floors at zero; buying power is 4x excess liquidity
- Margin call when equity drops below maintenance margin

Usage:
    python margin_demo.py [market_value loan margin_rate_pct]
"""

import sys

from margin_sim import (
    DEFAULT_MARKET_VALUE, DEFAULT_LOAN, DEFAULT_MARGIN_RATE,
    simulate, summarize, format_summary,
)


def main(argv):
    if len(argv) == 3:
        market_value, loan, margin_rate = argv
    else:
        market_value, loan, margin_rate = DEFAULT_MARKET_VALUE, DEFAULT_LOAN, DEFAULT_MARGIN_RATE

    result = simulate(market_value, loan, margin_rate)
    summary = summarize(result)

    print("=" * 70)
    print("MARGIN ACCOUNT ANALYSIS")
    print("=" * 70)

    print("\nInputs:")
    print(f"  Total Market Value: ${summary.market_value:,.2f}")
    print(f"  Loan Amount:        ${summary.entered_loan:,.2f}")
    print(f"  Account Equity:     ${summary.equity:,.2f}")
    print(f"  Margin Rate:        {summary.margin_rate_pct:.2f}%")
    if summary.margin_call_threshold is not None:
        print(f"  Exact call level:   ${summary.margin_call_threshold:,.2f}")

    print(f"\n{format_summary(result)}")

    print(f"\n{'Market Value':>14} {'Equity':>12} {'Maint.':>12} {'Excess':>12} {'Buy Power':>12} {'Lev':>6}")
    print("-" * 70)
    for point in result.points:
        flag = "  << CALL" if point is result.margin_call_point else ""
        print(
            f"{point.market_value:>14,.2f} {point.equity:>12,.2f} "
            f"{point.maintenance_margin:>12,.2f} {point.excess_liquidity:>12,.2f} "
            f"{point.buying_power:>12,.2f} {point.leverage:>6.2f}{flag}"
        )


if __name__ == "__main__":
    main(sys.argv[1:])
