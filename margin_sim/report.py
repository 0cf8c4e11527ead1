"""
report.py - Consumer adapters for simulation results

Turns a SimulationResult into the pieces a front end needs to draw its
margin analysis screen:

- summarize(): summary card facts (equity, loan, buying power, margin call)
- chart_series(): numpy columns for the equity / maintenance margin /
  excess liquidity / buying power curves
- reference_lines(): margin call and loan markers on the market value axis
- validation_warning(), format_point(), format_summary(): display text

Nothing here changes the numbers produced by the simulator.
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List, Optional, Tuple

import numpy as np

from .core import ZERO, sim_context
from .simulator import SimulationPoint, SimulationResult, calculate_margin_call_threshold


# Columns exported by chart_series(), in order.
SERIES_FIELDS = (
    'market_value',
    'equity',
    'maintenance_margin',
    'excess_liquidity',
    'buying_power',
    'leverage',
)

REFERENCE_MARGIN_CALL = "Margin Call"
REFERENCE_LOAN = "Loan Amount"


@dataclass(frozen=True, slots=True)
class AccountSummary:
    """Headline facts about the account before any decline."""
    market_value: Decimal
    loan: Decimal
    entered_loan: Decimal
    equity: Decimal
    margin_rate_pct: Decimal
    current_buying_power: Decimal
    margin_call_market_value: Decimal
    decline_amount: Decimal
    drop_percentage: Decimal
    margin_call_threshold: Optional[Decimal]
    has_margin_call: bool
    is_invalid: bool


@dataclass(frozen=True, slots=True)
class ReferenceLine:
    """A vertical marker on the market value axis."""
    label: str
    market_value: Decimal


def summarize(result: SimulationResult) -> AccountSummary:
    """
    Collect the summary card values for a result.

    entered_loan is the loan as typed, before clamping; loan is the amount
    the simulation used.
    """
    inputs = result.inputs
    with sim_context():
        margin_rate_pct = inputs.margin_rate_pct
        threshold = calculate_margin_call_threshold(inputs.loan, inputs.margin_rate)
    return AccountSummary(
        market_value=inputs.market_value,
        loan=inputs.loan,
        entered_loan=inputs.entered_loan,
        equity=inputs.equity,
        margin_rate_pct=margin_rate_pct,
        current_buying_power=result.current_buying_power,
        margin_call_market_value=result.margin_call_market_value,
        decline_amount=result.decline_amount,
        drop_percentage=result.drop_percentage,
        margin_call_threshold=threshold,
        has_margin_call=result.has_margin_call,
        is_invalid=result.is_invalid,
    )


def chart_series(result: SimulationResult) -> Dict[str, np.ndarray]:
    """
    Export the point sequence as numpy columns.

    Rows keep sequence order (initial market value first). Plot against
    market_value with a reversed x axis so the decline reads left to right.
    Amount columns are float64; margin_call is a bool array.
    """
    series = {
        name: np.array([float(getattr(p, name)) for p in result.points], dtype=np.float64)
        for name in SERIES_FIELDS
    }
    series['margin_call'] = np.array([p.margin_call for p in result.points], dtype=bool)
    return series


def reference_lines(result: SimulationResult) -> Tuple[ReferenceLine, ...]:
    """Margin call and loan markers, in that order."""
    return (
        ReferenceLine(REFERENCE_MARGIN_CALL, result.margin_call_market_value),
        ReferenceLine(REFERENCE_LOAN, result.inputs.loan),
    )


def _money(amount: Decimal) -> str:
    if amount < ZERO:
        return f"-${-amount:,.2f}"
    return f"${amount:,.2f}"


def validation_warning(result: SimulationResult) -> Optional[str]:
    """
    Warning text for a loan exceeding the market value, or None.

    Shows the amounts as entered, so a negative market value reads as typed
    rather than as the clamped zero.
    """
    if not result.is_invalid:
        return None
    inputs = result.inputs
    return (
        f"Warning: Loan Amount ({_money(inputs.entered_loan)}) cannot exceed "
        f"Total Market Value ({_money(inputs.entered_market_value)})"
    )


def format_point(point: SimulationPoint) -> str:
    """Multi-line tooltip for one sample."""
    lines = [
        f"Market Value: {_money(point.market_value)}",
        f"Account Equity: {_money(point.equity)}",
        f"Maint. Margin: {_money(point.maintenance_margin)}",
    ]
    if point.excess_liquidity > ZERO:
        lines.append(f"Excess Liquidity: {_money(point.excess_liquidity)}")
    if point.buying_power > ZERO:
        lines.append(f"Buying Power: {_money(point.buying_power)}")
    if point.margin_call:
        lines.append("MARGIN CALL")
    return "\n".join(lines)


def format_summary(result: SimulationResult) -> str:
    """Banner text describing where the margin call lands."""
    lines: List[str] = []
    warning = validation_warning(result)
    if warning:
        lines.append(warning)
    lines.append(f"Current Buying Power: {_money(result.current_buying_power)}")
    lines.append(
        f"Margin Call Triggered at Market Value: {_money(result.margin_call_market_value)}"
    )
    lines.append(
        f"Market Value Drop Required: {result.drop_percentage:.2f}% "
        f"({_money(result.decline_amount)} decline)"
    )
    return "\n".join(lines)
