"""
simulator.py - Margin Account Decline Simulation

Projects a single margin account through a synthetic linear decline in the
market value of its holdings, from the initial value down to zero, and finds
the first sampled point at which a margin call is triggered.

ARCHITECTURE (Pure Function Pattern):
=====================================

1. FROZEN DATACLASSES (explicit inputs and outputs):
   - SimulationInput: Clamped, Decimal-typed account inputs
   - SimulationPoint: One sample along the decline
   - SimulationResult: The full sequence plus summary facts

2. PURE CALCULATION FUNCTIONS (calculate_*):
   - Take all inputs explicitly as parameters
   - No hidden state, no caching
   - Example: calculate_point(mv, loan, rate) -> SimulationPoint

3. ENTRY POINT (simulate):
   - Normalizes the three raw inputs, generates the sequence, finds the
     margin call and builds the result

Key Formulas:
    equity = market_value - loan
    maintenance_margin = market_value * margin_rate
    excess_liquidity = max(0, equity - maintenance_margin)
    buying_power = excess_liquidity * 4
    leverage = market_value / equity (0 if equity <= 0)
    margin_call = equity < maintenance_margin
    step = max(100, initial_market_value / 40)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Optional, Sequence, Tuple
import logging

from .core import (
    ZERO, HUNDRED, BUYING_POWER_MULTIPLIER, MIN_STEP, TARGET_SAMPLES,
    clamp_non_negative, sim_context, to_decimal,
)

logger = logging.getLogger(__name__)


# ============================================================================
# FROZEN DATACLASSES
# ============================================================================

@dataclass(frozen=True, slots=True)
class SimulationInput:
    """
    Immutable, normalized simulation inputs.

    market_value and loan are floored at zero on construction. margin_rate is
    a fraction (0.30 for 30%) and is not clamped. Use from_percentage() to
    build from the percentage form a user types in.

    entered_market_value and entered_loan keep the amounts as given, before
    clamping, for display.
    """
    market_value: Decimal
    loan: Decimal
    margin_rate: Decimal
    entered_market_value: Decimal = field(init=False)
    entered_loan: Decimal = field(init=False)

    def __post_init__(self):
        """Convert to Decimal and clamp amounts at zero."""
        market_value = to_decimal(self.market_value, "market_value")
        loan = to_decimal(self.loan, "loan")
        object.__setattr__(self, 'entered_market_value', market_value)
        object.__setattr__(self, 'entered_loan', loan)
        object.__setattr__(self, 'market_value', clamp_non_negative(market_value))
        object.__setattr__(self, 'loan', clamp_non_negative(loan))
        object.__setattr__(self, 'margin_rate', to_decimal(self.margin_rate, "margin_rate"))

    @classmethod
    def from_percentage(cls, market_value: Any, loan: Any, margin_rate_pct: Any) -> SimulationInput:
        """Build inputs from a margin rate given in percent (30 -> 0.30)."""
        return cls(
            market_value=market_value,
            loan=loan,
            margin_rate=to_decimal(margin_rate_pct, "margin_rate") / HUNDRED,
        )

    @property
    def equity(self) -> Decimal:
        return self.market_value - self.loan

    @property
    def margin_rate_pct(self) -> Decimal:
        return self.margin_rate * HUNDRED

    @property
    def is_invalid(self) -> bool:
        """True when the loan exceeds the market value. Flagged, never raised."""
        return self.equity < ZERO or self.loan > self.market_value


@dataclass(frozen=True, slots=True)
class SimulationPoint:
    """One sample of the account at a given market value."""
    market_value: Decimal
    equity: Decimal
    maintenance_margin: Decimal
    excess_liquidity: Decimal
    buying_power: Decimal
    leverage: Decimal
    margin_call: bool


@dataclass(frozen=True, slots=True)
class SimulationResult:
    """
    Immutable result of a simulation run.

    points runs from the initial market value down toward zero, strictly
    decreasing. When no point triggers a margin call, margin_call_point is
    None and margin_call_market_value holds the sentinel 0, so the decline
    reads as a 100% drop to zero.
    """
    inputs: SimulationInput
    step: Decimal
    points: Tuple[SimulationPoint, ...]
    margin_call_point: Optional[SimulationPoint]
    margin_call_market_value: Decimal
    decline_amount: Decimal
    drop_percentage: Decimal
    current_buying_power: Decimal

    @property
    def is_invalid(self) -> bool:
        return self.inputs.is_invalid

    @property
    def has_margin_call(self) -> bool:
        return self.margin_call_point is not None


# ============================================================================
# PURE CALCULATION FUNCTIONS
# ============================================================================

def calculate_step(market_value: Decimal) -> Decimal:
    """
    Sample step for a decline starting at market_value.

    Large accounts get about TARGET_SAMPLES samples; small ones are sampled
    every MIN_STEP currency units.
    """
    return max(MIN_STEP, market_value / TARGET_SAMPLES)


def calculate_point(market_value: Decimal, loan: Decimal, margin_rate: Decimal) -> SimulationPoint:
    """
    Compute the account metrics at one market value.

    PURE FUNCTION - depends only on its three arguments.
    """
    equity = market_value - loan
    maintenance_margin = market_value * margin_rate
    excess_liquidity = max(ZERO, equity - maintenance_margin)
    if equity > ZERO:
        leverage = market_value / equity
    else:
        leverage = ZERO
    return SimulationPoint(
        market_value=market_value,
        equity=equity,
        maintenance_margin=maintenance_margin,
        excess_liquidity=excess_liquidity,
        buying_power=excess_liquidity * BUYING_POWER_MULTIPLIER,
        leverage=leverage,
        margin_call=equity < maintenance_margin,
    )


def generate_points(inputs: SimulationInput) -> Tuple[SimulationPoint, ...]:
    """
    Sample the account from the initial market value down toward zero.

    The step is fixed from the initial value. The last point is the smallest
    non-negative value reached by repeated subtraction, which is exactly zero
    only when the initial value is a multiple of the step.
    """
    step = calculate_step(inputs.market_value)
    points = []
    mv = inputs.market_value
    while mv >= ZERO:
        points.append(calculate_point(mv, inputs.loan, inputs.margin_rate))
        mv -= step
    return tuple(points)


def find_margin_call(points: Sequence[SimulationPoint]) -> Optional[SimulationPoint]:
    """Return the first point in sequence order with a margin call, or None."""
    for point in points:
        if point.margin_call:
            return point
    return None


def calculate_drop_percentage(market_value: Decimal, margin_call_market_value: Decimal) -> Decimal:
    """
    Percentage decline from market_value to margin_call_market_value.

    Returns 0 for a zero starting market value.
    """
    if market_value == ZERO:
        return ZERO
    return (market_value - margin_call_market_value) / market_value * HUNDRED


def calculate_buying_power(market_value: Decimal, loan: Decimal, margin_rate: Decimal) -> Decimal:
    """Instantaneous buying power: max(0, equity - maintenance margin) * 4."""
    excess = (market_value - loan) - market_value * margin_rate
    return max(ZERO, excess) * BUYING_POWER_MULTIPLIER


def calculate_margin_call_threshold(loan: Decimal, margin_rate: Decimal) -> Optional[Decimal]:
    """
    Exact market value at which equity equals maintenance margin.

    Solves mv - loan = mv * rate, giving loan / (1 - rate). Any market value
    below the threshold is in margin call. Returns None for rate >= 1, where
    no positive market value satisfies the requirement while a loan is
    outstanding.
    """
    cover = Decimal("1") - margin_rate
    if cover <= ZERO:
        return None
    return loan / cover


# ============================================================================
# ENTRY POINT
# ============================================================================

def run(inputs: SimulationInput) -> SimulationResult:
    """Simulate from already normalized inputs."""
    with sim_context():
        points = generate_points(inputs)
        margin_call_point = find_margin_call(points)
        if margin_call_point is not None:
            margin_call_value = margin_call_point.market_value
        else:
            margin_call_value = ZERO

        result = SimulationResult(
            inputs=inputs,
            step=calculate_step(inputs.market_value),
            points=points,
            margin_call_point=margin_call_point,
            margin_call_market_value=margin_call_value,
            decline_amount=inputs.market_value - margin_call_value,
            drop_percentage=calculate_drop_percentage(inputs.market_value, margin_call_value),
            current_buying_power=calculate_buying_power(
                inputs.market_value, inputs.loan, inputs.margin_rate),
        )
    logger.debug(
        f"Simulated mv={inputs.market_value} loan={inputs.loan} rate={inputs.margin_rate}: "
        f"{len(points)} points, margin call at {margin_call_value}, invalid={inputs.is_invalid}"
    )
    return result


def simulate(market_value: Any, loan: Any, margin_rate: Any) -> SimulationResult:
    """
    Project a margin account through a linear decline to zero.

    Args:
        market_value: Initial market value of holdings (negative -> 0)
        loan: Outstanding loan (negative -> 0)
        margin_rate: Maintenance margin rate in percent (30 means 30%)

    Returns:
        SimulationResult. Loan exceeding market value is reported through
        is_invalid, never raised.

    Raises:
        InvalidInputError: if an input is not a finite number.

    Example:
        result = simulate(20000, 5000, 30)
        result.margin_call_market_value  # Decimal("7000")
        result.drop_percentage           # Decimal("65")
    """
    with sim_context():
        inputs = SimulationInput.from_percentage(market_value, loan, margin_rate)
    return run(inputs)
