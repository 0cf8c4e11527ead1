"""
Core constants, Decimal configuration and input conversion for margin_sim.

This module provides the foundations shared by the simulator and the report:
1. Decimal context: deterministic arithmetic for every currency amount
2. Constants: buying power multiplier, sampling rules, input defaults
3. Exceptions: SimulationError and its subclasses
4. Conversion helpers: to_decimal() and clamp_non_negative()

All functions in this module are pure.
"""

from __future__ import annotations
from decimal import Context, Decimal, InvalidOperation, ROUND_HALF_EVEN, localcontext
from typing import Any


# ============================================================================
# DECIMAL CONTEXT CONFIGURATION
# ============================================================================
#
# Simulation amounts are Decimal so that repeated subtraction of the sample
# step lands exactly on zero for exact multiples.
#
# Decimal contexts are per thread, so the simulation context is a private
# Context entered with localcontext() on every run. The caller's context is
# never modified.
#
# Context parameters:
#   - prec=50: Precision sufficient for financial calculations
#   - rounding=ROUND_HALF_EVEN: Banker's rounding (unbiased)
#
SIM_DECIMAL_CONTEXT = Context(prec=50, rounding=ROUND_HALF_EVEN)


def sim_context():
    """Enter the simulation Decimal context (a copy, local to this thread)."""
    return localcontext(SIM_DECIMAL_CONTEXT)


# ============================================================================
# CONSTANTS
# ============================================================================

ZERO = Decimal("0")
HUNDRED = Decimal("100")

# Buying power = excess liquidity * multiplier (4x for stocks at 25% margin).
BUYING_POWER_MULTIPLIER = Decimal("4")

# Sample step = max(MIN_STEP, initial market value / TARGET_SAMPLES).
MIN_STEP = Decimal("100")
TARGET_SAMPLES = Decimal("40")

# Default inputs and their input step granularities.
DEFAULT_MARKET_VALUE = Decimal("20000")
DEFAULT_LOAN = Decimal("5000")
DEFAULT_MARGIN_RATE = Decimal("30")  # percent

MARKET_VALUE_INPUT_STEP = Decimal("1000")
LOAN_INPUT_STEP = Decimal("1000")
MARGIN_RATE_INPUT_STEP = Decimal("5")


# ============================================================================
# EXCEPTIONS
# ============================================================================

class SimulationError(Exception):
    """Base exception for simulation errors."""
    pass


class InvalidInputError(SimulationError, ValueError):
    """Raised when an input cannot be interpreted as a finite number."""
    pass


# ============================================================================
# CONVERSION HELPERS
# ============================================================================

def to_decimal(value: Any, name: str = "value") -> Decimal:
    """
    Convert a numeric input to a finite Decimal.

    Floats go through str() so that 0.1 becomes Decimal("0.1") rather than
    its binary expansion.

    Raises:
        InvalidInputError: if value is None, a bool, non-numeric, NaN or infinite.
    """
    if value is None or isinstance(value, bool):
        raise InvalidInputError(f"{name} must be a number, got {value!r}")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise InvalidInputError(f"{name} must be a number, got {value!r}") from None
    if not result.is_finite():
        raise InvalidInputError(f"{name} must be finite, got {value!r}")
    return result


def clamp_non_negative(value: Decimal) -> Decimal:
    """Floor a Decimal at zero. Negative inputs are silently replaced by 0."""
    return value if value > ZERO else ZERO
