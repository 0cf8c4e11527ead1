"""
margin_sim - Margin Account Decline Simulator

Projects equity, maintenance margin, excess liquidity and buying power of a
margin account as the market value of its holdings falls to zero, and finds
where the margin call is triggered.

Usage:
    from margin_sim import simulate, summarize, format_summary

    result = simulate(20000, 5000, 30)   # market value, loan, margin rate %
    result.margin_call_market_value      # Decimal("7000")
    print(format_summary(result))
"""

# Core
from .core import (
    SimulationError,
    InvalidInputError,
    to_decimal,
    clamp_non_negative,
    SIM_DECIMAL_CONTEXT,
    sim_context,
    BUYING_POWER_MULTIPLIER,
    MIN_STEP,
    TARGET_SAMPLES,
    DEFAULT_MARKET_VALUE,
    DEFAULT_LOAN,
    DEFAULT_MARGIN_RATE,
    MARKET_VALUE_INPUT_STEP,
    LOAN_INPUT_STEP,
    MARGIN_RATE_INPUT_STEP,
)

# Simulator
from .simulator import (
    SimulationInput,
    SimulationPoint,
    SimulationResult,
    calculate_step,
    calculate_point,
    generate_points,
    find_margin_call,
    calculate_drop_percentage,
    calculate_buying_power,
    calculate_margin_call_threshold,
    run,
    simulate,
)

# Report adapters
from .report import (
    AccountSummary,
    ReferenceLine,
    SERIES_FIELDS,
    REFERENCE_MARGIN_CALL,
    REFERENCE_LOAN,
    summarize,
    chart_series,
    reference_lines,
    validation_warning,
    format_point,
    format_summary,
)

__all__ = [
    # Core
    'SimulationError', 'InvalidInputError', 'to_decimal', 'clamp_non_negative',
    'SIM_DECIMAL_CONTEXT', 'sim_context',
    'BUYING_POWER_MULTIPLIER', 'MIN_STEP', 'TARGET_SAMPLES',
    'DEFAULT_MARKET_VALUE', 'DEFAULT_LOAN', 'DEFAULT_MARGIN_RATE',
    'MARKET_VALUE_INPUT_STEP', 'LOAN_INPUT_STEP', 'MARGIN_RATE_INPUT_STEP',
    # Simulator
    'SimulationInput', 'SimulationPoint', 'SimulationResult',
    'calculate_step', 'calculate_point', 'generate_points', 'find_margin_call',
    'calculate_drop_percentage', 'calculate_buying_power',
    'calculate_margin_call_threshold', 'run', 'simulate',
    # Report
    'AccountSummary', 'ReferenceLine', 'SERIES_FIELDS',
    'REFERENCE_MARGIN_CALL', 'REFERENCE_LOAN',
    'summarize', 'chart_series', 'reference_lines', 'validation_warning',
    'format_point', 'format_summary',
]

__version__ = '1.0.0'
