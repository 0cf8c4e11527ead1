"""
conftest.py - Shared pytest fixtures for margin_sim tests

Provides common fixtures used across unit, functional and conformance tests:
- The default account (market value 20000, loan 5000, 30% margin)
- An invalid account (loan above market value)
- A zero account
"""

import pytest

from margin_sim import (
    SimulationResult,
    DEFAULT_MARKET_VALUE, DEFAULT_LOAN, DEFAULT_MARGIN_RATE,
    simulate,
)


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def default_result() -> SimulationResult:
    """Default account: $20,000 market value, $5,000 loan, 30% margin."""
    return simulate(DEFAULT_MARKET_VALUE, DEFAULT_LOAN, DEFAULT_MARGIN_RATE)


@pytest.fixture
def invalid_result() -> SimulationResult:
    """Loan of $8,000 against $5,000 of holdings."""
    return simulate(5000, 8000, 30)


@pytest.fixture
def zero_result() -> SimulationResult:
    """Empty account."""
    return simulate(0, 0, 30)
