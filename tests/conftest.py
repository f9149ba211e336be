"""
Pytest fixtures for tests.

Centralized constants and fixtures shared across the test suite.
"""

import pytest

from services.squad_solver_service import SquadSolverService
from squad_solver import SquadSolver


# =============================================================================
# CENTRALIZED CONSTANTS
# =============================================================================

PRICE_BY_RATING = {
    75: 200, 76: 250, 77: 300, 78: 350, 79: 400, 80: 450,
    81: 500, 82: 800, 83: 1000, 84: 2000, 85: 3000, 86: 4000,
    87: 5000, 88: 7000, 89: 9000,
}
"""Realistic market prices per rating."""


@pytest.fixture
def price_by_rating():
    return dict(PRICE_BY_RATING)


@pytest.fixture
def large_inventory():
    """100 players, enough to trigger the pre-calculated table for an empty squad."""
    return [83] * 15 + [82] * 10 + [81] * 50 + [84] * 25


@pytest.fixture
def solver_service():
    """Service with explicit defaults so tests don't depend on the environment."""
    return SquadSolverService(
        solver=SquadSolver(optimal_inventory_threshold=50),
        default_squad_size=11,
        default_max_solutions=50,
        optimal_max_solutions=10,
        use_optimal_combinations=True,
    )
