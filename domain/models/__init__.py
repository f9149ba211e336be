"""
Domain models - pure data structures representing solver inputs and outputs.
"""

from domain.models.inventory import Inventory, count_ratings, get_unique_ratings
from domain.models.solution import (
    SolverOptions,
    SolverOutcome,
    SquadGroup,
    SquadSolution,
    group_ratings,
)

__all__ = [
    "Inventory",
    "SolverOptions",
    "SolverOutcome",
    "SquadGroup",
    "SquadSolution",
    "count_ratings",
    "get_unique_ratings",
    "group_ratings",
]
