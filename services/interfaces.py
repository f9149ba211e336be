"""
Service layer interfaces (ABCs).

Usage:
    class MySolverService(ISquadSolverService):
        def find_squad_solutions(self, target_rating: int, ...) -> Result[SolverOutcome]:
            ...
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from domain.models.solution import SolverOptions, SolverOutcome
    from domain.services.rating_statistics_service import RatingStatistics
    from domain.services.squad_validation_service import SquadCheck
    from services.result import Result


class ISquadSolverService(ABC):
    """Interface for squad rating and squad completion."""

    @abstractmethod
    def calculate_team_rating(self, ratings: Sequence[int] | None) -> int:
        """Team rating of a (possibly partial) squad."""
        ...

    @abstractmethod
    def find_optimal_solutions(
        self,
        target_rating: int,
        available_ratings: Sequence[int] = (),
        price_by_rating: Mapping[int, int] | None = None,
        max_solutions: int | None = None,
    ) -> "Result[SolverOutcome]":
        """Solutions from the pre-calculated table only."""
        ...

    @abstractmethod
    def find_squad_solutions(
        self,
        target_rating: int,
        existing_ratings: Sequence[int] = (),
        available_ratings: Sequence[int] = (),
        price_by_rating: Mapping[int, int] | None = None,
        squad_size: int | None = None,
        max_solutions: int | None = None,
        sort_by_price: bool = True,
        use_optimal_combinations: bool = True,
    ) -> "Result[SolverOutcome]":
        """Cheapest (or most efficient) ways to complete a squad."""
        ...

    @abstractmethod
    def find_most_efficient_solutions(self, target_rating: int, **options) -> "Result[SolverOutcome]":
        """find_squad_solutions sorted by rating points instead of price."""
        ...

    @abstractmethod
    def solve(self, options: "SolverOptions") -> "Result[SolverOutcome]":
        """Run a squad solve from an explicit options object."""
        ...

    @abstractmethod
    def calculate_minimum_rating_needed(
        self,
        target_rating: int,
        existing_ratings: Sequence[int],
        remaining_slots: int,
        squad_size: int = 11,
    ) -> int:
        """Average rating the remaining players need."""
        ...

    @abstractmethod
    def validate_squad(self, ratings: Sequence[int], target_rating: int, squad_size: int = 11) -> "SquadCheck":
        """Check whether a complete squad reaches a target rating."""
        ...

    @abstractmethod
    def get_rating_statistics(self, ratings: Sequence[int] | None) -> "RatingStatistics":
        """Min, max, average, median and count of a rating list."""
        ...
