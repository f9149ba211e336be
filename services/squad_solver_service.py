"""
Squad solver service.

Public entry point for rating squads and finding the cheapest or most
efficient ways to complete them. Validation problems and unexpected failures
come back as failed Results; they never propagate to the caller.
"""

import logging
import numbers
from collections.abc import Mapping, Sequence
from dataclasses import replace
from typing import Any

from config import (
    DEFAULT_MAX_SOLUTIONS,
    MAX_PLAYER_RATING,
    MAX_SQUAD_SIZE,
    MIN_PLAYER_RATING,
    OPTIMAL_MAX_SOLUTIONS,
    SQUAD_SIZE,
    USE_OPTIMAL_COMBINATIONS,
)
from domain.models.inventory import Inventory
from domain.models.solution import SolverOptions, SolverOutcome
from domain.services.rating_statistics_service import RatingStatistics, RatingStatisticsService
from domain.services.squad_validation_service import SquadCheck, SquadValidationService
from rating_system import SquadRatingSystem
from services import error_codes
from services.interfaces import ISquadSolverService
from services.result import Result
from squad_solver import SquadSolver

logger = logging.getLogger("sbc_solver.services.squad_solver")


class SquadSolverService(ISquadSolverService):
    """
    Orchestrates squad solves.

    find_squad_solutions runs in this order:
    1. Empty squad, table target, large inventory: try the pre-calculated table
    2. Validate inputs
    3. Exhaustive search over the distinct ratings in stock
    """

    def __init__(
        self,
        solver: SquadSolver | None = None,
        rating_system: SquadRatingSystem | None = None,
        validation_service: SquadValidationService | None = None,
        statistics_service: RatingStatisticsService | None = None,
        default_squad_size: int | None = None,
        default_max_solutions: int | None = None,
        optimal_max_solutions: int | None = None,
        use_optimal_combinations: bool | None = None,
    ):
        """
        Initialize the service. Unset options fall back to config.

        Args:
            solver: Search engine
            rating_system: Rating formula
            validation_service: Input and squad validation
            statistics_service: Rating statistics
            default_squad_size: Squad size when a solve doesn't give one
            default_max_solutions: Solutions kept by exhaustive search
            optimal_max_solutions: Table combinations tried by find_optimal_solutions
            use_optimal_combinations: Global switch for the table fast path
        """
        self.rating_system = rating_system or SquadRatingSystem()
        self.solver = solver or SquadSolver(rating_system=self.rating_system)
        self.validation_service = validation_service or SquadValidationService(
            min_rating=MIN_PLAYER_RATING,
            max_rating=MAX_PLAYER_RATING,
            max_squad_size=MAX_SQUAD_SIZE,
            rating_system=self.rating_system,
        )
        self.statistics_service = statistics_service or RatingStatisticsService()
        self.default_squad_size = (
            default_squad_size if default_squad_size is not None else SQUAD_SIZE
        )
        self.default_max_solutions = (
            default_max_solutions if default_max_solutions is not None else DEFAULT_MAX_SOLUTIONS
        )
        self.optimal_max_solutions = (
            optimal_max_solutions if optimal_max_solutions is not None else OPTIMAL_MAX_SOLUTIONS
        )
        self.use_optimal_combinations = (
            use_optimal_combinations
            if use_optimal_combinations is not None
            else USE_OPTIMAL_COMBINATIONS
        )

    def calculate_team_rating(self, ratings: Sequence[int] | None) -> int:
        return self.rating_system.calculate_team_rating(ratings)

    def find_optimal_solutions(
        self,
        target_rating: int,
        available_ratings: Sequence[int] = (),
        price_by_rating: Mapping[int, int] | None = None,
        max_solutions: int | None = None,
    ) -> Result[SolverOutcome]:
        """
        Solutions from the pre-calculated table, for large inventories.

        Args:
            target_rating: Target squad rating (80-92 have table entries)
            available_ratings: Ratings of every available player
            price_by_rating: Price per rating
            max_solutions: Number of table combinations to try (default 10)

        Returns:
            Result.ok with the possible combinations sorted by rating points,
            or with a message when the target has no table entry
        """
        if max_solutions is None:
            max_solutions = self.optimal_max_solutions

        try:
            inventory = Inventory.from_ratings(available_ratings or ())
            solutions = self.solver.solve_from_table(
                target_rating, inventory, price_by_rating or {}, max_solutions
            )
        except Exception as exc:
            logger.exception(f"Table lookup failed for target {target_rating}")
            return Result.fail(str(exc) or "An error occurred", code=error_codes.SOLVER_ERROR)

        if solutions is None:
            return Result.ok(
                SolverOutcome(
                    message=(
                        f"No optimal combinations available for rating {target_rating}. "
                        "Use find_squad_solutions for custom search."
                    )
                )
            )
        return Result.ok(SolverOutcome(solutions=solutions))

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
    ) -> Result[SolverOutcome]:
        """
        Cheapest ways to complete a squad so it reaches target_rating.

        Args:
            target_rating: Minimum team rating
            existing_ratings: Players already in the squad
            available_ratings: Players that can be added, one entry per player
            price_by_rating: Price per rating (unpriced ratings cost 0)
            squad_size: Total squad size (default 11)
            max_solutions: Solutions to return (default 50; 0 returns all)
            sort_by_price: Sort by price, otherwise by total rating points
            use_optimal_combinations: Allow the pre-calculated table fast path

        Returns:
            Result.ok(SolverOutcome) or Result.fail with a validation/solver error
        """
        return self.solve(
            SolverOptions(
                target_rating=target_rating,
                existing_ratings=existing_ratings,
                available_ratings=available_ratings,
                price_by_rating=price_by_rating or {},
                squad_size=squad_size,
                max_solutions=max_solutions,
                sort_by_price=sort_by_price,
                use_optimal_combinations=use_optimal_combinations,
            )
        )

    def find_most_efficient_solutions(self, target_rating: int, **options) -> Result[SolverOutcome]:
        """Same as find_squad_solutions, sorted by total rating points first."""
        options["sort_by_price"] = False
        return self.find_squad_solutions(target_rating, **options)

    def solve(self, options: SolverOptions) -> Result[SolverOutcome]:
        """Run a squad solve from an explicit options object."""
        options = self._resolve_defaults(options)

        if self._wants_table(options):
            optimal = self.find_optimal_solutions(
                options.target_rating,
                options.available_ratings,
                options.price_by_rating,
                options.max_solutions,
            )
            if optimal.success and optimal.value.solutions_found > 0:
                return optimal
            logger.debug(f"No table solution for {options.target_rating}, falling back to search")

        report = self.validation_service.validate_inputs(
            target_rating=options.target_rating,
            existing_ratings=options.existing_ratings,
            available_ratings=options.available_ratings,
            squad_size=options.squad_size,
        )
        if not report.valid:
            return Result.fail(", ".join(report.errors), code=error_codes.VALIDATION_ERROR)

        try:
            solutions = self.solver.solve_exhaustive(
                target_rating=options.target_rating,
                existing_ratings=options.existing_ratings,
                inventory=Inventory.from_ratings(options.available_ratings),
                price_by_rating=options.price_by_rating,
                squad_size=options.squad_size,
                max_solutions=options.max_solutions,
                sort_by_price=options.sort_by_price,
            )
        except Exception as exc:
            logger.exception(f"Squad search failed for target {options.target_rating}")
            return Result.fail(str(exc) or "An error occurred", code=error_codes.SOLVER_ERROR)

        return Result.ok(SolverOutcome(solutions=solutions))

    def calculate_minimum_rating_needed(
        self,
        target_rating: int,
        existing_ratings: Sequence[int],
        remaining_slots: int,
        squad_size: int = 11,
    ) -> int:
        return self.rating_system.calculate_minimum_rating_needed(
            target_rating, existing_ratings, remaining_slots, squad_size
        )

    def validate_squad(self, ratings: Sequence[int], target_rating: int, squad_size: int = 11) -> SquadCheck:
        return self.validation_service.validate_squad(ratings, target_rating, squad_size)

    def get_rating_statistics(self, ratings: Sequence[int] | None) -> RatingStatistics:
        return self.statistics_service.get_rating_statistics(ratings)

    def _resolve_defaults(self, options: SolverOptions) -> SolverOptions:
        return replace(
            options,
            existing_ratings=() if options.existing_ratings is None else options.existing_ratings,
            available_ratings=() if options.available_ratings is None else options.available_ratings,
            price_by_rating=options.price_by_rating or {},
            squad_size=(
                options.squad_size if options.squad_size is not None else self.default_squad_size
            ),
            max_solutions=(
                options.max_solutions
                if options.max_solutions is not None
                else self.default_max_solutions
            ),
        )

    def _wants_table(self, options: SolverOptions) -> bool:
        if not (options.use_optimal_combinations and self.use_optimal_combinations):
            return False
        # Malformed inputs skip straight to validation
        if not isinstance(options.target_rating, numbers.Real) or isinstance(options.target_rating, bool):
            return False
        if not isinstance(options.existing_ratings, (list, tuple)):
            return False
        if not isinstance(options.available_ratings, (list, tuple)):
            return False
        return self.solver.should_use_table(
            options.target_rating, options.existing_ratings, options.available_ratings
        )


def result_to_response(result: Result[SolverOutcome]) -> dict[str, Any]:
    """
    Flatten a solve result into a plain response dict.

    Failures keep the same shape with no solutions, plus `error` and `error_code`.
    """
    if result.success:
        return result.value.to_dict()
    return {
        "error": result.error,
        "error_code": result.error_code,
        "solutions_found": 0,
        "solutions": [],
    }
