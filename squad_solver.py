"""
SBC squad completion search.

Two strategies:
- Table lookup: pre-calculated fills for common targets (80-92), checked against stock
- Exhaustive search: every multiset of the remaining slots over the distinct ratings in stock
"""

import logging
from collections.abc import Mapping, Sequence

from config import OPTIMAL_INVENTORY_THRESHOLD
from domain.models.inventory import Inventory
from domain.models.solution import SquadSolution, group_ratings
from optimal_combinations import (
    OPTIMAL_RATING_RANGE,
    calculate_combination_points,
    combination_to_ratings,
    get_optimal_combinations,
    is_combination_possible,
)
from rating_system import SquadRatingSystem
from utils.multisets import count_multisets, iter_multisets

logger = logging.getLogger("sbc_solver.solver")


class SquadSolver:
    """
    Finds ways to complete a squad so it reaches a target rating.

    Stateless between calls: inputs come in, sorted solutions go out.
    """

    def __init__(
        self,
        rating_system: SquadRatingSystem | None = None,
        optimal_inventory_threshold: int | None = None,
    ):
        """
        Initialize the solver.

        Args:
            rating_system: Rating formula (default SquadRatingSystem)
            optimal_inventory_threshold: Inventories larger than this try the
                pre-calculated table before searching (default 50)
        """
        self.rating_system = rating_system or SquadRatingSystem()
        self.optimal_inventory_threshold = (
            optimal_inventory_threshold
            if optimal_inventory_threshold is not None
            else OPTIMAL_INVENTORY_THRESHOLD
        )

    def should_use_table(
        self,
        target_rating: int,
        existing_ratings: Sequence[int],
        available_ratings: Sequence[int],
    ) -> bool:
        """
        Decide whether the pre-calculated table is worth trying first.

        Only empty squads have table entries, and small inventories are cheap
        enough to search exhaustively.
        """
        low, high = OPTIMAL_RATING_RANGE
        return (
            len(existing_ratings) == 0
            and low <= target_rating <= high
            and len(available_ratings) > self.optimal_inventory_threshold
        )

    def solve_from_table(
        self,
        target_rating: int,
        inventory: Inventory,
        price_by_rating: Mapping[int, int],
        max_solutions: int,
    ) -> list[SquadSolution] | None:
        """
        Build solutions from the pre-calculated combinations for a target.

        The first `max_solutions` combinations are tried in table order and
        kept when the inventory can supply them.

        Returns:
            Solutions sorted by total rating points, or None when the table
            has no entry for the target
        """
        combinations = get_optimal_combinations(target_rating)
        if not combinations:
            return None

        solutions: list[SquadSolution] = []
        for combination in combinations[:max_solutions]:
            if not is_combination_possible(combination, inventory.counts):
                continue

            fill = combination_to_ratings(combination)
            actual_rating = self.rating_system.calculate_team_rating(fill)
            if actual_rating < target_rating:
                logger.debug(
                    f"Skipping table combination {combination}: rates {actual_rating} < {target_rating}"
                )
                continue

            total_rating_points = calculate_combination_points(combination)
            solutions.append(
                SquadSolution(
                    price=self.rating_system.calculate_price(fill, price_by_rating),
                    squad=group_ratings(fill),
                    actual_rating=actual_rating,
                    total_rating_points=total_rating_points,
                    efficiency=total_rating_points / target_rating,
                    is_optimal=True,
                    fill=tuple(sorted(fill)),
                )
            )

        solutions.sort(key=lambda s: s.total_rating_points)
        logger.info(
            f"Table lookup for {target_rating}: {len(solutions)} of "
            f"{min(len(combinations), max_solutions)} combinations possible"
        )
        return solutions

    def solve_exhaustive(
        self,
        target_rating: int,
        existing_ratings: Sequence[int],
        inventory: Inventory,
        price_by_rating: Mapping[int, int],
        squad_size: int,
        max_solutions: int | None,
        sort_by_price: bool = True,
    ) -> list[SquadSolution]:
        """
        Search every way to fill the remaining slots from the inventory.

        Args:
            target_rating: Minimum team rating of the completed squad
            existing_ratings: Players already in the squad
            inventory: Players available to add
            price_by_rating: Price per rating (missing ratings cost 0)
            squad_size: Total squad size
            max_solutions: Number of solutions to keep (None or <= 0 keeps all)
            sort_by_price: Sort by price then rating points, otherwise the reverse

        Returns:
            Sorted, truncated solutions
        """
        remaining_slots = squad_size - len(existing_ratings)

        if remaining_slots <= 0:
            return self._solve_full_squad(target_rating, existing_ratings)

        alphabet = inventory.distinct_ratings
        logger.debug(
            f"Searching {remaining_slots} slots over {len(alphabet)} distinct ratings "
            f"(at most {count_multisets(len(alphabet), remaining_slots)} candidates)"
        )

        solutions: list[SquadSolution] = []
        candidates = 0
        # Stock caps keep every fill within what the inventory holds
        for fill in iter_multisets(alphabet, remaining_slots, max_counts=inventory.counts):
            candidates += 1
            full_squad = [*existing_ratings, *fill]
            actual_rating = self.rating_system.calculate_team_rating(full_squad)
            if actual_rating < target_rating:
                continue

            total_rating_points = sum(full_squad)
            solutions.append(
                SquadSolution(
                    price=self.rating_system.calculate_price(fill, price_by_rating),
                    squad=group_ratings(fill),
                    actual_rating=actual_rating,
                    total_rating_points=total_rating_points,
                    efficiency=total_rating_points / max(actual_rating, 1),
                    fill=fill,
                )
            )

        if sort_by_price:
            solutions.sort(key=lambda s: (s.price, s.total_rating_points))
        else:
            solutions.sort(key=lambda s: (s.total_rating_points, s.price))

        logger.info(
            f"Exhaustive search for {target_rating}: {len(solutions)} solutions "
            f"from {candidates} candidates"
        )

        if max_solutions and max_solutions > 0:
            solutions = solutions[:max_solutions]
        return solutions

    def _solve_full_squad(
        self,
        target_rating: int,
        existing_ratings: Sequence[int],
    ) -> list[SquadSolution]:
        """Nothing left to add: the squad either already qualifies or it never will."""
        actual_rating = self.rating_system.calculate_team_rating(existing_ratings)
        if actual_rating < target_rating:
            return []

        total_rating_points = sum(existing_ratings)
        return [
            SquadSolution(
                price=0,
                squad=[],
                actual_rating=actual_rating,
                total_rating_points=total_rating_points,
                efficiency=total_rating_points / max(actual_rating, 1),
            )
        ]
