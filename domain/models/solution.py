"""
Solver option and solution domain models.
"""

from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class SquadGroup:
    """`count` players of the same `rating`."""

    rating: int
    count: int

    def to_dict(self) -> dict[str, int]:
        return {"rating": self.rating, "count": self.count}


def group_ratings(ratings: Iterable[int]) -> list[SquadGroup]:
    """Group individual ratings into (rating, count) groups, ascending by rating."""
    counts = Counter(ratings)
    return [SquadGroup(rating=rating, count=counts[rating]) for rating in sorted(counts)]


@dataclass(frozen=True)
class SquadSolution:
    """
    One way to complete a squad.

    Attributes:
        price: Total price of the players added (existing players are free)
        squad: Players added, grouped by rating
        actual_rating: Team rating of the completed squad
        total_rating_points: Sum of every rating in the completed squad
        efficiency: Rating points spent per point of team rating (lower is better)
        is_optimal: True when the fill came from the pre-calculated table
        fill: The added players as individual ratings
    """

    price: int
    squad: list[SquadGroup]
    actual_rating: int
    total_rating_points: int
    efficiency: float
    is_optimal: bool = False
    fill: tuple[int, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "price": self.price,
            "squad": [group.to_dict() for group in self.squad],
            "actual_rating": self.actual_rating,
            "total_rating_points": self.total_rating_points,
            "efficiency": self.efficiency,
            "is_optimal": self.is_optimal,
            "fill": list(self.fill),
        }


@dataclass
class SolverOutcome:
    """Solutions found by a solve, plus an optional explanation when there are none."""

    solutions: list[SquadSolution] = field(default_factory=list)
    message: str | None = None

    @property
    def solutions_found(self) -> int:
        return len(self.solutions)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "solutions_found": self.solutions_found,
            "solutions": [solution.to_dict() for solution in self.solutions],
        }
        if self.message:
            payload["message"] = self.message
        return payload


@dataclass(frozen=True)
class SolverOptions:
    """
    Every option a squad solve understands.

    `squad_size` and `max_solutions` default to None, meaning "use the
    configured default" (11 players, 50 solutions).
    """

    target_rating: int
    existing_ratings: Sequence[int] = ()
    available_ratings: Sequence[int] = ()
    price_by_rating: Mapping[int, int] = field(default_factory=dict)
    squad_size: int | None = None
    max_solutions: int | None = None
    sort_by_price: bool = True
    use_optimal_combinations: bool = True
