"""
Squad validation domain service.

Checks solver inputs and completed squads.
"""

import numbers
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from rating_system import SquadRatingSystem


@dataclass
class ValidationReport:
    """Outcome of checking solver inputs. Every failed check adds one message."""

    valid: bool
    errors: list[str] = field(default_factory=list)


@dataclass
class SquadCheck:
    """Outcome of checking whether a complete squad reaches a target rating."""

    valid: bool
    actual_rating: int | None
    target_rating: int
    message: str


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a rating
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


class SquadValidationService:
    """
    Pure domain service for input and squad validation.

    Responsibilities:
    - Validate solver inputs, collecting every problem rather than stopping at the first
    - Check whether a complete squad reaches its target rating
    """

    def __init__(
        self,
        min_rating: int = 45,
        max_rating: int = 99,
        max_squad_size: int = 23,
        rating_system: SquadRatingSystem | None = None,
    ):
        """
        Initialize the validation service.

        Args:
            min_rating: Lowest valid player or target rating
            max_rating: Highest valid player or target rating
            max_squad_size: Largest squad size accepted
            rating_system: Rating formula used by validate_squad
        """
        self.min_rating = min_rating
        self.max_rating = max_rating
        self.max_squad_size = max_squad_size
        self.rating_system = rating_system or SquadRatingSystem()

    def _is_rating(self, value: Any) -> bool:
        # NaN fails both comparisons and is rejected here
        return _is_number(value) and self.min_rating <= value <= self.max_rating

    def validate_inputs(
        self,
        target_rating: Any,
        existing_ratings: Any,
        available_ratings: Any,
        squad_size: Any,
    ) -> ValidationReport:
        """
        Validate the inputs of a squad solve.

        Args:
            target_rating: Desired squad rating
            existing_ratings: Ratings already in the squad
            available_ratings: Ratings that can be added
            squad_size: Total squad size

        Returns:
            ValidationReport listing every failed check
        """
        errors: list[str] = []

        if not self._is_rating(target_rating):
            errors.append(
                f"Target rating must be a number between {self.min_rating} and {self.max_rating}"
            )

        existing_is_list = isinstance(existing_ratings, (list, tuple))
        if not existing_is_list:
            errors.append("Existing ratings must be a list")
        else:
            for index, rating in enumerate(existing_ratings):
                if not self._is_rating(rating):
                    errors.append(f"Invalid rating at index {index}: {rating}")

        if not isinstance(available_ratings, (list, tuple)):
            errors.append("Available ratings must be a list")
        else:
            for index, rating in enumerate(available_ratings):
                if not self._is_rating(rating):
                    errors.append(f"Invalid available rating at index {index}: {rating}")

        squad_size_is_number = _is_number(squad_size)
        if not squad_size_is_number or not 1 <= squad_size <= self.max_squad_size:
            errors.append(f"Squad size must be a number between 1 and {self.max_squad_size}")

        if existing_is_list and squad_size_is_number and squad_size and len(existing_ratings) > squad_size:
            errors.append("Existing ratings exceed squad size")

        return ValidationReport(valid=not errors, errors=errors)

    def validate_squad(
        self,
        ratings: Sequence[int],
        target_rating: int,
        squad_size: int = 11,
    ) -> SquadCheck:
        """
        Check whether a complete squad reaches the target rating.

        A squad with the wrong number of players is rejected without rating it.
        """
        if len(ratings) != squad_size:
            return SquadCheck(
                valid=False,
                actual_rating=None,
                target_rating=target_rating,
                message=f"Squad must have exactly {squad_size} players",
            )

        actual_rating = self.rating_system.calculate_team_rating(ratings)
        valid = actual_rating >= target_rating

        if valid:
            message = f"Squad achieves target rating ({actual_rating} >= {target_rating})"
        else:
            message = f"Squad rating too low ({actual_rating} < {target_rating})"

        return SquadCheck(
            valid=valid,
            actual_rating=actual_rating,
            target_rating=target_rating,
            message=message,
        )
