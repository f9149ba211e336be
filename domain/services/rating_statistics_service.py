"""
Descriptive statistics over a list of player ratings.
"""

import statistics
from collections.abc import Sequence
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal


def _round_half_up(value: float) -> float:
    # Halves round away from zero, not to the even digit
    return float(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class RatingStatistics:
    """Summary of a rating list. All fields are 0 for an empty list."""

    min: float = 0
    max: float = 0
    average: float = 0
    median: float = 0
    count: int = 0


class RatingStatisticsService:
    """Pure domain service summarizing available ratings."""

    def get_rating_statistics(self, ratings: Sequence[float] | None) -> RatingStatistics:
        """
        Summarize a rating list.

        Args:
            ratings: Player ratings

        Returns:
            RatingStatistics with the average rounded to 2 decimals
        """
        if not ratings:
            return RatingStatistics()

        return RatingStatistics(
            min=min(ratings),
            max=max(ratings),
            average=_round_half_up(statistics.mean(ratings)),
            median=statistics.median(ratings),
            count=len(ratings),
        )
