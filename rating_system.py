"""
Squad rating formula for SBC (Squad Building Challenge) calculations.
"""

import math
from collections.abc import Iterable, Mapping, Sequence


class SquadRatingSystem:
    """
    Computes aggregate squad ratings the way the game does.

    Handles:
    - Team rating from up to 11 individual player ratings
    - Price of a set of players from a per-rating price table
    - Minimum rating needed for the remaining slots
    """

    # The game always rates a squad as if it had 11 players, padding empty slots with 0
    SQUAD_CAPACITY = 11

    @classmethod
    def calculate_team_rating(cls, ratings: Sequence[float] | None) -> int:
        """
        Calculate the team rating for a (possibly partial) squad.

        Formula:
            avg        = sum / 11
            correction = sum of (rating - avg) over players rated above avg
            rating     = floor(round_half_up(sum + correction) / 11)

        Everything is scaled by 11 so integer ratings never leave integer
        arithmetic and the half-up rounding is exact.

        Args:
            ratings: Individual player ratings (0-11 entries)

        Returns:
            Team rating, or 0 for an empty squad

        Raises:
            TypeError: If a rating is not numeric
            ValueError: If a rating is NaN
        """
        if not ratings:
            return 0

        capacity = cls.SQUAD_CAPACITY
        padded = list(ratings) + [0] * max(0, capacity - len(ratings))
        total = sum(padded)

        # 11 * correction: each player above average contributes 11 * rating - sum
        scaled_correction = sum(max(0, capacity * rating - total) for rating in padded)

        # round_half_up(total + scaled_correction / 11)
        adjusted = (2 * (capacity * total + scaled_correction) + capacity) // (2 * capacity)
        return int(adjusted // capacity)

    @staticmethod
    def calculate_price(ratings: Iterable[int], price_by_rating: Mapping[int, int] | None) -> int:
        """Total price for a set of ratings. Ratings without a price cost nothing."""
        price_by_rating = price_by_rating or {}
        return sum(price_by_rating.get(rating, 0) for rating in ratings)

    @classmethod
    def calculate_minimum_rating_needed(
        cls,
        target_rating: int,
        existing_ratings: Sequence[int],
        remaining_slots: int,
        squad_size: int = 11,
    ) -> int:
        """
        Average rating each remaining player needs for the squad sum to reach target * 11.

        The game rates against 11 players regardless of squad_size, so the
        argument is accepted for call-site symmetry only.

        Raises:
            ValueError: If remaining_slots is not positive
        """
        if remaining_slots <= 0:
            raise ValueError(f"remaining_slots must be positive, got {remaining_slots}")

        remaining_sum = target_rating * cls.SQUAD_CAPACITY - sum(existing_ratings)
        return math.ceil(remaining_sum / remaining_slots)
