"""
Inventory domain model.
"""

from collections import Counter
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


def count_ratings(ratings: Iterable[int]) -> dict[int, int]:
    """Count occurrences of each rating."""
    return dict(Counter(ratings))


def get_unique_ratings(ratings: Iterable[int]) -> list[int]:
    """Distinct ratings in ascending order."""
    return sorted(set(ratings))


@dataclass(frozen=True)
class Inventory:
    """
    Players available to fill a squad, counted per rating.

    This is a pure domain model: built once per solve and only read afterwards.
    """

    counts: Mapping[int, int] = field(default_factory=dict)

    def __post_init__(self):
        if any(count < 0 for count in self.counts.values()):
            raise ValueError("Inventory counts cannot be negative")
        # Freeze a private copy so callers can't change stock mid-solve
        object.__setattr__(self, "counts", MappingProxyType(dict(self.counts)))

    @classmethod
    def from_ratings(cls, ratings: Iterable[int]) -> "Inventory":
        """Build an inventory from a raw list of available player ratings."""
        return cls(count_ratings(ratings))

    @property
    def distinct_ratings(self) -> tuple[int, ...]:
        """Ratings with at least one player available, ascending."""
        return tuple(sorted(rating for rating, count in self.counts.items() if count > 0))

    def available(self, rating: int) -> int:
        """Number of players available at a rating."""
        return self.counts.get(rating, 0)

    def __len__(self) -> int:
        return sum(self.counts.values())
