"""
Result type for solver service return values.

Solves never raise to their caller. A validation problem or an unexpected
failure comes back as a failed Result; "no squad reaches the target" is a
successful Result with no solutions.

Usage:
    result = service.find_squad_solutions(target_rating=84, available_ratings=[83, 84, 85])

    if result.success:
        for solution in result.value.solutions:
            print(solution.price, solution.squad)
    else:
        print(f"Error ({result.error_code}): {result.error}")
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Either a value or an error.

    Attributes:
        success: Whether the operation succeeded
        value: The payload if successful
        error: Error message if failed
        error_code: Error code from services.error_codes if failed
    """

    success: bool
    value: T | None = None
    error: str | None = None
    error_code: str | None = None

    @classmethod
    def ok(cls, value: T | None = None) -> "Result[T]":
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: str, code: str | None = None) -> "Result[T]":
        return cls(success=False, error=error, error_code=code)

    def __bool__(self) -> bool:
        return self.success

    def unwrap(self) -> T:
        """
        Get the value.

        Raises:
            ValueError: If the result is a failure
        """
        if not self.success:
            raise ValueError(f"Cannot unwrap failed result: {self.error}")
        return self.value  # type: ignore

    def unwrap_or(self, default: T) -> T:
        """Get the value or a default if the result is a failure."""
        return self.value if self.success else default  # type: ignore

    def map(self, fn: Callable[[Any], "Result"]) -> "Result":
        """Apply fn to the value of a successful result; failures pass through unchanged."""
        if not self.success:
            return self
        return fn(self.value)
