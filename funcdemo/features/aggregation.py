"""Sum, mean and count aggregation over integer sequences"""

from dataclasses import dataclass
from typing import Iterable, Optional

from ..errors import InvalidInputError


def _as_int_list(sequence: Iterable[int]) -> list[int]:
    if sequence is None:
        raise InvalidInputError("Sequence is required", value=None, expected="iterable of int")

    values = list(sequence)
    for value in values:
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidInputError(
                f"Aggregation expects integers, got {type(value).__name__}",
                value=value,
                expected="int"
            )
    return values


def calculate_sum(sequence: Iterable[int]) -> int:
    """Exact integer sum. The empty sequence sums to 0."""
    return sum(_as_int_list(sequence))


def calculate_count(sequence: Iterable[int]) -> int:
    return len(_as_int_list(sequence))


def calculate_mean(sequence: Iterable[int]) -> Optional[float]:
    """
    Arithmetic mean of a sequence

    mean = sum / count

    Args:
        sequence: Integer values

    Returns:
        Mean as float or None if the sequence is empty
    """
    values = _as_int_list(sequence)
    if not values:
        return None
    return sum(values) / len(values)


@dataclass(frozen=True)
class Summary:
    """Summary statistics for an integer sequence"""
    count: int
    sum: int
    min: Optional[int] = None
    max: Optional[int] = None

    @property
    def mean(self) -> Optional[float]:
        """Mean value, or None when no values were summarized"""
        if self.count == 0:
            return None
        return self.sum / self.count

    def is_empty(self) -> bool:
        return self.count == 0

    def combine(self, other: "Summary") -> "Summary":
        """Merge two summaries as if their inputs had been concatenated"""
        mins = [m for m in (self.min, other.min) if m is not None]
        maxes = [m for m in (self.max, other.max) if m is not None]
        return Summary(
            count=self.count + other.count,
            sum=self.sum + other.sum,
            min=min(mins) if mins else None,
            max=max(maxes) if maxes else None,
        )


def summarize(sequence: Iterable[int]) -> Summary:
    """
    Collect count, sum, min and max in one pass

    Args:
        sequence: Integer values

    Returns:
        Summary; empty input gives count 0, sum 0 and no min/max/mean
    """
    values = _as_int_list(sequence)
    if not values:
        return Summary(count=0, sum=0)

    return Summary(
        count=len(values),
        sum=sum(values),
        min=min(values),
        max=max(values),
    )
