"""Line dash pattern used for stroking operations."""
from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import List, Sequence, Tuple, Union

from layout_style.errors import InvalidArgumentError


def _is_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


@dataclass(frozen=True, slots=True)
class LineDashPattern:
    """Alternating dash and gap lengths plus the phase at which the pattern starts.

    An empty array denotes a solid line.
    """

    array: Tuple[float, ...] = ()
    phase: float = 0

    def __post_init__(self) -> None:
        array = tuple(self.array)
        object.__setattr__(self, "array", array)

        if not _is_number(self.phase) or self.phase < 0:
            raise InvalidArgumentError(f"Invalid line dash pattern phase: {self.phase!r}")
        if any(not _is_number(length) or length < 0 for length in array):
            raise InvalidArgumentError(f"Invalid line dash pattern: {list(array)!r}")
        if array and sum(array) == 0:
            raise InvalidArgumentError("Line dash pattern lengths must not all be zero")

    @classmethod
    def normalize(
        cls,
        array: Union["LineDashPattern", Sequence[float], float],
        phase: float = 0,
    ) -> "LineDashPattern":
        """Return a pattern for the given pattern object, length sequence or single length.

        A single length of 0 stands for a solid line.
        """
        if isinstance(array, LineDashPattern):
            return array
        if isinstance(array, (list, tuple)):
            return cls(tuple(array), phase)
        if _is_number(array):
            return cls() if array == 0 else cls((array,), phase)
        raise InvalidArgumentError(f"Unknown line dash pattern: {array!r} / {phase!r}")

    @property
    def is_solid(self) -> bool:
        return not self.array

    def to_operands(self) -> Tuple[List[float], float]:
        """Return the pattern as ``(array, phase)`` operands for a content stream."""
        return list(self.array), self.phase
