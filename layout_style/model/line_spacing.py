"""Distance computations between two adjacent text lines."""
from __future__ import annotations

from numbers import Real
from typing import Optional, Protocol, Union

from layout_style.errors import InvalidArgumentError

SIMPLE_MODES = {
    "single": 1,
    "double": 2,
}
VALUED_MODES = ("fixed", "proportional", "leading")


class LineExtents(Protocol):
    """Anything with vertical extents relative to its baseline, e.g. a TextLine."""

    y_min: float
    y_max: float


class LineSpacing:
    """Defines how the distance between the baselines of two adjacent lines is determined.

    Modes:

    ``single``
        ``proportional`` with value 1.
    ``double``
        ``proportional`` with value 2.
    ``proportional``
        The y_min of the first line and the y_max of the second line are summed and multiplied
        with the value to get the baseline distance.
    ``fixed``
        The baseline distance is the value itself.
    ``leading``
        The baseline distance is the sum of the y_min of the first line, the y_max of the second
        line and the value.

    Instances are immutable.
    """

    __slots__ = ("_mode", "_value")

    def __init__(self, mode: Union[str, "LineSpacing"], value: Optional[float] = None) -> None:
        if isinstance(mode, LineSpacing):
            resolved_mode, resolved_value = mode.mode, mode.value
        elif not isinstance(mode, str):
            raise InvalidArgumentError(f"Invalid type {mode!r} for line spacing")
        elif mode in SIMPLE_MODES:
            resolved_mode, resolved_value = "proportional", SIMPLE_MODES[mode]
        elif mode in VALUED_MODES:
            if isinstance(value, bool) or not isinstance(value, Real):
                raise InvalidArgumentError(f"Need a valid number for {mode} line spacing")
            resolved_mode, resolved_value = mode, value
        else:
            raise InvalidArgumentError(f"Invalid type {mode!r} for line spacing")

        object.__setattr__(self, "_mode", resolved_mode)
        object.__setattr__(self, "_value", resolved_value)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def mode(self) -> str:
        return self._mode

    @property
    def value(self) -> float:
        return self._value

    def baseline_distance(self, line1: LineExtents, line2: LineExtents) -> float:
        """Return the distance between the baselines of ``line1`` and the following ``line2``."""
        if self._mode == "proportional":
            return (abs(line1.y_min) + line2.y_max) * self._value
        if self._mode == "fixed":
            return self._value
        return abs(line1.y_min) + line2.y_max + self._value

    def gap(self, line1: LineExtents, line2: LineExtents) -> float:
        """Return the blank space between the y_min of ``line1`` and the y_max of ``line2``."""
        if self._mode == "proportional":
            return (abs(line1.y_min) + line2.y_max) * (self._value - 1)
        if self._mode == "fixed":
            return self._value - abs(line1.y_min) - line2.y_max
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LineSpacing):
            return NotImplemented
        return (self._mode, self._value) == (other._mode, other._value)

    def __hash__(self) -> int:
        return hash((self._mode, self._value))

    def __repr__(self) -> str:
        return f"LineSpacing(mode={self._mode!r}, value={self._value!r})"
