"""Device color spaces and the color values they produce."""
from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Tuple

from layout_style.errors import InvalidArgumentError


@dataclass(frozen=True, slots=True)
class Color:
    """A color value: the owning color space family plus its components in the range 0..1."""

    space: str
    components: Tuple[float, ...]


class DeviceColorSpace:
    """Common behaviour of the device color spaces."""

    family: str = ""
    component_count: int = 0
    default_components: Tuple[float, ...] = ()

    def default_color(self) -> Color:
        """Return the initial color of the space, i.e. black."""
        return Color(self.family, self.default_components)

    def color(self, *components: float) -> Color:
        """Return a color of this space, validating the number and range of components."""
        if len(components) != self.component_count:
            raise InvalidArgumentError(
                f"{self.family} needs {self.component_count} components, got {len(components)}"
            )
        for component in components:
            if isinstance(component, bool) or not isinstance(component, Real) or not 0 <= component <= 1:
                raise InvalidArgumentError(f"Invalid {self.family} color component: {component!r}")
        return Color(self.family, tuple(components))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class DeviceGray(DeviceColorSpace):
    family = "DeviceGray"
    component_count = 1
    default_components = (0.0,)


class DeviceRGB(DeviceColorSpace):
    family = "DeviceRGB"
    component_count = 3
    default_components = (0.0, 0.0, 0.0)


class DeviceCMYK(DeviceColorSpace):
    family = "DeviceCMYK"
    component_count = 4
    default_components = (0.0, 0.0, 0.0, 1.0)
