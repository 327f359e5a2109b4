"""Library-wide configuration consulted when resolving style defaults."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

from layout_style.errors import ConfigurationError
from layout_style.model.color import Color, DeviceCMYK, DeviceColorSpace, DeviceGray, DeviceRGB
from layout_style.utils.logger import get_logger

LOGGER = get_logger(__name__)

DEFAULT_COLOR_SPACE = "DeviceGray"
DEFAULT_COLOR_SPACE_MAP: Dict[str, Callable[[], DeviceColorSpace]] = {
    "DeviceGray": DeviceGray,
    "DeviceRGB": DeviceRGB,
    "DeviceCMYK": DeviceCMYK,
}


@dataclass(slots=True)
class LayoutConfiguration:
    """Color-space registry plus the name of the space used for default colors."""

    default_color_space: str = DEFAULT_COLOR_SPACE
    color_space_map: Dict[str, Callable[[], DeviceColorSpace]] = field(
        default_factory=lambda: dict(DEFAULT_COLOR_SPACE_MAP)
    )

    def color_space(self, name: Optional[str] = None) -> DeviceColorSpace:
        """Instantiate the color space registered under ``name`` (or the default space)."""
        key = name or self.default_color_space
        factory = self.color_space_map.get(key)
        if factory is None:
            raise ConfigurationError(f"Unknown color space: {key}")
        return factory()

    def register_color_space(self, name: str, factory: Callable[[], DeviceColorSpace]) -> None:
        """Register (or replace) the factory used for the color space ``name``."""
        LOGGER.debug("Registering color space %s", name)
        self.color_space_map[name] = factory

    def default_color(self) -> Color:
        """Return the default color of the configured default color space."""
        return self.color_space().default_color()


GLOBAL_CONFIGURATION = LayoutConfiguration()


def get_configuration() -> LayoutConfiguration:
    """Return the process-wide configuration."""
    return GLOBAL_CONFIGURATION
