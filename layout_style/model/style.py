"""Style objects describing how text and graphics should be rendered."""
from __future__ import annotations

from functools import partial
from numbers import Real
from typing import Any, Callable, Dict, Optional, Sequence, Tuple, Union

from layout_style.config import LayoutConfiguration, get_configuration
from layout_style.errors import ConfigurationError
from layout_style.layout.line_wrapping import SimpleLineWrapping
from layout_style.layout.text_segmentation import SimpleTextSegmentation
from layout_style.model.dash_pattern import LineDashPattern
from layout_style.model.line_spacing import LineSpacing
from layout_style.utils.logger import get_logger
from layout_style.utils.units import design_units_to_points, percent_to_factor

LOGGER = get_logger(__name__)


class StyleProperty:
    """Descriptor for a style property with a lazily resolved default.

    Reading the attribute yields an accessor: called without arguments it returns the value,
    resolving and storing the default on first read; called with a value it stores the value
    and returns the style so that calls can be chained. Assigning to the attribute is the same
    as calling the accessor with a value.
    """

    def __init__(self, default: Callable[["Style"], Any], doc: str = "") -> None:
        self._default = default
        self.name = ""
        self.__doc__ = doc

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Optional["Style"], owner: type) -> Any:
        if instance is None:
            return self
        return partial(self.access, instance)

    def __set__(self, instance: "Style", value: Any) -> None:
        instance._values[self.name] = self.convert(value)

    def access(self, instance: "Style", *args: Any, **kwargs: Any) -> Any:
        if not args and not kwargs:
            return self.get(instance)
        instance._values[self.name] = self.convert(*args, **kwargs)
        return instance

    def convert(self, value: Any) -> Any:
        """Turn the setter arguments into the stored value."""
        return value

    def get(self, instance: "Style") -> Any:
        value = instance._values.get(self.name)
        if value is None:
            value = self._default(instance)
            instance._values[self.name] = value
        return value


class DashPatternProperty(StyleProperty):
    """Stores ``LineDashPattern.normalize(array, phase)``; accepts ``(array, phase=0)``."""

    def convert(self, array: Union[LineDashPattern, Sequence[float], float], phase: float = 0) -> Any:
        return LineDashPattern.normalize(array, phase)


class LineSpacingProperty(StyleProperty):
    """Always stores a new ``LineSpacing(mode, value)``; accepts ``(mode, value=None)``."""

    def convert(self, mode: Union[str, LineSpacing], value: Optional[float] = None) -> Any:
        return LineSpacing(mode, value)


def _constant(value: Any) -> Callable[["Style"], Any]:
    return lambda style: value


def _no_font(style: "Style") -> Any:
    raise ConfigurationError("No font set")


def _default_color(style: "Style") -> Any:
    color = style.config.default_color()
    LOGGER.debug("Resolved default color %s", color)
    return color


class Style:
    """Container for the properties that describe the appearance of text or graphics.

    Every property except ``font`` has a default value, so only the properties that should
    differ need to be set::

        style = Style(font=font, font_size=15, align="center")
        style.valign("center").text_indent(20)

    The ``scaled_*`` values are cached on first read. Changing font, font_size,
    character_spacing, word_spacing or horizontal_scaling afterwards requires a call to
    :meth:`clear_cache`.
    """

    font = StyleProperty(_no_font, "Font wrapper providing ascender, descender, scaling_factor and glyphs.")
    font_size = StyleProperty(_constant(10), "Font size, defaults to 10.")
    character_spacing = StyleProperty(_constant(0), "Character spacing, defaults to 0.")
    word_spacing = StyleProperty(_constant(0), "Word spacing, defaults to 0.")
    horizontal_scaling = StyleProperty(_constant(100), "Horizontal scaling in percent, defaults to 100.")
    text_rise = StyleProperty(_constant(0), "Vertical offset from the baseline, defaults to 0.")
    font_features = StyleProperty(lambda style: {}, "Font features mapped to whether they are applied.")
    text_rendering_mode = StyleProperty(_constant("fill"), "Text rendering mode, defaults to 'fill'.")
    fill_color = StyleProperty(_default_color, "Fill color, defaults to black of the default color space.")
    fill_alpha = StyleProperty(_constant(1), "Opacity of filling operations, defaults to 1.")
    stroke_color = StyleProperty(_default_color, "Stroke color, defaults to black of the default color space.")
    stroke_alpha = StyleProperty(_constant(1), "Opacity of stroking operations, defaults to 1.")
    stroke_width = StyleProperty(_constant(1), "Line width for stroking, defaults to 1.")
    stroke_cap_style = StyleProperty(_constant("butt"), "Line cap style, defaults to 'butt'.")
    stroke_join_style = StyleProperty(_constant("miter"), "Line join style, defaults to 'miter'.")
    stroke_miter_limit = StyleProperty(_constant(10.0), "Miter limit for 'miter' joins, defaults to 10.0.")
    align = StyleProperty(_constant("left"), "Horizontal alignment: left, center, right or justify.")
    valign = StyleProperty(_constant("top"), "Vertical alignment: top, center or bottom.")
    text_indent = StyleProperty(_constant(0), "Indentation of the first line, defaults to 0.")

    text_segmentation_algorithm = StyleProperty(
        lambda style: SimpleTextSegmentation(),
        "Callable splitting text fragments into boxes, glue and penalties.",
    )
    text_line_wrapping_algorithm = StyleProperty(
        lambda style: SimpleLineWrapping(),
        "Callable taking segmented items and an available width, returning text lines.",
    )
    stroke_dash_pattern = DashPatternProperty(
        lambda style: LineDashPattern(),
        "Dash pattern for stroking, set with (array, phase=0); defaults to a solid line.",
    )
    line_spacing = LineSpacingProperty(
        lambda style: LineSpacing("single"),
        "Spacing between consecutive lines, set with (mode, value=None); defaults to single.",
    )
    overlay_callback = StyleProperty(_constant(None), "Called with (canvas, box) after the box content is drawn.")
    underlay_callback = StyleProperty(_constant(None), "Called with (canvas, box) before the box content is drawn.")

    PROPERTY_NAMES: Tuple[str, ...] = ()

    def __init__(self, config: Optional[LayoutConfiguration] = None, **options: Any) -> None:
        self._config = config
        self._values: Dict[str, Any] = {}
        self._scaled: Dict[str, float] = {}
        self._scaled_item_widths: Dict[int, Tuple[Any, float]] = {}
        self.update(**options)

    @property
    def config(self) -> LayoutConfiguration:
        return self._config if self._config is not None else get_configuration()

    def update(self, **options: Any) -> "Style":
        """Set the given properties in order, as if each accessor was called with its value."""
        for name, value in options.items():
            if name not in self.PROPERTY_NAMES:
                raise TypeError(f"Unknown style property: {name}")
            getattr(self, name)(value)
        return self

    def copy(self, **overrides: Any) -> "Style":
        """Return a style with the same property values, empty caches and ``overrides`` applied."""
        duplicate = type(self)(config=self._config)
        duplicate._values = dict(self._values)
        features = duplicate._values.get("font_features")
        if isinstance(features, dict):
            duplicate._values["font_features"] = dict(features)
        return duplicate.update(**overrides)

    # ------------------------------------------------------------------
    # Scaled values
    def _cached(self, key: str, compute: Callable[[], float]) -> float:
        value = self._scaled.get(key)
        if value is None:
            value = self._scaled[key] = compute()
        return value

    @property
    def scaled_horizontal_scaling(self) -> float:
        return self._cached("horizontal_scaling", lambda: percent_to_factor(self.horizontal_scaling()))

    @property
    def scaled_font_size(self) -> float:
        return self._cached("font_size", lambda: self.font_size() / 1000 * self.scaled_horizontal_scaling)

    @property
    def scaled_character_spacing(self) -> float:
        return self._cached(
            "character_spacing", lambda: self.character_spacing() * self.scaled_horizontal_scaling
        )

    @property
    def scaled_word_spacing(self) -> float:
        return self._cached("word_spacing", lambda: self.word_spacing() * self.scaled_horizontal_scaling)

    @property
    def scaled_font_ascender(self) -> float:
        return self._cached("font_ascender", lambda: self._scaled_font_metric("ascender"))

    @property
    def scaled_font_descender(self) -> float:
        return self._cached("font_descender", lambda: self._scaled_font_metric("descender"))

    def _scaled_font_metric(self, metric: str) -> float:
        font = self.font()
        return design_units_to_points(getattr(font, metric) * font.scaling_factor, self.font_size())

    def scaled_item_width(self, item: Any) -> float:
        """Return the width of a glyph or kerning value adjusted by the spacing properties.

        Numbers are kerning values in glyph space where positive values reduce the width. Results
        are cached per item object for the lifetime of the style or until :meth:`clear_cache`.
        """
        entry = self._scaled_item_widths.get(id(item))
        if entry is not None:
            return entry[1]

        if isinstance(item, Real) and not isinstance(item, bool):
            width = -item * self.scaled_font_size
        else:
            width = item.width * self.scaled_font_size + self.scaled_character_spacing
            if item.apply_word_spacing:
                width += self.scaled_word_spacing

        # The item is kept alive so its id cannot be reused by another object.
        self._scaled_item_widths[id(item)] = (item, width)
        return width

    def clear_cache(self) -> None:
        """Clear all cached scaled values.

        Needs to be called if font, font_size, character_spacing, word_spacing or
        horizontal_scaling are changed after scaled values were read.
        """
        LOGGER.debug("Clearing %d cached item widths", len(self._scaled_item_widths))
        self._scaled.clear()
        self._scaled_item_widths.clear()

    def __repr__(self) -> str:
        values = ", ".join(f"{name}={value!r}" for name, value in self._values.items())
        return f"Style({values})"


Style.PROPERTY_NAMES = tuple(
    name for name, value in vars(Style).items() if isinstance(value, StyleProperty)
)
