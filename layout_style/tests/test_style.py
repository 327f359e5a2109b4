"""Tests for style property defaults, scaled values and caching."""
import unittest

from layout_style.config import LayoutConfiguration
from layout_style.errors import ConfigurationError, InvalidArgumentError
from layout_style.layout.line_wrapping import SimpleLineWrapping
from layout_style.layout.text_segmentation import SimpleTextSegmentation
from layout_style.model.color import Color, DeviceColorSpace
from layout_style.model.dash_pattern import LineDashPattern
from layout_style.model.elements import Glyph
from layout_style.model.font import SimpleFont
from layout_style.model.line_spacing import LineSpacing
from layout_style.model.style import Style


class CountingItem:
    """Glyph-like item recording how often its width is read."""

    def __init__(self, width: float, apply_word_spacing: bool = False) -> None:
        self._width = width
        self.apply_word_spacing = apply_word_spacing
        self.reads = 0

    @property
    def width(self) -> float:
        self.reads += 1
        return self._width

    def __eq__(self, other: object) -> bool:
        return isinstance(other, CountingItem) and other._width == self._width

    def __hash__(self) -> int:
        return hash(self._width)


class StylePropertiesTest(unittest.TestCase):
    """Ensure every property resolves its default and honours set values."""

    DEFAULTS = {
        "font_size": 10,
        "character_spacing": 0,
        "word_spacing": 0,
        "horizontal_scaling": 100,
        "text_rise": 0,
        "font_features": {},
        "text_rendering_mode": "fill",
        "fill_color": Color("DeviceGray", (0.0,)),
        "fill_alpha": 1,
        "stroke_color": Color("DeviceGray", (0.0,)),
        "stroke_alpha": 1,
        "stroke_width": 1,
        "stroke_cap_style": "butt",
        "stroke_join_style": "miter",
        "stroke_miter_limit": 10.0,
        "align": "left",
        "valign": "top",
        "text_indent": 0,
        "overlay_callback": None,
        "underlay_callback": None,
    }

    def test_defaults_returned_for_unset_properties(self) -> None:
        style = Style()
        for name, default in self.DEFAULTS.items():
            with self.subTest(property=name):
                self.assertEqual(getattr(style, name)(), default)

    def test_set_value_is_returned_and_setter_chains(self) -> None:
        style = Style()
        values = {
            "font_size": 12.5,
            "character_spacing": 0.5,
            "word_spacing": 3,
            "horizontal_scaling": 80,
            "text_rise": -2,
            "font_features": {"kern": True},
            "text_rendering_mode": "stroke",
            "fill_color": Color("DeviceRGB", (1.0, 0.0, 0.0)),
            "fill_alpha": 0.5,
            "stroke_color": Color("DeviceGray", (0.5,)),
            "stroke_alpha": 0.25,
            "stroke_width": 2,
            "stroke_cap_style": "round",
            "stroke_join_style": "bevel",
            "stroke_miter_limit": 4.0,
            "align": "justify",
            "valign": "bottom",
            "text_indent": 15,
        }
        for name, value in values.items():
            with self.subTest(property=name):
                self.assertIs(getattr(style, name)(value), style)
                self.assertEqual(getattr(style, name)(), value)

    def test_default_is_memoized_on_first_read(self) -> None:
        style = Style()
        features = style.font_features()
        features["liga"] = True
        self.assertIs(style.font_features(), features)
        self.assertEqual(Style().font_features(), {})

    def test_font_is_required(self) -> None:
        style = Style()
        with self.assertRaises(ConfigurationError):
            style.font()

        font = SimpleFont("Test", ascender=800, descender=-200)
        style.font(font)
        self.assertIs(style.font(), font)

    def test_none_value_falls_back_to_default(self) -> None:
        style = Style(font_size=20)
        style.font_size(None)
        self.assertEqual(style.font_size(), 10)

    def test_attribute_assignment_sets_value(self) -> None:
        style = Style()
        style.align = "right"
        self.assertEqual(style.align(), "right")

    def test_fluent_chaining(self) -> None:
        style = Style().font_size(15).align("center").valign("center")
        self.assertEqual(style.font_size(), 15)
        self.assertEqual(style.align(), "center")
        self.assertEqual(style.valign(), "center")

    def test_strategy_and_callback_properties(self) -> None:
        style = Style()
        self.assertIsInstance(style.text_segmentation_algorithm(), SimpleTextSegmentation)
        self.assertIsInstance(style.text_line_wrapping_algorithm(), SimpleLineWrapping)

        def segmentation(fragments):
            return []

        def overlay(canvas, box):
            return None

        style.text_segmentation_algorithm(segmentation).overlay_callback(overlay)
        self.assertIs(style.text_segmentation_algorithm(), segmentation)
        self.assertIs(style.overlay_callback(), overlay)
        self.assertIsNone(style.underlay_callback())


class StyleConstructionTest(unittest.TestCase):
    """Validate keyword construction, updates and copies."""

    def test_options_applied_through_setters(self) -> None:
        style = Style(font_size=15, align="center", line_spacing="double", stroke_dash_pattern=[2, 1])
        self.assertEqual(style.font_size(), 15)
        self.assertEqual(style.align(), "center")
        self.assertEqual(style.line_spacing(), LineSpacing("proportional", 2))
        self.assertEqual(style.stroke_dash_pattern(), LineDashPattern((2, 1)))

    def test_unknown_option_rejected(self) -> None:
        with self.assertRaises(TypeError):
            Style(font_colour="red")
        with self.assertRaises(TypeError):
            Style().update(scaled_font_size=1)

    def test_copy_shares_values_but_not_caches(self) -> None:
        style = Style(font_size=10, font_features={"kern": True})
        self.assertAlmostEqual(style.scaled_font_size, 0.01)

        derived = style.copy(font_size=20)
        self.assertAlmostEqual(derived.scaled_font_size, 0.02)
        self.assertAlmostEqual(style.scaled_font_size, 0.01)

        derived.font_features()["liga"] = True
        self.assertEqual(style.font_features(), {"kern": True})

    def test_copy_keeps_configuration(self) -> None:
        config = LayoutConfiguration(default_color_space="DeviceRGB")
        derived = Style(config=config).copy()
        self.assertIs(derived.config, config)
        self.assertEqual(derived.fill_color(), Color("DeviceRGB", (0.0, 0.0, 0.0)))


class StyleCompoundPropertiesTest(unittest.TestCase):
    """Cover the dash pattern and line spacing accessors."""

    def test_stroke_dash_pattern_defaults_to_solid_line(self) -> None:
        style = Style()
        pattern = style.stroke_dash_pattern()
        self.assertTrue(pattern.is_solid)
        self.assertIs(style.stroke_dash_pattern(), pattern)

    def test_stroke_dash_pattern_is_normalized(self) -> None:
        style = Style()
        self.assertIs(style.stroke_dash_pattern([3, 1], 0), style)
        self.assertEqual(style.stroke_dash_pattern(), LineDashPattern.normalize([3, 1], 0))

        style.stroke_dash_pattern(5, 2)
        self.assertEqual(style.stroke_dash_pattern().to_operands(), ([5], 2))

        style.stroke_dash_pattern(0)
        self.assertTrue(style.stroke_dash_pattern().is_solid)

        with self.assertRaises(InvalidArgumentError):
            style.stroke_dash_pattern([-1, 2])

    def test_line_spacing_default_and_replacement(self) -> None:
        style = Style()
        original = style.line_spacing()
        self.assertEqual(original, LineSpacing("single"))

        self.assertIs(style.line_spacing("fixed", 12), style)
        replaced = style.line_spacing()
        self.assertIsNot(replaced, original)
        self.assertEqual((replaced.mode, replaced.value), ("fixed", 12))
        self.assertEqual((original.mode, original.value), ("proportional", 1))

    def test_line_spacing_instance_is_copied(self) -> None:
        spacing = LineSpacing("leading", 2)
        style = Style().line_spacing(spacing)
        self.assertIsNot(style.line_spacing(), spacing)
        self.assertEqual(style.line_spacing(), spacing)

    def test_line_spacing_attribute_assignment(self) -> None:
        spacing = LineSpacing("double")
        style = Style()
        style.line_spacing = spacing

        stored = style.line_spacing()
        self.assertIsInstance(stored, LineSpacing)
        self.assertIsNot(stored, spacing)
        self.assertEqual(stored, spacing)

        style.line_spacing = "single"
        self.assertEqual(style.line_spacing(), LineSpacing("proportional", 1))
        with self.assertRaises(InvalidArgumentError):
            style.line_spacing = "fixed"

    def test_stroke_dash_pattern_attribute_assignment(self) -> None:
        style = Style()
        style.stroke_dash_pattern = [3, 1]
        self.assertEqual(style.stroke_dash_pattern(), LineDashPattern((3, 1), 0))

        style.stroke_dash_pattern = 0
        self.assertTrue(style.stroke_dash_pattern().is_solid)
        with self.assertRaises(InvalidArgumentError):
            style.stroke_dash_pattern = [0, 0]

    def test_compound_setters_accept_keywords(self) -> None:
        style = Style().line_spacing("leading", value=2).stroke_dash_pattern([2], phase=1)
        self.assertEqual(style.line_spacing(), LineSpacing("leading", 2))
        self.assertEqual(style.stroke_dash_pattern().to_operands(), ([2], 1))

    def test_line_spacing_requires_value_for_valued_modes(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            Style().line_spacing("fixed")


class StyleColorDefaultsTest(unittest.TestCase):
    """Default colors come from the configured color space."""

    def test_default_color_space_from_configuration(self) -> None:
        config = LayoutConfiguration(default_color_space="DeviceCMYK")
        style = Style(config=config)
        self.assertEqual(style.stroke_color(), Color("DeviceCMYK", (0.0, 0.0, 0.0, 1.0)))

    def test_registered_color_space_overrides_default_black(self) -> None:
        class PaperGray(DeviceColorSpace):
            family = "DeviceGray"
            component_count = 1
            default_components = (0.2,)

        config = LayoutConfiguration()
        config.register_color_space("DeviceGray", PaperGray)
        self.assertEqual(Style(config=config).fill_color(), Color("DeviceGray", (0.2,)))

    def test_unknown_default_color_space(self) -> None:
        style = Style(config=LayoutConfiguration(default_color_space="Lab"))
        with self.assertRaises(ConfigurationError):
            style.fill_color()


class StyleScaledValuesTest(unittest.TestCase):
    """Check the scaled metrics and their caching contract."""

    def test_scaled_values(self) -> None:
        style = Style(font_size=12, character_spacing=2, word_spacing=4, horizontal_scaling=50)
        self.assertAlmostEqual(style.scaled_horizontal_scaling, 0.5)
        self.assertAlmostEqual(style.scaled_font_size, 0.006)
        self.assertAlmostEqual(style.scaled_character_spacing, 1.0)
        self.assertAlmostEqual(style.scaled_word_spacing, 2.0)

    def test_scaled_font_metrics(self) -> None:
        font = SimpleFont("Test", ascender=718, descender=-207)
        style = Style(font=font, font_size=12)
        self.assertAlmostEqual(style.scaled_font_ascender, 8.616)
        self.assertAlmostEqual(style.scaled_font_descender, -2.484)

    def test_scaled_font_metrics_apply_scaling_factor(self) -> None:
        font = SimpleFont("Test", ascender=1638, descender=-410, units_per_em=2048)
        style = Style(font=font, font_size=10)
        self.assertAlmostEqual(style.scaled_font_ascender, 1638 * (1000 / 2048) * 10 / 1000)
        self.assertAlmostEqual(style.scaled_font_descender, -410 * (1000 / 2048) * 10 / 1000)

    def test_scaled_font_metrics_require_font(self) -> None:
        style = Style()
        with self.assertRaises(ConfigurationError):
            style.scaled_font_ascender
        with self.assertRaises(ConfigurationError):
            style.scaled_font_descender

    def test_cached_values_survive_property_changes_until_cleared(self) -> None:
        style = Style()
        self.assertEqual(style.scaled_horizontal_scaling, 1.0)

        style.horizontal_scaling(50)
        self.assertEqual(style.scaled_horizontal_scaling, 1.0)

        style.clear_cache()
        self.assertEqual(style.scaled_horizontal_scaling, 0.5)
        self.assertEqual(style.horizontal_scaling(), 50)

    def test_each_scaled_value_stays_cached_until_cleared(self) -> None:
        other_font = SimpleFont("Other", ascender=900, descender=-300)
        cases = [
            ("font_size", 20, "scaled_font_size"),
            ("horizontal_scaling", 50, "scaled_font_size"),
            ("character_spacing", 3, "scaled_character_spacing"),
            ("word_spacing", 3, "scaled_word_spacing"),
            ("font", other_font, "scaled_font_ascender"),
            ("font", other_font, "scaled_font_descender"),
            ("font_size", 20, "scaled_font_ascender"),
            ("font_size", 20, "scaled_font_descender"),
        ]
        for name, value, scaled in cases:
            with self.subTest(property=name, scaled=scaled):
                style = Style(font=SimpleFont("Test", ascender=800, descender=-200), character_spacing=1, word_spacing=1)
                cached = getattr(style, scaled)

                getattr(style, name)(value)
                self.assertIs(getattr(style, scaled), cached)

                style.clear_cache()
                self.assertNotAlmostEqual(getattr(style, scaled), cached)

    def test_scaled_item_width_for_kerning_value(self) -> None:
        style = Style()
        self.assertAlmostEqual(style.scaled_item_width(3.5), -3.5 * style.scaled_font_size)

    def test_scaled_item_width_for_glyph(self) -> None:
        style = Style(font_size=10, character_spacing=0, word_spacing=2, horizontal_scaling=100)
        space = Glyph(" ", 500, apply_word_spacing=True)
        letter = Glyph("a", 500)
        self.assertAlmostEqual(style.scaled_item_width(space), 7.0)
        self.assertAlmostEqual(style.scaled_item_width(letter), 5.0)

    def test_scaled_item_width_cached_per_item_identity(self) -> None:
        style = Style(word_spacing=2)
        first = CountingItem(500, apply_word_spacing=True)
        second = CountingItem(500, apply_word_spacing=True)

        width = style.scaled_item_width(first)
        self.assertIs(style.scaled_item_width(first), width)
        self.assertEqual(first.reads, 1)

        self.assertEqual(style.scaled_item_width(second), width)
        self.assertEqual(second.reads, 1)

    def test_clear_cache_recomputes_item_widths(self) -> None:
        style = Style(word_spacing=2)
        glyph = Glyph(" ", 500, apply_word_spacing=True)
        self.assertAlmostEqual(style.scaled_item_width(glyph), 7.0)

        style.word_spacing(4)
        self.assertAlmostEqual(style.scaled_item_width(glyph), 7.0)

        style.clear_cache()
        self.assertAlmostEqual(style.scaled_item_width(glyph), 9.0)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
