import copy
import unittest
from unittest.mock import patch

from tabletheme.backends import apply_theme, clear_borders
from tabletheme.grid.borders import Borders, HorizontalLine, VerticalLine
from tabletheme.grid.colors import AnsiColor, Color
from tabletheme.grid.config import Alignment, ColoredConfig, CompactConfig, CompactMultilineConfig
from tabletheme.style import ascii_, modern, rounded
from tabletheme.theme import Theme

X = HorizontalLine.full('x', 'x', 'x', 'x')
Y = HorizontalLine.full('y', 'y', 'y', 'y')
Z = HorizontalLine.full('z', 'z', 'z', 'z')

def colored_theme() -> Theme:
    theme = Theme.from_style(rounded())
    theme.set_border_color_top(Color.FG_RED)
    theme.set_border_color_vertical(Color.FG_BLUE)
    theme.insert_line_horizontal(3, HorizontalLine('='))
    theme.insert_line_vertical(2, VerticalLine('!'))
    return theme

def dirty_config() -> ColoredConfig:
    cfg = ColoredConfig(ascii_().get_borders())
    cfg.set_border_colors(Borders.filled(Color.FG_GREEN.into_ansi()))
    cfg.insert_horizontal_override(7, HorizontalLine('#'))
    cfg.insert_vertical_override(7, VerticalLine('#'))
    cfg.insert_horizontal_override_color(7, HorizontalLine(Color.FG_GREEN.into_ansi()))
    cfg.insert_vertical_override_color(7, VerticalLine(Color.FG_GREEN.into_ansi()))
    return cfg


class TestColoredBackend(unittest.TestCase):
    def test_apply(self):
        cfg = apply_theme(colored_theme(), ColoredConfig())
        assert isinstance(cfg, ColoredConfig)
        self.assertEqual(cfg.get_borders(), rounded().borders)
        self.assertEqual(cfg.get_border_colors(), Borders(top=Color.FG_RED.into_ansi(), vertical=Color.FG_BLUE.into_ansi()))
        self.assertEqual(cfg.get_horizontal_overrides(), {1: HorizontalLine('─', '┼', '├', '┤'), 3: HorizontalLine('=')})
        self.assertEqual(cfg.get_vertical_overrides(), {2: VerticalLine('!')})

    def test_apply_returns_same_object(self):
        cfg = ColoredConfig()
        self.assertIs(colored_theme().apply(cfg), cfg)

    def test_idempotent(self):
        once = apply_theme(colored_theme(), ColoredConfig())
        twice = apply_theme(colored_theme(), apply_theme(colored_theme(), ColoredConfig()))
        self.assertEqual(once, twice)

    def test_clear_before_set(self):
        theme_b = Theme.from_style(modern())
        theme_b.insert_line_vertical(1, VerticalLine('|'))
        a_then_b = apply_theme(theme_b, apply_theme(colored_theme(), ColoredConfig()))
        b_alone = apply_theme(theme_b, ColoredConfig())
        self.assertEqual(a_then_b, b_alone)

    def test_clears_prior_state(self):
        cfg = apply_theme(Theme(), dirty_config())
        assert isinstance(cfg, ColoredConfig)
        self.assertTrue(cfg.get_borders().is_empty())
        self.assertTrue(cfg.get_border_colors().is_empty())
        self.assertEqual(cfg.get_horizontal_overrides(), {})
        self.assertEqual(cfg.get_vertical_overrides(), {})
        self.assertIsNone(cfg.get_horizontal_override_color(7))
        self.assertIsNone(cfg.get_vertical_override_color(7))

    def test_clear_keeps_other_settings(self):
        cfg = dirty_config()
        cfg.alignment = Alignment.RIGHT
        clear_borders(cfg)
        self.assertEqual(cfg.alignment, Alignment.RIGHT)
        self.assertEqual(cfg.padding, {'top': 0, 'bottom': 0, 'left': 1, 'right': 1})
        fresh = ColoredConfig()
        fresh.alignment = Alignment.RIGHT
        self.assertEqual(cfg, fresh)

    def test_empty_colors_are_not_installed(self):
        cfg = dirty_config()
        with patch.object(cfg, 'set_border_colors', wraps=cfg.set_border_colors) as set_colors:
            apply_theme(Theme.from_style(modern()), cfg)
        set_colors.assert_not_called()
        self.assertTrue(cfg.get_border_colors().is_empty())

    def test_single_color_replaces_whole_color_set(self):
        cfg = dirty_config()
        theme = Theme()
        theme.set_border_color_left(Color.FG_RED)
        apply_theme(theme, cfg)
        self.assertEqual(cfg.get_border_colors(), Borders(left=Color.FG_RED.into_ansi()))

    def test_general_map_wins_over_line_one(self):
        theme = Theme(horizontal1=X)
        theme.set_lines_horizontal({1: Y, 2: Z})
        cfg = apply_theme(theme, ColoredConfig())
        assert isinstance(cfg, ColoredConfig)
        self.assertEqual(cfg.get_horizontal_override(1), Y)
        self.assertEqual(cfg.get_horizontal_override(2), Z)

        theme.remove_line_horizontal(1)
        cfg = apply_theme(theme, ColoredConfig())
        assert isinstance(cfg, ColoredConfig)
        self.assertEqual(cfg.get_horizontal_override(1), X)
        self.assertEqual(cfg.get_horizontal_override(2), Z)

    def test_empty_map_keeps_line_one(self):
        theme = Theme(horizontal1=X, horizontals={})
        cfg = apply_theme(theme, ColoredConfig())
        assert isinstance(cfg, ColoredConfig)
        self.assertEqual(cfg.get_horizontal_overrides(), {1: X})

    def test_out_of_range_overrides_are_installed(self):
        theme = Theme()
        theme.insert_line_vertical(500, VerticalLine('!'))
        cfg = apply_theme(theme, ColoredConfig())
        assert isinstance(cfg, ColoredConfig)
        self.assertEqual(cfg.get_vertical_override(500), VerticalLine('!'))

    def test_config_does_not_alias_theme(self):
        theme = colored_theme()
        cfg = apply_theme(theme, ColoredConfig())
        assert isinstance(cfg, ColoredConfig)
        theme.set_border_top('!')
        theme.insert_line_horizontal(9, HorizontalLine('!'))
        self.assertEqual(cfg.get_borders().top, '─')
        self.assertIsNone(cfg.get_horizontal_override(9))

    def test_round_trip(self):
        original = apply_theme(colored_theme(), ColoredConfig())
        restored = apply_theme(Theme.from_config(original), ColoredConfig())
        self.assertEqual(original, restored)

    def test_round_trip_drops_line_colors(self):
        original = ColoredConfig(modern().get_borders())
        original.insert_horizontal_override(2, HorizontalLine('='))
        original.insert_horizontal_override_color(2, HorizontalLine(AnsiColor('a', 'b')))
        restored = apply_theme(Theme.from_config(original), ColoredConfig())
        assert isinstance(restored, ColoredConfig)
        self.assertEqual(restored.get_horizontal_overrides(), original.get_horizontal_overrides())
        self.assertIsNone(restored.get_horizontal_override_color(2))

    def test_round_trip_matches_style_path_for_line_one(self):
        via_style = apply_theme(Theme.from_style(rounded()), ColoredConfig())
        via_config = apply_theme(Theme.from_config(copy.deepcopy(via_style)), ColoredConfig())
        self.assertEqual(via_style, via_config)


class TestCompactBackends(unittest.TestCase):
    def test_compact(self):
        cfg = CompactConfig().set_alignment(Alignment.CENTER)
        result = apply_theme(colored_theme(), cfg)
        assert isinstance(result, CompactConfig)
        self.assertEqual(result.get_borders(), rounded().borders)
        self.assertEqual(result.alignment, Alignment.CENTER)
        self.assertTrue(cfg.get_borders().is_empty())

    def test_compact_replaces_previous_borders(self):
        cfg = CompactConfig().set_borders(Borders.filled('#'))
        result = apply_theme(Theme(), cfg)
        assert isinstance(result, CompactConfig)
        self.assertTrue(result.get_borders().is_empty())

    def test_compact_multiline(self):
        cfg = CompactMultilineConfig(vertical_alignment=Alignment.BOTTOM)
        result = colored_theme().apply(cfg)
        self.assertIs(result, cfg)
        self.assertEqual(cfg.get_borders(), rounded().borders)
        self.assertEqual(cfg.vertical_alignment, Alignment.BOTTOM)

    def test_compact_updates_do_not_share_borders(self):
        cfg = CompactConfig().set_borders(Borders.filled('#'))
        updates = [cfg.set_alignment(Alignment.RIGHT), cfg.set_padding(2), cfg.set_margin(1)]
        for updated in updates:
            with self.subTest(updated=updated):
                self.assertIsNot(updated.borders, cfg.borders)
                updated.borders.set('top', '=')
                self.assertEqual(cfg.get_borders(), Borders.filled('#'))

    def test_compact_multiline_borders_are_a_copy(self):
        cfg = CompactMultilineConfig()
        cfg.set_borders(Borders.filled('#'))
        cfg.borders.set('top', '=')
        self.assertEqual(cfg.get_borders(), Borders.filled('#'))
        self.assertEqual(cfg.config.borders, Borders.filled('#'))

    def test_compact_ignores_colors_and_lines(self):
        chars_only = Theme.from_borders(colored_theme().chars)
        for cfg in (CompactConfig(), CompactMultilineConfig()):
            with self.subTest(config=type(cfg).__name__):
                full = apply_theme(colored_theme(), copy.deepcopy(cfg))
                plain = apply_theme(chars_only, copy.deepcopy(cfg))
                self.assertEqual(full, plain)

    def test_unsupported_config(self):
        with self.assertRaises(ValueError):
            apply_theme(Theme(), {})  # type: ignore[arg-type]
