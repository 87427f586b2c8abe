import unittest

from tabletheme.grid.borders import Border, Borders, HorizontalLine, VerticalLine
from tabletheme.style import STYLES, Style, ascii_, markdown, modern, psql, re_structured_text, rounded


class TestStyle(unittest.TestCase):
    def test_builder_returns_new_style(self):
        base = Style()
        styled = base.set('top', '-')
        self.assertIsNone(base.borders.top)
        self.assertEqual(styled.borders.top, '-')
        self.assertIsNone(styled.remove('top').borders.top)

    def test_unknown_slot(self):
        with self.assertRaises(ValueError):
            Style().set('center', '+')

    def test_get_borders_is_a_copy(self):
        style = modern()
        borders = style.get_borders()
        borders.top = '='
        self.assertEqual(style.borders.top, '─')

    def test_frame(self):
        style = modern().frame(Border.filled('#'))
        self.assertEqual(style.borders.top_left, '#')
        self.assertEqual(style.borders.intersection, '┼')
        framed = style.remove_frame()
        self.assertIsNone(framed.borders.top)
        self.assertIsNone(framed.borders.bottom_right)
        self.assertEqual(framed.borders.vertical, '│')

    def test_remove_inner_lines(self):
        no_horizontal = ascii_().remove_horizontal()
        self.assertEqual((no_horizontal.borders.horizontal, no_horizontal.borders.left_intersection,
                          no_horizontal.borders.right_intersection, no_horizontal.borders.intersection), (None,) * 4)
        self.assertEqual(no_horizontal.borders.top_intersection, '+')

        no_vertical = ascii_().remove_vertical()
        self.assertEqual((no_vertical.borders.vertical, no_vertical.borders.top_intersection,
                          no_vertical.borders.bottom_intersection, no_vertical.borders.intersection), (None,) * 4)
        self.assertEqual(no_vertical.borders.left_intersection, '+')

    def test_declared_lines(self):
        line = HorizontalLine.full('=', '+', '|', '|')
        style = Style().set_horizontals([(2, line)]).set_verticals([(1, VerticalLine('!'))])
        self.assertEqual(style.get_horizontals(), ((2, line),))
        self.assertEqual(style.get_verticals(), ((1, VerticalLine('!')),))
        self.assertEqual(style.remove_horizontals().get_horizontals(), ())
        self.assertEqual(style.remove_verticals().get_verticals(), ())


class TestPresets(unittest.TestCase):
    def test_all_presets_build(self):
        for name, factory in STYLES.items():
            with self.subTest(name=name):
                self.assertIsInstance(factory(), Style)
        self.assertTrue(STYLES['empty']().borders.is_empty())

    def test_ascii(self):
        self.assertEqual(ascii_().borders, Borders(top='-', bottom='-', left='|', right='|',
                                                   top_left='+', top_right='+', bottom_left='+', bottom_right='+',
                                                   top_intersection='+', bottom_intersection='+', left_intersection='+',
                                                   right_intersection='+', intersection='+', horizontal='-', vertical='|'))

    def test_header_lines(self):
        test_cases = [
            ("rounded", rounded(), HorizontalLine('─', '┼', '├', '┤')),
            ("psql", psql(), HorizontalLine('-', '+', None, None)),
            ("markdown", markdown(), HorizontalLine('-', '|', '|', '|')),
            ("re_structured_text", re_structured_text(), HorizontalLine('=', ' ', None, None)),
        ]
        for description, style, expected in test_cases:
            with self.subTest(description=description):
                self.assertEqual(style.get_horizontals(), ((1, expected),))
                self.assertIsNone(style.borders.horizontal)
