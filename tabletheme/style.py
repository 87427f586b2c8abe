from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Callable, Iterable

from tabletheme.grid.borders import Border, Borders, HorizontalLine, VerticalLine, check_slot

HorizontalLines = tuple[tuple[int, HorizontalLine[str]], ...]
VerticalLines = tuple[tuple[int, VerticalLine[str]], ...]


@dataclass(frozen=True)
class Style:
    """An immutable border builder.

    Every method returns a new Style. `horizontals` and `verticals` declare
    separators at fixed row/column indices, as (index, line) pairs.
    """
    borders: Borders[str] = field(default_factory=Borders)
    horizontals: HorizontalLines = ()
    verticals: VerticalLines = ()

    def get_borders(self) -> Borders[str]:
        return self.borders.copy()

    def get_horizontals(self) -> HorizontalLines:
        return self.horizontals

    def get_verticals(self) -> VerticalLines:
        return self.verticals

    def set(self, slot: str, c: str) -> Style:
        return self._with(**{check_slot(slot): c})

    def remove(self, slot: str) -> Style:
        return self._with(**{check_slot(slot): None})

    def frame(self, frame: Border[str]) -> Style:
        borders = self.get_borders()
        frame.apply_to(borders)
        return replace(self, borders=borders)

    def remove_frame(self) -> Style:
        return self.frame(Border())

    def remove_horizontal(self) -> Style:
        return self._with(horizontal=None, left_intersection=None, right_intersection=None, intersection=None)

    def remove_vertical(self) -> Style:
        return self._with(vertical=None, top_intersection=None, bottom_intersection=None, intersection=None)

    def remove_horizontals(self) -> Style:
        return replace(self, horizontals=())

    def remove_verticals(self) -> Style:
        return replace(self, verticals=())

    def set_horizontals(self, lines: Iterable[tuple[int, HorizontalLine[str]]]) -> Style:
        return replace(self, horizontals=tuple(lines))

    def set_verticals(self, lines: Iterable[tuple[int, VerticalLine[str]]]) -> Style:
        return replace(self, verticals=tuple(lines))

    def _with(self, **slots: str | None) -> Style:
        return replace(self, borders=replace(self.borders, **slots))


# Presets

def style(top: str | None = None, bottom: str | None = None, left: str | None = None, right: str | None = None,
          corners: tuple[str | None, ...] | None = None, intersections: tuple[str | None, ...] | None = None,
          horizontal: str | None = None, vertical: str | None = None,
          horizontals: HorizontalLines = ()) -> Style:
    # corners: top-left, top-right, bottom-left, bottom-right
    # intersections: top, bottom, left, right, center
    top_left, top_right, bottom_left, bottom_right = corners or (None,) * 4
    top_i, bottom_i, left_i, right_i, center = intersections or (None,) * 5
    borders = Borders(top=top, bottom=bottom, left=left, right=right,
                      top_left=top_left, top_right=top_right, bottom_left=bottom_left, bottom_right=bottom_right,
                      top_intersection=top_i, bottom_intersection=bottom_i, left_intersection=left_i,
                      right_intersection=right_i, intersection=center,
                      horizontal=horizontal, vertical=vertical)
    return Style(borders=borders, horizontals=horizontals)

def empty() -> Style:
    return Style()

def blank() -> Style:
    return style(vertical=' ')

def ascii_() -> Style:
    return style('-', '-', '|', '|', ('+', '+', '+', '+'), ('+', '+', '+', '+', '+'), '-', '|')

def ascii_rounded() -> Style:
    return style('-', '-', '|', '|', ('.', '.', "'", "'"), ('-', '-', None, None, None), None, '|')

def modern() -> Style:
    return style('─', '─', '│', '│', ('┌', '┐', '└', '┘'), ('┬', '┴', '├', '┤', '┼'), '─', '│')

def modern_rounded() -> Style:
    return style('─', '─', '│', '│', ('╭', '╮', '╰', '╯'), ('┬', '┴', '├', '┤', '┼'), '─', '│')

def sharp() -> Style:
    return style('─', '─', '│', '│', ('┌', '┐', '└', '┘'), ('┬', '┴', None, None, None), None, '│',
                 horizontals=((1, HorizontalLine.full('─', '┼', '├', '┤')),))

def rounded() -> Style:
    return style('─', '─', '│', '│', ('╭', '╮', '╰', '╯'), ('┬', '┴', None, None, None), None, '│',
                 horizontals=((1, HorizontalLine.full('─', '┼', '├', '┤')),))

def extended() -> Style:
    return style('═', '═', '║', '║', ('╔', '╗', '╚', '╝'), ('╦', '╩', '╠', '╣', '╬'), '═', '║')

def dots() -> Style:
    return style('.', '.', ':', ':', ('.', '.', ':', ':'), ('.', ':', ':', ':', ':'), '.', ':')

def psql() -> Style:
    return style(vertical='|', horizontals=((1, HorizontalLine('-', '+')),))

def markdown() -> Style:
    return style(left='|', right='|', vertical='|', horizontals=((1, HorizontalLine.full('-', '|', '|', '|')),))

def re_structured_text() -> Style:
    return style(top='=', bottom='=', intersections=(' ', ' ', None, None, None), vertical=' ',
                 horizontals=((1, HorizontalLine('=', ' ')),))

STYLES: dict[str, Callable[[], Style]] = {
    'empty': empty,
    'blank': blank,
    'ascii': ascii_,
    'ascii_rounded': ascii_rounded,
    'modern': modern,
    'modern_rounded': modern_rounded,
    'sharp': sharp,
    'rounded': rounded,
    'extended': extended,
    'dots': dots,
    'psql': psql,
    'markdown': markdown,
    're_structured_text': re_structured_text,
}
