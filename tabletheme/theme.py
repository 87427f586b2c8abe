from __future__ import annotations
from dataclasses import dataclass, field

from tabletheme.backends import Config, apply_theme
from tabletheme.grid.borders import Border, Borders, HorizontalLine, VerticalLine
from tabletheme.grid.colors import Color
from tabletheme.grid.config import ColoredConfig, CompactConfig, CompactMultilineConfig
from tabletheme.style import HorizontalLines, Style

def find_horizontal(lines: HorizontalLines, row: int) -> HorizontalLine[str] | None:
    found = None
    for index, line in lines:
        if index == row:
            found = line
    return found


@dataclass
class Theme:
    """A backend-agnostic description of a table's borders.

    `chars` and `colors` are independent; a slot may carry a character with
    no color. `horizontal1` holds the separator a Style declares at row 1. It
    is only consulted when the theme is applied, so `get_line_horizontal(1)`
    does not see it. `horizontals` and `verticals` are None until a line is
    set, which is not the same as an empty map.
    """
    chars: Borders[str] = field(default_factory=Borders)
    colors: Borders[Color] = field(default_factory=Borders)
    horizontal1: HorizontalLine[str] | None = None
    horizontals: dict[int, HorizontalLine[str]] | None = None
    verticals: dict[int, VerticalLine[str]] | None = None

    @staticmethod
    def new() -> Theme:
        return Theme()

    @staticmethod
    def from_style(style: Style) -> Theme:
        # Only the line declared at row 1 is carried over
        return Theme(chars=style.get_borders(), horizontal1=find_horizontal(style.get_horizontals(), 1))

    @staticmethod
    def from_borders(borders: Borders[str]) -> Theme:
        return Theme(chars=borders.copy())

    @staticmethod
    def from_config(cfg: Config) -> Theme:
        match cfg:
            case ColoredConfig():
                return Theme(
                    chars=cfg.get_borders(),
                    colors=cfg.get_border_colors().convert(Color.from_ansi),
                    horizontals=cfg.get_horizontal_overrides(),
                    verticals=cfg.get_vertical_overrides())
            case CompactConfig() | CompactMultilineConfig():
                return Theme.from_borders(cfg.get_borders())
            case _:
                raise ValueError(f"Unsupported config type: {type(cfg)}")

    def apply(self, cfg: Config) -> Config:
        return apply_theme(self, cfg)

    # Slots by name

    def set_border(self, slot: str, c: str) -> None:
        self.chars.set(slot, c)

    def get_border(self, slot: str) -> str | None:
        return self.chars.get(slot)

    def remove_border(self, slot: str) -> None:
        self.chars.set(slot, None)

    def set_border_color(self, slot: str, color: Color) -> None:
        self.colors.set(slot, color)

    def get_border_color(self, slot: str) -> Color | None:
        return self.colors.get(slot)

    def remove_border_color(self, slot: str) -> None:
        self.colors.set(slot, None)

    # Border characters

    def set_border_top(self, c: str) -> None: self.chars.top = c
    def set_border_bottom(self, c: str) -> None: self.chars.bottom = c
    def set_border_left(self, c: str) -> None: self.chars.left = c
    def set_border_right(self, c: str) -> None: self.chars.right = c
    def set_border_corner_top_left(self, c: str) -> None: self.chars.top_left = c
    def set_border_corner_top_right(self, c: str) -> None: self.chars.top_right = c
    def set_border_corner_bottom_left(self, c: str) -> None: self.chars.bottom_left = c
    def set_border_corner_bottom_right(self, c: str) -> None: self.chars.bottom_right = c
    def set_border_intersection_top(self, c: str) -> None: self.chars.top_intersection = c
    def set_border_intersection_bottom(self, c: str) -> None: self.chars.bottom_intersection = c
    def set_border_intersection_left(self, c: str) -> None: self.chars.left_intersection = c
    def set_border_intersection_right(self, c: str) -> None: self.chars.right_intersection = c
    def set_border_intersection(self, c: str) -> None: self.chars.intersection = c
    def set_border_horizontal(self, c: str) -> None: self.chars.horizontal = c
    def set_border_vertical(self, c: str) -> None: self.chars.vertical = c

    def get_border_top(self) -> str | None: return self.chars.top
    def get_border_bottom(self) -> str | None: return self.chars.bottom
    def get_border_left(self) -> str | None: return self.chars.left
    def get_border_right(self) -> str | None: return self.chars.right
    def get_border_corner_top_left(self) -> str | None: return self.chars.top_left
    def get_border_corner_top_right(self) -> str | None: return self.chars.top_right
    def get_border_corner_bottom_left(self) -> str | None: return self.chars.bottom_left
    def get_border_corner_bottom_right(self) -> str | None: return self.chars.bottom_right
    def get_border_intersection_top(self) -> str | None: return self.chars.top_intersection
    def get_border_intersection_bottom(self) -> str | None: return self.chars.bottom_intersection
    def get_border_intersection_left(self) -> str | None: return self.chars.left_intersection
    def get_border_intersection_right(self) -> str | None: return self.chars.right_intersection
    def get_border_intersection(self) -> str | None: return self.chars.intersection
    def get_border_horizontal(self) -> str | None: return self.chars.horizontal
    def get_border_vertical(self) -> str | None: return self.chars.vertical

    def remove_border_top(self) -> None: self.chars.top = None
    def remove_border_bottom(self) -> None: self.chars.bottom = None
    def remove_border_left(self) -> None: self.chars.left = None
    def remove_border_right(self) -> None: self.chars.right = None
    def remove_border_corner_top_left(self) -> None: self.chars.top_left = None
    def remove_border_corner_top_right(self) -> None: self.chars.top_right = None
    def remove_border_corner_bottom_left(self) -> None: self.chars.bottom_left = None
    def remove_border_corner_bottom_right(self) -> None: self.chars.bottom_right = None
    def remove_border_intersection_top(self) -> None: self.chars.top_intersection = None
    def remove_border_intersection_bottom(self) -> None: self.chars.bottom_intersection = None
    def remove_border_intersection_left(self) -> None: self.chars.left_intersection = None
    def remove_border_intersection_right(self) -> None: self.chars.right_intersection = None
    def remove_border_intersection(self) -> None: self.chars.intersection = None
    def remove_border_horizontal(self) -> None: self.chars.horizontal = None
    def remove_border_vertical(self) -> None: self.chars.vertical = None

    # Border colors

    def set_border_color_top(self, color: Color) -> None: self.colors.top = color
    def set_border_color_bottom(self, color: Color) -> None: self.colors.bottom = color
    def set_border_color_left(self, color: Color) -> None: self.colors.left = color
    def set_border_color_right(self, color: Color) -> None: self.colors.right = color
    def set_border_color_corner_top_left(self, color: Color) -> None: self.colors.top_left = color
    def set_border_color_corner_top_right(self, color: Color) -> None: self.colors.top_right = color
    def set_border_color_corner_bottom_left(self, color: Color) -> None: self.colors.bottom_left = color
    def set_border_color_corner_bottom_right(self, color: Color) -> None: self.colors.bottom_right = color
    def set_border_color_intersection_top(self, color: Color) -> None: self.colors.top_intersection = color
    def set_border_color_intersection_bottom(self, color: Color) -> None: self.colors.bottom_intersection = color
    def set_border_color_intersection_left(self, color: Color) -> None: self.colors.left_intersection = color
    def set_border_color_intersection_right(self, color: Color) -> None: self.colors.right_intersection = color
    def set_border_color_intersection(self, color: Color) -> None: self.colors.intersection = color
    def set_border_color_horizontal(self, color: Color) -> None: self.colors.horizontal = color
    def set_border_color_vertical(self, color: Color) -> None: self.colors.vertical = color

    def get_border_color_top(self) -> Color | None: return self.colors.top
    def get_border_color_bottom(self) -> Color | None: return self.colors.bottom
    def get_border_color_left(self) -> Color | None: return self.colors.left
    def get_border_color_right(self) -> Color | None: return self.colors.right
    def get_border_color_corner_top_left(self) -> Color | None: return self.colors.top_left
    def get_border_color_corner_top_right(self) -> Color | None: return self.colors.top_right
    def get_border_color_corner_bottom_left(self) -> Color | None: return self.colors.bottom_left
    def get_border_color_corner_bottom_right(self) -> Color | None: return self.colors.bottom_right
    def get_border_color_intersection_top(self) -> Color | None: return self.colors.top_intersection
    def get_border_color_intersection_bottom(self) -> Color | None: return self.colors.bottom_intersection
    def get_border_color_intersection_left(self) -> Color | None: return self.colors.left_intersection
    def get_border_color_intersection_right(self) -> Color | None: return self.colors.right_intersection
    def get_border_color_intersection(self) -> Color | None: return self.colors.intersection
    def get_border_color_horizontal(self) -> Color | None: return self.colors.horizontal
    def get_border_color_vertical(self) -> Color | None: return self.colors.vertical

    def remove_border_color_top(self) -> None: self.colors.top = None
    def remove_border_color_bottom(self) -> None: self.colors.bottom = None
    def remove_border_color_left(self) -> None: self.colors.left = None
    def remove_border_color_right(self) -> None: self.colors.right = None
    def remove_border_color_corner_top_left(self) -> None: self.colors.top_left = None
    def remove_border_color_corner_top_right(self) -> None: self.colors.top_right = None
    def remove_border_color_corner_bottom_left(self) -> None: self.colors.bottom_left = None
    def remove_border_color_corner_bottom_right(self) -> None: self.colors.bottom_right = None
    def remove_border_color_intersection_top(self) -> None: self.colors.top_intersection = None
    def remove_border_color_intersection_bottom(self) -> None: self.colors.bottom_intersection = None
    def remove_border_color_intersection_left(self) -> None: self.colors.left_intersection = None
    def remove_border_color_intersection_right(self) -> None: self.colors.right_intersection = None
    def remove_border_color_intersection(self) -> None: self.colors.intersection = None
    def remove_border_color_horizontal(self) -> None: self.colors.horizontal = None
    def remove_border_color_vertical(self) -> None: self.colors.vertical = None

    # Whole sets

    def set_borders(self, borders: Borders[str]) -> None:
        self.chars = borders.copy()

    def get_borders(self) -> Borders[str]:
        return self.chars.copy()

    def set_borders_colors(self, colors: Borders[Color]) -> None:
        self.colors = colors.copy()

    def get_borders_colors(self) -> Borders[Color]:
        return self.colors.copy()

    def set_border_frame(self, frame: Border[str]) -> None:
        frame.apply_to(self.chars)

    def get_border_frame(self) -> Border[str]:
        return Border.from_borders(self.chars)

    def set_border_color_frame(self, frame: Border[Color]) -> None:
        frame.apply_to(self.colors)

    def get_border_color_frame(self) -> Border[Color]:
        return Border.from_borders(self.colors)

    # Line overrides

    def set_lines_horizontal(self, lines: dict[int, HorizontalLine[str]]) -> None:
        self.horizontals = dict(lines)

    def set_lines_vertical(self, lines: dict[int, VerticalLine[str]]) -> None:
        self.verticals = dict(lines)

    def insert_line_horizontal(self, row: int, line: HorizontalLine[str]) -> None:
        if self.horizontals is None:
            self.horizontals = {}
        self.horizontals[row] = line

    def insert_line_vertical(self, column: int, line: VerticalLine[str]) -> None:
        if self.verticals is None:
            self.verticals = {}
        self.verticals[column] = line

    def get_line_horizontal(self, row: int) -> HorizontalLine[str] | None:
        return self.horizontals.get(row) if self.horizontals is not None else None

    def get_line_vertical(self, column: int) -> VerticalLine[str] | None:
        return self.verticals.get(column) if self.verticals is not None else None

    def remove_line_horizontal(self, row: int) -> None:
        if self.horizontals is not None:
            self.horizontals.pop(row, None)

    def remove_line_vertical(self, column: int) -> None:
        if self.verticals is not None:
            self.verticals.pop(column, None)
