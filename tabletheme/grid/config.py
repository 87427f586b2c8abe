from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Literal

from tabletheme.grid.borders import Borders, HorizontalLine, VerticalLine
from tabletheme.grid.colors import AnsiColor

Side = Literal['top', 'bottom', 'left', 'right']

def get_spacing_dict(spacing: int | dict[Side, int]) -> dict[Side, int]:
    assert isinstance(spacing, (int, dict)), "Spacing must be an int or a dict with side keys"
    sides: tuple[Side, ...] = ('top', 'bottom', 'left', 'right')
    return {side: spacing if isinstance(spacing, int) else spacing.get(side, 0) for side in sides}

class Alignment(Enum):
    LEFT = 'left'
    CENTER = 'center'
    RIGHT = 'right'
    TOP = 'top'
    BOTTOM = 'bottom'


class ColoredConfig:
    """Grid configuration with colored borders and per-line overrides.

    Horizontal overrides are keyed by row index, vertical ones by column
    index. Indices past the size of the table are kept but never drawn.
    """
    def __init__(self, borders: Borders[str] | None = None, padding: int | dict[Side, int] | None = None) -> None:
        self.borders: Borders[str] = borders.copy() if borders is not None else Borders()
        self.border_colors: Borders[AnsiColor] = Borders()
        self.horizontal_lines: dict[int, HorizontalLine[str]] = {}
        self.vertical_lines: dict[int, VerticalLine[str]] = {}
        self.horizontal_line_colors: dict[int, HorizontalLine[AnsiColor]] = {}
        self.vertical_line_colors: dict[int, VerticalLine[AnsiColor]] = {}
        self.padding = get_spacing_dict(padding if padding is not None else {'left': 1, 'right': 1})
        self.alignment = Alignment.LEFT

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColoredConfig):
            return NotImplemented
        return vars(self) == vars(other)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({', '.join(f'{k}={v!r}' for k, v in vars(self).items())})"

    # Base borders

    def get_borders(self) -> Borders[str]:
        return self.borders.copy()

    def set_borders(self, borders: Borders[str]) -> None:
        self.borders = borders.copy()

    def remove_borders(self) -> None:
        self.borders = Borders()

    def get_border_colors(self) -> Borders[AnsiColor]:
        return self.border_colors.copy()

    def set_border_colors(self, colors: Borders[AnsiColor]) -> None:
        self.border_colors = colors.copy()

    def remove_border_colors(self) -> None:
        self.border_colors = Borders()

    # Line overrides

    def get_horizontal_override(self, row: int) -> HorizontalLine[str] | None:
        return self.horizontal_lines.get(row)

    def get_horizontal_overrides(self) -> dict[int, HorizontalLine[str]]:
        return dict(self.horizontal_lines)

    def insert_horizontal_override(self, row: int, line: HorizontalLine[str]) -> None:
        self.horizontal_lines[row] = line

    def remove_horizontal_override_chars(self) -> None:
        self.horizontal_lines.clear()

    def get_vertical_override(self, column: int) -> VerticalLine[str] | None:
        return self.vertical_lines.get(column)

    def get_vertical_overrides(self) -> dict[int, VerticalLine[str]]:
        return dict(self.vertical_lines)

    def insert_vertical_override(self, column: int, line: VerticalLine[str]) -> None:
        self.vertical_lines[column] = line

    def remove_vertical_override_chars(self) -> None:
        self.vertical_lines.clear()

    # Line override colors

    def get_horizontal_override_color(self, row: int) -> HorizontalLine[AnsiColor] | None:
        return self.horizontal_line_colors.get(row)

    def insert_horizontal_override_color(self, row: int, line: HorizontalLine[AnsiColor]) -> None:
        self.horizontal_line_colors[row] = line

    def remove_horizontal_override_colors(self) -> None:
        self.horizontal_line_colors.clear()

    def get_vertical_override_color(self, column: int) -> VerticalLine[AnsiColor] | None:
        return self.vertical_line_colors.get(column)

    def insert_vertical_override_color(self, column: int, line: VerticalLine[AnsiColor]) -> None:
        self.vertical_line_colors[column] = line

    def remove_vertical_override_colors(self) -> None:
        self.vertical_line_colors.clear()


@dataclass(frozen=True)
class CompactConfig:
    """A borders-only config for single-line cells. Updates return a new config."""
    borders: Borders[str] = field(default_factory=Borders)
    padding: dict[Side, int] = field(default_factory=lambda: get_spacing_dict({'left': 1, 'right': 1}))
    margin: dict[Side, int] = field(default_factory=lambda: get_spacing_dict(0))
    alignment: Alignment = Alignment.LEFT

    def get_borders(self) -> Borders[str]:
        return self.borders.copy()

    def set_borders(self, borders: Borders[str]) -> CompactConfig:
        return replace(self, borders=borders.copy())

    def set_padding(self, padding: int | dict[Side, int]) -> CompactConfig:
        return replace(self, borders=self.get_borders(), padding=get_spacing_dict(padding))

    def set_margin(self, margin: int | dict[Side, int]) -> CompactConfig:
        return replace(self, borders=self.get_borders(), margin=get_spacing_dict(margin))

    def set_alignment(self, alignment: Alignment) -> CompactConfig:
        return replace(self, borders=self.get_borders(), alignment=alignment)


@dataclass
class CompactMultilineConfig:
    """A borders-only config whose cells may span several lines of text."""
    config: CompactConfig = field(default_factory=CompactConfig)
    vertical_alignment: Alignment = Alignment.TOP
    trim_horizontal: bool = False
    trim_vertical: bool = False

    @property
    def borders(self) -> Borders[str]:
        return self.config.get_borders()

    def get_borders(self) -> Borders[str]:
        return self.config.get_borders()

    def set_borders(self, borders: Borders[str]) -> None:
        self.config = self.config.set_borders(borders)
