from tabletheme.grid.borders import SLOTS, FRAME_SLOTS, Border, Borders, HorizontalLine, VerticalLine
from tabletheme.grid.colors import AnsiColor, Color, Colors
from tabletheme.grid.config import Alignment, ColoredConfig, CompactConfig, CompactMultilineConfig

__all__ = [
    'SLOTS', 'FRAME_SLOTS', 'Border', 'Borders', 'HorizontalLine', 'VerticalLine',
    'AnsiColor', 'Color', 'Colors',
    'Alignment', 'ColoredConfig', 'CompactConfig', 'CompactMultilineConfig',
]
