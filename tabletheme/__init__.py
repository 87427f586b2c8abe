from tabletheme.backends import Config, apply_theme, clear_borders
from tabletheme.config import load_theme, save_theme, list_themes
from tabletheme.grid import (
    SLOTS, Border, Borders, HorizontalLine, VerticalLine, AnsiColor, Color, Colors,
    Alignment, ColoredConfig, CompactConfig, CompactMultilineConfig,
)
from tabletheme.style import STYLES, Style
from tabletheme.theme import Theme

__all__ = [
    'Theme', 'Style', 'STYLES', 'Config', 'apply_theme', 'clear_borders',
    'load_theme', 'save_theme', 'list_themes',
    'SLOTS', 'Border', 'Borders', 'HorizontalLine', 'VerticalLine', 'AnsiColor', 'Color', 'Colors',
    'Alignment', 'ColoredConfig', 'CompactConfig', 'CompactMultilineConfig',
]
