from __future__ import annotations
from typing import TYPE_CHECKING, TypeAlias

from tabletheme.grid.colors import Color
from tabletheme.grid.config import ColoredConfig, CompactConfig, CompactMultilineConfig

if TYPE_CHECKING:
    from tabletheme.theme import Theme

Config: TypeAlias = ColoredConfig | CompactConfig | CompactMultilineConfig


def apply_theme(theme: Theme, cfg: Config) -> Config:
    """Install a theme's borders onto a grid config and return the result.

    Mutable configs are updated in place and returned. CompactConfig is a
    value, so the updated copy is returned instead. Compact configs only
    take the border characters.
    """
    match cfg:
        case ColoredConfig():
            clear_borders(cfg)
            set_borders(cfg, theme)
            set_custom_lines(cfg, theme)
            return cfg
        case CompactConfig():
            return cfg.set_borders(theme.chars)
        case CompactMultilineConfig():
            cfg.set_borders(theme.chars)
            return cfg
        case _:
            raise ValueError(f"Unsupported config type: {type(cfg)}")

def clear_borders(cfg: ColoredConfig) -> None:
    cfg.remove_borders()
    cfg.remove_border_colors()
    cfg.remove_vertical_override_chars()
    cfg.remove_horizontal_override_chars()
    cfg.remove_vertical_override_colors()
    cfg.remove_horizontal_override_colors()

def set_borders(cfg: ColoredConfig, theme: Theme) -> None:
    cfg.set_borders(theme.chars)
    # An empty color set leaves colors alone
    if not theme.colors.is_empty():
        cfg.set_border_colors(theme.colors.convert(Color.into_ansi))

def set_custom_lines(cfg: ColoredConfig, theme: Theme) -> None:
    if theme.horizontal1 is not None:
        cfg.insert_horizontal_override(1, theme.horizontal1)
    # Entries of the general map win over horizontal1
    for row, hline in (theme.horizontals or {}).items():
        cfg.insert_horizontal_override(row, hline)
    for column, vline in (theme.verticals or {}).items():
        cfg.insert_vertical_override(column, vline)
