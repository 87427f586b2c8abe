import json
from dataclasses import astuple
from pathlib import Path
from typing import Any

from tabletheme.grid.borders import Borders, HorizontalLine, VerticalLine, check_slot
from tabletheme.grid.colors import Color
from tabletheme.style import STYLES
from tabletheme.theme import Theme

CONFIG_DIR = Path('~/.tabletheme/').expanduser()
THEMES_PATH = CONFIG_DIR / 'themes.json'

class BaseConfig:
    _path: Path
    _default: dict[str, Any]
    _data: dict[str, Any] | None = None

    def __init__(self, path: Path, default: dict[str, Any]) -> None:
        self._path = path
        self._default = default

    @property
    def data(self) -> dict[str, Any]:
        if self._data is None:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._data = self._default | (json.loads(self._path.read_text() or '{}') if self._path.is_file() else {})
        return self._data

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def __contains__(self, key: str) -> bool:
        return key in self.data

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.data[key] = value
        with open(self._path, 'w') as f:
            json.dump(self.data, f, indent=2, ensure_ascii=False)

Themes = BaseConfig(THEMES_PATH, {})


# Serialization

def borders_to_dict(borders: Borders) -> dict[str, Any]:
    return {slot: value for slot, value in borders.items()}

def borders_from_dict(data: dict[str, Any]) -> Borders:
    return Borders(**{check_slot(slot): value for slot, value in data.items()})

def color_to_dict(color: Color) -> dict[str, str]:
    return {'prefix': color.prefix, 'suffix': color.suffix}

def theme_to_dict(theme: Theme) -> dict[str, Any]:
    data: dict[str, Any] = {
        'chars': borders_to_dict(theme.chars),
        'colors': borders_to_dict(theme.colors.convert(color_to_dict)),
    }
    if theme.horizontal1 is not None:
        data['horizontal1'] = list(astuple(theme.horizontal1))
    if theme.horizontals is not None:
        data['horizontals'] = {str(row): list(astuple(line)) for row, line in theme.horizontals.items()}
    if theme.verticals is not None:
        data['verticals'] = {str(column): list(astuple(line)) for column, line in theme.verticals.items()}
    return data

def theme_from_dict(data: dict[str, Any]) -> Theme:
    theme = Theme(chars=borders_from_dict(data.get('chars', {})),
                  colors=borders_from_dict(data.get('colors', {})).convert(lambda c: Color(**c)))
    if (line := data.get('horizontal1')) is not None:
        theme.horizontal1 = HorizontalLine(*line)
    if (lines := data.get('horizontals')) is not None:
        theme.set_lines_horizontal({int(row): HorizontalLine(*line) for row, line in lines.items()})
    if (lines := data.get('verticals')) is not None:
        theme.set_lines_vertical({int(column): VerticalLine(*line) for column, line in lines.items()})
    return theme


# Named themes

def load_theme(name: str, themes: BaseConfig = Themes) -> Theme:
    if name in STYLES:
        return Theme.from_style(STYLES[name]())
    if name in themes:
        return theme_from_dict(themes[name])
    raise ValueError(f"Unknown theme: {name!r}")

def save_theme(name: str, theme: Theme, themes: BaseConfig = Themes) -> None:
    if name in STYLES:
        raise ValueError(f"Theme name is reserved by a preset: {name!r}")
    themes[name] = theme_to_dict(theme)

def list_themes(themes: BaseConfig = Themes) -> list[str]:
    return list(STYLES) + [name for name in themes.data if name not in STYLES]
