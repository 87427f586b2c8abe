from __future__ import annotations
import re
from dataclasses import dataclass
from typing import ClassVar, NamedTuple

ANSI_BACKGROUND_OFFSET = 10


# ANSI escape helpers

def ansi16m(red: int, green: int, blue: int, *, offset: int = 0) -> str:
    return f"\u001B[{38 + offset};2;{red};{green};{blue}m"

def hex_to_rgb(code: str) -> tuple[int, int, int]:
    digits = code.removeprefix('#')
    if not re.fullmatch(r'[0-9a-f]{3}|[0-9a-f]{6}', digits, re.IGNORECASE):
        raise ValueError(f"Invalid hex color: {code!r}")
    if len(digits) == 3:
        digits = ''.join(c * 2 for c in digits)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


class Colors:
    BLACK = "\u001B[30m"
    RED = "\u001B[31m"
    GREEN = "\u001B[32m"
    YELLOW = "\u001B[33m"
    BLUE = "\u001B[34m"
    MAGENTA = "\u001B[35m"
    CYAN = "\u001B[36m"
    WHITE = "\u001B[37m"
    END = "\u001B[39m"

    BG_BLACK = "\u001B[40m"
    BG_RED = "\u001B[41m"
    BG_GREEN = "\u001B[42m"
    BG_BLUE = "\u001B[44m"
    BG_END = "\u001B[49m"


# Color types

class AnsiColor(NamedTuple):
    """The pair of escape sequences a grid config stores for a colored border."""
    prefix: str
    suffix: str

@dataclass(frozen=True)
class Color:
    prefix: str
    suffix: str = Colors.END

    FG_BLACK: ClassVar[Color]
    FG_RED: ClassVar[Color]
    FG_GREEN: ClassVar[Color]
    FG_YELLOW: ClassVar[Color]
    FG_BLUE: ClassVar[Color]
    FG_MAGENTA: ClassVar[Color]
    FG_CYAN: ClassVar[Color]
    FG_WHITE: ClassVar[Color]
    BG_BLACK: ClassVar[Color]
    BG_RED: ClassVar[Color]
    BG_GREEN: ClassVar[Color]
    BG_BLUE: ClassVar[Color]

    @staticmethod
    def hex(code: str) -> Color:
        return Color(ansi16m(*hex_to_rgb(code)))
    @staticmethod
    def rgb(rgb: tuple[int, int, int]) -> Color:
        return Color(ansi16m(*rgb))
    @staticmethod
    def bg_hex(code: str) -> Color:
        return Color(ansi16m(*hex_to_rgb(code), offset=ANSI_BACKGROUND_OFFSET), Colors.BG_END)
    @staticmethod
    def bg_rgb(rgb: tuple[int, int, int]) -> Color:
        return Color(ansi16m(*rgb, offset=ANSI_BACKGROUND_OFFSET), Colors.BG_END)

    @staticmethod
    def from_ansi(color: AnsiColor) -> Color:
        return Color(color.prefix, color.suffix)

    def into_ansi(self) -> AnsiColor:
        return AnsiColor(self.prefix, self.suffix)

    def __add__(self, other: Color) -> Color:
        return Color(self.prefix + other.prefix, other.suffix + self.suffix)


Color.FG_BLACK = Color(Colors.BLACK)
Color.FG_RED = Color(Colors.RED)
Color.FG_GREEN = Color(Colors.GREEN)
Color.FG_YELLOW = Color(Colors.YELLOW)
Color.FG_BLUE = Color(Colors.BLUE)
Color.FG_MAGENTA = Color(Colors.MAGENTA)
Color.FG_CYAN = Color(Colors.CYAN)
Color.FG_WHITE = Color(Colors.WHITE)
Color.BG_BLACK = Color(Colors.BG_BLACK, Colors.BG_END)
Color.BG_RED = Color(Colors.BG_RED, Colors.BG_END)
Color.BG_GREEN = Color(Colors.BG_GREEN, Colors.BG_END)
Color.BG_BLUE = Color(Colors.BG_BLUE, Colors.BG_END)
