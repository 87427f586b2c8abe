from __future__ import annotations
from dataclasses import dataclass, fields, replace
from typing import Callable, Generic, TypeVar

T = TypeVar('T')
U = TypeVar('U')

SLOTS = (
    'top', 'bottom', 'left', 'right',
    'top_left', 'top_right', 'bottom_left', 'bottom_right',
    'top_intersection', 'bottom_intersection', 'left_intersection', 'right_intersection',
    'intersection', 'horizontal', 'vertical',
)

# Frame position -> Borders slot
FRAME_SLOTS = {
    'top': 'top',
    'bottom': 'bottom',
    'left': 'left',
    'right': 'right',
    'left_top_corner': 'top_left',
    'right_top_corner': 'top_right',
    'left_bottom_corner': 'bottom_left',
    'right_bottom_corner': 'bottom_right',
}

def check_slot(slot: str) -> str:
    if slot not in SLOTS:
        raise ValueError(f"Unknown border slot: {slot!r}")
    return slot


@dataclass
class Borders(Generic[T]):
    """All 15 border positions of a grid. A slot set to None draws nothing."""
    top: T | None = None
    bottom: T | None = None
    left: T | None = None
    right: T | None = None
    top_left: T | None = None
    top_right: T | None = None
    bottom_left: T | None = None
    bottom_right: T | None = None
    top_intersection: T | None = None
    bottom_intersection: T | None = None
    left_intersection: T | None = None
    right_intersection: T | None = None
    intersection: T | None = None
    horizontal: T | None = None
    vertical: T | None = None

    @staticmethod
    def empty() -> Borders:
        return Borders()

    @staticmethod
    def filled(value: T) -> Borders[T]:
        return Borders(**{slot: value for slot in SLOTS})

    def get(self, slot: str) -> T | None:
        return getattr(self, check_slot(slot))

    def set(self, slot: str, value: T | None) -> None:
        setattr(self, check_slot(slot), value)

    def items(self) -> list[tuple[str, T]]:
        return [(slot, value) for slot in SLOTS if (value := getattr(self, slot)) is not None]

    def is_empty(self) -> bool:
        return all(getattr(self, slot) is None for slot in SLOTS)

    def copy(self) -> Borders[T]:
        return replace(self)

    def convert(self, fn: Callable[[T], U]) -> Borders[U]:
        return Borders(**{slot: fn(value) for slot, value in self.items()})


@dataclass
class Border(Generic[T]):
    """The outer frame of a grid: four edges and four corners."""
    top: T | None = None
    bottom: T | None = None
    left: T | None = None
    right: T | None = None
    left_top_corner: T | None = None
    right_top_corner: T | None = None
    left_bottom_corner: T | None = None
    right_bottom_corner: T | None = None

    @staticmethod
    def full(top: T, bottom: T, left: T, right: T, top_left: T, top_right: T, bottom_left: T, bottom_right: T) -> Border[T]:
        return Border(top=top, bottom=bottom, left=left, right=right,
                      left_top_corner=top_left, right_top_corner=top_right,
                      left_bottom_corner=bottom_left, right_bottom_corner=bottom_right)

    @staticmethod
    def filled(value: T) -> Border[T]:
        return Border(**{name: value for name in FRAME_SLOTS})

    @staticmethod
    def from_borders(borders: Borders[T]) -> Border[T]:
        return Border(**{name: borders.get(slot) for name, slot in FRAME_SLOTS.items()})

    def apply_to(self, borders: Borders[T]) -> None:
        for name, slot in FRAME_SLOTS.items():
            borders.set(slot, getattr(self, name))

    def is_empty(self) -> bool:
        return all(getattr(self, name) is None for name in FRAME_SLOTS)


@dataclass(frozen=True)
class HorizontalLine(Generic[T]):
    """A separator drawn between two rows.

    `main` is the line itself, `intersection` is used where it crosses a
    vertical line, and `left`/`right` are its ends on the outer frame.
    """
    main: T | None = None
    intersection: T | None = None
    left: T | None = None
    right: T | None = None

    @staticmethod
    def full(main: T, intersection: T, left: T, right: T) -> HorizontalLine[T]:
        return HorizontalLine(main, intersection, left, right)

    @staticmethod
    def empty() -> HorizontalLine:
        return HorizontalLine()

    @staticmethod
    def inherit(borders: Borders[T]) -> HorizontalLine[T]:
        return HorizontalLine(borders.horizontal, borders.intersection, borders.left_intersection, borders.right_intersection)

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def convert(self, fn: Callable[[T], U]) -> HorizontalLine[U]:
        return HorizontalLine(*(None if (v := getattr(self, f.name)) is None else fn(v) for f in fields(self)))


@dataclass(frozen=True)
class VerticalLine(Generic[T]):
    """A separator drawn between two columns.

    `top`/`bottom` are its ends on the outer frame.
    """
    main: T | None = None
    intersection: T | None = None
    top: T | None = None
    bottom: T | None = None

    @staticmethod
    def full(main: T, intersection: T, top: T, bottom: T) -> VerticalLine[T]:
        return VerticalLine(main, intersection, top, bottom)

    @staticmethod
    def empty() -> VerticalLine:
        return VerticalLine()

    @staticmethod
    def inherit(borders: Borders[T]) -> VerticalLine[T]:
        return VerticalLine(borders.vertical, borders.intersection, borders.top_intersection, borders.bottom_intersection)

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def convert(self, fn: Callable[[T], U]) -> VerticalLine[U]:
        return VerticalLine(*(None if (v := getattr(self, f.name)) is None else fn(v) for f in fields(self)))
