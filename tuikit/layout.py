"""Rectangles and splitting them by length and percentage constraints."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

__all__ = ["Rect", "Length", "Percentage", "split", "center", "centered_rect"]


def _check_non_negative(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int")
    if value < 0:
        raise ValueError(f"{name} must not be negative: {value}")


@dataclass(frozen=True)
class Rect:
    """A rectangular area of cells."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        for name in ("x", "y", "width", "height"):
            _check_non_negative(name, getattr(self, name))

    def right(self) -> int:
        return self.x + self.width

    def bottom(self) -> int:
        return self.y + self.height

    def inner(self, horizontal: int, vertical: int) -> Rect:
        """Shrink by a margin on each side; too small a rect becomes empty."""
        _check_non_negative("horizontal", horizontal)
        _check_non_negative("vertical", vertical)
        if self.width < 2 * horizontal or self.height < 2 * vertical:
            return Rect()
        return Rect(
            self.x + horizontal,
            self.y + vertical,
            self.width - 2 * horizontal,
            self.height - 2 * vertical,
        )


@dataclass(frozen=True)
class Length:
    """A fixed number of cells."""

    value: int

    def __post_init__(self) -> None:
        _check_non_negative("value", self.value)

    def size(self, available: int) -> float:
        return float(self.value)


@dataclass(frozen=True)
class Percentage:
    """A percentage of the available cells."""

    value: int

    def __post_init__(self) -> None:
        _check_non_negative("value", self.value)

    def size(self, available: int) -> float:
        return available * self.value / 100


Constraint = Length | Percentage


def _round(value: float) -> int:
    return math.floor(value + 0.5)


def _solve(length: int, constraints: Sequence[Constraint], centered: bool) -> list[tuple[int, int]]:
    sizes = [c.size(length) for c in constraints]
    total = sum(sizes)
    offset = 0.0
    if centered:
        offset = max(0.0, (length - total) / 2)
    elif sizes and total < length:
        sizes[-1] += length - total

    segments = []
    position = offset
    for size in sizes:
        start = min(position, length)
        end = min(position + size, length)
        segments.append((_round(start), _round(end) - _round(start)))
        position += size
    return segments


def _build(area: Rect, segments: list[tuple[int, int]], vertical: bool) -> list[Rect]:
    if vertical:
        return [Rect(area.x, area.y + start, area.width, size) for start, size in segments]
    return [Rect(area.x + start, area.y, size, area.height) for start, size in segments]


def split(area: Rect, constraints: Sequence[Constraint], vertical: bool) -> list[Rect]:
    """Split an area along one axis; leftover space goes to the last part."""
    length = area.height if vertical else area.width
    return _build(area, _solve(length, constraints, centered=False), vertical)


def center(area: Rect, horizontal: Constraint, vertical: Constraint) -> Rect:
    """Centre a rect sized by the two constraints within an area."""
    (area,) = _build(area, _solve(area.width, [horizontal], centered=True), vertical=False)
    (area,) = _build(area, _solve(area.height, [vertical], centered=True), vertical=True)
    return area


def centered_rect(percent_x: int, percent_y: int, r: Rect) -> Rect:
    """Return the middle part of r, taking the given percentages of its size."""
    rows = split(
        r,
        [
            Percentage((100 - percent_y) // 2),
            Percentage(percent_y),
            Percentage((100 - percent_y) // 2),
        ],
        vertical=True,
    )
    return split(
        rows[1],
        [
            Percentage((100 - percent_x) // 2),
            Percentage(percent_x),
            Percentage((100 - percent_x) // 2),
        ],
        vertical=False,
    )[1]