"""Display-list records handed to a renderer.

A ``Drawing`` is a rectangle placed at a pixel position with a style. The
layout engine only builds these; renderers composite them in list order, so
later drawings cover earlier ones.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Fill:
    color: str


@dataclass(frozen=True)
class Stroke:
    width: int
    color: str


@dataclass(frozen=True)
class Style:
    """Fill and optional outline applied to a shape."""

    fill: Optional[Fill] = None
    stroke: Optional[Stroke] = None

    @classmethod
    def filled(cls, color: str, stroke: Optional[Stroke] = None) -> Style:
        return cls(fill=Fill(color=color), stroke=stroke)


@dataclass(frozen=True)
class Rectangle:
    width: int
    height: int

    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Drawing:
    """One positioned, styled shape."""

    shape: Rectangle
    position: Point = field(default_factory=lambda: Point(0.0, 0.0))
    style: Style = field(default_factory=Style)

    def with_shape(self, shape: Rectangle) -> Drawing:
        return Drawing(shape=shape, position=self.position, style=self.style)

    def with_xy(self, x: float, y: float) -> Drawing:
        return Drawing(shape=self.shape, position=Point(float(x), float(y)), style=self.style)

    def with_style(self, style: Style) -> Drawing:
        return Drawing(shape=self.shape, position=self.position, style=style)
