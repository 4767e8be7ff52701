"""Shape containment shared by all terrain classification.

Provides one tagged shape family used for every terrain class:
- RectShape: axis-aligned rectangle, edges inclusive
- PolygonShape: even-odd ray casting, implicitly closed
- CircleShape: distance to centre, edge inclusive

Each shape answers both a scalar query (contains) and a vectorised query over
numpy coordinate arrays (contains_points). The two must always agree; the grid
builder uses the vectorised form, lint and preview code the scalar form.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from math import hypot
from typing import Any, Union

import numpy as np


@dataclass(frozen=True)
class Shape(ABC):
    """Abstract base class for course geometry shapes.

    Subclasses are immutable and carry a shape_type field for serialization.
    Use isinstance() to check the concrete variant.
    """

    @abstractmethod
    def contains(self, x: float, y: float) -> bool:
        """Whether the point (x, y) lies inside the shape."""

    @abstractmethod
    def contains_points(self, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        """Vectorised contains() over broadcastable coordinate arrays."""


@dataclass(frozen=True)
class RectShape(Shape):
    """Axis-aligned rectangle with origin at its top-left corner.

    Attributes:
        x, y: Top-left corner in pixels
        w, h: Width and height in pixels
    """

    x: float
    y: float
    w: float
    h: float
    shape_type: str = "rect"

    def contains(self, x: float, y: float) -> bool:
        return self.x <= x <= self.x + self.w and self.y <= y <= self.y + self.h

    def contains_points(self, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        return (xs >= self.x) & (xs <= self.x + self.w) & (ys >= self.y) & (ys <= self.y + self.h)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RectShape":
        """Create RectShape from an editor {x, y, w, h} dictionary."""
        return cls(x=float(data["x"]), y=float(data["y"]), w=float(data["w"]), h=float(data["h"]))


@dataclass(frozen=True)
class PolygonShape(Shape):
    """Polygon given as ordered (x, y) vertices.

    The polygon is treated as closed even when the last vertex does not repeat
    the first. Fewer than 3 vertices never contains any point.

    Attributes:
        points: Tuple of (x, y) vertex pairs
    """

    points: tuple[tuple[float, float], ...]
    shape_type: str = "polygon"

    def __post_init__(self) -> None:
        """Normalise flat or nested vertex input into a tuple of pairs."""
        object.__setattr__(self, "points", _as_vertex_pairs(self.points))

    @property
    def is_degenerate(self) -> bool:
        """True when the polygon has fewer than 3 vertices."""
        return len(self.points) < 3

    def contains(self, x: float, y: float) -> bool:
        if self.is_degenerate:
            return False
        inside = False
        n = len(self.points)
        j = n - 1
        for i in range(n):
            xi, yi = self.points[i]
            xj, yj = self.points[j]
            if (yi > y) != (yj > y):
                x_cross = (xj - xi) * (y - yi) / (yj - yi) + xi
                if x < x_cross:
                    inside = not inside
            j = i
        return inside

    def contains_points(self, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        xs, ys = np.broadcast_arrays(np.asarray(xs, dtype=np.float64), np.asarray(ys, dtype=np.float64))
        inside = np.zeros(xs.shape, dtype=bool)
        if self.is_degenerate:
            return inside
        n = len(self.points)
        j = n - 1
        for i in range(n):
            xi, yi = self.points[i]
            xj, yj = self.points[j]
            j = i
            if yi == yj:
                # Horizontal edges never straddle a ray
                continue
            straddles = (yi > ys) != (yj > ys)
            x_cross = (xj - xi) * (ys - yi) / (yj - yi) + xi
            inside ^= straddles & (xs < x_cross)
        return inside

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PolygonShape":
        """Create PolygonShape from an editor {points: [x0, y0, x1, y1, ...]} dictionary."""
        return cls(points=data.get("points") or ())


@dataclass(frozen=True)
class CircleShape(Shape):
    """Circle given by centre and radius.

    Attributes:
        x, y: Centre in pixels
        r: Radius in pixels
    """

    x: float
    y: float
    r: float
    shape_type: str = "circle"

    def contains(self, x: float, y: float) -> bool:
        return hypot(x - self.x, y - self.y) <= self.r

    def contains_points(self, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        return np.hypot(xs - self.x, ys - self.y) <= self.r

    def inflated(self, margin: float) -> "CircleShape":
        """Return a concentric circle grown by margin pixels."""
        return CircleShape(x=self.x, y=self.y, r=self.r + margin)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CircleShape":
        """Create CircleShape from an editor {x, y, r} dictionary."""
        return cls(x=float(data["x"]), y=float(data["y"]), r=float(data.get("r") or 0.0))


def shape_from_dict(data: dict[str, Any]) -> Shape:
    """Create the matching Shape variant from a dictionary.

    Dictionaries with "points" become polygons, with "r" circles, and anything
    else a rectangle.
    """
    if "points" in data:
        return PolygonShape.from_dict(data)
    if "r" in data and "w" not in data:
        return CircleShape.from_dict(data)
    return RectShape.from_dict(data)


def any_contains(shapes: Sequence[Shape], x: float, y: float) -> bool:
    """Whether any shape in the sequence contains (x, y)."""
    return any(shape.contains(x, y) for shape in shapes)


def union_mask(shapes: Sequence[Shape], xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
    """Vectorised any_contains(): True where at least one shape contains the point."""
    mask = np.zeros(np.broadcast(xs, ys).shape, dtype=bool)
    for shape in shapes:
        mask |= shape.contains_points(xs, ys)
    return mask


def _as_vertex_pairs(
    points: Union[Sequence[float], Sequence[Sequence[float]]],
) -> tuple[tuple[float, float], ...]:
    """Convert [x0, y0, x1, y1, ...] or [(x0, y0), ...] into a tuple of float pairs."""
    values = list(points)
    if not values:
        return ()
    if isinstance(values[0], (int, float)):
        if len(values) % 2 != 0:
            raise ValueError(f"Flat polygon coordinates need an even count, got {len(values)}")
        return tuple((float(values[i]), float(values[i + 1])) for i in range(0, len(values), 2))
    return tuple((float(p[0]), float(p[1])) for p in values)
