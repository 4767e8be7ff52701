"""Level - Resolved course geometry handed over by the editor.

A Level holds the tee, the cup and every terrain collection the analysis
reads. All collections are optional; absence means empty. The analysis
never mutates a Level.

Used by:
- GridBuilder (rasterizes the terrain collections)
- ParEstimator, PathDiversifier, GoalSuggester, GoalLinter (tee/cup lookup)
"""

from dataclasses import dataclass
from math import hypot
from typing import Any, Optional

from minigolf_planner.constants import GridConfig
from minigolf_planner.model.shapes import CircleShape, RectShape, Shape, shape_from_dict


@dataclass(frozen=True)
class Point:
    """A point in the shared pixel coordinate space."""

    x: float
    y: float

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point in pixels."""
        return hypot(other.x - self.x, other.y - self.y)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        return cls(x=float(data["x"]), y=float(data["y"]))


@dataclass(frozen=True)
class Cup(Point):
    """The goal point, with an optional radius for display."""

    radius: Optional[float] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Cup":
        radius = data.get("r")
        return cls(x=float(data["x"]), y=float(data["y"]), radius=None if radius is None else float(radius))


@dataclass(frozen=True)
class Fairway:
    """Rectangular region of the level that is rasterized for analysis.

    Attributes:
        x, y: Top-left corner in pixels
        w, h: Width and height in pixels
    """

    x: float
    y: float
    w: float
    h: float

    @property
    def larger_side(self) -> float:
        """The larger of width and height."""
        return max(self.w, self.h)

    def is_near_edge(self, x: float, y: float, margin: float) -> bool:
        """Whether (x, y) lies within margin pixels of any boundary."""
        return (
            x < self.x + margin
            or x > self.x + self.w - margin
            or y < self.y + margin
            or y > self.y + self.h - margin
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Fairway":
        return cls(x=float(data["x"]), y=float(data["y"]), w=float(data["w"]), h=float(data["h"]))


@dataclass(frozen=True)
class SlopeField:
    """A rectangular slope ("hill") pushing the ball towards a compass direction.

    Attributes:
        area: Rectangle covered by the slope
        direction: Downhill compass direction (N, NE, E, SE, S, SW, W, NW)
        strength: Slope strength, clamped to [SLOPE_STRENGTH_MIN, SLOPE_STRENGTH_MAX]
    """

    area: RectShape
    direction: str
    strength: float = GridConfig.SLOPE_STRENGTH_DEFAULT

    def __post_init__(self) -> None:
        """Normalise the direction and clamp the strength."""
        object.__setattr__(self, "direction", (self.direction or "").upper())
        clamped = max(GridConfig.SLOPE_STRENGTH_MIN, min(GridConfig.SLOPE_STRENGTH_MAX, self.strength))
        object.__setattr__(self, "strength", clamped)

    @property
    def unit_vector(self) -> tuple[float, float]:
        """Downhill unit vector; unknown directions contribute nothing."""
        return GridConfig.SLOPE_DIRECTIONS.get(self.direction, (0.0, 0.0))

    @property
    def vector(self) -> tuple[float, float]:
        """Downhill vector scaled by strength."""
        ux, uy = self.unit_vector
        return ux * self.strength, uy * self.strength

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SlopeField":
        strength = data.get("strength")
        return cls(
            area=RectShape.from_dict(data),
            direction=data.get("dir") or data.get("direction") or "",
            strength=GridConfig.SLOPE_STRENGTH_DEFAULT if strength is None else float(strength),
        )


@dataclass(frozen=True)
class Level:
    """Course geometry for one hole.

    Attributes:
        tee: Start point
        cup: Goal point
        obstacles: Solid walls (rectangles and polygons)
        water: Water hazards, also solid for traversal
        sand: Sand traps, passable at a higher cost
        slopes: Slope fields
        bridges: Rectangles that restore passability over obstacles and water
        posts: Circular blockers, inflated by a clearance margin when rasterized

    Example:
        level = Level(
            tee=Point(x=60, y=300),
            cup=Cup(x=740, y=300, radius=12),
            obstacles=(RectShape(x=400, y=0, w=20, h=450),),
        )
    """

    tee: Point
    cup: Cup
    obstacles: tuple[Shape, ...] = ()
    water: tuple[Shape, ...] = ()
    sand: tuple[Shape, ...] = ()
    slopes: tuple[SlopeField, ...] = ()
    bridges: tuple[RectShape, ...] = ()
    posts: tuple[CircleShape, ...] = ()

    def __post_init__(self) -> None:
        """Freeze collections so callers can pass lists."""
        for name in ("obstacles", "water", "sand", "slopes", "bridges", "posts"):
            object.__setattr__(self, name, tuple(getattr(self, name) or ()))

    @property
    def solid_shape_count(self) -> int:
        """Number of obstacle and water shapes."""
        return len(self.obstacles) + len(self.water)

    @property
    def straight_distance(self) -> float:
        """Straight-line distance from tee to cup in pixels."""
        return self.tee.distance_to(self.cup)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Level":
        """Create Level from an editor level document.

        Reads the editor keys (walls, wallsPoly, water, waterPoly, sand,
        sandPoly, hills, bridges, posts). Missing keys mean empty collections.
        """

        def shapes(*keys: str) -> tuple[Shape, ...]:
            return tuple(shape_from_dict(item) for key in keys for item in (data.get(key) or []))

        return cls(
            tee=Point.from_dict(data["tee"]),
            cup=Cup.from_dict(data["cup"]),
            obstacles=shapes("walls", "wallsPoly"),
            water=shapes("water", "waterPoly"),
            sand=shapes("sand", "sandPoly"),
            slopes=tuple(SlopeField.from_dict(item) for item in (data.get("hills") or [])),
            bridges=tuple(RectShape.from_dict(item) for item in (data.get("bridges") or [])),
            posts=tuple(CircleShape.from_dict(item) for item in (data.get("posts") or [])),
        )
