"""CandidatePath - One scored route from the K-best diversifier.

A candidate carries its grid cells, the matching world points and every
metric the stroke model used, so the editor can show why one route scores
lower than another.
"""

from dataclasses import dataclass, field
from functools import cached_property

from minigolf_planner.model.grid_node import GridNode


@dataclass(frozen=True)
class CandidatePath:
    """A fully scored route.

    Attributes:
        path: Cells from tee to cup
        world_points: Cell centres in pixel coordinates
        length_px: Raw terrain path length
        turns: Direction changes
        corridor_density: Average blocked neighbours per cell
        sand_cells: Sand cells on the route
        slope_cells: Slope cells on the route
        downhill_momentum: Accumulated downhill assistance
        uphill_resistance: Accumulated uphill resistance
        auto_assist_segments: Strongly assisted steps
        strokes: Slope-assisted stroke estimate
        par: Par derived from strokes
    """

    path: tuple[GridNode, ...]
    world_points: tuple[tuple[float, float], ...]
    length_px: float
    turns: int
    corridor_density: float
    sand_cells: int
    slope_cells: int
    downhill_momentum: float
    uphill_resistance: float
    auto_assist_segments: int
    strokes: float
    par: int

    @cached_property
    def cells(self) -> frozenset[GridNode]:
        """Distinct cells of the route."""
        return frozenset(self.path)

    @property
    def signature(self) -> tuple[GridNode, ...]:
        """Exact identity of the route; equal signatures are duplicates."""
        return self.path

    def overlap_fraction(self, other: "CandidatePath") -> float:
        """Shared cells over the smaller route's distinct cell count."""
        smaller = min(len(self.cells), len(other.cells))
        if smaller == 0:
            return 0.0
        return len(self.cells & other.cells) / smaller


@dataclass(frozen=True)
class KBestResult:
    """Diversified routes for one hole.

    Attributes:
        candidates: At most K routes, sorted by (strokes, length_px)
        best_index: Index of the best candidate, -1 when there are none
        par: Best candidate's par, or the single-path fallback
    """

    candidates: tuple[CandidatePath, ...] = field(default_factory=tuple)
    best_index: int = -1
    par: int = 2

    @property
    def best(self) -> "CandidatePath | None":
        return self.candidates[self.best_index] if self.best_index >= 0 else None
