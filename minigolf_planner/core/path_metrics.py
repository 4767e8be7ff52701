"""Path metrics - Terrain and slope measurements along a fixed grid path.

All estimators derive their numbers from one PathAnalyzer pass so the
single-path par estimate, the K-best candidates and the cup suggestions never
disagree on what a path looks like.

Momentum model (per step a -> b, slope vector and strength averaged over a, b):
    alignment = slope · unit_step
    alignment > +0.05: downhill_momentum += alignment × strength × step
    alignment < -0.05: uphill_resistance += |alignment| × strength × step
A single step contributing at least 0.6 downhill momentum counts as an
auto-assist segment (the ball rolls on its own).
"""

from dataclasses import dataclass

from minigolf_planner.constants import SearchConfig
from minigolf_planner.core.astar_search import step_weight
from minigolf_planner.core.grid_builder import TraversalGrid
from minigolf_planner.model.grid_node import GridNode


def count_turns(path: tuple[GridNode, ...]) -> int:
    """Number of direction changes over consecutive cell triples."""
    turns = 0
    for a, b, c in zip(path, path[1:], path[2:]):
        if (b.row - a.row, b.col - a.col) != (c.row - b.row, c.col - b.col):
            turns += 1
    return turns


@dataclass(frozen=True)
class PathMetrics:
    """Measurements of one path on one grid.

    Attributes:
        cell_count: Number of cells in the path
        length_px: Raw terrain cost × cell size
        turns: Direction changes along the path
        corridor_sum: Blocked 8-neighbours summed over path cells
        corridor_density: corridor_sum / cell_count ("corridor contact")
        sand_cells: Sand cells on the path
        slope_cells: Slope cells on the path
        downhill_momentum: Accumulated downhill assistance
        uphill_resistance: Accumulated uphill resistance
        auto_assist_segments: Steps with strong downhill assistance
    """

    cell_count: int
    length_px: float
    turns: int
    corridor_sum: int
    corridor_density: float
    sand_cells: int
    slope_cells: int
    downhill_momentum: float = 0.0
    uphill_resistance: float = 0.0
    auto_assist_segments: int = 0

    @property
    def net_momentum(self) -> float:
        return self.downhill_momentum - self.uphill_resistance


class PathAnalyzer:
    """Computes PathMetrics for paths on a grid."""

    def __init__(self, grid: TraversalGrid) -> None:
        self.grid = grid

    def analyze(self, path: tuple[GridNode, ...]) -> PathMetrics:
        """Measure a path.

        Args:
            path: Cells from start to goal

        Returns:
            PathMetrics with every field filled in.
        """
        grid = self.grid
        tables = grid.tables
        neighbor_counts = grid.blocked_neighbor_counts

        corridor_sum = sum(int(neighbor_counts[node.row, node.col]) for node in path)
        sand_cells = sum(
            1 for node in path if grid.sand[node.row, node.col] and not grid.blocked[node.row, node.col]
        )
        slope_cells = sum(1 for node in path if tables.slope_strength[node.row][node.col] > 0)

        length_cost = 0.0
        downhill = 0.0
        uphill = 0.0
        assists = 0
        for a, b in zip(path, path[1:]):
            step = step_weight(a, b)
            length_cost += step * tables.cost[b.row][b.col]

            strength = (tables.slope_strength[a.row][a.col] + tables.slope_strength[b.row][b.col]) * 0.5
            sx = (tables.slope_x[a.row][a.col] + tables.slope_x[b.row][b.col]) * 0.5
            sy = (tables.slope_y[a.row][a.col] + tables.slope_y[b.row][b.col]) * 0.5
            if strength <= 0 or (sx == 0 and sy == 0):
                continue
            alignment = (sx * (b.col - a.col) + sy * (b.row - a.row)) / step
            if alignment > SearchConfig.ALIGNMENT_DEADBAND:
                boost = alignment * strength * step
                downhill += boost
                if boost >= SearchConfig.AUTO_ASSIST_STEP_MIN:
                    assists += 1
            elif alignment < -SearchConfig.ALIGNMENT_DEADBAND:
                uphill += -alignment * strength * step

        return PathMetrics(
            cell_count=len(path),
            length_px=length_cost * grid.cell_size,
            turns=count_turns(path),
            corridor_sum=corridor_sum,
            corridor_density=corridor_sum / max(1, len(path)),
            sand_cells=sand_cells,
            slope_cells=slope_cells,
            downhill_momentum=downhill,
            uphill_resistance=uphill,
            auto_assist_segments=assists,
        )
