"""Traversability grid rasterization for course geometry.

Discretizes continuous level geometry into a grid of cells, classifying each
cell by its centre point in a fixed precedence:

1. Blocked: inside an obstacle, water, or within post radius + clearance
2. Bridges restore passability over anything blocked beneath them
3. Sand (unblocked cells only): cost raised to SAND_COST
4. Slopes (unblocked cells only): overlapping slope vectors are summed and
   normalized; cost bumped to SLOPE_BASE_COST if still at base cost

Rasterization is vectorised with numpy over all cell centres at once.
"""

import logging
from dataclasses import dataclass, replace
from functools import cached_property
from math import ceil, floor
from typing import NamedTuple

import numpy as np
from scipy import ndimage

from minigolf_planner.constants import GridConfig
from minigolf_planner.core.numeric import clamp, round_half_up
from minigolf_planner.model.grid_node import GridNode
from minigolf_planner.model.level import Fairway, Level
from minigolf_planner.model.shapes import union_mask

logger = logging.getLogger(__name__)

# 3x3 neighbourhood without the centre cell
_NEIGHBOUR_KERNEL = np.array([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=np.int32)


class GridTables(NamedTuple):
    """Plain nested-list views of the grid arrays for tight Python loops."""

    cost: list[list[float]]
    blocked: list[list[bool]]
    slope_x: list[list[float]]
    slope_y: list[list[float]]
    slope_strength: list[list[float]]


@dataclass(frozen=True, eq=False)
class TraversalGrid:
    """Rasterized traversability grid.

    All arrays have shape (rows, cols) and are read-only.

    Attributes:
        fairway: Rasterized region
        cell_size: Cell edge length in pixels
        cost: Traversal cost per cell (>= 1)
        blocked: True where the cell cannot be entered
        sand: True for sand cells
        slope_x, slope_y: Normalized downhill direction (0 where no slope)
        slope_strength: Capped slope strength (0 where no slope)
    """

    fairway: Fairway
    cell_size: float
    cost: np.ndarray
    blocked: np.ndarray
    sand: np.ndarray
    slope_x: np.ndarray
    slope_y: np.ndarray
    slope_strength: np.ndarray

    @property
    def rows(self) -> int:
        return int(self.cost.shape[0])

    @property
    def cols(self) -> int:
        return int(self.cost.shape[1])

    @property
    def has_slope(self) -> np.ndarray:
        """True where the cell carries a slope vector."""
        return self.slope_strength > 0

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_blocked(self, node: GridNode) -> bool:
        return bool(self.blocked[node.row, node.col])

    def cell_for_point(self, x: float, y: float) -> GridNode:
        """Map a world point to its cell, clamping points outside the fairway into the grid."""
        col = clamp(floor((x - self.fairway.x) / self.cell_size), 0, self.cols - 1)
        row = clamp(floor((y - self.fairway.y) / self.cell_size), 0, self.rows - 1)
        return GridNode(row=int(row), col=int(col))

    def cell_center(self, node: GridNode) -> tuple[float, float]:
        """World coordinates of a cell centre."""
        return (
            self.fairway.x + node.col * self.cell_size + self.cell_size / 2,
            self.fairway.y + node.row * self.cell_size + self.cell_size / 2,
        )

    @cached_property
    def blocked_neighbor_counts(self) -> np.ndarray:
        """Number of blocked 8-neighbours per cell; cells outside the grid do not count."""
        counts = ndimage.convolve(self.blocked.astype(np.int32), _NEIGHBOUR_KERNEL, mode="constant", cval=0)
        counts.setflags(write=False)
        return counts

    @cached_property
    def tables(self) -> GridTables:
        """Nested-list copies of the arrays; numpy scalar indexing is slow in search loops."""
        return GridTables(
            cost=self.cost.tolist(),
            blocked=self.blocked.tolist(),
            slope_x=self.slope_x.tolist(),
            slope_y=self.slope_y.tolist(),
            slope_strength=self.slope_strength.tolist(),
        )


class GridBuilder:
    """Builds a TraversalGrid from level geometry.

    Example:
        grid = GridBuilder.build(level=level, fairway=Fairway(0, 0, 800, 600), cell_size=20)
        print(grid.rows, grid.cols)  # 30 40
    """

    @staticmethod
    def grid_shape(fairway: Fairway, cell_size: float) -> tuple[int, int]:
        """Grid (rows, cols): ceil(size / cell_size), each at least 1."""
        if cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {cell_size}")
        cols = max(1, ceil(fairway.w / cell_size))
        rows = max(1, ceil(fairway.h / cell_size))
        return rows, cols

    @staticmethod
    def post_clearance(cell_size: float) -> int:
        """Safety margin added to every post radius."""
        return max(
            GridConfig.POST_CLEARANCE_MIN_PX,
            round_half_up(cell_size * GridConfig.POST_CLEARANCE_CELL_FACTOR),
        )

    @staticmethod
    def build(level: Level, fairway: Fairway, cell_size: float) -> TraversalGrid:
        """Rasterize level geometry into a traversability grid.

        Args:
            level: Course geometry
            fairway: Region to rasterize
            cell_size: Cell edge length in pixels

        Returns:
            Immutable TraversalGrid.

        Raises:
            ValueError: If cell_size is not positive.
        """
        rows, cols = GridBuilder.grid_shape(fairway=fairway, cell_size=cell_size)
        xs = fairway.x + np.arange(cols, dtype=np.float64) * cell_size + cell_size / 2
        ys = fairway.y + np.arange(rows, dtype=np.float64) * cell_size + cell_size / 2
        cx, cy = np.meshgrid(xs, ys)

        # 1. Solid terrain
        blocked = union_mask(level.obstacles, cx, cy) | union_mask(level.water, cx, cy)
        if level.posts:
            clearance = GridBuilder.post_clearance(cell_size)
            for post in level.posts:
                if post.r <= 0:
                    post = replace(post, r=GridConfig.POST_DEFAULT_RADIUS_PX)
                blocked |= post.inflated(clearance).contains_points(cx, cy)

        # 2. Bridges override anything solid beneath them
        if level.bridges:
            blocked &= ~union_mask(level.bridges, cx, cy)

        open_cells = ~blocked

        # 3. Sand
        sand = open_cells & union_mask(level.sand, cx, cy)
        cost = np.full((rows, cols), GridConfig.BASE_COST, dtype=np.float64)
        cost[sand] = np.maximum(cost[sand], GridConfig.SAND_COST)

        # 4. Slopes: vector sum of every overlapping field
        sum_x = np.zeros((rows, cols), dtype=np.float64)
        sum_y = np.zeros((rows, cols), dtype=np.float64)
        max_strength = np.zeros((rows, cols), dtype=np.float64)
        for field in level.slopes:
            inside = open_cells & field.area.contains_points(cx, cy)
            vx, vy = field.vector
            sum_x[inside] += vx
            sum_y[inside] += vy
            max_strength[inside] = np.maximum(max_strength[inside], field.strength)

        has_slope = (sum_x != 0) | (sum_y != 0)
        magnitude = np.where(has_slope, np.hypot(sum_x, sum_y), 1.0)
        slope_x = np.where(has_slope, sum_x / magnitude, 0.0)
        slope_y = np.where(has_slope, sum_y / magnitude, 0.0)
        slope_strength = np.where(has_slope, np.minimum(max_strength, GridConfig.SLOPE_STRENGTH_CAP), 0.0)
        cost = np.where(has_slope & (cost <= GridConfig.BASE_COST), GridConfig.SLOPE_BASE_COST, cost)

        for array in (cost, blocked, sand, slope_x, slope_y, slope_strength):
            array.setflags(write=False)

        logger.debug(
            f"Built {rows}x{cols} grid (cell={cell_size}px): {int(blocked.sum())} blocked, "
            f"{int(sand.sum())} sand, {int(has_slope.sum())} slope cells"
        )

        return TraversalGrid(
            fairway=fairway,
            cell_size=cell_size,
            cost=cost,
            blocked=blocked,
            sand=sand,
            slope_x=slope_x,
            slope_y=slope_y,
            slope_strength=slope_strength,
        )
