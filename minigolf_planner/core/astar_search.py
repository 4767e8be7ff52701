"""Weighted A* search over a TraversalGrid.

Finds a minimum-cost 8-connected path between two grid cells.

Step Cost (search priority):
    step = weight × (cost_a + cost_b) / 2 × slope_factor

Where:
- weight is 1 for orthogonal and √2 for diagonal moves
- slope_factor = clamp(1 + 0.5·uphill·s − 0.15·downhill·s, 0.75, 1.6), using the
  averaged slope vector and strength s of both cells, projected on the unit step

Reported cost ignores the slope factor:
    path_cost = Σ weight × arrival.cost

so path length reflects raw terrain difficulty while the search itself still
prefers rolling with the slope.

Diagonal moves are rejected when either flanking orthogonal cell is blocked.
Banned nodes are skipped when popped from the open set.
"""

import heapq
import logging
from dataclasses import dataclass
from math import inf
from typing import Optional

from minigolf_planner.constants import SQRT2, SearchConfig
from minigolf_planner.core.grid_builder import TraversalGrid
from minigolf_planner.core.numeric import clamp
from minigolf_planner.model.grid_node import GridNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchConstraints:
    """Optional restrictions applied during a search.

    Attributes:
        banned_nodes: Cells that are never expanded
    """

    banned_nodes: frozenset[GridNode] = frozenset()


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a single search.

    Attributes:
        found: Whether the goal was reached
        path: Cells from start to goal (empty when not found)
        path_cost: Σ step weight × arrival cell cost, in cell units
        expansions: Number of expanded nodes
    """

    found: bool
    path: tuple[GridNode, ...] = ()
    path_cost: float = 0.0
    expansions: int = 0

    @classmethod
    def not_found(cls, expansions: int = 0) -> "SearchResult":
        return cls(found=False, expansions=expansions)


def octile_distance(a: GridNode, b: GridNode) -> float:
    """Octile distance between two cells (orthogonal 1, diagonal √2)."""
    dr = abs(a.row - b.row)
    dc = abs(a.col - b.col)
    return (dr + dc) + (SQRT2 - 2.0) * min(dr, dc)


def step_weight(a: GridNode, b: GridNode) -> float:
    """Base weight of a single 8-connected step."""
    return SQRT2 if a.row != b.row and a.col != b.col else 1.0


class WeightedAStar:
    """A* planner bound to one grid.

    Example:
        planner = WeightedAStar(grid=grid)
        result = planner.search(start=grid.cell_for_point(60, 300), goal=grid.cell_for_point(740, 300))
    """

    def __init__(self, grid: TraversalGrid) -> None:
        self.grid = grid

    def search(
        self,
        start: GridNode,
        goal: GridNode,
        constraints: Optional[SearchConstraints] = None,
    ) -> SearchResult:
        """Find the cheapest path from start to goal.

        Args:
            start: Start cell
            goal: Goal cell
            constraints: Optional banned nodes

        Returns:
            SearchResult; found=False when the goal is unreachable or either
            endpoint is blocked.
        """
        grid = self.grid
        tables = grid.tables
        blocked = tables.blocked
        rows, cols = grid.rows, grid.cols

        if blocked[start.row][start.col] or blocked[goal.row][goal.col]:
            return SearchResult.not_found()
        if start == goal:
            return SearchResult(found=True, path=(start,), path_cost=0.0)

        banned = constraints.banned_nodes if constraints is not None else frozenset()

        best_g: dict[GridNode, float] = {start: 0.0}
        parents: dict[GridNode, GridNode] = {}
        sequence = 0
        open_heap: list[tuple[float, int, float, GridNode]] = [(octile_distance(start, goal), sequence, 0.0, start)]
        expansions = 0

        while open_heap:
            _, _, g, current = heapq.heappop(open_heap)
            if g > best_g.get(current, inf):
                continue  # Stale entry
            if current in banned:
                continue
            if current == goal:
                path = self._reconstruct(parents=parents, goal=goal)
                logger.debug(f"A* {start} -> {goal}: {len(path)} cells after {expansions} expansions")
                return SearchResult(
                    found=True,
                    path=path,
                    path_cost=self.path_cost(path),
                    expansions=expansions,
                )

            expansions += 1
            r, c = current
            for dr, dc, weight in SearchConfig.MOVES:
                nr, nc = r + dr, c + dc
                if not (0 <= nr < rows and 0 <= nc < cols) or blocked[nr][nc]:
                    continue
                # No corner cutting
                if dr != 0 and dc != 0 and (blocked[r][nc] or blocked[nr][c]):
                    continue

                neighbor = GridNode(row=nr, col=nc)
                step = weight * (tables.cost[r][c] + tables.cost[nr][nc]) / 2
                step *= self._slope_factor(r=r, c=c, nr=nr, nc=nc, dr=dr, dc=dc, weight=weight)
                tentative = g + step
                if tentative < best_g.get(neighbor, inf):
                    best_g[neighbor] = tentative
                    parents[neighbor] = current
                    sequence += 1
                    heapq.heappush(
                        open_heap,
                        (tentative + octile_distance(neighbor, goal), sequence, tentative, neighbor),
                    )

        logger.debug(f"A* {start} -> {goal}: exhausted after {expansions} expansions")
        return SearchResult.not_found(expansions=expansions)

    def path_cost(self, path: tuple[GridNode, ...]) -> float:
        """Raw terrain cost of a path: Σ step weight × arrival cell cost."""
        cost = self.grid.tables.cost
        return sum(step_weight(a, b) * cost[b.row][b.col] for a, b in zip(path, path[1:]))

    def _slope_factor(self, r: int, c: int, nr: int, nc: int, dr: int, dc: int, weight: float) -> float:
        tables = self.grid.tables
        strength = (tables.slope_strength[r][c] + tables.slope_strength[nr][nc]) / 2
        if strength <= 0:
            return 1.0
        sx = (tables.slope_x[r][c] + tables.slope_x[nr][nc]) / 2
        sy = (tables.slope_y[r][c] + tables.slope_y[nr][nc]) / 2
        alignment = (sx * dc + sy * dr) / weight
        downhill = max(0.0, alignment)
        uphill = max(0.0, -alignment)
        return clamp(
            1 + SearchConfig.UPHILL_WEIGHT * uphill * strength - SearchConfig.DOWNHILL_WEIGHT * downhill * strength,
            SearchConfig.SLOPE_FACTOR_MIN,
            SearchConfig.SLOPE_FACTOR_MAX,
        )

    @staticmethod
    def _reconstruct(parents: dict[GridNode, GridNode], goal: GridNode) -> tuple[GridNode, ...]:
        path = [goal]
        while path[-1] in parents:
            path.append(parents[path[-1]])
        path.reverse()
        return tuple(path)
