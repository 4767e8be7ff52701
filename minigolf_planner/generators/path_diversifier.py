"""Path Diversifier - K structurally different near-optimal routes.

Generation:
1. Base path: plain tee -> cup search
2. Start seeds: one forced route per passable first step from the tee cell
3. Resampling: breadth-first over known routes, ban one (then two) interior
   cells at spaced intervals and re-run the constrained search

Work is bounded by MAX_DEPTH re-sampling levels and a pool cap of
max(K * POOL_FACTOR, K + POOL_EXTRA) candidates.

Deduplication (per new route, against every kept route):
- Identical cell sequences are dropped outright
- Overlap >= SIMILARITY_THRESHOLD means "same route", unless momentum or
  auto-assist counts differ enough to be a different play style
- A same-route newcomer replaces the kept one only if clearly cheaper

Each route is scored independently with slope assistance (StrokeModel.assisted_strokes).
"""

import logging
from typing import Optional

from minigolf_planner.constants import DiversityConfig, SearchConfig
from minigolf_planner.core.astar_search import SearchConstraints, WeightedAStar
from minigolf_planner.core.grid_builder import GridBuilder, TraversalGrid
from minigolf_planner.core.numeric import round_half_up
from minigolf_planner.core.path_metrics import PathAnalyzer
from minigolf_planner.core.stroke_model import StrokeModel
from minigolf_planner.generators.par_estimator import ParEstimator
from minigolf_planner.model.candidate_path import CandidatePath, KBestResult
from minigolf_planner.model.grid_node import GridNode
from minigolf_planner.model.heuristics_config import HeuristicsConfig
from minigolf_planner.model.level import Fairway, Level

logger = logging.getLogger(__name__)


class _CandidatePool:
    """Deduplicating collection of scored routes."""

    def __init__(self, grid: TraversalGrid, stroke_model: StrokeModel, max_size: int) -> None:
        self.grid = grid
        self.analyzer = PathAnalyzer(grid=grid)
        self.stroke_model = stroke_model
        self.max_size = max_size
        self.candidates: list[CandidatePath] = []
        self._signatures: set[tuple[GridNode, ...]] = set()

    @property
    def is_full(self) -> bool:
        return len(self.candidates) >= self.max_size

    def consider(self, path: tuple[GridNode, ...]) -> Optional[CandidatePath]:
        """Score a route and add it unless it duplicates a kept one.

        Returns:
            The candidate if it was added or replaced a kept route, else None.
        """
        if not path or path in self._signatures:
            return None
        self._signatures.add(path)

        candidate = self._score(path)
        for i, existing in enumerate(self.candidates):
            if candidate.overlap_fraction(existing) < DiversityConfig.SIMILARITY_THRESHOLD:
                continue
            momentum_gap = abs(candidate.downhill_momentum - existing.downhill_momentum)
            assist_gap = abs(candidate.auto_assist_segments - existing.auto_assist_segments)
            if momentum_gap >= DiversityConfig.MOMENTUM_GAP or assist_gap >= DiversityConfig.AUTO_ASSIST_GAP:
                # Different play style on a similar line
                continue
            if candidate.strokes + DiversityConfig.REPLACE_MARGIN < existing.strokes:
                self.candidates[i] = candidate
                return candidate
            return None

        self.candidates.append(candidate)
        return candidate

    def _score(self, path: tuple[GridNode, ...]) -> CandidatePath:
        metrics = self.analyzer.analyze(path)
        strokes = self.stroke_model.assisted_strokes(metrics)
        return CandidatePath(
            path=path,
            world_points=tuple(self.grid.cell_center(node) for node in path),
            length_px=metrics.length_px,
            turns=metrics.turns,
            corridor_density=metrics.corridor_density,
            sand_cells=metrics.sand_cells,
            slope_cells=metrics.slope_cells,
            downhill_momentum=metrics.downhill_momentum,
            uphill_resistance=metrics.uphill_resistance,
            auto_assist_segments=metrics.auto_assist_segments,
            strokes=strokes,
            par=self.stroke_model.par_for(strokes),
        )


class PathDiversifier:
    """Generates up to K materially different routes from tee to cup.

    Example:
        result = PathDiversifier().suggest(level=level, fairway=fairway, cell_size=20, k=3)
        for candidate in result.candidates:
            print(candidate.par, candidate.strokes, candidate.turns)
    """

    def __init__(self, config: Optional[HeuristicsConfig] = None) -> None:
        self.config = config or HeuristicsConfig()
        self.stroke_model = StrokeModel(config=self.config)

    def suggest(self, level: Level, fairway: Fairway, cell_size: float, k: int = DiversityConfig.DEFAULT_K) -> KBestResult:
        """Find up to k diverse routes.

        Args:
            level: Course geometry
            fairway: Region to rasterize
            cell_size: Grid cell size in pixels
            k: Maximum number of candidates returned

        Returns:
            KBestResult sorted by (strokes, length_px). When the cup is
            unreachable, no candidates and the fallback par.

        Raises:
            ValueError: If k is negative.
        """
        if k < 0:
            raise ValueError(f"k cannot be negative, got {k}")

        grid = GridBuilder.build(level=level, fairway=fairway, cell_size=cell_size)
        planner = WeightedAStar(grid=grid)
        start = grid.cell_for_point(level.tee.x, level.tee.y)
        goal = grid.cell_for_point(level.cup.x, level.cup.y)

        base = planner.search(start=start, goal=goal)
        if not base.found:
            par = self.stroke_model.fallback_par(level)
            logger.warning(f"K-best: cup unreachable, fallback par {par}")
            return KBestResult(candidates=(), best_index=-1, par=par)

        max_pool = max(k * DiversityConfig.POOL_FACTOR, k + DiversityConfig.POOL_EXTRA)
        pool = _CandidatePool(grid=grid, stroke_model=self.stroke_model, max_size=max_pool)

        queue: list[tuple[tuple[GridNode, ...], int]] = []
        if pool.consider(base.path) is not None:
            queue.append((base.path, 0))

        self._seed_from_start(planner=planner, pool=pool, start=start, goal=goal)
        self._resample(planner=planner, pool=pool, queue=queue, start=start, goal=goal, k=k, max_pool=max_pool)

        ranked = sorted(pool.candidates, key=lambda c: (c.strokes, c.length_px))[:k]
        if ranked:
            par = ranked[0].par
        else:
            par = ParEstimator(config=self.config).estimate_on_grid(level=level, grid=grid).suggested_par

        logger.info(f"K-best: {len(pool.candidates)} pooled -> {len(ranked)} candidates, par {par}")
        return KBestResult(candidates=tuple(ranked), best_index=0 if ranked else -1, par=par)

    @staticmethod
    def _start_neighbors(grid: TraversalGrid, start: GridNode) -> list[GridNode]:
        """Passable first steps from the start cell, in move order."""
        blocked = grid.tables.blocked
        neighbors = []
        for dr, dc, _ in SearchConfig.MOVES:
            nr, nc = start.row + dr, start.col + dc
            if not grid.in_bounds(nr, nc) or blocked[nr][nc]:
                continue
            if dr != 0 and dc != 0 and (blocked[start.row][nc] or blocked[nr][start.col]):
                continue
            neighbors.append(GridNode(row=nr, col=nc))
        return neighbors

    def _seed_from_start(self, planner: WeightedAStar, pool: _CandidatePool, start: GridNode, goal: GridNode) -> None:
        # The start cell is banned so a forced route never doubles back through it
        constraints = SearchConstraints(banned_nodes=frozenset({start}))
        for neighbor in self._start_neighbors(grid=planner.grid, start=start):
            forced = planner.search(start=neighbor, goal=goal, constraints=constraints)
            if not forced.found:
                continue
            pool.consider((start,) + forced.path)
            if pool.is_full:
                break

    def _resample(
        self,
        planner: WeightedAStar,
        pool: _CandidatePool,
        queue: list[tuple[tuple[GridNode, ...], int]],
        start: GridNode,
        goal: GridNode,
        k: int,
        max_pool: int,
    ) -> None:
        """Breadth-first banned-cell resampling of known routes."""

        def try_banned(banned: frozenset[GridNode], depth: int) -> None:
            alt = planner.search(start=start, goal=goal, constraints=SearchConstraints(banned_nodes=banned))
            if not alt.found:
                return
            added = pool.consider(alt.path)
            if added is not None and depth < DiversityConfig.MAX_DEPTH and len(queue) < max_pool:
                queue.append((alt.path, depth + 1))

        index = 0
        while index < len(queue) and not pool.is_full:
            path, depth = queue[index]
            index += 1
            if len(path) < DiversityConfig.MIN_PATH_CELLS:
                continue

            sample_step = max(
                DiversityConfig.MIN_SAMPLE_STEP,
                round_half_up(len(path) / max(DiversityConfig.MIN_SAMPLES, k * DiversityConfig.SAMPLES_PER_K)),
            )
            first = max(DiversityConfig.FIRST_SAMPLE_INDEX, sample_step // 2)
            sample_indices = range(first, len(path) - 1, sample_step)

            for i in sample_indices:
                try_banned(banned=frozenset({path[i]}), depth=depth)

            if pool.is_full:
                break

            if len(path) >= DiversityConfig.MIN_PAIR_PATH_CELLS:
                offset = max(1, sample_step // 2)
                for i in sample_indices:
                    second = path[min(len(path) - 2, i + offset)]
                    try_banned(banned=frozenset({path[i], second}), depth=depth)
