"""Goal placement - Alternate cup suggestions and lint for the current cup.

GoalSuggester scans every open cell as a potential cup:
    reject: blocked, inside the edge margin, too close to the tee,
            unreachable, too straight, too few turns, outside the region
    score = length_px + turns × (2 × cell) + corridor_sum × bank_weight
Candidates are ranked by score (stable, descending) and picked greedily with
a minimum separation of min_separation_cells × cell.

GoalLinter checks the current cup for placements that make the hole trivial.
"""

import logging
from math import hypot
from typing import Optional

from minigolf_planner.constants import GoalConfig, LintConfig
from minigolf_planner.core.astar_search import WeightedAStar
from minigolf_planner.core.grid_builder import GridBuilder
from minigolf_planner.core.path_metrics import PathAnalyzer
from minigolf_planner.model.cup_candidate import CupCandidate
from minigolf_planner.model.grid_node import GridNode
from minigolf_planner.model.heuristics_config import HeuristicsConfig
from minigolf_planner.model.level import Fairway, Level
from minigolf_planner.model.warning import (
    EdgeProximityWarning,
    LintWarning,
    ObstacleBypassWarning,
    UnreachableCupWarning,
)

logger = logging.getLogger(__name__)


class GoalSuggester:
    """Proposes cup positions that produce non-trivial holes.

    Example:
        suggester = GoalSuggester(config=HeuristicsConfig(min_turns=2))
        for cup in suggester.suggest(level=level, fairway=fairway, cell_size=20, count=3):
            print(cup.x, cup.y, cup.score)
    """

    def __init__(self, config: Optional[HeuristicsConfig] = None) -> None:
        self.config = config or HeuristicsConfig()

    def suggest(
        self,
        level: Level,
        fairway: Fairway,
        cell_size: float,
        count: int = GoalConfig.DEFAULT_COUNT,
    ) -> list[CupCandidate]:
        """Rank alternate cup cells.

        Args:
            level: Course geometry (the current cup is ignored)
            fairway: Region to rasterize and scan
            cell_size: Grid cell size in pixels
            count: Maximum number of suggestions

        Returns:
            Up to count CupCandidates, best first.
        """
        cfg = self.config
        grid = GridBuilder.build(level=level, fairway=fairway, cell_size=cell_size)
        planner = WeightedAStar(grid=grid)
        analyzer = PathAnalyzer(grid=grid)
        start = grid.cell_for_point(level.tee.x, level.tee.y)

        edge_margin = cfg.edge_margin_for(cell_size)
        min_distance = cfg.min_distance_for(fairway.larger_side)
        bank_weight = cfg.goal_bank_weight_for(cell_size)
        turn_weight = cell_size * GoalConfig.TURN_SCORE_CELLS

        scored: list[CupCandidate] = []
        blocked = grid.tables.blocked
        for row in range(grid.rows):
            for col in range(grid.cols):
                if blocked[row][col]:
                    continue
                node = GridNode(row=row, col=col)
                x, y = grid.cell_center(node)
                if fairway.is_near_edge(x, y, edge_margin):
                    continue
                distance = hypot(x - level.tee.x, y - level.tee.y)
                if distance < min_distance:
                    continue

                result = planner.search(start=start, goal=node)
                if not result.found:
                    continue
                metrics = analyzer.analyze(result.path)
                if metrics.length_px < distance * cfg.min_straightness_ratio:
                    continue
                if metrics.turns < cfg.min_turns:
                    continue
                if cfg.region is not None and not cfg.region.contains(x, y):
                    continue

                score = metrics.length_px + metrics.turns * turn_weight + metrics.corridor_sum * bank_weight
                scored.append(CupCandidate(x=x, y=y, score=score, length_px=metrics.length_px, turns=metrics.turns))

        # sorted() is stable: equal scores keep row-major scan order
        ranked = sorted(scored, key=lambda cup: cup.score, reverse=True)
        min_separation = cell_size * cfg.min_separation_cells
        picked: list[CupCandidate] = []
        for cup in ranked:
            if len(picked) >= count:
                break
            if any(hypot(p.x - cup.x, p.y - cup.y) < min_separation for p in picked):
                continue
            picked.append(cup)

        logger.info(f"Cup suggestions: {len(scored)} viable cells -> {len(picked)} picked")
        return picked


class GoalLinter:
    """Flags suspicious placements of the current cup."""

    @staticmethod
    def lint(level: Level, fairway: Fairway, cell_size: float) -> list[LintWarning]:
        """Check the current cup placement.

        Args:
            level: Course geometry
            fairway: Region to rasterize
            cell_size: Grid cell size in pixels

        Returns:
            Independent warnings; exactly one UnreachableCupWarning when no
            path exists.
        """
        grid = GridBuilder.build(level=level, fairway=fairway, cell_size=cell_size)
        start = grid.cell_for_point(level.tee.x, level.tee.y)
        goal = grid.cell_for_point(level.cup.x, level.cup.y)
        result = WeightedAStar(grid=grid).search(start=start, goal=goal)
        if not result.found:
            logger.warning("Lint: cup unreachable")
            return [UnreachableCupWarning()]

        warnings: list[LintWarning] = []
        metrics = PathAnalyzer(grid=grid).analyze(result.path)
        straight = level.straight_distance
        if (
            level.solid_shape_count > 0
            and metrics.turns <= LintConfig.MAX_BYPASS_TURNS
            and metrics.length_px < straight * LintConfig.BYPASS_STRAIGHTNESS_RATIO
            and metrics.corridor_density < LintConfig.BYPASS_CORRIDOR_MAX
        ):
            warnings.append(
                ObstacleBypassWarning(
                    path_length_px=metrics.length_px,
                    straight_distance_px=straight,
                    turns=metrics.turns,
                    corridor_density=metrics.corridor_density,
                )
            )

        edge_margin = max(LintConfig.EDGE_MARGIN_CELLS * cell_size, LintConfig.EDGE_MARGIN_MIN_PX)
        if fairway.is_near_edge(level.cup.x, level.cup.y, edge_margin):
            warnings.append(EdgeProximityWarning(margin_px=edge_margin))

        if warnings:
            logger.info(f"Lint: {len(warnings)} warning(s)")
        return warnings
