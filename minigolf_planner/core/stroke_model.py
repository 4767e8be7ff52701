"""Stroke model - Converts path metrics into stroke and par estimates.

Shot distance scales inversely with the live ball friction:
    D = baseline_shot_px × (reference_friction_k / friction_k)

Base strokes:
    strokes = length_px / D + sand + turn + corridor (+ slope bump)

Assisted strokes (K-best candidates) additionally subtract a downhill bonus
and, for free-rolling routes, an auto-assist bonus. Par adds the opening
stroke and is clamped to [MIN_PAR, MAX_PAR].
"""

import logging
from math import floor

from minigolf_planner.constants import ParConfig
from minigolf_planner.core.numeric import clamp, round_half_up
from minigolf_planner.core.path_metrics import PathMetrics
from minigolf_planner.model.heuristics_config import HeuristicsConfig
from minigolf_planner.model.level import Level

logger = logging.getLogger(__name__)


class StrokeModel:
    """Stroke estimates for one configuration.

    Example:
        model = StrokeModel(config=HeuristicsConfig(friction_k=2.4))
        model.shot_distance_px  # 160.0, half the baseline at double friction
    """

    def __init__(self, config: HeuristicsConfig) -> None:
        self.config = config

    @property
    def shot_distance_px(self) -> float:
        """Effective shot distance per stroke at the live friction."""
        reference_k = max(ParConfig.FRICTION_FLOOR, self.config.reference_friction_k)
        live_k = max(ParConfig.FRICTION_FLOOR, self.config.effective_friction_k)
        return self.config.baseline_shot_px * (reference_k / live_k)

    def sand_penalty(self, sand_cells: int) -> float:
        cfg = self.config
        return sand_cells * cfg.sand_penalty_per_cell * (cfg.sand_friction_multiplier / ParConfig.SAND_FRICTION_MULTIPLIER)

    def turn_penalty(self, turns: int) -> float:
        return min(self.config.turn_penalty_max, turns * self.config.turn_penalty_per_turn)

    def corridor_penalty(self, corridor_density: float) -> float:
        return min(self.config.bank_penalty_max, corridor_density * self.config.bank_weight)

    def slope_bump(self, slope_cells: int, cell_count: int) -> float:
        """Bump for paths crossing slopes, scaled by coverage of half the path."""
        if slope_cells <= 0:
            return 0.0
        coverage = min(1.0, slope_cells / max(1, floor(cell_count * ParConfig.HILL_COVERAGE_FRACTION)))
        return self.config.hill_bump * (0.5 + 0.5 * coverage)

    def base_strokes(self, metrics: PathMetrics) -> float:
        """Distance strokes plus terrain penalties, without slope assistance."""
        return (
            metrics.length_px / self.shot_distance_px
            + self.sand_penalty(metrics.sand_cells)
            + self.turn_penalty(metrics.turns)
            + self.corridor_penalty(metrics.corridor_density)
            + self.slope_bump(metrics.slope_cells, metrics.cell_count)
        )

    def assisted_strokes(self, metrics: PathMetrics) -> float:
        """Base strokes minus downhill and auto-assist bonuses.

        Both bonuses only apply with positive downhill momentum, and each
        subtraction is floored at min_strokes.
        """
        cfg = self.config
        strokes = self.base_strokes(metrics)
        if metrics.downhill_momentum <= 0:
            return strokes

        bonus = min(cfg.downhill_bonus_max, metrics.downhill_momentum * cfg.downhill_bonus_factor)
        strokes = max(cfg.min_strokes, strokes - bonus)
        if (
            metrics.auto_assist_segments >= cfg.auto_assist_segment_threshold
            or metrics.net_momentum > cfg.auto_assist_momentum_threshold
        ):
            strokes = max(cfg.min_strokes, strokes - cfg.auto_assist_bonus)
        return strokes

    @staticmethod
    def par_for(strokes: float) -> int:
        """Par for a stroke estimate: opening stroke added, rounded and clamped."""
        return int(clamp(round_half_up(strokes + ParConfig.OPENING_STROKE), ParConfig.MIN_PAR, ParConfig.MAX_PAR))

    @staticmethod
    def fallback_par(level: Level) -> int:
        """Distance-based par used when the cup cannot be reached."""
        raw = level.straight_distance / ParConfig.FALLBACK_PX_PER_STROKE + level.solid_shape_count * ParConfig.FALLBACK_PER_OBSTACLE
        par = int(clamp(round_half_up(raw), ParConfig.MIN_PAR, ParConfig.MAX_PAR))
        logger.debug(f"Fallback par {par} from {level.straight_distance:.0f}px and {level.solid_shape_count} solid shapes")
        return par
