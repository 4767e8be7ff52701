"""HeuristicsConfig - Caller-tunable parameters for every analysis operation.

One explicit structure replaces per-call inline defaults. Every field has a
default taken from constants.py, so `HeuristicsConfig()` reproduces the
stock behaviour and callers override only what they need, e.g. the live
physics friction:

    config = HeuristicsConfig(friction_k=live_physics.friction_k)
"""

from dataclasses import dataclass
from math import floor
from typing import Optional

from minigolf_planner.constants import GoalConfig, ParConfig
from minigolf_planner.model.shapes import PolygonShape


@dataclass(frozen=True)
class HeuristicsConfig:
    """Tunable parameters for par estimation, diversification and cup suggestions.

    Attributes:
        baseline_shot_px: Effective shot distance per stroke at the reference friction
        reference_friction_k: Friction the baseline shot distance was tuned for
        friction_k: Live physics friction; None means the reference friction
        sand_friction_multiplier: Gameplay sand friction multiplier
        sand_penalty_per_cell: Strokes per sand cell at the default multiplier
        turn_penalty_per_turn: Strokes per direction change along the path
        turn_penalty_max: Cap for the turn penalty
        bank_weight: Strokes per average blocked neighbour (corridor contact)
        bank_penalty_max: Cap for the corridor penalty
        hill_bump: Strokes added when the path crosses slope cells
        downhill_bonus_factor: Strokes removed per unit of downhill momentum
        downhill_bonus_max: Cap for the downhill bonus
        auto_assist_momentum_threshold: Net momentum that triggers the assist bonus
        auto_assist_bonus: Strokes removed for free-rolling routes
        auto_assist_segment_threshold: Assist segments that trigger the assist bonus
        min_strokes: Floor applied after slope bonuses
        edge_margin_px: Cup suggestion edge margin; None means max(20, round(2 * cell))
        min_distance_px: Minimum tee distance for cup suggestions; None means 25% of
            the fairway's larger side
        min_straightness_ratio: Paths shorter than straight * ratio count as too straight
        min_turns: Minimum turns for a cup suggestion
        min_separation_cells: Minimum spacing between suggested cups, in cells
        goal_bank_weight: Score per blocked neighbour along a suggestion path; None
            means half a cell size
        region: Optional polygon every suggested cup must lie in
    """

    baseline_shot_px: float = ParConfig.BASELINE_SHOT_PX
    reference_friction_k: float = ParConfig.REFERENCE_FRICTION_K
    friction_k: Optional[float] = None
    sand_friction_multiplier: float = ParConfig.SAND_FRICTION_MULTIPLIER
    sand_penalty_per_cell: float = ParConfig.SAND_PENALTY_PER_CELL
    turn_penalty_per_turn: float = ParConfig.TURN_PENALTY_PER_TURN
    turn_penalty_max: float = ParConfig.TURN_PENALTY_MAX
    bank_weight: float = ParConfig.BANK_WEIGHT
    bank_penalty_max: float = ParConfig.BANK_PENALTY_MAX
    hill_bump: float = ParConfig.HILL_BUMP
    downhill_bonus_factor: float = ParConfig.DOWNHILL_BONUS_FACTOR
    downhill_bonus_max: float = ParConfig.DOWNHILL_BONUS_MAX
    auto_assist_momentum_threshold: float = ParConfig.AUTO_ASSIST_MOMENTUM_THRESHOLD
    auto_assist_bonus: float = ParConfig.AUTO_ASSIST_BONUS
    auto_assist_segment_threshold: int = ParConfig.AUTO_ASSIST_SEGMENT_THRESHOLD
    min_strokes: float = ParConfig.MIN_STROKES
    edge_margin_px: Optional[float] = None
    min_distance_px: Optional[float] = None
    min_straightness_ratio: float = GoalConfig.MIN_STRAIGHTNESS_RATIO
    min_turns: int = GoalConfig.MIN_TURNS
    min_separation_cells: float = GoalConfig.MIN_SEPARATION_CELLS
    goal_bank_weight: Optional[float] = None
    region: Optional[PolygonShape] = None

    def __post_init__(self) -> None:
        """Validate parameters after initialization."""
        if self.baseline_shot_px <= 0:
            raise ValueError(f"baseline_shot_px must be positive, got {self.baseline_shot_px}")
        if self.reference_friction_k <= 0:
            raise ValueError(f"reference_friction_k must be positive, got {self.reference_friction_k}")
        if self.friction_k is not None and self.friction_k <= 0:
            raise ValueError(f"friction_k must be positive, got {self.friction_k}")
        if self.min_separation_cells < 0:
            raise ValueError(f"min_separation_cells cannot be negative, got {self.min_separation_cells}")

    @property
    def effective_friction_k(self) -> float:
        """Live friction, falling back to the reference friction."""
        return self.reference_friction_k if self.friction_k is None else self.friction_k

    def edge_margin_for(self, cell_size: float) -> float:
        """Cup suggestion edge margin for a given cell size."""
        if self.edge_margin_px is not None:
            return self.edge_margin_px
        return max(GoalConfig.EDGE_MARGIN_MIN_PX, floor(cell_size * GoalConfig.EDGE_MARGIN_CELLS + 0.5))

    def min_distance_for(self, larger_side: float) -> float:
        """Minimum tee-to-cup distance for suggestions on a fairway."""
        if self.min_distance_px is not None:
            return self.min_distance_px
        return larger_side * GoalConfig.MIN_DISTANCE_FRACTION

    def goal_bank_weight_for(self, cell_size: float) -> float:
        """Score weight per blocked neighbour for a given cell size."""
        if self.goal_bank_weight is not None:
            return self.goal_bank_weight
        return cell_size * GoalConfig.BANK_SCORE_CELLS

