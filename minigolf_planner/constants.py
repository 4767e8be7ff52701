"""Configuration constants for Minigolf Planner.

Fixed algorithm constants are centralized here. Caller-tunable values are
exposed through HeuristicsConfig (model/heuristics_config.py), whose defaults
are read from these classes so every operation shares one source of truth.

Classes:
    GridConfig: Rasterization costs, clearances and slope directions
    SearchConfig: A* step weights and slope modulation
    ParConfig: Stroke model defaults and par bounds
    DiversityConfig: K-best route diversification limits
    GoalConfig: Cup placement suggestion defaults
    LintConfig: Cup placement lint thresholds
"""

from math import sqrt

SQRT2 = sqrt(2.0)
SQRT1_2 = sqrt(0.5)


class GridConfig:
    """Traversability grid rasterization parameters."""

    # Terrain traversal costs (multiplied into every step weight)
    BASE_COST = 1.0
    SAND_COST = 3.0
    SLOPE_BASE_COST = 1.25  # Softer than sand, applied only when cost is still at base

    # Post clearance: max(MIN, round(cell_size * FACTOR)) added to the post radius
    POST_CLEARANCE_MIN_PX = 6
    POST_CLEARANCE_CELL_FACTOR = 0.4
    POST_DEFAULT_RADIUS_PX = 8.0  # Used when a post has no radius

    # Slope field strength bounds
    SLOPE_STRENGTH_MIN = 0.2
    SLOPE_STRENGTH_MAX = 2.0
    SLOPE_STRENGTH_DEFAULT = 1.0
    SLOPE_STRENGTH_CAP = 1.5  # Cap for the per-cell reported strength

    # Compass direction -> downhill unit vector (screen space, +y points down)
    SLOPE_DIRECTIONS = {
        "N": (0.0, -1.0),
        "S": (0.0, 1.0),
        "W": (-1.0, 0.0),
        "E": (1.0, 0.0),
        "NW": (-SQRT1_2, -SQRT1_2),
        "NE": (SQRT1_2, -SQRT1_2),
        "SW": (-SQRT1_2, SQRT1_2),
        "SE": (SQRT1_2, SQRT1_2),
    }
    assert len(SLOPE_DIRECTIONS) == 8


class SearchConfig:
    """Weighted A* search parameters."""

    # 8-connected moves as (d_row, d_col, step_weight); order fixes tie-breaking
    MOVES = [
        (0, 1, 1.0),
        (0, -1, 1.0),
        (1, 0, 1.0),
        (-1, 0, 1.0),
        (1, 1, SQRT2),
        (-1, 1, SQRT2),
        (1, -1, SQRT2),
        (-1, -1, SQRT2),
    ]

    # Slope modulation of the search priority:
    # factor = clamp(1 + UPHILL_WEIGHT*uphill*s - DOWNHILL_WEIGHT*downhill*s, MIN, MAX)
    UPHILL_WEIGHT = 0.5
    DOWNHILL_WEIGHT = 0.15
    SLOPE_FACTOR_MIN = 0.75
    SLOPE_FACTOR_MAX = 1.6

    # Step alignment with the slope vector must exceed this to count as down/uphill
    ALIGNMENT_DEADBAND = 0.05
    # Single-step downhill contribution that counts as a free-rolling segment
    AUTO_ASSIST_STEP_MIN = 0.6


class ParConfig:
    """Stroke model defaults (see HeuristicsConfig for per-call overrides)."""

    BASELINE_SHOT_PX = 320.0  # Typical effective shot distance at the reference friction
    REFERENCE_FRICTION_K = 1.2
    FRICTION_FLOOR = 0.05
    SAND_FRICTION_MULTIPLIER = 6.0  # Gameplay default the sand penalty was tuned for
    SAND_PENALTY_PER_CELL = 0.01
    TURN_PENALTY_PER_TURN = 0.08
    TURN_PENALTY_MAX = 1.5
    BANK_WEIGHT = 0.12  # Strokes per average blocked neighbour
    BANK_PENALTY_MAX = 1.0
    HILL_BUMP = 0.15
    HILL_COVERAGE_FRACTION = 0.5  # Slope coverage is measured against half the path cells

    # Slope assistance (K-best candidates)
    DOWNHILL_BONUS_FACTOR = 0.18
    DOWNHILL_BONUS_MAX = 1.6
    AUTO_ASSIST_MOMENTUM_THRESHOLD = 1.35
    AUTO_ASSIST_BONUS = 0.45
    AUTO_ASSIST_SEGMENT_THRESHOLD = 3
    MIN_STROKES = 0.35

    # Opening stroke added before rounding, and the par bounds
    OPENING_STROKE = 1
    MIN_PAR = 2
    MAX_PAR = 7

    # Unreachable fallback: round(distance / FALLBACK_PX_PER_STROKE + obstacles * FALLBACK_PER_OBSTACLE)
    FALLBACK_PX_PER_STROKE = 260.0
    FALLBACK_PER_OBSTACLE = 0.3


class DiversityConfig:
    """K-best route diversification limits."""

    DEFAULT_K = 3
    MAX_DEPTH = 2  # Re-sampling depth below the base path
    POOL_FACTOR = 6  # Pool size = max(K * POOL_FACTOR, K + POOL_EXTRA)
    POOL_EXTRA = 4

    # Two candidates are the same route when overlap / min(len) >= threshold
    SIMILARITY_THRESHOLD = 0.6
    # ...unless their slope behaviour differs by at least one of these gaps
    MOMENTUM_GAP = 0.6
    AUTO_ASSIST_GAP = 2
    # A same-route replacement must be cheaper by more than this many strokes
    REPLACE_MARGIN = 0.05

    # Interior sampling of known paths
    MIN_SAMPLE_STEP = 2
    MIN_SAMPLES = 4
    SAMPLES_PER_K = 3
    FIRST_SAMPLE_INDEX = 2
    MIN_PATH_CELLS = 4  # Shorter paths have no interior cells to ban
    MIN_PAIR_PATH_CELLS = 6  # Pair bans need room for two interior cells


class GoalConfig:
    """Cup placement suggestion defaults."""

    DEFAULT_COUNT = 5
    EDGE_MARGIN_MIN_PX = 20
    EDGE_MARGIN_CELLS = 2
    MIN_DISTANCE_FRACTION = 0.25  # Of the fairway's larger dimension
    MIN_STRAIGHTNESS_RATIO = 1.08
    MIN_TURNS = 0
    MIN_SEPARATION_CELLS = 6
    TURN_SCORE_CELLS = 2  # Score per turn, in cell sizes
    BANK_SCORE_CELLS = 0.5  # Score per blocked neighbour along the path, in cell sizes


class LintConfig:
    """Cup placement lint thresholds."""

    MAX_BYPASS_TURNS = 1
    BYPASS_STRAIGHTNESS_RATIO = 1.08
    BYPASS_CORRIDOR_MAX = 1.0
    EDGE_MARGIN_MIN_PX = 20
    EDGE_MARGIN_CELLS = 2
