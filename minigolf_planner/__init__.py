"""Minigolf Planner - Difficulty analysis for hand-authored mini-golf holes.

Rasterizes course geometry into a traversability grid, finds weighted
shortest paths from tee to cup and turns them into par estimates, diverse
alternate routes, cup placement suggestions and placement lint.

Modules:
    model: Data structures (Level, shapes, config, results)
    core: Foundation algorithms (grid builder, A*, path metrics, stroke model)
    generators: Estimators (par, K-best routes, cup suggestions, lint)
    heuristics: Plain-function entry points for the editor

Example:
    from minigolf_planner.heuristics import estimate_par
    from minigolf_planner.model import Fairway, Level

    estimate = estimate_par(Level.from_dict(document), Fairway(0, 0, 800, 600), cell_size=20)
"""
