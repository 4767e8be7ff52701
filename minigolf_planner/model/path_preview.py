"""PathPreview - Tee-to-cup route data for the editor overlay.

The editor draws the polyline through the cell centres and tints sand and
slope sections. For richer overlays the preview converts to shapely geometry:
a LineString of the route and a buffered corridor polygon of a given width.
"""

from dataclasses import dataclass, field

from shapely.geometry import LineString, Polygon

from minigolf_planner.model.grid_node import GridNode


@dataclass(frozen=True)
class PathPreview:
    """Overlay data for the current tee-to-cup route.

    Attributes:
        found: Whether a route exists; all sequences are empty otherwise
        path_cells: Grid cells from tee to cup
        world_points: Cell centres in pixels, parallel to path_cells
        cell_size: Grid cell size used
        cols, rows: Grid dimensions
        sand_at: Per-point sand flag
        slope_at: Per-point slope flag
    """

    found: bool
    cell_size: float
    cols: int
    rows: int
    path_cells: tuple[GridNode, ...] = field(default_factory=tuple)
    world_points: tuple[tuple[float, float], ...] = field(default_factory=tuple)
    sand_at: tuple[bool, ...] = field(default_factory=tuple)
    slope_at: tuple[bool, ...] = field(default_factory=tuple)

    def as_linestring(self) -> LineString:
        """Route as a shapely LineString; empty when fewer than 2 points."""
        if len(self.world_points) < 2:
            return LineString()
        return LineString(self.world_points)

    def corridor_polygon(self, width_px: float) -> Polygon:
        """Buffered ribbon of width_px around the route.

        Returns:
            Buffered Polygon; an empty Polygon when the route has no length.
        """
        line = self.as_linestring()
        if line.is_empty or width_px <= 0:
            return Polygon()
        buffered = line.buffer(width_px / 2, cap_style="round", join_style="round")
        if buffered.is_empty or not isinstance(buffered, Polygon):
            return Polygon()
        return buffered
