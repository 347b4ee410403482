"""Optimal column positions: coarse interior grid sampling.

This is a simplified heuristic, not a structural analysis: the plan's
bounding box is cut into square cells and every cell centre that falls
inside the outline is taken as a reference position.  Scores and test
fixtures are defined relative to this exact sampling, so keep it as is.
"""

from __future__ import annotations

import logging
import math

from src.geometry import Point, Polygon, point_in_polygon, polygon_bounds
from src.pipeline.config import SCORING_RULES

log = logging.getLogger("columnAccuracy.scorer.optimal")


def compute_optimal_positions(
    polygon: Polygon,
    grid_size: float = SCORING_RULES.default_grid_size,
) -> list[Point]:
    """Return grid-cell centres inside *polygon*, i outer / j inner.

    Fewer than 3 vertices yields an empty list whatever the grid size;
    otherwise a non-positive *grid_size* raises ValueError.
    """
    positions: list[Point] = []
    if len(polygon) < 3:
        return positions

    if grid_size <= 0:
        raise ValueError(f"grid_size must be > 0, got {grid_size}")

    min_x, min_y, max_x, max_y = polygon_bounds(polygon)
    num_cols = math.floor((max_x - min_x) / grid_size)
    num_rows = math.floor((max_y - min_y) / grid_size)

    for i in range(num_cols):
        for j in range(num_rows):
            centre = Point(
                min_x + (i + 0.5) * grid_size,
                min_y + (j + 0.5) * grid_size,
                0.0,
            )
            if point_in_polygon(centre, polygon):
                positions.append(centre)

    log.debug(
        "Grid %dx%d (step %.2f): %d of %d cell centres inside outline",
        num_cols, num_rows, grid_size, len(positions), num_cols * num_rows,
    )
    return positions
