"""Floor plan validation: sanity checks on a traced outline.

Warnings never block scoring; the scorer has its own fallback for
degenerate outlines.
"""

from __future__ import annotations

from shapely.geometry import Polygon as ShapelyPolygon
from shapely.validation import explain_validity

from src.geometry import polygon_area
from .models import FloorPlan


def validate_floor_plan(plan: FloorPlan, min_area: float = 1e-9) -> list[str]:
    """Validate a FloorPlan outline. Returns warning strings (empty = clean)."""
    warnings: list[str] = []
    pts = plan.points

    if len(pts) < 3:
        warnings.append(
            f"Outline has only {len(pts)} vertices; need at least 3."
        )
        return warnings

    # ── Planarity ──
    raised = [i for i, p in enumerate(pts) if p.z != 0]
    if raised:
        warnings.append(
            f"{len(raised)} vertices have non-zero z; only x/y are used."
        )

    # ── Area ──
    area = abs(polygon_area(pts))
    if area < min_area:
        warnings.append(f"Outline area is {area:.2f}; the plan is degenerate.")
        return warnings

    # ── Self-intersection ──
    poly = ShapelyPolygon([(p.x, p.y) for p in pts])
    if not poly.is_valid:
        warnings.append(f"Outline is not a simple polygon: {explain_validity(poly)}.")

    return warnings
