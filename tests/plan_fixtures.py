"""Floor plan test fixtures: hardcoded plans and column sets.

  - square:  10 × 10 unit square, corners (0,0) (10,0) (10,10) (0,10)
  - l_shape: 12 × 12 L with the top-right 6 × 6 quadrant removed
  - sliver:  2-point "outline" (degenerate)

The square at grid size 5 samples exactly four centres:
(2.5, 2.5), (2.5, 7.5), (7.5, 2.5), (7.5, 7.5).
"""

from __future__ import annotations

from src.geometry import Point
from src.pipeline.floorplan.models import Column, FloorPlan


def make_square_plan(name: str = "square.csv") -> FloorPlan:
    return FloorPlan(
        name=name,
        id="plan_square",
        points=[
            Point(0, 0, 0),
            Point(10, 0, 0),
            Point(10, 10, 0),
            Point(0, 10, 0),
        ],
    )


def make_l_plan(name: str = "l_shape.csv") -> FloorPlan:
    return FloorPlan(
        name=name,
        id="plan_l",
        points=[
            Point(0, 0, 0),
            Point(12, 0, 0),
            Point(12, 6, 0),
            Point(6, 6, 0),
            Point(6, 12, 0),
            Point(0, 12, 0),
        ],
    )


def make_sliver_plan() -> FloorPlan:
    return FloorPlan(name="sliver.csv", points=[Point(0, 0, 0), Point(10, 0, 0)])


def column(cid: str, x: float, y: float, size: float = 0.5) -> Column:
    return Column(id=cid, position=Point(x, y, 0), size=size)


def export_dict(plan: FloorPlan, columns: list[Column], username: str = "",
                engineer_type: str = "") -> dict:
    """Build a dict in the research tool's export layout."""
    return {
        "floorPlan": {
            "name": plan.name,
            "id": plan.id,
            "points": [{"x": p.x, "y": p.y, "z": p.z} for p in plan.points],
        },
        "userData": {
            "gridLines": [],
            "columns": [
                {"id": c.id,
                 "position": {"x": c.position.x, "y": c.position.y, "z": c.position.z},
                 "size": c.size}
                for c in columns
            ],
        },
        "userCredentials": {
            "username": username,
            "email": username,
            "engineerType": engineer_type,
            "lastLogin": "2025-05-14T10:00:00Z",
        },
    }
