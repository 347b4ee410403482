"""Floor plan parsing: convert raw dicts/JSON into model objects.

Accepts the research tool's export layout::

    {
      "floorPlan": {"name": "curve90.csv", "id": "...", "points": [{"x": 0, "y": 0, "z": 0}, ...]},
      "userData": {"columns": [{"id": "c1", "position": {...}, "size": 0.5}, ...]},
      "userCredentials": {"username": "...", "engineerType": "..."}
    }
"""

from __future__ import annotations

from src.geometry import Point

from .models import Column, FloorPlan, FloorPlanParseError, PlacementRecord


def _number(data: dict, key: str, where: str, default: float | None = None) -> float:
    raw = data.get(key, default)
    if raw is None:
        raise FloorPlanParseError(f"{where}.{key}", "missing")
    try:
        return float(raw)
    except (TypeError, ValueError, OverflowError):
        raise FloorPlanParseError(f"{where}.{key}", f"not a number: {raw!r}") from None


def parse_point(data: dict, where: str = "point") -> Point:
    """Parse ``{"x": .., "y": .., "z": ..}``; z defaults to 0."""
    if not isinstance(data, dict):
        raise FloorPlanParseError(where, f"expected an object, got {type(data).__name__}")
    return Point(
        x=_number(data, "x", where),
        y=_number(data, "y", where),
        z=_number(data, "z", where, default=0.0),
    )


def parse_floor_plan(data: dict) -> FloorPlan:
    """Parse a floor-plan object into a FloorPlan."""
    if not isinstance(data, dict):
        raise FloorPlanParseError("floorPlan", "expected an object")
    if "points" not in data:
        raise FloorPlanParseError("floorPlan.points", "missing")
    points = [
        parse_point(p, where=f"floorPlan.points[{i}]")
        for i, p in enumerate(data["points"])
    ]
    return FloorPlan(
        name=str(data.get("name", "")),
        id=str(data.get("id", "")),
        points=points,
    )


def parse_columns(data: list) -> list[Column]:
    """Parse a list of column objects, preserving order."""
    if not isinstance(data, list):
        raise FloorPlanParseError("columns", "expected a list")
    columns = []
    for i, c in enumerate(data):
        if not isinstance(c, dict) or "position" not in c:
            raise FloorPlanParseError(f"columns[{i}].position", "missing")
        columns.append(Column(
            id=str(c.get("id", f"col{i + 1}")),
            position=parse_point(c["position"], where=f"columns[{i}].position"),
            size=_number(c, "size", f"columns[{i}]", default=0.5),
        ))
    return columns


def parse_export(data: dict) -> PlacementRecord:
    """Parse one saved export file into a PlacementRecord."""
    if not isinstance(data, dict):
        raise FloorPlanParseError("export", "expected an object")
    plan = data.get("floorPlan") or {}
    user_data = data.get("userData") or {}
    creds = data.get("userCredentials") or {}
    for key, section in (("floorPlan", plan), ("userData", user_data),
                         ("userCredentials", creds)):
        if not isinstance(section, dict):
            raise FloorPlanParseError(key, "expected an object")
    return PlacementRecord(
        floor_plan_name=str(plan.get("name", "")),
        columns=parse_columns(user_data.get("columns", [])),
        username=str(creds.get("username", "")),
        engineer_type=str(creds.get("engineerType", "")),
    )
