"""Floor plan serialization: convert model objects to JSON-safe dicts."""

from __future__ import annotations

from src.geometry import Point

from .models import AccuracyResult, Column, FloorPlan, ScoreBreakdown


def point_to_dict(p: Point) -> dict:
    return {"x": p.x, "y": p.y, "z": p.z}


def floor_plan_to_dict(plan: FloorPlan) -> dict:
    """Convert a FloorPlan to a JSON-serializable dict."""
    return {
        "name": plan.name,
        "id": plan.id,
        "points": [point_to_dict(p) for p in plan.points],
    }


def columns_to_list(columns: list[Column]) -> list[dict]:
    return [
        {"id": c.id, "position": point_to_dict(c.position), "size": c.size}
        for c in columns
    ]


def accuracy_to_dict(result: AccuracyResult, breakdown: ScoreBreakdown | None = None) -> dict:
    """Convert an AccuracyResult (plus optional breakdown) to a dict."""
    out = {
        "score": result.score,
        "feedback": result.feedback,
        "details": result.details,
    }
    if breakdown is not None:
        out.update({
            "optimalityPercent": breakdown.optimality_percent,
            "similarityPercent": breakdown.similarity_percent,
            "optimalPositions": [point_to_dict(p) for p in breakdown.optimal_positions],
            "historySessions": len(breakdown.session_similarities),
        })
    return out
