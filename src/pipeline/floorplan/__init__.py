"""Floor plan: dataclasses, parsing, validation, and serialization."""

from .models import (
    FloorPlan, Column, ScoringRequest, AccuracyResult, PlacementRecord,
    ScoreBreakdown, FloorPlanParseError, plan_stem,
)
from .parsing import parse_point, parse_floor_plan, parse_columns, parse_export
from .validation import validate_floor_plan
from .serialization import (
    point_to_dict, floor_plan_to_dict, columns_to_list, accuracy_to_dict,
)

__all__ = [
    # Models
    "FloorPlan", "Column", "ScoringRequest", "AccuracyResult",
    "PlacementRecord", "ScoreBreakdown", "FloorPlanParseError", "plan_stem",
    # Parsing / Validation / Serialization
    "parse_point", "parse_floor_plan", "parse_columns", "parse_export",
    "validate_floor_plan",
    "point_to_dict", "floor_plan_to_dict", "columns_to_list", "accuracy_to_dict",
]
