"""Floor plan dataclasses: the scorer's input and output structures."""

from __future__ import annotations

from dataclasses import dataclass, field

from src.geometry import Point
from src.pipeline.config import SCORING_RULES


@dataclass
class FloorPlan:
    """A traced floor-plan outline.

    ``points`` are in plan order and need not be explicitly closed.
    ``name`` is the plan identity used to look up prior placements
    (e.g. ``"curve90.csv"``).
    """
    name: str
    points: list[Point]
    id: str = ""

    @property
    def stem(self) -> str:
        """Plan name without a trailing ``.csv``."""
        return plan_stem(self.name)


@dataclass
class Column:
    id: str
    position: Point
    size: float = 0.5       # footprint radius, rendering only


@dataclass
class ScoringRequest:
    floor_plan: FloorPlan
    columns: list[Column]
    grid_size: float = SCORING_RULES.default_grid_size

    @property
    def plan_name(self) -> str:
        return self.floor_plan.name


@dataclass(frozen=True)
class AccuracyResult:
    score: int          # optimality percentage, 0..100
    feedback: str       # peer-similarity sentence
    details: str        # one line per user column, input order


@dataclass
class PlacementRecord:
    """One prior user's column set for a plan, as loaded from history."""
    floor_plan_name: str
    columns: list[Column]
    username: str = ""
    engineer_type: str = ""


@dataclass
class ScoreBreakdown:
    """Intermediate values of a scoring run."""
    optimal_positions: list[Point]
    column_distances: list[float] = field(default_factory=list)
    column_scores: list[float] = field(default_factory=list)
    session_similarities: list[float] = field(default_factory=list)
    optimality_percent: int = 0
    similarity_percent: int = 0

    @property
    def has_reference(self) -> bool:
        return bool(self.optimal_positions) and bool(self.column_distances)


class FloorPlanParseError(ValueError):
    """Raised when raw floor-plan or column data is missing a field."""

    def __init__(self, field_name: str, reason: str) -> None:
        self.field_name = field_name
        self.reason = reason
        super().__init__(f"Invalid '{field_name}': {reason}")


def plan_stem(name: str) -> str:
    """Normalise a plan name for matching (``curve90.csv`` -> ``curve90``).

    Only a trailing ``.csv`` is stripped; a ``.csv`` elsewhere in the name
    (``a.csv.bak``) is kept, unlike the research tool's export filenames,
    which drop the first occurrence wherever it appears.
    """
    return name[:-4] if name.lower().endswith(".csv") else name
