"""Caller-facing entry point: load history, then score."""

from __future__ import annotations

import logging

from src.history import HistoryProvider
from src.pipeline.config import SCORING_RULES
from src.pipeline.floorplan.models import (
    AccuracyResult, Column, FloorPlan, ScoreBreakdown, ScoringRequest,
)

from .scoring import result_from_breakdown, score_breakdown

log = logging.getLogger("columnAccuracy.scorer.engine")


def evaluate_placement(
    columns: list[Column],
    floor_plan: FloorPlan,
    provider: HistoryProvider,
    grid_size: float = SCORING_RULES.default_grid_size,
) -> tuple[AccuracyResult, ScoreBreakdown]:
    """Like :func:`calculate_accuracy` but also return the breakdown."""
    request = ScoringRequest(floor_plan=floor_plan, columns=list(columns), grid_size=grid_size)
    history = provider.load(floor_plan.name)
    log.debug("Loaded %d prior sessions for '%s'", len(history), floor_plan.name)
    breakdown = score_breakdown(request, history)
    return result_from_breakdown(request, breakdown), breakdown


def calculate_accuracy(
    columns: list[Column],
    floor_plan: FloorPlan,
    provider: HistoryProvider,
    grid_size: float = SCORING_RULES.default_grid_size,
) -> AccuracyResult:
    """Score *columns* on *floor_plan* against the provider's prior placements.

    History is fully loaded before scoring starts.  Raises ``ValueError``
    only for a non-positive *grid_size*.
    """
    result, _ = evaluate_placement(columns, floor_plan, provider, grid_size)
    return result
