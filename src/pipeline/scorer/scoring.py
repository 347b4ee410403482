"""Accuracy scoring: optimality against the grid, similarity against peers."""

from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

from src.geometry import Point, distance
from src.pipeline.config import SCORING_RULES, ScoringRules
from src.pipeline.floorplan.models import (
    AccuracyResult, Column, ScoreBreakdown, ScoringRequest,
)

from .optimal import compute_optimal_positions

log = logging.getLogger("columnAccuracy.scorer")


def nearest_distance(p: Point, candidates: Sequence[Point]) -> float:
    """Distance from *p* to the closest candidate (inf when there are none)."""
    best = math.inf
    for c in candidates:
        d = distance(p, c)
        if d < best:
            best = d
    return best


def to_percent(fraction: float) -> int:
    """Round a 0..1 fraction to a whole percentage, halves rounding up."""
    return int(math.floor(fraction * 100 + 0.5))


def to_fixed(value: float, places: int = 2) -> str:
    """Format *value* with *places* decimals, halves rounding away from zero.

    Works on the exact binary value, so 1.125 gives "1.13" but 1.005
    (stored as 1.00499...) gives "1.00".
    """
    quantum = Decimal(1).scaleb(-places)
    return format(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP), "f")


def session_similarity(
    columns: Sequence[Column],
    previous: Sequence[Column],
    rules: ScoringRules = SCORING_RULES,
) -> float:
    """Mean falloff score of *columns* against one prior user's columns."""
    if not columns or not previous:
        return 0.0
    prev_positions = [c.position for c in previous]
    total = sum(
        rules.falloff(nearest_distance(c.position, prev_positions))
        for c in columns
    )
    return total / len(columns)


def score_breakdown(
    request: ScoringRequest,
    historical_placements: Sequence[Sequence[Column]],
    rules: ScoringRules = SCORING_RULES,
) -> ScoreBreakdown:
    """Compute every intermediate value of a scoring run.

    When there is no reference data the breakdown carries the optimal
    positions (possibly empty) and nothing else.
    """
    optimal = compute_optimal_positions(request.floor_plan.points, request.grid_size)
    breakdown = ScoreBreakdown(optimal_positions=optimal)
    if not optimal or not request.columns:
        return breakdown

    # ── 1. Optimality ───────────────────────────────────────────────
    for col in request.columns:
        d = nearest_distance(col.position, optimal)
        breakdown.column_distances.append(d)
        breakdown.column_scores.append(rules.falloff(d))
    average = sum(breakdown.column_scores) / len(request.columns)
    breakdown.optimality_percent = to_percent(average)

    # ── 2. Peer similarity ──────────────────────────────────────────
    breakdown.session_similarities = [
        session_similarity(request.columns, prev, rules)
        for prev in historical_placements
    ]
    similarity = 0.0
    if breakdown.session_similarities:
        similarity = sum(breakdown.session_similarities) / len(breakdown.session_similarities)
    breakdown.similarity_percent = to_percent(similarity)

    return breakdown


def result_from_breakdown(
    request: ScoringRequest,
    breakdown: ScoreBreakdown,
    rules: ScoringRules = SCORING_RULES,
) -> AccuracyResult:
    """Assemble the user-facing result.

    ``score`` is the optimality percentage while ``feedback`` reports peer
    similarity; the two measures stay separate.
    """
    if not breakdown.has_reference:
        return AccuracyResult(
            score=0,
            feedback=rules.no_reference_feedback,
            details=rules.no_reference_details,
        )

    details = "\n".join(
        rules.detail_line.format(
            x=to_fixed(col.position.x), y=to_fixed(col.position.y), distance=to_fixed(d),
        )
        for col, d in zip(request.columns, breakdown.column_distances)
    )
    return AccuracyResult(
        score=breakdown.optimality_percent,
        feedback=rules.similarity_feedback.format(similarity=breakdown.similarity_percent),
        details=details,
    )


def score(
    request: ScoringRequest,
    historical_placements: Sequence[Sequence[Column]],
    rules: ScoringRules = SCORING_RULES,
) -> AccuracyResult:
    """Score *request* against the grid heuristic and prior placements."""
    breakdown = score_breakdown(request, historical_placements, rules)
    if not breakdown.has_reference:
        log.info(
            "No reference data for '%s' (%d optimal positions, %d columns)",
            request.plan_name, len(breakdown.optimal_positions), len(request.columns),
        )
    else:
        log.info(
            "Scored '%s': optimality %d%%, similarity %d%% over %d sessions",
            request.plan_name, breakdown.optimality_percent,
            breakdown.similarity_percent, len(breakdown.session_similarities),
        )
    return result_from_breakdown(request, breakdown, rules)
