"""Scorer: rates user column placements on a floor plan.

Submodules:
  optimal   Grid-sampled reference positions inside the outline.
  scoring   Optimality and peer-similarity scores, result assembly.
  engine    Caller-facing entry point (history lookup + scoring).
"""

from .optimal import compute_optimal_positions
from .scoring import (
    nearest_distance, to_percent, to_fixed, session_similarity,
    score_breakdown, result_from_breakdown, score,
)
from .engine import calculate_accuracy, evaluate_placement

__all__ = [
    # Generator
    "compute_optimal_positions",
    # Scoring
    "nearest_distance", "to_percent", "to_fixed", "session_similarity",
    "score_breakdown", "result_from_breakdown", "score",
    # Engine
    "calculate_accuracy", "evaluate_placement",
]
