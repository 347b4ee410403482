"""Shared scoring constants for the accuracy pipeline.

Both the **optimal-position generator** (which samples the plan on a grid)
and the **scorer** (which converts distances into percentages) read their
parameters from this single source of truth.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScoringRules:
    """Fixed parameters of the accuracy score.

    All distances are in plan units (the units of the traced outline).
    """

    tolerance_radius: float = 5.0
    """Distance at which the linear falloff score reaches zero."""

    default_grid_size: float = 3.0
    """Cell size of the interior sampling grid."""

    no_reference_feedback: str = (
        "Unable to calculate accuracy - no reference data available."
    )
    no_reference_details: str = "Try a different floor plan or add more columns."

    similarity_feedback: str = (
        "You are close to {similarity}% of the previous users column placements."
    )
    """Feedback sentence; reports peer similarity, not the numeric score."""

    detail_line: str = (
        "Column at ({x}, {y}) - Distance from optimal: {distance}"
    )

    # ── Derived helpers ────────────────────────────────────────────

    def falloff(self, d: float) -> float:
        """Map a distance to a 0..1 score, 1 at d=0 and 0 beyond the radius."""
        return max(0.0, 1.0 - d / self.tolerance_radius)


# Module-level singleton, importable everywhere.
SCORING_RULES = ScoringRules()
