"""Historical placement providers: prior users' columns for a plan.

Every provider honours the same contract: ``load(floor_plan_name)`` returns
a list of column sets (one per prior session) and never raises for missing
or unreadable data.  An empty list means "no history".
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Mapping, Protocol, Sequence

from src.geometry import Point
from src.pipeline.floorplan.models import (
    Column, PlacementRecord, plan_stem,
)
from src.pipeline.floorplan.parsing import parse_export

log = logging.getLogger("columnAccuracy.history")


class HistoryProvider(Protocol):
    def load(self, floor_plan_name: str) -> list[list[Column]]:
        ...


# Fixed sample sessions, used when no real history store is configured.
SAMPLE_HISTORY: list[list[Column]] = [
    [
        Column("prev1", Point(2, 3, 0), 0.5),
        Column("prev2", Point(5, 7, 0), 0.5),
        Column("prev3", Point(8, 2, 0), 0.5),
    ],
    [
        Column("prev4", Point(1.5, 3.2, 0), 0.5),
        Column("prev5", Point(5.2, 6.8, 0), 0.5),
        Column("prev6", Point(7.8, 2.1, 0), 0.5),
    ],
]


class StaticHistoryProvider:
    """In-memory history keyed by plan name (``.csv`` suffix ignored).

    *default* is returned for plans with no explicit entry.
    """

    def __init__(
        self,
        sessions: Mapping[str, Sequence[Sequence[Column]]] | None = None,
        default: Sequence[Sequence[Column]] = (),
    ) -> None:
        self._sessions = {
            plan_stem(name): [list(s) for s in sets]
            for name, sets in (sessions or {}).items()
        }
        self._default = [list(s) for s in default]

    def load(self, floor_plan_name: str) -> list[list[Column]]:
        sets = self._sessions.get(plan_stem(floor_plan_name), self._default)
        return [list(s) for s in sets]


class DirectoryHistoryProvider:
    """Reads prior export files (``*.json``) from an output directory.

    Only exports whose floor-plan name matches the requested plan are
    used.  Files that cannot be read or parsed are skipped with a warning.
    """

    def __init__(self, output_dir: Path, exclude_username: str | None = None) -> None:
        self.output_dir = Path(output_dir)
        self.exclude_username = exclude_username

    def records(self, floor_plan_name: str) -> list[PlacementRecord]:
        """Return every matching PlacementRecord, sorted by file name."""
        wanted = plan_stem(floor_plan_name)
        if not self.output_dir.is_dir():
            log.info("History directory %s does not exist, no prior sessions", self.output_dir)
            return []

        records: list[PlacementRecord] = []
        for path in sorted(self.output_dir.glob("*.json")):
            # ValueError covers JSONDecodeError, UnicodeDecodeError, FloorPlanParseError
            # and oversized integer literals.
            try:
                raw = json.loads(path.read_text(encoding="utf-8"))
                record = parse_export(raw)
            except (OSError, ValueError, RecursionError) as exc:
                log.warning("Skipping history file %s: %s", path.name, exc)
                continue

            if plan_stem(record.floor_plan_name) != wanted:
                continue
            if self.exclude_username and record.username == self.exclude_username:
                continue
            records.append(record)

        log.info(
            "Loaded %d prior sessions for '%s' from %s",
            len(records), wanted, self.output_dir,
        )
        return records

    def load(self, floor_plan_name: str) -> list[list[Column]]:
        return [r.columns for r in self.records(floor_plan_name)]
