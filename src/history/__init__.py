"""Historical placements: prior users' column sets, by floor plan."""

from .providers import (
    HistoryProvider,
    StaticHistoryProvider,
    DirectoryHistoryProvider,
    SAMPLE_HISTORY,
)

__all__ = [
    "HistoryProvider", "StaticHistoryProvider", "DirectoryHistoryProvider",
    "SAMPLE_HISTORY",
]
