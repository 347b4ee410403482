"""
FastAPI web server: accuracy scoring endpoint for the column-placement UI.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from src.config.settings import get_settings
from src.history import DirectoryHistoryProvider, HistoryProvider
from src.pipeline.floorplan import (
    accuracy_to_dict, parse_columns, parse_floor_plan, validate_floor_plan,
)
from src.pipeline.scorer import evaluate_placement

log = logging.getLogger("columnAccuracy.server")

# ── App ────────────────────────────────────────────────────────────

app = FastAPI(title="Column Accuracy")

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().allowed_origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)


# ── Models ─────────────────────────────────────────────────────────

class PointModel(BaseModel):
    x: float
    y: float
    z: float = 0.0


class ColumnModel(BaseModel):
    id: str
    position: PointModel
    size: float = 0.5


class FloorPlanModel(BaseModel):
    name: str
    id: str = ""
    points: list[PointModel]


class AccuracyRequest(BaseModel):
    floorPlan: FloorPlanModel
    columns: list[ColumnModel]
    gridSize: float | None = None
    username: str | None = None


# ── Dependencies ───────────────────────────────────────────────────

HistoryFactory = Callable[[Optional[str]], HistoryProvider]


def get_history_factory() -> HistoryFactory:
    """Return a provider factory; the current user's own exports are excluded."""
    output_dir = get_settings().output_dir

    def factory(username: str | None) -> HistoryProvider:
        return DirectoryHistoryProvider(output_dir, exclude_username=username or None)

    return factory


# ── Routes ─────────────────────────────────────────────────────────

@app.get("/api/health")
def health():
    """Liveness check; reports where history is read from."""
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "output_dir": str(get_settings().output_dir),
    }


@app.post("/api/accuracy")
def accuracy(
    req: AccuracyRequest,
    history_factory: HistoryFactory = Depends(get_history_factory),
):
    """Score the user's columns against the grid and prior placements.

    Declared sync so FastAPI runs it in the thread pool.
    """
    floor_plan = parse_floor_plan(req.floorPlan.model_dump())
    columns = parse_columns([c.model_dump() for c in req.columns])
    grid_size = req.gridSize if req.gridSize is not None else get_settings().grid_size

    warnings = validate_floor_plan(floor_plan)
    for w in warnings:
        log.warning("Floor plan '%s': %s", floor_plan.name, w)

    provider = history_factory(req.username)
    try:
        result, breakdown = evaluate_placement(columns, floor_plan, provider, grid_size)
    except ValueError as exc:
        raise HTTPException(400, str(exc))

    return {**accuracy_to_dict(result, breakdown), "warnings": warnings}


# ── Entry point ────────────────────────────────────────────────────

def main(host: str = "127.0.0.1", port: int = 8000):
    import uvicorn
    uvicorn.run("src.web.server:app", host=host, port=port, reload=False)


if __name__ == "__main__":
    main()
