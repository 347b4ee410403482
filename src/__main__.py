"""
Column Accuracy command line.

Usage:
    python -m src serve [--host HOST] [--port PORT]
    python -m src score export.json [--grid N] [--history DIR] [--json]

``score`` rates the columns saved in one export file against the grid
heuristic and the other users' exports in the history directory
(``OUTPUT_DIR`` by default).
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from src.config.settings import get_settings
from src.history import DirectoryHistoryProvider
from src.pipeline.floorplan import (
    accuracy_to_dict, parse_export, parse_floor_plan, validate_floor_plan,
)
from src.pipeline.scorer import evaluate_placement


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="column-accuracy", description="Score column placements on a floor plan")
    sub = p.add_subparsers(dest="cmd", required=True)

    sv = sub.add_parser("serve", help="Start the HTTP API")
    sv.add_argument("--host", default="127.0.0.1", help="Host to bind")
    sv.add_argument("--port", type=int, default=8000, help="Port to bind")

    sc = sub.add_parser("score", help="Score the columns saved in an export file")
    sc.add_argument("export", help="Path to an export .json file")
    sc.add_argument("--grid", type=float, default=None, help="Grid size (default: GRID_SIZE setting)")
    sc.add_argument("--history", default=None, help="Directory of prior exports (default: OUTPUT_DIR)")
    sc.add_argument("--json", action="store_true", help="Print the result with its breakdown as JSON")

    return p


def score_export(args: argparse.Namespace) -> int:
    settings = get_settings()
    grid = settings.grid_size if args.grid is None else args.grid
    history_dir = Path(args.history) if args.history else settings.output_dir

    try:
        raw = json.loads(Path(args.export).read_text(encoding="utf-8"))
        record = parse_export(raw)
        plan = parse_floor_plan(raw.get("floorPlan") or {})
        provider = DirectoryHistoryProvider(history_dir, exclude_username=record.username or None)
        result, breakdown = evaluate_placement(record.columns, plan, provider, grid)
    except (OSError, ValueError) as exc:
        print(f"Cannot score {args.export}: {exc}", file=sys.stderr)
        return 1

    for warning in validate_floor_plan(plan):
        print(f"warning: {warning}", file=sys.stderr)

    if args.json:
        print(json.dumps(accuracy_to_dict(result, breakdown), indent=2))
    else:
        print(f"Score: {result.score}")
        print(result.feedback)
        print(result.details)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.cmd == "score":
        return score_export(args)

    if args.cmd == "serve":
        from src.web.server import main as serve
        serve(host=args.host, port=args.port)
        return 0

    return 2


if __name__ == "__main__":
    sys.exit(main())
