"""
Server settings: read once from the environment.

``.env`` / ``.env.local`` at the repository root are loaded first; values
already present in ``os.environ`` win.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

from src.pipeline.config import SCORING_RULES


ROOT = Path(__file__).resolve().parents[2]


def load_env_files(root: Path = ROOT) -> None:
    """Load ``.env`` then ``.env.local`` from *root* without overriding."""
    for name in (".env", ".env.local"):
        load_dotenv(root / name, override=False)


@dataclass(frozen=True)
class Settings:
    output_dir: Path
    """Directory holding prior users' export files (the history store)."""

    allowed_origins: list[str]
    """CORS origins; ``["*"]`` allows any."""

    grid_size: float = SCORING_RULES.default_grid_size


def settings_from_env(environ: dict | None = None) -> Settings:
    """Build Settings from *environ* (defaults to ``os.environ``)."""
    env = os.environ if environ is None else environ
    origins = env.get("ALLOWED_ORIGINS", "*")
    return Settings(
        output_dir=Path(env.get("OUTPUT_DIR") or ROOT / "outputs"),
        allowed_origins=[o.strip() for o in origins.split(",") if o.strip()],
        grid_size=float(env.get("GRID_SIZE") or SCORING_RULES.default_grid_size),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    load_env_files()
    return settings_from_env()
