# src/app/core/settings.py
from __future__ import annotations
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_IDEAS_PATH = Path(__file__).resolve().parent.parent / "data" / "ideas.json"

IDEAS_DATA_PATH = Path(os.getenv("IDEAS_DATA_PATH", str(DEFAULT_IDEAS_PATH)))
IDEAS_STRICT_LOAD = os.getenv("IDEAS_STRICT_LOAD", "false").strip().lower() in ("1", "true", "yes")

PICK_MAX_ATTEMPTS = int(os.getenv("RECO_PICK_MAX_ATTEMPTS", "10"))
if PICK_MAX_ATTEMPTS < 1:
    raise ValueError(f"RECO_PICK_MAX_ATTEMPTS must be >= 1, got {PICK_MAX_ATTEMPTS}")

_seed = os.getenv("RECO_RANDOM_SEED", "").strip()
RANDOM_SEED: Optional[int] = int(_seed) if _seed else None
