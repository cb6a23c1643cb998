from __future__ import annotations
import os

RUN_HEADER = "Running multiple jobs:"
STOP_HEADER = "Stopping multiple jobs:"
FALLBACK_KIND = "unknown"
DEBUG = os.environ.get("JOBTREE_DEBUG", "").strip().lower() in ("1", "true", "yes")
