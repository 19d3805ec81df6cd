from __future__ import annotations

"""Minimal tracing helpers (Explain Mode).

Enable with the CLI flag and emit terse, readable lines at milestones. Lines
go to the `scalequiz.explain` logger; stdout belongs to the quiz screen.
"""

import json
import logging
from typing import Any, Dict

logger = logging.getLogger("scalequiz.explain")

_ENABLED = False


def enable(flag: bool = True) -> None:
    global _ENABLED
    _ENABLED = bool(flag)


def enabled() -> bool:
    return _ENABLED


def trace(event: str, payload: Dict[str, Any] | None = None) -> None:
    if not _ENABLED:
        return
    data = payload or {}
    # keep it short; one line JSON
    logger.info("[EXPLAIN] %s :: %s", event, json.dumps(data, separators=(",", ":"), default=str, ensure_ascii=False))
