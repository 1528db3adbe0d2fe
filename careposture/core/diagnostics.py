"""Debug hook shared by the decision units and the facade.

Responsibilities:
  - Hold the optional debug callback set by CLIs or tests.
  - Forward diagnostic lines to it without affecting control flow.
"""

from __future__ import annotations

from typing import Callable

_DEBUG_FN: Callable[[str], None] | None = None


def set_posture_debug(fn: Callable[[str], None] | None) -> None:
    global _DEBUG_FN
    _DEBUG_FN = fn


def get_posture_debug() -> Callable[[str], None] | None:
    return _DEBUG_FN


def emit_debug(msg: str) -> None:
    if _DEBUG_FN is None:
        return
    try:
        _DEBUG_FN(msg)
    except Exception:
        # A broken debug sink must never change a decision.
        return
