from __future__ import annotations
from typing import Any, Callable, Dict, Optional

ProgressCallback = Callable[[Dict[str, Any]], None]

class Progress:
    """
    Thin wrapper around an optional on_progress callback.
    Events are dicts: {"phase": "open.start", "pct": 0, "msg": ""}.
    """
    def __init__(self, callback: Optional[ProgressCallback] = None) -> None:
        self._cb = callback

    def emit(self, phase: str, pct: int = 0, msg: str = "") -> None:
        if self._cb is None:
            return
        self._cb({"phase": phase, "pct": max(0, min(100, int(pct))), "msg": msg})

    def start(self, phase: str, msg: str = "") -> None:
        self.emit(f"{phase}.start", 0, msg)

    def done(self, phase: str, msg: str = "") -> None:
        self.emit(f"{phase}.done", 100, msg)
