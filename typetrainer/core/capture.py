# core/capture.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional
import logging

from typetrainer.app.timer import HighResTimer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CapturedInput:
    text: str
    elapsed_seconds: float


def capture_line(
    reader: Callable[[], str] = input,
    timer: Optional[HighResTimer] = None,
    max_length: int = 1000,
) -> CapturedInput:
    """
    Time a single blocking read. End of input counts as an empty line.
    The text is cut to `max_length - 1` characters.
    """
    timer = timer or HighResTimer()
    timer.start()
    try:
        line = reader()
    except EOFError:
        logger.info("End of input during capture, treating as empty line")
        line = ""
    finally:
        elapsed = timer.stop()

    line = (line or "").rstrip("\r\n")
    limit = max(0, max_length - 1)
    if len(line) > limit:
        logger.debug("Truncating input from %d to %d characters", len(line), limit)
        line = line[:limit]
    return CapturedInput(text=line, elapsed_seconds=elapsed)
