"""
Pacing strategies used between rendered moves.
"""

import logging
import time
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)

PACING_SLEEP = "sleep"
PACING_NONE = "none"


class Pacer(ABC):
    """
    Decides how long to wait after each move is drawn.

    The visualizer calls pause() once per move on the main thread.
    """

    @abstractmethod
    def pause(self) -> None:
        pass


class SleepPacer(Pacer):
    """Blocks for a fixed delay so a person can follow the moves"""

    def __init__(self, delay_seconds: float):
        if delay_seconds < 0:
            raise ValueError(f"delay_seconds must be >= 0, got {delay_seconds}")
        self.delay_seconds = delay_seconds
        logger.debug(f"Pausing {delay_seconds:.3f}s between moves")

    def pause(self) -> None:
        if self.delay_seconds:
            time.sleep(self.delay_seconds)


class NoDelayPacer(Pacer):
    def pause(self) -> None:
        pass


def create_pacer(strategy: str, delay_ms: int = 0) -> Pacer:
    """Build the pacer named by a config value"""
    if strategy == PACING_NONE:
        return NoDelayPacer()
    if strategy == PACING_SLEEP:
        return SleepPacer(delay_ms / 1000.0)
    raise ValueError(f"Unknown pacing strategy: {strategy!r}")
