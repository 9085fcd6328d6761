"""Stage timers for decoding, model loading and inference."""
import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass
from functools import wraps
from typing import Iterator, Optional

@dataclass
class StageTiming:
    stage: str
    seconds: float = 0.0

@contextmanager
def section_timer(stage: str, logger: logging.Logger, level: int = logging.DEBUG) -> Iterator[StageTiming]:
    """Time a block; the yielded record holds the elapsed seconds once the block exits."""
    timing = StageTiming(stage)
    started = time.perf_counter()
    try:
        yield timing
    finally:
        timing.seconds = time.perf_counter() - started
        logger.log(level, "TIMER %s took %.3f s", stage, timing.seconds)

def timeit(logger: logging.Logger, stage: Optional[str] = None, level: int = logging.DEBUG):
    """Decorator form of ``section_timer``."""
    def deco(fn):
        label = stage or fn.__qualname__
        @wraps(fn)
        def wrapper(*args, **kwargs):
            with section_timer(label, logger, level):
                return fn(*args, **kwargs)
        return wrapper
    return deco
