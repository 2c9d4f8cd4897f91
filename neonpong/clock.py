import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class SimulationClock:
    """Fixed-timestep accumulator.

    Each frame adds the elapsed time since the previous frame and runs the
    step callback once per whole step held in the accumulator. The first
    frame only seeds the clock. With ``max_steps`` set, a frame never runs
    more than that many steps; leftover whole steps are dropped so the
    accumulator stays below one step.
    """

    def __init__(self, step_ms: float, max_steps: Optional[int] = None):
        self.step_ms = step_ms
        self.max_steps = max_steps
        self.accumulator = 0.0
        self.last_time: Optional[float] = None

    def reset(self):
        self.accumulator = 0.0
        self.last_time = None

    def tick(self, now_ms: float, step_fn: Callable[[], None]) -> int:
        if self.last_time is None:
            self.last_time = now_ms
            return 0
        # a host clock going backwards counts as no time passing
        delta = max(0.0, now_ms - self.last_time)
        self.last_time = now_ms
        self.accumulator += delta

        steps = 0
        while self.accumulator >= self.step_ms:
            if self.max_steps is not None and steps >= self.max_steps:
                dropped = self.accumulator - self.accumulator % self.step_ms
                self.accumulator %= self.step_ms
                logger.warning("Frame fell behind: dropped %.1f ms after %d steps", dropped, steps)
                break
            step_fn()
            self.accumulator -= self.step_ms
            steps += 1
        return steps
