import time
from typing import Callable

STEP_PROMPT = "Press Enter to advance to next generation"


class Pacer:
    """
    Called once between generations. With a positive rate it blocks until
    1/rate seconds have passed since the previous call; with rate 0 it
    waits for the user to press Enter instead.
    """

    def __init__(
        self,
        rate: int,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
        prompt: Callable[[str], str] = input,
    ):
        if rate < 0:
            raise ValueError(f"rate must be >= 0, got {rate}")
        self.rate = rate
        self._clock = clock
        self._sleep = sleep
        self._prompt = prompt
        self._last_time = clock()

    @property
    def interval(self) -> float:
        return 1.0 / self.rate if self.rate > 0 else 0.0

    def __call__(self) -> None:
        if self.rate == 0:
            self._prompt(STEP_PROMPT)
            self._last_time = self._clock()
            return
        elapsed = self._clock() - self._last_time
        if elapsed < self.interval:
            self._sleep(self.interval - elapsed)
        self._last_time = self._clock()
