"""Frame timer that keeps a moving average of frame durations."""

import time

from softraster.moving_average import MovingAverage


class DeltaTimer:
    """Measures start-to-end intervals and averages the most recent ones."""

    def __init__(self, clock=time.perf_counter, sample_size=60):
        self._clock = clock
        self._start = None
        self._deltas = MovingAverage.with_sample_size(sample_size)

    def start(self):
        """Mark the start of an interval."""
        self._start = self._clock()

    def end(self):
        """Mark the end of an interval; return its length in seconds."""
        if self._start is None:
            raise RuntimeError("timer was ended before it was started")
        delta = self._clock() - self._start
        self._deltas.push(delta)
        return delta

    def average_delta(self):
        """Average interval length in seconds, or 0.0 before any interval."""
        return self._deltas.average()

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.end()
        return False