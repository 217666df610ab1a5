"""Average over a fixed window of the most recent samples."""

from collections import deque


class MovingAverage:
    """Running mean of the last ``sample_size`` pushed values."""

    def __init__(self, sample_size=0):
        self._sample_size = max(sample_size, 0)
        self._values = deque(maxlen=self._sample_size)

    @classmethod
    def with_sample_size(cls, sample_size):
        """Create an average over the last ``sample_size`` values."""
        return cls(sample_size)

    @property
    def sample_size(self):
        return self._sample_size

    def push(self, value):
        """Add a value, discarding the oldest one once the window is full."""
        if self._sample_size <= 0:
            raise ValueError("moving average has no room for samples")
        self._values.append(float(value))

    def average(self):
        """Mean of the stored values, or 0.0 when there are none."""
        if not self._values:
            return 0.0
        return sum(self._values) / len(self._values)