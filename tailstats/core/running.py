from __future__ import annotations

import heapq
from dataclasses import dataclass
from typing import Iterable, List

import numpy as np

from .errors import UndefinedStatistic


@dataclass(frozen=True)
class RunningStatisticSample:
    index: int
    cumulative_mean: float
    cumulative_median: float


class RunningStatistics:
    """Cumulative mean and median over a stream of observations.

    The mean keeps a running sum and count (O(1) per update). The median keeps
    two heaps: `_low` holds the smaller half as a max-heap (stored negated),
    `_high` the larger half as a min-heap, with len(_low) - len(_high) in {0, 1}.
    Each update is O(log n) and each query O(1).
    """

    def __init__(self) -> None:
        self.count = 0
        self.total = 0.0
        self._low: List[float] = []
        self._high: List[float] = []

    def update(self, x: float) -> None:
        """Add a new observation."""
        x = float(x)
        self.count += 1
        self.total += x

        if self._low and x > -self._low[0]:
            heapq.heappush(self._high, x)
        else:
            heapq.heappush(self._low, -x)

        # Rebalance
        if len(self._low) > len(self._high) + 1:
            heapq.heappush(self._high, -heapq.heappop(self._low))
        elif len(self._high) > len(self._low):
            heapq.heappush(self._low, -heapq.heappop(self._high))

    def extend(self, values: Iterable[float]) -> None:
        for x in values:
            self.update(x)

    @property
    def mean(self) -> float:
        if self.count == 0:
            raise UndefinedStatistic("mean of zero observations is undefined")
        return self.total / self.count

    @property
    def median(self) -> float:
        if self.count == 0:
            raise UndefinedStatistic("median of zero observations is undefined")
        if len(self._low) > len(self._high):
            return -self._low[0]
        return (-self._low[0] + self._high[0]) / 2.0

    def sample(self) -> RunningStatisticSample:
        return RunningStatisticSample(
            index=self.count,
            cumulative_mean=self.mean,
            cumulative_median=self.median,
        )


def _as_vector(series) -> np.ndarray:  # noqa: ANN001
    values = np.asarray(series, dtype=float).ravel()
    if values.size == 0:
        raise UndefinedStatistic("running statistic of an empty series is undefined")
    return values


def running_mean(series) -> np.ndarray:  # noqa: ANN001
    """Mean of the first n observations, for n = 1..N.

    Divergent samples (infinite-mean distributions) are returned as they are;
    non-convergence is what this series is used to observe.
    """
    values = _as_vector(series)
    counts = np.arange(1, values.size + 1, dtype=float)
    return np.cumsum(values) / counts


def running_median(series) -> np.ndarray:  # noqa: ANN001
    """Median of the first n observations, for n = 1..N.

    Even prefixes average the two middle order statistics.
    """
    values = _as_vector(series)
    stats = RunningStatistics()
    out = np.empty(values.size, dtype=float)
    for i, x in enumerate(values):
        stats.update(x)
        out[i] = stats.median
    return out


def running_statistics(series) -> List[RunningStatisticSample]:  # noqa: ANN001
    """One record per observation with the cumulative mean and median."""
    values = _as_vector(series)
    stats = RunningStatistics()
    samples: List[RunningStatisticSample] = []
    for x in values:
        stats.update(x)
        samples.append(stats.sample())
    return samples
