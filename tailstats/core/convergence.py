from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Tuple

import numpy as np

from .errors import UndefinedStatistic


STATISTICS: Dict[str, Callable[[np.ndarray], float]] = {
    "mean": lambda v: float(np.mean(v)),
    "median": lambda v: float(np.median(v)),
}


@dataclass(frozen=True)
class StabilizationCheck:
    statistic: str
    half_value: float
    full_value: float
    difference: float
    tolerance: float
    stabilized: bool


def check_stabilization(series, statistic: str, tolerance: float) -> StabilizationCheck:  # noqa: ANN001
    """Compare a statistic over the first n // 2 and all n observations.

    A statistic whose population value exists settles as n grows, so the two
    estimates land within `tolerance`; an infinite-mean sample's running mean
    keeps jumping and the difference stays large.
    """
    if statistic not in STATISTICS:
        raise ValueError(f"Unsupported statistic: {statistic}")
    values = np.asarray(series, dtype=float).ravel()
    if values.size < 2:
        raise UndefinedStatistic(f"need at least 2 observations, got {values.size}")
    func = STATISTICS[statistic]
    half = func(values[: values.size // 2])
    full = func(values)
    diff = abs(full - half)
    return StabilizationCheck(
        statistic=statistic,
        half_value=half,
        full_value=full,
        difference=diff,
        tolerance=tolerance,
        stabilized=bool(diff <= tolerance),
    )


def mean_vs_median(
    series,  # noqa: ANN001
    mean_tolerance: float,
    median_tolerance: float,
) -> Tuple[StabilizationCheck, StabilizationCheck]:
    return (
        check_stabilization(series, "mean", mean_tolerance),
        check_stabilization(series, "median", median_tolerance),
    )
