"""Core primitives: series generation, running statistics, transforms.

The infinite-mean example throughout is x = 1 / g**2 for a standard Gaussian
g. Its running mean never settles while its running median converges to
1 / 0.6745**2; log and Box-Cox transforms turn it into a well-behaved sample.
"""

from .convergence import StabilizationCheck, check_stabilization, mean_vs_median
from .errors import DegenerateSample, InvalidDomain, TailStatsError, UndefinedStatistic
from .running import (
    RunningStatisticSample,
    RunningStatistics,
    running_mean,
    running_median,
    running_statistics,
)
from .series import DistributionKind, DistributionSpec, ObservationSeries, generate_series
from .transforms import (
    TransformMethod,
    TransformResult,
    boxcox_lambda,
    boxcox_transform,
    log_transform,
    standardize,
)

__all__ = [
    "DegenerateSample",
    "DistributionKind",
    "DistributionSpec",
    "InvalidDomain",
    "ObservationSeries",
    "RunningStatisticSample",
    "RunningStatistics",
    "StabilizationCheck",
    "TailStatsError",
    "TransformMethod",
    "TransformResult",
    "UndefinedStatistic",
    "boxcox_lambda",
    "boxcox_transform",
    "check_stabilization",
    "generate_series",
    "log_transform",
    "mean_vs_median",
    "running_mean",
    "running_median",
    "running_statistics",
    "standardize",
]
