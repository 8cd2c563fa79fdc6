from __future__ import annotations


class TailStatsError(ValueError):
    """Base class for recoverable statistic / transform failures."""


class UndefinedStatistic(TailStatsError):
    """A statistic was requested over an empty set of observations."""


class InvalidDomain(TailStatsError):
    """A transform received a value outside its domain (non-positive or non-finite)."""


class DegenerateSample(TailStatsError):
    """Standardization would divide by a zero (or undefined) standard deviation."""
