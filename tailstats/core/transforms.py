"""Variance-stabilizing transforms for strictly positive samples.

Both transforms finish by standardizing to zero mean and unit sample
standard deviation (n - 1 denominator), so their outputs are directly
comparable. Box-Cox picks its shape parameter lambda by maximizing the
profile log-likelihood over a bounded range; when lambda lands within
`LAMBDA_TOLERANCE` of zero the log branch is used, which makes Box-Cox and
the plain log transform agree on log-normal-like data.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

import numpy as np
from scipy import optimize, special, stats

from .errors import DegenerateSample, InvalidDomain, UndefinedStatistic


logger = logging.getLogger(__name__)

LAMBDA_BOUNDS: Tuple[float, float] = (-5.0, 5.0)
LAMBDA_TOLERANCE = 1e-4


class TransformMethod(str, Enum):
    LOG = "log"
    BOXCOX = "boxcox"


@dataclass(frozen=True)
class TransformResult:
    method: TransformMethod
    standardized_values: np.ndarray = field(repr=False)
    parameter: Optional[float] = None  # Box-Cox lambda


def _positive_sample(sample) -> np.ndarray:  # noqa: ANN001
    x = np.asarray(sample, dtype=float).ravel()
    if x.size == 0:
        raise UndefinedStatistic("cannot transform an empty sample")
    bad = ~np.isfinite(x) | (x <= 0)
    if bad.any():
        idx = np.flatnonzero(bad)
        raise InvalidDomain(
            f"transform requires finite, strictly positive values; "
            f"{idx.size} offending value(s), first at index {int(idx[0])}: {x[idx[0]]!r}"
        )
    return x


def standardize(values) -> np.ndarray:  # noqa: ANN001
    """Return (values - mean) / std with the n - 1 standard deviation."""
    y = np.asarray(values, dtype=float).ravel()
    if y.size < 2:
        raise DegenerateSample(f"need at least 2 values to standardize, got {y.size}")
    center = y.mean()
    spread = y.std(ddof=1)
    if not np.isfinite(spread) or np.ptp(y) == 0:
        raise DegenerateSample(f"sample has zero or undefined variance (std={spread!r})")
    z = (y - center) / spread
    z.setflags(write=False)
    return z


def boxcox_values(x: np.ndarray, lmbda: float, tolerance: float = LAMBDA_TOLERANCE) -> np.ndarray:
    """(x**lmbda - 1) / lmbda, or ln(x) when |lmbda| < tolerance."""
    if abs(lmbda) < tolerance:
        return np.log(x)
    return special.boxcox(x, lmbda)


def boxcox_lambda(sample, bounds: Tuple[float, float] = LAMBDA_BOUNDS) -> float:  # noqa: ANN001
    """Maximum-likelihood Box-Cox lambda within `bounds`."""
    x = _positive_sample(sample)
    lo, hi = bounds
    if not lo < hi:
        raise ValueError(f"invalid lambda bounds {bounds}")

    def neg_llf(lmb: float) -> float:
        llf = stats.boxcox_llf(lmb, x)
        return -float(llf) if np.isfinite(llf) else np.inf

    res = optimize.minimize_scalar(neg_llf, bounds=(lo, hi), method="bounded")
    return float(res.x)


def log_transform(sample) -> TransformResult:  # noqa: ANN001
    x = _positive_sample(sample)
    return TransformResult(
        method=TransformMethod.LOG,
        standardized_values=standardize(np.log(x)),
    )


def boxcox_transform(
    sample,  # noqa: ANN001
    lmbda: Optional[float] = None,
    bounds: Tuple[float, float] = LAMBDA_BOUNDS,
    tolerance: float = LAMBDA_TOLERANCE,
) -> TransformResult:
    """Box-Cox transform then standardize.

    If `lmbda` is None it is estimated by maximum likelihood within `bounds`.
    """
    x = _positive_sample(sample)
    if np.ptp(x) == 0:
        # Constant input has no finite profile likelihood for any lambda
        raise DegenerateSample("cannot fit or standardize a constant sample")
    if lmbda is None:
        lmbda = boxcox_lambda(x, bounds=bounds)
        logger.debug("fitted Box-Cox lambda", extra={"lmbda": lmbda, "n": int(x.size)})
    y = boxcox_values(x, lmbda, tolerance=tolerance)
    return TransformResult(
        method=TransformMethod.BOXCOX,
        standardized_values=standardize(y),
        parameter=float(lmbda),
    )
