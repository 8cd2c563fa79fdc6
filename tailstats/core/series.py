from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict

import numpy as np


class DistributionKind(str, Enum):
    GAUSSIAN = "gaussian"
    INVERSE_SQUARE_GAUSSIAN = "inverse_square_gaussian"
    LOGNORMAL = "lognormal"
    CAUCHY = "cauchy"


@dataclass(frozen=True)
class DistributionSpec:
    """Location/scale family a series is drawn from.

    `inverse_square_gaussian` with loc=0, scale=1 is 1 / g**2 for a standard
    Gaussian g: a Levy variable with infinite mean and median 1 / 0.6745**2.
    """

    kind: DistributionKind = DistributionKind.GAUSSIAN
    loc: float = 0.0
    scale: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", DistributionKind(self.kind))
        if not self.scale > 0:
            raise ValueError(f"scale must be positive, got {self.scale}")


Sampler = Callable[[np.random.Generator, int, DistributionSpec], np.ndarray]


def _gaussian(rng: np.random.Generator, n: int, spec: DistributionSpec) -> np.ndarray:
    return spec.loc + spec.scale * rng.standard_normal(n)


def _inverse_square_gaussian(rng: np.random.Generator, n: int, spec: DistributionSpec) -> np.ndarray:
    g = spec.loc + spec.scale * rng.standard_normal(n)
    return 1.0 / np.square(g)


def _lognormal(rng: np.random.Generator, n: int, spec: DistributionSpec) -> np.ndarray:
    return np.exp(spec.loc + spec.scale * rng.standard_normal(n))


def _cauchy(rng: np.random.Generator, n: int, spec: DistributionSpec) -> np.ndarray:
    return spec.loc + spec.scale * rng.standard_cauchy(n)


SAMPLERS: Dict[DistributionKind, Sampler] = {
    DistributionKind.GAUSSIAN: _gaussian,
    DistributionKind.INVERSE_SQUARE_GAUSSIAN: _inverse_square_gaussian,
    DistributionKind.LOGNORMAL: _lognormal,
    DistributionKind.CAUCHY: _cauchy,
}


@dataclass(frozen=True)
class ObservationSeries:
    """Read-only draws in arrival order, with the parameters that produced them."""

    values: np.ndarray = field(repr=False)
    seed: int
    distribution: DistributionSpec

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self):  # noqa: ANN204
        return iter(self.values)

    def __array__(self, dtype=None, copy=None):  # noqa: ANN001, ANN204
        if copy:
            return np.array(self.values, dtype=dtype, copy=True)
        if dtype is None or np.dtype(dtype) == self.values.dtype:
            return self.values
        if copy is False:
            raise ValueError(f"cannot convert series to {np.dtype(dtype)} without copying")
        return self.values.astype(dtype)


def generate_series(n: int, seed: int, distribution: DistributionSpec) -> ObservationSeries:
    """Draw `n` i.i.d. observations from `distribution` with a fresh generator."""
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")
    rng = np.random.default_rng(seed)
    values = np.asarray(SAMPLERS[distribution.kind](rng, n, distribution), dtype=float)
    values.setflags(write=False)
    return ObservationSeries(values=values, seed=seed, distribution=distribution)
