from __future__ import annotations

import numpy as np
import pytest

from tailstats.core.series import DistributionKind, DistributionSpec, generate_series


def test_generate_series_is_deterministic() -> None:
    spec = DistributionSpec(kind=DistributionKind.INVERSE_SQUARE_GAUSSIAN)
    a = generate_series(1000, seed=11, distribution=spec)
    b = generate_series(1000, seed=11, distribution=spec)
    c = generate_series(1000, seed=12, distribution=spec)
    assert len(a) == 1000
    np.testing.assert_array_equal(a.values, b.values)
    assert not np.array_equal(a.values, c.values)


def test_series_is_read_only() -> None:
    series = generate_series(10, seed=0, distribution=DistributionSpec())
    with pytest.raises(ValueError):
        series.values[0] = 1.0


def test_inverse_square_gaussian_is_reciprocal_square() -> None:
    gauss = generate_series(50, seed=3, distribution=DistributionSpec(kind="gaussian"))
    inv = generate_series(50, seed=3, distribution=DistributionSpec(kind="inverse_square_gaussian"))
    np.testing.assert_allclose(inv.values, 1.0 / gauss.values ** 2)
    assert (inv.values > 0).all()


def test_lognormal_is_positive_and_exp_of_gaussian() -> None:
    spec = DistributionSpec(kind=DistributionKind.LOGNORMAL, loc=1.0, scale=0.5)
    series = generate_series(200, seed=9, distribution=spec)
    gauss = generate_series(200, seed=9, distribution=DistributionSpec(loc=1.0, scale=0.5))
    np.testing.assert_allclose(np.log(series.values), gauss.values)


def test_invalid_arguments() -> None:
    with pytest.raises(ValueError):
        generate_series(0, seed=1, distribution=DistributionSpec())
    with pytest.raises(ValueError):
        DistributionSpec(scale=0.0)
    with pytest.raises(ValueError):
        DistributionSpec(kind="uniform")


def test_array_conversion_copies_on_request() -> None:
    series = generate_series(5, seed=0, distribution=DistributionSpec())
    copied = np.array(series)
    assert copied.flags.writeable
    assert not np.shares_memory(copied, series.values)
    copied[0] = 123.0
    assert series.values[0] != 123.0

    view = np.asarray(series)
    assert np.shares_memory(view, series.values)
    np.testing.assert_array_equal(np.asarray(series, dtype=np.float32), series.values.astype(np.float32))
