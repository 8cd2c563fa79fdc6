from __future__ import annotations

from pathlib import Path
from typing import Sequence, Union

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from ..core.transforms import TransformResult


def plot_running(frame: pd.DataFrame, path: Union[str, Path], title: str = "Running mean vs running median") -> Path:
    """Cumulative mean and median against sample size (log-scaled y when positive)."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(12, 6))
    ax.plot(frame.index, frame["cumulative_mean"], color="red", label="Cumulative mean")
    ax.plot(frame.index, frame["cumulative_median"], color="blue", label="Cumulative median")
    if (frame[["cumulative_mean", "cumulative_median"]] > 0).all().all():
        ax.set_yscale("log")
    ax.set_xlabel("Number of observations")
    ax.set_ylabel("Value")
    ax.set_title(title)
    ax.legend()
    ax.grid(True)
    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)
    return path


def plot_transforms(
    sample: Sequence[float],
    results: Sequence[TransformResult],
    path: Union[str, Path],
    bins: int = 60,
) -> Path:
    """Histogram of the raw sample next to each standardized transform."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    raw = np.asarray(sample, dtype=float)

    fig, axes = plt.subplots(1, len(results) + 1, figsize=(5 * (len(results) + 1), 4))
    axes = np.atleast_1d(axes)

    # Raw heavy-tailed draws swamp a linear histogram; clip to the 99th percentile
    upper = np.percentile(raw, 99)
    axes[0].hist(raw[raw <= upper], bins=bins, color="gray")
    axes[0].set_title("Raw sample (<= p99)")

    for ax, result in zip(axes[1:], results):
        ax.hist(result.standardized_values, bins=bins, color="steelblue")
        label = result.method.value
        if result.parameter is not None:
            label += f" (lambda={result.parameter:.3f})"
        ax.set_title(label)

    for ax in axes:
        ax.grid(True)
    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)
    return path
