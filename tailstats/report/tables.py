from __future__ import annotations

from pathlib import Path
from typing import Iterable, Union

import numpy as np
import pandas as pd

from ..core.running import running_mean, running_median
from ..core.transforms import TransformResult


def running_frame(series) -> pd.DataFrame:  # noqa: ANN001
    """Observations alongside their cumulative mean and median, indexed 1..N."""
    values = np.asarray(series, dtype=float).ravel()
    frame = pd.DataFrame(
        {
            "observation": values,
            "cumulative_mean": running_mean(values),
            "cumulative_median": running_median(values),
        },
        index=pd.RangeIndex(1, values.size + 1, name="index"),
    )
    return frame


def transform_frame(results: Iterable[TransformResult]) -> pd.DataFrame:
    """One column of standardized values per transform method."""
    return pd.DataFrame(
        {r.method.value: np.asarray(r.standardized_values) for r in results}
    )


def write_csv(frame: pd.DataFrame, path: Union[str, Path]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    frame.to_csv(path)
    return path
