from __future__ import annotations

import io
import json
import logging
from pathlib import Path

import numpy as np
import pandas as pd

from tailstats.core.convergence import mean_vs_median
from tailstats.core.series import DistributionKind, DistributionSpec, generate_series
from tailstats.core.transforms import boxcox_transform, log_transform
from tailstats.report.plotting import plot_running, plot_transforms
from tailstats.report.summary import RunReport, summarize
from tailstats.report.tables import running_frame, transform_frame, write_csv
from tailstats.utils.logging import JsonFormatter, setup_logging


def make_series(n: int = 400):  # noqa: ANN201
    spec = DistributionSpec(kind=DistributionKind.INVERSE_SQUARE_GAUSSIAN)
    return generate_series(n, seed=5, distribution=spec)


def test_running_frame_columns() -> None:
    series = make_series()
    frame = running_frame(series)
    assert list(frame.columns) == ["observation", "cumulative_mean", "cumulative_median"]
    assert frame.index[0] == 1 and frame.index[-1] == len(series)
    assert frame["cumulative_median"].iloc[-1] == np.median(series.values)


def test_transform_frame_and_csv(tmp_path: Path) -> None:
    series = make_series()
    frame = transform_frame([log_transform(series), boxcox_transform(series)])
    assert list(frame.columns) == ["log", "boxcox"]
    path = write_csv(frame, tmp_path / "nested" / "t.csv")
    back = pd.read_csv(path, index_col=0)
    assert back.shape == (len(series), 2)


def test_summary_mentions_verdicts() -> None:
    series = make_series(2000)
    frame = running_frame(series)
    text = summarize(
        RunReport(
            series=series,
            final_mean=float(frame["cumulative_mean"].iloc[-1]),
            final_median=float(frame["cumulative_median"].iloc[-1]),
            checks=mean_vs_median(series, 1.0, 0.5),
            transforms=[log_transform(series), boxcox_transform(series)],
        )
    )
    assert "inverse_square_gaussian" in text
    assert "median" in text and "lambda=" in text
    assert "Max |log - boxcox|" in text


def test_plots_written(tmp_path: Path) -> None:
    series = make_series()
    p1 = plot_running(running_frame(series), tmp_path / "running.png")
    p2 = plot_transforms(series, [log_transform(series), boxcox_transform(series)], tmp_path / "t.png")
    assert p1.stat().st_size > 0
    assert p2.stat().st_size > 0


def test_json_formatter_includes_extra() -> None:
    record = logging.LogRecord("tailstats", logging.INFO, __file__, 1, "fitted", None, None)
    record.lmbda = 0.25
    payload = json.loads(JsonFormatter().format(record))
    assert payload["message"] == "fitted"
    assert payload["lmbda"] == 0.25
    assert payload["level"] == "INFO"


def test_setup_logging_emits_json_lines() -> None:
    buf = io.StringIO()
    setup_logging("debug", stream=buf)
    logging.getLogger("tailstats.test").info("generated series", extra={"n": 10})
    logging.getLogger("matplotlib.font_manager").debug("findfont noise")
    lines = buf.getvalue().strip().splitlines()
    assert len(lines) == 1
    payload = json.loads(lines[0])
    assert payload["logger"] == "tailstats.test"
    assert payload["n"] == 10
