from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple

import typer

from tailstats.config import AppConfig, SamplingConfig, load_config
from tailstats.core import (
    DistributionKind,
    InvalidDomain,
    ObservationSeries,
    TailStatsError,
    TransformResult,
    boxcox_transform,
    generate_series,
    log_transform,
    mean_vs_median,
)
from tailstats.report.plotting import plot_running, plot_transforms
from tailstats.report.summary import RunReport, summarize
from tailstats.report.tables import running_frame, transform_frame, write_csv
from tailstats.utils.logging import setup_logging


logger = logging.getLogger("tailstats.cli")

app = typer.Typer(add_completion=False)


def _prepare(
    config_path: Optional[Path],
    n: Optional[int],
    seed: Optional[int],
    distribution: Optional[DistributionKind],
    log_level: Optional[str],
) -> Tuple[AppConfig, ObservationSeries]:
    cfg = load_config(config_path)
    setup_logging(log_level or cfg.env.LOG_LEVEL)
    overrides = {"n": n, "seed": seed, "distribution": distribution}
    sampling = SamplingConfig(
        **{**cfg.runtime.sampling.model_dump(), **{k: v for k, v in overrides.items() if v is not None}}
    )
    cfg = cfg.model_copy(update={"runtime": cfg.runtime.model_copy(update={"sampling": sampling})})
    series = generate_series(sampling.n, sampling.seed, sampling.spec())
    logger.info(
        "generated series",
        extra={"n": sampling.n, "seed": sampling.seed, "distribution": sampling.distribution.value},
    )
    return cfg, series


def _transforms(cfg: AppConfig, series: ObservationSeries) -> List[TransformResult]:
    tcfg = cfg.runtime.transform
    return [
        log_transform(series),
        boxcox_transform(series, bounds=tcfg.lambda_bounds, tolerance=tcfg.lambda_tolerance),
    ]


@app.command()
def simulate(
    config: Optional[Path] = typer.Option(None, "--config", help="Path to config.yaml"),
    n: Optional[int] = typer.Option(None, "--n", min=1, help="Number of observations"),
    seed: Optional[int] = typer.Option(None, help="Random seed"),
    distribution: Optional[DistributionKind] = typer.Option(None, help="Distribution family"),
    log_level: Optional[str] = typer.Option(None, help="Log level (defaults to LOG_LEVEL)"),
    csv: Optional[Path] = typer.Option(None, help="Write the running mean/median table here"),
) -> None:
    """Generate a series and report its final running mean and median."""
    _, series = _prepare(config, n, seed, distribution, log_level)
    try:
        frame = running_frame(series)
    except TailStatsError as exc:
        logger.error("running statistics failed", extra={"error": str(exc)})
        raise typer.Exit(code=1)
    last = frame.iloc[-1]
    typer.echo(f"n={len(series)} mean={last['cumulative_mean']:.6g} median={last['cumulative_median']:.6g}")
    if csv is not None:
        typer.echo(f"Wrote {write_csv(frame, csv)}")


@app.command()
def transform(
    config: Optional[Path] = typer.Option(None, "--config", help="Path to config.yaml"),
    n: Optional[int] = typer.Option(None, "--n", min=1, help="Number of observations"),
    seed: Optional[int] = typer.Option(None, help="Random seed"),
    distribution: Optional[DistributionKind] = typer.Option(None, help="Distribution family"),
    log_level: Optional[str] = typer.Option(None, help="Log level (defaults to LOG_LEVEL)"),
) -> None:
    """Apply the log and Box-Cox transforms and compare the standardized outputs."""
    cfg, series = _prepare(config, n, seed, distribution, log_level)
    try:
        results = _transforms(cfg, series)
    except TailStatsError as exc:
        logger.error("transform failed", extra={"error": str(exc)})
        raise typer.Exit(code=1)
    for result in results:
        z = result.standardized_values
        lam = "" if result.parameter is None else f" lambda={result.parameter:.4f}"
        typer.echo(f"{result.method.value}: mean={z.mean():+.2e} std={z.std(ddof=1):.6f}{lam}")
    frame = transform_frame(results)
    typer.echo(f"max |log - boxcox| = {(frame['log'] - frame['boxcox']).abs().max():.3g}")


@app.command()
def report(
    config: Optional[Path] = typer.Option(None, "--config", help="Path to config.yaml"),
    n: Optional[int] = typer.Option(None, "--n", min=1, help="Number of observations"),
    seed: Optional[int] = typer.Option(None, help="Random seed"),
    distribution: Optional[DistributionKind] = typer.Option(None, help="Distribution family"),
    log_level: Optional[str] = typer.Option(None, help="Log level (defaults to LOG_LEVEL)"),
    out_dir: Optional[Path] = typer.Option(None, help="Directory for charts and CSV (defaults to OUTPUT_DIR)"),
) -> None:
    """Run the whole pipeline: series, running statistics, transforms, summary."""
    cfg, series = _prepare(config, n, seed, distribution, log_level)
    conv = cfg.runtime.convergence
    try:
        frame = running_frame(series)
        checks = mean_vs_median(series, conv.mean_tolerance, conv.median_tolerance)
    except TailStatsError as exc:
        logger.error("running statistics failed", extra={"error": str(exc)})
        raise typer.Exit(code=1)

    try:
        results = _transforms(cfg, series)
    except InvalidDomain as exc:
        # Transforms only apply to positive distributions; the rest of the report stands
        logger.warning("skipping transforms", extra={"error": str(exc)})
        results = []
    except TailStatsError as exc:
        logger.error("transform failed", extra={"error": str(exc)})
        raise typer.Exit(code=1)

    last = frame.iloc[-1]
    run = RunReport(
        series=series,
        final_mean=float(last["cumulative_mean"]),
        final_median=float(last["cumulative_median"]),
        checks=checks,
        transforms=results,
    )
    typer.echo(summarize(run))

    target = out_dir or (Path(cfg.env.OUTPUT_DIR) if cfg.env.OUTPUT_DIR else None)
    if target is not None:
        written = [
            write_csv(frame, target / "running_statistics.csv"),
            plot_running(frame, target / "running_statistics.png"),
        ]
        if results:
            written.append(write_csv(transform_frame(results), target / "transforms.csv"))
            written.append(plot_transforms(series, results, target / "transforms.png"))
        for path in written:
            typer.echo(f"Wrote {path}")
        logger.info("report written", extra={"out_dir": str(target), "files": len(written)})


if __name__ == "__main__":
    app()
