from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from ..core.convergence import StabilizationCheck
from ..core.series import ObservationSeries
from ..core.transforms import TransformResult


@dataclass(frozen=True)
class RunReport:
    series: ObservationSeries
    final_mean: float
    final_median: float
    checks: Sequence[StabilizationCheck]
    transforms: Sequence[TransformResult]


def summarize(report: RunReport) -> str:
    """Plain-text summary of one run."""
    spec = report.series.distribution
    lines: List[str] = [
        f"Distribution: {spec.kind.value} (loc={spec.loc:g}, scale={spec.scale:g})",
        f"Observations: {len(report.series):,}  seed={report.series.seed}",
        f"Final running mean:   {report.final_mean:.6g}",
        f"Final running median: {report.final_median:.6g}",
    ]
    for check in report.checks:
        verdict = "stabilized" if check.stabilized else "NOT stabilized"
        lines.append(
            f"  {check.statistic:<6} first half={check.half_value:.6g} "
            f"all={check.full_value:.6g} |diff|={check.difference:.3g} "
            f"(tol {check.tolerance:g}): {verdict}"
        )
    for result in report.transforms:
        z = np.asarray(result.standardized_values)
        line = f"Transform {result.method.value:<6} mean={z.mean():+.2e} std={z.std(ddof=1):.6f}"
        if result.parameter is not None:
            line += f" lambda={result.parameter:.4f}"
        lines.append(line)
    if len(report.transforms) == 2:
        a, b = (np.asarray(r.standardized_values) for r in report.transforms)
        lines.append(f"Max |log - boxcox| after standardization: {np.max(np.abs(a - b)):.3g}")
    return "\n".join(lines)
