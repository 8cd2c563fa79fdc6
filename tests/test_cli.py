from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from main import app


runner = CliRunner()


def test_simulate_writes_csv(tmp_path: Path) -> None:
    out = tmp_path / "running.csv"
    result = runner.invoke(app, ["simulate", "--n", "500", "--seed", "1", "--csv", str(out)])
    assert result.exit_code == 0, result.output
    assert "median=" in result.output
    assert out.exists()


def test_transform_command() -> None:
    result = runner.invoke(app, ["transform", "--n", "1000", "--distribution", "lognormal"])
    assert result.exit_code == 0, result.output
    assert "boxcox" in result.output


def test_transform_rejects_non_positive_distribution() -> None:
    result = runner.invoke(app, ["transform", "--n", "100", "--distribution", "gaussian"])
    assert result.exit_code == 1


def test_report_writes_artifacts(tmp_path: Path) -> None:
    result = runner.invoke(app, ["report", "--n", "2000", "--seed", "3", "--out-dir", str(tmp_path)])
    assert result.exit_code == 0, result.output
    assert "NOT stabilized" in result.output
    for name in ("running_statistics.csv", "running_statistics.png", "transforms.csv", "transforms.png"):
        assert (tmp_path / name).exists()


def test_report_skips_transforms_for_gaussian(tmp_path: Path) -> None:
    result = runner.invoke(
        app, ["report", "--n", "500", "--distribution", "gaussian", "--out-dir", str(tmp_path)]
    )
    assert result.exit_code == 0, result.output
    assert (tmp_path / "running_statistics.png").exists()
    assert not (tmp_path / "transforms.png").exists()


def test_non_positive_n_is_a_usage_error() -> None:
    result = runner.invoke(app, ["simulate", "--n", "0"])
    assert result.exit_code == 2
    assert not isinstance(result.exception, ValueError)
