import pandas as pd
import pytest

from pso2d.cli import main


def test_demo_prints_both_problems(capsys, tmp_path):
    code = main(["demo", "--steps", "5", "--seed", "1", "--log-dir", str(tmp_path)])
    out = capsys.readouterr().out

    assert code == 0
    assert "Minimizing f(x, y) = (x - 1)^2 + 10(x^2 - y)^2 on [-1, 1.5] x [-1, 1.5]:" in out
    assert "Minimizing f(x, y) = xe^(-x^2 - y^2) on [-2, 2] x [-2, 2]:" in out
    assert out.count("Step 5: Best Value = ") == 2
    assert sorted(p.name for p in tmp_path.glob("*.csv")) == [
        "gaussian_ridge_demo_log.csv", "scaled_rosenbrock_demo_log.csv"]


def test_demo_rejects_bad_steps(capsys):
    assert main(["demo", "--steps", "0"]) == 2
    assert "steps" in capsys.readouterr().err


def test_grid_writes_results(tmp_path, capsys):
    outdir = tmp_path / "grid"
    code = main(["grid", "--outdir", str(outdir), "--runs", "2", "--functions", "sphere", "ackley",
                 "--preset", "quick_test", "--steps", "10"])

    assert code == 0
    runs = pd.read_csv(outdir / "runs.csv")
    assert sorted(runs["func"].unique()) == ["ackley", "sphere"]
    assert (outdir / "summary.csv").exists()
    assert (outdir / "boxplot.png").exists()
    assert (outdir / "convergence.png").exists()
    assert "Preset : QUICK_TEST" in capsys.readouterr().out


def test_grid_rejects_out_of_range_coefficients(tmp_path, capsys):
    code = main(["grid", "--outdir", str(tmp_path), "--runs", "1", "--w", "1.5", "--no-plots"])
    assert code == 2
    assert "w:" in capsys.readouterr().err


def test_grid_can_rerun_into_same_outdir(tmp_path):
    outdir = str(tmp_path / "grid")
    assert main(["grid", "--outdir", outdir, "--runs", "3", "--functions", "sphere", "--steps", "20"]) == 0
    assert main(["grid", "--outdir", outdir, "--runs", "2", "--functions", "sphere", "--steps", "5"]) == 0

    runs = pd.read_csv(tmp_path / "grid" / "runs.csv")
    assert list(runs["run"]) == [0, 1]
    assert (tmp_path / "grid" / "convergence.png").exists()


@pytest.mark.parametrize("flag, value", [("--w", "nan"), ("--cp", "inf"), ("--cs", "nan")])
def test_grid_rejects_non_finite_coefficients(tmp_path, capsys, flag, value):
    code = main(["grid", "--outdir", str(tmp_path), "--runs", "1", flag, value, "--no-plots"])
    assert code == 2
    assert f"{flag[2:]}:" in capsys.readouterr().err
