import csv
import io

import pytest

from pso2d.algorithm.components.vector import Vector2
from pso2d.algorithm.swarm import Swarm
from pso2d.config import ConfigurationError
from pso2d.logging import ConsoleProgress, ProgressRecord, RunLogger, chain


def test_record_line_matches_console_format():
    record = ProgressRecord(step=3, best_value=0.12345678, best_position=Vector2(1e-9, -1.5))
    assert str(record) == "Step 3: Best Value = 0.123457 at Position (0.000000, -1.500000)"
    assert record.as_row() == {"step": 3, "best_value": 0.12345678, "best_x": 1e-9, "best_y": -1.5}


def test_console_progress_prints_every_n_steps():
    out = io.StringIO()
    console = ConsoleProgress(every=2, stream=out)
    for step in range(1, 6):
        console(ProgressRecord(step, 1.0, Vector2(0.0, 0.0)))

    lines = out.getvalue().splitlines()
    assert [line.split(":")[0] for line in lines] == ["Step 2", "Step 4"]


def test_console_progress_defaults_to_stdout(capsys):
    ConsoleProgress()(ProgressRecord(1, 2.0, Vector2(1.0, 1.0)))
    assert capsys.readouterr().out == "Step 1: Best Value = 2.000000 at Position (1.000000, 1.000000)\n"


def test_console_progress_rejects_bad_interval():
    with pytest.raises(ConfigurationError):
        ConsoleProgress(every=0)


def test_chain_skips_none_and_keeps_order():
    calls = []
    notify = chain(lambda r: calls.append(("a", r.step)), None, lambda r: calls.append(("b", r.step)))
    notify(ProgressRecord(1, 0.0, Vector2(0.0, 0.0)))
    assert calls == [("a", 1), ("b", 1)]


def test_run_logger_writes_swarm_steps(tmp_path):
    logger = RunLogger(base_dir=tmp_path / "logs", filename="run.csv", metadata={"func": "sphere"})
    swarm = Swarm(5, 0.5, 1.5, 1.5, lambda v: v.x ** 2 + v.y ** 2, -5, 5, -5, 5, seed=1)
    swarm.run(4, observer=logger)
    logger.update_metadata(phase="late")
    swarm.run(1, observer=logger)

    path = logger.flush()
    assert path == tmp_path / "logs" / "run.csv"

    with path.open() as fh:
        rows = list(csv.DictReader(fh))
    assert [int(r["step"]) for r in rows] == [1, 2, 3, 4, 5]
    assert all(r["func"] == "sphere" for r in rows)
    assert rows[0]["phase"] == "" and rows[-1]["phase"] == "late"
    assert float(rows[-1]["best_value"]) == pytest.approx(swarm.global_best_value)
    assert list(rows[0].keys()) == ["timestamp", "func", "phase", "step", "best_value", "best_x", "best_y"]


def test_run_logger_field_order_and_default_name(tmp_path):
    logger = RunLogger(base_dir=tmp_path, field_order=["step", "best_value"])
    logger(ProgressRecord(1, 3.0, Vector2(0.0, 1.0)))
    path = logger.flush()

    assert path.name.startswith("swarm_") and path.suffix == ".csv"
    assert path.read_text().splitlines()[0] == "step,best_value"
    assert len(logger.records) == 1


def test_run_logger_flush_without_records(tmp_path):
    with pytest.raises(RuntimeError):
        RunLogger(base_dir=tmp_path).flush()
