# experiment.py
from __future__ import annotations
import os, csv, time
from typing import Iterable, Mapping, Optional
import numpy as np
import pandas as pd

from pso2d.config import SwarmParams, ConfigurationError, check_count
from pso2d.functions import FUNCTIONS, SUCCESS_THRESHOLDS
from pso2d.algorithm.swarm import Swarm
from pso2d.logging.run_logger import RunLogger

"""
This file orchestrates repeated swarm runs and persists results in a reproducible way.
"""

RUN_FIELDS = ["func", "run", "best_f", "best_x", "best_y", "evals", "success", "time_s"]


def run_seed(seed0: int, fname: str, run: int) -> int:
    """Deterministic per-(function, run) seed, stable across interpreter sessions."""
    # SeedSequence instead of hash(): str hashing is salted per process.
    key = [seed0, run, *fname.encode()]
    return int(np.random.SeedSequence(key).generate_state(1)[0])


def run_once(
    fname: str,
    params: SwarmParams,
    seed: int,
    step_log_dir: Optional[str] = None,
) -> dict:
    """Run one swarm on a registered function; returns best solution + convergence curve."""
    if fname not in FUNCTIONS:
        raise ValueError(f"Unknown function '{fname}'. Choose from: {', '.join(FUNCTIONS)}.")
    meta = FUNCTIONS[fname]
    p = params.with_bounds(meta["bounds"]).with_overrides(seed=seed).validate()

    logger = None
    if step_log_dir is not None:
        logger = RunLogger(
            base_dir=step_log_dir,
            filename=f"{fname}_seed{seed}.csv",
            metadata={"func": fname, "seed": seed, "w": p.w, "cp": p.cp, "cs": p.cs,
                      "particle_count": p.particle_count},
        )

    t0 = time.time()
    swarm = Swarm.from_params(p, meta["f"])
    initial_best = swarm.global_best_value
    history = swarm.run(p.steps, observer=logger)
    dt = time.time() - t0

    if logger is not None:
        logger.flush()

    best_x, best_f = swarm.best()
    return {
        "best_x": best_x,
        "best_f": float(best_f),
        "initial_f": float(initial_best),
        "gbest_curve": np.array([r.best_value for r in history], dtype=float),
        "evals_used": swarm.evaluations,
        "time_s": dt,
    }


def run_suite(
    *,
    outdir: str,
    functions: Iterable[str],
    runs: int,
    params: SwarmParams,
    seed0: int,
    thresholds: Mapping[str, float | None] = SUCCESS_THRESHOLDS,
    log_steps: bool = False,
):
    """
    Args:
      outdir: output directory for CSVs and curves.
      functions: names from FUNCTIONS to optimize; each keeps its own bounds.
      runs: number of independent runs per function.
      params: swarm parameters (bounds are replaced per function).
      seed0: base integer seed to derive per-run RNG seeds deterministically.
      thresholds: function name -> success threshold, or None for no success flag.
      log_steps: also write a per-step CSV for every run under outdir/steps.
    Returns:
      (log_csv_path, summary_csv_path)
    """
    # --- Basic checks  ---
    if not isinstance(outdir, str) or not outdir:
        raise ValueError("outdir must be a non-empty string.")
    functions = list(functions)
    if not functions:
        raise ValueError("functions must be a non-empty iterable of function names.")
    for fname in functions:
        if fname not in FUNCTIONS:
            raise ValueError(f"Unknown function '{fname}'. Choose from: {', '.join(FUNCTIONS)}.")
    runs = check_count("runs", runs)
    if not isinstance(seed0, int) or seed0 < 0:
        raise ConfigurationError("seed", "seed0 must be a non-negative int.")
    params.validate()

    os.makedirs(outdir, exist_ok=True)
    curves_dir = os.path.join(outdir, "curves")
    os.makedirs(curves_dir, exist_ok=True)
    steps_dir = os.path.join(outdir, "steps") if log_steps else None

    log_path = os.path.join(outdir, "runs.csv")
    with open(log_path, "w", newline="") as fh:
        w = csv.writer(fh)
        w.writerow(RUN_FIELDS)

        for fname in functions:
            thr = thresholds.get(fname)
            for r in range(runs):
                res = run_once(fname, params, run_seed(seed0, fname, r), step_log_dir=steps_dir)

                # --- Persist per-step curve ---
                np.save(os.path.join(curves_dir, f"{fname}_run{r}.npy"), res["gbest_curve"])

                # --- Write result row ---
                best_f = res["best_f"]
                success = int(best_f <= thr) if thr is not None else 0
                w.writerow([
                    fname,
                    r,
                    best_f,
                    res["best_x"].x,
                    res["best_x"].y,
                    int(res["evals_used"]),
                    success,
                    float(res["time_s"]),
                ])

    agg_path = os.path.join(outdir, "summary.csv")
    aggregate(log_path, agg_path)
    return log_path, agg_path


def aggregate(log_csv: str, out_csv: str) -> pd.DataFrame:
    df = pd.read_csv(log_csv)
    g = df.groupby("func")
    summ = g["best_f"].agg(["mean", "median", "min", "max", "std"]).reset_index()
    sr = g["success"].mean().rename("success_rate").reset_index()
    out = pd.merge(summ, sr, on="func")
    out.to_csv(out_csv, index=False)
    return out


def load_curves(outdir: str, fname: str, runs: int) -> list[np.ndarray]:
    """Load the best-value curves of runs 0..runs-1 of one function.

    Only the requested runs are read, so curves left in `outdir` by an
    earlier, longer suite are ignored.
    """
    runs = check_count("runs", runs)
    curves_dir = os.path.join(outdir, "curves")
    return [np.load(os.path.join(curves_dir, f"{fname}_run{r}.npy")) for r in range(runs)]
