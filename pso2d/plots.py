import os
from typing import Mapping, Sequence

import numpy as np
import pandas as pd
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt


def _ensure_parent(outpath: str) -> None:
    parent = os.path.dirname(outpath)
    if parent:
        os.makedirs(parent, exist_ok=True)


def plot_convergence(curves: Mapping[str, Sequence[np.ndarray]], outpath: str, log_scale: bool = False):
    """
    Median best-value curve per function with an interquartile band.

    curves maps a label to the per-run curves (one 1D array per run, all the
    same length).
    """
    fig, ax = plt.subplots()
    for label, runs in curves.items():
        data = np.vstack([np.asarray(c, dtype=float) for c in runs])
        x = np.arange(1, data.shape[1] + 1)
        q25, med, q75 = np.percentile(data, [25, 50, 75], axis=0)
        ax.plot(x, med, linewidth=2.0, label=label)
        ax.fill_between(x, q25, q75, alpha=0.2)
    if log_scale:
        ax.set_yscale("symlog", linthresh=1e-8)
    ax.set_xlabel("Step")
    ax.set_ylabel("Global best value")
    ax.set_title("PSO convergence (median, IQR)")
    ax.legend()
    _ensure_parent(outpath)
    fig.savefig(outpath, bbox_inches="tight", dpi=150)
    plt.close(fig)


# ---------- Simple boxplot helper  ----------
def boxplot_from_runs(runs_csv: str, outpath: str):
    """Create a compact boxplot of final best value per function."""
    df = pd.read_csv(runs_csv)
    order = sorted(df["func"].unique())
    data = [df.loc[df["func"] == f, "best_f"].values for f in order]
    fig, ax = plt.subplots()
    ax.boxplot(data, showfliers=False)
    ax.set_xticks(range(1, len(order) + 1))
    ax.set_xticklabels(order, rotation=30, ha="right")
    ax.set_ylabel("Final best value")
    ax.set_title("PSO final value across runs")
    _ensure_parent(outpath)
    fig.savefig(outpath, bbox_inches="tight")
    plt.close(fig)
