from __future__ import annotations
from pathlib import Path
import argparse, sys

from pso2d.algorithm.swarm import Swarm
from pso2d.config import ConfigurationError, SwarmParams
from pso2d.constants import PRESETS
from pso2d.experiment import run_suite, load_curves
from pso2d.functions import FUNCTIONS, DEMO_FUNCTIONS
from pso2d.logging import ConsoleProgress, RunLogger, chain

DEMO_TITLES = {
    "scaled_rosenbrock": "f(x, y) = (x - 1)^2 + 10(x^2 - y)^2",
    "gaussian_ridge": "f(x, y) = xe^(-x^2 - y^2)",
}
SEPARATOR = "=" * 65


def _parse_preset(value: str) -> str:
    """Return an uppercase preset name if it exists, else raise."""

    name = value.upper()
    if name not in PRESETS:
        valid = ", ".join(sorted(PRESETS))
        raise argparse.ArgumentTypeError(
            f"Unknown preset '{value}'. Choose from: {valid}."
        )
    return name


# ---------- CLI ----------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pso2d", description="Particle swarm optimization in 2D.")
    sub = parser.add_subparsers(dest="cmd", required=True)

    # ---- DEMO ----
    p_demo = sub.add_parser("demo", help="Minimize the two demo functions and print every step")
    p_demo.add_argument("--steps", type=int, default=100)
    p_demo.add_argument("--seed", type=int, default=None)
    p_demo.add_argument("--every", type=int, default=1, help="print every N steps")
    p_demo.add_argument("--log-dir", dest="log_dir", type=Path, default=None,
                        help="Optional directory to store step-level CSV logs")

    # ---- GRID ----
    p_grid = sub.add_parser("grid", help="Repeated seeded runs over registered functions")
    p_grid.add_argument("--outdir", type=Path, default=Path("results"))
    p_grid.add_argument("--runs", type=int, default=30)
    p_grid.add_argument("--functions", nargs="+", choices=sorted(FUNCTIONS), default=sorted(FUNCTIONS))
    p_grid.add_argument("--seed", type=int, default=123)
    p_grid.add_argument("--preset", type=_parse_preset, default="DEFAULT",
                        help="Parameter profile (DEFAULT, QUICK_TEST, BALANCED, INTENSIVE)")

    # Optional manual overrides: use None so they only apply if explicitly set
    p_grid.add_argument("--steps", type=int, default=None)
    p_grid.add_argument("--swarm", type=int, default=None)
    p_grid.add_argument("--w", type=float, default=None)
    p_grid.add_argument("--cp", type=float, default=None)
    p_grid.add_argument("--cs", type=float, default=None)
    p_grid.add_argument("--log-steps", dest="log_steps", action="store_true",
                        help="also write a per-step CSV for every run")
    p_grid.add_argument("--no-plots", dest="no_plots", action="store_true")
    return parser


def grid_params(args) -> SwarmParams:
    return SwarmParams.from_preset(
        args.preset,
        steps=args.steps,
        particle_count=args.swarm,
        w=args.w,
        cp=args.cp,
        cs=args.cs,
    ).validate()


def run_demo(args) -> None:
    params = SwarmParams.from_preset("DEFAULT", steps=args.steps, seed=args.seed).validate()
    console = ConsoleProgress(every=args.every)

    for fname in DEMO_FUNCTIONS:
        meta = FUNCTIONS[fname]
        x_min, x_max, y_min, y_max = meta["bounds"]
        print(f"\nMinimizing {DEMO_TITLES[fname]} on [{x_min:g}, {x_max:g}] x [{y_min:g}, {y_max:g}]:\n")

        logger = None
        if args.log_dir is not None:
            logger = RunLogger(base_dir=args.log_dir, filename=f"{fname}_demo_log.csv",
                               metadata={"runner": "demo", "func": fname})

        swarm = Swarm.from_params(params.with_bounds(meta["bounds"]), meta["f"])
        swarm.run(params.steps, observer=chain(console, logger))
        if logger is not None:
            print(f"\nwrote: {logger.flush()}")

        print(f"\n{SEPARATOR}\n")


def run_grid(args) -> None:
    from pso2d.plots import boxplot_from_runs, plot_convergence

    params = grid_params(args)
    args.outdir.mkdir(parents=True, exist_ok=True)
    print(f"Preset : {args.preset} | particles={params.particle_count} steps={params.steps} "
          f"w={params.w} cp={params.cp} cs={params.cs}")

    runs_csv, summary_csv = run_suite(
        outdir=str(args.outdir),
        functions=args.functions,
        runs=args.runs,
        params=params,
        seed0=args.seed,
        log_steps=args.log_steps,
    )
    if not args.no_plots:
        boxplot_from_runs(runs_csv, str(args.outdir / "boxplot.png"))
        curves = {fname: load_curves(str(args.outdir), fname, args.runs) for fname in args.functions}
        plot_convergence(curves, str(args.outdir / "convergence.png"), log_scale=True)
    print("wrote:", runs_csv, summary_csv)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        if args.cmd == "demo":
            run_demo(args)
        else:
            run_grid(args)
    except ConfigurationError as exc:
        print(f"error: invalid configuration: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
