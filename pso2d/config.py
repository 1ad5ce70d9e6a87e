from __future__ import annotations

from dataclasses import dataclass, fields, replace
from math import isfinite
from numbers import Integral, Real
from typing import Optional

from pso2d.constants import PRESETS

"""
Parameter handling for swarm runs.

`SwarmParams` bundles everything a run needs apart from the objective
function. The defaults are the classic demo settings (30 particles,
w=0.4, cp=2.0, cs=1.5 on [-10, 10] x [-10, 10]); named presets live in
`constants.py`. All range checks go through the helpers below so the
Swarm constructor and the CLI report violations the same way.
"""


class ConfigurationError(ValueError):
    """Raised when a swarm or run parameter is out of range."""

    def __init__(self, parameter: str, message: str):
        super().__init__(f"{parameter}: {message}")
        self.parameter = parameter


def _is_int(value) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def _is_real(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def check_count(name: str, value) -> int:
    if not _is_int(value):
        raise ConfigurationError(name, f"must be an integer, got {value!r}")
    if value <= 0:
        raise ConfigurationError(name, f"must be greater than zero, got {value}")
    return int(value)


def check_range(name: str, value, lo: float, hi: float) -> float:
    if not _is_real(value):
        raise ConfigurationError(name, f"must be a number, got {value!r}")
    if not lo <= value <= hi:
        raise ConfigurationError(name, f"must be between {lo:g} and {hi:g}, got {value}")
    return float(value)


def check_interval(lo_name: str, lo, hi_name: str, hi) -> tuple[float, float]:
    for name, value in ((lo_name, lo), (hi_name, hi)):
        if not _is_real(value):
            raise ConfigurationError(name, f"must be a number, got {value!r}")
        if not isfinite(value):
            raise ConfigurationError(name, f"must be finite, got {value}")
    if not lo < hi:
        raise ConfigurationError(f"{lo_name}/{hi_name}",
                                 f"{lo_name} must be less than {hi_name}, got {lo} >= {hi}")
    return float(lo), float(hi)


def _check_coefficients(particle_count, w, cp, cs) -> None:
    check_count("particle_count", particle_count)
    check_range("w", w, 0.0, 1.0)
    check_range("cp", cp, 1.0, 2.0)
    check_range("cs", cs, 1.0, 2.0)


def _check_bounds(x_min, x_max, y_min, y_max) -> None:
    check_interval("x_min", x_min, "x_max", x_max)
    check_interval("y_min", y_min, "y_max", y_max)


def validate_swarm_args(particle_count, w, cp, cs, evaluator,
                        x_min, x_max, y_min, y_max) -> None:
    """Check constructor arguments in declaration order; the first violation wins."""
    _check_coefficients(particle_count, w, cp, cs)
    if evaluator is None:
        raise ConfigurationError("evaluator", "an objective function is required")
    if not callable(evaluator):
        raise ConfigurationError("evaluator", f"must be callable, got {type(evaluator).__name__}")
    _check_bounds(x_min, x_max, y_min, y_max)


@dataclass(frozen=True)
class SwarmParams:
    particle_count: int = 30
    w: float = 0.4
    cp: float = 2.0
    cs: float = 1.5
    x_min: float = -10.0
    x_max: float = 10.0
    y_min: float = -10.0
    y_max: float = 10.0
    steps: int = 100
    seed: Optional[int] = None

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        return (self.x_min, self.x_max, self.y_min, self.y_max)

    def validate(self) -> "SwarmParams":
        """
        Run every range check and return self.

        The evaluator is not part of the params; the Swarm checks it when
        it is constructed.
        """
        _check_coefficients(self.particle_count, self.w, self.cp, self.cs)
        _check_bounds(self.x_min, self.x_max, self.y_min, self.y_max)
        check_count("steps", self.steps)
        if self.seed is not None and not _is_int(self.seed):
            raise ConfigurationError("seed", f"must be an integer or None, got {self.seed!r}")
        return self

    def with_overrides(self, **overrides) -> "SwarmParams":
        """Copy with every non-None override applied; unknown keys are an error."""
        known = {f.name for f in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ConfigurationError(unknown[0], "unknown parameter")
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def with_bounds(self, bounds: tuple[float, float, float, float]) -> "SwarmParams":
        x_min, x_max, y_min, y_max = bounds
        return replace(self, x_min=x_min, x_max=x_max, y_min=y_min, y_max=y_max)

    @classmethod
    def from_preset(cls, name: str, **overrides) -> "SwarmParams":
        key = name.upper()
        if key not in PRESETS:
            valid = ", ".join(sorted(PRESETS))
            raise ConfigurationError("preset", f"unknown preset '{name}'. Choose from: {valid}.")
        return cls(**PRESETS[key]).with_overrides(**overrides)
