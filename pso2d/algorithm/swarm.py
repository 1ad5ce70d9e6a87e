"""Particle swarm optimizer for functions of a 2D point.

This module owns the whole PSO loop:
- seeds particles uniformly inside rectangular bounds (initialization)
- moves every particle with the inertia/cognitive/social velocity rule (update)
- tracks personal bests and the swarm-wide best after each evaluation
- repeats the update for a fixed number of steps and reports progress (run)

Bounds are only used to seed the swarm; particles are free to leave them
afterwards. The global best is updated as soon as any particle improves on
it, so later particles in the same sweep are pulled toward the new best.

The main entry point is the Swarm class.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

import numpy as np

from pso2d.algorithm.components.particle import Particle, ParticleView
from pso2d.algorithm.components.vector import Vector2, add, scale, sub
from pso2d.config import ConfigurationError, SwarmParams, check_count, validate_swarm_args
from pso2d.constants import VELOCITY_SPAN_DIVISOR
from pso2d.logging.progress import Observer, ProgressRecord

Evaluator = Callable[[Vector2], float]


class Swarm:
    """Global-best PSO over [x_min, x_max] x [y_min, y_max]."""

    def __init__(self,
                 particle_count: int,
                 w: float,
                 cp: float,
                 cs: float,
                 evaluator: Evaluator,
                 x_min: float,
                 x_max: float,
                 y_min: float,
                 y_max: float,
                 rng=None,
                 seed: Optional[int] = None):
        validate_swarm_args(particle_count, w, cp, cs, evaluator, x_min, x_max, y_min, y_max)
        if rng is not None and seed is not None:
            raise ConfigurationError("seed", "pass either rng or seed, not both")

        self._w = float(w)
        self._cp = float(cp)
        self._cs = float(cs)
        self._evaluator = evaluator
        self._bounds = (float(x_min), float(x_max), float(y_min), float(y_max))
        # Anything with random() -> float in [0, 1) works; numpy's Generator by default.
        self._rng = rng if rng is not None else np.random.default_rng(seed)

        self._particles: List[Particle] = []
        self._best_position: Optional[Vector2] = None
        self._best_value = float("inf")
        self._step_count = 0
        self._evaluations = 0

        self._initialize(int(particle_count))

    @classmethod
    def from_params(cls, params: SwarmParams, evaluator: Evaluator, rng=None) -> "Swarm":
        """Build a swarm from a SwarmParams bundle (steps is used by run, not here)."""
        return cls(
            particle_count=params.particle_count,
            w=params.w,
            cp=params.cp,
            cs=params.cs,
            evaluator=evaluator,
            x_min=params.x_min,
            x_max=params.x_max,
            y_min=params.y_min,
            y_max=params.y_max,
            rng=rng,
            seed=params.seed if rng is None else None,
        )

    # ---- read-only state ----
    @property
    def particles(self) -> Tuple[ParticleView, ...]:
        """Snapshots of the particles in population order; they do not track later steps."""
        return tuple(p.view() for p in self._particles)

    @property
    def global_best_position(self) -> Vector2:
        return self._best_position

    @property
    def global_best_value(self) -> float:
        return self._best_value

    @property
    def step_count(self) -> int:
        """Number of update steps completed so far."""
        return self._step_count

    @property
    def evaluations(self) -> int:
        """Number of objective-function calls so far, including initialization."""
        return self._evaluations

    @property
    def w(self) -> float:
        return self._w

    @property
    def cp(self) -> float:
        return self._cp

    @property
    def cs(self) -> float:
        return self._cs

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        return self._bounds

    def best(self) -> Tuple[Vector2, float]:
        return self._best_position, self._best_value

    # ---- algorithm ----
    def _draw(self) -> float:
        return float(self._rng.random())

    def _evaluate(self, position: Vector2) -> float:
        self._evaluations += 1
        return self._evaluator(position)

    def _offer_global(self, position: Vector2, value: float) -> None:
        # Strict comparison: on ties the earliest best is kept.
        if value < self._best_value:
            self._best_value = value
            self._best_position = position

    def _initialize(self, particle_count: int) -> None:
        x_min, x_max, y_min, y_max = self._bounds
        x_span = x_max - x_min
        y_span = y_max - y_min

        # Draw order per particle: position x, position y, velocity x, velocity y.
        for _ in range(particle_count):
            position = Vector2(x_min + self._draw() * x_span,
                               y_min + self._draw() * y_span)
            velocity = Vector2((self._draw() - 0.5) * x_span / VELOCITY_SPAN_DIVISOR,
                               (self._draw() - 0.5) * y_span / VELOCITY_SPAN_DIVISOR)

            value = self._evaluate(position)
            self._particles.append(Particle(position=position, velocity=velocity, best_value=value))
            self._offer_global(position, value)

    def update(self) -> ProgressRecord:
        """Move every particle once, in population order, and return the new best."""
        for particle in self._particles:
            r1 = self._draw()
            r2 = self._draw()

            cognitive = scale(self._cp * r1, sub(particle.best_position, particle.position))
            social = scale(self._cs * r2, sub(self._best_position, particle.position))

            particle.velocity = add(add(scale(self._w, particle.velocity), cognitive), social)
            particle.position = add(particle.position, particle.velocity)

            value = self._evaluate(particle.position)

            if value < particle.best_value:
                particle.best_value = value
                particle.best_position = particle.position

            self._offer_global(particle.position, value)

        self._step_count += 1
        return ProgressRecord(step=self._step_count,
                              best_value=self._best_value,
                              best_position=self._best_position)

    def run(self, steps: int, observer: Optional[Observer] = None) -> List[ProgressRecord]:
        """
        Perform `steps` updates, reporting each step's best to `observer`.

        Returns the list of progress records, one per step. Step numbers
        continue from earlier calls on the same swarm.
        """
        steps = check_count("steps", steps)

        history: List[ProgressRecord] = []
        for _ in range(steps):
            record = self.update()
            history.append(record)
            if observer is not None:
                observer(record)
        return history

    def __repr__(self) -> str:
        return (f"Swarm(particles={len(self._particles)}, w={self._w}, cp={self._cp}, cs={self._cs}, "
                f"step={self._step_count}, best={self._best_value:.6g})")
