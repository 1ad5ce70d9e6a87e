from dataclasses import dataclass, field

from .vector import Vector2


@dataclass
class Particle:
    """
    One candidate solution moving through the search space.

    The particle is a plain state holder: the owning Swarm moves it and
    decides when its personal best changes. ``best_position`` starts at the
    initial position and ``best_value`` is the objective value measured
    there, so a particle never carries a placeholder best.
    """

    position: Vector2
    velocity: Vector2
    best_value: float
    best_position: Vector2 = field(init=False)

    def __post_init__(self) -> None:
        self.best_position = self.position

    def view(self) -> "ParticleView":
        return ParticleView(position=self.position,
                            velocity=self.velocity,
                            best_position=self.best_position,
                            best_value=self.best_value)


@dataclass(frozen=True)
class ParticleView:
    """Read-only snapshot of a particle, taken when it was requested."""

    position: Vector2
    velocity: Vector2
    best_position: Vector2
    best_value: float
