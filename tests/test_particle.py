from pso2d.algorithm.components.particle import Particle
from pso2d.algorithm.components.vector import Vector2


def test_personal_best_starts_at_initial_position():
    pos = Vector2(1.0, 2.0)
    p = Particle(position=pos, velocity=Vector2(0.1, -0.1), best_value=5.0)

    assert p.best_position is pos
    assert p.best_value == 5.0


def test_moving_the_particle_keeps_personal_best():
    p = Particle(position=Vector2(1.0, 2.0), velocity=Vector2(0.0, 0.0), best_value=5.0)
    p.position = Vector2(3.0, 3.0)

    assert (p.best_position.x, p.best_position.y) == (1.0, 2.0)
