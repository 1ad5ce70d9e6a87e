import itertools

import pytest

from pso2d.algorithm.components.vector import Vector2


class ScriptedRandom:
    """Random source that replays a fixed list of draws (cycled when exhausted)."""

    def __init__(self, draws):
        self.draws = list(draws)
        self._it = itertools.cycle(self.draws)
        self.calls = 0

    def random(self):
        self.calls += 1
        return next(self._it)


class CountingEvaluator:
    """Wrap an evaluator and remember every point it was called with."""

    def __init__(self, f):
        self.f = f
        self.points = []

    def __call__(self, v: Vector2) -> float:
        self.points.append(v)
        return self.f(v)


def sphere2(v: Vector2) -> float:
    return v.x ** 2 + v.y ** 2


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def sphere():
    return sphere2


@pytest.fixture
def valid_kwargs(sphere):
    return dict(particle_count=10, w=0.5, cp=1.5, cs=1.5, evaluator=sphere,
                x_min=-5.0, x_max=5.0, y_min=-5.0, y_max=5.0)
