import pytest

from pso2d.config import ConfigurationError, SwarmParams
from pso2d.constants import PRESETS


def test_defaults_match_demo_settings():
    p = SwarmParams()
    assert (p.particle_count, p.w, p.cp, p.cs, p.steps) == (30, 0.4, 2.0, 1.5, 100)
    assert p.bounds == (-10.0, 10.0, -10.0, 10.0)
    assert p.validate() is p


@pytest.mark.parametrize("field, value, parameter", [
    ("particle_count", 0, "particle_count"),
    ("w", 1.5, "w"),
    ("cp", 0.5, "cp"),
    ("cs", "1.5", "cs"),
    ("x_max", -10.0, "x_min/x_max"),
    ("y_min", 10.0, "y_min/y_max"),
    ("steps", 0, "steps"),
    ("seed", 1.5, "seed"),
    ("x_min", float("-inf"), "x_min"),
    ("x_max", float("inf"), "x_max"),
    ("y_min", float("nan"), "y_min"),
])
def test_validate_names_offending_parameter(field, value, parameter):
    with pytest.raises(ConfigurationError) as excinfo:
        SwarmParams(**{field: value}).validate()
    assert excinfo.value.parameter == parameter


def test_with_overrides_ignores_none():
    p = SwarmParams().with_overrides(w=0.9, cp=None, steps=5)
    assert (p.w, p.cp, p.steps) == (0.9, 2.0, 5)


def test_with_overrides_rejects_unknown_keys():
    with pytest.raises(ConfigurationError) as excinfo:
        SwarmParams().with_overrides(inertia=0.5)
    assert excinfo.value.parameter == "inertia"


def test_with_bounds():
    p = SwarmParams().with_bounds((-1, 1.5, -2, 2))
    assert p.bounds == (-1, 1.5, -2, 2)


@pytest.mark.parametrize("name", sorted(PRESETS))
def test_presets_are_valid(name):
    p = SwarmParams.from_preset(name.lower())
    assert p.validate().particle_count == PRESETS[name]["particle_count"]


def test_unknown_preset():
    with pytest.raises(ConfigurationError, match="Choose from"):
        SwarmParams.from_preset("turbo")


def test_params_are_frozen():
    with pytest.raises(AttributeError):
        SwarmParams().w = 0.1
