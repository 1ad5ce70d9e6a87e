import numpy as np

from pso2d.algorithm.components.vector import Vector2

TWO_PI = 2.0 * np.pi


def sphere(v: Vector2) -> float:
    return float(v.x*v.x + v.y*v.y)

def rosenbrock(v: Vector2) -> float:
    """100(y - x^2)^2 + (1 - x)^2, minimum 0 at (1, 1)."""
    return float(100.0*(v.y - v.x**2)**2 + (1.0 - v.x)**2)

def rastrigin(v: Vector2) -> float:
    return float(20.0 + v.x**2 - 10.0*np.cos(TWO_PI*v.x) + v.y**2 - 10.0*np.cos(TWO_PI*v.y))

def ackley(v: Vector2) -> float:
    radius = np.sqrt(0.5 * (v.x**2 + v.y**2))
    ripple = 0.5 * (np.cos(TWO_PI*v.x) + np.cos(TWO_PI*v.y))
    return float(-20.0*np.exp(-0.2*radius) - np.exp(ripple) + 20.0 + np.e)

def scaled_rosenbrock(v: Vector2) -> float:
    """(x - 1)^2 + 10(x^2 - y)^2, minimum 0 at (1, 1)."""
    return float((v.x - 1.0)**2 + 10.0*(v.x**2 - v.y)**2)

def gaussian_ridge(v: Vector2) -> float:
    """x * exp(-(x^2 + y^2)), minimum -1/sqrt(2e) at (-1/sqrt(2), 0)."""
    return float(v.x * np.exp(-(v.x**2 + v.y**2)))

# bounds are (x_min, x_max, y_min, y_max)
FUNCTIONS = {
    "sphere":            {"f": sphere,            "bounds": (-5.12, 5.12, -5.12, 5.12)},
    "rosenbrock":        {"f": rosenbrock,        "bounds": (-5.0, 10.0, -5.0, 10.0)},
    "rastrigin":         {"f": rastrigin,         "bounds": (-5.12, 5.12, -5.12, 5.12)},
    "ackley":            {"f": ackley,            "bounds": (-32.768, 32.768, -32.768, 32.768)},
    "scaled_rosenbrock": {"f": scaled_rosenbrock, "bounds": (-1.0, 1.5, -1.0, 1.5)},
    "gaussian_ridge":    {"f": gaussian_ridge,    "bounds": (-2.0, 2.0, -2.0, 2.0)},
}

GAUSSIAN_RIDGE_MIN = -1.0 / np.sqrt(2.0 * np.e)

# best_f <= threshold counts as a success
SUCCESS_THRESHOLDS = {
    "sphere": 1e-8,
    "rosenbrock": 1e-4,
    "rastrigin": 1e-4,
    "ackley": 1e-4,
    "scaled_rosenbrock": 1e-6,
    "gaussian_ridge": GAUSSIAN_RIDGE_MIN + 1e-6,
}

# The two problems the `demo` command walks through.
DEMO_FUNCTIONS = ("scaled_rosenbrock", "gaussian_ridge")
