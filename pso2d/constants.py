"""Presets and constants for 2D particle swarm runs."""


# ============= Presets =============

# Classic demo settings: moderate swarm, low inertia, strong self-attraction.
DEFAULT = {
    'particle_count': 30,
    'w': 0.4,
    'cp': 2.0,
    'cs': 1.5,
    'steps': 100,
}

# Quick smoke test: small swarm, short run.
QUICK_TEST = {
    'particle_count': 10,
    'w': 0.5,
    'cp': 1.5,
    'cs': 1.5,
    'steps': 50,
}

# Balanced exploration: more inertia, equal pulls.
BALANCED = {
    'particle_count': 40,
    'w': 0.7,
    'cp': 1.5,
    'cs': 1.5,
    'steps': 200,
}

# Intensive search: large swarm, constriction-like coefficients.
INTENSIVE = {
    'particle_count': 60,
    'w': 0.729,
    'cp': 1.49445,
    'cs': 1.49445,
    'steps': 500,
}

PRESETS = {
    'DEFAULT': DEFAULT,
    'QUICK_TEST': QUICK_TEST,
    'BALANCED': BALANCED,
    'INTENSIVE': INTENSIVE,
}


# ============= Initialization =============
# Initial velocities are drawn from (r - 0.5) * span / VELOCITY_SPAN_DIVISOR,
# i.e. within +/- span/20 on each axis.
VELOCITY_SPAN_DIVISOR = 10.0
