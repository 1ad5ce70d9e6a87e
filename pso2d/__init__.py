"""Particle swarm optimization for real-valued functions of a 2D point."""

from pso2d.algorithm import Vector2, Particle, Swarm, add, sub, scale, display
from pso2d.config import ConfigurationError, SwarmParams
from pso2d.logging import ProgressRecord, ConsoleProgress, RunLogger, chain

__version__ = "0.1.0"

__all__ = [
    "Vector2", "Particle", "Swarm", "add", "sub", "scale", "display",
    "ConfigurationError", "SwarmParams",
    "ProgressRecord", "ConsoleProgress", "RunLogger", "chain",
]
