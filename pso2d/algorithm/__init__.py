from .components import Vector2, Particle, ParticleView, add, sub, scale, display
from .swarm import Swarm, Evaluator

__all__ = ["Vector2", "Particle", "ParticleView", "add", "sub", "scale", "display", "Swarm", "Evaluator"]
