from .vector import Vector2, add, sub, scale, display
from .particle import Particle, ParticleView

__all__ = ["Vector2", "add", "sub", "scale", "display", "Particle", "ParticleView"]
