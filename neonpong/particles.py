import random
from dataclasses import dataclass
from typing import List, Optional

import pygame

from .config import GameConfig

Vec2 = pygame.math.Vector2

# float slack so a particle at 1.0 dies after exactly 1/decay steps
LIFE_EPSILON = 1e-9


@dataclass
class Particle:
    pos: Vec2
    vel: Vec2
    radius: float
    color: tuple
    life: float = 1.0

    def update(self, decay: float):
        self.pos += self.vel
        self.life -= decay

    @property
    def alive(self) -> bool:
        return self.life > LIFE_EPSILON

    def draw(self, surf):
        # life is used directly as alpha
        surf.fill_circle((self.pos.x, self.pos.y), self.radius, self.color, alpha=max(0.0, min(1.0, self.life)))


class ParticleSystem:
    """Short-lived sparks spawned by collisions, aged once per simulation step."""

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[random.Random] = None):
        self.config = config or GameConfig()
        self.rng = rng or random.Random()
        self.particles: List[Particle] = []

    def __len__(self):
        return len(self.particles)

    def spawn(self, pos, color: tuple, count: int):
        spd = self.config.particle_speed
        lo, hi = self.config.particle_size
        for _ in range(count):
            v = Vec2(self.rng.uniform(-spd, spd), self.rng.uniform(-spd, spd))
            self.particles.append(Particle(Vec2(pos), v, self.rng.uniform(lo, hi), color))

    def advance(self):
        alive = []
        for p in self.particles:
            p.update(self.config.particle_decay)
            if p.alive:
                alive.append(p)
        self.particles = alive

    def render(self, surf):
        for p in self.particles:
            p.draw(surf)

    def clear(self):
        self.particles.clear()
