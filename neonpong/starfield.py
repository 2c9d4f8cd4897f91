import random
from dataclasses import dataclass
from typing import List, Optional

from .config import STAR_COLOR, GameConfig


@dataclass
class Star:
    x: float
    y: float
    radius: float
    speed: float


class Starfield:
    """Background stars scrolling left at their own constant speed.

    ``playfield`` is anything with ``width`` and ``height``; it is read on every
    update so a resize takes effect on the next wrap.
    """

    def __init__(self, playfield, config: Optional[GameConfig] = None, rng: Optional[random.Random] = None):
        self.playfield = playfield
        self.config = config or GameConfig()
        self.rng = rng or random.Random()
        self.stars: List[Star] = []
        self.reset()

    def reset(self):
        size_lo, size_hi = self.config.star_size
        speed_lo, speed_hi = self.config.star_speed
        self.stars = [
            Star(
                x=self.rng.random() * self.playfield.width,
                y=self.rng.random() * self.playfield.height,
                radius=self.rng.uniform(size_lo, size_hi),
                speed=self.rng.uniform(speed_lo, speed_hi),
            )
            for _ in range(self.config.star_count)
        ]

    def update(self):
        for star in self.stars:
            star.x -= star.speed
            if star.x < 0:
                star.x = self.playfield.width
                star.y = self.rng.random() * self.playfield.height

    def render(self, surf):
        for star in self.stars:
            surf.fill_circle((star.x, star.y), star.radius, STAR_COLOR)
