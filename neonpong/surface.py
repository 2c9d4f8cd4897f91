"""2D drawing target the game draws onto, plus the pygame-backed implementation."""
import math
from typing import Dict, Optional, Protocol, Sequence, Tuple

import pygame

from .config import FONT_NAME

Color = Tuple[int, int, int]
Point = Tuple[float, float]


class RenderSurface(Protocol):
    @property
    def width(self) -> float: ...

    @property
    def height(self) -> float: ...

    def fill_rect(self, rect: Tuple[float, float, float, float], color: Color, alpha: float = 1.0) -> None: ...

    def stroke_line(self, start: Point, end: Point, color: Color, width: int = 1,
                    dash: Optional[Sequence[float]] = None, alpha: float = 1.0) -> None: ...

    def fill_circle(self, center: Point, radius: float, color: Color, alpha: float = 1.0) -> None: ...

    def draw_text(self, text: str, pos: Point, color: Color, size: int = 24, align: str = "center") -> None: ...


def alpha_byte(alpha: float) -> int:
    return max(0, min(255, int(round(255 * alpha))))


def dash_segments(start: Point, end: Point, dash: Sequence[float]):
    """Split a line into the "on" pieces of a repeating on/off dash pattern."""
    x0, y0 = start
    x1, y1 = end
    length = math.hypot(x1 - x0, y1 - y0)
    if length == 0 or not dash or sum(dash) <= 0:
        return [(start, end)]
    ux, uy = (x1 - x0) / length, (y1 - y0) / length
    segments = []
    dist = 0.0
    i = 0
    while dist < length:
        run = dash[i % len(dash)]
        if i % 2 == 0 and run > 0:
            stop = min(dist + run, length)
            segments.append(((x0 + ux * dist, y0 + uy * dist), (x0 + ux * stop, y0 + uy * stop)))
        dist += run
        i += 1
    return segments


class PygameSurface:
    def __init__(self, surf: pygame.Surface):
        self.surf = surf
        self._fonts: Dict[int, pygame.font.Font] = {}

    @property
    def width(self) -> float:
        return self.surf.get_width()

    @property
    def height(self) -> float:
        return self.surf.get_height()

    def _layer(self):
        # pygame.draw ignores per-primitive alpha, so translucent shapes go through an SRCALPHA layer
        return pygame.Surface(self.surf.get_size(), pygame.SRCALPHA)

    def fill_rect(self, rect, color, alpha=1.0):
        rect = pygame.Rect(round(rect[0]), round(rect[1]), round(rect[2]), round(rect[3]))
        if alpha >= 1.0:
            pygame.draw.rect(self.surf, color, rect)
            return
        patch = pygame.Surface(rect.size, pygame.SRCALPHA)
        patch.fill((*color, alpha_byte(alpha)))
        self.surf.blit(patch, rect.topleft)

    def stroke_line(self, start, end, color, width=1, dash=None, alpha=1.0):
        target = self.surf if alpha >= 1.0 else self._layer()
        rgba = (*color, alpha_byte(alpha))
        pieces = dash_segments(start, end, dash) if dash else [(start, end)]
        for a, b in pieces:
            pygame.draw.line(target, rgba, a, b, width)
        if target is not self.surf:
            self.surf.blit(target, (0, 0))

    def fill_circle(self, center, radius, color, alpha=1.0):
        if alpha >= 1.0:
            pygame.draw.circle(self.surf, color, (int(center[0]), int(center[1])), radius)
            return
        r = max(1, int(math.ceil(radius)))
        patch = pygame.Surface((2 * r, 2 * r), pygame.SRCALPHA)
        pygame.draw.circle(patch, (*color, alpha_byte(alpha)), (r, r), radius)
        self.surf.blit(patch, (int(center[0]) - r, int(center[1]) - r))

    def font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.SysFont(FONT_NAME, size)
        return self._fonts[size]

    def draw_text(self, text, pos, color, size=24, align="center"):
        label = self.font(size).render(text, True, color)
        x, y = pos
        # pos anchors the vertical middle of the label
        y -= label.get_height() / 2
        if align == "center":
            x -= label.get_width() / 2
        elif align == "right":
            x -= label.get_width()
        elif align != "left":
            raise ValueError(f"unknown text alignment: {align!r}")
        self.surf.blit(label, (x, y))
