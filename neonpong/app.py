import logging
import random
import time
from typing import Optional

import pygame

from .audio import open_audio
from .config import (
    FIELD_ASPECT,
    FIELD_MARGIN,
    HUD_HEIGHT,
    MAX_FIELD_WIDTH,
    MAX_FPS,
    MIN_FIELD_WIDTH,
    GameConfig,
)
from .controls import DOWN_LEFT, DOWN_RIGHT, UP_LEFT, UP_RIGHT, InputState
from .game import GameSession
from .presentation import Scoreboard
from .surface import PygameSurface

logger = logging.getLogger(__name__)

# held-key bindings, sampled once per frame
KEY_BINDINGS = {
    pygame.K_w: UP_LEFT,
    pygame.K_s: DOWN_LEFT,
    pygame.K_UP: UP_RIGHT,
    pygame.K_DOWN: DOWN_RIGHT,
}


def fit_playfield(window_width: int):
    width = max(MIN_FIELD_WIDTH, min(MAX_FIELD_WIDTH, window_width - FIELD_MARGIN))
    return width, int(width * FIELD_ASPECT)


def read_controls(pressed) -> InputState:
    return InputState.from_intents(intent for key, intent in KEY_BINDINGS.items() if pressed[key])


def now_ms() -> float:
    return time.perf_counter() * 1000.0


class PongApp:
    def __init__(self, config: Optional[GameConfig] = None, muted: bool = False, seed: Optional[int] = None):
        pygame.init()
        self.config = config or GameConfig()
        width, height = fit_playfield(MAX_FIELD_WIDTH + FIELD_MARGIN)
        self.screen = pygame.display.set_mode((width + FIELD_MARGIN, height + HUD_HEIGHT + FIELD_MARGIN),
                                              pygame.RESIZABLE)
        pygame.display.set_caption("Neon Pong")
        self.clock = pygame.time.Clock()
        self.running = True

        self.field = PygameSurface(pygame.Surface((width, height)))
        self.hud = PygameSurface(pygame.Surface((width, HUD_HEIGHT)))
        self.scoreboard = Scoreboard(self.config.winning_score)
        self.session = GameSession(
            width, height,
            presenter=self.scoreboard,
            audio=open_audio(muted),
            config=self.config,
            rng=random.Random(seed),
        )
        logger.info("Window opened at %dx%d", *self.screen.get_size())

    def handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                self.running = False
            elif e.type == pygame.VIDEORESIZE:
                self.resize(e.w)
            elif e.type == pygame.KEYDOWN:
                if e.key == pygame.K_ESCAPE:
                    self.running = False
                elif e.key == pygame.K_p:
                    self.session.toggle_pause(now_ms())
                elif e.key == pygame.K_r or (e.key == pygame.K_SPACE and self.session.game_over):
                    self.session.restart()

    def resize(self, window_width: int):
        width, height = fit_playfield(window_width)
        if (width, height) == (self.field.width, self.field.height):
            return
        self.field = PygameSurface(pygame.Surface((width, height)))
        self.hud = PygameSurface(pygame.Surface((width, HUD_HEIGHT)))
        self.session.resize(width, height)
        logger.debug("Window width %d -> playfield %dx%d", window_width, width, height)

    def draw(self):
        self.screen.fill((0, 0, 0))
        self.hud.surf.fill((0, 0, 0))
        self.scoreboard.draw(self.hud)
        self.session.draw(self.field)
        self.scoreboard.draw_banner(self.field)

        x = (self.screen.get_width() - self.field.width) // 2
        self.screen.blit(self.hud.surf, (x, FIELD_MARGIN // 2))
        self.screen.blit(self.field.surf, (x, FIELD_MARGIN // 2 + HUD_HEIGHT))
        pygame.display.flip()

    def run(self):
        while self.running:
            self.clock.tick(MAX_FPS)
            self.handle_events()
            self.session.frame(now_ms(), read_controls(pygame.key.get_pressed()))
            self.draw()
        pygame.quit()
