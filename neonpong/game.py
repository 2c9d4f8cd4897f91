import logging
import random
from typing import Optional

from .audio import PADDLE_CUE, WALL_CUE, AudioSink, NullAudio
from .clock import SimulationClock
from .config import (
    BG_COLOR,
    CENTER_ALPHA,
    CENTER_DASH,
    GLOW_ALPHA,
    GLOW_SIZE,
    NEON,
    OVERLAY_ALPHA,
    PADDLE_SPARK,
    WALL_SPARK,
    GameConfig,
)
from .controls import TOGGLE_PAUSE, InputState
from .particles import ParticleSystem
from .physics import Event, EventKind, PhysicsEngine, World
from .presentation import NullPresenter, Presenter
from .starfield import Starfield

logger = logging.getLogger(__name__)


class GameSession:
    """One match: owns the world, the effects and the session flags.

    The host calls :meth:`frame` once per display frame with a timestamp in
    milliseconds and the latest input snapshot, then :meth:`draw`. Physics
    runs in fixed steps regardless of how often frames arrive.
    """

    def __init__(self, width: float, height: float, presenter: Optional[Presenter] = None,
                 audio: Optional[AudioSink] = None, config: Optional[GameConfig] = None,
                 rng: Optional[random.Random] = None):
        self.config = config or GameConfig()
        self.rng = rng or random.Random()
        self.presenter = presenter or NullPresenter()
        self.audio = audio or NullAudio()
        self.engine = PhysicsEngine(self.config, self.rng)
        self.clock = SimulationClock(self.config.step_ms, self.config.max_steps_per_frame)
        self.particles = ParticleSystem(self.config, self.rng)
        self._init_state(width, height)
        logger.info("Session started on a %gx%g playfield, first to %d",
                    width, height, self.config.winning_score)

    def _init_state(self, width, height):
        self.world = World.initial(width, height, self.config)
        self.starfield = Starfield(self.world.playfield, self.config, self.rng)
        self.particles.clear()
        self.clock.reset()
        self.input = InputState()
        self.paused = False
        self.game_over = False
        self.last_pause_toggle: Optional[float] = None

    @property
    def score(self):
        return self.world.score

    # ----------------------------------
    # Frame cycle
    # ----------------------------------
    def frame(self, now_ms: float, controls: Optional[InputState] = None) -> int:
        if controls is not None:
            self.input = controls
        # held toggle repeats are collapsed by the debounce window
        if self.input.is_held(TOGGLE_PAUSE):
            self.toggle_pause(now_ms)
        return self.clock.tick(now_ms, self.step)

    def step(self):
        # paused time is still drained by the clock, so resuming doesn't catch up
        if self.paused:
            return
        if not self.game_over:
            for event in self.engine.step(self.world, self.input):
                self.handle_event(event)
        self.particles.advance()
        self.starfield.update()

    def handle_event(self, event: Event):
        if event.kind is EventKind.WALL_BOUNCE:
            self.audio.trigger(*WALL_CUE)
            self.particles.spawn(event.pos, WALL_SPARK, self.config.wall_burst)
        elif event.kind is EventKind.PADDLE_HIT:
            self.audio.trigger(*PADDLE_CUE)
            self.particles.spawn(event.pos, PADDLE_SPARK, self.config.paddle_burst)
        elif event.kind is EventKind.SCORE:
            self.presenter.score_updated(*self.score.as_tuple())
        elif event.kind is EventKind.WIN and not self.game_over:
            self.game_over = True
            logger.info("Player %d wins %d - %d", event.player, *self.score.as_tuple())
            self.presenter.game_won()

    # ----------------------------------
    # Session controls
    # ----------------------------------
    def toggle_pause(self, now_ms: float) -> bool:
        """Flip the pause flag unless the last flip was within the debounce window.

        Returns True when the flag actually changed.
        """
        last = self.last_pause_toggle
        if last is not None and now_ms - last <= self.config.pause_debounce_ms:
            logger.debug("Pause toggle ignored (%.0f ms since last)", now_ms - last)
            return False
        self.paused = not self.paused
        self.last_pause_toggle = now_ms
        logger.debug("Paused" if self.paused else "Resumed")
        return True

    def resize(self, width: float, height: float):
        pf = self.world.playfield
        pf.width, pf.height = width, height
        self.world.place_paddles(self.config.paddle_inset)
        logger.debug("Playfield resized to %gx%g", width, height)

    def restart(self):
        pf = self.world.playfield
        self._init_state(pf.width, pf.height)
        logger.info("Session restarted")
        self.presenter.score_updated(*self.score.as_tuple())

    # ----------------------------------
    # Drawing
    # ----------------------------------
    def draw_glow(self, surf):
        g = GLOW_SIZE
        for paddle in (self.world.left, self.world.right):
            x, y, w, h = paddle.rect()
            surf.fill_rect((x - g, y - g, w + 2 * g, h + 2 * g), NEON, alpha=GLOW_ALPHA)
        ball = self.world.ball
        surf.fill_circle((ball.pos.x, ball.pos.y), ball.radius + g, NEON, alpha=GLOW_ALPHA)

    def draw(self, surf):
        w, h = self.world.playfield.width, self.world.playfield.height
        surf.fill_rect((0, 0, w, h), BG_COLOR)
        self.starfield.render(surf)
        surf.stroke_line((w / 2, 0), (w / 2, h), NEON, dash=CENTER_DASH, alpha=CENTER_ALPHA)

        self.draw_glow(surf)
        self.world.left.draw(surf, NEON)
        self.world.right.draw(surf, NEON)
        self.world.ball.draw(surf, NEON)

        self.particles.render(surf)

        if self.paused:
            surf.fill_rect((0, 0, w, h), (0, 0, 0), alpha=OVERLAY_ALPHA)
            surf.draw_text("PAUSED", (w / 2, h / 2), NEON, 48)
            surf.draw_text("Press P to resume", (w / 2, h / 2 + 40), NEON, 24)
