import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

import pygame

from .config import GameConfig
from .controls import DOWN_LEFT, DOWN_RIGHT, UP_LEFT, UP_RIGHT, InputState, resolve_paddle_speed

Vec2 = pygame.math.Vector2

logger = logging.getLogger(__name__)


def clamp(x, lo, hi):
    return max(lo, min(hi, x))


@dataclass
class Playfield:
    width: float
    height: float

    @property
    def center(self) -> Vec2:
        return Vec2(self.width / 2, self.height / 2)


@dataclass
class Paddle:
    pos: Vec2           # center
    width: float
    height: float
    speed: float = 0.0  # vertical, per step

    def clamp_to(self, field_height: float):
        half = self.height / 2
        self.pos.y = clamp(self.pos.y, half, field_height - half)

    def rect(self) -> Tuple[float, float, float, float]:
        return (self.pos.x - self.width / 2, self.pos.y - self.height / 2, self.width, self.height)

    def draw(self, surf, color):
        surf.fill_rect(self.rect(), color)


@dataclass
class Ball:
    pos: Vec2
    vel: Vec2
    radius: float

    def overlaps(self, paddle: Paddle) -> bool:
        # the ball's bounding square against the paddle rectangle
        r = self.radius
        return (self.pos.x + r > paddle.pos.x - paddle.width / 2 and
                self.pos.x - r < paddle.pos.x + paddle.width / 2 and
                self.pos.y + r > paddle.pos.y - paddle.height / 2 and
                self.pos.y - r < paddle.pos.y + paddle.height / 2)

    def draw(self, surf, color):
        surf.fill_circle((self.pos.x, self.pos.y), self.radius, color)


@dataclass
class Score:
    player1: int = 0
    player2: int = 0

    def as_tuple(self) -> Tuple[int, int]:
        return self.player1, self.player2

    def winner(self, threshold: int) -> Optional[int]:
        if self.player1 >= threshold:
            return 1
        if self.player2 >= threshold:
            return 2
        return None


@dataclass
class World:
    playfield: Playfield
    left: Paddle
    right: Paddle
    ball: Ball
    score: Score = field(default_factory=Score)

    @classmethod
    def initial(cls, width: float, height: float, config: GameConfig) -> "World":
        pf = Playfield(width, height)
        mid = pf.center
        left = Paddle(Vec2(config.paddle_inset, mid.y), config.paddle_width, config.paddle_height)
        right = Paddle(Vec2(width - config.paddle_inset, mid.y), config.paddle_width, config.paddle_height)
        ball = Ball(Vec2(mid), Vec2(config.ball_start_vel), config.ball_radius)
        return cls(pf, left, right, ball)

    def place_paddles(self, inset: float):
        self.left.pos.x = inset
        self.right.pos.x = self.playfield.width - inset


class EventKind(Enum):
    WALL_BOUNCE = "wall-bounce"
    PADDLE_HIT = "paddle-hit"
    SCORE = "score"
    WIN = "win"


@dataclass(frozen=True)
class Event:
    kind: EventKind
    pos: Optional[Tuple[float, float]] = None
    player: Optional[int] = None


class PhysicsEngine:
    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[random.Random] = None):
        self.config = config or GameConfig()
        self.rng = rng or random.Random()

    def serve(self, world: World):
        """Put the ball back at center, heading left or right with a random vertical drift."""
        cfg = self.config
        world.ball.pos = world.playfield.center
        vx = cfg.serve_speed_x if self.rng.random() > 0.5 else -cfg.serve_speed_x
        vy = self.rng.uniform(-cfg.serve_spread_y, cfg.serve_spread_y)
        world.ball.vel = Vec2(vx, vy)

    def step(self, world: World, controls: InputState) -> List[Event]:
        cfg = self.config
        ball = world.ball
        height = world.playfield.height
        events: List[Event] = []

        # Paddles
        world.left.speed = resolve_paddle_speed(controls, UP_LEFT, DOWN_LEFT, cfg.paddle_speed)
        world.right.speed = resolve_paddle_speed(controls, UP_RIGHT, DOWN_RIGHT, cfg.paddle_speed)
        world.left.pos.y += world.left.speed
        world.right.pos.y += world.right.speed
        world.left.clamp_to(height)
        world.right.clamp_to(height)

        # Ball
        ball.pos += ball.vel

        # Top / bottom walls
        if ball.pos.y <= ball.radius or ball.pos.y >= height - ball.radius:
            ball.vel.y *= -1
            events.append(Event(EventKind.WALL_BOUNCE, (ball.pos.x, ball.pos.y)))

        # Paddles
        if ball.overlaps(world.left) or ball.overlaps(world.right):
            ball.vel.x *= -cfg.paddle_speedup
            if cfg.max_ball_speed is not None:
                ball.vel.x = clamp(ball.vel.x, -cfg.max_ball_speed, cfg.max_ball_speed)
            events.append(Event(EventKind.PADDLE_HIT, (ball.pos.x, ball.pos.y)))

        # Scoring
        scorer = None
        if ball.pos.x < 0:
            world.score.player2 += 1
            scorer = 2
        elif ball.pos.x > world.playfield.width:
            world.score.player1 += 1
            scorer = 1
        if scorer is not None:
            self.serve(world)
            logger.info("Player %d scores: %d - %d", scorer, *world.score.as_tuple())
            events.append(Event(EventKind.SCORE, player=scorer))

        # Win (reported every step once reached)
        winner = world.score.winner(cfg.winning_score)
        if winner is not None:
            events.append(Event(EventKind.WIN, player=winner))

        return events
