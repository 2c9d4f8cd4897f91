from dataclasses import dataclass
from typing import Optional

# ----------------------------------
# Playfield
# ----------------------------------
MAX_FIELD_WIDTH = 800
MIN_FIELD_WIDTH = 200
FIELD_MARGIN = 20       # window width minus playfield width
FIELD_ASPECT = 0.6      # height / width
HUD_HEIGHT = 64
MAX_FPS = 144

# ----------------------------------
# Simulation
# ----------------------------------
STEP_MS = 1000 / 60
MAX_STEPS_PER_FRAME = 5
PAUSE_DEBOUNCE_MS = 200
WINNING_SCORE = 5

PADDLE_WIDTH = 10
PADDLE_HEIGHT = 100
PADDLE_INSET = 30       # paddle center distance from its side edge
PADDLE_SPEED = 8.0      # units per step

BALL_RADIUS = 10
BALL_START_VEL = (5.0, 5.0)
SERVE_SPEED_X = 5.0
SERVE_SPREAD_Y = 3.0    # serve vy is uniform in [-spread, spread)
PADDLE_SPEEDUP = 1.1
MAX_BALL_SPEED = None   # None keeps the per-rally ramp unbounded

# ----------------------------------
# Effects
# ----------------------------------
PARTICLE_SPEED = 5.0    # velocity components uniform in [-speed, speed)
PARTICLE_SIZE = (1.0, 4.0)
PARTICLE_DECAY = 0.02
WALL_BURST = 10
PADDLE_BURST = 20

STAR_COUNT = 200
STAR_SIZE = (1.0, 3.0)
STAR_SPEED = (0.1, 0.6)

# ----------------------------------
# Colors
# ----------------------------------
BG_COLOR = (0, 0, 0)
NEON = (0, 255, 255)
STAR_COLOR = (255, 255, 255)
WALL_SPARK = NEON
PADDLE_SPARK = NEON
BANNER_COLOR = (255, 230, 120)
HUD_TEXT = (200, 230, 255)
CENTER_DASH = (5, 15)
CENTER_ALPHA = 0.2
OVERLAY_ALPHA = 0.5
GLOW_SIZE = 6           # halo spread around paddles and ball
GLOW_ALPHA = 0.25
FONT_NAME = "consolas"


class ConfigError(ValueError):
    """Raised when a GameConfig holds values the simulation can't run with."""


@dataclass
class GameConfig:
    step_ms: float = STEP_MS
    max_steps_per_frame: Optional[int] = MAX_STEPS_PER_FRAME
    pause_debounce_ms: float = PAUSE_DEBOUNCE_MS
    winning_score: int = WINNING_SCORE

    paddle_width: float = PADDLE_WIDTH
    paddle_height: float = PADDLE_HEIGHT
    paddle_inset: float = PADDLE_INSET
    paddle_speed: float = PADDLE_SPEED

    ball_radius: float = BALL_RADIUS
    ball_start_vel: tuple = BALL_START_VEL
    serve_speed_x: float = SERVE_SPEED_X
    serve_spread_y: float = SERVE_SPREAD_Y
    paddle_speedup: float = PADDLE_SPEEDUP
    max_ball_speed: Optional[float] = MAX_BALL_SPEED

    particle_speed: float = PARTICLE_SPEED
    particle_size: tuple = PARTICLE_SIZE
    particle_decay: float = PARTICLE_DECAY
    wall_burst: int = WALL_BURST
    paddle_burst: int = PADDLE_BURST

    star_count: int = STAR_COUNT
    star_size: tuple = STAR_SIZE
    star_speed: tuple = STAR_SPEED

    def __post_init__(self):
        positive = {
            "step_ms": self.step_ms,
            "winning_score": self.winning_score,
            "paddle_width": self.paddle_width,
            "paddle_height": self.paddle_height,
            "paddle_speed": self.paddle_speed,
            "ball_radius": self.ball_radius,
            "serve_speed_x": self.serve_speed_x,
            "particle_decay": self.particle_decay,
        }
        for name, value in positive.items():
            if value <= 0:
                raise ConfigError(f"{name} must be positive, got {value!r}")
        for name in ("pause_debounce_ms", "serve_spread_y", "particle_speed",
                     "wall_burst", "paddle_burst", "star_count"):
            if getattr(self, name) < 0:
                raise ConfigError(f"{name} must not be negative, got {getattr(self, name)!r}")
        if self.max_steps_per_frame is not None and self.max_steps_per_frame < 1:
            raise ConfigError("max_steps_per_frame must be at least 1 (or None for uncapped)")
        if self.paddle_speedup <= 1.0:
            raise ConfigError(f"paddle_speedup must be greater than 1, got {self.paddle_speedup!r}")
        if self.max_ball_speed is not None and self.max_ball_speed < self.serve_speed_x:
            raise ConfigError("max_ball_speed can't be below serve_speed_x")
        if not any(self.ball_start_vel):
            raise ConfigError("ball_start_vel can't be (0, 0)")
        for name in ("particle_size", "star_size", "star_speed"):
            lo, hi = getattr(self, name)
            if lo <= 0 or hi < lo:
                raise ConfigError(f"{name} must be a positive (low, high) range, got {(lo, hi)!r}")
