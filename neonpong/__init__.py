"""Neon Pong: a two-paddle arcade game on a fixed-timestep simulation."""
from .config import ConfigError, GameConfig
from .controls import InputState
from .game import GameSession

__all__ = ["ConfigError", "GameConfig", "GameSession", "InputState"]
__version__ = "1.0.0"
