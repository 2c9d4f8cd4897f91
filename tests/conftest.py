import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from neonpong.config import GameConfig


class RecordingSurface:
    """Stands in for the drawing target and keeps every call."""

    def __init__(self, width=800, height=480):
        self.width = width
        self.height = height
        self.calls = []

    def fill_rect(self, rect, color, alpha=1.0):
        self.calls.append(("fill_rect", rect, color, alpha))

    def stroke_line(self, start, end, color, width=1, dash=None, alpha=1.0):
        self.calls.append(("stroke_line", start, end, color, dash, alpha))

    def fill_circle(self, center, radius, color, alpha=1.0):
        self.calls.append(("fill_circle", center, radius, color, alpha))

    def draw_text(self, text, pos, color, size=24, align="center"):
        self.calls.append(("draw_text", text, pos, color, size, align))

    def named(self, name):
        return [c for c in self.calls if c[0] == name]

    def texts(self):
        return [c[1] for c in self.named("draw_text")]


class RecordingPresenter:
    def __init__(self):
        self.scores = []
        self.wins = 0

    def score_updated(self, player1, player2):
        self.scores.append((player1, player2))

    def game_won(self):
        self.wins += 1


class RecordingAudio:
    def __init__(self):
        self.cues = []

    def trigger(self, pitch, duration):
        self.cues.append((pitch, duration))


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def presenter():
    return RecordingPresenter()


@pytest.fixture
def audio():
    return RecordingAudio()
