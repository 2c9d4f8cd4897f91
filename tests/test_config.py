import pytest

from neonpong.config import ConfigError, GameConfig


def test_defaults_are_valid():
    cfg = GameConfig()
    assert cfg.winning_score == 5
    assert cfg.step_ms == pytest.approx(16.6667, abs=1e-3)
    assert cfg.max_ball_speed is None


@pytest.mark.parametrize("kwargs", [
    {"step_ms": 0},
    {"winning_score": 0},
    {"paddle_height": -1},
    {"particle_decay": 0},
    {"star_count": -5},
    {"max_steps_per_frame": 0},
    {"paddle_speedup": 1.0},
    {"max_ball_speed": 4.0},
    {"ball_start_vel": (0, 0)},
    {"star_speed": (0.6, 0.1)},
])
def test_invalid_values_rejected(kwargs):
    with pytest.raises(ConfigError):
        GameConfig(**kwargs)


def test_config_error_is_value_error():
    assert issubclass(ConfigError, ValueError)


def test_uncapped_catch_up_allowed():
    assert GameConfig(max_steps_per_frame=None).max_steps_per_frame is None
