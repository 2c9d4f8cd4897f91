import pytest

from neonpong.controls import DOWN_LEFT, TOGGLE_PAUSE, UP_LEFT, InputState, resolve_paddle_speed


@pytest.mark.parametrize("held, expected", [
    ([], 0.0),
    ([UP_LEFT], -8.0),
    ([DOWN_LEFT], 8.0),
    ([UP_LEFT, DOWN_LEFT], -8.0),
    ([TOGGLE_PAUSE], 0.0),
])
def test_resolve_paddle_speed(held, expected):
    state = InputState.from_intents(held)
    assert resolve_paddle_speed(state, UP_LEFT, DOWN_LEFT, 8.0) == expected


def test_unknown_intent_rejected():
    with pytest.raises(ValueError, match="jump"):
        InputState.from_intents(["jump"])


def test_snapshot_is_immutable():
    state = InputState.from_intents([UP_LEFT])
    assert state.is_held(UP_LEFT)
    with pytest.raises(AttributeError):
        state.held = frozenset()
