"""Movement intents and the per-step input snapshot the simulation reads."""
from dataclasses import dataclass
from typing import FrozenSet, Iterable

UP_LEFT = "up-left"
DOWN_LEFT = "down-left"
UP_RIGHT = "up-right"
DOWN_RIGHT = "down-right"
TOGGLE_PAUSE = "toggle-pause"

INTENTS = (UP_LEFT, DOWN_LEFT, UP_RIGHT, DOWN_RIGHT, TOGGLE_PAUSE)


@dataclass(frozen=True)
class InputState:
    held: FrozenSet[str] = frozenset()

    @classmethod
    def from_intents(cls, intents: Iterable[str]) -> "InputState":
        held = frozenset(intents)
        unknown = held.difference(INTENTS)
        if unknown:
            raise ValueError(f"unknown intents: {sorted(unknown)}")
        return cls(held)

    def is_held(self, intent: str) -> bool:
        return intent in self.held


def resolve_paddle_speed(state: InputState, up: str, down: str, speed: float) -> float:
    # up wins when both are held
    if state.is_held(up):
        return -speed
    if state.is_held(down):
        return speed
    return 0.0
