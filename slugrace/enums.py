"""Enumerations shared across the race: scenes, one-frame events and collision axes."""

from __future__ import annotations

from enum import Enum, auto


class GameState(Enum):
    """The scene the game is currently showing."""

    IN_RACE = auto()
    WIN = auto()


class GameEvent(Enum):
    """Something that happened this frame; cleared once handled."""

    NONE = auto()
    RACE_WON = auto()
    UNLEASH_SLUGCATS = auto()


class AxisDirection(Enum):
    """The axis along which a movement step is being checked for collisions."""

    X = auto()
    Y = auto()