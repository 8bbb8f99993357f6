"""
Enum definitions for the Battlemap API.
"""
from enum import Enum


class SpeedDirection(str, Enum):
    """Which way a speed change goes."""
    FASTER = "faster"
    SLOWER = "slower"


class PlayLabel(str, Enum):
    """Text shown on the play/pause button, derived from the playing flag."""
    PLAY = "Play"
    PAUSE = "Pause"

    @classmethod
    def for_state(cls, playing: bool) -> "PlayLabel":
        return cls.PAUSE if playing else cls.PLAY
