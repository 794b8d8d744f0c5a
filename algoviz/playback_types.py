"""Playback data types (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from . import constants


class PlaybackState(Enum):
    IDLE = "idle"
    PLAYING = "playing"
    COMPLETED = "completed"


@dataclass(frozen=True)
class PlaybackConfig:
    """Groups playback timing configuration (all times in milliseconds)."""

    speed_ms: float = constants.DEFAULT_SPEED_MS
    auto_play: bool = False
    swap_animation_timeout_ms: float = constants.SWAP_ANIMATION_TIMEOUT_MS
    completion_restart_factor: float = constants.COMPLETION_RESTART_FACTOR


@dataclass(frozen=True)
class SwapAnimation:
    """Side-channel record of an in-flight exchange of two logical positions."""

    index1: int
    index2: int
    is_active: bool = True
