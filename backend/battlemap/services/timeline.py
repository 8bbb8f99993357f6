"""Timeline controller: playback state and per-frame entity positions."""

from typing import Sequence

from battlemap.config import Settings
from battlemap.logging import get_logger
from battlemap.models import (
    Entity,
    EntityFrame,
    LegendEntry,
    PlaybackLimits,
    PlayLabel,
    SpeedDirection,
    TimelineFrame,
    TimelineState,
)
from battlemap.services.interpolation import interpolate

logger = get_logger("services.timeline")


class TimelineController:
    """Owns the looping animation timeline for a fixed roster.

    All operations are total: speeds are clamped, time wraps, unknown ids are
    ignored. Nothing here awaits, so each call runs to completion before the
    event loop can hand control to another clock tick or request.
    """

    def __init__(self, roster: Sequence[Entity], limits: PlaybackLimits | None = None):
        self._limits = limits or PlaybackLimits()
        self._roster: tuple[Entity, ...] = tuple(roster)
        self._state = TimelineState(
            speed=self._clamp_speed(self.limits.default_speed),
            visibility={entity.id: True for entity in self._roster},
        )

    @classmethod
    def from_settings(cls, roster: Sequence[Entity], settings: Settings) -> "TimelineController":
        limits = PlaybackLimits(
            min_speed=settings.MIN_SPEED,
            max_speed=settings.MAX_SPEED,
            default_speed=settings.DEFAULT_SPEED,
        )
        return cls(roster, limits)

    @property
    def limits(self) -> PlaybackLimits:
        return self._limits

    @property
    def roster(self) -> tuple[Entity, ...]:
        return self._roster

    @property
    def time(self) -> float:
        return self._state.time

    @property
    def speed(self) -> float:
        return self._state.speed

    @property
    def playing(self) -> bool:
        return self._state.playing

    def is_visible(self, entity_id: str) -> bool:
        return self._state.visibility.get(entity_id, False)

    def _clamp_speed(self, speed: float) -> float:
        return min(max(speed, self.limits.min_speed), self.limits.max_speed)

    def tick(self) -> None:
        """Advance time by one speed step when playing; wraps at 1."""
        if not self._state.playing:
            return
        self._state.time = (self._state.time + self._state.speed) % 1.0

    def toggle_play(self) -> bool:
        """Flip between playing and paused and return the new flag."""
        self._state.playing = not self._state.playing
        logger.debug("Playback %s at t=%.4f", "resumed" if self._state.playing else "paused", self._state.time)
        return self._state.playing

    def set_speed(self, direction: SpeedDirection | str) -> None:
        """Double or halve the speed, clamped to the configured bounds."""
        direction = SpeedDirection(direction)
        if direction is SpeedDirection.FASTER:
            speed = min(self._state.speed * 2, self.limits.max_speed)
        else:
            speed = max(self._state.speed / 2, self.limits.min_speed)
        self._state.speed = speed
        logger.debug("Speed set to %s (%s)", speed, direction.value)

    def scrub_to(self, value: float) -> None:
        """
        Jump to ``value`` without validating it.

        Callers constrain the range (a bounded slider, the request model);
        the next tick wraps whatever was set back into [0, 1).
        """
        self._state.time = value

    def toggle_visibility(self, entity_id: str) -> None:
        visibility = self._state.visibility
        if entity_id not in visibility:
            logger.debug("Ignoring visibility toggle for unknown entity %s", entity_id)
            return
        visibility[entity_id] = not visibility[entity_id]

    def snapshot(self) -> TimelineFrame:
        """Positions of the visible entities at the current time."""
        state = self._state
        entities = [
            EntityFrame(
                entity_id=entity.id,
                display_name=entity.display_name,
                color=entity.color,
                point=interpolate(entity.path, state.time),
            )
            for entity in self._roster
            if state.visibility[entity.id]
        ]
        legend = [
            LegendEntry(
                entity_id=entity.id,
                display_name=entity.display_name,
                color=entity.color,
                is_visible=state.visibility[entity.id],
            )
            for entity in self._roster
        ]
        return TimelineFrame(
            time=state.time,
            speed=state.speed,
            playing=state.playing,
            play_label=PlayLabel.for_state(state.playing),
            entities=entities,
            legend=legend,
        )
