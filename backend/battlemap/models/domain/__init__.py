"""Domain models — entities on the map and the timeline that moves them."""

from battlemap.models.domain.entity import Entity, GeoPoint
from battlemap.models.domain.timeline import (
    PlaybackLimits,
    TimelineState,
    EntityFrame,
    LegendEntry,
    TimelineFrame,
    SpeedChange,
    ScrubRequest,
    MapView,
)

__all__ = [
    "Entity", "GeoPoint",
    "PlaybackLimits", "TimelineState",
    "EntityFrame", "LegendEntry", "TimelineFrame",
    "SpeedChange", "ScrubRequest", "MapView",
]
