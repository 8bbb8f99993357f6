"""
Battlemap models.

Usage:
    from battlemap.models import Entity, TimelineFrame, SpeedDirection
"""

# --- Enums ---
from battlemap.models.enums import SpeedDirection, PlayLabel

# --- Domain models ---
from battlemap.models.domain import (
    Entity, GeoPoint,
    PlaybackLimits, TimelineState,
    EntityFrame, LegendEntry, TimelineFrame,
    SpeedChange, ScrubRequest, MapView,
)

__all__ = [
    # Enums
    "SpeedDirection", "PlayLabel",
    # Domain
    "Entity", "GeoPoint",
    "PlaybackLimits", "TimelineState",
    "EntityFrame", "LegendEntry", "TimelineFrame",
    "SpeedChange", "ScrubRequest", "MapView",
]
