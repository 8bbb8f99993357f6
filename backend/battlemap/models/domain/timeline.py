"""Timeline domain models."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from battlemap.models.domain.entity import GeoPoint
from battlemap.models.enums import PlayLabel, SpeedDirection


class PlaybackLimits(BaseModel):
    """Speed clamp bounds and the starting speed."""

    model_config = ConfigDict(frozen=True)

    min_speed: float = Field(default=0.0025, gt=0)
    max_speed: float = Field(default=0.08, gt=0)
    default_speed: float = Field(default=0.01, gt=0)

    @model_validator(mode="after")
    def check_ordering(self):
        if not self.min_speed <= self.default_speed <= self.max_speed:
            raise ValueError(
                "speed limits must satisfy min_speed <= default_speed <= max_speed, "
                f"got {self.min_speed} / {self.default_speed} / {self.max_speed}"
            )
        return self


class TimelineState(BaseModel):
    """Mutable playback state, owned by a single TimelineController."""

    time: float = 0.0
    speed: float
    playing: bool = True
    visibility: dict[str, bool] = Field(default_factory=dict)


class EntityFrame(BaseModel):
    """Where one entity is drawn in the current frame."""

    entity_id: str
    display_name: str
    color: str
    point: GeoPoint
    is_visible: bool = True


class LegendEntry(BaseModel):
    """One legend row: an entity and its visibility checkbox."""

    entity_id: str
    display_name: str
    color: str
    is_visible: bool


class TimelineFrame(BaseModel):
    """Point-in-time read of the timeline, used to draw one frame.

    ``entities`` lists only visible entities; ``legend`` lists all of them.
    """

    time: float
    speed: float
    playing: bool
    play_label: PlayLabel
    entities: list[EntityFrame] = Field(default_factory=list)
    legend: list[LegendEntry] = Field(default_factory=list)


class SpeedChange(BaseModel):
    """Payload for the faster/slower buttons."""

    direction: SpeedDirection


class ScrubRequest(BaseModel):
    """Payload for the timeline slider."""

    value: float = Field(
        ge=0.0,
        le=1.0,
        description="Normalized time to jump to.",
    )


class MapView(BaseModel):
    """Initial view and tile layer for the map renderer."""

    center: tuple[float, float]
    zoom: int
    tile_url: str
    attribution: str
