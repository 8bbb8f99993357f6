"""Entity domain model."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

GeoPoint = tuple[float, float]


class Entity(BaseModel):
    """A named unit that follows a fixed path across the map.

    The path is an ordered sequence of ``(lat, lon)`` points and is never
    mutated after construction. A path needs at least one point; empty paths
    are rejected here so interpolation never sees one.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    display_name: str
    color: str = Field(description='CSS color for the marker and path, e.g. "#0072B2".')
    path: tuple[GeoPoint, ...]

    @field_validator("path")
    @classmethod
    def path_not_empty(cls, value: tuple[GeoPoint, ...]) -> tuple[GeoPoint, ...]:
        if not value:
            raise ValueError("path must contain at least one point")
        return value
