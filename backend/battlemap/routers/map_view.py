"""Map view routes."""

from fastapi import APIRouter

from battlemap.dependencies import SettingsDep
from battlemap.models import MapView

router = APIRouter()


@router.get("/view", response_model=MapView)
async def get_map_view(settings: SettingsDep):
    return MapView(
        center=(settings.MAP_CENTER_LAT, settings.MAP_CENTER_LON),
        zoom=settings.MAP_ZOOM,
        tile_url=settings.TILE_URL,
        attribution=settings.TILE_ATTRIBUTION,
    )
