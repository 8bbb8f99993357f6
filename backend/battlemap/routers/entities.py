"""Entity roster and visibility routes."""

from fastapi import APIRouter, HTTPException

from battlemap.dependencies import FrameSinkDep, TimelineControllerDep
from battlemap.models import Entity, TimelineFrame
from battlemap.services.clock import publish_frame

router = APIRouter()


@router.get("/", response_model=list[Entity])
async def list_entities(controller: TimelineControllerDep):
    return list(controller.roster)


@router.get("/{entity_id}", response_model=Entity)
async def get_entity(entity_id: str, controller: TimelineControllerDep):
    for entity in controller.roster:
        if entity.id == entity_id:
            return entity
    raise HTTPException(404, "Entity not found")


@router.post("/{entity_id}/visibility/toggle", response_model=TimelineFrame)
async def toggle_visibility(
    entity_id: str,
    controller: TimelineControllerDep,
    sink: FrameSinkDep,
):
    # Unknown ids are ignored by the controller; answer with the unchanged frame.
    controller.toggle_visibility(entity_id)
    return await publish_frame(controller, sink)
