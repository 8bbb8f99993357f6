"""Timeline playback routes.

Each mutator answers with the frame read right after the change, so the
play/pause label and the marker positions always come from one state.
"""

from fastapi import APIRouter

from battlemap.dependencies import FrameSinkDep, TimelineControllerDep
from battlemap.models import ScrubRequest, SpeedChange, TimelineFrame
from battlemap.services.clock import publish_frame

router = APIRouter()


@router.get("/frame", response_model=TimelineFrame)
async def get_frame(controller: TimelineControllerDep):
    return controller.snapshot()


@router.post("/play/toggle", response_model=TimelineFrame)
async def toggle_play(controller: TimelineControllerDep, sink: FrameSinkDep):
    controller.toggle_play()
    return await publish_frame(controller, sink)


@router.post("/speed", response_model=TimelineFrame)
async def change_speed(body: SpeedChange, controller: TimelineControllerDep, sink: FrameSinkDep):
    controller.set_speed(body.direction)
    return await publish_frame(controller, sink)


@router.post("/scrub", response_model=TimelineFrame)
async def scrub(body: ScrubRequest, controller: TimelineControllerDep, sink: FrameSinkDep):
    controller.scrub_to(body.value)
    return await publish_frame(controller, sink)


@router.post("/tick", response_model=TimelineFrame)
async def step(controller: TimelineControllerDep, sink: FrameSinkDep):
    controller.tick()
    return await publish_frame(controller, sink)
