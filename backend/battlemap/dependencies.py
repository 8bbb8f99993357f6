"""
Dependency injection for FastAPI routes.

Provides typed service dependencies that enable IDE navigation (Ctrl+Click).
"""

from typing import Annotated
from fastapi import Request, Depends

from battlemap.config import Settings
from battlemap.services.clock import FrameSink
from battlemap.services.timeline import TimelineController


def get_timeline_controller(request: Request) -> TimelineController:
    return request.app.state.timeline_controller


def get_frame_sink(request: Request) -> FrameSink:
    return request.app.state.frame_sink


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


TimelineControllerDep = Annotated[TimelineController, Depends(get_timeline_controller)]
FrameSinkDep = Annotated[FrameSink, Depends(get_frame_sink)]
SettingsDep = Annotated[Settings, Depends(get_app_settings)]
