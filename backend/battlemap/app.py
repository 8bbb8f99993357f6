"""
Battlemap - FastAPI Backend
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import socketio

from battlemap.config import Settings, settings
from battlemap.logging import setup_logging, get_logger
from battlemap.models import TimelineFrame
from battlemap.routers import entities, map_view, timeline
from battlemap.services.clock import PlaybackClock
from battlemap.services.roster import load_roster
from battlemap.services.timeline import TimelineController

logger = get_logger('main')

# Socket.IO server pushing frames to every connected map view
sio = socketio.AsyncServer(
    async_mode='asgi',
    cors_allowed_origins='*'
)


async def broadcast_frame(frame: TimelineFrame) -> None:
    await sio.emit('frame', frame.model_dump(mode='json'))


@asynccontextmanager
async def lifespan(app: FastAPI):
    app_settings: Settings = app.state.settings
    setup_logging(app_settings.DEBUG)
    logger.info("Starting Battlemap API")

    roster = load_roster(app_settings.ROSTER_PATH)
    logger.info(f"Roster loaded: {len(roster)} entities")

    controller = TimelineController.from_settings(roster, app_settings)
    app.state.timeline_controller = controller
    app.state.frame_sink = broadcast_frame
    app.state.clock = PlaybackClock(
        controller,
        broadcast_frame,
        interval_seconds=app_settings.tick_interval_seconds,
    )
    if app_settings.CLOCK_AUTOSTART:
        app.state.clock.start()

    yield

    await app.state.clock.stop()
    logger.info("Shutting down application")


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    app = FastAPI(
        title="Battlemap API",
        description="Animated historical map: entities moving along paths on a looping timeline",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.settings = app_settings or settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app.state.settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(timeline.router, prefix="/api/timeline", tags=["Timeline"])
    app.include_router(entities.router, prefix="/api/entities", tags=["Entities"])
    app.include_router(map_view.router, prefix="/api/map", tags=["Map"])

    @app.get("/health")
    async def health_check():
        clock = getattr(app.state, 'clock', None)
        return {
            "status": "healthy",
            "service": "battlemap",
            "clock_running": clock.is_running if clock else False,
        }

    @app.get("/")
    async def root():
        return {
            "name": "Battlemap API",
            "version": "1.0.0",
            "docs": "/docs",
            "health": "/health"
        }

    return app


def create_asgi_app(app_settings: Optional[Settings] = None) -> socketio.ASGIApp:
    """Wrap the API in the Socket.IO server that carries frames to the map."""
    app = create_app(app_settings)

    @sio.event
    async def connect(sid, environ):
        controller = getattr(app.state, 'timeline_controller', None)
        logger.debug(f"Client {sid[:8]}... connected")
        if controller is not None:
            await sio.emit('frame', controller.snapshot().model_dump(mode='json'), to=sid)

    @sio.event
    async def disconnect(sid):
        logger.debug(f"Client {sid[:8]}... disconnected")

    return socketio.ASGIApp(sio, other_asgi_app=app)
