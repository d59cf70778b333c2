"""
FastAPI dependencies.

The database handle and renderer are created once in ``create_app`` and
kept on ``app.state``.  Handlers receive them through these functions,
which tests replace via ``app.dependency_overrides``.
"""

from fastapi import Depends, Request

from partifuller.app.core.db import Database
from partifuller.app.services.renderer import ViewRenderer
from partifuller.app.services.rsvp_service import RsvpService
from partifuller.app.services.rsvp_store import RsvpStore


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_store(database: Database = Depends(get_database)) -> RsvpStore:
    return RsvpStore(database)


def get_service(store: RsvpStore = Depends(get_store)) -> RsvpService:
    return RsvpService(store)


def get_renderer(request: Request) -> ViewRenderer:
    return request.app.state.renderer
