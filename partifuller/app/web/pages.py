"""
HTML routes.

``GET /`` renders the full page; ``POST /rsvp`` accepts the form and
answers with the refreshed guest list fragment, which the browser
swaps into ``#rsvp-result``.  Errors are plain text so the page script
can show them verbatim.

Missing form fields default to empty strings and are reported by the
validator like any other empty value.
"""

import logging

from fastapi import APIRouter, Depends, Form, status
from fastapi.responses import HTMLResponse, PlainTextResponse

from partifuller.app.api.deps import get_renderer, get_service
from partifuller.app.core.exceptions import (
    InvalidRsvp,
    RenderError,
    RsvpConflict,
    ServiceError,
    ServiceUnavailable,
)
from partifuller.app.schemas.rsvp import RsvpSubmission
from partifuller.app.services.renderer import ViewRenderer
from partifuller.app.services.rsvp_service import RsvpService

router = APIRouter()
logger = logging.getLogger(__name__)


def _server_error() -> PlainTextResponse:
    return PlainTextResponse(ServiceError.message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.get("/", response_class=HTMLResponse)
async def index(
    service: RsvpService = Depends(get_service),
    renderer: ViewRenderer = Depends(get_renderer),
):
    """Full page with the form and the current guest list."""
    try:
        rsvps = await service.list_rsvps()
        page = renderer.render_page(rsvps)
    except (ServiceUnavailable, RenderError):
        return _server_error()
    return HTMLResponse(page)


@router.post("/rsvp", response_class=HTMLResponse)
async def add_rsvp(
    name: str = Form(""),
    email: str = Form(""),
    attending: str = Form(""),
    service: RsvpService = Depends(get_service),
    renderer: ViewRenderer = Depends(get_renderer),
):
    """Store an RSVP and return the refreshed list fragment."""
    submission = RsvpSubmission(name=name, email=email, attending=attending)
    try:
        rsvps = await service.submit(submission)
    except (InvalidRsvp, RsvpConflict) as e:
        return PlainTextResponse(e.message, status_code=status.HTTP_400_BAD_REQUEST)
    except ServiceUnavailable:
        return _server_error()

    try:
        fragment = renderer.render_list(rsvps)
    except RenderError:
        return _server_error()
    return HTMLResponse(fragment)
