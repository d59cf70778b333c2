"""Health check endpoint for API v1."""

import logging
import sqlite3

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from partifuller.app.api.deps import get_database
from partifuller.app.core.db import Database

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health")
async def health_check(database: Database = Depends(get_database)) -> JSONResponse:
    """Report whether the database answers a trivial query."""
    try:
        with database.cursor() as cursor:
            cursor.execute("SELECT 1")
    except sqlite3.Error:
        logger.exception("Health check failed")
        return JSONResponse({"status": "unhealthy"}, status_code=503)
    return JSONResponse({"status": "ok"})
