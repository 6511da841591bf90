"""
Service information endpoints for API v1.

``/config.json`` tells browser and script clients where the API lives
(they read it once before making any other call).  ``/health`` reports
whether the database can be reached.
"""

import logging
import sqlite3
from typing import Any, Dict

from fastapi import APIRouter

from artfolio_api.app.core.config import settings
from artfolio_api.app.core.db import get_connection


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/config.json", response_model=Dict[str, Any])
async def client_config() -> Dict[str, Any]:
    return {"SERVER_URL": settings.server_url, "SERVER_PORT": settings.server_port}


@router.get("/health", response_model=Dict[str, Any])
async def health() -> Dict[str, Any]:
    """Return service status and the tables present in the database."""
    status = {"backend": "running", "database": "unavailable", "tables": []}
    try:
        conn = get_connection()
        try:
            rows = conn.execute(
                "SELECT name FROM sqlite_master WHERE type = 'table' ORDER BY name"
            ).fetchall()
        finally:
            conn.close()
    except sqlite3.Error as e:
        logger.error("Health check could not reach the database: %s", e)
        status["database"] = f"error: {str(e)[:80]}"
        return status
    status["database"] = "connected"
    status["tables"] = [row["name"] for row in rows]
    return status
