from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Request

router = APIRouter(tags=["system"])
logger = logging.getLogger(__name__)

VERSION = "0.1.0"

_start_time = time.monotonic()


@router.get("/health")
async def health_check(request: Request):
    """System health check. Unhealthy when no signing secret is configured."""
    secret_check = _check_secret(request)

    overall = "healthy"
    alerts = []
    if secret_check["status"] != "ok":
        overall = "unhealthy"
        alerts.append("app_secret_missing")

    return {
        "status": overall,
        "version": VERSION,
        "uptime_seconds": round(time.monotonic() - _start_time, 1),
        "checks": {
            "secret": secret_check,
        },
        "alerts": alerts,
    }


def _check_secret(request: Request) -> dict:
    settings = request.app.state.settings
    if not settings.secret_configured:
        logger.error("Health check: APP_SECRET is not configured")
        return {"status": "missing"}
    return {"status": "ok"}
