from __future__ import annotations

import time
from datetime import datetime, timezone

from fastapi import APIRouter

from branchdesk.core.config import settings

router = APIRouter(prefix="/health", tags=["health"])

_STARTED_AT = time.monotonic()


@router.get("", summary="Report process uptime and version")
async def health_check():
    return {
        "status": "OK",
        "uptime": time.monotonic() - _STARTED_AT,
        "timestamp": datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        "version": settings.APP_VERSION,
    }


@router.get("/ready")
async def readiness_probe():
    return {"ready": True}
