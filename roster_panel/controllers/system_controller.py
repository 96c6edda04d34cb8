# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: System endpoints - health, readiness, metrics.
Pure HTTP layer - no business logic.
"""

from datetime import datetime, timezone

from fastapi import APIRouter
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from roster_panel.core.config import settings
from roster_panel.core.dependencies import get_roster_controller

router = APIRouter(tags=["System"])


@router.get("/health")
async def health_check():
    """Liveness probe for Docker and orchestration."""
    controller = get_roster_controller()
    return {
        "status": "ok",
        "service": settings.SERVICE_NAME,
        "version": settings.SERVICE_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "mode": controller.mode,
        "agents_count": len(controller.agents),
    }


@router.get("/health/ready")
async def readiness_check():
    """Readiness probe - the roster has been loaded at least once."""
    controller = get_roster_controller()
    return {
        "status": "ready",
        "service": settings.SERVICE_NAME,
        "roster_loaded": len(controller.agents) > 0,
        "refresh_running": controller.is_running,
    }


@router.get("/metrics")
def prometheus_metrics():
    """Expose Prometheus metrics in OpenMetrics format."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
