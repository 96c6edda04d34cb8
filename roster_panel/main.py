# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Roster Panel Service
====================
Admin panel backend for a small roster of support agents ("atendentes"):
availability toggling, add / edit / remove, local search and status filter,
and an AI staffing summary.

The roster lives in a hosted PostgREST table when credentials are saved;
otherwise an in-memory demo roster stands in. Every mutation is applied
optimistically and rolled back if the store rejects it. The roster is
silently re-fetched every REFRESH_INTERVAL_SECONDS.

Port: 8010
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from roster_panel.controllers.agent_controller import router as agent_router
from roster_panel.controllers.config_controller import router as config_router
from roster_panel.controllers.report_controller import router as report_router
from roster_panel.controllers.roster_controller import router as roster_router
from roster_panel.controllers.system_controller import router as system_router
from roster_panel.core.config import settings
from roster_panel.core.database import engine
from roster_panel.core.dependencies import get_config_repo, get_roster_controller
from roster_panel.core.logging import get_logger
from roster_panel.middleware import MetricsMiddleware, RequestIDMiddleware
from roster_panel.models.domain import StoreConfig
from roster_panel.schemas.roster import ErrorResponse

logger = get_logger(__name__)


def _startup_config():
    """Saved credentials win; environment variables seed the first run."""
    saved = get_config_repo().load_store_config()
    if saved is not None:
        return saved
    env_config = StoreConfig(endpoint=settings.STORE_URL, key=settings.STORE_KEY)
    return env_config if env_config.is_complete else None


@asynccontextmanager
async def lifespan(application: FastAPI):
    """Connect the store, load the roster, start the refresh loop."""
    get_config_repo().ensure_schema()
    controller = get_roster_controller()
    connected = await controller.reconfigure(_startup_config())
    controller.start()
    logger.info(
        "Roster panel started - mode=%s connected=%s agents=%d",
        controller.mode, connected, len(controller.agents),
    )
    yield
    await controller.stop()
    engine.dispose()
    logger.info("Roster panel shutting down")


app = FastAPI(
    title="Roster Panel",
    description="Support-agent availability panel with optimistic updates.",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
    responses={
        422: {"model": ErrorResponse, "description": "Validation error"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    req_id = getattr(request.state, "request_id", None)
    logger.exception("Unhandled exception", extra={"request_id": req_id})
    return JSONResponse(
        status_code=500,
        content={"error": "internal_server_error", "detail": str(exc), "request_id": req_id},
    )


app.include_router(system_router)
app.include_router(agent_router)
app.include_router(roster_router)
app.include_router(config_router)
app.include_router(report_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.SERVICE_PORT)
