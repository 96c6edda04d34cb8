# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Store configuration endpoints.
Saving credentials persists them and reconnects immediately.
"""

from fastapi import APIRouter, Depends, HTTPException

from roster_panel.core.dependencies import get_config_repo, get_roster_controller, get_store_adapter
from roster_panel.core.logging import get_logger
from roster_panel.exceptions import ValidationError
from roster_panel.models.domain import StoreConfig
from roster_panel.repositories.config_repository import ConfigRepository
from roster_panel.schemas.roster import StoreConfigRequest, StoreConfigResponse
from roster_panel.services.roster_state import RosterStateController
from roster_panel.services.store_adapter import StoreAdapter

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1", tags=["Config"])


def _describe(adapter: StoreAdapter) -> StoreConfigResponse:
    # The access key is never echoed back.
    return StoreConfigResponse(
        mode=adapter.mode,
        connected=adapter.is_remote,
        endpoint=adapter.endpoint,
    )


@router.get("/config", response_model=StoreConfigResponse)
async def get_config(adapter: StoreAdapter = Depends(get_store_adapter)):
    return _describe(adapter)


@router.put("/config", response_model=StoreConfigResponse)
async def save_config(
    payload: StoreConfigRequest,
    controller: RosterStateController = Depends(get_roster_controller),
    adapter: StoreAdapter = Depends(get_store_adapter),
    config_repo: ConfigRepository = Depends(get_config_repo),
):
    """Persist store credentials, reconnect, and reload the roster."""
    config = StoreConfig(endpoint=payload.endpoint, key=payload.key)
    try:
        config_repo.save_store_config(config)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    connected = await controller.reconfigure(config)
    logger.info("Store reconfigured: connected=%s", connected)
    return _describe(adapter)


@router.delete("/config", response_model=StoreConfigResponse)
async def clear_config(
    controller: RosterStateController = Depends(get_roster_controller),
    adapter: StoreAdapter = Depends(get_store_adapter),
    config_repo: ConfigRepository = Depends(get_config_repo),
):
    """Forget the saved credentials and fall back to demo mode."""
    config_repo.clear_store_config()
    await controller.reconfigure(None)
    return _describe(adapter)
