# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Roster lifecycle endpoints - manual refresh, status banner.
"""

from fastapi import APIRouter, Depends

from roster_panel.core.dependencies import get_roster_controller
from roster_panel.schemas.roster import RosterStatusResponse
from roster_panel.services.roster_state import RosterStateController

router = APIRouter(prefix="/api/v1/roster", tags=["Roster"])


def _status(controller: RosterStateController) -> RosterStatusResponse:
    return RosterStatusResponse(
        status=controller.status.value,
        error=controller.error,
        mode=controller.mode,
    )


@router.get("/status", response_model=RosterStatusResponse)
async def get_status(controller: RosterStateController = Depends(get_roster_controller)):
    return _status(controller)


@router.post("/refresh", response_model=RosterStatusResponse)
async def refresh_roster(controller: RosterStateController = Depends(get_roster_controller)):
    """Foreground reload; failures show up in the status, not as HTTP errors."""
    await controller.fetch()
    return _status(controller)


@router.post("/status/dismiss", response_model=RosterStatusResponse)
async def dismiss_error(controller: RosterStateController = Depends(get_roster_controller)):
    """Close the error banner without retrying."""
    controller.dismiss_error()
    return _status(controller)
