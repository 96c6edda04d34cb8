# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: AI staffing report.
Independent of roster state - a failed report never affects the roster.
"""

from fastapi import APIRouter, Depends

from roster_panel.core.dependencies import get_report_service, get_roster_controller
from roster_panel.schemas.roster import ReportResponse
from roster_panel.services.report_generator import ReportService
from roster_panel.services.roster_state import RosterStateController

router = APIRouter(prefix="/api/v1", tags=["Report"])


@router.post("/report", response_model=ReportResponse)
async def generate_report(
    controller: RosterStateController = Depends(get_roster_controller),
    service: ReportService = Depends(get_report_service),
):
    """Summarise the current roster snapshot."""
    report = await service.generate(controller.agents)
    return ReportResponse(generating=service.generating, report=report)


@router.get("/report", response_model=ReportResponse)
async def get_report(service: ReportService = Depends(get_report_service)):
    return ReportResponse(generating=service.generating, report=service.report)
