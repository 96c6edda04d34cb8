# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Agent endpoints - list/filter, add, edit, toggle, delete, deep link.
Thin HTTP layer - delegates ALL logic to RosterStateController.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from roster_panel.core.dependencies import get_roster_controller
from roster_panel.exceptions import ValidationError
from roster_panel.schemas.roster import (
    AgentCreateRequest,
    AgentResponse,
    AgentUpdateRequest,
    MutationResponse,
    RosterResponse,
)
from roster_panel.services.roster_state import SAVE_ERROR_PREFIX, RosterStateController
from roster_panel.services.roster_view import STATUS_FILTERS, whatsapp_link

router = APIRouter(prefix="/api/v1", tags=["Agents"])


def _current(controller: RosterStateController, agent_id: str) -> Optional[AgentResponse]:
    # A background refresh may already have replaced the row.
    try:
        return AgentResponse.from_agent(controller.get(agent_id))
    except KeyError:
        return None


def _store_failure(controller: RosterStateController) -> HTTPException:
    return HTTPException(status_code=502, detail=controller.error)


@router.get("/agents", response_model=RosterResponse)
async def list_agents(
    search: Optional[str] = Query(default=None, description="Name or phone fragment"),
    status: str = Query(default="all", pattern="^(all|online|offline)$"),
    controller: RosterStateController = Depends(get_roster_controller),
):
    """Current roster, filtered locally. Counts cover the whole roster."""
    agents = controller.view(search=search, status=STATUS_FILTERS[status])
    return RosterResponse(
        agents=[AgentResponse.from_agent(a) for a in agents],
        total=len(controller.agents),
        online=controller.online_count,
        mode=controller.mode,
        status=controller.status.value,
        error=controller.error,
    )


@router.post("/agents", response_model=MutationResponse, status_code=201)
async def create_agent(
    payload: AgentCreateRequest,
    controller: RosterStateController = Depends(get_roster_controller),
):
    """Add a new agent (created offline)."""
    created = await controller.add(payload.name, payload.phone_number)
    if created is not None:
        return MutationResponse(status="created", agent=AgentResponse.from_agent(created))
    # The reload path clears the banner first, so only a failed insert carries this prefix.
    if controller.error and controller.error.startswith(SAVE_ERROR_PREFIX):
        raise _store_failure(controller)
    return MutationResponse(status="reloaded")


@router.put("/agents/{agent_id}", response_model=MutationResponse)
async def update_agent(
    agent_id: str,
    payload: AgentUpdateRequest,
    controller: RosterStateController = Depends(get_roster_controller),
):
    """Edit name and phone. Availability is left untouched."""
    try:
        ok = await controller.edit(agent_id, payload.name, payload.phone_number)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))
    if not ok:
        raise _store_failure(controller)
    return MutationResponse(status="updated", agent=_current(controller, agent_id))


@router.post("/agents/{agent_id}/toggle", response_model=MutationResponse)
async def toggle_agent(
    agent_id: str,
    controller: RosterStateController = Depends(get_roster_controller),
):
    """Flip an agent between online and offline."""
    try:
        ok = await controller.toggle(agent_id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))
    if not ok:
        raise _store_failure(controller)
    return MutationResponse(status="toggled", agent=_current(controller, agent_id))


@router.delete("/agents/{agent_id}", response_model=MutationResponse)
async def delete_agent(
    agent_id: str,
    controller: RosterStateController = Depends(get_roster_controller),
):
    """Remove an agent from the roster."""
    try:
        ok = await controller.delete(agent_id)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not ok:
        raise _store_failure(controller)
    return MutationResponse(status="deleted")


@router.get("/agents/{agent_id}/whatsapp")
async def get_whatsapp_link(
    agent_id: str,
    controller: RosterStateController = Depends(get_roster_controller),
):
    """Messaging deep link built from the agent's phone number."""
    try:
        agent = controller.get(agent_id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"id": agent.id, "url": whatsapp_link(agent.phone_number)}
