# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Request / Response schemas - API contract definitions.
These are Pydantic models used ONLY at the controller (HTTP) boundary.
"""

from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator

from roster_panel.models.domain import Agent
from roster_panel.services.roster_view import whatsapp_link


# ── Agent Schemas ──

class AgentWriteRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, description="Agent name")
    phone_number: str = Field(..., min_length=1, max_length=64, description="Phone number")

    @field_validator("name", "phone_number")
    @classmethod
    def strip_and_require(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class AgentCreateRequest(AgentWriteRequest):
    pass


class AgentUpdateRequest(AgentWriteRequest):
    pass


class AgentResponse(BaseModel):
    id: Union[int, str]
    name: str
    phone_number: str
    available: bool
    whatsapp_url: str

    @classmethod
    def from_agent(cls, agent: Agent) -> "AgentResponse":
        return cls(
            id=agent.id,
            name=agent.name,
            phone_number=agent.phone_number,
            available=agent.available,
            whatsapp_url=whatsapp_link(agent.phone_number),
        )


class RosterResponse(BaseModel):
    agents: list[AgentResponse]
    total: int
    online: int
    mode: str
    status: str
    error: Optional[str] = None


class RosterStatusResponse(BaseModel):
    status: str
    error: Optional[str] = None
    mode: str


class MutationResponse(BaseModel):
    status: str
    agent: Optional[AgentResponse] = None


# ── Config Schemas ──

class StoreConfigRequest(BaseModel):
    endpoint: str = Field(default="", max_length=2048, description="Store base URL")
    key: str = Field(default="", max_length=4096, description="Store access key")


class StoreConfigResponse(BaseModel):
    mode: str
    connected: bool
    endpoint: Optional[str] = None


# ── Report Schemas ──

class ReportResponse(BaseModel):
    generating: bool
    report: Optional[str] = None


class ErrorResponse(BaseModel):
    error: str
    detail: Optional[str] = None
    request_id: Optional[str] = None
