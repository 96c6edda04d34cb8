# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models - pure data structures, NO FastAPI dependency.
"""

from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

AgentId = Union[int, str]


def same_id(left: AgentId, right: AgentId) -> bool:
    """Identifiers arrive as ints from the store and as strings from URLs."""
    return str(left) == str(right)


class Agent(BaseModel):
    """A single support agent ("atendente") on the roster."""

    model_config = ConfigDict(frozen=True)

    id: AgentId = Field(..., description="Backend-assigned identifier")
    name: str = Field(..., min_length=1, description="Display name")
    phone_number: str = Field(default="", description="Free-form phone number")
    available: bool = Field(default=False, description="Online / offline flag")


class StoreConfig(BaseModel):
    """Connection parameters for the remote roster store."""

    endpoint: str = Field(default="", description="Store base URL")
    key: str = Field(default="", description="Store access key")

    @field_validator("endpoint")
    @classmethod
    def normalise_endpoint(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            return ""
        if not v.startswith(("http://", "https://")):
            v = f"https://{v}"
        return v.rstrip("/")

    @field_validator("key")
    @classmethod
    def normalise_key(cls, v: str) -> str:
        return (v or "").strip()

    @property
    def is_complete(self) -> bool:
        return bool(self.endpoint and self.key)


class FetchStatus(str, Enum):
    """Visible lifecycle of the foreground roster fetch."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"
