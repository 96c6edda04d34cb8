# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Store adapter - one CRUD contract over the remote or demo backend.
The active backend is decided by the last call to configure().
"""

from typing import Optional

import httpx

from roster_panel.core.logging import get_logger
from roster_panel.exceptions import ValidationError
from roster_panel.models.domain import Agent, AgentId, StoreConfig
from roster_panel.repositories.mock_agent_repository import MockAgentRepository
from roster_panel.services.remote_store import RemoteAgentStore

logger = get_logger(__name__)


def sort_by_name(agents: list[Agent]) -> list[Agent]:
    """Case-insensitive ascending name order, stable for ties."""
    return sorted(agents, key=lambda a: a.name.casefold())


class StoreAdapter:
    """Routes roster persistence to the remote store or the demo repository."""

    def __init__(self, mock_repo: MockAgentRepository) -> None:
        self._mock = mock_repo
        self._remote: Optional[RemoteAgentStore] = None

    @property
    def is_remote(self) -> bool:
        return self._remote is not None

    @property
    def mode(self) -> str:
        return "remote" if self.is_remote else "demo"

    @property
    def endpoint(self) -> Optional[str]:
        return self._remote.endpoint if self._remote else None

    def configure(self, config: Optional[StoreConfig]) -> bool:
        """
        (Re)build the remote client. Returns True when a client could be
        constructed; credentials are not verified. Any failure falls back
        to demo mode.
        """
        if config is None or not config.is_complete:
            self._remote = None
            logger.info("Store not configured - running in demo mode")
            return False
        try:
            self._remote = RemoteAgentStore(config)
        except (ValueError, httpx.InvalidURL) as exc:
            self._remote = None
            logger.error("Failed to init remote store: %s", exc)
            return False
        logger.info("Remote store configured: endpoint=%s", config.endpoint)
        return True

    # ── Read ──

    async def list_agents(self) -> list[Agent]:
        backend = self._remote or self._mock
        return sort_by_name(await backend.get_all())

    # ── Write ──

    def draft(self, name: str, phone_number: str) -> Optional[Agent]:
        """Locally addressable new record in demo mode; None when the backend assigns ids."""
        if self.is_remote:
            return None
        return self._mock.draft(name, phone_number)

    async def create(
        self, name: str, phone_number: str, draft: Optional[Agent] = None
    ) -> Optional[Agent]:
        if self._remote is not None:
            return await self._remote.create(name, phone_number)
        return await self._mock.create(name, phone_number, draft=draft)

    async def set_availability(self, agent_id: AgentId, available: bool) -> None:
        backend = self._remote or self._mock
        await backend.set_availability(agent_id, available)

    async def update(self, agent_id: AgentId, name: str, phone_number: str) -> None:
        backend = self._remote or self._mock
        await backend.update(agent_id, name, phone_number)

    async def remove(self, agent_id: AgentId) -> None:
        # Loose truthiness check: 0 counts as missing too.
        if not agent_id:
            raise ValidationError("ID is required for deletion")
        backend = self._remote or self._mock
        await backend.remove(agent_id)
