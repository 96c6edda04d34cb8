# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: In-memory demo roster.
Stands in for the remote store when no credentials are configured.
NO business rules here - pure CRUD plus simulated latency.
"""

import asyncio
import time
from typing import Optional

from roster_panel.core.config import settings
from roster_panel.models.domain import Agent, AgentId, same_id

SEED_AGENTS: tuple[Agent, ...] = (
    Agent(id=1, name="Samuel", phone_number="8199644682", available=False),
    Agent(id=2, name="Ana Costa", phone_number="81988887777", available=True),
    Agent(id=3, name="Carlos Silva", phone_number="81977776666", available=True),
    Agent(id=4, name="Beatriz Lima", phone_number="81955554444", available=False),
)

# Simulated round-trip per operation, in seconds (before scaling)
LATENCY: dict[str, float] = {
    "get_all": 0.8,
    "set_availability": 0.3,
    "create": 0.5,
    "update": 0.5,
    "remove": 0.5,
}


class MockAgentRepository:
    """Session-scoped in-memory agent storage."""

    def __init__(self, latency_scale: Optional[float] = None) -> None:
        self._agents: list[Agent] = list(SEED_AGENTS)
        self._latency_scale = (
            settings.MOCK_LATENCY_SCALE if latency_scale is None else latency_scale
        )

    async def _delay(self, operation: str) -> None:
        seconds = LATENCY[operation] * self._latency_scale
        if seconds > 0:
            await asyncio.sleep(seconds)

    def _index_of(self, agent_id: AgentId) -> int:
        for index, agent in enumerate(self._agents):
            if same_id(agent.id, agent_id):
                return index
        return -1

    # ── Read ──

    async def get_all(self) -> list[Agent]:
        await self._delay("get_all")
        return list(self._agents)

    # ── Write ──

    def draft(self, name: str, phone_number: str) -> Agent:
        """Build a new record with a synthesized, unused identifier."""
        new_id = int(time.time() * 1000)
        taken = {str(a.id) for a in self._agents}
        while str(new_id) in taken:
            new_id += 1
        return Agent(id=new_id, name=name, phone_number=phone_number, available=False)

    async def create(
        self, name: str, phone_number: str, draft: Optional[Agent] = None
    ) -> Agent:
        agent = draft or self.draft(name, phone_number)
        self._agents.append(agent)
        await self._delay("create")
        return agent

    async def set_availability(self, agent_id: AgentId, available: bool) -> None:
        index = self._index_of(agent_id)
        if index != -1:
            self._agents[index] = self._agents[index].model_copy(
                update={"available": available}
            )
        await self._delay("set_availability")

    async def update(self, agent_id: AgentId, name: str, phone_number: str) -> None:
        index = self._index_of(agent_id)
        if index != -1:
            self._agents[index] = self._agents[index].model_copy(
                update={"name": name, "phone_number": phone_number}
            )
        await self._delay("update")

    async def remove(self, agent_id: AgentId) -> None:
        index = self._index_of(agent_id)
        if index != -1:
            del self._agents[index]
        await self._delay("remove")

    # ── Bulk / internal ──

    def reset(self) -> None:
        """Restore the seed roster."""
        self._agents = list(SEED_AGENTS)
