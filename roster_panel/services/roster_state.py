# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Roster state controller.
Holds the visible roster, applies every mutation optimistically through the
store adapter, restores the pre-mutation snapshot on failure, and owns the
periodic background refresh.

Known inconsistency windows (accepted, not corrected):
    - a background refresh landing between an optimistic change and its
      confirmation overwrites the change until the next refresh;
    - a second mutation snapshots the first one's unconfirmed effect, so its
      rollback keeps that effect (last snapshot wins).
"""

import asyncio
from typing import Optional

from roster_panel.core.config import settings
from roster_panel.core.logging import get_logger
from roster_panel.exceptions import ValidationError, display_message
from roster_panel.metrics.prometheus import (
    ROSTER_AGENTS,
    ROSTER_AGENTS_ONLINE,
    ROSTER_MUTATIONS,
    ROSTER_REFRESHES,
    ROSTER_ROLLBACKS,
)
from roster_panel.models.domain import Agent, AgentId, FetchStatus, StoreConfig, same_id
from roster_panel.services.roster_view import count_online, filter_agents
from roster_panel.services.store_adapter import StoreAdapter

logger = get_logger(__name__)

TOGGLE_ERROR_PREFIX = "Failed to update status"
SAVE_ERROR_PREFIX = "Erro ao salvar usuário"
DELETE_ERROR_PREFIX = "Erro ao excluir usuário"


class RosterStateController:
    """Client-visible source of truth for the agent roster."""

    def __init__(
        self,
        adapter: StoreAdapter,
        refresh_interval: Optional[float] = None,
    ) -> None:
        interval = (
            settings.REFRESH_INTERVAL_SECONDS if refresh_interval is None else refresh_interval
        )
        if interval <= 0:
            raise ValueError(f"Refresh interval must be positive, got {interval}")
        self._adapter = adapter
        self._interval = interval
        self._agents: list[Agent] = []
        self._status = FetchStatus.IDLE
        self._error: Optional[str] = None
        self._refresh_task: Optional[asyncio.Task] = None
        self._inflight: set[asyncio.Task] = set()

    # ── State ──

    @property
    def agents(self) -> list[Agent]:
        return list(self._agents)

    @property
    def status(self) -> FetchStatus:
        return self._status

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def mode(self) -> str:
        return self._adapter.mode

    @property
    def online_count(self) -> int:
        return count_online(self._agents)

    @property
    def is_running(self) -> bool:
        return self._refresh_task is not None and not self._refresh_task.done()

    def view(self, search: Optional[str] = None, status: Optional[bool] = None) -> list[Agent]:
        """Filtered projection of the current roster. Never touches the store."""
        return filter_agents(self._agents, search=search, status=status)

    def get(self, agent_id: AgentId) -> Agent:
        """Raises KeyError if the agent is not on the roster."""
        agent = self._lookup(agent_id)
        if agent is None:
            raise KeyError(f"Agent '{agent_id}' not found")
        return agent

    def dismiss_error(self) -> FetchStatus:
        """Hide the error banner. Nothing is retried."""
        if self._status is FetchStatus.ERROR:
            self._status = FetchStatus.IDLE
        return self._status

    # ── Fetch ──

    async def fetch(self, background: bool = False) -> bool:
        """
        Load the full roster. Foreground fetches drive the visible status;
        background fetches replace the roster silently or are dropped.
        """
        kind = "background" if background else "foreground"
        if not background:
            self._status = FetchStatus.LOADING
            self._error = None
        try:
            agents = await self._adapter.list_agents()
        except Exception as exc:
            ROSTER_REFRESHES.labels(kind=kind, outcome="failure").inc()
            if background:
                logger.warning("Background refresh failed: %s", display_message(exc))
                return False
            logger.error("Roster fetch failed: %s", display_message(exc))
            self._error = display_message(exc)
            self._status = FetchStatus.ERROR
            return False

        self._replace(agents)
        ROSTER_REFRESHES.labels(kind=kind, outcome="success").inc()
        if not background:
            self._status = FetchStatus.SUCCESS
        logger.debug("Roster %s fetch: %d agents", kind, len(agents))
        return True

    async def reconfigure(self, config: Optional[StoreConfig]) -> bool:
        """Point the adapter at new credentials and reload immediately."""
        connected = self._adapter.configure(config)
        await self.fetch()
        return connected

    # ── Mutations ──

    async def toggle(self, agent_id: AgentId) -> bool:
        """Flip availability before the store confirms it."""
        current = self.get(agent_id)
        snapshot = self.agents
        new_value = not current.available
        self._patch(current.id, available=new_value)
        try:
            await self._adapter.set_availability(current.id, new_value)
        except Exception as exc:
            self._rollback("toggle", TOGGLE_ERROR_PREFIX, snapshot, exc)
            return False
        ROSTER_MUTATIONS.labels(operation="toggle", outcome="success").inc()
        logger.info("Agent status toggled: id=%s available=%s", current.id, new_value)
        return True

    async def add(self, name: str, phone_number: str) -> Optional[Agent]:
        """
        Create an agent. Remote mode shows the row only once the store has
        assigned its id; demo mode shows the locally drafted row right away.
        Returns None when the store failed or the roster was reloaded instead.
        """
        snapshot = self.agents
        draft = self._adapter.draft(name, phone_number)
        if draft is not None:
            self._replace([*self._agents, draft])
        try:
            created = await self._adapter.create(name, phone_number, draft=draft)
        except Exception as exc:
            self._rollback("create", SAVE_ERROR_PREFIX, snapshot if draft is not None else None, exc)
            return None

        ROSTER_MUTATIONS.labels(operation="create", outcome="success").inc()
        if created is None:
            logger.warning("Store returned no usable record - reloading roster")
            await self.fetch()
            return None
        if draft is None:
            self._replace([*self._agents, created])
        logger.info("Agent created: id=%s name=%s", created.id, created.name)
        return created

    async def edit(self, agent_id: AgentId, name: str, phone_number: str) -> bool:
        current = self.get(agent_id)
        snapshot = self.agents
        self._patch(current.id, name=name, phone_number=phone_number)
        try:
            await self._adapter.update(current.id, name, phone_number)
        except Exception as exc:
            self._rollback("update", SAVE_ERROR_PREFIX, snapshot, exc)
            return False
        ROSTER_MUTATIONS.labels(operation="update", outcome="success").inc()
        logger.info("Agent updated: id=%s", current.id)
        return True

    async def delete(self, agent_id: AgentId) -> bool:
        """Raises ValidationError for a missing id without touching state."""
        known = self._lookup(agent_id) if agent_id else None
        if known is not None:
            agent_id = known.id
        if not agent_id:
            raise ValidationError("ID is required for deletion")

        snapshot = self.agents
        self._replace([a for a in self._agents if not same_id(a.id, agent_id)])
        try:
            await self._adapter.remove(agent_id)
        except Exception as exc:
            self._rollback("delete", DELETE_ERROR_PREFIX, snapshot, exc)
            return False
        ROSTER_MUTATIONS.labels(operation="delete", outcome="success").inc()
        logger.info("Agent deleted: id=%s", agent_id)
        return True

    # ── Background refresh ──

    def start(self) -> None:
        """Start the refresh loop. Must be called from a running event loop."""
        if self.is_running:
            return
        self._refresh_task = asyncio.create_task(self._refresh_loop())
        logger.info("Background refresh started: interval=%ss", self._interval)

    async def stop(self) -> None:
        tasks = [t for t in (self._refresh_task, *self._inflight) if t is not None]
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        self._refresh_task = None
        self._inflight.clear()
        logger.info("Background refresh stopped")

    async def _refresh_loop(self) -> None:
        # Each tick gets its own task so a hung refresh never delays the next one.
        while True:
            await asyncio.sleep(self._interval)
            task = asyncio.create_task(self.fetch(background=True))
            self._inflight.add(task)
            task.add_done_callback(self._inflight.discard)

    # ── Internal ──

    def _lookup(self, agent_id: AgentId) -> Optional[Agent]:
        for agent in self._agents:
            if same_id(agent.id, agent_id):
                return agent
        return None

    def _replace(self, agents: list[Agent]) -> None:
        self._agents = agents
        ROSTER_AGENTS.set(len(agents))
        ROSTER_AGENTS_ONLINE.set(count_online(agents))

    def _patch(self, agent_id: AgentId, **fields) -> None:
        self._replace([
            a.model_copy(update=fields) if same_id(a.id, agent_id) else a
            for a in self._agents
        ])

    def _rollback(
        self,
        operation: str,
        prefix: str,
        snapshot: Optional[list[Agent]],
        exc: Exception,
    ) -> None:
        message = f"{prefix}: {display_message(exc)}"
        if snapshot is not None:
            self._replace(snapshot)
            ROSTER_ROLLBACKS.labels(operation=operation).inc()
        ROSTER_MUTATIONS.labels(operation=operation, outcome="failure").inc()
        self._error = message
        self._status = FetchStatus.ERROR
        logger.error("Roster %s failed, state restored: %s", operation, message)

    def clear(self) -> None:
        """Drop all local state (tests, re-seeding)."""
        self._replace([])
        self._status = FetchStatus.IDLE
        self._error = None
