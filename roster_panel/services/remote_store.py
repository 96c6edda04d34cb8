# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Remote roster store - PostgREST (Supabase REST) over HTTP.
Maps the `atendimento` table (id, nome, numero, status) to Agent records.
"""

from typing import Any, Optional

import httpx

from roster_panel.core.config import settings
from roster_panel.core.logging import get_logger
from roster_panel.exceptions import BackendError, ValidationError, display_message
from roster_panel.models.domain import Agent, AgentId, StoreConfig

logger = get_logger(__name__)

RLS_DENIED_MESSAGE = "Could not add agent. Check your database permissions (RLS)."


def row_to_agent(row: dict[str, Any]) -> Agent:
    """Convert a table row into an Agent. Raises BackendError on malformed rows."""
    try:
        return Agent(
            id=row["id"],
            name=row.get("nome"),
            phone_number=row.get("numero") or "",
            available=bool(row.get("status")),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise BackendError(f"Malformed agent row: {row!r}", payload=row) from exc


def _error_payload(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError:
        return resp.text or f"HTTP {resp.status_code}"


class RemoteAgentStore:
    """Thin async client for the hosted agent table."""

    def __init__(
        self,
        config: StoreConfig,
        table: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        if not config.is_complete:
            raise ValueError("Store endpoint and key are both required")
        url = httpx.URL(config.endpoint)
        if url.scheme not in ("http", "https") or not url.host:
            raise ValueError(f"Invalid store endpoint '{config.endpoint}'")

        self.endpoint = config.endpoint
        self._table_url = f"{config.endpoint}/rest/v1/{table or settings.STORE_TABLE}"
        self._timeout = settings.STORE_TIMEOUT if timeout is None else timeout
        self._headers = {
            "apikey": config.key,
            "Authorization": f"Bearer {config.key}",
            "Content-Type": "application/json",
        }

    async def _request(
        self,
        method: str,
        params: Optional[dict[str, str]] = None,
        json: Any = None,
        prefer: Optional[str] = None,
    ) -> Any:
        headers = dict(self._headers)
        if prefer:
            headers["Prefer"] = prefer
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                resp = await client.request(
                    method, self._table_url, params=params, json=json, headers=headers
                )
        except httpx.HTTPError as exc:
            logger.warning("Store request failed: method=%s error=%s", method, exc)
            raise BackendError(display_message(exc)) from exc

        if resp.status_code >= 400:
            payload = _error_payload(resp)
            logger.warning(
                "Store returned %s: method=%s payload=%s",
                resp.status_code, method, str(payload)[:200],
            )
            raise BackendError(
                display_message(payload), payload=payload, status_code=resp.status_code
            )
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as exc:
            logger.warning(
                "Store returned a non-JSON body: method=%s status=%s", method, resp.status_code
            )
            raise BackendError(
                "Store returned a non-JSON response",
                payload=resp.text,
                status_code=resp.status_code,
            ) from exc

    @staticmethod
    def _match(agent_id: AgentId) -> dict[str, str]:
        return {"id": f"eq.{agent_id}"}

    # ── Read ──

    async def get_all(self) -> list[Agent]:
        rows = await self._request("GET", params={"select": "*", "order": "nome.asc"})
        return [row_to_agent(row) for row in rows or []]

    # ── Write ──

    async def set_availability(self, agent_id: AgentId, available: bool) -> None:
        rows = await self._request(
            "PATCH",
            params=self._match(agent_id),
            json={"status": available},
            prefer="return=representation",
        )
        if not rows:
            logger.warning("Status update matched no rows: id=%s", agent_id)

    async def create(self, name: str, phone_number: str) -> Optional[Agent]:
        """Insert and read back. None when the row comes back without an id."""
        rows = await self._request(
            "POST",
            json=[{"nome": name, "numero": phone_number, "status": False}],
            prefer="return=representation",
        )
        if not rows:
            raise ValidationError(RLS_DENIED_MESSAGE)
        row = rows[0] if isinstance(rows, list) else rows
        if row.get("id") is None:
            logger.warning("Insert returned a row without id: %s", row)
            return None
        return row_to_agent(row)

    async def update(self, agent_id: AgentId, name: str, phone_number: str) -> None:
        rows = await self._request(
            "PATCH",
            params=self._match(agent_id),
            json={"nome": name, "numero": phone_number},
            prefer="return=representation",
        )
        if not rows:
            logger.warning("Info update matched no rows: id=%s", agent_id)

    async def remove(self, agent_id: AgentId) -> None:
        await self._request("DELETE", params=self._match(agent_id), prefer="return=minimal")
