# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Roster projections - pure computation, no side effects.
"""

import re
from typing import Optional

from roster_panel.core.config import settings
from roster_panel.models.domain import Agent

STATUS_FILTERS: dict[str, Optional[bool]] = {
    "all": None,
    "online": True,
    "offline": False,
}

_NON_DIGITS = re.compile(r"\D")


def matches_search(agent: Agent, search: Optional[str]) -> bool:
    """Name is a case-insensitive substring match, phone a raw substring match."""
    if not search:
        return True
    return search.casefold() in agent.name.casefold() or search in agent.phone_number


def matches_status(agent: Agent, status: Optional[bool]) -> bool:
    return status is None or agent.available is status


def filter_agents(
    agents: list[Agent],
    search: Optional[str] = None,
    status: Optional[bool] = None,
) -> list[Agent]:
    """Both predicates must hold. Order of the input is preserved."""
    return [a for a in agents if matches_search(a, search) and matches_status(a, status)]


def count_online(agents: list[Agent]) -> int:
    return sum(1 for a in agents if a.available)


def whatsapp_link(phone_number: str, prefix: Optional[str] = None) -> str:
    """Messaging deep link: every non-digit stripped, no length check."""
    digits = _NON_DIGITS.sub("", phone_number or "")
    return f"{prefix if prefix is not None else settings.WHATSAPP_URL_PREFIX}{digits}"
