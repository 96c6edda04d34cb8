# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false

"""
Tests for roster projections: search, status filter, counts, deep links.
"""

import pytest

from roster_panel.models.domain import Agent
from roster_panel.repositories.mock_agent_repository import SEED_AGENTS
from roster_panel.services.roster_view import (
    STATUS_FILTERS,
    count_online,
    filter_agents,
    matches_search,
    whatsapp_link,
)

AGENTS = list(SEED_AGENTS)


def _names(agents):
    return [a.name for a in agents]


class TestSearch:
    def test_empty_search_matches_all(self):
        assert filter_agents(AGENTS, search="") == AGENTS
        assert filter_agents(AGENTS, search=None) == AGENTS

    def test_name_match_is_case_insensitive(self):
        assert _names(filter_agents(AGENTS, search="ANA")) == ["Ana Costa"]

    def test_name_substring(self):
        assert _names(filter_agents(AGENTS, search="os")) == ["Ana Costa", "Carlos Silva"]

    def test_phone_substring(self):
        assert _names(filter_agents(AGENTS, search="9777")) == ["Carlos Silva"]

    def test_phone_match_is_raw(self):
        # Formatting characters in the query are not stripped.
        assert filter_agents(AGENTS, search="(81)") == []

    def test_no_match(self):
        assert filter_agents(AGENTS, search="zzz") == []

    def test_matches_search_on_either_field(self):
        agent = Agent(id=9, name="Diego", phone_number="555")
        assert matches_search(agent, "dieg")
        assert matches_search(agent, "55")
        assert not matches_search(agent, "x")


class TestStatusFilter:
    @pytest.mark.parametrize(
        "key,expected",
        [
            ("all", ["Samuel", "Ana Costa", "Carlos Silva", "Beatriz Lima"]),
            ("online", ["Ana Costa", "Carlos Silva"]),
            ("offline", ["Samuel", "Beatriz Lima"]),
        ],
    )
    def test_status_filters(self, key, expected):
        assert _names(filter_agents(AGENTS, status=STATUS_FILTERS[key])) == expected

    def test_search_and_status_both_apply(self):
        assert _names(filter_agents(AGENTS, search="a", status=False)) == ["Samuel", "Beatriz Lima"]
        assert _names(filter_agents(AGENTS, search="samuel", status=True)) == []

    def test_filter_does_not_mutate_input(self):
        source = list(AGENTS)
        filter_agents(source, search="ana", status=True)
        assert source == AGENTS


class TestCounts:
    def test_count_online(self):
        assert count_online(AGENTS) == 2
        assert count_online([]) == 0


class TestWhatsappLink:
    def test_strips_non_digits(self):
        assert whatsapp_link("(81) 99964-4682") == "https://wa.me/81999644682"

    def test_plain_digits(self):
        assert whatsapp_link("8199644682") == "https://wa.me/8199644682"

    def test_empty_phone(self):
        assert whatsapp_link("") == "https://wa.me/"

    def test_custom_prefix(self):
        assert whatsapp_link("+55 81 1234", prefix="https://api.whatsapp.com/send?phone=") == (
            "https://api.whatsapp.com/send?phone=55811234"
        )
