# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false

"""
Tests for the staffing report: prompt building, Gemini client, fallback.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from roster_panel.exceptions import ReportError
from roster_panel.models.domain import Agent
from roster_panel.services.report_generator import (
    EMPTY_REPORT_TEXT,
    REPORT_FALLBACK_TEXT,
    GeminiReportGenerator,
    ReportService,
    build_team_prompt,
    extract_text,
)

AGENTS = [
    Agent(id=1, name="Samuel", available=False),
    Agent(id=2, name="Ana Costa", available=True),
    Agent(id=3, name="Carlos Silva", available=True),
]


def _gemini_client(payload=None, side_effect=None, status_code=200):
    resp = MagicMock()
    resp.json.return_value = payload
    if status_code >= 400:
        request = httpx.Request("POST", "https://example.test")
        resp.raise_for_status.side_effect = httpx.HTTPStatusError(
            "error", request=request, response=httpx.Response(status_code, request=request)
        )
    client = AsyncMock()
    client.post.return_value = resp
    if side_effect is not None:
        client.post.side_effect = side_effect
    client.__aenter__ = AsyncMock(return_value=client)
    client.__aexit__ = AsyncMock(return_value=False)
    return client


def _candidate(*texts):
    return {"candidates": [{"content": {"parts": [{"text": t} for t in texts]}}]}


class TestPrompt:
    def test_prompt_lists_active_and_inactive(self):
        prompt = build_team_prompt(AGENTS)
        assert "Total Agents: 3" in prompt
        assert "Active Agents (2): Ana Costa, Carlos Silva" in prompt
        assert "Inactive Agents (1): Samuel" in prompt
        assert "below 50%" in prompt

    def test_prompt_for_empty_roster(self):
        prompt = build_team_prompt([])
        assert "Total Agents: 0" in prompt
        assert "Active Agents (0): None" in prompt


class TestExtractText:
    def test_joins_parts(self):
        assert extract_text(_candidate("Team is ", "healthy.")) == "Team is healthy."

    @pytest.mark.parametrize("payload", [{}, {"candidates": []}, {"candidates": [{}]}])
    def test_missing_text(self, payload):
        assert extract_text(payload) == ""


class TestGeminiReportGenerator:
    @pytest.mark.asyncio
    async def test_missing_key(self):
        with pytest.raises(ReportError, match="API Key not found"):
            await GeminiReportGenerator(api_key="").generate(AGENTS)

    @pytest.mark.asyncio
    async def test_generate_success(self):
        client = _gemini_client(_candidate("Staffing is healthy."))
        generator = GeminiReportGenerator(api_key="k", model="m", base_url="https://gemini.test/v1beta/")
        with patch("roster_panel.services.report_generator.httpx.AsyncClient", return_value=client):
            text = await generator.generate(AGENTS)
        assert text == "Staffing is healthy."
        url = client.post.call_args.args[0]
        assert url == "https://gemini.test/v1beta/models/m:generateContent"
        assert client.post.call_args.kwargs["headers"] == {"x-goog-api-key": "k"}
        body = client.post.call_args.kwargs["json"]
        assert "Total Agents: 3" in body["contents"][0]["parts"][0]["text"]

    @pytest.mark.asyncio
    async def test_empty_answer(self):
        client = _gemini_client({"candidates": []})
        with patch("roster_panel.services.report_generator.httpx.AsyncClient", return_value=client):
            assert await GeminiReportGenerator(api_key="k").generate(AGENTS) == EMPTY_REPORT_TEXT

    @pytest.mark.asyncio
    async def test_http_error(self):
        client = _gemini_client({}, status_code=403)
        with patch("roster_panel.services.report_generator.httpx.AsyncClient", return_value=client):
            with pytest.raises(ReportError):
                await GeminiReportGenerator(api_key="k").generate(AGENTS)

    @pytest.mark.asyncio
    async def test_network_error(self):
        client = _gemini_client(side_effect=httpx.ConnectError("unreachable"))
        with patch("roster_panel.services.report_generator.httpx.AsyncClient", return_value=client):
            with pytest.raises(ReportError):
                await GeminiReportGenerator(api_key="k").generate(AGENTS)


class TestReportService:
    @pytest.mark.asyncio
    async def test_success_is_stored(self):
        generator = MagicMock()
        generator.generate = AsyncMock(return_value="All good.")
        service = ReportService(generator=generator)
        assert await service.generate(AGENTS) == "All good."
        assert service.report == "All good."
        assert service.generating is False
        generator.generate.assert_awaited_once_with(AGENTS)

    @pytest.mark.asyncio
    async def test_failure_becomes_fallback(self):
        generator = MagicMock()
        generator.generate = AsyncMock(side_effect=ReportError("API Key not found"))
        service = ReportService(generator=generator)
        assert await service.generate(AGENTS) == REPORT_FALLBACK_TEXT
        assert service.generating is False

    @pytest.mark.asyncio
    async def test_generating_flag_while_in_flight(self):
        service = ReportService(generator=MagicMock())
        seen = []

        async def observe(agents):
            seen.append(service.generating)
            return "ok"

        service._generator.generate = AsyncMock(side_effect=observe)
        await service.generate(AGENTS)
        assert seen == [True]

    def test_clear(self):
        service = ReportService(generator=MagicMock())
        service.report = "old"
        service.clear()
        assert service.report is None
