# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Staffing report - asks the Gemini text endpoint for a short
executive summary of the current roster.
"""

from typing import Any, Optional

import httpx

from roster_panel.core.config import settings
from roster_panel.core.logging import get_logger
from roster_panel.exceptions import ReportError
from roster_panel.metrics.prometheus import REPORTS_GENERATED
from roster_panel.models.domain import Agent

logger = get_logger(__name__)

EMPTY_REPORT_TEXT = "Could not generate report."
REPORT_FALLBACK_TEXT = (
    "Unable to generate AI report. Please check your API configuration."
)


def build_team_prompt(agents: list[Agent]) -> str:
    """Pure function, no I/O."""
    active = [a.name for a in agents if a.available]
    inactive = [a.name for a in agents if not a.available]
    total = len(agents)
    return (
        "Analyze the following support team status data:\n"
        f"Total Agents: {total}\n"
        f"Active Agents ({len(active)}): {', '.join(active) or 'None'}\n"
        f"Inactive Agents ({total - len(active)}): {', '.join(inactive) or 'None'}\n"
        "\n"
        "Please provide a concise, professional executive summary (max 3 sentences) "
        "of the current team availability.\n"
        "Highlight if the staffing level is critical (below 50%) or healthy.\n"
        "Use a helpful and professional tone."
    )


def extract_text(payload: dict[str, Any]) -> str:
    """Concatenate the text parts of the first candidate."""
    candidates = payload.get("candidates") or []
    if not candidates:
        return ""
    parts = (candidates[0].get("content") or {}).get("parts") or []
    return "".join(p.get("text", "") for p in parts if isinstance(p, dict)).strip()


class GeminiReportGenerator:
    """Calls models/{model}:generateContent and returns the summary text."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self._api_key = settings.GEMINI_API_KEY if api_key is None else api_key
        self._model = model or settings.GEMINI_MODEL
        self._base_url = (base_url or settings.GEMINI_API_URL).rstrip("/")
        self._timeout = settings.GEMINI_TIMEOUT if timeout is None else timeout

    async def generate(self, agents: list[Agent]) -> str:
        if not self._api_key:
            raise ReportError("API Key not found")

        body = {"contents": [{"parts": [{"text": build_team_prompt(agents)}]}]}
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                resp = await client.post(
                    f"{self._base_url}/models/{self._model}:generateContent",
                    json=body,
                    headers={"x-goog-api-key": self._api_key},
                )
                resp.raise_for_status()
                payload = resp.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Gemini API error: %s", exc)
            raise ReportError("Failed to generate AI report.") from exc

        return extract_text(payload) or EMPTY_REPORT_TEXT


class ReportService:
    """Tracks the in-flight flag and the last summary shown to the user."""

    def __init__(self, generator: GeminiReportGenerator) -> None:
        self._generator = generator
        self.generating = False
        self.report: Optional[str] = None

    async def generate(self, agents: list[Agent]) -> str:
        """Never raises: failures become the fixed fallback text."""
        self.generating = True
        self.report = None
        try:
            self.report = await self._generator.generate(agents)
            REPORTS_GENERATED.labels(outcome="success").inc()
        except Exception as exc:
            logger.warning("Report generation failed: %s", exc)
            REPORTS_GENERATED.labels(outcome="failure").inc()
            self.report = REPORT_FALLBACK_TEXT
        finally:
            self.generating = False
        return self.report

    def clear(self) -> None:
        self.generating = False
        self.report = None
