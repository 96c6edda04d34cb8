# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
FastAPI dependency injection - wire repositories and services.
"""

from roster_panel.core.database import engine
from roster_panel.repositories.config_repository import ConfigRepository
from roster_panel.repositories.mock_agent_repository import MockAgentRepository
from roster_panel.services.report_generator import GeminiReportGenerator, ReportService
from roster_panel.services.roster_state import RosterStateController
from roster_panel.services.store_adapter import StoreAdapter

# ── Session-scoped instances ──
_mock_repo = MockAgentRepository()
_config_repo = ConfigRepository(engine)
_store_adapter = StoreAdapter(mock_repo=_mock_repo)
_roster_controller = RosterStateController(adapter=_store_adapter)
_report_service = ReportService(generator=GeminiReportGenerator())


# ── FastAPI dependency functions ──
def get_roster_controller() -> RosterStateController:
    return _roster_controller


def get_store_adapter() -> StoreAdapter:
    return _store_adapter


def get_config_repo() -> ConfigRepository:
    return _config_repo


def get_mock_repo() -> MockAgentRepository:
    return _mock_repo


def get_report_service() -> ReportService:
    return _report_service
