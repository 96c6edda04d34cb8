# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false

"""
Tests for persisted store credentials.
"""

import pytest

from roster_panel.core.database import build_engine
from roster_panel.exceptions import ValidationError
from roster_panel.models.domain import StoreConfig
from roster_panel.repositories.config_repository import STORE_URL_KEY, ConfigRepository


@pytest.fixture
def repo():
    engine = build_engine("sqlite://")
    repository = ConfigRepository(engine)
    repository.ensure_schema()
    yield repository
    engine.dispose()


class TestConfigRepository:
    def test_empty_store(self, repo):
        assert repo.get(STORE_URL_KEY) is None
        assert repo.load_store_config() is None

    def test_set_overwrites(self, repo):
        repo.set("k", "one")
        repo.set("k", "two")
        assert repo.get("k") == "two"

    def test_save_and_load(self, repo):
        repo.save_store_config(StoreConfig(endpoint="proj.supabase.co/", key=" secret "))
        loaded = repo.load_store_config()
        assert loaded.endpoint == "https://proj.supabase.co"
        assert loaded.key == "secret"

    @pytest.mark.parametrize("endpoint,key", [("", "k"), ("https://x.test", ""), ("  ", "  ")])
    def test_save_requires_both_fields(self, repo, endpoint, key):
        with pytest.raises(ValidationError):
            repo.save_store_config(StoreConfig(endpoint=endpoint, key=key))
        assert repo.load_store_config() is None

    def test_partial_config_is_ignored(self, repo):
        repo.set(STORE_URL_KEY, "https://x.test")
        assert repo.load_store_config() is None

    def test_clear(self, repo):
        repo.save_store_config(StoreConfig(endpoint="https://x.test", key="k"))
        repo.clear_store_config()
        assert repo.load_store_config() is None

    def test_ensure_schema_is_idempotent(self, repo):
        repo.ensure_schema()
        repo.set("k", "v")
        assert repo.get("k") == "v"
