# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Persisted panel settings (key-value).
Keeps the store credentials across restarts.
"""

from typing import Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine

from roster_panel.core.logging import get_logger
from roster_panel.exceptions import ValidationError
from roster_panel.models.domain import StoreConfig

logger = get_logger(__name__)

STORE_URL_KEY = "sb_url"
STORE_KEY_KEY = "sb_key"


class ConfigRepository:
    """Key-value settings table backed by SQLAlchemy."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def ensure_schema(self) -> None:
        with self._engine.begin() as conn:
            conn.execute(
                text("""
                    CREATE TABLE IF NOT EXISTS panel_settings (
                        key VARCHAR(64) PRIMARY KEY,
                        value TEXT NOT NULL
                    )
                """)
            )

    # ── Read ──

    def get(self, key: str) -> Optional[str]:
        with self._engine.connect() as conn:
            row = conn.execute(
                text("SELECT value FROM panel_settings WHERE key = :key"),
                {"key": key},
            ).fetchone()
        return row[0] if row else None

    def load_store_config(self) -> Optional[StoreConfig]:
        """Return the saved credentials, or None unless both are present."""
        endpoint = self.get(STORE_URL_KEY)
        key = self.get(STORE_KEY_KEY)
        if not endpoint or not key:
            return None
        return StoreConfig(endpoint=endpoint, key=key)

    # ── Write ──

    def set(self, key: str, value: str) -> None:
        with self._engine.begin() as conn:
            conn.execute(
                text("DELETE FROM panel_settings WHERE key = :key"), {"key": key}
            )
            conn.execute(
                text("INSERT INTO panel_settings (key, value) VALUES (:key, :value)"),
                {"key": key, "value": value},
            )

    def delete(self, key: str) -> None:
        with self._engine.begin() as conn:
            conn.execute(
                text("DELETE FROM panel_settings WHERE key = :key"), {"key": key}
            )

    def save_store_config(self, config: StoreConfig) -> None:
        """Raises ValidationError unless both endpoint and key are set."""
        if not config.is_complete:
            raise ValidationError("Both endpoint and key are required")
        self.set(STORE_URL_KEY, config.endpoint)
        self.set(STORE_KEY_KEY, config.key)
        logger.info("Store configuration saved: endpoint=%s", config.endpoint)

    def clear_store_config(self) -> None:
        self.delete(STORE_URL_KEY)
        self.delete(STORE_KEY_KEY)
        logger.info("Store configuration cleared")
