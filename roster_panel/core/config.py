# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Core configuration - all env-driven, zero hardcode.
Single source of truth for every tunable parameter.
"""

import os


class Settings:
    """Application settings loaded from environment variables."""

    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "roster-panel")
    SERVICE_VERSION: str = os.getenv("SERVICE_VERSION", "1.0.0")
    SERVICE_PORT: int = int(os.getenv("SERVICE_PORT", "8010"))

    # Remote table store (Supabase / PostgREST). Empty -> demo mode.
    STORE_URL: str = os.getenv("STORE_URL", "")
    STORE_KEY: str = os.getenv("STORE_KEY", "")
    STORE_TABLE: str = os.getenv("STORE_TABLE", "atendimento")
    STORE_TIMEOUT: float = float(os.getenv("STORE_TIMEOUT", "10.0"))

    CONFIG_DATABASE_URL: str = os.getenv(
        "CONFIG_DATABASE_URL", "sqlite:///./roster_panel.db"
    )

    REFRESH_INTERVAL_SECONDS: float = float(
        os.getenv("REFRESH_INTERVAL_SECONDS", "60")
    )
    MOCK_LATENCY_SCALE: float = float(os.getenv("MOCK_LATENCY_SCALE", "1.0"))

    GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", os.getenv("API_KEY", ""))
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
    GEMINI_API_URL: str = os.getenv(
        "GEMINI_API_URL", "https://generativelanguage.googleapis.com/v1beta"
    )
    GEMINI_TIMEOUT: float = float(os.getenv("GEMINI_TIMEOUT", "30.0"))

    WHATSAPP_URL_PREFIX: str = os.getenv("WHATSAPP_URL_PREFIX", "https://wa.me/")

    CORS_ORIGINS: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
