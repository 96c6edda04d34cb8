# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Test environment - must run before roster_panel settings are imported."""
import os

os.environ["CONFIG_DATABASE_URL"] = "sqlite://"
os.environ["MOCK_LATENCY_SCALE"] = "0"
os.environ["STORE_URL"] = ""
os.environ["STORE_KEY"] = ""
os.environ["GEMINI_API_KEY"] = ""
os.environ["LOG_LEVEL"] = "WARNING"
