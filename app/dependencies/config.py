"""
FastAPI dependency returning the settings loaded at startup.
"""

from app.core.config import AppSettings, get_settings


def get_app_settings() -> AppSettings:
    """Settings are cached by ``get_settings``; overridable in tests."""
    return get_settings()


__all__ = ["get_app_settings"]
