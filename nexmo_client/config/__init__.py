"""Configuration for the client: settings and logging."""

from nexmo_client.config.settings import Settings, settings
from nexmo_client.config.logging import LoggingService, setup_logging

__all__ = [
    "Settings",
    "settings",
    "LoggingService",
    "setup_logging",
]
