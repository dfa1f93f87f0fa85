# core/logging_config.py
from __future__ import annotations

import logging

from core.settings import Settings


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings.yaml; later calls are no-ops."""
    level = getattr(logging, str(settings.logging.level).upper(), logging.INFO)
    logging.basicConfig(level=level, format=settings.logging.format)
    logging.getLogger(__name__).debug(
        "Logging configured for %s (%s)", settings.app.name, settings.app.environment
    )
