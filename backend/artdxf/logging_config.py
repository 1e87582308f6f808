"""Logging bootstrap for scripts and services embedding artdxf."""

from __future__ import annotations

import logging

from dotenv import load_dotenv

from artdxf.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def configure_logging(settings: Settings | None = None) -> None:
    """Load ``.env`` and configure the root logger from settings."""
    load_dotenv()
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.artdxf_log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
