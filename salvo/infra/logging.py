"""App-level logging policy over the arena logging API."""

from __future__ import annotations

import logging
import os
from datetime import UTC, datetime

from arena.api.logging import ArenaLoggingConfig, JsonFormatter, configure_logging
from salvo.infra.app_data import ensure_app_data_dirs

__all__ = ["JsonFormatter", "build_logging_config", "setup_logging"]


def build_logging_config() -> ArenaLoggingConfig:
    """Resolve logging configuration from environment."""
    level_name = os.getenv("SALVO_LOG_LEVEL", os.getenv("LOG_LEVEL", "INFO")).upper()
    console_format = os.getenv("LOG_FORMAT", "text").lower()
    return ArenaLoggingConfig(
        level_name=level_name,
        console_format=console_format,
        file_path=_resolve_run_log_file_path(),
        file_format="json",
    )


def setup_logging() -> None:
    """Configure application logging via the arena logging API."""
    config = build_logging_config()
    configure_logging(config)
    logging.getLogger(__name__).info("logging_file=%s", config.file_path)


def _resolve_run_log_file_path() -> str:
    base_dir = ensure_app_data_dirs()["logs"]
    stamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%S")
    return str(base_dir / f"salvo_run_{stamp}.jsonl")
