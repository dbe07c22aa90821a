"""Logging helpers for render, diagnostic and error events."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict

import streamlit as st

from boxplot.settings.config import DEBUG_LOGGING, LOG_DIR

RENDER_LOG_PATH = LOG_DIR / "render.log"
ERROR_LOG_PATH = LOG_DIR / "error.log"


def _ensure_log_dir() -> None:
    """Ensure the log directory exists."""
    LOG_DIR.mkdir(parents=True, exist_ok=True)


def _format_fields(fields: Dict[str, Any]) -> str:
    """Format extra fields into a space-separated key=value string."""
    parts = []
    for key, value in fields.items():
        if value is None:
            continue
        parts.append(f"{key}={value}")
    return " ".join(parts)


def _configure_logger(name: str, path: Path, level: int) -> logging.Logger:
    """
    Configure and return a logger with a rotating file handler.

    When the log directory cannot be written the logger writes to stderr,
    so logging never fails a render.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(level)
    logger.propagate = False

    handler: logging.Handler
    try:
        _ensure_log_dir()
        handler = RotatingFileHandler(
            path,
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
    except OSError:
        handler = logging.StreamHandler()

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    handler.setLevel(level)
    logger.addHandler(handler)

    return logger


def get_render_logger() -> logging.Logger:
    """Return the render/diagnostic logger instance."""
    level = logging.DEBUG if DEBUG_LOGGING else logging.INFO
    return _configure_logger("boxplot.render", RENDER_LOG_PATH, level)


def get_error_logger() -> logging.Logger:
    """Return the error logger instance."""
    return _configure_logger("boxplot.error", ERROR_LOG_PATH, logging.ERROR)


def log_access(
    page: str,
    details: Dict[str, Any] | None = None,
    dedupe: bool = True,
) -> None:
    """Write a page access entry, optionally deduped per session."""
    if not page:
        return

    if dedupe:
        key = f"access_logged::{page}"
        if st.session_state.get(key):
            return
        st.session_state[key] = True

    fields = {"page": page}
    if details:
        fields.update(details)

    message = "access " + _format_fields(fields)
    get_render_logger().info(message)


def log_event(action: str, details: Dict[str, Any] | None = None) -> None:
    """Write a generic render event entry."""
    fields: Dict[str, Any] = {"action": action}
    if details:
        fields.update(details)
    message = "event " + _format_fields(fields)
    get_render_logger().info(message)


def log_debug(message: str, details: Dict[str, Any] | None = None) -> None:
    """Write a debug entry; dropped unless debug logging is enabled."""
    suffix = _format_fields(dict(details or {}))
    get_render_logger().debug(f"{message} {suffix}".strip())


def log_warning(message: str, details: Dict[str, Any] | None = None) -> None:
    """Write a recoverable diagnostic (fallbacks, degenerate input)."""
    suffix = _format_fields(dict(details or {}))
    get_render_logger().warning(f"{message} {suffix}".strip())


def log_error(message: str, details: Dict[str, Any] | None = None) -> None:
    """Write an error message without an exception stack."""
    fields = dict(details or {})
    suffix = _format_fields(fields)
    text = f"{message} {suffix}".strip()
    get_error_logger().error(text)


def log_exception(message: str, details: Dict[str, Any] | None = None) -> None:
    """Write an error message with the current exception stack."""
    fields = dict(details or {})
    suffix = _format_fields(fields)
    text = f"{message} {suffix}".strip()
    get_error_logger().exception(text)
