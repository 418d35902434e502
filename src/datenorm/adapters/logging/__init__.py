"""Logging adapter (lib_log_rich)."""

from __future__ import annotations

from .setup import init_logging

__all__ = ["init_logging"]
