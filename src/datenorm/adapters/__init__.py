"""Adapters layer: CLI, configuration, logging and in-memory test doubles."""

from __future__ import annotations

__all__: list[str] = []
