"""Console script entry point wired to the production services."""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run ``datenorm`` with production adapters and return the exit code."""
    return cli_main(services_factory=build_production)


__all__ = ["main"]
