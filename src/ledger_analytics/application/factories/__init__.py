"""Application factories."""

from ledger_analytics.application.factories.read_port_factory import ReadPortFactory

__all__ = ["ReadPortFactory"]
