"""Logging setup for the simulator."""

from holdem_sim.observability.logger import setup_logging

__all__ = ["setup_logging"]
