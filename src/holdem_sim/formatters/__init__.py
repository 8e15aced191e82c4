"""Output formatting for terminal and tables."""

from holdem_sim.formatters.text import TextFormatter
from holdem_sim.formatters.table import TableFormatter

__all__ = ["TextFormatter", "TableFormatter"]
