"""Texas Hold'em round simulator."""

__version__ = "0.1.0"
