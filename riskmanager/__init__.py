"""Trade Risk Manager - position sizing for discretionary FX trading."""

__version__ = "0.1.0"
